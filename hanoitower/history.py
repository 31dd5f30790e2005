"""Persistent record of finished games."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, TextIO

DEFAULT_PATH = "historico_hanoi.txt"
_SEPARATOR = "============================="
_NAME_LIMIT = 99
_DATE_LIMIT = 10


@dataclass(frozen=True)
class Record:
    """One finished game."""

    player: str
    moves: int
    disks: int
    date: str


def format_record(record: Record) -> str:
    """Return the one-line description of a record."""
    return (
        f"Jogador: {record.player} | Movimentos: {record.moves} | "
        f"Discos: {record.disks} | Data: {record.date}"
    )


def _first_line(text: str) -> str:
    return text.split("\n", 1)[0]


class History:
    """Game records kept in memory, newest first, and appended to a file."""

    def __init__(self, path: str | Path = DEFAULT_PATH) -> None:
        self.path = Path(path)
        self._records: list[Record] = []

    def _parse(self, lines: Iterator[str]) -> Iterator[Record]:
        while True:
            try:
                name = next(lines).lstrip()[:_NAME_LIMIT]
                moves = int(next(lines).strip())
                disks = int(next(lines).strip())
                date = next(lines).lstrip()[:_DATE_LIMIT]
            except (StopIteration, ValueError):
                return
            yield Record(name, moves, disks, date)

    def load(self) -> None:
        """Add every record stored in the file; a missing file is ignored."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return
        lines = (line for line in text.splitlines() if line.strip())
        for record in self._parse(lines):
            self.add(record)

    def add(self, record: Record) -> None:
        """Put a record in front of the others."""
        self._records.insert(0, record)

    def save(self, record: Record) -> None:
        """Append a record to the file."""
        with self.path.open("a", encoding="utf-8") as handle:
            handle.write(f"{record.player}\n{record.moves}\n{record.disks}\n{record.date}\n")

    def records(self) -> list[Record]:
        """All records, newest first."""
        return list(self._records)

    def by_player(self, name: str) -> list[Record]:
        """Records whose player matches the name, ignoring case."""
        wanted = _first_line(name).lower()
        return [r for r in self._records if r.player.lower() == wanted]

    def by_date(self, date: str) -> list[Record]:
        """Records with exactly this date."""
        return [r for r in self._records if r.date == date]

    def show(self, out: TextIO | None = None) -> None:
        """Write every record to a stream."""
        out = out if out is not None else sys.stdout
        if not self._records:
            print("Nenhum historico para mostrar.", file=out)
            return
        print("\nHistorico de partidas", file=out)
        for record in self._records:
            print(format_record(record), file=out)
        print(_SEPARATOR, file=out)

    def show_player(self, name: str, out: TextIO | None = None) -> None:
        """Write the records of one player to a stream."""
        out = out if out is not None else sys.stdout
        wanted = _first_line(name)
        print(f"\nHistorico para o jogador '{wanted}'", file=out)
        found = self.by_player(wanted)
        for record in found:
            print(format_record(record), file=out)
        if not found:
            print(f"Nenhum registro encontrado para o jogador '{wanted}'.", file=out)

    def show_date(self, date: str, out: TextIO | None = None) -> None:
        """Write the records of one date to a stream."""
        out = out if out is not None else sys.stdout
        print(f"\nHistorico para a data '{date}'", file=out)
        found = self.by_date(date)
        for record in found:
            print(format_record(record), file=out)
        if not found:
            print(f"Nenhum registro encontrado para a data '{date}'.", file=out)