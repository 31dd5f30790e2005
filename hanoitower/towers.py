"""The three pegs of the puzzle and the rules for moving disks."""

from __future__ import annotations

NAMES = ("A", "B", "C")


class InvalidMove(ValueError):
    """A move that breaks the rules of the puzzle."""


def minimum_moves(disks: int) -> int:
    """Fewest moves that solve a puzzle with this many disks."""
    return 2**disks - 1


class Towers:
    """Three pegs; all disks start on A, largest at the bottom."""

    def __init__(self, disks: int) -> None:
        self.disks = disks
        self._pegs: dict[str, list[int]] = {name: [] for name in NAMES}
        self._pegs["A"].extend(range(disks, 0, -1))

    def _peg(self, name: str) -> list[int]:
        try:
            return self._pegs[name.upper()]
        except (KeyError, AttributeError):
            raise InvalidMove("MOVIMENTO INVALIDO: Torre nao existe. Use A, B ou C.") from None

    def height(self, name: str) -> int:
        """Number of disks on a peg."""
        return len(self._peg(name))

    def disk_at(self, name: str, level: int) -> int:
        """Size of the disk at a level counted from the bottom, 0 if none."""
        peg = self._peg(name)
        return peg[level] if 0 <= level < len(peg) else 0

    def validate(self, source: str, target: str) -> None:
        """Raise InvalidMove unless the top disk of source may go onto target."""
        origin = self._peg(source)
        destination = self._peg(target)
        if origin is destination:
            raise InvalidMove(
                "MOVIMENTO INVALIDO: As torres de origem e destino devem ser diferentes."
            )
        if not origin:
            raise InvalidMove(
                f"MOVIMENTO INVALIDO: A torre de origem '{source.upper()}' esta vazia."
            )
        if destination and origin[-1] > destination[-1]:
            raise InvalidMove(
                "MOVIMENTO INVALIDO: Nao e possivel colocar um disco maior sobre um menor."
            )

    def move(self, source: str, target: str) -> None:
        """Move the top disk of source onto target."""
        self.validate(source, target)
        self._peg(target).append(self._peg(source).pop())

    def solved(self) -> bool:
        """True once every disk is on C."""
        return self.height("C") >= self.disks

    def _cell(self, name: str, level: int) -> str:
        n = self.disks
        disk = self.disk_at(name, level)
        if disk > 0:
            width = 2 * disk - 1
            pad = " " * ((2 * n - 1 - width) // 2)
            return f"{pad}{'#' * width}{pad}"
        pad = " " * (n - 1)
        return f"{pad}|{pad}"

    def render(self) -> str:
        """Draw the pegs as text, with a base and the peg names."""
        n = self.disks
        gap = "   "
        rows = [gap.join(self._cell(name, level) for name in NAMES) for level in range(n - 1, -1, -1)]
        base = gap.join("=" * (2 * n - 1) for _ in NAMES)
        pad = " " * (n - 1)
        labels = gap.join(f"{pad}{name}{pad}" for name in NAMES)
        return "\n" + "".join(f"{row}\n" for row in rows) + f"{base}\n{labels}\n\n"