"""Interactive menu and game loop for the Tower of Hanoi puzzle."""

from __future__ import annotations

import argparse
import subprocess
import sys
from typing import Callable, TextIO

from .history import DEFAULT_PATH, History, Record
from .towers import InvalidMove, Towers, minimum_moves

_LINE = "============================="
_STARS = "*********************************************"
_NAME_LIMIT = 99
_DATE_LIMIT = 10
_MIN_DISKS = 1
_MAX_DISKS = 8
_DEFAULT_DISKS = 3


def menu_text() -> str:
    """The main menu."""
    return (
        f"{_LINE}\n"
        "      TORRE DE HANOI\n"
        f"{_LINE}\n"
        "1. Iniciar Jogo\n"
        "2. Estatisticas (Historico)\n"
        "3. Regras do Jogo\n"
        "4. Sair\n"
        f"{_LINE}\n"
    )


def rules_text() -> str:
    """The rules of the puzzle."""
    return (
        f"{_LINE}\n"
        "       REGRAS DO JOGO\n"
        f"{_LINE}\n"
        "O objetivo e mover todos os discos da torre A para a torre C.\n\n"
        "Siga estas regras:\n"
        "1. Mova apenas um disco por vez.\n"
        "2. Um disco maior nunca pode ser colocado sobre um disco menor.\n"
        "3. Voce pode usar a torre B como auxiliar para os movimentos.\n"
        f"{_LINE}\n"
    )


def parse_move(line: str) -> tuple[str, str]:
    """Return the first two non-blank characters of a line, upper-cased."""
    chars = "".join(line.split())
    if len(chars) < 2:
        raise ValueError("Entrada invalida! Use o formato 'Letra Letra'.")
    return chars[0].upper(), chars[1].upper()


def _first_line(text: str) -> str:
    return text.split("\n", 1)[0]


def _parse_int(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


def _default_input() -> str:
    return input()


class Game:
    """The menu-driven game, reading lines from input_func and writing to out."""

    def __init__(
        self,
        history: History | None = None,
        input_func: Callable[[], str] | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.history = history if history is not None else History()
        self._input = input_func if input_func is not None else _default_input
        self.out = out if out is not None else sys.stdout

    def _write(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self.out)

    def _ask(self, prompt: str) -> str:
        self._write(prompt, end="")
        self.out.flush()
        return self._input()

    def _clear(self) -> None:
        if self.out is sys.stdout and sys.stdout.isatty():
            subprocess.run("cls || clear", shell=True, check=False)

    def play(self, player: str, date: str, disks: int) -> int:
        """Run one game until solved; record it and return the move count."""
        towers = Towers(disks)
        moves = 0
        while not towers.solved():
            self._clear()
            self._write(towers.render(), end="")
            line = self._ask("Mover de qual torre para qual torre? (ex: A C): ")
            try:
                source, target = parse_move(line)
            except ValueError:
                self._write("\n>> Entrada invalida! Use o formato 'Letra Letra'. <<")
                continue
            try:
                towers.move(source, target)
            except InvalidMove as error:
                self._write(f"\n>> {error}", end="")
                self._write("\n>> Tente novamente! <<")
                self._ask("Pressione Enter para continuar...")
                continue
            moves += 1

        player = _first_line(player)
        self._clear()
        self._write(f"\n{_STARS}")
        self._write(towers.render(), end="")
        self._write(f"PARABENS, {player}Voce resolveu a Torre de Hanoi! ")
        self._write(f"Voce completou em {moves} movimentos.")
        self._write(f"O numero minimo de movimentos possivel era {minimum_moves(disks)}.")
        self._write(_STARS)

        record = Record(player, moves, disks, date)
        self.history.save(record)
        self.history.add(record)
        return moves

    def statistics(self) -> None:
        """Show the history and offer a search by player or by date."""
        self._clear()
        self._write("== ESTATISTICAS E HISTORICO ==")
        self.history.show(self.out)
        self._write("\nDeseja buscar um historico especifico?")
        self._write(" (U) por Usuario")
        self._write(" (D) por Data")
        self._write(" (Qualquer outra tecla para voltar)")
        choice = self._ask("Sua escolha: ").strip()[:1].upper()
        if choice == "U":
            name = self._ask("Digite o nome do jogador para buscar: ")
            self.history.show_player(_first_line(name)[:_NAME_LIMIT], self.out)
        elif choice == "D":
            date = self._ask("Digite a data para buscar (dd/mm/aaaa): ")
            self.history.show_date(_first_line(date)[:_DATE_LIMIT], self.out)

    def new_game(self) -> None:
        """Ask for player, date and disk count, play, and offer a rematch."""
        while True:
            self._clear()
            self._write("== INICIAR NOVO JOGO ==")
            player = _first_line(self._ask("Digite seu nome: "))[:_NAME_LIMIT]
            date = _first_line(self._ask("Digite a data (dd/mm/aaaa): "))[:_DATE_LIMIT]
            disks = _parse_int(self._ask("Escolha a quantidade de discos (1 a 8): "))
            if disks is None or not _MIN_DISKS <= disks <= _MAX_DISKS:
                self._write("Numero de discos invalido. O jogo comecara com 3 discos.")
                disks = _DEFAULT_DISKS
            self.play(player, date, disks)
            again = self._ask("\n\nDeseja jogar outra partida? (S/N): ").strip()[:1]
            if again.upper() != "S":
                return

    def run(self) -> None:
        """Load the history and run the main menu until the player quits."""
        self.history.load()
        try:
            while True:
                self._clear()
                self._write(menu_text(), end="")
                option = _parse_int(self._ask("Escolha uma opcao: ")) or 0
                if option == 1:
                    self.new_game()
                elif option == 2:
                    self.statistics()
                elif option == 3:
                    self._clear()
                    self._write(rules_text(), end="")
                elif option == 4:
                    self._write("\nObrigado por jogar! Ate a proxima!")
                    return
                else:
                    self._write("\nOpcao invalida! Por favor, tente novamente.")
                self._ask("\nPressione Enter para voltar ao menu...")
        except EOFError:
            return


def main(argv: list[str] | None = None) -> int:
    """Start the interactive game."""
    parser = argparse.ArgumentParser(prog="hanoitower", description="Torre de Hanoi")
    parser.add_argument("--history", default=DEFAULT_PATH, help="history file")
    args = parser.parse_args(argv)
    Game(History(args.history)).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())