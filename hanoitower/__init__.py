"""Tower of Hanoi puzzle for the terminal, with a saved game history."""

__version__ = "1.0.0"
__all__ = ["game", "history", "towers"]