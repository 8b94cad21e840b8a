"""Tic-tac-toe board, rules and a line-driven two-player game loop."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable
from enum import IntEnum
from typing import TextIO


class Cell(IntEnum):
    """Contents of a board cell; TIE marks a full board with no winner."""

    EMPTY = 0
    PLAYER_1 = 1
    PLAYER_2 = 2
    TIE = 3


_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def cell_char(player: int) -> str:
    """Return the character drawn for a cell value."""
    if player == Cell.EMPTY:
        return " "
    if player == Cell.PLAYER_1:
        return "X"
    if player == Cell.PLAYER_2:
        return "O"
    return "E"


class Board:
    """A 3x3 board with cells indexed 0..8, row by row."""

    SIZE = 9

    def __init__(self) -> None:
        self.cells: list[Cell] = [Cell.EMPTY] * self.SIZE

    def clear(self) -> None:
        """Empty every cell."""
        self.cells = [Cell.EMPTY] * self.SIZE

    def render(self) -> str:
        """Return the board as three ``a|b|c`` lines."""
        chars = [cell_char(c) for c in self.cells]
        return "".join("|".join(chars[row:row + 3]) + "\n" for row in range(0, 9, 3))

    def place(self, index: int, player: Cell) -> None:
        """Put ``player`` on an empty cell; raise ValueError otherwise."""
        if not 0 <= index < self.SIZE:
            raise ValueError(f"cell {index} is off the board")
        if self.cells[index] != Cell.EMPTY:
            raise ValueError(f"cell {index} is already taken")
        if player not in (Cell.PLAYER_1, Cell.PLAYER_2):
            raise ValueError(f"{player!r} is not a player")
        self.cells[index] = Cell(player)

    def winner(self) -> Cell:
        """Return the winning player, TIE for a full board, or EMPTY while undecided."""
        for a, b, c in _LINES:
            first = self.cells[a]
            if first != Cell.EMPTY and first == self.cells[b] == self.cells[c]:
                return first
        if all(cell != Cell.EMPTY for cell in self.cells):
            return Cell.TIE
        return Cell.EMPTY


def parse_move(text: str) -> int | None:
    """Read a leading integer from a line of input, or None if there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else None


def _read_number(lines, out: TextIO) -> int:
    for line in lines:
        number = parse_move(line)
        if number is not None:
            return number
        out.write("invalid response")
    raise EOFError("input ended before a move was given")


def get_player_move(board: Board, player: Cell, lines: Iterable[str], out: TextIO) -> int:
    """Prompt until ``player`` names a free cell (1-9), place it and return its index."""
    lines = iter(lines)
    while True:
        out.write(f"player {int(player)} make a move:")
        move = _read_number(lines, out) - 1
        if 0 <= move < Board.SIZE and board.cells[move] == Cell.EMPTY:
            board.place(move, player)
            return move
        out.write("invalid move\n")


def play_game(
    board: Board,
    lines: Iterable[str] | None = None,
    out: TextIO | None = None,
) -> Cell:
    """Alternate turns until someone wins or the board fills; return the outcome."""
    lines = iter(sys.stdin if lines is None else lines)
    out = sys.stdout if out is None else out
    turn = 0
    winner = Cell.EMPTY
    while winner == Cell.EMPTY:
        turn += 1
        player = Cell.PLAYER_1 if turn % 2 == 1 else Cell.PLAYER_2
        get_player_move(board, player, lines, out)
        winner = board.winner()
        out.write(board.render())
    if winner == Cell.TIE:
        out.write("It is a tie\n")
    else:
        out.write(f"player {int(winner)} wins\n")
    return winner