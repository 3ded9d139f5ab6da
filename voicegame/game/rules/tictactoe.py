"""TicTacToe board and rules."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from loguru import logger

from voicegame.game.rules.base import BOARD_CELLS, EMPTY, Outcome, Side

# Checked in this order; the first matching line decides the winner.
WINNING_LINES: tuple[tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)

_EMPTY_ALIASES = frozenset({EMPTY, ".", "-", "_"})
_TOKENS = frozenset({EMPTY, Side.X.value, Side.O.value})


class Board:
    """
    A 3x3 TicTacToe board.

    The board is represented as a list of 9 cells (0-8):
    0 | 1 | 2
    ---------
    3 | 4 | 5
    ---------
    6 | 7 | 8

    Cell values:
    - " " = empty
    - "X" = the human
    - "O" = the engine

    ``apply_move`` is the only way to place a token. ``speculate`` places a
    token for the duration of a ``with`` block and always clears it again.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Iterable[str] | None = None) -> None:
        if cells is None:
            self._cells = [EMPTY] * BOARD_CELLS
            return

        values = [cell.value if isinstance(cell, Side) else cell for cell in cells]
        if len(values) != BOARD_CELLS:
            raise ValueError(f"Board needs {BOARD_CELLS} cells, got {len(values)}")
        unknown = [cell for cell in values if cell not in _TOKENS]
        if unknown:
            raise ValueError(f"Unknown cell values: {unknown}")
        self._cells = values

    @classmethod
    def from_string(cls, text: str) -> Board:
        """
        Parse a 9-character board string (e.g. ``"X.O.X...."``).

        ``.``, ``-`` and ``_`` are read as empty cells; letters are
        case-insensitive.
        """
        if len(text) != BOARD_CELLS:
            raise ValueError(f"Board string must be {BOARD_CELLS} characters: {text!r}")
        return cls(EMPTY if ch in _EMPTY_ALIASES else ch.upper() for ch in text)

    def __getitem__(self, index: int) -> str:
        return self._cells[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Board({self.to_string()!r})"

    def __str__(self) -> str:
        lines = []
        for row in range(3):
            lines.append(" | ".join(self._cells[row * 3 : row * 3 + 3]))
            if row < 2:
                lines.append("-" * 9)
        return "\n".join(lines)

    def snapshot(self) -> list[str]:
        """Get a copy of the 9 cells."""
        return list(self._cells)

    def to_string(self) -> str:
        """Join the cells into a 9-character string."""
        return "".join(self._cells)

    def copy(self) -> Board:
        """Create an independent copy of the board."""
        return Board(self._cells)

    def is_full(self) -> bool:
        """Check if no empty cell remains."""
        return EMPTY not in self._cells

    def legal_moves(self) -> list[int]:
        """
        Get all empty cell indices in ascending order.

        Returns:
            A new list on every call; empty when the board is full
        """
        return [i for i, cell in enumerate(self._cells) if cell == EMPTY]

    def is_legal(self, index: object) -> bool:
        """Check if a token may be placed at ``index``."""
        if not isinstance(index, int) or isinstance(index, bool):
            return False
        return 0 <= index < BOARD_CELLS and self._cells[index] == EMPTY

    def apply_move(self, index: int, side: Side) -> bool:
        """
        Place ``side`` at ``index`` if the cell is empty.

        Args:
            index: Cell index (0-8)
            side: Side making the move

        Returns:
            True if the token was placed, False (board untouched) otherwise
        """
        if not self.is_legal(index):
            logger.debug(f"game.rules.tictactoe.apply_move rejected index={index} side={side.value}")
            return False
        self._cells[index] = side.value
        return True

    @contextmanager
    def speculate(self, index: int, side: Side) -> Iterator[Board]:
        """
        Place a token for the duration of a ``with`` block.

        The cell is reset to empty on every exit path.

        Raises:
            ValueError: If the move is not legal
        """
        if not self.is_legal(index):
            raise ValueError(f"Cannot speculate on occupied or invalid cell: {index}")
        self._cells[index] = side.value
        try:
            yield self
        finally:
            self._cells[index] = EMPTY

    def winning_line(self) -> tuple[int, int, int] | None:
        """Get the first completed line, or None."""
        cells = self._cells
        for line in WINNING_LINES:
            a, b, c = line
            if cells[a] != EMPTY and cells[a] == cells[b] == cells[c]:
                return line
        return None

    def evaluate(self) -> Outcome | None:
        """
        Classify the board.

        Returns:
            The winner's Outcome, DRAW when the board is full without a
            winner, or None while the game is still in progress
        """
        line = self.winning_line()
        if line is not None:
            return Outcome.win_for(Side(self._cells[line[0]]))
        if self.is_full():
            return Outcome.DRAW
        return None
