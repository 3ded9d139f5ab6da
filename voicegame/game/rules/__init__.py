"""TicTacToe rules: board, sides and outcomes."""

from voicegame.game.rules.base import (
    BOARD_CELLS,
    EMPTY,
    ENGINE_SIDE,
    HUMAN_SIDE,
    Outcome,
    Side,
)
from voicegame.game.rules.tictactoe import WINNING_LINES, Board

__all__ = [
    "BOARD_CELLS",
    "EMPTY",
    "ENGINE_SIDE",
    "HUMAN_SIDE",
    "WINNING_LINES",
    "Board",
    "Outcome",
    "Side",
]
