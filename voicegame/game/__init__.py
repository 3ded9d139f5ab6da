"""TicTacToe engine played through the voice agent's tool calls."""

from voicegame.game.rules import (
    ENGINE_SIDE,
    HUMAN_SIDE,
    WINNING_LINES,
    Board,
    Outcome,
    Side,
)
from voicegame.game.search import MinimaxSearch, SearchResult, best_move
from voicegame.game.sessions import GameSessions
from voicegame.game.turns import (
    InvalidPosition,
    TicTacToeGame,
    TurnOutcome,
    parse_position,
    status_message,
)

__all__ = [
    # Rules
    "Board",
    "Outcome",
    "Side",
    "HUMAN_SIDE",
    "ENGINE_SIDE",
    "WINNING_LINES",
    # Search
    "MinimaxSearch",
    "SearchResult",
    "best_move",
    # Turns
    "TicTacToeGame",
    "TurnOutcome",
    "InvalidPosition",
    "parse_position",
    "status_message",
    # Sessions
    "GameSessions",
]
