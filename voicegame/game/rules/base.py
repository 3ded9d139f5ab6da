"""Sides, outcomes and board constants shared by the rules and the search."""

from __future__ import annotations

from enum import Enum

EMPTY = " "
BOARD_CELLS = 9


class Side(str, Enum):
    """A player token. The human plays X, the engine plays O."""

    X = "X"
    O = "O"

    def opponent(self) -> Side:
        """Get the other side."""
        return Side.O if self is Side.X else Side.X


class Outcome(str, Enum):
    """
    Terminal result of a board.

    Values double as the result tags sent back to the dialogue agent.
    A board still in progress has no Outcome (``None``).
    """

    X_WINS = "X"
    O_WINS = "O"
    DRAW = "Tie"

    @classmethod
    def win_for(cls, side: Side) -> Outcome:
        """Get the winning outcome for a side."""
        return cls.X_WINS if side is Side.X else cls.O_WINS

    @property
    def winner(self) -> Side | None:
        """The winning side, or None for a draw."""
        if self is Outcome.DRAW:
            return None
        return Side(self.value)


HUMAN_SIDE = Side.X
ENGINE_SIDE = Side.O
