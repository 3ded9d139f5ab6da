"""
Minimax search for TicTacToe.

Exhaustive depth-first search over the whole remaining game tree. A 3x3
board has at most 9! leaf paths, so no pruning or depth limit is needed.
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from voicegame.game.rules import Board, Outcome, Side


@dataclass(frozen=True, slots=True)
class SearchResult:
    """
    Best move found by the search.

    Attributes:
        index: Cell index (0-8), or None when there is no move to make
        score: Value of the position for the maximizer (+1, 0 or -1)
    """

    index: int | None
    score: int

    @property
    def has_move(self) -> bool:
        return self.index is not None


class MinimaxSearch:
    """
    Plays TicTacToe perfectly using plain minimax.

    Scores are fixed per outcome from the maximizer's side: a maximizer
    win is +1, a loss is -1 and a draw is 0. There is no depth discount.
    Candidates are tried in ascending cell order and only a strictly
    better score replaces the current best, so ties resolve to the
    lowest index.
    """

    def __init__(self, maximizer: Side = Side.X):
        """
        Initialize the search.

        Args:
            maximizer: Side whose wins score +1 (default: X)
        """
        self.maximizer = maximizer

        # Positions visited by the last best_move call
        self.nodes_evaluated = 0

    def score(self, outcome: Outcome | None) -> int:
        """Score an outcome for the maximizer. In-progress boards score 0."""
        if outcome is None or outcome is Outcome.DRAW:
            return 0
        return 1 if outcome.winner is self.maximizer else -1

    def best_move(self, board: Board, side: Side) -> SearchResult:
        """
        Find the optimal move for ``side``.

        The board is borrowed: every speculative move is undone before
        this returns.

        Args:
            board: Position to search from
            side: Side to move

        Returns:
            SearchResult with the chosen index, or ``index=None`` when the
            board is already terminal or full
        """
        self.nodes_evaluated = 0

        if not board.legal_moves():
            result = SearchResult(index=None, score=self.score(board.evaluate()))
            logger.debug(
                f"game.search.best_move no_move board={board.to_string()!r} score={result.score}"
            )
            return result

        result = self._minimax(board, side)
        logger.debug(
            f"game.search.best_move side={side.value} index={result.index} "
            f"score={result.score} nodes={self.nodes_evaluated}"
        )
        return result

    def _minimax(self, board: Board, side: Side) -> SearchResult:
        self.nodes_evaluated += 1

        outcome = board.evaluate()
        if outcome is not None:
            return SearchResult(index=None, score=self.score(outcome))

        maximizing = side is self.maximizer
        best = SearchResult(index=None, score=0)

        for index in board.legal_moves():
            with board.speculate(index, side):
                score = self._minimax(board, side.opponent()).score

            if not best.has_move:
                best = SearchResult(index=index, score=score)
            elif maximizing and score > best.score:
                best = SearchResult(index=index, score=score)
            elif not maximizing and score < best.score:
                best = SearchResult(index=index, score=score)

        return best


def best_move(board: Board, side: Side, maximizer: Side = Side.X) -> SearchResult:
    """Find the optimal move for ``side`` with a one-off search."""
    return MinimaxSearch(maximizer=maximizer).best_move(board, side)
