"""Turn resolution: apply the human's move and answer with the engine's reply."""

from __future__ import annotations

import threading
import uuid
from typing import Any, Literal

from loguru import logger
from pydantic import BaseModel

from voicegame.game.rules import BOARD_CELLS, ENGINE_SIDE, HUMAN_SIDE, Board, Outcome
from voicegame.game.search import MinimaxSearch

RejectReason = Literal["invalid_position", "out_of_range", "occupied", "game_over"]


class InvalidPosition(ValueError):
    """A requested position does not name an empty cell."""

    def __init__(self, position: Any, reason: RejectReason):
        super().__init__(f"Invalid position {position!r}: {reason}")
        self.position = position
        self.reason = reason


class TurnOutcome(BaseModel):
    """
    Result of one ``play_human_move`` call.

    ``board`` is a snapshot taken after the turn; ``result`` is None while
    the game is still in progress.
    """

    accepted: bool
    board: list[str]
    result: Outcome | None = None
    human_move: int | None = None
    reply_move: int | None = None
    reason: RejectReason | None = None

    @property
    def board_string(self) -> str:
        return "".join(self.board)

    def to_tool_payload(self) -> dict[str, Any]:
        """
        Record returned to the dialogue agent's client tool.

        Rejected moves carry only ``isValidMove`` and ``board``; accepted
        moves add ``winner`` (None while the game goes on).
        """
        payload: dict[str, Any] = {"isValidMove": self.accepted, "board": list(self.board)}
        if self.accepted:
            payload["winner"] = self.result.value if self.result is not None else None
        return payload


def parse_position(position: str | int) -> int:
    """
    Convert a spoken 1-9 position into a 0-based cell index.

    Raises:
        InvalidPosition: If the position is not an integer in 1-9
    """
    if isinstance(position, bool):
        raise InvalidPosition(position, "invalid_position")
    try:
        number = int(str(position).strip())
    except ValueError as e:
        raise InvalidPosition(position, "invalid_position") from e
    if not 1 <= number <= BOARD_CELLS:
        raise InvalidPosition(position, "out_of_range")
    return number - 1


def status_message(result: Outcome | None) -> str:
    """Short line the host can speak or print for a result."""
    if result is None:
        return "Your turn, say a move (1-9)."
    if result is Outcome.DRAW:
        return "Tie game!"
    return f"{result.value} wins!"


class TicTacToeGame:
    """
    One game between a human (X) and the minimax engine (O).

    Each call to ``play_human_move`` runs to completion under a per-game
    lock, so one board never sees two turns at once.

    Args:
        game_id: Unique identifier for this game
        search: Search used for the engine's replies
    """

    def __init__(self, game_id: str | None = None, search: MinimaxSearch | None = None):
        self._lock = threading.RLock()
        self.game_id = game_id or str(uuid.uuid4())
        self._search = search or MinimaxSearch(maximizer=HUMAN_SIDE)
        self._board = Board()
        logger.info(f"game.turns.init game_id={self.game_id}")

    @property
    def board(self) -> Board:
        """Get a copy of the current board."""
        with self._lock:
            return self._board.copy()

    @property
    def result(self) -> Outcome | None:
        with self._lock:
            return self._board.evaluate()

    def reset(self) -> None:
        """Start over on a fresh board."""
        with self._lock:
            self._board = Board()
            logger.info(f"game.turns.reset game_id={self.game_id}")

    def play_human_move(self, position: str | int) -> TurnOutcome:
        """
        Apply the human's move and, if the game goes on, the engine's reply.

        Args:
            position: Cell number 1-9 as spoken by the user

        Returns:
            TurnOutcome with the board after the turn. Invalid requests
            come back with ``accepted=False`` and an untouched board.
        """
        with self._lock:
            board = self._board

            prior = board.evaluate()
            if prior is not None:
                return self._reject(position, "game_over", prior)

            try:
                index = parse_position(position)
            except InvalidPosition as e:
                return self._reject(position, e.reason, prior)

            if not board.apply_move(index, HUMAN_SIDE):
                return self._reject(position, "occupied", prior)

            result = board.evaluate()
            if result is not None:
                logger.info(
                    f"game.turns.play_human_move game_id={self.game_id} "
                    f"human={index} result={result.value}"
                )
                return TurnOutcome(
                    accepted=True, board=board.snapshot(), result=result, human_move=index
                )

            reply = self._search.best_move(board, ENGINE_SIDE)
            reply_move = None
            if reply.has_move and board.apply_move(reply.index, ENGINE_SIDE):
                reply_move = reply.index
            else:
                logger.error(
                    f"game.turns.play_human_move error=reply_rejected "
                    f"game_id={self.game_id} reply={reply.index}"
                )

            result = board.evaluate()
            logger.info(
                f"game.turns.play_human_move game_id={self.game_id} human={index} "
                f"reply={reply_move} result={result.value if result else None}"
            )
            return TurnOutcome(
                accepted=True,
                board=board.snapshot(),
                result=result,
                human_move=index,
                reply_move=reply_move,
            )

    def _reject(
        self, position: Any, reason: RejectReason, result: Outcome | None
    ) -> TurnOutcome:
        logger.warning(
            f"game.turns.play_human_move rejected game_id={self.game_id} "
            f"position={position!r} reason={reason}"
        )
        return TurnOutcome(
            accepted=False, board=self._board.snapshot(), result=result, reason=reason
        )
