"""Registry mapping conversation sessions to their games."""

from __future__ import annotations

import threading

from loguru import logger

from voicegame.game.turns import TicTacToeGame


class GameSessions:
    """
    Keeps exactly one live game per conversation session.

    Starting a session that already exists replaces its game with a fresh
    one, the same way a restarted conversation begins on an empty board.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._games: dict[str, TicTacToeGame] = {}

    def start(self, session_id: str) -> TicTacToeGame:
        """
        Start a new game for a session.

        Args:
            session_id: Identifier of the conversation session

        Returns:
            The new game
        """
        game = TicTacToeGame(game_id=session_id)
        with self._lock:
            replaced = session_id in self._games
            self._games[session_id] = game
        logger.info(f"game.sessions.start session_id={session_id} replaced={replaced}")
        return game

    def get(self, session_id: str) -> TicTacToeGame | None:
        """Get the game for a session, or None."""
        with self._lock:
            return self._games.get(session_id)

    def end(self, session_id: str) -> None:
        """Drop a session's game. Unknown sessions are logged and ignored."""
        with self._lock:
            game = self._games.pop(session_id, None)
        if game is None:
            logger.warning(f"game.sessions.end session_id={session_id} not_found")
        else:
            logger.info(f"game.sessions.end session_id={session_id}")

    def active_sessions(self) -> list[str]:
        """Get the ids of all sessions with a live game."""
        with self._lock:
            return list(self._games)
