"""The makeMove tool the voice agent calls when the user says a cell."""

from __future__ import annotations

import asyncio
import json
from typing import Any

from loguru import logger

from voicegame.agent.tools.base import Tool
from voicegame.config import GameSettings, settings
from voicegame.game.turns import TicTacToeGame


class MakeMoveTool(Tool):
    """
    Plays the user's move and the engine's reply in one call.

    By default the agent gets the 9-character board back (``"X   O    "``);
    with ``tool_response_format="json"`` it gets the full payload with
    ``isValidMove``, ``board`` and ``winner``.

    Args:
        game: Game this tool plays on
        config: Settings for the tool name and response format
    """

    def __init__(self, game: TicTacToeGame, config: GameSettings | None = None):
        self._game = game
        self._config = config or settings

    @property
    def name(self) -> str:
        return self._config.tool_name

    @property
    def description(self) -> str:
        return (
            "Place the user's mark on the TicTacToe board and let the computer "
            "reply. Cells are numbered 1-9, left to right, top to bottom."
        )

    @property
    def parameters(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "position": {
                    "type": ["string", "integer"],
                    "description": "Cell number from 1 (top left) to 9 (bottom right)",
                },
            },
            "required": ["position"],
        }

    @property
    def game(self) -> TicTacToeGame:
        return self._game

    async def execute(self, position: str | int, **kwargs: Any) -> str:
        """
        Play a move.

        Args:
            position: Cell number 1-9
            **kwargs: Extra arguments from the agent, ignored

        Returns:
            The board after the turn, as a string or JSON payload
        """
        logger.debug(
            f"agent.tools.make_move.execute game_id={self._game.game_id} position={position!r}"
        )
        # The search is synchronous; keep it off the event loop
        loop = asyncio.get_running_loop()
        outcome = await loop.run_in_executor(None, self._game.play_human_move, position)

        if self._config.tool_response_format == "json":
            return json.dumps(outcome.to_tool_payload())
        return outcome.board_string
