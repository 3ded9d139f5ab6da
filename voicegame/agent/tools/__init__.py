"""Tools exposed to the dialogue agent."""

from voicegame.agent.tools.base import Tool
from voicegame.agent.tools.make_move import MakeMoveTool
from voicegame.agent.tools.registry import ToolRegistry

__all__ = ["Tool", "ToolRegistry", "MakeMoveTool"]
