"""Registry dispatching the agent's tool calls by name."""

from __future__ import annotations

from typing import Any

from loguru import logger

from voicegame.agent.tools.base import Tool


class ToolRegistry:
    """
    Holds the tools offered to the dialogue agent and routes calls to them.
    """

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """Register a tool, replacing any tool with the same name."""
        self._tools[tool.name] = tool
        logger.debug(f"agent.tools.registry.register name={tool.name}")

    def unregister(self, name: str) -> None:
        """Remove a tool by name."""
        self._tools.pop(name, None)

    def get(self, name: str) -> Tool | None:
        return self._tools.get(name)

    def has(self, name: str) -> bool:
        return name in self._tools

    @property
    def tool_names(self) -> list[str]:
        return list(self._tools)

    def get_definitions(self) -> list[dict[str, Any]]:
        """Get the function-calling schemas of all tools."""
        return [tool.to_schema() for tool in self._tools.values()]

    async def execute(self, name: str, params: dict[str, Any]) -> str:
        """
        Execute a tool by name.

        Args:
            name: Tool name
            params: Arguments from the agent

        Returns:
            The tool's result, or an ``"Error: ..."`` string
        """
        tool = self._tools.get(name)
        if tool is None:
            logger.warning(f"agent.tools.registry.execute error=not_found name={name}")
            return f"Error: Tool '{name}' not found"

        errors = tool.validate_params(params)
        if errors:
            logger.warning(
                f"agent.tools.registry.execute error=invalid_params name={name} "
                f"errors={errors}"
            )
            return f"Error: Invalid parameters for tool '{name}': " + "; ".join(errors)

        try:
            return await tool.execute(**params)
        except Exception as e:
            logger.error(f"agent.tools.registry.execute error={e} name={name}")
            return f"Error executing {name}: {str(e)}"

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        return name in self._tools
