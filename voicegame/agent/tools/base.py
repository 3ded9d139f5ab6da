"""Base class for tools the dialogue agent can call."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Tool(ABC):
    """
    A callable exposed to the dialogue agent.

    Subclasses describe their arguments as a JSON schema object and return
    plain strings; failures are reported as ``"Error: ..."`` strings rather
    than raised into the agent.
    """

    _TYPE_MAP = {
        "string": str,
        "integer": int,
        "number": (int, float),
        "boolean": bool,
        "array": list,
        "object": dict,
    }

    @property
    @abstractmethod
    def name(self) -> str:
        """Tool name used in function calls."""

    @property
    @abstractmethod
    def description(self) -> str:
        """What the tool does, as shown to the agent."""

    @property
    @abstractmethod
    def parameters(self) -> dict[str, Any]:
        """JSON schema of the tool's arguments."""

    @abstractmethod
    async def execute(self, **kwargs: Any) -> str:
        """Run the tool with validated arguments."""

    def validate_params(self, params: dict[str, Any]) -> list[str]:
        """
        Check arguments against the top-level parameter schema.

        Args:
            params: Arguments supplied by the agent

        Returns:
            List of error messages; empty if the arguments are valid
        """
        schema = self.parameters
        properties = schema.get("properties", {})
        errors = []

        for key in schema.get("required", []):
            if key not in params:
                errors.append(f"missing required {key}")

        for key, value in params.items():
            if key not in properties:
                continue
            declared = properties[key].get("type")
            if declared is None:
                continue
            type_names = declared if isinstance(declared, list) else [declared]
            if not any(self._matches(value, name) for name in type_names):
                errors.append(f"{key} should be {' or '.join(type_names)}")

        return errors

    def _matches(self, value: Any, type_name: str) -> bool:
        """Check a value against one JSON schema type name."""
        expected = self._TYPE_MAP.get(type_name)
        if expected is None:
            return True
        if isinstance(value, bool) and type_name != "boolean":
            return False
        return isinstance(value, expected)

    def to_schema(self) -> dict[str, Any]:
        """Convert to the function-calling schema format."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }
