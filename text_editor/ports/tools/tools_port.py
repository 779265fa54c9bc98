"""
Port and types for exposing editor capabilities as LLM tools (function calls).
"""

from abc import ABC, abstractmethod
from typing import Any, TypedDict


class ToolSpec(TypedDict):
    """Specification for a tool that can be called by an LLM."""

    name: str
    description: str
    parameters: dict[str, object]  # JSON Schema


class ToolsHandlerPort(ABC):
    """
    Port interface for handling LLM tools.

    Implementations publish their tool specifications and turn a tool call
    into the serialized payload returned to the model.
    """

    @abstractmethod
    def available_tools(self) -> list[ToolSpec]:
        """
        Get a list of available tools.

        Returns:
            List of tool specifications
        """
        pass

    @abstractmethod
    def dispatch(self, name: str, arguments: dict[str, Any]) -> str:
        """
        Run a tool call.

        Args:
            name: Name of the tool to invoke
            arguments: Arguments sent by the model

        Returns:
            Text payload handed back to the model

        Raises:
            ValueError: If the tool name is not handled here
        """
        pass
