"""
Editor command domain entity.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class CommandName(str, Enum):
    """Commands understood by the text editor."""

    VIEW = "view"
    CREATE = "create"
    STR_REPLACE = "str_replace"
    INSERT = "insert"
    UNDO_EDIT = "undo_edit"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


@dataclass(frozen=True)
class EditorCommand:
    """
    A single text editor request as received from a tool call.

    `command` is kept as the raw string so that unknown names can be
    reported back to the caller instead of failing at parse time.
    """

    command: str
    path: Optional[str] = None
    view_range: Optional[tuple[Optional[int], Optional[int]]] = None
    file_text: Optional[str] = None
    old_str: Optional[str] = None
    new_str: Optional[str] = None
    insert_line: Optional[int] = None
    description: Optional[str] = None

    @classmethod
    def from_arguments(cls, arguments: dict[str, Any]) -> "EditorCommand":
        """
        Build a command from a tool-call argument mapping.

        Args:
            arguments: Mapping with at least a "command" key

        Returns:
            EditorCommand instance
        """
        view_range = arguments.get("view_range")
        if view_range is not None:
            items = list(view_range)
            start = items[0] if len(items) > 0 else None
            end = items[1] if len(items) > 1 else -1
            view_range = (start, end)

        return cls(
            command=str(arguments.get("command") or ""),
            path=arguments.get("path"),
            view_range=view_range,
            file_text=arguments.get("file_text"),
            old_str=arguments.get("old_str"),
            new_str=arguments.get("new_str"),
            insert_line=arguments.get("insert_line"),
            description=arguments.get("description"),
        )

    def __str__(self) -> str:
        return f"EditorCommand(command='{self.command}', path='{self.path}')"
