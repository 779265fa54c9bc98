"""
Editor result domain entity.
"""

import json
from dataclasses import dataclass
from typing import Any, Optional

from text_editor.exceptions import ErrorKind


@dataclass(frozen=True)
class EditResult:
    """Structured outcome of one text editor command."""

    success: bool
    message: str
    content: Optional[str] = None
    error_kind: Optional[ErrorKind] = None

    @classmethod
    def ok(cls, message: str, content: Optional[str] = None) -> "EditResult":
        return cls(success=True, message=message, content=content)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "EditResult":
        return cls(success=False, message=message, error_kind=kind)

    def to_dict(self) -> dict[str, Any]:
        """
        Get the wire representation of the result.

        Returns:
            Dictionary with "success", "message" and, when set, "content"
        """
        data: dict[str, Any] = {"success": self.success, "message": self.message}
        if self.content is not None:
            data["content"] = self.content
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)
