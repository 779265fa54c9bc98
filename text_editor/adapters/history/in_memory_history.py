"""
In-memory edit history adapter.
"""

import logging
import os
from typing import Optional

from typing_extensions import override

from text_editor.ports.history.edit_history_port import EditHistoryPort


class InMemoryEditHistory(EditHistoryPort):
    """
    Edit history kept in process memory.

    Stacks are created on the first push for a path and are lost when the
    process exits. Paths are normalized so that "/a/./b" and "/a/b" share
    one stack.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._stacks: dict[str, list[str]] = {}
        self._logger = logger or logging.getLogger(__name__)

    @staticmethod
    def _key(path: str) -> str:
        return os.path.normpath(path)

    @override
    def push(self, path: str, content: str) -> None:
        stack = self._stacks.setdefault(self._key(path), [])
        stack.append(content)
        self._logger.debug(f"Saved snapshot for {path} (depth {len(stack)})")

    @override
    def pop(self, path: str) -> Optional[str]:
        stack = self._stacks.get(self._key(path))
        if not stack:
            return None
        content = stack.pop()
        self._logger.debug(f"Restored snapshot for {path} (depth {len(stack)})")
        return content

    @override
    def depth(self, path: str) -> int:
        return len(self._stacks.get(self._key(path), []))

    @override
    def clear(self, path: Optional[str] = None) -> None:
        if path is None:
            self._stacks.clear()
        else:
            self._stacks.pop(self._key(path), None)
