"""
Edit history port interface for per-file undo snapshots.
"""

from abc import ABC, abstractmethod
from typing import Optional


class EditHistoryPort(ABC):
    """Port interface for storing prior file contents, most recent last."""

    @abstractmethod
    def push(self, path: str, content: str) -> None:
        """
        Save a snapshot of a file's content before it is changed.

        Args:
            path: Absolute path of the file
            content: Content of the file before the change
        """
        pass

    @abstractmethod
    def pop(self, path: str) -> Optional[str]:
        """
        Remove and return the most recent snapshot for a path.

        Args:
            path: Absolute path of the file

        Returns:
            The snapshot, or None when there is no history for the path
        """
        pass

    @abstractmethod
    def depth(self, path: str) -> int:
        """Return the number of snapshots held for a path."""
        pass

    @abstractmethod
    def clear(self, path: Optional[str] = None) -> None:
        """Drop the history of one path, or of every path when None."""
        pass
