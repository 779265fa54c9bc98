"""
Directory lister port interface.
"""

from abc import ABC, abstractmethod


class DirectoryListerPort(ABC):
    """Port interface for listing the entries below a directory."""

    @abstractmethod
    def list(self, path: str) -> list[str]:
        """
        List the entries of a directory.

        Args:
            path: Absolute path of the directory

        Returns:
            Entry names, in display order

        Raises:
            ListingError: If the directory cannot be listed
        """
        pass
