"""
File repository port interface defining the contract for text file storage.
"""

from abc import ABC, abstractmethod


class FileRepositoryPort(ABC):
    """Port interface for reading and writing text files."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """
        Check whether a file or directory exists at a path.

        Args:
            path: Absolute path to check

        Returns:
            True if something exists at the path
        """
        pass

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """
        Check whether a path is a directory.

        Args:
            path: Absolute path to check

        Returns:
            True if the path is an existing directory
        """
        pass

    @abstractmethod
    def read_text(self, path: str) -> str:
        """
        Read the full content of a UTF-8 text file.

        Args:
            path: Absolute path of the file to read

        Returns:
            File content, with line endings preserved

        Raises:
            FileRepositoryError: If reading fails
        """
        pass

    @abstractmethod
    def write_text(self, path: str, content: str) -> None:
        """
        Replace the content of a text file, creating it if needed.

        Args:
            path: Absolute path of the file to write
            content: Text content to write (UTF-8)

        Raises:
            FileRepositoryError: If writing fails
        """
        pass
