"""
Local file system adapter implementation for text file storage.
"""

import logging
import os

from typing_extensions import override

from text_editor.exceptions import FileRepositoryError
from text_editor.ports.files.file_repository_port import FileRepositoryPort


class LocalFileSystemAdapter(FileRepositoryPort):
    """Local file system implementation of the file repository port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    @override
    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    @override
    def read_text(self, path: str) -> str:
        """
        Read the full content of a UTF-8 text file.

        Line endings are returned untouched so that a later write reproduces
        the file byte for byte.

        Args:
            path: Absolute path of the file to read

        Returns:
            File content

        Raises:
            FileRepositoryError: If the file cannot be read or is not UTF-8 text
        """
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                return f.read()
        except UnicodeDecodeError:
            raise FileRepositoryError(f"File is not valid UTF-8 text: {path}")
        except Exception as e:
            raise FileRepositoryError(f"Failed to read {path}: {str(e)}")

    @override
    def write_text(self, path: str, content: str) -> None:
        """
        Replace the content of a text file, creating parent directories if needed.

        Args:
            path: Absolute path of the file to write
            content: Text content to write (UTF-8)

        Raises:
            FileRepositoryError: If writing fails
        """
        try:
            parent = os.path.dirname(path)
            if parent and not os.path.isdir(parent):
                self._logger.info(f"Creating parent directory: {parent}")
                os.makedirs(parent, exist_ok=True)
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(content)
        except Exception as e:
            raise FileRepositoryError(f"Failed to write {path}: {str(e)}")
