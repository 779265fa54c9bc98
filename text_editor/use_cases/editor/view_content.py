"""
Use case for viewing a file with line numbers, or listing a directory.
"""

import logging
from typing import Optional

from text_editor.entities.result import EditResult
from text_editor.exceptions import ListingError, NotFoundError
from text_editor.ports.files.file_repository_port import FileRepositoryPort
from text_editor.ports.listing.directory_lister_port import DirectoryListerPort

MAX_VIEW_BYTES = 10 * 1024
TRUNCATION_MARKER = "<response clipped>"

ViewRange = tuple[Optional[int], Optional[int]]


def number_lines(content: str, view_range: Optional[ViewRange] = None) -> str:
    """
    Render file content as "<n>: <line>" rows.

    Args:
        content: Full file content
        view_range: Optional 1-indexed inclusive (start, end); a None start
            means 1 and an end of -1 (or None) means the last line

    Returns:
        Numbered lines joined by newlines; numbers are absolute positions
    """
    lines = content.split("\n")
    start, end = 1, len(lines)
    if view_range is not None:
        range_start, range_end = view_range
        if range_start is not None:
            start = max(range_start, 1)
        if range_end is not None and range_end != -1:
            end = min(range_end, len(lines))

    return "\n".join(f"{n}: {lines[n - 1]}" for n in range(start, end + 1))


def clip(rendered: str, limit: int = MAX_VIEW_BYTES) -> tuple[str, bool]:
    """Cut rendered text to `limit` UTF-8 bytes and append the clip marker."""
    encoded = rendered.encode("utf-8")
    if len(encoded) <= limit:
        return rendered, False
    # drop a multi-byte character split by the cut
    head = encoded[:limit].decode("utf-8", errors="ignore")
    return head + TRUNCATION_MARKER, True


class ViewContentUseCase:
    """Use case for the `view` command."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        directory_lister: DirectoryListerPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            directory_lister: Capability used when the path is a directory
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._directory_lister = directory_lister
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str, view_range: Optional[ViewRange] = None) -> EditResult:
        """
        View a file or list a directory.

        Args:
            path: Absolute path to view
            view_range: Optional line range, see `number_lines`

        Returns:
            Successful EditResult carrying the rendered content

        Raises:
            NotFoundError: If nothing exists at the path
            ListingError: If the directory cannot be listed
        """
        self._logger.info(f"Viewing {path}")
        if not self._file_repository.exists(path):
            raise NotFoundError(f"File or directory not found: {path}")

        if self._file_repository.is_directory(path):
            try:
                names = self._directory_lister.list(path)
            except ListingError as e:
                self._logger.error(f"Error listing directory {path}: {e}")
                raise ListingError(f"Error listing directory: {e}") from e
            return EditResult.ok(f"Directory listing for {path}:", "\n".join(names))

        rendered = number_lines(self._file_repository.read_text(path), view_range)
        rendered, truncated = clip(rendered)
        if truncated:
            self._logger.info(f"View of {path} truncated to {MAX_VIEW_BYTES} bytes")
            return EditResult.ok("File content (truncated):", rendered)
        return EditResult.ok("File content:", rendered)
