"""
Use case for exact, single-occurrence string replacement.
"""

import logging
from typing import Optional

from text_editor.entities.result import EditResult
from text_editor.exceptions import AmbiguousMatchError, NoMatchError, NotFoundError
from text_editor.ports.files.file_repository_port import FileRepositoryPort
from text_editor.ports.history.edit_history_port import EditHistoryPort


class ReplaceTextUseCase:
    """Use case for the `str_replace` command."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        history: EditHistoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            history: Store receiving the pre-edit snapshot
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._history = history
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str, old_str: str, new_str: str = "") -> EditResult:
        """
        Replace the only occurrence of `old_str` in a file with `new_str`.

        Args:
            path: Absolute path of the file
            old_str: Exact text to find; must occur exactly once
            new_str: Replacement text

        Returns:
            Successful EditResult

        Raises:
            NotFoundError: If the file does not exist
            NoMatchError: If `old_str` does not occur
            AmbiguousMatchError: If `old_str` occurs more than once
        """
        if not self._file_repository.exists(path):
            raise NotFoundError(f"File not found: {path}")

        content = self._file_repository.read_text(path)
        occurrences = content.count(old_str)
        if occurrences == 0:
            raise NoMatchError(f"old_str was not found in file: {path}")
        if occurrences > 1:
            raise AmbiguousMatchError(occurrences)

        self._file_repository.write_text(path, content.replace(old_str, new_str, 1))
        self._history.push(path, content)
        self._logger.info(f"Replaced text in {path}")
        return EditResult.ok("Successfully replaced text at exactly one location.")
