"""
Use case for inserting a line at a 0-indexed position.
"""

import logging
from typing import Optional

from text_editor.entities.result import EditResult
from text_editor.exceptions import InvalidLineNumberError, NotFoundError
from text_editor.ports.files.file_repository_port import FileRepositoryPort
from text_editor.ports.history.edit_history_port import EditHistoryPort


class InsertTextUseCase:
    """Use case for the `insert` command."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        history: EditHistoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._history = history
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str, insert_line: int, new_str: str) -> EditResult:
        """
        Insert `new_str` so that it becomes line `insert_line` (0-indexed).

        0 places the text before the first line and the line count places it
        after the last one.

        Raises:
            NotFoundError: If the file does not exist
            InvalidLineNumberError: If `insert_line` is not an integer or is
                outside 0..line count
        """
        if not self._file_repository.exists(path):
            raise NotFoundError(f"File not found: {path}")

        content = self._file_repository.read_text(path)
        lines = content.split("\n")
        if isinstance(insert_line, bool) or not isinstance(insert_line, int):
            raise InvalidLineNumberError(
                f"Invalid line number: {insert_line!r}. insert_line must be an integer"
            )
        if not 0 <= insert_line <= len(lines):
            raise InvalidLineNumberError(
                f"Invalid line number: {insert_line}. Valid range is 0 to {len(lines)}"
            )

        lines.insert(insert_line, new_str)
        self._file_repository.write_text(path, "\n".join(lines))
        self._history.push(path, content)
        self._logger.info(f"Inserted text at line {insert_line} in {path}")
        return EditResult.ok(f"Successfully inserted text at line {insert_line}.")
