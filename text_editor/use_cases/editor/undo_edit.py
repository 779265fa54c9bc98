"""
Use case for reverting the most recent edit of a file.
"""

import logging
from typing import Optional

from text_editor.entities.result import EditResult
from text_editor.exceptions import NoHistoryError
from text_editor.ports.files.file_repository_port import FileRepositoryPort
from text_editor.ports.history.edit_history_port import EditHistoryPort


class UndoEditUseCase:
    """Use case for the `undo_edit` command."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        history: EditHistoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._history = history
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> EditResult:
        """
        Restore the latest snapshot of a file, consuming it.

        Raises:
            NoHistoryError: If no snapshot is held for the path
        """
        previous = self._history.pop(path)
        if previous is None:
            raise NoHistoryError(f"No edit history found for {path}")

        try:
            self._file_repository.write_text(path, previous)
        except Exception:
            # keep the snapshot so the undo can be retried
            self._history.push(path, previous)
            raise
        self._logger.info(f"Reverted last edit to {path}")
        return EditResult.ok(f"Successfully reverted last edit to {path}")
