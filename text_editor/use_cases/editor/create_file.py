"""
Use case for creating or overwriting a text file.
"""

import logging
from typing import Optional

from text_editor.entities.result import EditResult
from text_editor.ports.files.file_repository_port import FileRepositoryPort
from text_editor.ports.history.edit_history_port import EditHistoryPort


class CreateFileUseCase:
    """Use case for the `create` command."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        history: EditHistoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._history = history
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str, file_text: str) -> EditResult:
        """
        Write `file_text` to `path`, replacing any existing content.

        Overwriting an existing file saves its previous content so it can be
        undone. A brand-new file has no prior state and saves nothing.

        Args:
            path: Absolute path of the file
            file_text: Full content to write

        Returns:
            Successful EditResult
        """
        existed = self._file_repository.exists(path)
        if existed:
            previous = self._file_repository.read_text(path)
            self._file_repository.write_text(path, file_text)
            self._history.push(path, previous)
            self._logger.info(f"Overwrote file {path}")
            return EditResult.ok(f"File overwritten: {path}")

        self._file_repository.write_text(path, file_text)
        self._logger.info(f"Created file {path}")
        return EditResult.ok(f"File created: {path}")
