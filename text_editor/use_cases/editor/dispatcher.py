"""
Command dispatcher: validates a text editor command, routes it to its use case
and normalizes every outcome into an EditResult.
"""

import logging
import threading
from typing import Any, Optional

from text_editor.entities.command import CommandName, EditorCommand
from text_editor.entities.result import EditResult
from text_editor.exceptions import (
    ErrorKind,
    MissingParameterError,
    TextEditorError,
    UnknownCommandError,
)
from text_editor.use_cases.editor.create_file import CreateFileUseCase
from text_editor.use_cases.editor.insert_text import InsertTextUseCase
from text_editor.use_cases.editor.path_validator import ensure_absolute_path
from text_editor.use_cases.editor.replace_text import ReplaceTextUseCase
from text_editor.use_cases.editor.undo_edit import UndoEditUseCase
from text_editor.use_cases.editor.view_content import ViewContentUseCase


class TextEditorDispatcher:
    """
    Entry point of the editing engine.

    Commands run one at a time: `execute` holds a lock for the whole command
    so a mutation and its history push are never interleaved with another
    command.
    """

    def __init__(
        self,
        view_uc: ViewContentUseCase,
        create_uc: CreateFileUseCase,
        replace_uc: ReplaceTextUseCase,
        insert_uc: InsertTextUseCase,
        undo_uc: UndoEditUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the dispatcher.

        Args:
            view_uc: Use case for `view`
            create_uc: Use case for `create`
            replace_uc: Use case for `str_replace`
            insert_uc: Use case for `insert`
            undo_uc: Use case for `undo_edit`
            logger: Logger instance to use for logging
        """
        self._view_uc = view_uc
        self._create_uc = create_uc
        self._replace_uc = replace_uc
        self._insert_uc = insert_uc
        self._undo_uc = undo_uc
        self._logger = logger or logging.getLogger(__name__)
        self._lock = threading.Lock()

    def execute(self, arguments: dict[str, Any] | EditorCommand) -> EditResult:
        """
        Run one text editor command.

        Args:
            arguments: Raw tool-call arguments or an EditorCommand

        Returns:
            EditResult; failures are reported with success=False and never raised
        """
        try:
            command = (
                arguments
                if isinstance(arguments, EditorCommand)
                else EditorCommand.from_arguments(arguments)
            )
        except Exception as e:
            self._logger.error(f"Malformed text editor command: {e}")
            return EditResult.failure(ErrorKind.UNEXPECTED, str(e) or "Unknown error")

        with self._lock:
            try:
                self._logger.info(f"Executing {command}")
                return self._run(command)
            except TextEditorError as e:
                self._logger.info(f"{command.command} failed ({e.kind.value}): {e}")
                return EditResult.failure(e.kind, str(e))
            except Exception as e:
                self._logger.error(f"Unexpected error executing {command}: {e}")
                return EditResult.failure(
                    ErrorKind.UNEXPECTED, str(e) or "Unknown error"
                )

    def _run(self, command: EditorCommand) -> EditResult:
        path = ensure_absolute_path(command.path)
        self._check_required(command)

        if command.command == CommandName.VIEW:
            return self._view_uc.execute(path, command.view_range)
        if command.command == CommandName.CREATE:
            return self._create_uc.execute(path, command.file_text)
        if command.command == CommandName.STR_REPLACE:
            return self._replace_uc.execute(path, command.old_str, command.new_str or "")
        if command.command == CommandName.INSERT:
            return self._insert_uc.execute(path, command.insert_line, command.new_str)
        if command.command == CommandName.UNDO_EDIT:
            return self._undo_uc.execute(path)

        raise UnknownCommandError(f"Unknown command: {command.command}")

    @staticmethod
    def _check_required(command: EditorCommand) -> None:
        if not command.command:
            raise MissingParameterError("command")
        if command.command == CommandName.CREATE and command.file_text is None:
            raise MissingParameterError("file_text")
        if command.command == CommandName.STR_REPLACE and not command.old_str:
            raise MissingParameterError("old_str")
        if command.command == CommandName.INSERT:
            if command.insert_line is None:
                raise MissingParameterError("insert_line")
            if command.new_str is None:
                raise MissingParameterError("new_str")
