"""
Dependency injection container for managing application dependencies.
"""

import logging

from text_editor.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from text_editor.adapters.history.in_memory_history import InMemoryEditHistory
from text_editor.adapters.listing.local_directory_lister import LocalDirectoryLister
from text_editor.config.settings import get_settings
from text_editor.ports.files.file_repository_port import FileRepositoryPort
from text_editor.ports.history.edit_history_port import EditHistoryPort
from text_editor.ports.listing.directory_lister_port import DirectoryListerPort
from text_editor.use_cases.editor.create_file import CreateFileUseCase
from text_editor.use_cases.editor.dispatcher import TextEditorDispatcher
from text_editor.use_cases.editor.insert_text import InsertTextUseCase
from text_editor.use_cases.editor.replace_text import ReplaceTextUseCase
from text_editor.use_cases.editor.undo_edit import UndoEditUseCase
from text_editor.use_cases.editor.view_content import ViewContentUseCase
from text_editor.use_cases.tools.text_editor_tools import TextEditorToolsHandler


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_file_repository(self) -> FileRepositoryPort:
        """
        Get file repository adapter instance.

        Returns:
            FileRepositoryPort implementation
        """
        if "file_repository" not in self._instances:
            self._instances["file_repository"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_repository"]

    def get_edit_history(self) -> EditHistoryPort:
        """
        Get the edit history shared by all mutating use cases.

        Returns:
            EditHistoryPort implementation
        """
        if "edit_history" not in self._instances:
            self._instances["edit_history"] = InMemoryEditHistory(self._logger)
        return self._instances["edit_history"]

    def get_directory_lister(self) -> DirectoryListerPort:
        """
        Get directory lister instance.

        Returns:
            DirectoryListerPort implementation
        """
        if "directory_lister" not in self._instances:
            self._instances["directory_lister"] = LocalDirectoryLister(
                max_depth=get_settings().listing_max_depth, logger=self._logger
            )
        return self._instances["directory_lister"]

    def get_view_content_use_case(self) -> ViewContentUseCase:
        if "view_content_use_case" not in self._instances:
            self._instances["view_content_use_case"] = ViewContentUseCase(
                self.get_file_repository(), self.get_directory_lister(), self._logger
            )
        return self._instances["view_content_use_case"]

    def get_create_file_use_case(self) -> CreateFileUseCase:
        if "create_file_use_case" not in self._instances:
            self._instances["create_file_use_case"] = CreateFileUseCase(
                self.get_file_repository(), self.get_edit_history(), self._logger
            )
        return self._instances["create_file_use_case"]

    def get_replace_text_use_case(self) -> ReplaceTextUseCase:
        if "replace_text_use_case" not in self._instances:
            self._instances["replace_text_use_case"] = ReplaceTextUseCase(
                self.get_file_repository(), self.get_edit_history(), self._logger
            )
        return self._instances["replace_text_use_case"]

    def get_insert_text_use_case(self) -> InsertTextUseCase:
        if "insert_text_use_case" not in self._instances:
            self._instances["insert_text_use_case"] = InsertTextUseCase(
                self.get_file_repository(), self.get_edit_history(), self._logger
            )
        return self._instances["insert_text_use_case"]

    def get_undo_edit_use_case(self) -> UndoEditUseCase:
        if "undo_edit_use_case" not in self._instances:
            self._instances["undo_edit_use_case"] = UndoEditUseCase(
                self.get_file_repository(), self.get_edit_history(), self._logger
            )
        return self._instances["undo_edit_use_case"]

    def get_dispatcher(self) -> TextEditorDispatcher:
        """
        Get the text editor dispatcher with injected use cases.

        Returns:
            Configured TextEditorDispatcher
        """
        if "dispatcher" not in self._instances:
            self._instances["dispatcher"] = TextEditorDispatcher(
                view_uc=self.get_view_content_use_case(),
                create_uc=self.get_create_file_use_case(),
                replace_uc=self.get_replace_text_use_case(),
                insert_uc=self.get_insert_text_use_case(),
                undo_uc=self.get_undo_edit_use_case(),
                logger=self._logger,
            )
        return self._instances["dispatcher"]

    def get_text_editor_tools_handler(self) -> TextEditorToolsHandler:
        """
        Registry of the "text_editor" tool backed by the dispatcher.
        """
        if "text_editor_tools_handler" not in self._instances:
            self._instances["text_editor_tools_handler"] = TextEditorToolsHandler(
                self.get_dispatcher(), self._logger
            )
        return self._instances["text_editor_tools_handler"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
