"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from unittest.mock import MagicMock

import pytest

from text_editor.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from text_editor.adapters.history.in_memory_history import InMemoryEditHistory
from text_editor.adapters.listing.local_directory_lister import LocalDirectoryLister
from text_editor.container import DependencyContainer
from text_editor.use_cases.editor.create_file import CreateFileUseCase
from text_editor.use_cases.editor.dispatcher import TextEditorDispatcher
from text_editor.use_cases.editor.insert_text import InsertTextUseCase
from text_editor.use_cases.editor.replace_text import ReplaceTextUseCase
from text_editor.use_cases.editor.undo_edit import UndoEditUseCase
from text_editor.use_cases.editor.view_content import ViewContentUseCase

SAMPLE_TEXT = (
    "This is a sample text file.\n"
    "It has multiple lines.\n"
    "This is line 3.\n"
    "This is line 4.\n"
    "This is line 5."
)


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        with open(os.path.join(temp_dir, "test.txt"), "w", encoding="utf-8") as f:
            f.write(SAMPLE_TEXT)

        with open(os.path.join(temp_dir, "script.py"), "w", encoding="utf-8") as f:
            f.write("print('Hello, world!')\n")

        # Create a subdirectory with a file and a hidden file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(os.path.join(subdir, "nested"))
        with open(os.path.join(subdir, "notes.md"), "w", encoding="utf-8") as f:
            f.write("# Notes\n")
        with open(os.path.join(subdir, "nested", "deep.txt"), "w") as f:
            f.write("too deep to list")
        with open(os.path.join(temp_dir, ".hidden"), "w") as f:
            f.write("secret")

        yield temp_dir


@pytest.fixture
def sample_file(temp_directory):
    """Absolute path of the five-line sample file."""
    return os.path.join(temp_directory, "test.txt")


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def history():
    """A fresh in-memory edit history."""
    return InMemoryEditHistory()


@pytest.fixture
def dispatcher(history, mock_logger):
    """
    Dispatcher wired to the local filesystem and an isolated history.

    Returns:
        TextEditorDispatcher instance
    """
    files = LocalFileSystemAdapter(mock_logger)
    return TextEditorDispatcher(
        view_uc=ViewContentUseCase(files, LocalDirectoryLister(), mock_logger),
        create_uc=CreateFileUseCase(files, history, mock_logger),
        replace_uc=ReplaceTextUseCase(files, history, mock_logger),
        insert_uc=InsertTextUseCase(files, history, mock_logger),
        undo_uc=UndoEditUseCase(files, history, mock_logger),
        logger=mock_logger,
    )


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
