"""
Tests for the DependencyContainer.
"""

from text_editor.adapters.history.in_memory_history import InMemoryEditHistory
from text_editor.use_cases.editor.dispatcher import TextEditorDispatcher
from text_editor.use_cases.tools.text_editor_tools import TextEditorToolsHandler


class TestDependencyContainer:
    """Test cases for the DependencyContainer."""

    def test_dispatcher_is_cached(self, dependency_container):
        first = dependency_container.get_dispatcher()

        assert isinstance(first, TextEditorDispatcher)
        assert dependency_container.get_dispatcher() is first

    def test_mutating_use_cases_share_history(self, dependency_container):
        history = dependency_container.get_edit_history()

        assert isinstance(history, InMemoryEditHistory)
        for use_case in (
            dependency_container.get_create_file_use_case(),
            dependency_container.get_replace_text_use_case(),
            dependency_container.get_insert_text_use_case(),
            dependency_container.get_undo_edit_use_case(),
        ):
            assert use_case._history is history

    def test_tools_handler(self, dependency_container):
        handler = dependency_container.get_text_editor_tools_handler()

        assert isinstance(handler, TextEditorToolsHandler)
        assert handler._dispatcher is dependency_container.get_dispatcher()

    def test_reset_gives_fresh_history(self, dependency_container):
        before = dependency_container.get_edit_history()

        dependency_container.reset()

        assert dependency_container.get_edit_history() is not before
