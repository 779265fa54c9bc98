"""
FastAPI dependency functions for retrieving use cases from the container.
"""

from text_editor.container import container
from text_editor.use_cases.editor.dispatcher import TextEditorDispatcher
from text_editor.use_cases.tools.text_editor_tools import TextEditorToolsHandler


def get_dispatcher() -> TextEditorDispatcher:
    """
    Get the text editor dispatcher from the container.

    Returns:
        TextEditorDispatcher: The dispatcher instance
    """
    return container.get_dispatcher()


def get_tools_handler() -> TextEditorToolsHandler:
    """
    Get the text editor tools handler from the container.

    Returns:
        TextEditorToolsHandler: The tools handler instance
    """
    return container.get_text_editor_tools_handler()
