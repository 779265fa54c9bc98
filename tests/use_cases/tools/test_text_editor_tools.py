"""
Tests for the TextEditorToolsHandler.
"""

import json
from unittest.mock import MagicMock

import pytest

from text_editor.entities.result import EditResult
from text_editor.use_cases.editor.dispatcher import TextEditorDispatcher
from text_editor.use_cases.tools.text_editor_tools import (
    TEXT_EDITOR_TOOL_NAME,
    TextEditorToolsHandler,
)


class TestTextEditorToolsHandler:
    """Test cases for the TextEditorToolsHandler."""

    def test_available_tools(self, mock_logger):
        handler = TextEditorToolsHandler(MagicMock(spec=TextEditorDispatcher), mock_logger)

        tools = handler.available_tools()

        assert [t["name"] for t in tools] == ["text_editor"]
        parameters = tools[0]["parameters"]
        assert parameters["required"] == ["command", "path"]
        assert parameters["properties"]["command"]["enum"] == [
            "view",
            "create",
            "str_replace",
            "insert",
            "undo_edit",
        ]

    def test_dispatch_returns_json(self, mock_logger):
        dispatcher = MagicMock(spec=TextEditorDispatcher)
        dispatcher.execute.return_value = EditResult.ok("File content:", "1: a")
        handler = TextEditorToolsHandler(dispatcher, mock_logger)
        arguments = {"command": "view", "path": "/tmp/a.txt"}

        payload = json.loads(handler.dispatch(TEXT_EDITOR_TOOL_NAME, arguments))

        assert payload == {"success": True, "message": "File content:", "content": "1: a"}
        dispatcher.execute.assert_called_once_with(arguments)
        mock_logger.info.assert_called_once_with(
            "Executing text_editor tool with command: view"
        )

    def test_dispatch_unknown_tool(self, mock_logger):
        handler = TextEditorToolsHandler(MagicMock(spec=TextEditorDispatcher), mock_logger)

        with pytest.raises(ValueError, match="Unknown tool: files.list"):
            handler.dispatch("files.list", {})

    def test_dispatch_end_to_end(self, dispatcher, sample_file):
        handler = TextEditorToolsHandler(dispatcher)

        payload = json.loads(
            handler.dispatch(
                TEXT_EDITOR_TOOL_NAME,
                {"command": "view", "path": sample_file, "view_range": [5, -1]},
            )
        )

        assert payload["success"] is True
        assert payload["content"] == "5: This is line 5."
