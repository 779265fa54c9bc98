"""
Tool "text_editor" mapped to the text editor dispatcher.
"""

import logging
from typing import Any, Optional

from text_editor.entities.command import CommandName
from text_editor.entities.result import EditResult
from text_editor.ports.tools.tools_port import ToolsHandlerPort, ToolSpec
from text_editor.use_cases.editor.dispatcher import TextEditorDispatcher

TEXT_EDITOR_TOOL_NAME = "text_editor"
TEXT_EDITOR_TOOL_DESCRIPTION = (
    "A model context protocol server for editing text files that is identical "
    "with Claude's built in text editor tool called text_editor_20241022"
)

# shared by the JSON schema below and the MCP tool signature
PARAMETER_DESCRIPTIONS: dict[str, str] = {
    "command": "The command to run.",
    "path": "Absolute path to file or directory, e.g. `/repo/file.py` or `/repo`.",
    "view_range": (
        "Optional for `view` on a file: [start_line, end_line], 1-indexed "
        "and inclusive. end_line -1 shows all lines from start_line."
    ),
    "file_text": "Required for `create`: content of the file to be created.",
    "old_str": "Required for `str_replace`: exact text to replace; must occur once.",
    "new_str": (
        "Optional for `str_replace` (defaults to empty), required for "
        "`insert`: the new text."
    ),
    "insert_line": (
        "Required for `insert`: 0-indexed line at which `new_str` is placed; "
        "0 inserts before the first line."
    ),
    "description": "Short description of why the command is run.",
}

TEXT_EDITOR_PARAMETERS: dict[str, object] = {
    "type": "object",
    "properties": {
        "command": {
            "type": "string",
            "enum": CommandName.values(),
            "description": PARAMETER_DESCRIPTIONS["command"],
        },
        "path": {"type": "string", "description": PARAMETER_DESCRIPTIONS["path"]},
        "view_range": {
            "type": "array",
            "items": {"type": ["integer", "null"]},
            "minItems": 2,
            "maxItems": 2,
            "description": PARAMETER_DESCRIPTIONS["view_range"],
        },
        "file_text": {
            "type": "string",
            "description": PARAMETER_DESCRIPTIONS["file_text"],
        },
        "old_str": {"type": "string", "description": PARAMETER_DESCRIPTIONS["old_str"]},
        "new_str": {"type": "string", "description": PARAMETER_DESCRIPTIONS["new_str"]},
        "insert_line": {
            "type": "integer",
            "description": PARAMETER_DESCRIPTIONS["insert_line"],
        },
        "description": {
            "type": "string",
            "description": PARAMETER_DESCRIPTIONS["description"],
        },
    },
    "required": ["command", "path"],
    "additionalProperties": False,
}


class TextEditorToolsHandler(ToolsHandlerPort):
    """Handler exposing the text editor as a tool that can be called by an LLM."""

    def __init__(
        self,
        dispatcher: TextEditorDispatcher,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the text editor tools handler.

        Args:
            dispatcher: Dispatcher running the editor commands
            logger: Logger instance to use for logging
        """
        self._dispatcher = dispatcher
        self._logger = logger or logging.getLogger(__name__)

    def available_tools(self) -> list[ToolSpec]:
        """
        Get a list of available text editor tools.

        Returns:
            List with the single text editor tool specification
        """
        return [
            {
                "name": TEXT_EDITOR_TOOL_NAME,
                "description": TEXT_EDITOR_TOOL_DESCRIPTION,
                "parameters": TEXT_EDITOR_PARAMETERS,
            }
        ]

    def run(self, arguments: dict[str, Any]) -> EditResult:
        """Run one text editor command and return the structured result."""
        self._logger.info(
            f"Executing {TEXT_EDITOR_TOOL_NAME} tool with command: {arguments.get('command')}"
        )
        return self._dispatcher.execute(arguments)

    def dispatch(self, name: str, arguments: dict[str, Any]) -> str:
        """
        Dispatch a tool invocation to the text editor.

        Args:
            name: Name of the tool to invoke
            arguments: Arguments to pass to the tool

        Returns:
            JSON text of the result: {"success", "message", "content"?}

        Raises:
            ValueError: If the tool name is unknown
        """
        if name != TEXT_EDITOR_TOOL_NAME:
            # Signal deliberately that this handler doesn't handle the tool
            raise ValueError(f"Unknown tool: {name}")
        return self.run(arguments).to_json()
