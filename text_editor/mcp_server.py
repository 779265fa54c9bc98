"""
MCP server registering the "text_editor" tool over stdio.
"""

import logging
from typing import Annotated, Literal, Optional

from fastmcp import FastMCP
from pydantic import Field

from text_editor import __version__
from text_editor.config.settings import get_settings
from text_editor.container import container
from text_editor.use_cases.tools.text_editor_tools import (
    PARAMETER_DESCRIPTIONS,
    TEXT_EDITOR_TOOL_DESCRIPTION,
    TEXT_EDITOR_TOOL_NAME,
)

SERVER_NAME = "mcp-server-text-editor"

# stdout carries the protocol, logs go to stderr
logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s | %(levelname)s | %(message)s",
)
log = logging.getLogger(SERVER_NAME)

mcp = FastMCP(SERVER_NAME)


EditorCommandName = Literal["view", "create", "str_replace", "insert", "undo_edit"]


@mcp.tool(name=TEXT_EDITOR_TOOL_NAME, description=TEXT_EDITOR_TOOL_DESCRIPTION)
def text_editor(
    command: Annotated[
        EditorCommandName, Field(description=PARAMETER_DESCRIPTIONS["command"])
    ],
    path: Annotated[str, Field(description=PARAMETER_DESCRIPTIONS["path"])],
    view_range: Annotated[
        Optional[list[Optional[int]]],
        Field(description=PARAMETER_DESCRIPTIONS["view_range"]),
    ] = None,
    file_text: Annotated[
        Optional[str], Field(description=PARAMETER_DESCRIPTIONS["file_text"])
    ] = None,
    old_str: Annotated[
        Optional[str], Field(description=PARAMETER_DESCRIPTIONS["old_str"])
    ] = None,
    new_str: Annotated[
        Optional[str], Field(description=PARAMETER_DESCRIPTIONS["new_str"])
    ] = None,
    insert_line: Annotated[
        Optional[int], Field(description=PARAMETER_DESCRIPTIONS["insert_line"])
    ] = None,
    description: Annotated[
        Optional[str], Field(description=PARAMETER_DESCRIPTIONS["description"])
    ] = None,
) -> str:
    arguments = {
        "command": command,
        "path": path,
        "view_range": view_range,
        "file_text": file_text,
        "old_str": old_str,
        "new_str": new_str,
        "insert_line": insert_line,
        "description": description,
    }
    return container.get_text_editor_tools_handler().dispatch(
        TEXT_EDITOR_TOOL_NAME, arguments
    )


def main() -> int:
    log.info(f"{SERVER_NAME} MCP Server v{__version__} running on stdio")
    mcp.run()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
