"""
FastAPI router definitions for the API endpoints.
"""

from fastapi import APIRouter, HTTPException

from text_editor.api.dependencies import get_dispatcher, get_tools_handler
from text_editor.api.schemas import (
    ErrorResponse,
    TextEditorRequest,
    TextEditorResponse,
    ToolListResponse,
    ToolSpecInfo,
)

router = APIRouter()


@router.post(
    "/text-editor",
    response_model=TextEditorResponse,
    responses={500: {"model": ErrorResponse}},
)
def run_text_editor(body: TextEditorRequest):
    """
    Execute one text editor command.

    Failed commands are reported in the body with success=false and a 200
    status, the same way a tool result is returned to an agent.

    Args:
        body: The command to execute

    Returns:
        TextEditorResponse: Result of the command

    Raises:
        HTTPException: If the command could not be executed at all
    """
    try:
        result = get_dispatcher().execute(body.model_dump(exclude_unset=True))
        return TextEditorResponse.from_entity(result)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/tools", response_model=ToolListResponse)
def list_tools():
    """
    List the tools exposed by this server.

    Returns:
        ToolListResponse: Tool names, descriptions and argument schemas
    """
    specs = get_tools_handler().available_tools()
    return ToolListResponse(tools=[ToolSpecInfo(**spec) for spec in specs])
