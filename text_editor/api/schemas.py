"""
Pydantic models for API requests and responses.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class TextEditorRequest(BaseModel):
    """Schema for a text editor command."""

    command: str = Field(
        ..., description="One of view, create, str_replace, insert, undo_edit"
    )
    path: str = Field(..., description="Absolute path to a file or directory")
    view_range: Optional[List[Optional[int]]] = Field(
        None,
        min_length=1,
        max_length=2,
        description="[start_line, end_line] for view, 1-indexed; -1 means end of file",
    )
    file_text: Optional[str] = Field(None, description="Content for create")
    old_str: Optional[str] = Field(None, description="Exact text to replace")
    new_str: Optional[str] = Field(None, description="Replacement or inserted text")
    insert_line: Optional[int] = Field(
        None, description="0-indexed line at which new_str is inserted"
    )
    description: Optional[str] = Field(
        None, description="Why the command is run (ignored by the editor)"
    )


class TextEditorResponse(BaseModel):
    """Schema for a text editor result."""

    success: bool = Field(..., description="Whether the command succeeded")
    message: str = Field(..., description="Outcome or error description")
    content: Optional[str] = Field(
        None, description="Rendered content for a successful view"
    )
    error_kind: Optional[str] = Field(
        None, description="Error category when success is false"
    )

    @classmethod
    def from_entity(cls, result):
        """Create a TextEditorResponse schema from an EditResult entity."""
        return cls(
            success=result.success,
            message=result.message,
            content=result.content,
            error_kind=result.error_kind.value if result.error_kind else None,
        )


class ToolSpecInfo(BaseModel):
    """Schema for one tool specification."""

    name: str = Field(..., description="Tool name")
    description: str = Field(..., description="Tool description")
    parameters: dict[str, object] = Field(..., description="JSON Schema of arguments")


class ToolListResponse(BaseModel):
    """Schema for the list of available tools."""

    tools: List[ToolSpecInfo] = Field(..., description="Available tools")


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    detail: str = Field(..., description="Error message")
