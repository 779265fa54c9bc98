"""
Path validation applied to every command before any filesystem access.
"""

import os
from typing import Optional

from text_editor.exceptions import InvalidPathError, MissingParameterError


def ensure_absolute_path(path: Optional[str]) -> str:
    """
    Check that a command path is present and absolute.

    Args:
        path: Path received with the command

    Returns:
        The path, unchanged

    Raises:
        MissingParameterError: If the path is missing or empty
        InvalidPathError: If the path is relative
    """
    if not path or not isinstance(path, str):
        raise MissingParameterError("path")
    if not os.path.isabs(path):
        raise InvalidPathError(f"Path must be absolute: {path}")
    return path
