"""
Custom exceptions for the application.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds reported by the text editor."""

    INVALID_PATH = "InvalidPath"
    NOT_FOUND = "NotFound"
    MISSING_PARAMETER = "MissingParameter"
    NO_MATCH = "NoMatch"
    AMBIGUOUS_MATCH = "AmbiguousMatch"
    INVALID_LINE_NUMBER = "InvalidLineNumber"
    NO_HISTORY = "NoHistory"
    LISTING_ERROR = "ListingError"
    UNKNOWN_COMMAND = "UnknownCommand"
    UNEXPECTED = "Unexpected"


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class TextEditorError(BaseAppError):
    """Base exception for failures surfaced to the caller as a failed result."""

    kind: ErrorKind = ErrorKind.UNEXPECTED


class InvalidPathError(TextEditorError):
    """Exception raised when a path is not absolute."""

    kind = ErrorKind.INVALID_PATH


class NotFoundError(TextEditorError):
    """Exception raised when the target file or directory does not exist."""

    kind = ErrorKind.NOT_FOUND


class MissingParameterError(TextEditorError):
    """Exception raised when a command-required field is absent."""

    kind = ErrorKind.MISSING_PARAMETER

    def __init__(self, parameter: str):
        self.parameter = parameter
        super().__init__(f"{parameter} parameter is required")


class NoMatchError(TextEditorError):
    """Exception raised when old_str does not occur in the file."""

    kind = ErrorKind.NO_MATCH


class AmbiguousMatchError(TextEditorError):
    """Exception raised when old_str occurs more than once in the file."""

    kind = ErrorKind.AMBIGUOUS_MATCH

    def __init__(self, occurrences: int):
        self.occurrences = occurrences
        super().__init__(
            f"Found {occurrences} occurrences of old_str, expected exactly one. "
            "Include more surrounding context to make the match unique."
        )


class InvalidLineNumberError(TextEditorError):
    """Exception raised when an insert position is outside the file."""

    kind = ErrorKind.INVALID_LINE_NUMBER


class NoHistoryError(TextEditorError):
    """Exception raised when there is nothing to undo for a path."""

    kind = ErrorKind.NO_HISTORY


class ListingError(TextEditorError):
    """Exception raised for directory listing failures."""

    kind = ErrorKind.LISTING_ERROR


class UnknownCommandError(TextEditorError):
    """Exception raised for an unrecognized command name."""

    kind = ErrorKind.UNKNOWN_COMMAND


class FileRepositoryError(BaseAppError):
    """Exception raised for file repository errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
