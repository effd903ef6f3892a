"""Commit validation exception classes.

Contains all exception classes raised when a commit record breaks a
Conventional Commits rule:
- CommitValidationError: Base exception for user-correctable validation failures
- InvalidCommitTypeError: Raised when the commit type is unknown or malformed
- EmptyDescriptionError: Raised when the description is blank
- DescriptionTooLongError: Raised when the description exceeds its limit
- InvalidScopeFormatError: Raised when the scope has padding or forbidden characters
- BodyTooLongError: Raised when the body exceeds its limit
"""

from typing import Optional

from easycommit.exceptions import EasyCommitError


class CommitValidationError(EasyCommitError):
    """Base exception for commit validation failures.

    Attributes:
        field: Name of the offending record field.
        length: Measured length of the offending value, in code points.
        limit: The limit that was exceeded, if any.
    """

    field = ""

    def __init__(self, message: str, length: Optional[int] = None, limit: Optional[int] = None):
        super().__init__(message)
        self.length = length
        self.limit = limit


class InvalidCommitTypeError(CommitValidationError):
    """Raised when the commit type is invalid."""

    field = "type"


class EmptyDescriptionError(CommitValidationError):
    """Raised when the description is empty or whitespace."""

    field = "description"


class DescriptionTooLongError(CommitValidationError):
    """Raised when the description exceeds the maximum length."""

    field = "description"


class InvalidScopeFormatError(CommitValidationError):
    """Raised when the scope contains invalid characters."""

    field = "scope"


class BodyTooLongError(CommitValidationError):
    """Raised when the body exceeds the maximum length."""

    field = "body"
