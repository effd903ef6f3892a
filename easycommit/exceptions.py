"""Base exception classes for easy-commit.

Contains:
- EasyCommitError: Base for every error raised on purpose by the package
- ValidationTimeoutError: Raised when validation runs out of time or is cancelled
"""

from typing import Optional


class EasyCommitError(Exception):
    """Base exception for easy-commit errors."""

    pass


class ValidationTimeoutError(EasyCommitError):
    """Raised when rule validation does not finish before its deadline.

    This signals slowness or cancellation, not invalid input, so it is not a
    CommitValidationError.

    Attributes:
        timeout: The deadline in seconds, if one was set.
        cancelled: True when the caller cancelled instead of the deadline passing.
    """

    def __init__(self, timeout: Optional[float] = None, cancelled: bool = False):
        if cancelled:
            message = "validation cancelled before all rules reported"
        else:
            message = f"validation timed out after {timeout}s"
        super().__init__(message)
        self.timeout = timeout
        self.cancelled = cancelled
