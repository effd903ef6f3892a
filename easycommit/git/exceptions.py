"""Git-related exception classes.

Contains all exception classes for version-control operations:
- GitError: Base exception for git-related errors
- NoRepositoryError: Raised when the working directory is not a repository
- NoStagedChangesError: Raised when there are no staged changes
- GitCommandError: Raised when a git command fails or cannot run
"""

from easycommit.exceptions import EasyCommitError


class GitError(EasyCommitError):
    """Custom exception for git-related errors."""

    pass


class NoRepositoryError(GitError):
    """Raised when the current directory is not inside a git repository."""

    pass


class NoStagedChangesError(GitError):
    """Raised when there are no staged changes."""

    pass


class GitCommandError(GitError):
    """Raised when a git command exits with an error."""

    pass
