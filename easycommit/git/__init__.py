"""Git backend module for easycommit.

This package provides:
- exceptions: GitError, NoRepositoryError, NoStagedChangesError, GitCommandError
- runner: _run_git_command, _git_exit_code, _run_git_interactive
- backend: VersionControlBackend, GitBackend
"""

# Exceptions
from easycommit.git.exceptions import (
    GitCommandError,
    GitError,
    NoRepositoryError,
    NoStagedChangesError,
)

# Runner utilities
from easycommit.git.runner import (
    _git_exit_code,
    _run_git_command,
    _run_git_interactive,
)

# Backends
from easycommit.git.backend import (
    GitBackend,
    VersionControlBackend,
)


__all__ = [
    # Exceptions
    "GitError",
    "NoRepositoryError",
    "NoStagedChangesError",
    "GitCommandError",
    # Runner
    "_run_git_command",
    "_git_exit_code",
    "_run_git_interactive",
    # Backends
    "VersionControlBackend",
    "GitBackend",
]
