"""Version-control backend interface and its git implementation."""

import logging
from abc import ABC, abstractmethod

from easycommit.git.exceptions import GitCommandError, GitError
from easycommit.git.runner import _git_exit_code, _run_git_command, _run_git_interactive

logger = logging.getLogger(__name__)


class VersionControlBackend(ABC):
    """Interface the commit orchestrator uses to talk to version control."""

    @abstractmethod
    def is_repository(self) -> bool:
        """Check whether the working directory is under version control."""
        pass

    @abstractmethod
    def has_staged_changes(self) -> bool:
        """Check whether there are staged changes to commit."""
        pass

    @abstractmethod
    def commit(self, message: str) -> None:
        """Create a commit with the given message.

        Raises:
            GitError: If the commit could not be created.
        """
        pass

    @abstractmethod
    def get_last_commit_message(self) -> str:
        """Get the message of the most recent commit.

        Raises:
            GitError: If the message could not be read.
        """
        pass


class GitBackend(VersionControlBackend):
    """Backend that shells out to the git executable.

    Args:
        command_timeout: Seconds allowed for query commands.
        commit_timeout: Seconds allowed for `git commit`, which may run hooks.
    """

    def __init__(self, command_timeout: float = 5.0, commit_timeout: float = 300.0):
        self.command_timeout = command_timeout
        self.commit_timeout = commit_timeout

    def is_repository(self) -> bool:
        try:
            code = _git_exit_code(["rev-parse", "--git-dir"], timeout=self.command_timeout)
        except GitError as e:
            logger.debug("Not a git repository: %s", e)
            return False

        logger.debug("Git repository detected: %s", code == 0)
        return code == 0

    def has_staged_changes(self) -> bool:
        # Exit code 1 means there are staged changes, 0 means none
        code = _git_exit_code(["diff", "--cached", "--quiet"], timeout=self.command_timeout)
        if code not in (0, 1):
            raise GitCommandError(f"Git command failed: git diff --cached --quiet exited with code {code}")

        has_changes = code == 1
        logger.debug("Has staged changes: %s", has_changes)
        return has_changes

    def commit(self, message: str) -> None:
        logger.info("Executing git commit")
        _run_git_interactive(["commit", "-m", message], timeout=self.commit_timeout)
        logger.info("Git commit successful")

    def get_last_commit_message(self) -> str:
        message = _run_git_command(["log", "-1", "--pretty=%B"], timeout=self.command_timeout)
        logger.debug("Last commit message: %s", message)
        return message
