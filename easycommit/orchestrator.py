"""Commit creation pipeline.

The orchestrator checks the repository state, validates the record under a
deadline, formats the message and hands it to the version-control backend.
Nothing is retried and nothing is cleaned up: the backend either creates the
commit or it does not.
"""

import logging
import threading
from typing import Optional

from easycommit.commit import CommitRecord, ValidationConfig
from easycommit.git import (
    GitCommandError,
    GitError,
    NoRepositoryError,
    NoStagedChangesError,
    VersionControlBackend,
)
from easycommit.validator import RuleValidator

logger = logging.getLogger(__name__)

DEFAULT_VALIDATION_TIMEOUT = 2.0


class CommitOrchestrator:
    """Sequence the commit-creation protocol.

    Args:
        backend: Version-control backend that performs the commit.
        validator: Rule validator run before formatting.
        config: Limits used for formatting; defaults to the validator's.
        validation_timeout: Seconds allowed for validation.
    """

    def __init__(
        self,
        backend: VersionControlBackend,
        validator: RuleValidator,
        config: Optional[ValidationConfig] = None,
        validation_timeout: float = DEFAULT_VALIDATION_TIMEOUT,
    ):
        self.backend = backend
        self.validator = validator
        self.config = config or validator.config
        self.validation_timeout = validation_timeout

    def create_commit(self, record: CommitRecord, cancel_event: Optional[threading.Event] = None) -> None:
        """Validate, format and commit a record.

        Args:
            record: The commit record to commit.
            cancel_event: Optional event that abandons validation when set.

        Raises:
            NoRepositoryError: If the working directory is not a repository.
            NoStagedChangesError: If nothing is staged.
            CommitValidationError: If the record breaks a rule.
            ValidationTimeoutError: If validation ran out of time.
            GitCommandError: If the backend failed to commit.
        """
        logger.info("Starting commit creation: %s", record.description)

        if not self.backend.is_repository():
            logger.error("Not a git repository")
            raise NoRepositoryError("not a git repository")

        if not self.backend.has_staged_changes():
            logger.error("No staged changes to commit")
            raise NoStagedChangesError("no staged changes")

        try:
            self.validator.validate(record, timeout=self.validation_timeout, cancel_event=cancel_event)
        except Exception as e:
            logger.error("Validation failed: %s", e)
            raise

        message = record.format(self.config)
        logger.debug("Formatted commit message: %s", message)

        try:
            self.backend.commit(message)
        except GitCommandError as e:
            logger.error("Git commit failed: %s", e)
            raise
        except GitError as e:
            logger.error("Git commit failed: %s", e)
            raise GitCommandError(f"git commit failed: {e}") from e

        logger.info("Commit created successfully")

    def preview_commit(self, record: CommitRecord) -> str:
        """Return the formatted message without touching the backend."""
        return record.format(self.config)

    def last_commit_message(self) -> str:
        """Return the message of the most recent commit."""
        return self.backend.get_last_commit_message()
