"""Shared test fixtures and configuration."""

import logging
import tempfile
from pathlib import Path

import pytest

from easycommit.commit import CommitRecord, CommitTypeRegistry, ValidationConfig
from easycommit.git import GitCommandError, VersionControlBackend
from easycommit.orchestrator import CommitOrchestrator
from easycommit.validator import RuleValidator


class FakeBackend(VersionControlBackend):
    """In-memory backend that records the calls made to it."""

    def __init__(self, is_repo=True, has_staged=True, commit_error=None, last_message="feat: initial"):
        self.is_repo = is_repo
        self.has_staged = has_staged
        self.commit_error = commit_error
        self.last_message = last_message
        self.calls = []
        self.messages = []

    def is_repository(self):
        self.calls.append("is_repository")
        return self.is_repo

    def has_staged_changes(self):
        self.calls.append("has_staged_changes")
        return self.has_staged

    def commit(self, message):
        self.calls.append("commit")
        if self.commit_error is not None:
            raise self.commit_error
        self.messages.append(message)

    def get_last_commit_message(self):
        self.calls.append("get_last_commit_message")
        if self.last_message is None:
            raise GitCommandError("does not have any commits yet")
        return self.last_message


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo configure_logging() so caplog sees package records."""
    yield
    package_logger = logging.getLogger("easycommit")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def registry():
    """The default commit type registry."""
    return CommitTypeRegistry.default()


@pytest.fixture
def config():
    """Default validation limits."""
    return ValidationConfig()


@pytest.fixture
def valid_record(registry):
    """A record that passes every rule."""
    return CommitRecord(
        type=registry.get_by_name("fix"),
        scope="auth",
        description="resolve authentication bug",
    )


@pytest.fixture
def make_backend():
    """Factory for fake backends with custom repository state."""
    return FakeBackend


@pytest.fixture
def fake_backend():
    """A backend inside a repository with staged changes."""
    return FakeBackend()


@pytest.fixture
def orchestrator(fake_backend, config):
    """An orchestrator wired to the fake backend."""
    return CommitOrchestrator(fake_backend, RuleValidator(config), config)
