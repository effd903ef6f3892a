"""Validation rules for commit records.

Each rule checks one field of a CommitRecord and raises the matching
CommitValidationError subclass. The rules are pure: they perform no I/O and
never modify the record, so they can be run from several threads at once.

Contains:
- validate_type: Commit type must be non-empty lowercase ASCII letters
- validate_description: Description must be non-blank and within its limit
- validate_scope: Scope must be trimmed and free of forbidden characters
- validate_body: Body must be within its limit
- validate_record: Run all rules in their fixed order
- RECORD_RULES: The rules above, in order
"""

from typing import TYPE_CHECKING, Callable

from easycommit.commit.exceptions import (
    BodyTooLongError,
    DescriptionTooLongError,
    EmptyDescriptionError,
    InvalidCommitTypeError,
    InvalidScopeFormatError,
)

if TYPE_CHECKING:
    from easycommit.commit.models import CommitRecord, ValidationConfig


def validate_type(record: "CommitRecord", config: "ValidationConfig") -> None:
    """Check the commit type name."""
    if not record.type.is_valid():
        raise InvalidCommitTypeError(
            f"invalid commit type: '{record.type.name}'",
            length=len(record.type.name),
        )


def validate_description(record: "CommitRecord", config: "ValidationConfig") -> None:
    """Check that the description is non-empty and within length limits."""
    description = record.description
    if description.strip() == "":
        raise EmptyDescriptionError(
            "description cannot be empty",
            length=len(description),
        )

    length = len(description)
    if length > config.max_description_length:
        raise DescriptionTooLongError(
            f"description too long: {length} characters (max {config.max_description_length})",
            length=length,
            limit=config.max_description_length,
        )


def validate_scope(record: "CommitRecord", config: "ValidationConfig") -> None:
    """Check that a non-empty scope is trimmed and has no forbidden characters."""
    scope = record.scope
    if scope == "":
        return

    forbidden = config.invalid_scope_charset
    if scope != scope.strip() or any(char in forbidden for char in scope):
        raise InvalidScopeFormatError(
            f"scope contains invalid characters: {scope!r}",
            length=len(scope),
        )


def validate_body(record: "CommitRecord", config: "ValidationConfig") -> None:
    """Check that the body is within length limits."""
    if record.body == "":
        return

    length = len(record.body)
    if length > config.max_body_length:
        raise BodyTooLongError(
            f"body too long: {length} characters (max {config.max_body_length})",
            length=length,
            limit=config.max_body_length,
        )


RECORD_RULES: list[Callable[["CommitRecord", "ValidationConfig"], None]] = [
    validate_type,
    validate_description,
    validate_scope,
    validate_body,
]


def validate_record(record: "CommitRecord", config: "ValidationConfig") -> None:
    """Run every rule in order and raise the first failure.

    Args:
        record: The commit record to check.
        config: Validation limits.

    Raises:
        CommitValidationError: The first failing rule's error.
    """
    for rule in RECORD_RULES:
        rule(record, config)
