"""Commit records, validation and Conventional Commits formatting.

This package provides:
- constants: DEFAULT_COMMIT_TYPES and the default validation limits
- exceptions: CommitValidationError and its per-field subclasses
- models: CommitType, CommitTypeRegistry, ValidationConfig, CommitRecord
- validation: Per-field rules and validate_record
- renderer: wrap_body, render_header, render_commit_message
"""

# Constants
from easycommit.commit.constants import (
    BREAKING_CHANGE_TOKEN,
    DEFAULT_BREAKING_CHANGE_NOTE,
    DEFAULT_COMMIT_TYPES,
)

# Exceptions
from easycommit.commit.exceptions import (
    BodyTooLongError,
    CommitValidationError,
    DescriptionTooLongError,
    EmptyDescriptionError,
    InvalidCommitTypeError,
    InvalidScopeFormatError,
)

# Models
from easycommit.commit.models import (
    CommitRecord,
    CommitType,
    CommitTypeRegistry,
    ValidationConfig,
)

# Validation rules
from easycommit.commit.validation import (
    RECORD_RULES,
    validate_body,
    validate_description,
    validate_record,
    validate_scope,
    validate_type,
)

# Renderer
from easycommit.commit.renderer import (
    render_commit_message,
    render_header,
    wrap_body,
)


__all__ = [
    # Constants
    "BREAKING_CHANGE_TOKEN",
    "DEFAULT_BREAKING_CHANGE_NOTE",
    "DEFAULT_COMMIT_TYPES",
    # Exceptions
    "CommitValidationError",
    "InvalidCommitTypeError",
    "EmptyDescriptionError",
    "DescriptionTooLongError",
    "InvalidScopeFormatError",
    "BodyTooLongError",
    # Models
    "CommitType",
    "CommitTypeRegistry",
    "ValidationConfig",
    "CommitRecord",
    # Validation
    "RECORD_RULES",
    "validate_type",
    "validate_description",
    "validate_scope",
    "validate_body",
    "validate_record",
    # Renderer
    "wrap_body",
    "render_header",
    "render_commit_message",
]
