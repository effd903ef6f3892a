"""Data models for the easycommit commit module.

Contains:
- CommitType: A Conventional Commits type label
- CommitTypeRegistry: Immutable catalog of the allowed commit types
- ValidationConfig: Pydantic model holding the validation and wrapping limits
- CommitRecord: One candidate commit's fields
"""

from dataclasses import dataclass, field, replace
from typing import Iterator, Optional, Union

from pydantic import BaseModel, ConfigDict, PositiveInt, field_validator

from easycommit.commit.constants import (
    DEFAULT_COMMIT_TYPES,
    DEFAULT_INVALID_SCOPE_CHARS,
    DEFAULT_MAX_BODY_LENGTH,
    DEFAULT_MAX_BODY_LINE_LENGTH,
    DEFAULT_MAX_DESCRIPTION_LENGTH,
)
from easycommit.commit.exceptions import InvalidCommitTypeError
from easycommit.commit.renderer import render_commit_message
from easycommit.commit.validation import validate_record


@dataclass(frozen=True)
class CommitType:
    """A commit type according to Conventional Commits.

    Two types are equal when their names are equal.
    """

    name: str
    description: str = field(default="", compare=False)

    def is_valid(self) -> bool:
        """Check that the name is non-empty and only lowercase ASCII letters."""
        name = self.name.strip()
        if not name:
            return False
        return all("a" <= char <= "z" for char in name)

    def __str__(self) -> str:
        return self.name


class CommitTypeRegistry:
    """Ordered, read-only catalog of commit types."""

    def __init__(self, types: list[CommitType]):
        self._types = tuple(types)

    @classmethod
    def default(cls) -> "CommitTypeRegistry":
        """Build the registry with the default Conventional Commits types."""
        return cls([CommitType(name, description) for name, description in DEFAULT_COMMIT_TYPES])

    def __iter__(self) -> Iterator[CommitType]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)

    def __getitem__(self, index: int) -> CommitType:
        return self._types[index]

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            item = CommitType(item.strip().lower())
        return item in self._types

    def names(self) -> list[str]:
        """Get the type names in display order."""
        return [commit_type.name for commit_type in self._types]

    def get_by_name(self, name: str) -> CommitType:
        """Look up a commit type by name (case-insensitive).

        Args:
            name: The type name, surrounding whitespace is ignored.

        Returns:
            The registered CommitType.

        Raises:
            InvalidCommitTypeError: If no type with that name is registered.
        """
        normalized = name.strip().lower()
        for commit_type in self._types:
            if commit_type.name.lower() == normalized:
                return commit_type
        raise InvalidCommitTypeError(
            f"invalid commit type: '{name}' (valid: {', '.join(self.names())})",
            length=len(name),
        )


class ValidationConfig(BaseModel):
    """Limits applied when validating and formatting a commit.

    Attributes:
        max_description_length: Maximum description length in code points.
        max_body_line_length: Wrap width for body lines in code points.
        max_body_length: Maximum body length in code points.
        invalid_scope_chars: Characters that may not appear in a scope.
    """

    model_config = ConfigDict(frozen=True)

    max_description_length: PositiveInt = DEFAULT_MAX_DESCRIPTION_LENGTH
    max_body_line_length: PositiveInt = DEFAULT_MAX_BODY_LINE_LENGTH
    max_body_length: PositiveInt = DEFAULT_MAX_BODY_LENGTH
    invalid_scope_chars: str = DEFAULT_INVALID_SCOPE_CHARS

    @field_validator("invalid_scope_chars", mode="before")
    @classmethod
    def join_char_list(cls, v):
        """Accept a list of characters as well as a string."""
        if v is None:
            return DEFAULT_INVALID_SCOPE_CHARS
        if isinstance(v, (list, tuple, set, frozenset)):
            return "".join(sorted(str(char) for char in v))
        return v

    @property
    def invalid_scope_charset(self) -> frozenset[str]:
        """The forbidden scope characters as a set."""
        return frozenset(self.invalid_scope_chars)


@dataclass(frozen=True)
class CommitRecord:
    """The fields of one candidate commit.

    Records are immutable; use with_changes() to derive an updated copy.
    """

    type: CommitType = field(default_factory=lambda: CommitType(""))
    scope: str = ""
    description: str = ""
    body: str = ""
    breaking: bool = False
    breaking_note: str = ""

    def __post_init__(self):
        # Accept a bare type name for convenience
        if isinstance(self.type, str):
            object.__setattr__(self, "type", CommitType(self.type))

    def with_changes(self, **changes: Union[str, bool, CommitType]) -> "CommitRecord":
        """Return a copy of this record with the given fields replaced."""
        return replace(self, **changes)

    def has_scope(self) -> bool:
        """Check whether the scope is non-empty after trimming."""
        return self.scope.strip() != ""

    def is_breaking(self) -> bool:
        """Check whether the commit is a breaking change."""
        return self.breaking

    def validate(self, config: Optional[ValidationConfig] = None) -> None:
        """Check the record against the Conventional Commits rules.

        Checks run in a fixed order: type, description, scope, body. The
        first failure is raised.

        Args:
            config: Validation limits. Defaults to ValidationConfig().

        Raises:
            CommitValidationError: The first failing check.
        """
        validate_record(self, config or ValidationConfig())

    def format(self, config: Optional[ValidationConfig] = None) -> str:
        """Build the Conventional Commits message for this record.

        Args:
            config: Validation limits, used for body wrapping.

        Returns:
            The commit message, without a trailing newline.
        """
        return render_commit_message(self, config or ValidationConfig())
