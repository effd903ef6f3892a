"""Conventional Commits message renderer for easycommit.

Format:
    <type>[(<scope>)][!]: <description>

    <wrapped body>

    BREAKING CHANGE: <note>

Contains:
- wrap_body: Re-flow body lines that exceed the wrap width
- render_header: Build the header line
- render_breaking_footer: Build the BREAKING CHANGE footer
- render_commit_message: Build the full message
"""

from typing import TYPE_CHECKING

from easycommit.commit.constants import BREAKING_CHANGE_TOKEN, DEFAULT_BREAKING_CHANGE_NOTE

if TYPE_CHECKING:
    from easycommit.commit.models import CommitRecord, ValidationConfig


def wrap_body(body: str, width: int = 72) -> str:
    """Wrap body text so over-long lines fit within width.

    Lines already within the width are kept verbatim, including their
    internal spacing. Longer lines are re-flowed greedily by words joined
    with single spaces. A single word longer than the width stays on its
    own line.

    Args:
        body: Body text, possibly multi-line.
        width: Maximum line width in code points.

    Returns:
        Wrapped body text.
    """
    lines = []
    for line in body.split("\n"):
        if len(line) <= width:
            lines.append(line)
            continue

        current = ""
        for word in line.split():
            if current and len(current) + 1 + len(word) > width:
                lines.append(current)
                current = ""
            current = f"{current} {word}" if current else word
        if current:
            lines.append(current)

    return "\n".join(lines)


def render_header(record: "CommitRecord") -> str:
    """Build the header line: type, optional scope, breaking marker, description."""
    header = record.type.name
    if record.has_scope():
        header += f"({record.scope})"
    if record.is_breaking():
        header += "!"
    return f"{header}: {record.description}"


def render_breaking_footer(record: "CommitRecord") -> str:
    """Build the BREAKING CHANGE footer.

    An explicit breaking note wins. Without one, the fixed note is only
    added when the commit has a body; otherwise the footer ends after the
    colon and space.
    """
    note = record.breaking_note.strip()
    if not note and record.body:
        note = DEFAULT_BREAKING_CHANGE_NOTE
    return f"{BREAKING_CHANGE_TOKEN}: {note}"


def render_commit_message(record: "CommitRecord", config: "ValidationConfig") -> str:
    """Render the commit message for a record.

    Args:
        record: A record that has passed validation.
        config: Validation limits; max_body_line_length is the wrap width.

    Returns:
        Formatted commit message, without a trailing newline.
    """
    parts = [render_header(record)]

    if record.body:
        parts.append("")  # Blank line
        parts.append(wrap_body(record.body, config.max_body_line_length))

    if record.is_breaking():
        parts.append("")  # Blank line before footer
        parts.append(render_breaking_footer(record))

    return "\n".join(parts)
