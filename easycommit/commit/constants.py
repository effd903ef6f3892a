"""Constants for the easycommit commit module.

Contains:
- DEFAULT_COMMIT_TYPES: Default commit type names and descriptions (in display order)
- BREAKING_CHANGE_TOKEN: Footer token for breaking changes
- DEFAULT_BREAKING_CHANGE_NOTE: Footer text used when a body is present
- DEFAULT_INVALID_SCOPE_CHARS: Characters rejected in a scope
"""

# Default commit types (name, description), in display order
DEFAULT_COMMIT_TYPES = [
    (
        "build",
        "Changes that affect the build system or external dependencies (example scopes: gulp, broccoli, npm)",
    ),
    (
        "chore",
        "Changes to the build process or auxiliary tools and libraries such as documentation generation",
    ),
    (
        "ci",
        "Changes to our CI configuration files and scripts (example scopes: Travis, Circle, BrowserStack, SauceLabs)",
    ),
    ("docs", "Documentation only changes"),
    ("feat", "A new feature"),
    ("fix", "A bug fix"),
    ("perf", "A code change that improves performance"),
    ("refactor", "A code change that neither fixes a bug nor adds a feature"),
    (
        "style",
        "Changes that do not affect the meaning of the code (white-space, formatting, missing semi-colons, etc.)",
    ),
    ("test", "Adding missing tests or correcting existing tests"),
]

BREAKING_CHANGE_TOKEN = "BREAKING CHANGE"

DEFAULT_BREAKING_CHANGE_NOTE = "This commit introduces a breaking change."

DEFAULT_MAX_DESCRIPTION_LENGTH = 72
DEFAULT_MAX_BODY_LINE_LENGTH = 72
DEFAULT_MAX_BODY_LENGTH = 500
DEFAULT_INVALID_SCOPE_CHARS = " \t\n()"
