"""Logging setup for easy-commit.

Modules log through `logging.getLogger(__name__)`; the CLI calls
configure_logging() once with the configured level.
"""

import logging
import sys

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

LOG_FORMAT = "[%(levelname)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send easycommit log records to stderr at the given level.

    Args:
        level: One of DEBUG, INFO, WARN, ERROR or SILENT.
    """
    package_logger = logging.getLogger("easycommit")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    name = level.strip().upper()
    if name == "SILENT":
        package_logger.addHandler(logging.NullHandler())
        package_logger.setLevel(logging.CRITICAL + 1)
        package_logger.propagate = False
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(_LEVELS.get(name, logging.INFO))
    package_logger.propagate = False
