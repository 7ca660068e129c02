"""Logging setup for the Kan MCP server.

Everything goes to stderr: stdout carries the MCP stdio stream.
"""

import logging
import os
import sys

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers that are too chatty at DEBUG
NOISY_LOGGERS = ("httpx", "httpcore", "mcp")


def get_log_level() -> int:
    """Get log level from LOG_LEVEL environment variable.

    Defaults to WARNING if not set or not a known level name.
    """
    level_name = os.getenv("LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(verbose: bool = False) -> None:
    """
    Configure process-wide logging on stderr.

    Args:
        verbose: If True, log at DEBUG so KanClient request traces are shown
    """
    level = logging.DEBUG if verbose else get_log_level()

    logging.basicConfig(
        level=level,
        format=DEFAULT_FORMAT,
        stream=sys.stderr,
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
