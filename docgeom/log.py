"""Logging setup helper.

The library only creates module loggers; applications call setup_logging()
once at startup to route them somewhere.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from .constants import LOG_FORMAT, VALID_LOG_LEVELS
from .exceptions import InvalidConfigError


def setup_logging(level: str = "INFO", log_file: str | Path | None = None) -> None:
    """Configure root logging with a stdout handler and an optional log file.

    Existing root handlers are removed first, so repeated calls take effect.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path of a file that receives the same records

    Raises:
        InvalidConfigError: If level is not a known log level name
    """
    if level.upper() not in VALID_LOG_LEVELS:
        raise InvalidConfigError(f"Unknown log level: {level}. Use one of {', '.join(VALID_LOG_LEVELS)}.")

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
