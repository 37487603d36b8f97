"""Logging configuration for the TUI.

The full-screen UI owns the terminal, so records go to a file or nowhere,
never to stdout/stderr.
"""

import logging
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "todo_tui"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(value: Union[str, int, None], default: int = logging.INFO) -> int:
    if isinstance(value, int):
        return value
    if not value:
        return default
    level = logging.getLevelName(str(value).strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(log_file: Optional[Path] = None, level: Union[str, int, None] = None) -> logging.Logger:
    """Configure the ``todo_tui`` logger. Safe to call more than once."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False
    logger.setLevel(resolve_level(level))

    if log_file is None:
        logger.addHandler(logging.NullHandler())
        return logger

    log_file = Path(log_file).expanduser()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(str(log_file), encoding="utf-8")
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    return logger


__all__ = ["LOGGER_NAME", "LOG_FORMAT", "resolve_level", "setup_logging"]
