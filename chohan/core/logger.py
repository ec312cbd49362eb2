"""
Logging setup for Cho-Han.
Log records go to stderr through rich so they never mix with the narration.
"""
import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


LOGGER_NAME = "chohan"

_app_logger: Optional[logging.Logger] = None


def setup_logger(name: str = LOGGER_NAME, level: str = "WARNING") -> logging.Logger:
    """Configure the package logger with a rich handler on stderr.

    Calling it again only updates the level; handlers are added once.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    if not logger.handlers:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get the package logger, or one of its children (e.g. "game")."""
    global _app_logger

    if _app_logger is None:
        _app_logger = logging.getLogger(LOGGER_NAME)

    if name:
        return _app_logger.getChild(name)
    return _app_logger


def init_logging(level: str = "WARNING") -> logging.Logger:
    """Initialize logging once at application startup."""
    global _app_logger
    _app_logger = setup_logger(level=level)
    _app_logger.debug("Logging initialized at %s level", level.upper())
    return _app_logger
