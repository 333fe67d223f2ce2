from __future__ import annotations

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler


LOGGER_NAME = "commentflow"


def setup_logger(level: Union[str, int] = "INFO") -> logging.Logger:
    """Send ``commentflow`` logs to stderr through rich.

    Only the package logger is configured, so a host application's root
    logging is left alone and stdout stays free for reflowed text. Calling it
    again just changes the level.
    """
    numeric_level = level if isinstance(level, int) else getattr(logging, level.upper(), logging.INFO)
    logger = logging.getLogger(LOGGER_NAME)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        console = Console(stderr=True, highlight=False)
        handler = RichHandler(console=console, show_time=False, show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(numeric_level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or LOGGER_NAME)
