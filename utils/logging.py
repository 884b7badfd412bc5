from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "ambient_dashboard"

console = Console(stderr=True)


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the dashboard logger with a Rich console handler.

    Streamlit re-executes the script on every interaction, so existing
    handlers are cleared first to keep each record printed once.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers.clear()

    handler = RichHandler(console=console, rich_tracebacks=True, show_path=False)
    handler.setLevel(getattr(logging, level.upper()))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
