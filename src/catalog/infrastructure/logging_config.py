"""Application-wide logging configuration."""

import logging

from rich.console import Console
from rich.logging import RichHandler

from catalog.infrastructure.config import settings


def setup_logging(level: str | None = None) -> None:
    """Configures logging for the application.

    Log output goes to stderr so command output on stdout (tables, JSON
    envelopes) stays machine-readable.
    """
    log_level_str = (level or settings.LOG_LEVEL).upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    rich_handler = RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_level=True,
        show_path=False,
        markup=False,
        tracebacks_word_wrap=True,
    )

    root_logger.addHandler(rich_handler)

    if len(root_logger.handlers) > 1:
        root_logger.handlers = [rich_handler]
