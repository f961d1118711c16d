"""Centralized logging configuration for the application."""

import sys

from loguru import logger

from md_styler.constants import DEFAULT_LOG_LEVEL


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """
    Configure logging for the application.

    Logs go to stderr so that nothing but the tool's own output reaches stdout.

    Args:
        level: Minimum level to log, e.g. "DEBUG" or "INFO"
    """
    # Remove any existing handlers
    logger.remove()

    logger.add(
        sink=sys.stderr,
        level=level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
    )
