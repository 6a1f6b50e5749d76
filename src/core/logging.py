"""Loguru setup for the CLI entry point."""

from __future__ import annotations

import sys

from loguru import logger

from config import Settings


def configure_logging(settings: Settings) -> None:
    """Replace loguru's default handler with the configured sinks."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.log_level,
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )
    if settings.log_file:
        logger.add(
            settings.log_file,
            level="DEBUG",
            rotation="1 MB",
            retention=3,
            encoding="utf-8",
        )
