"""Logging configuration shared by the bot and the CLI."""

from __future__ import annotations

import logging
import os
import sys


def configure_logging(level: str | None = None) -> None:
    """Configure process-wide logging to stderr.

    stdout is reserved for CLI output (resolution JSON). Setting values and API credentials must
    never be logged.
    """

    log_level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )

    logging.getLogger("aiogram.event").setLevel(logging.WARNING)
