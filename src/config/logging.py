"""Logging configuration for the command-line tool."""

from __future__ import annotations

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure Python logging for the process.

    The level comes from the argument, then `LOG_LEVEL`, then defaults to INFO. Logs go to stderr so
    that rendered names and validation results on stdout stay machine readable.
    """

    log_level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(level=log_level, format=LOG_FORMAT, stream=sys.stderr)
