# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mdsplice/logging/setup.py

"""Logging configuration for mdsplice."""

import sys

from loguru import logger


def setup_logging(verbose: bool = False) -> None:
    """Configure loguru for console output on stderr."""
    logger.remove()  # Remove default handler
    level = "DEBUG" if verbose else "INFO"
    logger.add(
        sys.stderr,
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {message}",
        level=level,
    )
