# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mdsplice/helpgen.py

"""Capture a CLI's help output for splicing into docs."""

import subprocess
from typing import Optional, Sequence

from loguru import logger

from mdsplice.errors import ExternalCommandError


def capture_help(command: Sequence[str], cwd: Optional[str] = None) -> str:
    """
    Run command to completion and return its stripped stdout.

    Raises:
        ExternalCommandError: the command could not start, exited non-zero,
            printed undecodable bytes, or printed only whitespace
    """
    logger.debug(f"Running {' '.join(command)}")
    try:
        result = subprocess.run(
            list(command),
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        message = str(e)
        if stderr:
            message = f"{message}\n{stderr}"
        raise ExternalCommandError(message) from e
    except OSError as e:
        raise ExternalCommandError(str(e)) from e
    except UnicodeDecodeError as e:
        raise ExternalCommandError(f"Help output is not valid text: {e}") from e

    help_output = result.stdout.strip()
    if not help_output:
        raise ExternalCommandError("Failed to generate help output")

    logger.debug(f"Captured {len(help_output.splitlines())} lines of help output")
    return help_output
