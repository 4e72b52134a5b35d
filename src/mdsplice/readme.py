# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mdsplice/readme.py

"""Update the CLI help section of README.md from the CLI itself."""

import subprocess
from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
from loguru import logger

from mdsplice.config import CLI_HELP, ReadmeConfig
from mdsplice.errors import MdspliceError
from mdsplice.helpgen import capture_help
from mdsplice.splice import replace_in_target


def update_readme(config: ReadmeConfig = CLI_HELP, cwd: Optional[str] = None) -> bool:
    """Capture help output and splice it into the configured file.

    The command runs before the file is read, so a failing command leaves
    the file as it was. Relative target paths resolve against cwd.
    """
    help_output = capture_help(config.command, cwd=cwd)
    target = config.target
    if cwd is not None:
        target = replace(target, path=str(Path(cwd) / target.path))
    return replace_in_target(help_output, target)


def stage_file(path: str, cwd: Optional[str] = None) -> None:
    """Stage path with git add."""
    subprocess.run(["git", "add", path], cwd=cwd, check=True)
    logger.info(f"Staged {path}")


def main(config: ReadmeConfig = CLI_HELP, cwd: Optional[str] = None, git_add: bool = False) -> int:
    """Run the update and return a process exit status (0 ok, 1 failure)."""
    try:
        changed = update_readme(config, cwd=cwd)
        if changed and git_add:
            stage_file(config.target.path, cwd=cwd)
    except (MdspliceError, OSError, ValueError, subprocess.CalledProcessError) as e:
        logger.debug(f"{type(e).__name__} while updating {config.target.path}")
        typer.echo(f"Error: {e}", err=True)
        return 1
    return 0
