# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mdsplice/cli/commands/update_readme.py

"""Update-readme command for refreshing the CLI help section."""

import shlex
from dataclasses import replace
from typing import Optional

import typer

from mdsplice.config import CLI_HELP
from mdsplice.readme import main as run_update


def main(
    file: Optional[str] = typer.Option(None, "--file", "-f", help="README to update [default: README.md]"),
    begin_marker: Optional[str] = typer.Option(None, "--begin-marker", "-b", help="Override the begin marker"),
    end_marker: Optional[str] = typer.Option(None, "--end-marker", "-e", help="Override the end marker"),
    command: Optional[str] = typer.Option(None, "--command", help="Help command to run [default: cargo run --quiet -- --help]"),
    git_add: bool = typer.Option(False, "--git-add", help="Stage the README with git add when it changes"),
):
    """Refresh the CLI help section of README.md."""
    target = CLI_HELP.target
    if file:
        target = replace(target, path=file)
    if begin_marker:
        target = replace(target, begin_marker=begin_marker)
    if end_marker:
        target = replace(target, end_marker=end_marker)

    config = replace(CLI_HELP, target=target)
    if command:
        config = replace(config, command=tuple(shlex.split(command)))

    status = run_update(config, git_add=git_add)
    if status != 0:
        raise typer.Exit(code=status)
