#!/usr/bin/env python3
"""Update CLI help output in README.md"""

import typer

from mdsplice.config import CLI_HELP
from mdsplice.logging.setup import setup_logging
from mdsplice.readme import main as run_update


def main(
    git_add: bool = typer.Option(False, "--git-add", help="Stage README.md with git add when it changes"),
):
    """Refresh the CLI help section of README.md in the current directory."""
    setup_logging()
    status = run_update(CLI_HELP, git_add=git_add)
    if status != 0:
        raise typer.Exit(code=status)


if __name__ == "__main__":
    typer.run(main)
