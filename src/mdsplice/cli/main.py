# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mdsplice/cli/main.py

"""Main CLI entry point for mdsplice."""

import typer

from mdsplice.cli.commands.replace import main as replace_command
from mdsplice.cli.commands.update_readme import main as update_readme_command
from mdsplice.logging.setup import setup_logging

app = typer.Typer(
    name="mdsplice",
    help="Regenerate marked sections of README files with fenced code blocks",
    no_args_is_help=True,
)

app.command("replace", help="Replace the text between two markers with a fenced block")(replace_command)
app.command("update-readme", help="Refresh the CLI help section of README.md")(update_readme_command)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
):
    """mdsplice: marker-delimited README updates."""
    setup_logging(verbose=verbose)


if __name__ == "__main__":
    app()
