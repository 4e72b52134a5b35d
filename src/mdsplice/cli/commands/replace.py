# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mdsplice/cli/commands/replace.py

"""Replace command for splicing arbitrary text between markers."""

import sys
from pathlib import Path
from typing import Optional

import typer

from mdsplice.config import DEFAULT_FILE
from mdsplice.errors import MdspliceError
from mdsplice.splice import replace_section


def main(
    content: Optional[str] = typer.Argument(None, help="Text to insert, or '-' to read stdin"),
    begin_marker: str = typer.Option(..., "--begin-marker", "-b", help="Literal begin marker"),
    end_marker: str = typer.Option(..., "--end-marker", "-e", help="Literal end marker"),
    file: str = typer.Option(DEFAULT_FILE, "--file", "-f", help="File to rewrite in place"),
    lang: str = typer.Option("", "--lang", "-l", help="Language tag for the fence"),
    from_file: Optional[Path] = typer.Option(None, "--from-file", help="Read the text to insert from this file"),
):
    """Replace the text between two markers with a fenced block."""
    try:
        if from_file is not None:
            content = from_file.read_text(encoding="utf-8")
        elif content == "-":
            content = sys.stdin.read()
        replace_section(content, file_path=file, begin_marker=begin_marker, end_marker=end_marker, lang=lang)
    except (MdspliceError, OSError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
