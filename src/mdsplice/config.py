# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mdsplice/config.py

"""Immutable configuration records for splice targets."""

from dataclasses import dataclass, field
from typing import Tuple

DEFAULT_FILE = "README.md"
CLI_HELP_BEGIN = "<!-- BEGIN_CLI_HELP -->"
CLI_HELP_END = "<!-- END_CLI_HELP -->"
CLI_HELP_COMMAND = ("cargo", "run", "--quiet", "--", "--help")


@dataclass(frozen=True)
class SpliceTarget:
    """A file and the pair of markers delimiting its generated region."""
    begin_marker: str
    end_marker: str
    path: str = DEFAULT_FILE
    lang: str = ""  # fence language tag, empty for none


@dataclass(frozen=True)
class ReadmeConfig:
    """Where the help text goes and which command produces it."""
    target: SpliceTarget
    command: Tuple[str, ...] = field(default=CLI_HELP_COMMAND)


CLI_HELP = ReadmeConfig(
    target=SpliceTarget(begin_marker=CLI_HELP_BEGIN, end_marker=CLI_HELP_END),
    command=CLI_HELP_COMMAND,
)
