# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mdsplice/splice.py

"""
Replace the region between two marker lines of a text file with a fenced block.

The begin marker is kept, followed by a newline, the fenced block, another
newline, and then everything from the end marker onward. Markers are matched
literally and only their first occurrence counts.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from mdsplice.config import DEFAULT_FILE, SpliceTarget
from mdsplice.errors import ConfigurationError, MarkerOrderError, MarkersNotFoundError

FENCE = "```"


def fenced_block(text: str, lang: str = "") -> str:
    """Wrap text in a triple-backtick fence with an optional language tag."""
    return f"{FENCE}{lang}\n{text}\n{FENCE}"


def splice_text(
    document: str,
    content: str,
    begin_marker: str,
    end_marker: str,
    lang: str = "",
    source: str = "<string>",
) -> str:
    """
    Return document with the region between the markers replaced.

    Args:
        document: Full text to splice into
        content: Text to place inside the fenced block
        begin_marker: Literal string opening the region (kept)
        end_marker: Literal string closing the region (kept)
        lang: Language tag for the fence
        source: Name used in error messages

    Returns:
        The new document text

    Raises:
        MarkersNotFoundError: either marker is missing
        MarkerOrderError: the end marker starts inside or before the begin marker
    """
    # Both searches start at 0
    begin_index = document.find(begin_marker)
    end_index = document.find(end_marker)

    if begin_index == -1 or end_index == -1:
        raise MarkersNotFoundError(f"Markers not found in {source}")

    head_end = begin_index + len(begin_marker)
    if end_index < head_end:
        raise MarkerOrderError(
            f"End marker {end_marker!r} appears before begin marker {begin_marker!r} in {source}"
        )

    logger.debug(f"{source}: replacing characters {head_end}..{end_index}")
    return document[:head_end] + "\n" + fenced_block(content, lang) + "\n" + document[end_index:]


def replace_section(
    content: Optional[str],
    file_path: str = DEFAULT_FILE,
    begin_marker: Optional[str] = None,
    end_marker: Optional[str] = None,
    lang: str = "",
) -> bool:
    """
    Rewrite file_path so the region between the markers holds content.

    The file is read once, the new text is built in memory, and it is written
    back with a single call only if it differs. Nothing is written on error.

    Returns:
        True if the file changed, False if it was already up to date
    """
    if not content:
        raise ConfigurationError("Content is required")
    if not begin_marker or not end_marker:
        raise ConfigurationError("Begin and end markers are required")

    path = Path(file_path)
    current = path.read_text(encoding="utf-8")
    updated = splice_text(current, content, begin_marker, end_marker, lang, source=str(file_path))

    if updated == current:
        logger.info(f"{file_path} is up to date")
        return False

    path.write_text(updated, encoding="utf-8")
    logger.info(f"{file_path} updated successfully")
    return True


def replace_in_target(content: Optional[str], target: SpliceTarget) -> bool:
    """Run replace_section against a configured target."""
    return replace_section(
        content,
        file_path=target.path,
        begin_marker=target.begin_marker,
        end_marker=target.end_marker,
        lang=target.lang,
    )
