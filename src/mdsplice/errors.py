# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/mdsplice/errors.py

"""Exceptions raised by mdsplice."""


class MdspliceError(Exception):
    """Base class for mdsplice errors."""


class ConfigurationError(MdspliceError):
    """A required argument (content or marker) is missing."""


class MarkersNotFoundError(MdspliceError):
    """One or both markers are absent from the file."""


class MarkerOrderError(MarkersNotFoundError):
    """The end marker appears before the begin marker."""


class ExternalCommandError(MdspliceError):
    """The content-generating command failed or printed nothing."""
