"""Fatal errors surfaced by the parse and save operations.

Each error's ``str()`` is the single human-readable message handed to the
caller. The underlying OSError is kept as ``__cause__``.
"""
from __future__ import annotations


class VocabBookError(Exception):
    pass


class SourceUnavailable(VocabBookError):
    """The vocabulary file could not be opened for reading."""


class DestinationUnavailable(VocabBookError):
    """The output file could not be created or truncated."""

    prefix = "failed to create file: "


class WriteIncomplete(VocabBookError):
    """The payload could not be written in full."""

    prefix = "failed to write file: "
