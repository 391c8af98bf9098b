"""Error types for gif-braille."""

from __future__ import annotations


class GifBrailleError(Exception):
    """Base class for errors that end a run."""


class UsageError(GifBrailleError):
    """No input path was given."""


class DecodeError(GifBrailleError):
    """The input file is unreadable or not a GIF."""


class EmptyResultError(GifBrailleError):
    """Decoding worked but no frame survived conversion."""


class SurfaceError(GifBrailleError):
    """The terminal draw surface failed during playback."""
