"""Exceptions raised while normalizing render options."""

from __future__ import annotations


class SassExtraError(Exception):
    """Base class for errors raised by sass-extra."""


class InvalidRequestError(SassExtraError, ValueError):
    """The options are malformed or name no source at all."""


class MissingDestinationError(SassExtraError, ValueError):
    """A source map was requested without an output destination."""


class InvalidDestinationError(SassExtraError, ValueError):
    """A computed destination does not look like a file path."""
