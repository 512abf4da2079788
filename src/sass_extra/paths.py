"""Path classification helpers."""

from __future__ import annotations

import re

STYLESHEET_RE = re.compile(r"\.(s[ac]ss|css)\Z")
FILE_SUFFIX_RE = re.compile(r"\.[^\s/\\]+\Z")


def is_stylesheet_path(value: object) -> bool:
    """True when ``value`` names a .scss, .sass or .css file."""
    return isinstance(value, str) and STYLESHEET_RE.search(value) is not None


def is_file_path(value: object) -> bool:
    """
    True when the last path component of ``value`` ends in any dot-suffix.
    Anything else is treated as a directory when resolving destinations.
    """
    return isinstance(value, str) and FILE_SUFFIX_RE.search(value) is not None
