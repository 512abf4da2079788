"""Output and source-map path resolution."""

from __future__ import annotations

import inspect
import os
import re
from typing import Any, Callable

from sass_extra.errors import InvalidDestinationError
from sass_extra.models.render_options import OutputSpec, SourceMapSpec
from sass_extra.paths import is_file_path, is_stylesheet_path

STYLESHEET_SUFFIX_RE = re.compile(r"\.(s[ac]|c)ss\Z")


def _accepts_two_args(func: Callable[..., Any]) -> bool:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return True
    positional = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return True
        if parameter.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            positional += 1
    return positional >= 2


def normalize_css_path(path: str) -> str:
    if STYLESHEET_SUFFIX_RE.search(path):
        return STYLESHEET_SUFFIX_RE.sub(".css", path)
    return f"{path}.css"


def normalize_map_path(path: str) -> str:
    if path.endswith(".map"):
        return path
    return f"{path}.map"


def resolve_out_file(source: str, out_file: OutputSpec) -> str:
    """
    Compute the absolute CSS path for ``source``.

    A callable is invoked once with the source. For file sources a result
    without a file suffix is a directory and receives the source's base name;
    literal data has no base name, so its destination must name a file.
    """
    candidate = out_file(source) if callable(out_file) else out_file
    if isinstance(candidate, os.PathLike):
        candidate = os.fspath(candidate)

    if is_stylesheet_path(source) and isinstance(candidate, str) and not is_file_path(candidate):
        candidate = os.path.join(candidate, os.path.basename(source))

    if not is_file_path(candidate):
        raise InvalidDestinationError(f'"{candidate}" is not a valid file path for "output" or "out_file".')

    return os.path.abspath(normalize_css_path(candidate))


def resolve_source_map_file(out_file: str, source_map: SourceMapSpec, source: str | None = None) -> str:
    candidate: Any = source_map
    if callable(source_map):
        # dynamic source maps may take (out_file) or (out_file, source)
        candidate = source_map(out_file, source) if _accepts_two_args(source_map) else source_map(out_file)
    if isinstance(candidate, os.PathLike):
        candidate = os.fspath(candidate)

    if candidate is True:
        candidate = out_file

    if not isinstance(candidate, str) or not candidate:
        raise InvalidDestinationError(f'"{candidate}" is not a valid file path for "source_map".')

    if not is_file_path(candidate):
        candidate = os.path.join(candidate, os.path.basename(out_file))

    return os.path.abspath(normalize_map_path(candidate))
