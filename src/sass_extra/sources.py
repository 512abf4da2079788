"""Expansion of file sources into concrete paths."""

from __future__ import annotations

import glob
import logging
from collections.abc import Mapping
from functools import partial
from typing import Any

from anyio import to_thread

from sass_extra.concurrency import gather_ordered

logger = logging.getLogger(__name__)


def _as_list(spec: str | list[str]) -> list[str]:
    if isinstance(spec, str):
        return [spec]
    return list(spec)


def _glob_kwargs(glob_options: Mapping[str, Any] | None) -> dict[str, Any]:
    return {"recursive": True, **dict(glob_options or {})}


def match(pattern: str, glob_options: Mapping[str, Any] | None = None) -> list[str]:
    matches = sorted(glob.glob(pattern, **_glob_kwargs(glob_options)))
    if not matches:
        logger.warning("Pattern %r matched no files", pattern)
    return matches


def expand_entry(entry: str, glob_options: Mapping[str, Any] | None = None) -> list[str]:
    if glob.has_magic(entry):
        return match(entry, glob_options)
    # Literal paths are not checked here; the compiler reports missing files.
    return [entry]


def resolve_sources_sync(spec: str | list[str], glob_options: Mapping[str, Any] | None = None) -> list[str]:
    resolved: list[str] = []
    for entry in _as_list(spec):
        resolved.extend(expand_entry(entry, glob_options))
    logger.debug("Resolved %d source file(s) from %r", len(resolved), spec)
    return resolved


async def resolve_sources(spec: str | list[str], glob_options: Mapping[str, Any] | None = None) -> list[str]:
    entries = _as_list(spec)
    expanded = await gather_ordered(
        [partial(to_thread.run_sync, expand_entry, entry, glob_options) for entry in entries]
    )
    resolved = [path for paths in expanded for path in paths]
    logger.debug("Resolved %d source file(s) from %r", len(resolved), spec)
    return resolved
