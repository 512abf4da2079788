"""Options file loading."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from sass_extra.errors import InvalidRequestError
from sass_extra.models.render_options import RenderOptions


def load_config(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise InvalidRequestError(f"Config file {path} must contain a mapping, got {type(raw).__name__}.")
    return dict(raw)


def load_render_options(path: Path | None, overrides: Mapping[str, Any] | None = None) -> RenderOptions:
    """
    Merge command line overrides over the file values.
    ``None`` overrides are ignored so unset flags keep the file's value.
    """
    merged: dict[str, Any] = load_config(path) if path is not None else {}
    for key, value in (overrides or {}).items():
        if value is None:
            continue
        merged[key] = value
    return RenderOptions.coerce(merged)
