"""Pydantic models for compiler output."""

from __future__ import annotations

from pydantic import BaseModel


class RenderStats(BaseModel):
    entry: str  # source file path, or "data"
    start: float
    end: float
    duration: float  # milliseconds


class RenderResult(BaseModel):
    css: str
    map: str | None = None
    stats: RenderStats
    out_file: str | None = None
    source_map_file: str | None = None
