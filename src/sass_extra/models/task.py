"""Pydantic model for a single compiler invocation."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class Task(BaseModel):
    data: str | None = None
    file: str | None = None
    out_file: str | None = None
    source_map: str | None = None
    compiler_options: dict[str, Any] = Field(default_factory=dict)

    @property
    def kind(self) -> Literal["data", "file"]:
        return "file" if self.file is not None else "data"

    @property
    def content(self) -> str:
        if self.file is not None:
            return self.file
        return self.data or ""
