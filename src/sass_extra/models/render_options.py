"""Pydantic model for user-facing render options."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any, Callable

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from sass_extra.errors import InvalidRequestError

OutputSpec = str | Callable[[str], str]
SourceMapSpec = bool | str | Callable[..., bool | str]


class RenderOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    data: str | list[str] | None = None
    file: str | list[str] | None = None
    output: OutputSpec | None = None
    out_file: OutputSpec | None = Field(default=None, validation_alias=AliasChoices("out_file", "outFile"))
    source_map: SourceMapSpec | None = Field(
        default=None, validation_alias=AliasChoices("source_map", "sourceMap")
    )
    glob_options: dict[str, Any] = Field(
        default_factory=dict, validation_alias=AliasChoices("glob_options", "globOptions")
    )
    compiler_options: dict[str, Any] = Field(default_factory=dict)  # passed through to sass.compile

    @field_validator("file", mode="before")
    @classmethod
    def _fspath_files(cls, value: Any) -> Any:
        if isinstance(value, os.PathLike):
            return os.fspath(value)
        if isinstance(value, (list, tuple)):
            return [os.fspath(item) if isinstance(item, os.PathLike) else item for item in value]
        return value

    @field_validator("output", "out_file", "source_map", mode="before")
    @classmethod
    def _fspath_destination(cls, value: Any) -> Any:
        if isinstance(value, os.PathLike):
            return os.fspath(value)
        return value

    @property
    def destination(self) -> OutputSpec | None:
        return self.output or self.out_file

    @property
    def persists(self) -> bool:
        return bool(self.output)

    @classmethod
    def known_keys(cls) -> set[str]:
        keys: set[str] = set()
        for name, field in cls.model_fields.items():
            keys.add(name)
            alias = field.validation_alias
            if isinstance(alias, AliasChoices):
                keys.update(choice for choice in alias.choices if isinstance(choice, str))
        return keys

    @classmethod
    def coerce(cls, options: "RenderOptions | Mapping[str, Any] | None") -> "RenderOptions":
        """
        Accept a RenderOptions instance or a plain mapping.
        Unknown mapping keys are compiler options and land in ``compiler_options``.
        """
        if isinstance(options, RenderOptions):
            return options
        if options is None:
            options = {}
        if not isinstance(options, Mapping):
            raise InvalidRequestError(f"Options must be a mapping, got {type(options).__name__}.")
        known = cls.known_keys()
        payload: dict[str, Any] = {}
        passthrough: dict[str, Any] = {}
        for key, value in options.items():
            if key in known:
                payload[key] = value
            else:
                passthrough[key] = value
        if passthrough:
            payload["compiler_options"] = {**dict(payload.get("compiler_options") or {}), **passthrough}
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise InvalidRequestError(f"Invalid render options: {exc}") from exc
