"""libsass compiler adapter."""

from __future__ import annotations

import logging
import time
from importlib.metadata import PackageNotFoundError, version
from typing import Any, Protocol

import sass

from sass_extra.io_utils import temporary_entry
from sass_extra.models.render_result import RenderResult, RenderStats
from sass_extra.models.task import Task

logger = logging.getLogger(__name__)


class Compiler(Protocol):
    def compile(self, task: Task) -> RenderResult:  # pragma: no cover - interface
        ...


def package_version() -> str:
    try:
        return version("sass-extra")
    except PackageNotFoundError:
        return "0.0.0"


def info() -> str:
    return "\n".join(
        [
            f"sass-extra\t{package_version()}\t(Wrapper)\t[Python]",
            f"libsass-python\t{sass.__version__}\t(Sass Compiler Bindings)\t[Python]",
            f"libsass\t{sass.libsass_version}\t(Sass Compiler)\t[C/C++]",
        ]
    )


class SassCompiler:
    def build_kwargs(self, task: Task) -> dict[str, Any]:
        kwargs: dict[str, Any] = dict(task.compiler_options)
        if task.file is not None:
            kwargs["filename"] = task.file
            if task.out_file:
                kwargs["output_filename_hint"] = task.out_file
            if task.source_map:
                kwargs["source_map_filename"] = task.source_map
        else:
            kwargs["string"] = task.data or ""
        return kwargs

    def compile(self, task: Task) -> RenderResult:
        if task.file is None and task.source_map and task.out_file:
            # libsass only writes a separate source map in filename mode.
            with temporary_entry(task.data or "", task.out_file) as entry:
                return self._compile(task.model_copy(update={"file": entry, "data": None}), entry="data")
        return self._compile(task, entry=task.file or "data")

    def _compile(self, task: Task, entry: str) -> RenderResult:
        kwargs = self.build_kwargs(task)
        start = time.time()
        compiled = sass.compile(**kwargs)
        end = time.time()

        source_map: str | None = None
        if isinstance(compiled, tuple):
            css, source_map = compiled
        else:
            css = compiled

        logger.debug("Compiled %s in %.1fms", entry, (end - start) * 1000)
        return RenderResult(
            css=css,
            map=source_map or None,
            stats=RenderStats(
                entry=entry,
                start=start,
                end=end,
                duration=(end - start) * 1000,
            ),
            out_file=task.out_file,
            source_map_file=task.source_map,
        )
