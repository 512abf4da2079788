"""Task building and reduction by shared output file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from sass_extra.destinations import resolve_out_file, resolve_source_map_file
from sass_extra.errors import MissingDestinationError
from sass_extra.models.render_options import RenderOptions
from sass_extra.models.task import Task
from sass_extra.paths import is_stylesheet_path

logger = logging.getLogger(__name__)


def build_task(source: str, options: RenderOptions) -> Task:
    out_file = options.destination
    task = Task(compiler_options=dict(options.compiler_options))

    if is_stylesheet_path(source):
        task.file = source
    else:
        task.data = source

    if out_file:
        task.out_file = resolve_out_file(source, out_file)

    if options.source_map:
        if task.out_file is None:
            raise MissingDestinationError('Either "output" or "out_file" option is required with "source_map".')
        task.source_map = resolve_source_map_file(task.out_file, options.source_map, source)

    return task


def build_tasks(sources: str | list[str], options: RenderOptions) -> list[Task]:
    if isinstance(sources, str):
        return [build_task(sources, options)]
    return [build_task(source, options) for source in sources]


def import_statement(path: str) -> str:
    """
    An @import line for ``path``. Plain .css files lose their suffix so
    libsass inlines them instead of emitting a CSS @import url(...).
    """
    target = Path(os.path.abspath(path))
    if target.suffix == ".css":
        target = target.with_suffix("")
    return f"@import '{target.as_posix()}';"


def merge_group(group: list[Task]) -> Task:
    """
    Combine tasks that write the same file into a single data task.
    File sources become @import lines so the compiler stitches them together.
    """
    first = group[0]
    if len(group) == 1:
        return first
    lines = [import_statement(task.file) if task.file is not None else task.content for task in group]
    return first.model_copy(update={"data": "\n".join(lines), "file": None})


def reduce_by_output(tasks: list[Task]) -> list[Task]:
    groups: dict[str, list[Task]] = {}
    ordered: list[str | Task] = []
    for task in tasks:
        if task.out_file is None:
            ordered.append(task)
            continue
        if task.out_file not in groups:
            groups[task.out_file] = []
            ordered.append(task.out_file)
        groups[task.out_file].append(task)

    reduced: list[Task] = []
    for item in ordered:
        if isinstance(item, Task):
            reduced.append(item)
            continue
        group = groups[item]
        if len(group) > 1:
            logger.debug("Merging %d sources into %s", len(group), item)
        reduced.append(merge_group(group))
    return reduced
