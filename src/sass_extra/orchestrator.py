"""Render pipeline: sources -> tasks -> compiler -> disk."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import partial
from typing import Any

from anyio import to_thread

from sass_extra.compiler import Compiler, SassCompiler
from sass_extra.concurrency import gather_ordered
from sass_extra.errors import InvalidRequestError, MissingDestinationError
from sass_extra.io_utils import write_output, write_output_async
from sass_extra.models.render_options import RenderOptions
from sass_extra.models.render_result import RenderResult
from sass_extra.models.task import Task
from sass_extra.sources import resolve_sources, resolve_sources_sync
from sass_extra.tasks import build_tasks, reduce_by_output

logger = logging.getLogger(__name__)

Options = RenderOptions | Mapping[str, Any] | None
Rendered = RenderResult | list[RenderResult]


def validate_options(options: Options) -> RenderOptions:
    opts = RenderOptions.coerce(options)
    if not opts.file and not opts.data:
        raise InvalidRequestError('Either a "data" or "file" option is required.')
    if opts.file and opts.data:
        logger.warning('Both "data" and "file" given; "data" is ignored')
    if opts.source_map and not opts.destination:
        raise MissingDestinationError('Either "output" or "out_file" option is required with "source_map".')
    return opts


def marshal(results: list[RenderResult]) -> Rendered:
    return results[0] if len(results) == 1 else results


class Orchestrator:
    def __init__(self, compiler: Compiler | None = None) -> None:
        self.compiler: Compiler = compiler or SassCompiler()

    def plan(self, opts: RenderOptions, sources: str | list[str]) -> list[Task]:
        tasks = build_tasks(sources, opts)
        if any(task.out_file for task in tasks):
            tasks = reduce_by_output(tasks)
        logger.debug("Planned %d task(s)", len(tasks))
        return tasks

    async def run(self, options: Options) -> Rendered:
        opts = validate_options(options)
        sources = await resolve_sources(opts.file, opts.glob_options) if opts.file else opts.data
        tasks = self.plan(opts, sources)

        compiled = await gather_ordered([partial(to_thread.run_sync, self.compiler.compile, task) for task in tasks])

        if opts.persists:
            await gather_ordered(
                [partial(self._write_task_async, task, result) for task, result in zip(tasks, compiled)]
            )

        return marshal(compiled)

    def run_sync(self, options: Options) -> Rendered:
        opts = validate_options(options)
        sources = resolve_sources_sync(opts.file, opts.glob_options) if opts.file else opts.data
        tasks = self.plan(opts, sources)

        compiled = [self.compiler.compile(task) for task in tasks]

        if opts.persists:
            for task, result in zip(tasks, compiled):
                self._write_task(task, result)

        return marshal(compiled)

    def _write_task(self, task: Task, result: RenderResult) -> None:
        if task.out_file is None:
            raise ValueError("Output file is not configured.")
        write_output(task.out_file, result.css)
        if result.map and task.source_map:
            write_output(task.source_map, result.map)

    async def _write_task_async(self, task: Task, result: RenderResult) -> None:
        if task.out_file is None:
            raise ValueError("Output file is not configured.")
        writes = [partial(write_output_async, task.out_file, result.css)]
        if result.map and task.source_map:
            writes.append(partial(write_output_async, task.source_map, result.map))
        await gather_ordered(writes)


async def render(options: Options = None, *, compiler: Compiler | None = None) -> Rendered:
    return await Orchestrator(compiler).run(options)


def render_sync(options: Options = None, *, compiler: Compiler | None = None) -> Rendered:
    return Orchestrator(compiler).run_sync(options)
