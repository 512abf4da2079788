"""Model types for render options, tasks and results."""

from sass_extra.models.render_options import OutputSpec
from sass_extra.models.render_options import RenderOptions
from sass_extra.models.render_options import SourceMapSpec
from sass_extra.models.render_result import RenderResult
from sass_extra.models.render_result import RenderStats
from sass_extra.models.task import Task

__all__ = [
    "OutputSpec",
    "RenderOptions",
    "RenderResult",
    "RenderStats",
    "SourceMapSpec",
    "Task",
]
