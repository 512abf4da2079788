"""Public package exports."""

from sass_extra.compiler import SassCompiler
from sass_extra.compiler import info
from sass_extra.errors import InvalidDestinationError
from sass_extra.errors import InvalidRequestError
from sass_extra.errors import MissingDestinationError
from sass_extra.errors import SassExtraError
from sass_extra.models import RenderOptions
from sass_extra.models import RenderResult
from sass_extra.orchestrator import Orchestrator
from sass_extra.orchestrator import render
from sass_extra.orchestrator import render_sync

__all__ = [
    "InvalidDestinationError",
    "InvalidRequestError",
    "MissingDestinationError",
    "Orchestrator",
    "RenderOptions",
    "RenderResult",
    "SassCompiler",
    "SassExtraError",
    "info",
    "render",
    "render_sync",
]
