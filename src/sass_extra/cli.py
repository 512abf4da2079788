"""CLI entrypoint."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

import sass

from sass_extra.compiler import info
from sass_extra.config import load_render_options
from sass_extra.errors import SassExtraError
from sass_extra.models.render_options import RenderOptions
from sass_extra.models.render_result import RenderResult
from sass_extra.orchestrator import Orchestrator, Rendered


async def run_render(orch: Orchestrator, options: RenderOptions) -> Rendered:
    return await orch.run(options)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sass-extra", description="Compile Sass with globs and output mapping.")
    parser.add_argument("--config", type=Path, default=None, help="Path to a YAML options file")
    parser.add_argument("--file", action="append", default=None, help="Source file or glob (repeatable)")
    parser.add_argument("--data", action="append", default=None, help="Inline Sass source (repeatable)")
    parser.add_argument("--output", type=str, default=None, help="Output file or directory; writes to disk")
    parser.add_argument("--out-file", type=str, default=None, help="Output file or directory; no writing")
    parser.add_argument(
        "--source-map",
        nargs="?",
        const=True,
        default=None,
        help="Emit source maps, optionally to the given file or directory",
    )
    parser.add_argument(
        "--output-style",
        choices=["nested", "expanded", "compact", "compressed"],
        default=None,
    )
    parser.add_argument("--include-path", action="append", default=None, help="Extra import path (repeatable)")
    parser.add_argument("--precision", type=int, default=None)
    parser.add_argument("--sync", action="store_true", help="Compile sequentially without worker threads")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true")
    verbosity.add_argument("-q", "--quiet", action="store_true")
    parser.add_argument("--version", action="store_true", help="Print version information and exit")
    return parser


def overrides_from_args(args: argparse.Namespace) -> dict[str, Any]:
    return {
        "file": args.file,
        "data": args.data,
        "output": args.output,
        "out_file": args.out_file,
        "source_map": args.source_map,
        "output_style": args.output_style,
        "include_paths": args.include_path,
        "precision": args.precision,
    }


def configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def print_results(results: list[RenderResult], persisted: bool) -> None:
    for result in results:
        if persisted:
            print(f"{result.stats.entry} -> {result.out_file}")
        else:
            print(result.css)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.version:
        print(info())
        return 0
    configure_logging(args.verbose, args.quiet)

    orch = Orchestrator()
    try:
        options = load_render_options(args.config, overrides_from_args(args))
        if args.sync:
            out = orch.run_sync(options)
        else:
            # Async entrypoint
            import anyio

            out = anyio.run(run_render, orch, options)
    except (SassExtraError, sass.CompileError, OSError) as exc:
        print(f"sass-extra: {exc}", file=sys.stderr)
        return 1

    results = out if isinstance(out, list) else [out]
    print_results(results, persisted=options.persists)
    return 0


if __name__ == "__main__":
    sys.exit(main())
