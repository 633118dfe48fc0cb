"""CLI module for the nestspec runner."""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from nestspec.config import NestspecSettings
from nestspec.reports import DotReporter, VerboseReporter
from nestspec.testing import (
    AbortLatch,
    ExampleGroup,
    RunContext,
    Runner,
    SpecBuilder,
    SpecLoadError,
    interrupt_handler,
    load_specs,
    split_location,
    unload_specs,
)
from nestspec.testing.tracer import ExampleTracer
from nestspec.tracing import init_tracing


logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for the nestspec CLI."""
    raise SystemExit(run(argv))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nestspec", description="nestspec spec runner")
    parser.add_argument(
        "paths",
        nargs="*",
        help="Spec files or directories; FILE:LINE runs the example declared on LINE",
    )
    parser.add_argument(
        "-e", "--example", metavar="STRING", help="run examples whose full nested names include STRING"
    )
    parser.add_argument(
        "-l", "--line", metavar="LINE", type=int, help="run examples whose line matches LINE"
    )
    parser.add_argument(
        "--fail-fast", action="store_true", default=None, help="abort the run on first failure"
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=None, help="verbose output")
    parser.add_argument(
        "--trace", action="store_true", default=None, help="write OpenTelemetry spans for each example"
    )
    parser.add_argument("--trace-output", type=Path, help="output path for trace data")
    return parser


def _apply_overrides(settings: NestspecSettings, args: argparse.Namespace) -> NestspecSettings:
    overrides = {
        key: value
        for key, value in {
            "example": args.example,
            "line": args.line,
            "fail_fast": args.fail_fast,
            "verbose": args.verbose,
            "trace": args.trace,
            "trace_output": args.trace_output,
        }.items()
        if value is not None
    }
    return NestspecSettings.model_validate({**settings.model_dump(), **overrides})


def run(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """Parse arguments, load specs, run them and return the exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        settings = _apply_overrides(NestspecSettings(), args)
    except ValidationError as e:
        parser.error(str(e))
    console = console or Console()

    paths: list[Path] = []
    location_file: str | None = None
    location_lines: list[int] = []
    for arg in args.paths:
        path, line = split_location(arg)
        paths.append(path)
        if line is not None:
            location_lines.append(line)
            location_file = str(path.resolve())
    if len(location_lines) > 1:
        parser.error("only one FILE:LINE location can be given")
    if location_lines and args.line is None:
        try:
            settings = NestspecSettings.model_validate({**settings.model_dump(), "line": location_lines[0]})
        except ValidationError as e:
            parser.error(str(e))
    else:
        location_file = None

    builder = SpecBuilder()
    try:
        files = load_specs(paths or [settings.spec_dir], builder)
    except SpecLoadError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        return 1
    try:
        return _run_tree(builder.build(), settings, location_file, console)
    finally:
        unload_specs(files)


def _run_tree(
    tree: ExampleGroup, settings: NestspecSettings, location_file: str | None, console: Console
) -> int:
    reporter = VerboseReporter(console) if settings.verbose else DotReporter(console)
    if settings.trace:
        init_tracing(output_path=settings.trace_output)

    latch = AbortLatch()
    runner = Runner(
        reporter,
        context=RunContext(
            run_filter=settings.run_filter(file=location_file),
            fail_fast=settings.fail_fast,
        ),
        tracer=ExampleTracer(enabled=settings.trace),
    )
    logger.debug("Running %d declared examples", tree.count())
    with interrupt_handler(latch):
        summary = asyncio.run(runner.run(tree, latch))
    return summary.exit_code
