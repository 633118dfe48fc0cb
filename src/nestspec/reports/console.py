"""Console reporters for spec output using Rich."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

from nestspec.testing.models import ExampleResult, Outcome


if TYPE_CHECKING:
    from nestspec.testing.models import RunSummary
    from nestspec.testing.tree import Example


_OUTCOME_CONFIG: dict[Outcome, tuple[str, str]] = {
    Outcome.SUCCESS: (".", "green"),
    Outcome.FAIL: ("F", "red"),
    Outcome.ERROR: ("E", "red"),
    Outcome.PENDING: ("*", "yellow"),
}


def format_elapsed(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds * 1000:.2f} milliseconds"
    if seconds < 60:
        return f"{seconds:.2f} seconds"
    minutes, rest = divmod(seconds, 60)
    return f"{int(minutes)}:{rest:05.2f} minutes"


def _relative(file: str) -> str:
    try:
        return Path(file).relative_to(Path.cwd()).as_posix()
    except ValueError:
        return file


class ConsoleReporter:
    """Shared summary rendering for the console reporters."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(file=sys.__stdout__, highlight=False)

    def _color(self, outcome: Outcome) -> str:
        return _OUTCOME_CONFIG[outcome][1]

    def before_example(self, example: Example) -> None:
        pass

    def on_example_complete(self, result: ExampleResult) -> None:
        pass

    def report_summary(self, summary: RunSummary) -> None:
        self.console.print()
        self._print_pending(summary.pending_results)
        self._print_failures(summary.failed_results)

        self.console.print(f"Finished in {format_elapsed(summary.elapsed_seconds)}")
        color = "green" if summary.succeeded else "red"
        if summary.succeeded and summary.pending:
            color = "yellow"
        counts = summary.counts
        line = (
            f"{summary.total} examples, {counts[Outcome.FAIL]} failures, "
            f"{counts[Outcome.ERROR]} errors, {counts[Outcome.PENDING]} pending"
        )
        self.console.print(f"[{color}]{line}[/{color}]")
        if summary.aborted:
            self.console.print("[yellow]Run aborted; remaining examples were not run.[/yellow]")

        self._print_rerun_commands(summary.failed_results)

    def _print_pending(self, results: list[ExampleResult]) -> None:
        if not results:
            return
        self.console.print("Pending:")
        for result in results:
            self.console.print(f"  [yellow]{escape(result.example.full_description)}[/yellow]")
        self.console.print()

    def _print_failures(self, results: list[ExampleResult]) -> None:
        if not results:
            return
        self.console.print("Failures:")
        for index, result in enumerate(results, start=1):
            self.console.print()
            self.console.print(f"  {index}) {escape(result.example.full_description)}")
            self.console.print()
            color = self._color(result.outcome)
            if result.outcome is Outcome.FAIL:
                self.console.print(f"       [{color}]{escape(result.message)}[/{color}]")
            else:
                name = type(result.error).__name__
                self.console.print(f"       [{color}]{name}: {escape(result.message)}[/{color}]")
            for cleanup in result.cleanup_errors:
                self.console.print(
                    f"       [{color}]after_each {type(cleanup).__name__}: {escape(str(cleanup))}[/{color}]"
                )
            file, line = result.failure_location
            self.console.print(f"       [cyan]# {escape(_relative(file))}:{line}[/cyan]")
        self.console.print()

    def _print_rerun_commands(self, results: list[ExampleResult]) -> None:
        if not results:
            return
        self.console.print()
        self.console.print("Failed examples:")
        self.console.print()
        for result in results:
            location = f"{_relative(result.file)}:{result.line}"
            self.console.print(
                f"[red]nestspec {escape(location)}[/red] "
                f"[cyan]# {escape(result.example.full_description)}[/cyan]"
            )


class DotReporter(ConsoleReporter):
    """One coloured character per example."""

    def on_example_complete(self, result: ExampleResult) -> None:
        letter, color = _OUTCOME_CONFIG[result.outcome]
        self.console.print(f"[{color}]{letter}[/{color}]", end="")

    def report_summary(self, summary: RunSummary) -> None:
        if summary.total:
            self.console.print()
        super().report_summary(summary)


class VerboseReporter(ConsoleReporter):
    """Nested group headers and one line per example."""

    def __init__(self, console: Console | None = None) -> None:
        super().__init__(console)
        self._printed: tuple[str, ...] = ()

    def before_example(self, example: Example) -> None:
        shared = 0
        for printed, current in zip(self._printed, example.parents):
            if printed != current:
                break
            shared += 1
        for depth, name in enumerate(example.parents[shared:], start=shared):
            self.console.print("  " * depth + escape(name))
        self._printed = example.parents

    def on_example_complete(self, result: ExampleResult) -> None:
        color = self._color(result.outcome)
        indent = "  " * len(result.example.parents)
        suffix = " (PENDING)" if result.outcome is Outcome.PENDING else ""
        self.console.print(f"{indent}[{color}]{escape(result.description)}{suffix}[/{color}]")
