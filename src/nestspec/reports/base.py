"""Base reporter protocol for spec output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol


if TYPE_CHECKING:
    from nestspec.testing.models import ExampleResult, RunSummary
    from nestspec.testing.tree import Example


class Reporter(Protocol):
    """Receives run notifications. Reporters never affect selection or control flow."""

    def before_example(self, example: Example) -> None:
        """Called right before a selected example runs or is reported pending."""
        ...

    def on_example_complete(self, result: ExampleResult) -> None:
        """Called after each selected example with its classified result."""
        ...

    def report_summary(self, summary: RunSummary) -> None:
        """Called once after the walk with the final summary."""
        ...
