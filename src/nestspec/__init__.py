"""Nestspec - nested describe/it spec runner."""

from .testing import (
    AssertionFailed,
    Outcome,
    RunContext,
    RunFilter,
    Runner,
    RunSummary,
    SpecBuilder,
    after_each,
    assert_that,
    before_each,
    context,
    describe,
    fail,
    it,
    pending,
)
from .tracing import trace_step
from .version import __version__


__all__ = [
    # Declarations
    "describe",
    "context",
    "it",
    "pending",
    "assert_that",
    "before_each",
    "after_each",
    "fail",
    "AssertionFailed",
    # Running
    "SpecBuilder",
    "Runner",
    "RunContext",
    "RunFilter",
    "RunSummary",
    "Outcome",
    # Tracing
    "trace_step",
]
