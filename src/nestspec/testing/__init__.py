"""Spec execution engine.

Declare nested groups and examples, select them by name or line, run them
with before/after-each hooks and aggregate the outcomes.
"""

from .abort import AbortLatch, interrupt_handler
from .dsl import (
    after_each,
    assert_that,
    before_each,
    builder_scope,
    context,
    current_builder,
    describe,
    get_default_builder,
    it,
    pending,
    reset_default_builder,
)
from .hooks import HookRegistry, HookSet
from .loader import SpecLoadError, discover, load_specs, module_name, split_location, unload_specs
from .matcher import RunFilter
from .models import ExampleResult, Outcome, RunSummary
from .outcomes import AssertionFailed, fail
from .runner import RunContext, Runner
from .tree import Example, ExampleGroup, SpecBuilder, SpecDeclarationError


__all__ = [
    "AbortLatch",
    "AssertionFailed",
    "Example",
    "ExampleGroup",
    "ExampleResult",
    "HookRegistry",
    "HookSet",
    "Outcome",
    "RunContext",
    "RunFilter",
    "RunSummary",
    "Runner",
    "SpecBuilder",
    "SpecDeclarationError",
    "SpecLoadError",
    "after_each",
    "assert_that",
    "before_each",
    "builder_scope",
    "context",
    "current_builder",
    "describe",
    "discover",
    "fail",
    "get_default_builder",
    "interrupt_handler",
    "it",
    "load_specs",
    "module_name",
    "pending",
    "reset_default_builder",
    "split_location",
    "unload_specs",
]
