from collections.abc import Iterator

import pytest

from nestspec.testing import SpecBuilder, builder_scope


class RecordingReporter:
    """Reporter that remembers every notification it receives."""

    def __init__(self) -> None:
        self.events: list[tuple[str, object]] = []
        self.summary = None

    def before_example(self, example) -> None:
        self.events.append(("before", example.description))

    def on_example_complete(self, result) -> None:
        self.events.append(("complete", (result.description, result.outcome)))

    def report_summary(self, summary) -> None:
        self.summary = summary


@pytest.fixture
def builder() -> Iterator[SpecBuilder]:
    """Fresh builder installed as the declaration target."""
    builder = SpecBuilder()
    with builder_scope(builder):
        yield builder


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()
