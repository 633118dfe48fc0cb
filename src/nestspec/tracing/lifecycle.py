"""Lifecycle management for OpenTelemetry tracing of spec runs.

Sets up the tracer provider and streaming exporter, and exposes helpers for
getting a tracer, clearing traces, and the `trace_step` context manager.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.trace import Span

from nestspec.tracing.exporters import StreamingFileSpanExporter


_exporter: StreamingFileSpanExporter | None = None
_initialized = False


def init_tracing(
    *,
    service_name: str = "nestspec",
    output_path: Path | str = "traces.jsonl",
) -> None:
    """Initialize OpenTelemetry tracing with streaming file export.

    Calling it again after a successful initialization only redirects the
    output file; the global tracer provider can be set once per process.
    """
    global _exporter, _initialized

    if _initialized:
        set_trace_output_path(output_path)
        return

    _exporter = StreamingFileSpanExporter(output_path)
    resource = Resource.create({"service.name": service_name})
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(SimpleSpanProcessor(_exporter))
    trace.set_tracer_provider(provider)

    _initialized = True


def set_trace_output_path(output_path: Path | str) -> None:
    """Point the exporter at a new, emptied output file."""
    if _exporter is None:
        init_tracing(output_path=output_path)
        return
    _exporter.output_path = Path(output_path)
    _exporter.output_path.parent.mkdir(parents=True, exist_ok=True)
    _exporter.output_path.write_text("")


def get_tracer(name: str = "nestspec") -> trace.Tracer:
    """Get a tracer instance for creating spans."""
    return trace.get_tracer(name)


def clear_traces() -> None:
    """Clear the trace file."""
    if _exporter is not None:
        _exporter.output_path.write_text("")


@contextmanager
def trace_step(name: str, attributes: dict[str, Any] | None = None) -> Iterator[Span]:
    """Trace a custom step inside an example body.

    The span nests under the running example's span when tracing is on.
    """
    tracer = get_tracer()
    with tracer.start_as_current_span(name) as span:
        if attributes:
            for key, value in attributes.items():
                span.set_attribute(key, value)
        yield span
