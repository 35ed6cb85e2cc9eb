"""
Tracer factory.

get_tracer() hands out a NoOpTracer unless tracing is enabled and an
OpenTelemetry provider has been installed by init_tracing(). Callers
always use the same start_span() context manager either way.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Protocol


class SpanProtocol(Protocol):
    def set_attribute(self, key: str, value: Any) -> None: ...

    def set_status(self, status: str, description: str | None = None) -> None: ...

    def record_exception(self, exception: Exception) -> None: ...


class TracerProtocol(Protocol):
    def start_span(
        self, name: str, attributes: dict[str, Any] | None = None
    ) -> Any: ...


# ---------------------------------------------------------------------------
# NOOP (tracing disabled)
# ---------------------------------------------------------------------------


class NoOpSpan:
    """Span that records nothing."""

    def set_attribute(self, key: str, value: Any) -> None:
        pass

    def set_status(self, status: str, description: str | None = None) -> None:
        pass

    def record_exception(self, exception: Exception) -> None:
        pass


class NoOpTracer:
    @contextmanager
    def start_span(self, name: str, attributes: dict[str, Any] | None = None) -> Iterator[NoOpSpan]:
        yield NoOpSpan()


# ---------------------------------------------------------------------------
# OPENTELEMETRY
# ---------------------------------------------------------------------------


class OTelSpan:
    """Adapts an OTel span to SpanProtocol."""

    def __init__(self, span: Any):
        self._span = span

    def set_attribute(self, key: str, value: Any) -> None:
        self._span.set_attribute(key, value)

    def set_status(self, status: str, description: str | None = None) -> None:
        from opentelemetry.trace import StatusCode

        code = StatusCode.OK if status == "ok" else StatusCode.ERROR
        self._span.set_status(code, description)

    def record_exception(self, exception: Exception) -> None:
        self._span.record_exception(exception)


class OTelTracer:
    def __init__(self, tracer: Any):
        self._tracer = tracer

    @contextmanager
    def start_span(self, name: str, attributes: dict[str, Any] | None = None) -> Iterator[OTelSpan]:
        with self._tracer.start_as_current_span(name, attributes=attributes) as span:
            yield OTelSpan(span)


# ---------------------------------------------------------------------------
# FACTORY
# ---------------------------------------------------------------------------

_tracer: TracerProtocol | None = None


def get_tracer(service_name: str = "infra-estimator") -> TracerProtocol:
    """Get the process tracer (NoOp unless tracing is enabled and set up)."""
    global _tracer
    if _tracer is not None:
        return _tracer

    from infra_estimator.config import get_config

    if not get_config().tracing_enabled:
        _tracer = NoOpTracer()
        return _tracer

    try:
        from opentelemetry import trace
        from opentelemetry.sdk.trace import TracerProvider
    except ImportError:
        _tracer = NoOpTracer()
        return _tracer

    if not isinstance(trace.get_tracer_provider(), TracerProvider):
        # init_tracing() has not run yet
        _tracer = NoOpTracer()
        return _tracer

    _tracer = OTelTracer(trace.get_tracer(service_name))
    return _tracer


def reset_tracer() -> None:
    """Reset tracer (useful for testing)."""
    global _tracer
    _tracer = None
