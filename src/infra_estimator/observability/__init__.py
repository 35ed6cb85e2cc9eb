"""
Observability - optional Phoenix / OpenTelemetry tracing.

USAGE:
------
from infra_estimator.observability import init_tracing, get_tracer

init_tracing()  # no-op unless PHOENIX_ENABLED=true

with get_tracer().start_span("estimate.direct", attributes={...}) as span:
    span.set_attribute("estimate.category", "saas-b2b")

The observability extra (arize-phoenix, opentelemetry-sdk,
openinference-instrumentation-openai) is optional. Without it every span
is a NoOpSpan and nothing is exported.
"""

from __future__ import annotations

import logging

from infra_estimator.config import EstimatorConfig, get_config
from infra_estimator.observability.tracer import (
    NoOpSpan,
    NoOpTracer,
    SpanProtocol,
    TracerProtocol,
    get_tracer,
    reset_tracer,
)
from infra_estimator.observability.attributes import (
    ANALYSIS_CONFIDENCE,
    ANALYSIS_SOURCE,
    ESTIMATE_AVG_RPS,
    ESTIMATE_BANDWIDTH_GB,
    ESTIMATE_CATEGORY,
    ESTIMATE_TOTAL_GB,
    estimate_attributes,
    pricing_attributes,
    resource_attributes,
)

logger = logging.getLogger(__name__)

_tracing_initialized = False


def _instrument_openai() -> None:
    try:
        from openinference.instrumentation.openai import OpenAIInstrumentor
    except ImportError:
        logger.debug("OpenAI instrumentor not available")
        return
    OpenAIInstrumentor().instrument()
    logger.info("Registered OpenAI instrumentor")


def init_tracing(config: EstimatorConfig | None = None) -> bool:
    """
    Set up the OTel tracer provider and export spans to Phoenix.

    Spans are grouped under config.project_name in Phoenix.

    Call once at startup. Classifier calls through the openai client are
    traced automatically once the OpenInference instrumentor is registered.

    Returns:
        True if tracing is active, False if disabled or unavailable
    """
    global _tracing_initialized
    if _tracing_initialized:
        return True

    config = config or get_config()
    if not config.tracing_enabled:
        logger.debug("Tracing disabled")
        return False

    try:
        import phoenix as px
        from opentelemetry import trace
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import BatchSpanProcessor
        from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
    except ImportError as e:
        logger.warning(f"Tracing dependencies not installed, tracing disabled: {e}")
        return False

    if config.collector_endpoint:
        endpoint = config.collector_endpoint
        logger.info(f"Exporting traces to: {endpoint}")
    else:
        session = px.launch_app()
        endpoint = f"{session.url.rstrip('/')}/v1/traces"
        logger.info(f"Phoenix UI available at: {session.url}")

    resource = Resource.create(resource_attributes(config.project_name))
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint)))
    trace.set_tracer_provider(provider)

    _instrument_openai()
    reset_tracer()

    _tracing_initialized = True
    return True


def shutdown_tracing() -> None:
    """Flush and shut down the tracer provider."""
    global _tracing_initialized
    if not _tracing_initialized:
        return

    from opentelemetry import trace

    provider = trace.get_tracer_provider()
    if hasattr(provider, "shutdown"):
        provider.shutdown()

    reset_tracer()
    _tracing_initialized = False


__all__ = [
    "init_tracing",
    "shutdown_tracing",
    "SpanProtocol",
    "TracerProtocol",
    "NoOpSpan",
    "NoOpTracer",
    "get_tracer",
    "reset_tracer",
    "ANALYSIS_CONFIDENCE",
    "ANALYSIS_SOURCE",
    "ESTIMATE_AVG_RPS",
    "ESTIMATE_BANDWIDTH_GB",
    "ESTIMATE_CATEGORY",
    "ESTIMATE_TOTAL_GB",
    "estimate_attributes",
    "pricing_attributes",
    "resource_attributes",
]
