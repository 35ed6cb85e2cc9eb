"""
Estimator service - the public operations.

Two ways in:
- estimate(): free-text description -> classification -> full response
  (analysis, estimate, pricing, insights, timeline)
- estimate_direct(): explicit category and MAU -> estimate + pricing

Plus the read-only catalog views (categories, features, benchmarks) and a
health check. Both estimate paths run inside a tracer span; with tracing
disabled the span is a no-op.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime, timezone

from infra_estimator.analysis.advisor import get_insights
from infra_estimator.analysis.classifier import analyze_description
from infra_estimator.benchmarks.catalog import BenchmarkCatalog, get_catalog
from infra_estimator.config import get_config
from infra_estimator.core.errors import CategoryNotFound
from infra_estimator.core.protocols import Advisor, Classifier
from infra_estimator.estimation.projector import project, project_timeline
from infra_estimator.observability import (
    ANALYSIS_CONFIDENCE,
    ANALYSIS_SOURCE,
    ESTIMATE_AVG_RPS,
    ESTIMATE_BANDWIDTH_GB,
    ESTIMATE_TOTAL_GB,
    estimate_attributes,
    get_tracer,
    pricing_attributes,
)
from infra_estimator.pricing.engine import price, price_scenarios
from infra_estimator.schemas.analysis import AnalysisOutcome
from infra_estimator.schemas.estimate import (
    AppBenchmark,
    AppFeature,
    CategorySummary,
    EstimateInput,
    EstimateResult,
    Region,
    Timeline,
)
from infra_estimator.schemas.pricing import PricingResult
from infra_estimator.schemas.response import (
    EstimateResponse,
    HealthStatus,
    TargetUsers,
    TimelinePoint,
    TimelineSummary,
)

logger = logging.getLogger(__name__)

# detected features that switch on the realtime overhead
REALTIME_FEATURES = ("real-time", "chat", "collaboration")
VIDEO_MEDIA_SIZE_MB = 50.0


def _record_outcome(span, estimate: EstimateResult, pricing: PricingResult) -> None:
    span.set_attribute(ESTIMATE_AVG_RPS, estimate.requests.avg_per_second)
    span.set_attribute(ESTIMATE_TOTAL_GB, estimate.storage.total_gb)
    span.set_attribute(ESTIMATE_BANDWIDTH_GB, estimate.bandwidth.monthly_gb)
    attrs = pricing_attributes(
        recommended=pricing.recommended_provider,
        cheapest=pricing.cheapest.provider,
        cheapest_total=pricing.cheapest.monthly_total,
    )
    for key, value in attrs.items():
        span.set_attribute(key, value)


def build_input(
    analysis: AnalysisOutcome,
    target_mau: int,
    region: Region,
    default_media_size_mb: float,
) -> EstimateInput:
    """Derive projector input from a classification."""
    detected = analysis.detected_features
    features = list(dict.fromkeys([*detected, *analysis.suggested_features]))

    return EstimateInput(
        category=analysis.category,
        target_mau=target_mau,
        features=features,
        has_media_upload="media-upload" in detected,
        avg_media_size_mb=(
            VIDEO_MEDIA_SIZE_MB if "video-streaming" in detected else default_media_size_mb
        ),
        has_realtime=any(f in detected for f in REALTIME_FEATURES),
        region=region,
    )


def summarize_timeline(timeline: Timeline) -> TimelineSummary:
    """Price each timeline point at its cheapest provider."""
    points = {}
    for label in ("month1", "month6", "month12"):
        point = getattr(timeline, label)
        points[label] = TimelinePoint(
            mau=point.users.mau,
            requests_per_second=point.requests.avg_per_second,
            storage_gb=point.storage.total_gb,
            estimated_cost_usd=price(point).cheapest.monthly_total,
        )
    return TimelineSummary(**points)


# ---------------------------------------------------------------------------
# ESTIMATES
# ---------------------------------------------------------------------------


def estimate(
    description: str,
    target_users: TargetUsers,
    region: Region = "us",
    reference_apps: Sequence[str] | None = None,
    classifier: Classifier | None = None,
    advisor: Advisor | None = None,
    catalog: BenchmarkCatalog | None = None,
) -> EstimateResponse:
    """
    Estimate infrastructure for a product described in free text.

    The classifier picks the category and features (keyword fallback on
    failure), the month-6 audience sizes the estimate, and the month-1/6/12
    timeline shows how cost grows at the configured monthly growth rate.

    Args:
        description: Product description
        target_users: Expected MAU at month 6 and month 12
        region: Deployment region
        reference_apps: Similar products, used as classification hints
        classifier: Injected classifier (factory default if None)
        advisor: Injected insights advisor (factory default if None)
        catalog: Benchmark catalog (shared process catalog if None)

    Returns:
        EstimateResponse with every section populated
    """
    config = get_config()
    catalog = catalog or get_catalog()
    tracer = get_tracer()

    analysis = analyze_description(
        description,
        classifier=classifier,
        reference_apps=reference_apps,
        catalog=catalog,
    )
    estimate_input = build_input(
        analysis,
        target_mau=target_users.month6,
        region=region,
        default_media_size_mb=config.default_media_size_mb,
    )

    attributes = estimate_attributes(
        category=estimate_input.category,
        region=region,
        mau=estimate_input.target_mau,
        feature_count=len(estimate_input.features),
        path="description",
    )
    with tracer.start_span("estimate.description", attributes=attributes) as span:
        span.set_attribute(ANALYSIS_SOURCE, analysis.source)
        span.set_attribute(ANALYSIS_CONFIDENCE, analysis.confidence)

        result = project(estimate_input, catalog=catalog, confidence=analysis.confidence)
        pricing = price(result)
        result = price_scenarios(result)

        insights = get_insights(
            description,
            result.category,
            estimate_input.target_mau,
            advisor=advisor,
            catalog=catalog,
        )
        timeline = project_timeline(
            estimate_input,
            monthly_growth_rate=config.growth_rate,
            catalog=catalog,
            confidence=analysis.confidence,
        )

        _record_outcome(span, result, pricing)
        span.set_status("ok")

    logger.info(
        f"Estimated {result.category} ({analysis.source}, {analysis.confidence:.2f}) "
        f"@ {estimate_input.target_mau} MAU: recommended {pricing.recommended_provider}"
    )

    return EstimateResponse(
        analysis=analysis,
        estimate=result,
        pricing=pricing,
        insights=insights,
        timeline=summarize_timeline(timeline),
        region_profile=catalog.region_profile(region),
    )


def estimate_direct(
    category: str,
    target_mau: int,
    features: Sequence[str] = (),
    has_media_upload: bool = False,
    avg_media_size_mb: float | None = None,
    has_realtime: bool = False,
    region: Region = "us",
    catalog: BenchmarkCatalog | None = None,
) -> EstimateResponse:
    """
    Estimate infrastructure for a known category and audience.

    Unknown feature ids are dropped silently.

    Raises:
        CategoryNotFound: if the category has no benchmark
    """
    catalog = catalog or get_catalog()
    if avg_media_size_mb is None:
        avg_media_size_mb = get_config().default_media_size_mb

    estimate_input = EstimateInput(
        category=category,
        target_mau=target_mau,
        features=catalog.known_features(features),
        has_media_upload=has_media_upload,
        avg_media_size_mb=avg_media_size_mb,
        has_realtime=has_realtime,
        region=region,
    )

    attributes = estimate_attributes(
        category=category,
        region=region,
        mau=target_mau,
        feature_count=len(estimate_input.features),
        path="direct",
    )
    with get_tracer().start_span("estimate.direct", attributes=attributes) as span:
        try:
            result = project(estimate_input, catalog=catalog)
        except CategoryNotFound as e:
            span.record_exception(e)
            span.set_status("error", str(e))
            raise

        pricing = price(result)
        result = price_scenarios(result)

        _record_outcome(span, result, pricing)
        span.set_status("ok")

    logger.info(
        f"Estimated {category} @ {target_mau} MAU: recommended {pricing.recommended_provider}"
    )

    return EstimateResponse(
        estimate=result,
        pricing=pricing,
        region_profile=catalog.region_profile(region),
    )


# ---------------------------------------------------------------------------
# CATALOG VIEWS
# ---------------------------------------------------------------------------


def list_categories(catalog: BenchmarkCatalog | None = None) -> list[CategorySummary]:
    return (catalog or get_catalog()).list_categories()


def list_features(catalog: BenchmarkCatalog | None = None) -> list[AppFeature]:
    return (catalog or get_catalog()).list_features()


def get_benchmark(
    category: str | None = None,
    catalog: BenchmarkCatalog | None = None,
) -> AppBenchmark | list[AppBenchmark]:
    """
    One benchmark by category id, or all of them when no id is given.

    Raises:
        CategoryNotFound: if a category id is given and unknown
    """
    catalog = catalog or get_catalog()
    if category is None:
        return catalog.list_benchmarks()

    benchmark = catalog.lookup(category)
    if benchmark is None:
        raise CategoryNotFound(category)
    return benchmark


def health() -> HealthStatus:
    return HealthStatus(
        status="ok",
        classifier_available=get_config().classifier_available,
        timestamp=datetime.now(timezone.utc),
    )
