"""
Capacity Projector - turns a benchmark plus user input into load numbers.

Every function here is a PURE FUNCTION of its input and the read-only
catalog: no I/O, no shared state, safe to call from any thread.

MODEL ASSUMPTIONS:
------------------
- Peak window: 60% of DAU are active inside a 4-hour evening peak,
  spread uniformly, which gives the concurrent-user figure.
- Realtime: persistent connections add 50% request overhead.
- Media: 30% of a user's typical content items are media uploads per
  month, and 30% of stored media is served per month.
- Storage grows 10% per month.
"""

from __future__ import annotations

import logging

from infra_estimator.benchmarks.catalog import BenchmarkCatalog, get_catalog
from infra_estimator.core.errors import CategoryNotFound
from infra_estimator.core.rounding import round2, round_half_up
from infra_estimator.schemas.estimate import (
    BandwidthMetrics,
    EstimateInput,
    EstimateResult,
    EstimateScenario,
    RequestMetrics,
    ScenarioSet,
    StorageMetrics,
    Timeline,
    UserMetrics,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# CONSTANTS
# ---------------------------------------------------------------------------

SECONDS_PER_DAY = 86_400
DAYS_PER_MONTH = 30
SECONDS_PER_MONTH = DAYS_PER_MONTH * 24 * 3600

PEAK_ACTIVE_SHARE = 0.6
PEAK_WINDOW_HOURS = 4
REALTIME_OVERHEAD = 1.5
MEDIA_UPLOAD_SHARE = 0.3
MEDIA_SERVED_SHARE = 0.3
MONTHLY_STORAGE_GROWTH = 0.1

DIRECT_CONFIDENCE = 0.75
DEFAULT_GROWTH_RATE = 0.15

SCENARIO_MULTIPLIERS = {
    "conservative": 0.7,
    "moderate": 1.0,
    "optimistic": 1.5,
}

# month -> months of compounded growth since launch
TIMELINE_HORIZONS = {"month1": 0, "month6": 5, "month12": 11}


def _r2(value: float) -> float:
    return round2(value)


# ---------------------------------------------------------------------------
# PROJECTION
# ---------------------------------------------------------------------------


def project(
    estimate_input: EstimateInput,
    catalog: BenchmarkCatalog | None = None,
    confidence: float = DIRECT_CONFIDENCE,
) -> EstimateResult:
    """
    Project requests, storage, bandwidth and users for one input.

    Args:
        estimate_input: Category, MAU, features and flags
        catalog: Benchmark catalog (shared process catalog if None)
        confidence: Confidence to report. Fixed on the direct path; the
            description path passes the classifier's confidence through.

    Returns:
        A fresh EstimateResult with scenario costs left unset

    Raises:
        CategoryNotFound: if the category has no benchmark
    """
    catalog = catalog or get_catalog()

    benchmark = catalog.lookup(estimate_input.category)
    if benchmark is None:
        raise CategoryNotFound(estimate_input.category)

    impact = catalog.feature_impact(estimate_input.features)
    mau = estimate_input.target_mau

    # Users
    dau = round_half_up(mau * benchmark.dau_mau_ratio)
    concurrent_peak = round_half_up((dau * PEAK_ACTIVE_SHARE) / PEAK_WINDOW_HOURS)

    # Requests
    daily_requests = dau * benchmark.avg_requests_per_dau * impact.requests_multiplier
    if estimate_input.has_realtime:
        daily_requests *= REALTIME_OVERHEAD

    avg_rps = daily_requests / SECONDS_PER_DAY
    peak_rps = avg_rps * benchmark.peak_multiplier
    monthly_requests = daily_requests * DAYS_PER_MONTH

    # Storage (MB until the final conversion)
    user_mb = mau * benchmark.storage_per_user
    content_mb = mau * benchmark.avg_content_items_per_user * benchmark.storage_per_content_item

    media_mb = 0.0
    if estimate_input.has_media_upload:
        uploads_per_user = benchmark.avg_content_items_per_user * MEDIA_UPLOAD_SHARE
        media_mb = mau * uploads_per_user * estimate_input.avg_media_size_mb

    database_gb = (user_mb + content_mb) * impact.storage_multiplier / 1024
    media_gb = media_mb / 1024
    total_gb = database_gb + media_gb
    growth_gb = total_gb * MONTHLY_STORAGE_GROWTH

    # Bandwidth (KB until the final conversion)
    page_views = (
        dau
        * benchmark.avg_sessions_per_day
        * benchmark.avg_page_views_per_session
        * DAYS_PER_MONTH
    )
    page_kb = page_views * benchmark.avg_page_size
    media_kb = media_mb * 1024 * MEDIA_SERVED_SHARE if estimate_input.has_media_upload else 0.0

    bandwidth_gb = (page_kb + media_kb) * impact.bandwidth_multiplier / 1024 / 1024
    avg_mbps = bandwidth_gb * 8 * 1024 / SECONDS_PER_MONTH

    logger.debug(
        f"Projected {benchmark.category} @ {mau} MAU: "
        f"{avg_rps:.2f} req/s, {total_gb:.2f} GB, {bandwidth_gb:.2f} GB/mo"
    )

    return EstimateResult(
        category=benchmark.category,
        confidence=confidence,
        region=estimate_input.region,
        requests=RequestMetrics(
            avg_per_second=_r2(avg_rps),
            peak_per_second=_r2(peak_rps),
            monthly_total=round_half_up(monthly_requests),
            read_percentage=round_half_up(benchmark.read_write_ratio * 100),
            write_percentage=round_half_up((1 - benchmark.read_write_ratio) * 100),
        ),
        storage=StorageMetrics(
            database_gb=_r2(database_gb),
            media_storage_gb=_r2(media_gb),
            total_gb=_r2(total_gb),
            monthly_growth_gb=_r2(growth_gb),
        ),
        bandwidth=BandwidthMetrics(
            monthly_gb=_r2(bandwidth_gb),
            avg_mbps=_r2(avg_mbps),
        ),
        users=UserMetrics(mau=mau, dau=dau, concurrent_peak=concurrent_peak),
        scenarios=generate_scenarios(avg_rps, total_gb, bandwidth_gb),
    )


def generate_scenarios(avg_requests: float, storage_gb: float, bandwidth_gb: float) -> ScenarioSet:
    """
    Build the conservative / moderate / optimistic views.

    Scaling is applied to the rounded moderate figures, so
    optimistic.requests == round2(moderate.requests * 1.5) exactly.
    """
    base_requests = _r2(avg_requests)
    base_storage = _r2(storage_gb)
    base_bandwidth = _r2(bandwidth_gb)

    scenarios = {
        name: EstimateScenario(
            multiplier=multiplier,
            requests=_r2(base_requests * multiplier),
            storage_gb=_r2(base_storage * multiplier),
            bandwidth_gb=_r2(base_bandwidth * multiplier),
        )
        for name, multiplier in SCENARIO_MULTIPLIERS.items()
    }
    return ScenarioSet(**scenarios)


def project_timeline(
    estimate_input: EstimateInput,
    monthly_growth_rate: float = DEFAULT_GROWTH_RATE,
    catalog: BenchmarkCatalog | None = None,
    confidence: float = DIRECT_CONFIDENCE,
) -> Timeline:
    """
    Re-project the same input at months 1, 6 and 12.

    MAU at month n is the input MAU compounded by (1 + rate) for n - 1
    months, evaluated directly rather than simulated month by month.
    """
    points = {}
    for label, months in TIMELINE_HORIZONS.items():
        mau = round_half_up(estimate_input.target_mau * (1 + monthly_growth_rate) ** months)
        scaled = estimate_input.model_copy(update={"target_mau": max(1, mau)})
        points[label] = project(scaled, catalog=catalog, confidence=confidence)
    return Timeline(**points)


# ---------------------------------------------------------------------------
# SCALED VIEWS
# ---------------------------------------------------------------------------


def scale_estimate(estimate: EstimateResult, multiplier: float) -> EstimateResult:
    """
    Scale the request, storage and bandwidth figures of an estimate.

    Users and read/write mix are left as-is. Used to price scenarios
    through the same provider rules as the base estimate.
    """
    req = estimate.requests
    sto = estimate.storage
    bw = estimate.bandwidth
    return estimate.model_copy(
        update={
            "requests": req.model_copy(
                update={
                    "avg_per_second": _r2(req.avg_per_second * multiplier),
                    "peak_per_second": _r2(req.peak_per_second * multiplier),
                    "monthly_total": round_half_up(req.monthly_total * multiplier),
                }
            ),
            "storage": StorageMetrics(
                database_gb=_r2(sto.database_gb * multiplier),
                media_storage_gb=_r2(sto.media_storage_gb * multiplier),
                total_gb=_r2(sto.total_gb * multiplier),
                monthly_growth_gb=_r2(sto.monthly_growth_gb * multiplier),
            ),
            "bandwidth": BandwidthMetrics(
                monthly_gb=_r2(bw.monthly_gb * multiplier),
                avg_mbps=_r2(bw.avg_mbps * multiplier),
            ),
        }
    )
