"""
Pricing Engine - quotes every provider and picks one to recommend.

The engine is a thin orchestrator: provider rules live in providers.py,
prices in tables.py. Nothing here does I/O or keeps state, so price()
returns identical results for identical estimates.

RECOMMENDATION HEURISTIC:
-------------------------
Rules are evaluated in order and the first match wins:

1. small project                    -> supabase (free tier)
2. medium project, write-heavy      -> supabase (paid tier, realtime)
3. medium project, light media      -> railway (usage billed)
4. large project or heavy media     -> aws (full control)
5. anything else                    -> cheapest quote

Write share above 30% stands in for "needs realtime": the estimate has no
direct realtime signal once it has been projected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from infra_estimator.estimation.projector import scale_estimate
from infra_estimator.pricing.providers import PROVIDERS
from infra_estimator.schemas.estimate import EstimateResult
from infra_estimator.schemas.pricing import CloudPricing, PricingResult

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# THRESHOLDS
# ---------------------------------------------------------------------------

SMALL_MAX_MAU = 1_000
SMALL_MAX_RPS = 1
LARGE_MIN_MAU = 50_000
REALTIME_WRITE_PERCENTAGE = 30
HEAVY_MEDIA_GB = 50


@dataclass(frozen=True)
class ProjectProfile:
    """Size class and flags that drive the recommendation."""

    is_small: bool
    is_medium: bool
    is_large: bool
    needs_realtime: bool
    heavy_media: bool


def classify_project(estimate: EstimateResult) -> ProjectProfile:
    mau = estimate.users.mau
    return ProjectProfile(
        is_small=mau < SMALL_MAX_MAU and estimate.requests.avg_per_second < SMALL_MAX_RPS,
        is_medium=SMALL_MAX_MAU <= mau < LARGE_MIN_MAU,
        is_large=mau >= LARGE_MIN_MAU,
        needs_realtime=estimate.requests.write_percentage > REALTIME_WRITE_PERCENTAGE,
        heavy_media=estimate.storage.media_storage_gb > HEAVY_MEDIA_GB,
    )


# ---------------------------------------------------------------------------
# CORE FUNCTIONS
# ---------------------------------------------------------------------------


def price(estimate: EstimateResult) -> PricingResult:
    """
    Quote all providers for an estimate.

    Returns:
        PricingResult with quotes sorted by monthly_total (stable, so equal
        totals keep provider order) and a single recommendation
    """
    quotes = [pricer(estimate) for _, pricer in PROVIDERS]
    quotes = sorted(quotes, key=lambda q: q.monthly_total)

    provider, text = recommend(estimate, quotes)

    logger.debug(
        f"Priced {len(quotes)} providers, cheapest {quotes[0].provider} "
        f"${quotes[0].monthly_total}, recommended {provider}"
    )

    return PricingResult(
        estimates=quotes,
        recommended_provider=provider,
        recommendation=text,
    )


def recommend(estimate: EstimateResult, quotes: list[CloudPricing]) -> tuple[str, str]:
    """
    Pick one provider for the project profile.

    Args:
        estimate: The priced estimate
        quotes: Provider quotes, cheapest first

    Returns:
        (provider id, rationale text)
    """
    profile = classify_project(estimate)

    if profile.is_small:
        return (
            "supabase",
            "For an early-stage project Supabase gives the best value, bundling auth, "
            "database, storage and realtime. Start on the free tier and scale as you grow.",
        )

    if profile.is_medium and profile.needs_realtime:
        return (
            "supabase",
            "Supabase Pro fits your volume and realtime needs. PostgreSQL plus "
            "Realtime subscriptions covers this use case well.",
        )

    if profile.is_medium and not profile.heavy_media:
        return (
            "railway",
            "Railway offers a good cost/simplicity balance for mid-sized projects. "
            "Usage-based pricing lets costs follow actual demand.",
        )

    if profile.is_large or profile.heavy_media:
        return (
            "aws",
            "At your volume AWS offers better scalability and long-term cost control. "
            "Consider managed services (RDS, ElastiCache, S3) to cut operational overhead.",
        )

    cheapest = quotes[0]
    return (
        cheapest.provider,
        f"{cheapest.name} is the most economical option for your current usage. "
        "Monitor growth and re-evaluate in 3-6 months.",
    )


def price_scenarios(estimate: EstimateResult) -> EstimateResult:
    """
    Backfill each scenario's monthly cost with its cheapest provider quote.

    Each scenario is priced as a scaled copy of the estimate, so tier
    thresholds apply to the scenario's own volume.

    Returns:
        A copy of the estimate with monthly_cost_usd set on all scenarios
    """
    scenarios = estimate.scenarios
    updated = {}
    for name in ("conservative", "moderate", "optimistic"):
        scenario = getattr(scenarios, name)
        scaled = scale_estimate(estimate, scenario.multiplier)
        cheapest = min(pricer(scaled).monthly_total for _, pricer in PROVIDERS)
        updated[name] = scenario.model_copy(update={"monthly_cost_usd": cheapest})

    return estimate.model_copy(
        update={"scenarios": scenarios.model_copy(update=updated)}
    )
