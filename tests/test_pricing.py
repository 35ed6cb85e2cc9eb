"""
Unit Tests for the Pricing Engine

Tests tier selection, cost math, ordering and the recommendation rules.
Estimates are produced by the real projector so thresholds are exercised
against realistic numbers.
"""

import pytest

from infra_estimator.benchmarks import BenchmarkCatalog
from infra_estimator.core.rounding import round2
from infra_estimator.estimation import project
from infra_estimator.pricing import (
    PROVIDERS,
    classify_project,
    price,
    price_aws,
    price_scenarios,
    price_supabase,
    select_aws_tier,
    select_railway_tier,
    select_render_tier,
    select_supabase_tier,
    select_vercel_tier,
)
from infra_estimator.schemas import EstimateInput


@pytest.fixture(scope="module")
def catalog():
    return BenchmarkCatalog()


def _estimate(catalog, category, mau, **kwargs):
    return project(EstimateInput(category=category, target_mau=mau, **kwargs), catalog)


@pytest.fixture
def saas_estimate(catalog):
    return _estimate(catalog, "saas-b2b", 10_000, features=["auth"])


# ---------------------------------------------------------------------------
# TIER SELECTION
# ---------------------------------------------------------------------------


class TestTierSelection:
    """saas-b2b @ 10k MAU: 38.5M requests, 14.86 req/s, 1006 GB db, 2575 GB egress."""

    def test_vercel(self, saas_estimate):
        assert select_vercel_tier(saas_estimate) == "enterprise"

    def test_railway(self, saas_estimate):
        assert select_railway_tier(saas_estimate) == "pro"

    def test_supabase(self, saas_estimate):
        assert select_supabase_tier(saas_estimate) == "team"

    def test_render(self, saas_estimate):
        assert select_render_tier(saas_estimate) == "standard"

    def test_aws(self, saas_estimate):
        assert select_aws_tier(saas_estimate) == "medium"

    def test_tiny_project_stays_on_free_tiers(self, catalog):
        tiny = _estimate(catalog, "fintech", 10)
        assert select_vercel_tier(tiny) == "hobby"
        assert select_supabase_tier(tiny) == "free"
        assert select_railway_tier(tiny) == "hobby"
        assert select_aws_tier(tiny) == "small"


# ---------------------------------------------------------------------------
# COST MATH
# ---------------------------------------------------------------------------


class TestProviderCosts:
    """Spot checks of individual provider formulas."""

    def test_supabase_overage(self, saas_estimate):
        """599 team + 955.86 GB db x 0.125 + 1574.92 GB egress x 0.09."""
        quote = price_supabase(saas_estimate)
        assert quote.tier == "team"
        assert quote.monthly_total == 860.23
        assert quote.breakdown.compute == round2(599 * 0.4)
        assert quote.breakdown.database == round2(599 * 0.4)
        assert quote.breakdown.storage == quote.breakdown.bandwidth

    def test_aws_medium(self, saas_estimate):
        """EC2 50 + RDS 50 + extra db + CloudFront + 10 other."""
        quote = price_aws(saas_estimate)
        assert quote.breakdown.compute == 50
        assert quote.breakdown.database == round2(50 + (1005.86 - 20) * 0.1)
        assert quote.breakdown.bandwidth == round2(2574.92 * 0.085)
        assert quote.breakdown.other == 10
        assert quote.monthly_total == 427.45

    def test_every_quote_has_notes(self, saas_estimate):
        for _, pricer in PROVIDERS:
            assert pricer(saas_estimate).notes


# ---------------------------------------------------------------------------
# ENGINE
# ---------------------------------------------------------------------------


class TestPrice:
    """Ordering and determinism."""

    def test_quotes_all_providers_sorted(self, saas_estimate):
        result = price(saas_estimate)
        totals = [q.monthly_total for q in result.estimates]
        assert sorted(q.provider for q in result.estimates) == sorted(p for p, _ in PROVIDERS)
        assert totals == sorted(totals)
        assert result.cheapest == result.estimates[0]

    def test_is_deterministic(self, saas_estimate):
        assert price(saas_estimate) == price(saas_estimate)

    def test_ties_keep_provider_order(self, catalog):
        """Vercel hobby and Supabase free both cost 0; Vercel is listed first."""
        result = price(_estimate(catalog, "fintech", 10))
        assert result.estimates[0].provider == "vercel"
        assert result.estimates[1].provider == "supabase"
        assert result.estimates[0].monthly_total == result.estimates[1].monthly_total == 0


class TestRecommendation:
    """First matching rule wins."""

    def test_small_project_gets_supabase(self, catalog):
        estimate = _estimate(catalog, "fintech", 500)
        assert classify_project(estimate).is_small
        assert price(estimate).recommended_provider == "supabase"

    def test_medium_write_heavy_gets_supabase(self, saas_estimate):
        """saas-b2b writes 40% of requests."""
        profile = classify_project(saas_estimate)
        assert profile.is_medium and profile.needs_realtime
        assert price(saas_estimate).recommended_provider == "supabase"

    def test_medium_read_heavy_gets_railway(self, catalog):
        estimate = _estimate(catalog, "content-platform", 5_000)
        assert price(estimate).recommended_provider == "railway"

    def test_medium_heavy_media_gets_aws(self, catalog):
        estimate = _estimate(
            catalog, "edtech", 5_000, has_media_upload=True, avg_media_size_mb=500
        )
        assert classify_project(estimate).heavy_media
        assert price(estimate).recommended_provider == "aws"

    def test_large_project_gets_aws(self, catalog):
        estimate = _estimate(catalog, "social-network", 100_000)
        assert classify_project(estimate).is_large
        assert price(estimate).recommended_provider == "aws"

    def test_otherwise_cheapest(self, catalog):
        """Under 1000 MAU but above 1 req/s matches no size rule."""
        estimate = _estimate(catalog, "developer-tools", 900)
        profile = classify_project(estimate)
        assert not (profile.is_small or profile.is_medium or profile.is_large)
        result = price(estimate)
        assert result.recommended_provider == result.cheapest.provider
        assert result.cheapest.name in result.recommendation


class TestPriceScenarios:
    """Scenario cost backfill."""

    def test_backfills_every_scenario(self, saas_estimate):
        priced = price_scenarios(saas_estimate)
        for name in ("conservative", "moderate", "optimistic"):
            assert getattr(priced.scenarios, name).monthly_cost_usd is not None

    def test_moderate_cost_is_cheapest_quote(self, saas_estimate):
        priced = price_scenarios(saas_estimate)
        assert priced.scenarios.moderate.monthly_cost_usd == price(saas_estimate).cheapest.monthly_total

    def test_costs_grow_with_multiplier(self, saas_estimate):
        scenarios = price_scenarios(saas_estimate).scenarios
        assert scenarios.conservative.monthly_cost_usd <= scenarios.moderate.monthly_cost_usd
        assert scenarios.moderate.monthly_cost_usd <= scenarios.optimistic.monthly_cost_usd

    def test_leaves_original_untouched(self, saas_estimate):
        price_scenarios(saas_estimate)
        assert saas_estimate.scenarios.moderate.monthly_cost_usd is None


# ---------------------------------------------------------------------------
# THRESHOLD BOUNDARIES
# ---------------------------------------------------------------------------


def _tweak(estimate, **sections):
    """Copy an estimate with fields replaced inside its metric sections."""
    updates = {
        name: getattr(estimate, name).model_copy(update=fields)
        for name, fields in sections.items()
    }
    return estimate.model_copy(update=updates)


@pytest.fixture
def tiny_estimate(catalog):
    """fintech @ 10 MAU sits on every free tier."""
    return _estimate(catalog, "fintech", 10)


class TestTierBoundaries:
    """Tier thresholds are strict: a value exactly on the limit stays below it."""

    def test_vercel_request_limits(self, tiny_estimate):
        at_pro = _tweak(tiny_estimate, requests={"monthly_total": 100_000})
        over_pro = _tweak(tiny_estimate, requests={"monthly_total": 100_001})
        at_enterprise = _tweak(tiny_estimate, requests={"monthly_total": 10_000_000})
        over_enterprise = _tweak(tiny_estimate, requests={"monthly_total": 10_000_001})

        assert select_vercel_tier(at_pro) == "hobby"
        assert select_vercel_tier(over_pro) == "pro"
        assert select_vercel_tier(at_enterprise) == "pro"
        assert select_vercel_tier(over_enterprise) == "enterprise"

    def test_vercel_bandwidth_limits(self, tiny_estimate):
        assert select_vercel_tier(_tweak(tiny_estimate, bandwidth={"monthly_gb": 100})) == "hobby"
        assert select_vercel_tier(_tweak(tiny_estimate, bandwidth={"monthly_gb": 100.01})) == "pro"
        assert select_vercel_tier(_tweak(tiny_estimate, bandwidth={"monthly_gb": 1000})) == "pro"
        assert select_vercel_tier(_tweak(tiny_estimate, bandwidth={"monthly_gb": 1000.01})) == "enterprise"

    def test_railway_request_rate(self, tiny_estimate):
        assert select_railway_tier(_tweak(tiny_estimate, requests={"avg_per_second": 10})) == "hobby"
        assert select_railway_tier(_tweak(tiny_estimate, requests={"avg_per_second": 10.01})) == "pro"

    def test_render_request_rate(self, tiny_estimate):
        assert select_render_tier(_tweak(tiny_estimate, requests={"avg_per_second": 5})) == "starter"
        assert select_render_tier(_tweak(tiny_estimate, requests={"avg_per_second": 5.01})) == "standard"

    def test_supabase_database_limits(self, tiny_estimate):
        assert select_supabase_tier(_tweak(tiny_estimate, storage={"database_gb": 0.5})) == "free"
        assert select_supabase_tier(_tweak(tiny_estimate, storage={"database_gb": 0.51})) == "pro"
        assert select_supabase_tier(_tweak(tiny_estimate, storage={"database_gb": 8})) == "pro"
        assert select_supabase_tier(_tweak(tiny_estimate, storage={"database_gb": 8.01})) == "team"

    def test_supabase_bandwidth_limits(self, tiny_estimate):
        assert select_supabase_tier(_tweak(tiny_estimate, bandwidth={"monthly_gb": 2})) == "free"
        assert select_supabase_tier(_tweak(tiny_estimate, bandwidth={"monthly_gb": 2.01})) == "pro"
        assert select_supabase_tier(_tweak(tiny_estimate, bandwidth={"monthly_gb": 250})) == "pro"
        assert select_supabase_tier(_tweak(tiny_estimate, bandwidth={"monthly_gb": 250.01})) == "team"

    def test_aws_request_rate(self, tiny_estimate):
        assert select_aws_tier(_tweak(tiny_estimate, requests={"avg_per_second": 10})) == "small"
        assert select_aws_tier(_tweak(tiny_estimate, requests={"avg_per_second": 10.01})) == "medium"
        assert select_aws_tier(_tweak(tiny_estimate, requests={"avg_per_second": 50})) == "medium"
        assert select_aws_tier(_tweak(tiny_estimate, requests={"avg_per_second": 50.01})) == "large"

    def test_aws_concurrency(self, tiny_estimate):
        assert select_aws_tier(_tweak(tiny_estimate, users={"concurrent_peak": 500})) == "small"
        assert select_aws_tier(_tweak(tiny_estimate, users={"concurrent_peak": 501})) == "medium"
        assert select_aws_tier(_tweak(tiny_estimate, users={"concurrent_peak": 2000})) == "medium"
        assert select_aws_tier(_tweak(tiny_estimate, users={"concurrent_peak": 2001})) == "large"


class TestRecommendationBoundaries:
    """Size classes switch exactly at 1000 and 50000 MAU."""

    @pytest.fixture
    def read_heavy(self, tiny_estimate):
        return _tweak(tiny_estimate, requests={"read_percentage": 90, "write_percentage": 10})

    def test_small_below_1000_mau(self, read_heavy):
        estimate = _tweak(read_heavy, users={"mau": 999})
        assert classify_project(estimate).is_small
        assert price(estimate).recommended_provider == "supabase"

    def test_medium_from_1000_mau(self, read_heavy):
        estimate = _tweak(read_heavy, users={"mau": 1_000})
        profile = classify_project(estimate)
        assert profile.is_medium and not profile.is_small
        assert price(estimate).recommended_provider == "railway"

    def test_medium_below_50000_mau(self, read_heavy):
        estimate = _tweak(read_heavy, users={"mau": 49_999})
        profile = classify_project(estimate)
        assert profile.is_medium and not profile.is_large
        assert price(estimate).recommended_provider == "railway"

    def test_large_from_50000_mau(self, read_heavy):
        estimate = _tweak(read_heavy, users={"mau": 50_000})
        profile = classify_project(estimate)
        assert profile.is_large and not profile.is_medium
        assert price(estimate).recommended_provider == "aws"

    def test_write_share_of_30_is_not_realtime(self, read_heavy):
        at_limit = _tweak(
            read_heavy,
            users={"mau": 5_000},
            requests={"read_percentage": 70, "write_percentage": 30},
        )
        over_limit = _tweak(
            read_heavy,
            users={"mau": 5_000},
            requests={"read_percentage": 69, "write_percentage": 31},
        )
        assert not classify_project(at_limit).needs_realtime
        assert price(at_limit).recommended_provider == "railway"
        assert classify_project(over_limit).needs_realtime
        assert price(over_limit).recommended_provider == "supabase"

    def test_50_gb_of_media_is_not_heavy(self, read_heavy):
        at_limit = _tweak(read_heavy, users={"mau": 5_000}, storage={"media_storage_gb": 50})
        over_limit = _tweak(read_heavy, users={"mau": 5_000}, storage={"media_storage_gb": 50.01})
        assert not classify_project(at_limit).heavy_media
        assert price(at_limit).recommended_provider == "railway"
        assert classify_project(over_limit).heavy_media
        assert price(over_limit).recommended_provider == "aws"
