"""
Pricing module - multi-provider monthly cost estimation.

ARCHITECTURE:
-------------
- tables.py: Static provider price tables (2024 reference snapshot)
- providers.py: Tier selection + cost breakdown per provider
- engine.py: Sorting, recommendation and scenario cost backfill
"""

from infra_estimator.pricing.engine import (
    ProjectProfile,
    classify_project,
    price,
    price_scenarios,
    recommend,
)
from infra_estimator.pricing.providers import (
    PROVIDERS,
    price_aws,
    price_railway,
    price_render,
    price_supabase,
    price_vercel,
    select_aws_tier,
    select_railway_tier,
    select_render_tier,
    select_supabase_tier,
    select_vercel_tier,
)

__all__ = [
    # Engine
    "ProjectProfile",
    "classify_project",
    "price",
    "price_scenarios",
    "recommend",
    # Providers
    "PROVIDERS",
    "price_aws",
    "price_railway",
    "price_render",
    "price_supabase",
    "price_vercel",
    "select_aws_tier",
    "select_railway_tier",
    "select_render_tier",
    "select_supabase_tier",
    "select_vercel_tier",
]
