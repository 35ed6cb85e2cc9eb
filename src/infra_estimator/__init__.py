"""
infra_estimator - cloud infrastructure sizing and cost estimation.

Turns an app category (or a product description) and a target audience
into request, storage and bandwidth projections, then prices them across
Vercel, Railway, Supabase, Render and AWS.

    from infra_estimator import estimate_direct

    response = estimate_direct("saas-b2b", 10_000, ["auth"])
    response.pricing.recommended_provider
"""

from infra_estimator.service import (
    estimate,
    estimate_direct,
    get_benchmark,
    health,
    list_categories,
    list_features,
)

__version__ = "0.1.0"

__all__ = [
    "estimate",
    "estimate_direct",
    "get_benchmark",
    "health",
    "list_categories",
    "list_features",
    "__version__",
]
