"""
Benchmarks module - static usage profiles and the catalog that serves them.

Example:
    from infra_estimator.benchmarks import get_catalog

    catalog = get_catalog()
    catalog.lookup("saas-b2b")
    catalog.feature_impact(["auth", "search"])
"""

from infra_estimator.benchmarks.catalog import (
    BenchmarkCatalog,
    IMPACT_DAMPENING_EXPONENT,
    get_catalog,
)
from infra_estimator.benchmarks.data import (
    APP_BENCHMARKS,
    APP_FEATURES,
    REGION_PROFILES,
)

__all__ = [
    "BenchmarkCatalog",
    "IMPACT_DAMPENING_EXPONENT",
    "get_catalog",
    "APP_BENCHMARKS",
    "APP_FEATURES",
    "REGION_PROFILES",
]
