"""
Benchmark Catalog - read-only lookup over the static reference tables.

The catalog is built once per process (get_catalog) and never mutated, so
any number of callers can read it concurrently without coordination.
Construction validates the tables: pydantic checks ranges per entry and
the catalog checks that ids are unique and every region has a profile.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any, get_args

from pydantic import ValidationError

from infra_estimator.benchmarks.data import APP_BENCHMARKS, APP_FEATURES, REGION_PROFILES
from infra_estimator.core.errors import CatalogError
from infra_estimator.core.rounding import round2
from infra_estimator.schemas.estimate import (
    AppBenchmark,
    AppCategory,
    AppFeature,
    CategorySummary,
    FeatureImpact,
    Region,
    RegionProfile,
)

logger = logging.getLogger(__name__)

# Each multiplier is raised to this power before it is compounded, so five
# features at 2.0 yield ~2^3.5 instead of 2^5.
IMPACT_DAMPENING_EXPONENT = 0.7

# similar_benchmark() weights per keyword hit
DESCRIPTION_WEIGHT = 2
NAME_WEIGHT = 3
EXAMPLE_WEIGHT = 5
FEATURE_WEIGHT = 1


def _build(model: type, rows: Iterable[dict[str, Any]], key: str) -> dict[str, Any]:
    built: dict[str, Any] = {}
    for row in rows:
        try:
            entry = model(**row)
        except ValidationError as e:
            raise CatalogError(f"Invalid {model.__name__} {row.get(key)!r}: {e}") from e
        entry_id = getattr(entry, key)
        if entry_id in built:
            raise CatalogError(f"Duplicate {model.__name__} id: {entry_id!r}")
        built[entry_id] = entry
    return built


class BenchmarkCatalog:
    """
    Benchmarks, features and regions keyed by id.

    Lookups return None for unknown ids; it's up to the caller to decide
    whether that is fatal (the projector) or ignorable (feature impact).
    """

    def __init__(
        self,
        benchmarks: Iterable[dict[str, Any]] = APP_BENCHMARKS,
        features: Iterable[dict[str, Any]] = APP_FEATURES,
        regions: Iterable[dict[str, Any]] = REGION_PROFILES,
    ):
        self._benchmarks: dict[str, AppBenchmark] = _build(AppBenchmark, benchmarks, "category")
        self._features: dict[str, AppFeature] = _build(AppFeature, features, "id")
        self._regions: dict[str, RegionProfile] = _build(RegionProfile, regions, "region")

        missing = set(get_args(Region)) - set(self._regions)
        if missing:
            raise CatalogError(f"Missing region profiles: {sorted(missing)}")

        logger.debug(
            f"Catalog loaded: {len(self._benchmarks)} benchmarks, "
            f"{len(self._features)} features, {len(self._regions)} regions"
        )

    # -----------------------------------------------------------------------
    # BENCHMARKS
    # -----------------------------------------------------------------------

    def lookup(self, category: str) -> AppBenchmark | None:
        return self._benchmarks.get(category)

    def list_benchmarks(self) -> list[AppBenchmark]:
        return list(self._benchmarks.values())

    def list_categories(self) -> list[CategorySummary]:
        return [
            CategorySummary(id=b.category, name=b.name, description=b.description)
            for b in self._benchmarks.values()
        ]

    def category_ids(self) -> list[AppCategory]:
        return list(self._benchmarks)

    def similar_benchmark(self, keywords: Sequence[str]) -> AppBenchmark | None:
        """
        Find the benchmark that best matches a set of keywords.

        Every keyword is matched (case-insensitive substring) against the
        description, name, real-world examples and typical features, and
        the weighted hits are summed per benchmark.

        Returns:
            The highest scoring benchmark, the earliest in catalog order on
            ties, or None when nothing matched at all.
        """
        needles = [k.strip().lower() for k in keywords if k and k.strip()]

        best: AppBenchmark | None = None
        best_score = 0
        for benchmark in self._benchmarks.values():
            score = 0
            description = benchmark.description.lower()
            name = benchmark.name.lower()
            examples = [ex.lower() for ex in benchmark.real_world_examples]
            features = [f.lower() for f in benchmark.typical_features]

            for kw in needles:
                if kw in description:
                    score += DESCRIPTION_WEIGHT
                if kw in name:
                    score += NAME_WEIGHT
                if any(kw in ex for ex in examples):
                    score += EXAMPLE_WEIGHT
                if any(kw in f for f in features):
                    score += FEATURE_WEIGHT

            # strict > keeps the first benchmark on ties
            if score > best_score:
                best, best_score = benchmark, score

        return best

    # -----------------------------------------------------------------------
    # FEATURES
    # -----------------------------------------------------------------------

    def lookup_feature(self, feature_id: str) -> AppFeature | None:
        return self._features.get(feature_id)

    def list_features(self) -> list[AppFeature]:
        return list(self._features.values())

    def feature_ids(self) -> list[str]:
        return list(self._features)

    def known_features(self, feature_ids: Iterable[str]) -> list[str]:
        """Drop unknown ids and duplicates, keeping first-seen order."""
        seen: dict[str, None] = {}
        for fid in feature_ids:
            if fid in self._features:
                seen.setdefault(fid, None)
        return list(seen)

    def feature_impact(self, feature_ids: Iterable[str]) -> FeatureImpact:
        """
        Compose the load multipliers of a feature selection.

        Multipliers are dampened (x ** 0.7) before being multiplied together
        so large selections do not compound into runaway growth. Unknown
        ids are ignored and an empty selection is the identity.
        """
        requests = storage = bandwidth = 1.0

        for fid in feature_ids:
            feature = self._features.get(fid)
            if feature is None:
                continue
            requests *= feature.impact_on_requests ** IMPACT_DAMPENING_EXPONENT
            storage *= feature.impact_on_storage ** IMPACT_DAMPENING_EXPONENT
            bandwidth *= feature.impact_on_bandwidth ** IMPACT_DAMPENING_EXPONENT

        return FeatureImpact(
            requests_multiplier=round2(requests),
            storage_multiplier=round2(storage),
            bandwidth_multiplier=round2(bandwidth),
        )

    # -----------------------------------------------------------------------
    # REGIONS
    # -----------------------------------------------------------------------

    def region_profile(self, region: Region) -> RegionProfile:
        return self._regions[region]


# ---------------------------------------------------------------------------
# PROCESS-WIDE INSTANCE
# ---------------------------------------------------------------------------

_catalog: BenchmarkCatalog | None = None


def get_catalog() -> BenchmarkCatalog:
    """Get the shared catalog (built on first use)."""
    global _catalog
    if _catalog is None:
        _catalog = BenchmarkCatalog()
    return _catalog
