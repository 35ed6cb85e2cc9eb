"""
Keyword classifier - deterministic fallback when no LLM is available.

Scores each category by the keywords found in the description, picks
the best, and detects a handful of features from textual cues. It never
fails, which is what makes it a safe fallback.
"""

from __future__ import annotations

from collections.abc import Sequence

from infra_estimator.benchmarks.catalog import BenchmarkCatalog, get_catalog
from infra_estimator.core.rounding import round2
from infra_estimator.schemas.analysis import AnalysisOutcome, ExtractedInfo

DEFAULT_CATEGORY = "saas-b2b"
BASE_CONFIDENCE = 0.5
MAX_CONFIDENCE = 0.7

# keyword -> [(category, boost)]
CATEGORY_KEYWORDS: dict[str, list[tuple[str, float]]] = {
    "marketplace": [("marketplace", 0.3)],
    "airbnb": [("marketplace", 0.3)],
    "uber": [("marketplace", 0.3)],
    "e-commerce": [("e-commerce", 0.3)],
    "ecommerce": [("e-commerce", 0.3)],
    "online store": [("e-commerce", 0.2)],
    "shop": [("e-commerce", 0.2)],
    "blog": [("content-platform", 0.3)],
    "medium": [("content-platform", 0.3)],
    "articles": [("content-platform", 0.2)],
    "social network": [("social-network", 0.3)],
    "instagram": [("social-network", 0.3)],
    "community": [("social-network", 0.2)],
    "fintech": [("fintech", 0.3)],
    "bank": [("fintech", 0.2)],
    "payment": [("fintech", 0.2)],
    "course": [("edtech", 0.3)],
    "education": [("edtech", 0.2)],
    "health": [("healthtech", 0.2)],
    "telemedicine": [("healthtech", 0.3)],
    "notion": [("saas-b2b", 0.3)],
    "slack": [("saas-b2b", 0.3)],
    "productivity": [("saas-b2b", 0.2)],
    "api": [("developer-tools", 0.2)],
    "developer": [("developer-tools", 0.3)],
}

# feature id -> cues in the description
FEATURE_CUES: dict[str, tuple[str, ...]] = {
    "media-upload": ("upload", "image", "photo"),
    "real-time": ("real-time", "realtime", "live", "collaborat"),
    "search": ("search", "filter"),
    "chat": ("chat", "messag"),
    "payments": ("payment", "checkout", "stripe"),
    "notifications": ("notif",),
}


class KeywordClassifier:
    """Rule-based Classifier. Always returns an AnalysisOutcome."""

    def __init__(self, catalog: BenchmarkCatalog | None = None):
        self._catalog = catalog or get_catalog()

    def classify(
        self,
        description: str,
        reference_apps: Sequence[str] | None = None,
    ) -> AnalysisOutcome:
        text = description.lower()

        scores = {category: 0.0 for category in self._catalog.category_ids()}
        for keyword, matches in CATEGORY_KEYWORDS.items():
            if keyword in text:
                for category, boost in matches:
                    if category in scores:
                        scores[category] += boost

        category = DEFAULT_CATEGORY
        confidence = BASE_CONFIDENCE
        reasoning = "Keyword-based analysis (fallback)"

        # max() keeps the first category in catalog order on ties
        best = max(scores, key=scores.__getitem__) if scores else None
        if best is not None and scores[best] > 0:
            category = best
            confidence = min(MAX_CONFIDENCE, BASE_CONFIDENCE + scores[best])

        if reference_apps:
            similar = self._catalog.similar_benchmark(reference_apps)
            if similar is not None:
                category = similar.category
                reasoning = (
                    f"Keyword-based analysis (fallback), category taken from "
                    f"reference apps: {', '.join(reference_apps)}"
                )

        return AnalysisOutcome(
            category=category,
            confidence=round2(confidence),
            detected_features=detect_features(text),
            suggested_features=[],
            extracted_info=ExtractedInfo(similar_apps=list(reference_apps or [])),
            reasoning=reasoning,
            source="fallback",
        )


def detect_features(text: str) -> list[str]:
    """Detect feature ids from cues. auth is always assumed."""
    text = text.lower()
    detected = ["auth"]
    for feature_id, cues in FEATURE_CUES.items():
        if any(cue in text for cue in cues):
            detected.append(feature_id)
    return detected
