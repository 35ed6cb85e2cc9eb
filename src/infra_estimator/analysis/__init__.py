"""
Analysis module - the boundary to the external classifier.

Everything that can fail because of a network call lives here, and all
of it degrades to a deterministic local answer.
"""

from infra_estimator.analysis.classifier import (
    OpenAIClassifier,
    MockClassifier,
    analyze_description,
    get_classifier,
    validate_classifier_output,
)
from infra_estimator.analysis.keywords import (
    KeywordClassifier,
    detect_features,
)
from infra_estimator.analysis.advisor import (
    OpenAIAdvisor,
    StaticAdvisor,
    get_advisor,
    get_insights,
)

__all__ = [
    # Classification
    "OpenAIClassifier",
    "KeywordClassifier",
    "MockClassifier",
    "analyze_description",
    "get_classifier",
    "validate_classifier_output",
    "detect_features",
    # Insights
    "OpenAIAdvisor",
    "StaticAdvisor",
    "get_advisor",
    "get_insights",
]
