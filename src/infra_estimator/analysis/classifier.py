"""
Description classifier - free text to category + features.

Follows the same pattern as the rest of the codebase:
1. Protocol (core.protocols.Classifier) defines the contract
2. OpenAIClassifier for production (structured outputs)
3. KeywordClassifier as the deterministic fallback (keywords.py)
4. MockClassifier as a test double
5. get_classifier() factory

TWO-BRANCH DECISION:
--------------------
analyze_description() either takes the classifier's output (validated
against catalog ids) or, if the classifier returned a ClassificationError,
runs the keyword scorer from scratch. Results from the two branches are
never merged.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from openai import OpenAI
from pydantic import ValidationError

from infra_estimator.analysis.keywords import DEFAULT_CATEGORY, KeywordClassifier
from infra_estimator.analysis.prompts import CLASSIFIER_SYSTEM_PROMPT, format_classifier_prompt
from infra_estimator.benchmarks.catalog import BenchmarkCatalog, get_catalog
from infra_estimator.config import EstimatorConfig, get_config
from infra_estimator.core.protocols import ClassificationError, Classifier
from infra_estimator.schemas.analysis import AnalysisOutcome, ClassifierOutput, ExtractedInfo

logger = logging.getLogger(__name__)

# confidence ceiling when the model's category had to be replaced
SUBSTITUTED_CATEGORY_MAX_CONFIDENCE = 0.5


# ---------------------------------------------------------------------------
# OUTPUT VALIDATION
# ---------------------------------------------------------------------------


def validate_classifier_output(
    output: ClassifierOutput,
    catalog: BenchmarkCatalog,
) -> AnalysisOutcome:
    """
    Turn raw model output into a trustworthy AnalysisOutcome.

    - Unknown category -> generic SaaS B2B bucket, confidence capped at 0.5
    - Unknown feature ids -> dropped
    - Confidence clamped to [0, 1]
    """
    confidence = min(1.0, max(0.0, output.confidence))
    category = output.category

    if catalog.lookup(category) is None:
        logger.warning(f"Classifier returned unknown category {category!r}, using {DEFAULT_CATEGORY}")
        category = DEFAULT_CATEGORY
        confidence = min(confidence, SUBSTITUTED_CATEGORY_MAX_CONFIDENCE)

    info = output.extracted_info
    return AnalysisOutcome(
        category=category,
        confidence=confidence,
        detected_features=catalog.known_features(output.detected_features),
        suggested_features=catalog.known_features(output.suggested_features),
        extracted_info=ExtractedInfo(
            target_audience=info.target_audience,
            vertical=info.vertical,
            similar_apps=list(info.similar_apps),
            key_differentiator=info.key_differentiator,
        ),
        reasoning=output.reasoning,
        source="classifier",
    )


# ---------------------------------------------------------------------------
# OPENAI CLASSIFIER (Production)
# ---------------------------------------------------------------------------


class OpenAIClassifier:
    """
    LLM classifier using OpenAI structured outputs.

    The client is injectable so tests can pass a mock and never hit the
    network.
    """

    def __init__(
        self,
        client: OpenAI | None = None,
        model: str | None = None,
        catalog: BenchmarkCatalog | None = None,
        config: EstimatorConfig | None = None,
    ):
        config = config or get_config()
        self._client = client or OpenAI(
            api_key=config.openai_api_key,
            timeout=config.classifier_timeout_s,
        )
        self._model = model or config.classifier_model
        self._catalog = catalog or get_catalog()

    @property
    def model(self) -> str:
        return self._model

    def classify(
        self,
        description: str,
        reference_apps: Sequence[str] | None = None,
    ) -> AnalysisOutcome | ClassificationError:
        user_prompt = format_classifier_prompt(description, self._catalog, reference_apps)

        try:
            response = self._client.beta.chat.completions.parse(
                model=self._model,
                messages=[
                    {"role": "system", "content": CLASSIFIER_SYSTEM_PROMPT},
                    {"role": "user", "content": user_prompt},
                ],
                response_format=ClassifierOutput,
            )
        except ValidationError as e:
            return ClassificationError(error_type="ValidationError", error_message=str(e))
        except Exception as e:
            logger.error(f"Classifier call failed: {e}")
            return ClassificationError(error_type=type(e).__name__, error_message=str(e))

        message = response.choices[0].message
        if message.parsed is None:
            return ClassificationError(
                error_type="ParseError",
                error_message="Model returned None for parsed output",
                raw_response=message.content,
            )

        return validate_classifier_output(message.parsed, self._catalog)


# ---------------------------------------------------------------------------
# MOCK CLASSIFIER (Testing)
# ---------------------------------------------------------------------------


class MockClassifier:
    """
    Canned Classifier for tests and offline development.

    Returns the given outcome (or error) on every call. With neither, it
    answers a fixed SaaS B2B classification.
    """

    def __init__(
        self,
        outcome: AnalysisOutcome | None = None,
        error: ClassificationError | None = None,
    ):
        self._outcome = outcome or AnalysisOutcome(
            category="saas-b2b",
            confidence=0.9,
            detected_features=["auth"],
            suggested_features=[],
            reasoning="Mock classification",
        )
        self._error = error
        self.calls: list[str] = []

    def classify(
        self,
        description: str,
        reference_apps: Sequence[str] | None = None,
    ) -> AnalysisOutcome | ClassificationError:
        self.calls.append(description)
        if self._error is not None:
            return self._error
        return self._outcome


# ---------------------------------------------------------------------------
# FACTORY + ENTRY POINT
# ---------------------------------------------------------------------------


def get_classifier(config: EstimatorConfig | None = None) -> Classifier:
    """
    Pick a classifier for the current configuration.

    Mock if USE_MOCK_CLASSIFIER is set, OpenAI if an API key is present,
    otherwise the keyword scorer.
    """
    config = config or get_config()
    if config.use_mock_classifier:
        return MockClassifier()
    if config.openai_api_key:
        return OpenAIClassifier(config=config)
    return KeywordClassifier()


def analyze_description(
    description: str,
    classifier: Classifier | None = None,
    reference_apps: Sequence[str] | None = None,
    catalog: BenchmarkCatalog | None = None,
) -> AnalysisOutcome:
    """
    Classify a description, falling back to keywords on failure.

    Args:
        description: Free-text product description
        classifier: Injected classifier (factory default if None)
        reference_apps: Optional list of similar products
        catalog: Benchmark catalog (shared process catalog if None)

    Returns:
        AnalysisOutcome whose feature ids are all known to the catalog
    """
    catalog = catalog or get_catalog()
    classifier = classifier or get_classifier()

    result = classifier.classify(description, reference_apps)

    if isinstance(result, ClassificationError):
        logger.warning(
            f"Classification failed ({result.error_type}: {result.error_message}), "
            "using keyword fallback"
        )
        return KeywordClassifier(catalog).classify(description, reference_apps)

    return result.model_copy(
        update={
            "detected_features": catalog.known_features(result.detected_features),
            "suggested_features": catalog.known_features(result.suggested_features),
        }
    )
