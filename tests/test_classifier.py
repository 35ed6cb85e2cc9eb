"""
Unit Tests for Description Classification

The OpenAI client is always an injected MagicMock; nothing here touches
the network.

Covers:
1. Output validation (category substitution, feature filtering)
2. Error values from the OpenAI classifier
3. Keyword fallback scoring
4. The two-branch decision in analyze_description
5. Factory selection from config
"""

import pytest
from unittest.mock import MagicMock

from infra_estimator.analysis import (
    KeywordClassifier,
    MockClassifier,
    OpenAIClassifier,
    analyze_description,
    detect_features,
    get_classifier,
    validate_classifier_output,
)
from infra_estimator.analysis.prompts import format_classifier_prompt
from infra_estimator.benchmarks import BenchmarkCatalog
from infra_estimator.config import EstimatorConfig
from infra_estimator.core import ClassificationError, Classifier
from infra_estimator.schemas.analysis import ClassifierExtractedInfo, ClassifierOutput


@pytest.fixture
def catalog():
    return BenchmarkCatalog()


def _output(**overrides) -> ClassifierOutput:
    fields = dict(
        category="marketplace",
        confidence=0.85,
        detected_features=["auth", "payments", "search"],
        suggested_features=["notifications"],
        extracted_info=ClassifierExtractedInfo(
            target_audience="cyclists",
            vertical="sports",
            similar_apps=["OLX"],
            key_differentiator=None,
        ),
        reasoning="Two-sided buy/sell platform",
    )
    fields.update(overrides)
    return ClassifierOutput(**fields)


def _mock_client(parsed=None, content=None, side_effect=None) -> MagicMock:
    client = MagicMock()
    if side_effect is not None:
        client.beta.chat.completions.parse.side_effect = side_effect
        return client
    message = MagicMock()
    message.parsed = parsed
    message.content = content
    response = MagicMock()
    response.choices = [MagicMock(message=message)]
    client.beta.chat.completions.parse.return_value = response
    return client


# ---------------------------------------------------------------------------
# OUTPUT VALIDATION
# ---------------------------------------------------------------------------


class TestValidateClassifierOutput:
    """Test post-parse validation of model output."""

    def test_valid_output_passes_through(self, catalog):
        outcome = validate_classifier_output(_output(), catalog)
        assert outcome.category == "marketplace"
        assert outcome.confidence == 0.85
        assert outcome.detected_features == ["auth", "payments", "search"]
        assert outcome.extracted_info.target_audience == "cyclists"
        assert outcome.source == "classifier"

    def test_unknown_category_becomes_saas_b2b(self, catalog):
        """Should substitute saas-b2b and cap confidence at 0.5."""
        outcome = validate_classifier_output(_output(category="web3-dao", confidence=0.95), catalog)
        assert outcome.category == "saas-b2b"
        assert outcome.confidence == 0.5

    def test_low_confidence_kept_on_substitution(self, catalog):
        outcome = validate_classifier_output(_output(category="web3-dao", confidence=0.3), catalog)
        assert outcome.confidence == 0.3

    def test_unknown_features_dropped(self, catalog):
        outcome = validate_classifier_output(
            _output(detected_features=["auth", "blockchain", "auth"], suggested_features=["ai"]),
            catalog,
        )
        assert outcome.detected_features == ["auth"]
        assert outcome.suggested_features == []

    def test_confidence_clamped(self, catalog):
        assert validate_classifier_output(_output(confidence=1.7), catalog).confidence == 1.0
        assert validate_classifier_output(_output(confidence=-0.2), catalog).confidence == 0.0


# ---------------------------------------------------------------------------
# OPENAI CLASSIFIER
# ---------------------------------------------------------------------------


class TestOpenAIClassifier:
    """Test the OpenAI-backed classifier with a mock client."""

    def test_successful_classification(self, catalog):
        client = _mock_client(parsed=_output())
        classifier = OpenAIClassifier(client=client, model="gpt-4o-mini", catalog=catalog)

        result = classifier.classify("A marketplace for used bikes")

        assert not isinstance(result, ClassificationError)
        assert result.category == "marketplace"
        kwargs = client.beta.chat.completions.parse.call_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["response_format"] is ClassifierOutput
        assert "A marketplace for used bikes" in kwargs["messages"][1]["content"]

    def test_reference_apps_reach_prompt(self, catalog):
        client = _mock_client(parsed=_output())
        classifier = OpenAIClassifier(client=client, model="m", catalog=catalog)

        classifier.classify("bike trading", reference_apps=["OLX", "Craigslist"])

        user_message = client.beta.chat.completions.parse.call_args.kwargs["messages"][1]["content"]
        assert "REFERENCE APPS: OLX, Craigslist" in user_message

    def test_api_error_returns_error_value(self, catalog):
        client = _mock_client(side_effect=RuntimeError("connection reset"))
        classifier = OpenAIClassifier(client=client, model="m", catalog=catalog)

        result = classifier.classify("anything")

        assert isinstance(result, ClassificationError)
        assert result.error_type == "RuntimeError"
        assert "connection reset" in result.error_message

    def test_empty_parse_returns_parse_error(self, catalog):
        client = _mock_client(parsed=None, content="I cannot help with that")
        classifier = OpenAIClassifier(client=client, model="m", catalog=catalog)

        result = classifier.classify("anything")

        assert isinstance(result, ClassificationError)
        assert result.error_type == "ParseError"
        assert result.raw_response == "I cannot help with that"

    def test_satisfies_protocol(self, catalog):
        classifier = OpenAIClassifier(client=MagicMock(), model="m", catalog=catalog)
        assert isinstance(classifier, Classifier)


# ---------------------------------------------------------------------------
# KEYWORD FALLBACK
# ---------------------------------------------------------------------------


class TestKeywordClassifier:
    """Test the deterministic fallback."""

    def test_default_when_nothing_matches(self, catalog):
        outcome = KeywordClassifier(catalog).classify("zzz qqq")
        assert outcome.category == "saas-b2b"
        assert outcome.confidence == 0.5
        assert outcome.source == "fallback"

    def test_keyword_hit(self, catalog):
        """One 0.3 hit -> 0.5 + 0.3 = 0.8, capped at 0.7."""
        outcome = KeywordClassifier(catalog).classify("An online marketplace for bikes")
        assert outcome.category == "marketplace"
        assert outcome.confidence == 0.7

    def test_hits_accumulate_per_category(self, catalog):
        """telemedicine (0.3) + health (0.2) both count for healthtech."""
        outcome = KeywordClassifier(catalog).classify("Telemedicine and health tips")
        assert outcome.category == "healthtech"
        assert outcome.confidence == 0.7

    def test_reference_apps_override_category(self, catalog):
        outcome = KeywordClassifier(catalog).classify("a blog", reference_apps=["Instagram"])
        assert outcome.category == "social-network"
        assert "Instagram" in outcome.reasoning

    def test_unmatched_reference_apps_keep_keyword_category(self, catalog):
        outcome = KeywordClassifier(catalog).classify("a blog", reference_apps=["zzzqqq"])
        assert outcome.category == "content-platform"

    def test_is_deterministic(self, catalog):
        text = "Chat app with photo upload and search"
        classifier = KeywordClassifier(catalog)
        assert classifier.classify(text) == classifier.classify(text)


class TestDetectFeatures:
    def test_auth_always_present(self):
        assert detect_features("") == ["auth"]

    def test_cues(self):
        features = detect_features("Live chat with photo upload, search and Stripe checkout")
        assert features[0] == "auth"
        for expected in ("media-upload", "real-time", "search", "chat", "payments"):
            assert expected in features
        assert "notifications" not in features


# ---------------------------------------------------------------------------
# TWO-BRANCH DECISION
# ---------------------------------------------------------------------------


class TestAnalyzeDescription:
    """Classifier result or keyword fallback, never a mix."""

    def test_uses_classifier_result(self, catalog):
        classifier = MockClassifier()
        outcome = analyze_description("A task tracker", classifier=classifier, catalog=catalog)
        assert outcome.source == "classifier"
        assert outcome.confidence == 0.9
        assert classifier.calls == ["A task tracker"]

    def test_falls_back_on_error(self, catalog):
        classifier = MockClassifier(
            error=ClassificationError(error_type="APIError", error_message="down")
        )
        outcome = analyze_description("An online marketplace", classifier=classifier, catalog=catalog)
        assert outcome.source == "fallback"
        assert outcome.category == "marketplace"
        assert outcome.reasoning.startswith("Keyword-based analysis")

    def test_fallback_uses_reference_apps(self, catalog):
        classifier = MockClassifier(error=ClassificationError("Timeout", "slow"))
        outcome = analyze_description(
            "something", classifier=classifier, reference_apps=["Nubank"], catalog=catalog
        )
        assert outcome.category == "fintech"

    def test_filters_unknown_features_from_any_classifier(self, catalog):
        from infra_estimator.schemas.analysis import AnalysisOutcome

        classifier = MockClassifier(
            outcome=AnalysisOutcome(
                category="fintech",
                confidence=0.8,
                detected_features=["auth", "quantum"],
                suggested_features=["payments", "payments"],
            )
        )
        outcome = analyze_description("a bank", classifier=classifier, catalog=catalog)
        assert outcome.detected_features == ["auth"]
        assert outcome.suggested_features == ["payments"]


# ---------------------------------------------------------------------------
# FACTORY
# ---------------------------------------------------------------------------


class TestGetClassifier:
    def test_mock_when_configured(self):
        config = EstimatorConfig(use_mock_classifier=True, openai_api_key="sk-test")
        assert isinstance(get_classifier(config), MockClassifier)

    def test_openai_when_key_present(self):
        config = EstimatorConfig(openai_api_key="sk-test")
        assert isinstance(get_classifier(config), OpenAIClassifier)

    def test_keywords_without_key(self):
        assert isinstance(get_classifier(EstimatorConfig()), KeywordClassifier)


class TestPrompt:
    def test_lists_every_category_and_feature(self, catalog):
        prompt = format_classifier_prompt("desc", catalog)
        for category in catalog.category_ids():
            assert f'"{category}"' in prompt
        for feature_id in catalog.feature_ids():
            assert f'"{feature_id}"' in prompt
        assert "REFERENCE APPS" not in prompt
