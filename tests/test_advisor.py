"""
Unit Tests for the Estimate Advisor

Insights always come back, either from the model or from the static
benchmark-derived fallback.
"""

import pytest
from unittest.mock import MagicMock

from infra_estimator.analysis import OpenAIAdvisor, StaticAdvisor, get_advisor, get_insights
from infra_estimator.benchmarks import BenchmarkCatalog
from infra_estimator.config import EstimatorConfig
from infra_estimator.core import Advisor, AdvisorError, AnalysisError, ClassificationError
from infra_estimator.schemas.analysis import InsightsOutput


@pytest.fixture
def catalog():
    return BenchmarkCatalog()


def _client_returning(parsed) -> MagicMock:
    client = MagicMock()
    message = MagicMock(parsed=parsed, content=None)
    client.beta.chat.completions.parse.return_value = MagicMock(choices=[MagicMock(message=message)])
    return client


class TestStaticAdvisor:
    def test_uses_benchmark_ratios(self, catalog):
        insights = StaticAdvisor(catalog).advise("a tool", "saas-b2b", 10_000)
        assert "SaaS B2B apps typically serve 60% reads" in insights.insights
        assert "The average DAU/MAU ratio is 60%" in insights.insights

    def test_every_section_populated(self, catalog):
        insights = StaticAdvisor(catalog).advise("a shop", "e-commerce", 1_000)
        assert insights.insights
        assert insights.risks
        assert insights.recommendations
        assert insights.scaling_considerations

    def test_satisfies_protocol(self, catalog):
        assert isinstance(StaticAdvisor(catalog), Advisor)


class TestOpenAIAdvisor:
    def test_returns_model_insights(self, catalog):
        parsed = InsightsOutput(
            insights=["Feeds are read-heavy"],
            risks=["Viral spikes"],
            recommendations=["Cache the feed"],
            scaling_considerations=["Shard by user id"],
        )
        client = _client_returning(parsed)
        advisor = OpenAIAdvisor(client=client, model="m", catalog=catalog)

        insights = advisor.advise("photo sharing", "social-network", 50_000)

        assert insights.risks == ["Viral spikes"]
        user_message = client.beta.chat.completions.parse.call_args.kwargs["messages"][1]["content"]
        assert "social-network (Social Network)" in user_message
        assert "50,000" in user_message

    def test_api_error_returns_error_value(self, catalog):
        client = MagicMock()
        client.beta.chat.completions.parse.side_effect = TimeoutError("timed out")
        advisor = OpenAIAdvisor(client=client, model="m", catalog=catalog)

        result = advisor.advise("x", "fintech", 100)

        assert isinstance(result, AdvisorError)
        assert result.error_type == "TimeoutError"

    def test_none_parse_returns_error_value(self, catalog):
        advisor = OpenAIAdvisor(client=_client_returning(None), model="m", catalog=catalog)
        result = advisor.advise("x", "fintech", 100)
        assert isinstance(result, AdvisorError)
        assert result.error_type == "ParseError"

    def test_error_is_not_a_classification_error(self, catalog):
        """Advisor failures carry their own type, sharing only the AnalysisError base."""
        client = MagicMock()
        client.beta.chat.completions.parse.side_effect = RuntimeError("boom")
        advisor = OpenAIAdvisor(client=client, model="m", catalog=catalog)

        result = advisor.advise("x", "fintech", 100)

        assert type(result) is AdvisorError
        assert isinstance(result, AnalysisError)
        assert not isinstance(result, ClassificationError)
        assert result.error_message == "boom"


class TestGetInsights:
    def test_falls_back_to_static(self, catalog):
        failing = MagicMock()
        failing.advise.return_value = AdvisorError("APIError", "down")

        insights = get_insights("x", "fintech", 100, advisor=failing, catalog=catalog)

        assert insights == StaticAdvisor(catalog).advise("x", "fintech", 100)

    def test_passes_through_success(self, catalog):
        advisor = StaticAdvisor(catalog)
        assert get_insights("x", "edtech", 10, advisor=advisor) == advisor.advise("x", "edtech", 10)


class TestGetAdvisor:
    def test_static_without_key(self):
        assert isinstance(get_advisor(EstimatorConfig()), StaticAdvisor)

    def test_static_in_mock_mode(self):
        config = EstimatorConfig(openai_api_key="sk-test", use_mock_classifier=True)
        assert isinstance(get_advisor(config), StaticAdvisor)

    def test_openai_with_key(self):
        assert isinstance(get_advisor(EstimatorConfig(openai_api_key="sk-test")), OpenAIAdvisor)
