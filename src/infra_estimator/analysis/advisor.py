"""
Estimate advisor - qualitative insights to go with the numbers.

OpenAIAdvisor asks the model; StaticAdvisor derives generic advice from
the benchmark and never fails. get_insights() is the entry point and
always returns an EstimateInsights.
"""

from __future__ import annotations

import logging

from openai import OpenAI
from pydantic import ValidationError

from infra_estimator.analysis.prompts import ADVISOR_SYSTEM_PROMPT, format_advisor_prompt
from infra_estimator.benchmarks.catalog import BenchmarkCatalog, get_catalog
from infra_estimator.config import EstimatorConfig, get_config
from infra_estimator.core.protocols import Advisor, AdvisorError
from infra_estimator.core.rounding import round_half_up
from infra_estimator.schemas.analysis import EstimateInsights, InsightsOutput
from infra_estimator.schemas.estimate import AppCategory

logger = logging.getLogger(__name__)


class OpenAIAdvisor:
    """Production advisor using OpenAI structured outputs."""

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

    def advise(
        self,
        description: str,
        category: AppCategory,
        estimated_mau: int,
    ) -> EstimateInsights | AdvisorError:
        benchmark = self._catalog.lookup(category)
        user_prompt = format_advisor_prompt(description, benchmark, category, estimated_mau)

        try:
            response = self._client.beta.chat.completions.parse(
                model=self._model,
                messages=[
                    {"role": "system", "content": ADVISOR_SYSTEM_PROMPT},
                    {"role": "user", "content": user_prompt},
                ],
                response_format=InsightsOutput,
            )
        except ValidationError as e:
            return AdvisorError(error_type="ValidationError", error_message=str(e))
        except Exception as e:
            logger.error(f"Advisor call failed: {e}")
            return AdvisorError(error_type=type(e).__name__, error_message=str(e))

        parsed = response.choices[0].message.parsed
        if parsed is None:
            return AdvisorError(
                error_type="ParseError",
                error_message="Model returned None for parsed output",
                raw_response=response.choices[0].message.content,
            )

        return EstimateInsights(**parsed.model_dump())


class StaticAdvisor:
    """Benchmark-derived advice. Deterministic, no external calls."""

    def __init__(self, catalog: BenchmarkCatalog | None = None):
        self._catalog = catalog or get_catalog()

    def advise(
        self,
        description: str,
        category: AppCategory,
        estimated_mau: int,
    ) -> EstimateInsights:
        benchmark = self._catalog.lookup(category)
        name = benchmark.name if benchmark else category
        read_share = round_half_up((benchmark.read_write_ratio if benchmark else 0.7) * 100)
        dau_share = round_half_up((benchmark.dau_mau_ratio if benchmark else 0.3) * 100)

        return EstimateInsights(
            insights=[
                f"{name} apps typically serve {read_share}% reads",
                f"The average DAU/MAU ratio is {dau_share}%",
                "Consider aggressive caching to reduce database load",
            ],
            risks=[
                "Traffic spikes during special events can exceed the estimate",
                "Storage growth can accelerate as engagement increases",
            ],
            recommendations=[
                "Cache frequent queries with Redis/Valkey",
                "Use a CDN for static assets and media",
                "Configure autoscaling from day one",
            ],
            scaling_considerations=[
                "Plan database sharding above 100GB",
                "Consider splitting into services above 10k req/s",
            ],
        )


def get_advisor(config: EstimatorConfig | None = None) -> Advisor:
    """OpenAI advisor when a key is configured, static advice otherwise."""
    config = config or get_config()
    if config.openai_api_key and not config.use_mock_classifier:
        return OpenAIAdvisor(config=config)
    return StaticAdvisor()


def get_insights(
    description: str,
    category: AppCategory,
    estimated_mau: int,
    advisor: Advisor | None = None,
    catalog: BenchmarkCatalog | None = None,
) -> EstimateInsights:
    """Ask the advisor, falling back to static advice on failure."""
    advisor = advisor or get_advisor()
    result = advisor.advise(description, category, estimated_mau)

    if isinstance(result, AdvisorError):
        logger.warning(f"Insights failed ({result.error_type}), using static advice")
        return StaticAdvisor(catalog).advise(description, category, estimated_mau)

    return result
