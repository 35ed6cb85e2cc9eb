"""
Core protocols for the external collaborators of the estimation core.

The core never talks to an AI vendor directly. It depends on two narrow
contracts, and anything that satisfies them (an LLM client, a rule-based
scorer, a test double) can be swapped in without the projector noticing.

    Classifier.classify(text) -> AnalysisOutcome | ClassificationError
    Advisor.advise(...)       -> EstimateInsights | AdvisorError

Failures are returned, not raised. The caller decides whether to fall
back, and there is no exception path to forget about.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from infra_estimator.schemas.analysis import AnalysisOutcome, EstimateInsights
    from infra_estimator.schemas.estimate import AppCategory


@dataclass
class AnalysisError:
    """An external analysis call failed or produced unusable output."""

    error_type: str
    error_message: str
    raw_response: str | None = None


@dataclass
class ClassificationError(AnalysisError):
    """The classifier could not map a description to a category."""


@dataclass
class AdvisorError(AnalysisError):
    """The advisor could not produce insights for an estimate."""



@runtime_checkable
class Classifier(Protocol):
    """
    Contract for description classification.

    Implementations:
    - OpenAIClassifier (production)
    - KeywordClassifier (deterministic fallback)
    - MockClassifier (testing)
    """

    def classify(
        self,
        description: str,
        reference_apps: Sequence[str] | None = None,
    ) -> AnalysisOutcome | ClassificationError:
        """Map free text to a category and feature list."""
        ...


@runtime_checkable
class Advisor(Protocol):
    """
    Contract for qualitative insights on an estimate.

    Implementations:
    - OpenAIAdvisor (production)
    - StaticAdvisor (benchmark-derived fallback)
    """

    def advise(
        self,
        description: str,
        category: AppCategory,
        estimated_mau: int,
    ) -> EstimateInsights | AdvisorError:
        """Produce insights, risks and recommendations."""
        ...
