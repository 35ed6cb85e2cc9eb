"""
Description Analysis Schemas

ClassifierOutput and InsightsOutput are the response_format models handed
to the LLM. Every field is required (nullable where the model may not know)
so OpenAI's strict structured-output mode accepts them.

AnalysisOutcome is what the rest of the system sees. It is built from a
validated ClassifierOutput, or by the keyword fallback, and records which
of the two produced it.
"""

from typing import Literal

from pydantic import BaseModel, Field

from infra_estimator.schemas.estimate import AppCategory


class ExtractedInfo(BaseModel):
    target_audience: str | None = None
    vertical: str | None = None
    similar_apps: list[str] = Field(default_factory=list)
    key_differentiator: str | None = None


# ---------------------------------------------------------------------------
# LLM RESPONSE FORMATS
# ---------------------------------------------------------------------------


class ClassifierExtractedInfo(BaseModel):
    target_audience: str | None
    vertical: str | None
    similar_apps: list[str]
    key_differentiator: str | None


class ClassifierOutput(BaseModel):
    """Raw structured output requested from the classifier model."""

    category: str = Field(description="Best matching category id")
    confidence: float = Field(description="0.0 to 1.0")
    detected_features: list[str] = Field(
        description="Feature ids explicitly mentioned or clearly required"
    )
    suggested_features: list[str] = Field(
        description="Feature ids not mentioned but probably needed"
    )
    extracted_info: ClassifierExtractedInfo
    reasoning: str = Field(description="Short justification of the classification")
    # category is a plain str on purpose: the model can and does return ids
    # outside the enumeration, and validation happens after parsing


class InsightsOutput(BaseModel):
    insights: list[str]
    risks: list[str]
    recommendations: list[str]
    scaling_considerations: list[str]


# ---------------------------------------------------------------------------
# DOMAIN RESULTS
# ---------------------------------------------------------------------------


class AnalysisOutcome(BaseModel):
    """Validated classification of a product description."""

    category: AppCategory
    confidence: float = Field(ge=0, le=1)
    detected_features: list[str] = Field(default_factory=list)
    suggested_features: list[str] = Field(default_factory=list)
    extracted_info: ExtractedInfo = Field(default_factory=ExtractedInfo)
    reasoning: str = ""
    source: Literal["classifier", "fallback"] = "classifier"


class EstimateInsights(BaseModel):
    """Qualitative notes attached to an estimate."""

    insights: list[str] = Field(default_factory=list)
    risks: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    scaling_considerations: list[str] = Field(default_factory=list)
