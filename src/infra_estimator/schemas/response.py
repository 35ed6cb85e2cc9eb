"""Response envelopes assembled by infra_estimator.service."""

from datetime import datetime

from pydantic import BaseModel, Field

from infra_estimator.schemas.analysis import AnalysisOutcome, EstimateInsights
from infra_estimator.schemas.estimate import EstimateResult, RegionProfile
from infra_estimator.schemas.pricing import PricingResult


class TargetUsers(BaseModel):
    month6: int = Field(gt=0)
    month12: int = Field(gt=0)


class TimelinePoint(BaseModel):
    mau: int
    requests_per_second: float
    storage_gb: float
    estimated_cost_usd: float


class TimelineSummary(BaseModel):
    month1: TimelinePoint
    month6: TimelinePoint
    month12: TimelinePoint


class EstimateResponse(BaseModel):
    """
    Complete answer for one estimate request.

    analysis, insights and timeline are only present on the
    description-driven path.
    """

    analysis: AnalysisOutcome | None = None
    estimate: EstimateResult
    pricing: PricingResult
    insights: EstimateInsights | None = None
    timeline: TimelineSummary | None = None
    region_profile: RegionProfile


class HealthStatus(BaseModel):
    status: str
    classifier_available: bool
    timestamp: datetime
