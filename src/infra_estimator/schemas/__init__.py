"""
Schemas - Pydantic models shared by every stage of the pipeline.
"""

from infra_estimator.schemas.estimate import (
    AppCategory,
    Region,
    ScenarioName,
    AppBenchmark,
    AppFeature,
    FeatureImpact,
    PeakHours,
    RegionProfile,
    CategorySummary,
    EstimateInput,
    RequestMetrics,
    StorageMetrics,
    BandwidthMetrics,
    UserMetrics,
    EstimateScenario,
    ScenarioSet,
    EstimateResult,
    Timeline,
)
from infra_estimator.schemas.pricing import (
    CostBreakdown,
    CloudPricing,
    PricingResult,
)
from infra_estimator.schemas.analysis import (
    ExtractedInfo,
    ClassifierOutput,
    InsightsOutput,
    AnalysisOutcome,
    EstimateInsights,
)
from infra_estimator.schemas.response import (
    TargetUsers,
    TimelinePoint,
    TimelineSummary,
    EstimateResponse,
    HealthStatus,
)

__all__ = [
    # Enumerations
    "AppCategory",
    "Region",
    "ScenarioName",
    # Reference data
    "AppBenchmark",
    "AppFeature",
    "FeatureImpact",
    "PeakHours",
    "RegionProfile",
    "CategorySummary",
    # Estimation
    "EstimateInput",
    "RequestMetrics",
    "StorageMetrics",
    "BandwidthMetrics",
    "UserMetrics",
    "EstimateScenario",
    "ScenarioSet",
    "EstimateResult",
    "Timeline",
    # Pricing
    "CostBreakdown",
    "CloudPricing",
    "PricingResult",
    # Analysis
    "ExtractedInfo",
    "ClassifierOutput",
    "InsightsOutput",
    "AnalysisOutcome",
    "EstimateInsights",
    # Responses
    "TargetUsers",
    "TimelinePoint",
    "TimelineSummary",
    "EstimateResponse",
    "HealthStatus",
]
