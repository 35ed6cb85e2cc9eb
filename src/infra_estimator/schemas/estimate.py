"""
Estimation Schemas

These Pydantic models are the contract between the three core stages:

    BenchmarkCatalog -> CapacityProjector -> PricingEngine

Reference data (benchmarks, features, regions) is frozen: it is built once
at import time and shared read-only by every caller. Estimates are plain
value objects; the only "update" ever applied to one is the scenario cost
backfill, which goes through model_copy() and leaves the original intact.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

AppCategory = Literal[
    "content-platform",
    "marketplace",
    "saas-b2b",
    "saas-b2c",
    "e-commerce",
    "social-network",
    "fintech",
    "edtech",
    "healthtech",
    "developer-tools",
]

Region = Literal["brazil", "latam", "us", "europe", "global"]

ScenarioName = Literal["conservative", "moderate", "optimistic"]


# ---------------------------------------------------------------------------
# REFERENCE DATA
# ---------------------------------------------------------------------------


class AppBenchmark(BaseModel):
    """
    Usage profile for one product category.

    Sizes follow the units the projector expects: page size in KB,
    storage in MB, session duration in minutes.
    """

    model_config = ConfigDict(frozen=True)

    category: AppCategory
    name: str
    description: str

    read_write_ratio: float = Field(gt=0, le=1, description="0.85 = 85% reads")
    dau_mau_ratio: float = Field(gt=0, le=1)
    peak_multiplier: float = Field(ge=1, description="Peak traffic vs average")

    avg_requests_per_dau: float = Field(gt=0)
    avg_session_duration: float = Field(gt=0)
    avg_sessions_per_day: float = Field(gt=0)
    avg_page_views_per_session: float = Field(gt=0)

    avg_page_size: float = Field(gt=0)
    storage_per_user: float = Field(ge=0)
    storage_per_content_item: float = Field(ge=0)
    avg_content_items_per_user: float = Field(ge=0)
    # e-commerce shoppers create no content, hence ge=0 above

    typical_features: tuple[str, ...]
    real_world_examples: tuple[str, ...]
    data_source: str


class AppFeature(BaseModel):
    """A selectable feature and its relative load impact (1.0 = no impact)."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    impact_on_requests: float = Field(ge=1.0)
    impact_on_storage: float = Field(ge=1.0)
    impact_on_bandwidth: float = Field(ge=1.0)
    requires_realtime: bool = False
    requires_media_upload: bool = False


class FeatureImpact(BaseModel):
    """Composite multipliers for a feature selection."""

    model_config = ConfigDict(frozen=True)

    requests_multiplier: float = 1.0
    storage_multiplier: float = 1.0
    bandwidth_multiplier: float = 1.0


class PeakHours(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0, le=24)
    end: int = Field(ge=0, le=24)


class RegionProfile(BaseModel):
    """Regional context. Informational only, not folded into the numbers."""

    model_config = ConfigDict(frozen=True)

    region: Region
    peak_hours: PeakHours
    timezone: str
    bandwidth_cost_multiplier: float = Field(ge=1.0)
    latency_requirement: Literal["low", "medium", "high"]


class CategorySummary(BaseModel):
    id: AppCategory
    name: str
    description: str


# ---------------------------------------------------------------------------
# PROJECTOR INPUT
# ---------------------------------------------------------------------------


class EstimateInput(BaseModel):
    """Everything the projector needs for a single estimate."""

    category: str
    target_mau: int = Field(gt=0)
    features: list[str] = Field(default_factory=list)
    has_media_upload: bool = False
    avg_media_size_mb: float = Field(default=2.0, ge=0)
    has_realtime: bool = False
    region: Region = "us"


# ---------------------------------------------------------------------------
# PROJECTOR OUTPUT
# ---------------------------------------------------------------------------


class RequestMetrics(BaseModel):
    avg_per_second: float
    peak_per_second: float
    monthly_total: int
    read_percentage: int
    write_percentage: int


class StorageMetrics(BaseModel):
    database_gb: float
    media_storage_gb: float
    total_gb: float
    monthly_growth_gb: float


class BandwidthMetrics(BaseModel):
    monthly_gb: float
    avg_mbps: float


class UserMetrics(BaseModel):
    mau: int
    dau: int
    concurrent_peak: int


class EstimateScenario(BaseModel):
    """A linearly scaled view of the base estimate."""

    multiplier: float
    requests: float
    storage_gb: float
    bandwidth_gb: float
    monthly_cost_usd: float | None = None
    # None until the pricing engine backfills it


class ScenarioSet(BaseModel):
    conservative: EstimateScenario
    moderate: EstimateScenario
    optimistic: EstimateScenario


class EstimateResult(BaseModel):
    """Full capacity projection for one input."""

    category: AppCategory
    confidence: float = Field(ge=0, le=1)
    region: Region

    requests: RequestMetrics
    storage: StorageMetrics
    bandwidth: BandwidthMetrics
    users: UserMetrics
    scenarios: ScenarioSet


class Timeline(BaseModel):
    """Re-projections of the same input at later growth horizons."""

    month1: EstimateResult
    month6: EstimateResult
    month12: EstimateResult
