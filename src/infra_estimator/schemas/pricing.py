"""Pricing output schemas."""

from pydantic import BaseModel, Field


class CostBreakdown(BaseModel):
    compute: float = 0.0
    database: float = 0.0
    storage: float = 0.0
    bandwidth: float = 0.0
    other: float = 0.0


class CloudPricing(BaseModel):
    """Monthly cost of one provider at the tier its rules selected."""

    provider: str
    name: str
    tier: str
    monthly_total: float
    breakdown: CostBreakdown
    notes: list[str] = Field(default_factory=list)


class PricingResult(BaseModel):
    """All provider quotes (cheapest first) plus one recommendation."""

    estimates: list[CloudPricing]
    recommended_provider: str
    recommendation: str

    @property
    def cheapest(self) -> CloudPricing:
        return self.estimates[0]
