"""
Span attribute keys.

Model calls are traced by the OpenInference instrumentor with the
standard gen_ai.* keys; the estimate.* and pricing.* namespaces cover
everything around them.
"""

# ---------------------------------------------------------------------------
# ESTIMATE NAMESPACE
# ---------------------------------------------------------------------------

ESTIMATE_PATH = "estimate.path"  # "description" or "direct"
ESTIMATE_CATEGORY = "estimate.category"
ESTIMATE_REGION = "estimate.region"
ESTIMATE_MAU = "estimate.mau"
ESTIMATE_FEATURE_COUNT = "estimate.feature_count"
ESTIMATE_AVG_RPS = "estimate.requests.avg_per_second"
ESTIMATE_TOTAL_GB = "estimate.storage.total_gb"
ESTIMATE_BANDWIDTH_GB = "estimate.bandwidth.monthly_gb"

ANALYSIS_SOURCE = "estimate.analysis.source"  # "classifier" or "fallback"
ANALYSIS_CONFIDENCE = "estimate.analysis.confidence"


# ---------------------------------------------------------------------------
# PRICING NAMESPACE
# ---------------------------------------------------------------------------

PRICING_RECOMMENDED = "pricing.recommended_provider"
PRICING_CHEAPEST = "pricing.cheapest_provider"
PRICING_CHEAPEST_TOTAL = "pricing.cheapest_monthly_total"


# ---------------------------------------------------------------------------
# RESOURCE NAMESPACE
# ---------------------------------------------------------------------------

RESOURCE_PROJECT_NAME = "openinference.project.name"  # Phoenix project
RESOURCE_SERVICE_NAME = "service.name"


# ---------------------------------------------------------------------------
# HELPER FUNCTIONS
# ---------------------------------------------------------------------------


def estimate_attributes(
    category: str,
    region: str,
    mau: int,
    feature_count: int,
    path: str,
) -> dict:
    """Create attributes dict for an estimate span."""
    return {
        ESTIMATE_PATH: path,
        ESTIMATE_CATEGORY: category,
        ESTIMATE_REGION: region,
        ESTIMATE_MAU: mau,
        ESTIMATE_FEATURE_COUNT: feature_count,
    }


def pricing_attributes(
    recommended: str,
    cheapest: str,
    cheapest_total: float,
) -> dict:
    """Create attributes dict for the pricing outcome."""
    return {
        PRICING_RECOMMENDED: recommended,
        PRICING_CHEAPEST: cheapest,
        PRICING_CHEAPEST_TOTAL: cheapest_total,
    }


def resource_attributes(project_name: str) -> dict:
    """Create attributes dict for the tracer provider resource."""
    return {
        RESOURCE_PROJECT_NAME: project_name,
        RESOURCE_SERVICE_NAME: project_name,
    }
