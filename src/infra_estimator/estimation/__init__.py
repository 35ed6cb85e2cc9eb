"""
Estimation module - capacity projection from benchmarks.
"""

from infra_estimator.estimation.projector import (
    DIRECT_CONFIDENCE,
    DEFAULT_GROWTH_RATE,
    SCENARIO_MULTIPLIERS,
    project,
    project_timeline,
    generate_scenarios,
    scale_estimate,
)

__all__ = [
    "DIRECT_CONFIDENCE",
    "DEFAULT_GROWTH_RATE",
    "SCENARIO_MULTIPLIERS",
    "project",
    "project_timeline",
    "generate_scenarios",
    "scale_estimate",
]
