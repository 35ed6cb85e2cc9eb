"""
CLI module - the infra-estimate command.
"""

from infra_estimator.cli.commands import (
    main,
    run_direct_cli,
    run_describe_cli,
    run_categories_cli,
    run_features_cli,
    run_benchmarks_cli,
    run_health_cli,
)

__all__ = [
    "main",
    "run_direct_cli",
    "run_describe_cli",
    "run_categories_cli",
    "run_features_cli",
    "run_benchmarks_cli",
    "run_health_cli",
]
