"""
Runtime configuration.

Loads settings from environment variables once and caches them. Nothing
in the estimation core reads the environment directly; it all goes
through get_config() so tests can swap settings with reset_config().
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).lower() in ("true", "1", "yes")


@dataclass
class EstimatorConfig:
    """Configuration for the estimator and its optional collaborators.

    Environment Variables:
        OPENAI_API_KEY: Enables the LLM classifier and advisor when set
        CLASSIFIER_MODEL: Model used for classification (default: gpt-4o-mini)
        CLASSIFIER_TIMEOUT_S: Per-request timeout for the LLM (default: 30)
        USE_MOCK_CLASSIFIER: Use the offline mock classifier (default: false)
        ESTIMATOR_GROWTH_RATE: Monthly MAU growth for timelines (default: 0.15)
        ESTIMATOR_DEFAULT_MEDIA_MB: Media size when none is given (default: 2.0)
        PHOENIX_ENABLED: Enable Phoenix tracing (default: false)
        PHOENIX_PROJECT_NAME: Project name in Phoenix UI (default: infra-estimator)
        PHOENIX_COLLECTOR_ENDPOINT: Remote collector (optional, local if empty)
    """

    openai_api_key: str | None = None
    classifier_model: str = "gpt-4o-mini"
    classifier_timeout_s: float = 30.0
    use_mock_classifier: bool = False

    growth_rate: float = 0.15
    default_media_size_mb: float = 2.0

    tracing_enabled: bool = False
    project_name: str = "infra-estimator"
    collector_endpoint: str | None = None

    @property
    def classifier_available(self) -> bool:
        return self.use_mock_classifier or bool(self.openai_api_key)

    @classmethod
    def from_env(cls) -> "EstimatorConfig":
        """Load config from environment variables."""
        return cls(
            openai_api_key=os.environ.get("OPENAI_API_KEY") or None,
            classifier_model=os.environ.get("CLASSIFIER_MODEL", "gpt-4o-mini"),
            classifier_timeout_s=float(os.environ.get("CLASSIFIER_TIMEOUT_S", "30")),
            use_mock_classifier=_env_flag("USE_MOCK_CLASSIFIER"),
            growth_rate=float(os.environ.get("ESTIMATOR_GROWTH_RATE", "0.15")),
            default_media_size_mb=float(os.environ.get("ESTIMATOR_DEFAULT_MEDIA_MB", "2.0")),
            tracing_enabled=_env_flag("PHOENIX_ENABLED"),
            project_name=os.environ.get("PHOENIX_PROJECT_NAME", "infra-estimator"),
            collector_endpoint=os.environ.get("PHOENIX_COLLECTOR_ENDPOINT") or None,
        )


# Global config singleton
_config: EstimatorConfig | None = None


def get_config() -> EstimatorConfig:
    """Get the global config (lazy-loaded from env)."""
    global _config
    if _config is None:
        _config = EstimatorConfig.from_env()
    return _config


def reset_config() -> None:
    """Reset config (useful for testing)."""
    global _config
    _config = None
