"""
Exception hierarchy for the estimation core.

Only genuinely fatal conditions are exceptions. Classifier failures are
returned as values (see core.protocols.AnalysisError) so the caller
can route them to the keyword fallback without try/except plumbing.
"""


class EstimatorError(Exception):
    """Base class for every error raised by infra_estimator."""


class CatalogError(EstimatorError):
    """Static reference tables failed construction-time validation."""


class EstimationError(EstimatorError):
    """A capacity projection could not be produced."""


class CategoryNotFound(EstimationError):
    """The requested category id has no benchmark entry."""

    def __init__(self, category: str):
        self.category = category
        super().__init__(f"No benchmark found for category: {category!r}")
