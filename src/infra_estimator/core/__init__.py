"""
Core module - shared protocols and errors.

USAGE:
------
from infra_estimator.core import Classifier, ClassificationError

class MyClassifier:
    '''Implements Classifier protocol.'''
    ...
"""

from infra_estimator.core.errors import (
    EstimatorError,
    CatalogError,
    EstimationError,
    CategoryNotFound,
)
from infra_estimator.core.protocols import (
    Classifier,
    Advisor,
    AnalysisError,
    ClassificationError,
    AdvisorError,
)

__all__ = [
    # Errors
    "EstimatorError",
    "CatalogError",
    "EstimationError",
    "CategoryNotFound",
    # Protocols
    "Classifier",
    "Advisor",
    "AnalysisError",
    "ClassificationError",
    "AdvisorError",
]
