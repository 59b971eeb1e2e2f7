"""
Domain models and value objects.

Contains the layered value types BaseDimension → Dimension → Unit → Measure
and the result type for recoverable cross-value failures.
"""

from dimalgebra.core.domain.base import BaseDimension
from dimalgebra.core.domain.dimension import Dimension, Term
from dimalgebra.core.domain.measure import Measure
from dimalgebra.core.domain.results import (
    AlgebraError,
    AlgebraResult,
    DimensionMismatchError,
    FailureReason,
    UnitMismatchError,
)
from dimalgebra.core.domain.unit import Unit

__all__ = [
    # Dimension layer
    "BaseDimension",
    "Dimension",
    "Term",
    # Unit layer
    "Unit",
    # Measure layer
    "Measure",
    # Results
    "AlgebraError",
    "AlgebraResult",
    "DimensionMismatchError",
    "FailureReason",
    "UnitMismatchError",
]
