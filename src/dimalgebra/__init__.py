"""
dimalgebra — exact dimensional-analysis algebra.

Layers, leaves first:
- BaseDimension: irreducible named dimension atom
- Dimension: canonical mapping BaseDimension → exact rational exponent
- Unit: Dimension + strictly positive decimal scale
- Measure: Unit + signed decimal quantity
"""

from dimalgebra.algebra import (
    add,
    dimension,
    divide,
    equal,
    measure,
    multiply,
    pow,
    ratio,
    subtract,
    unit,
)
from dimalgebra.core.domain import (
    AlgebraError,
    AlgebraResult,
    BaseDimension,
    Dimension,
    DimensionMismatchError,
    FailureReason,
    Measure,
    Unit,
    UnitMismatchError,
)
from dimalgebra.core.math import DEFAULT_NUMERIC_CONFIG, NumericConfig, Ordering

__version__ = "0.1.0"

__all__ = [
    # Facade
    "add",
    "dimension",
    "divide",
    "equal",
    "measure",
    "multiply",
    "pow",
    "ratio",
    "subtract",
    "unit",
    # Domain
    "BaseDimension",
    "Dimension",
    "Measure",
    "Unit",
    # Results
    "AlgebraError",
    "AlgebraResult",
    "DimensionMismatchError",
    "FailureReason",
    "Ordering",
    "UnitMismatchError",
    # Config
    "DEFAULT_NUMERIC_CONFIG",
    "NumericConfig",
]
