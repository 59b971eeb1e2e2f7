"""
Display — канонические строковые представления

Чистый слой представления поверх алгебры:
- Dimension: "<база>^<показатель>" через пробел ("length^1 time^-1")
- Unit:      "<scale> <dimension>"
- Measure:   "<quantity> <unit>"

Целые показатели выводятся как есть, рациональные — как "<числ>/<знам>".
Безразмерная размерность выводится пустой строкой.
"""

from fractions import Fraction
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dimalgebra.core.domain.dimension import Dimension
    from dimalgebra.core.domain.measure import Measure
    from dimalgebra.core.domain.unit import Unit


def format_exponent(exponent: Fraction) -> str:
    """
    Examples:
        >>> format_exponent(Fraction(-1))
        '-1'
        >>> format_exponent(Fraction(1, 3))
        '1/3'
    """
    if exponent.denominator == 1:
        return str(exponent.numerator)
    return f"{exponent.numerator}/{exponent.denominator}"


def render_dimension(dimension: "Dimension") -> str:
    return " ".join(
        f"{term.base.name}^{format_exponent(term.exponent)}" for term in dimension.terms()
    )


def render_unit(unit: "Unit") -> str:
    return f"{unit.scale} {render_dimension(unit.dimension)}".rstrip()


def render_measure(measure: "Measure") -> str:
    return f"{measure.quantity} {render_unit(measure.unit)}"
