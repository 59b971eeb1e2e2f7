"""
Algebra — единый фасад над Dimension / Unit / Measure

Функции фасада выбирают операцию по типу первого операнда из закрытого
набора (Dimension, Unit, Measure). Голое число в multiply/divide может
стоять с любой стороны от Unit/Measure: оно трактуется как безразмерная
единица/измерение.

Examples:
    >>> meter = unit(dimension("length"), 1)
    >>> vol = measure(pow(meter, 3), 8)
    >>> equal(pow(vol, ratio(1, 3)), measure(meter, 2))
    True
"""

from fractions import Fraction
from typing import Optional, Union

from dimalgebra.core.domain.dimension import Dimension
from dimalgebra.core.domain.measure import Measure
from dimalgebra.core.domain.results import AlgebraResult
from dimalgebra.core.domain.unit import Unit
from dimalgebra.core.math.numeric import Exponent, Numeric, is_numeric

Entity = Union[Dimension, Unit, Measure]


def dimension(name: str) -> Dimension:
    """Новая базовая размерность."""
    return Dimension.new(name)


def unit(dim: Dimension, scale: Numeric, name: Optional[str] = None) -> Unit:
    """Единица из размерности и положительного scale (name только для отображения)."""
    return Unit.new(dim, scale, name=name)


def measure(u: Unit, quantity: Numeric) -> Measure:
    """Измерение из единицы и quantity."""
    return Measure.new(u, quantity)


def ratio(numerator: int, denominator: int) -> Fraction:
    """Точный рациональный показатель: ratio(1, 3) == Fraction(1, 3)."""
    return Fraction(numerator, denominator)


def pow(x: Entity, exponent: Exponent) -> Entity:
    """Возведение Dimension, Unit или Measure в степень."""
    if isinstance(x, (Dimension, Unit, Measure)):
        return x.pow(exponent)
    raise TypeError(f"pow expects Dimension, Unit or Measure, got {type(x).__name__}")


def multiply(x1: Union[Entity, Numeric], x2: Union[Entity, Numeric]) -> Entity:
    """
    Произведение двух размерностей, единиц или измерений.

    Голое число допустимо с любой стороны от Unit или Measure:
    multiply(3, m) == multiply(m, 3).
    """
    if isinstance(x1, Dimension):
        if not isinstance(x2, Dimension):
            raise TypeError(f"Cannot multiply Dimension by {type(x2).__name__}")
        return x1.multiply(x2)
    if isinstance(x1, (Unit, Measure)):
        return x1.multiply(x2)  # type: ignore[arg-type]
    if is_numeric(x1) and isinstance(x2, (Unit, Measure)):
        return x2.multiply(x1)
    raise TypeError(f"multiply expects Dimension, Unit or Measure, got {type(x1).__name__}")


def divide(x1: Union[Entity, Numeric], x2: Union[Entity, Numeric]) -> Entity:
    """
    Частное двух размерностей, единиц или измерений.

    Голое число слева от Unit или Measure: divide(1, u) == u.rdivide(1).
    """
    if isinstance(x1, Dimension):
        if not isinstance(x2, Dimension):
            raise TypeError(f"Cannot divide Dimension by {type(x2).__name__}")
        return x1.divide(x2)
    if isinstance(x1, (Unit, Measure)):
        return x1.divide(x2)  # type: ignore[arg-type]
    if is_numeric(x1) and isinstance(x2, (Unit, Measure)):
        return x2.rdivide(x1)
    raise TypeError(f"divide expects Dimension, Unit or Measure, got {type(x1).__name__}")


def equal(x1: Entity, x2: Entity) -> bool:
    """Равенство однотипных сущностей; сущности разных типов не равны."""
    if type(x1) is not type(x2):
        return False
    if isinstance(x1, (Dimension, Unit, Measure)):
        return x1.equals(x2)  # type: ignore[arg-type]
    raise TypeError(f"equal expects Dimension, Unit or Measure, got {type(x1).__name__}")


def add(m1: Measure, m2: Measure) -> AlgebraResult[Measure]:
    """Сумма двух измерений одной размерности."""
    return m1.add(m2)


def subtract(m1: Measure, m2: Measure) -> AlgebraResult[Measure]:
    """Разность двух измерений одной размерности."""
    return m1.subtract(m2)
