"""
Measure — Quantity Algebra over Unit

Immutable Pydantic модель измерения: единица + знаковое decimal quantity.

Каждая операция Measure = операция Unit над единицей
+ decimal-операция над quantity.

Политика сравнения:
- equals / compare — СТРОГИЕ: требуют одинаковых единиц.
  1000 m и 1 km не equals; compare по ним возвращает UNIT_MISMATCH
- equivalent — физическая эквивалентность через normalize
- add / subtract — требуют одинаковых РАЗМЕРНОСТЕЙ; операнды приводятся
  к базовой единице (scale = 1) и складываются в ней

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. quantity может быть любого знака и нулём
2. Голое число — безразмерное измерение
3. add/subtract/convert/compare никогда не бросают исключение
   из-за несовместимости: результат — AlgebraResult
"""

import logging
from decimal import Decimal
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, field_validator

from dimalgebra.core.display import render_measure
from dimalgebra.core.domain.dimension import Dimension
from dimalgebra.core.domain.results import AlgebraResult, FailureReason
from dimalgebra.core.domain.unit import Unit
from dimalgebra.core.math.numeric import (
    DEFAULT_NUMERIC_CONFIG,
    Exponent,
    Numeric,
    NumericConfig,
    Ordering,
    compare_decimals,
    decimal_add,
    decimal_divide,
    decimal_multiply,
    decimal_pow,
    decimal_subtract,
    is_numeric,
    to_decimal,
    to_fraction,
)

logger = logging.getLogger(__name__)


class Measure(BaseModel):
    """Измерение: quantity единиц unit."""

    unit: Unit = Field(..., description="Единица измерения")
    quantity: Decimal = Field(..., description="Величина в единицах unit (любой знак)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("quantity", mode="before")
    @classmethod
    def coerce_quantity(cls, v: Any) -> Decimal:
        return to_decimal(v)

    # =========================================================================
    # КОНСТРУКТОРЫ И ПРИВЕДЕНИЯ
    # =========================================================================

    @classmethod
    def new(cls, unit: Unit, quantity: Numeric) -> "Measure":
        return cls(unit=unit, quantity=quantity)

    @classmethod
    def coerce(cls, value: Union["Measure", Numeric]) -> "Measure":
        """Measure как есть; число → безразмерное измерение."""
        if isinstance(value, Measure):
            return value
        if is_numeric(value):
            return cls(unit=Unit(dimension=Dimension.dimensionless(), scale=1), quantity=value)
        raise TypeError(f"Expected Measure or number, got {type(value).__name__}")

    @classmethod
    def from_unit(cls, unit: Unit) -> "Measure":
        """
        Unit → Measure: scale становится quantity, scale единицы сбрасывается в 1.

        Examples:
            >>> km = Unit.new(Dimension.new("length"), 1000)
            >>> str(Measure.from_unit(km))
            '1E+3 1 length^1'
        """
        return cls(unit=Unit(dimension=unit.dimension, scale=1), quantity=unit.scale)

    def to_unit(self) -> Unit:
        """
        Measure → Unit: quantity вливается в scale.

        Raises:
            pydantic.ValidationError: если quantity <= 0 (scale единицы обязан быть > 0)
        """
        return self.unit.multiply(self.quantity)

    def to_float(self) -> float:
        """quantity как float (с потерей точности)."""
        return float(self.quantity)

    # =========================================================================
    # АЛГЕБРА
    # =========================================================================

    def multiply(
        self, other: Union["Measure", Numeric], config: NumericConfig = DEFAULT_NUMERIC_CONFIG
    ) -> "Measure":
        other = Measure.coerce(other)
        return Measure(
            unit=self.unit.multiply(other.unit, config),
            quantity=decimal_multiply(self.quantity, other.quantity, config),
        )

    def divide(
        self, other: Union["Measure", Numeric], config: NumericConfig = DEFAULT_NUMERIC_CONFIG
    ) -> "Measure":
        """
        Raises:
            ZeroDivisionError: если quantity делителя равно нулю
        """
        other = Measure.coerce(other)
        return Measure(
            unit=self.unit.divide(other.unit, config),
            quantity=decimal_divide(self.quantity, other.quantity, config),
        )

    def rdivide(self, number: Numeric, config: NumericConfig = DEFAULT_NUMERIC_CONFIG) -> "Measure":
        """number / measure"""
        return Measure.coerce(number).divide(self, config)

    def pow(self, exponent: Exponent, config: NumericConfig = DEFAULT_NUMERIC_CONFIG) -> "Measure":
        """
        Возведение в степень.

        exp == 0 → quantity 1 в безразмерной единице.
        Рациональный нецелый показатель вычисляется с потерей точности в последнем знаке.

        Examples:
            >>> cubic_meter = Unit.new(Dimension.new("length"), 1).pow(3)
            >>> Measure.new(cubic_meter, 8).pow(Fraction(1, 3)).quantity == 2
            True
        """
        exp = to_fraction(exponent)
        if exp == 0:
            return Measure(unit=self.unit.pow(0, config), quantity=1)
        return Measure(
            unit=self.unit.pow(exp, config),
            quantity=decimal_pow(self.quantity, exp, config),
        )

    def normalize(self, config: NumericConfig = DEFAULT_NUMERIC_CONFIG) -> "Measure":
        """
        Перевод в базовую единицу размерности (scale = 1) с сохранением
        физического значения.
        """
        return Measure(
            unit=Unit(dimension=self.unit.dimension, scale=1),
            quantity=decimal_multiply(self.quantity, self.unit.scale, config),
        )

    def add(
        self, other: "Measure", config: NumericConfig = DEFAULT_NUMERIC_CONFIG
    ) -> AlgebraResult["Measure"]:
        """
        Сумма в базовой единице общей размерности.

        Examples:
            >>> meter = Unit.new(Dimension.new("length"), 1)
            >>> cm = meter.multiply(0.01)
            >>> str(Measure.new(meter, 100).add(Measure.new(cm, 100)).unwrap())
            '101.00 1 length^1'
        """
        mismatch = self._dimension_mismatch(other, "add")
        if mismatch is not None:
            return mismatch
        lhs, rhs = self.normalize(config), other.normalize(config)
        return AlgebraResult.success(
            Measure(unit=lhs.unit, quantity=decimal_add(lhs.quantity, rhs.quantity, config))
        )

    def subtract(
        self, other: "Measure", config: NumericConfig = DEFAULT_NUMERIC_CONFIG
    ) -> AlgebraResult["Measure"]:
        """Разность в базовой единице общей размерности."""
        mismatch = self._dimension_mismatch(other, "subtract")
        if mismatch is not None:
            return mismatch
        lhs, rhs = self.normalize(config), other.normalize(config)
        return AlgebraResult.success(
            Measure(unit=lhs.unit, quantity=decimal_subtract(lhs.quantity, rhs.quantity, config))
        )

    def convert(
        self, unit_to: Unit, config: NumericConfig = DEFAULT_NUMERIC_CONFIG
    ) -> AlgebraResult["Measure"]:
        """
        Перевод в другую единицу той же размерности.

        Examples:
            >>> meter = Unit.new(Dimension.new("length"), 1)
            >>> km = meter.multiply(1000)
            >>> Measure.new(km, 2).convert(meter).unwrap().quantity == 2000
            True
        """
        ratio = self.unit.relative_scale(unit_to, config)
        if not ratio.ok:
            return AlgebraResult.failure(ratio.reason, f"convert: {ratio.details}")  # type: ignore[arg-type]
        return AlgebraResult.success(
            Measure(unit=unit_to, quantity=decimal_multiply(self.quantity, ratio.value, config))  # type: ignore[arg-type]
        )

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def equals(self, other: "Measure") -> bool:
        """Строгое равенство: одинаковые единицы И quantity."""
        return self.unit.equals(other.unit) and self.quantity == other.quantity

    def equivalent(self, other: "Measure") -> bool:
        """Физическая эквивалентность: равные размерности и равные нормализованные величины."""
        if not self.unit.dimension.equals(other.unit.dimension):
            return False
        return self.normalize().quantity == other.normalize().quantity

    def compare(self, other: "Measure") -> AlgebraResult[Ordering]:
        """Порядок quantity при одинаковых единицах."""
        if not self.unit.equals(other.unit):
            details = f"compare: units must be equal, got '{self.unit}' and '{other.unit}'"
            logger.debug(details)
            return AlgebraResult.failure(FailureReason.UNIT_MISMATCH, details)
        return AlgebraResult.success(compare_decimals(self.quantity, other.quantity))

    def _dimension_mismatch(self, other: "Measure", operation: str) -> Optional[AlgebraResult]:
        if self.unit.dimension.equals(other.unit.dimension):
            return None
        details = (
            f"{operation}: dimensions must be equal, "
            f"got '{self.unit.dimension}' and '{other.unit.dimension}'"
        )
        logger.debug(details)
        return AlgebraResult.failure(FailureReason.DIMENSION_MISMATCH, details)

    # =========================================================================
    # VALUE SEMANTICS
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Measure):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.unit, self.quantity))

    def __str__(self) -> str:
        return render_measure(self)

    def __repr__(self) -> str:
        return f"<Measure {self}>"
