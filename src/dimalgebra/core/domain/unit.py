"""
Unit — Scale Algebra over Dimension

Immutable Pydantic модель единицы: размерность + строго положительный
decimal scale (+ необязательное отображаемое имя).

Каждая операция Unit = операция Dimension над размерностью
+ decimal-операция над scale.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. scale > 0 всегда; нулевой/отрицательный scale — ValidationError
2. scale хранится в минимальной форме (Decimal.normalize)
3. Голое число — безразмерная единица с этим scale
4. name не участвует в равенстве
5. compare/relative_scale при разных размерностях возвращают
   AlgebraResult с DIMENSION_MISMATCH, а не исключение
"""

import logging
from decimal import Decimal
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, field_validator

from dimalgebra.core.display import render_unit
from dimalgebra.core.domain.dimension import Dimension
from dimalgebra.core.domain.results import AlgebraResult, FailureReason
from dimalgebra.core.math.numeric import (
    DEFAULT_NUMERIC_CONFIG,
    Exponent,
    Numeric,
    NumericConfig,
    Ordering,
    compare_decimals,
    decimal_divide,
    decimal_multiply,
    decimal_pow,
    is_numeric,
    normalize_decimal,
    to_decimal,
    to_fraction,
    validate_positive,
)

logger = logging.getLogger(__name__)


class Unit(BaseModel):
    """
    Единица измерения: положительное кратное базового эталона размерности.
    """

    dimension: Dimension = Field(..., description="Размерность единицы")
    scale: Decimal = Field(..., description="Множитель относительно базовой единицы (> 0)")
    name: Optional[str] = Field(None, description="Отображаемое имя (не влияет на равенство)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("scale", mode="before")
    @classmethod
    def coerce_scale(cls, v: Any) -> Decimal:
        """float/int/str → Decimal (float через repr)."""
        return to_decimal(v)

    @field_validator("scale")
    @classmethod
    def validate_scale_positive(cls, v: Decimal) -> Decimal:
        """
        Единица — положительное кратное эталона: scale <= 0 недопустим.
        """
        validate_positive(v, "scale")
        return normalize_decimal(v)

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def new(cls, dimension: Dimension, scale: Numeric, name: Optional[str] = None) -> "Unit":
        """
        Examples:
            >>> meter = Unit.new(Dimension.new("length"), 1)
            >>> str(meter.multiply(1000))
            '1E+3 length^1'
        """
        return cls(dimension=dimension, scale=scale, name=name)

    @classmethod
    def coerce(cls, value: Union["Unit", Numeric]) -> "Unit":
        """Unit как есть; число → безразмерная единица с scale = число."""
        if isinstance(value, Unit):
            return value
        if is_numeric(value):
            return cls(dimension=Dimension.dimensionless(), scale=value)
        raise TypeError(f"Expected Unit or number, got {type(value).__name__}")

    def with_name(self, name: Optional[str]) -> "Unit":
        """Копия единицы с отображаемым именем."""
        return self.model_copy(update={"name": name})

    # =========================================================================
    # АЛГЕБРА
    # =========================================================================

    def pow(self, exponent: Exponent, config: NumericConfig = DEFAULT_NUMERIC_CONFIG) -> "Unit":
        """
        Возведение в степень.

        Целый показатель — точное decimal-возведение; рациональный нецелый —
        decimal-возведение с потерей точности scale в последнем знаке
        (размерность остаётся точной).
        """
        exp = to_fraction(exponent)
        if exp == 0:
            return Unit(dimension=Dimension.dimensionless(), scale=1)
        return Unit(
            dimension=self.dimension.pow(exp),
            scale=decimal_pow(self.scale, exp, config),
        )

    def multiply(
        self, other: Union["Unit", Numeric], config: NumericConfig = DEFAULT_NUMERIC_CONFIG
    ) -> "Unit":
        other = Unit.coerce(other)
        return Unit(
            dimension=self.dimension.multiply(other.dimension),
            scale=decimal_multiply(self.scale, other.scale, config),
        )

    def divide(
        self, other: Union["Unit", Numeric], config: NumericConfig = DEFAULT_NUMERIC_CONFIG
    ) -> "Unit":
        other = Unit.coerce(other)
        return Unit(
            dimension=self.dimension.divide(other.dimension),
            scale=decimal_divide(self.scale, other.scale, config),
        )

    def rdivide(self, number: Numeric, config: NumericConfig = DEFAULT_NUMERIC_CONFIG) -> "Unit":
        """number / unit == number * unit^-1"""
        return self.pow(-1, config).multiply(number, config)

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def equals(self, other: "Unit") -> bool:
        """Равны размерности И scale точно (без толерантности)."""
        return self.dimension.equals(other.dimension) and self.scale == other.scale

    def compare(self, other: "Unit") -> AlgebraResult[Ordering]:
        """Порядок scale при равных размерностях."""
        mismatch = self._dimension_mismatch(other, "compare")
        if mismatch is not None:
            return mismatch
        return AlgebraResult.success(compare_decimals(self.scale, other.scale))

    def relative_scale(
        self, other: "Unit", config: NumericConfig = DEFAULT_NUMERIC_CONFIG
    ) -> AlgebraResult[Decimal]:
        """
        Множитель перевода величины из self в other: scale_self / scale_other.

        Examples:
            >>> meter = Unit.new(Dimension.new("length"), 1)
            >>> meter.multiply(1000).relative_scale(meter).unwrap()
            Decimal('1E+3')
        """
        mismatch = self._dimension_mismatch(other, "relative_scale")
        if mismatch is not None:
            return mismatch
        return AlgebraResult.success(decimal_divide(self.scale, other.scale, config))

    def _dimension_mismatch(self, other: "Unit", operation: str) -> Optional[AlgebraResult]:
        if self.dimension.equals(other.dimension):
            return None
        details = (
            f"{operation}: dimensions must be equal, "
            f"got '{self.dimension}' and '{other.dimension}'"
        )
        logger.debug(details)
        return AlgebraResult.failure(FailureReason.DIMENSION_MISMATCH, details)

    # =========================================================================
    # VALUE SEMANTICS
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.dimension, self.scale))

    def __str__(self) -> str:
        return render_unit(self)

    def __repr__(self) -> str:
        if self.name:
            return f"<Unit {self.name}: {self}>"
        return f"<Unit {self}>"
