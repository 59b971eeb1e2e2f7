"""
Results — Recoverable Outcomes of Cross-Value Operations

Две политики ошибок:
- Нарушение инварианта при конструировании (неположительный scale) —
  исключение (pydantic.ValidationError, подкласс ValueError).
- Несовместимость двух независимо построенных значений (разные размерности
  в add/subtract/convert/relative_scale/Unit.compare, разные единицы
  в Measure.compare) — ожидаемая ситуация, возвращается AlgebraResult.

AlgebraResult.unwrap() превращает неуспех в исключение для вызывающего
кода, которому удобнее raise.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

from dimalgebra.core.math.numeric import Ordering

T = TypeVar("T")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class AlgebraError(ValueError):
    """Базовое исключение алгебры размерностей."""


class DimensionMismatchError(AlgebraError):
    """Операнды имеют разные размерности."""


class UnitMismatchError(AlgebraError):
    """Операнды имеют разные единицы (при строгой политике сравнения)."""


# =============================================================================
# RESULT
# =============================================================================


class FailureReason(str, Enum):
    """Причина неуспеха операции"""

    DIMENSION_MISMATCH = "dimension_mismatch"
    UNIT_MISMATCH = "unit_mismatch"


_REASON_ERRORS: dict[FailureReason, type[AlgebraError]] = {
    FailureReason.DIMENSION_MISMATCH: DimensionMismatchError,
    FailureReason.UNIT_MISMATCH: UnitMismatchError,
}


@dataclass(frozen=True)
class AlgebraResult(Generic[T]):
    """Результат операции: успех со значением либо неуспех с причиной."""

    ok: bool
    value: Optional[T]
    reason: Optional[FailureReason]

    # Детали (для диагностики и сообщения исключения)
    details: str = ""

    @classmethod
    def success(cls, value: T, details: str = "") -> "AlgebraResult[T]":
        return cls(ok=True, value=value, reason=None, details=details)

    @classmethod
    def failure(cls, reason: FailureReason, details: str) -> "AlgebraResult[T]":
        return cls(ok=False, value=None, reason=reason, details=details)

    def unwrap(self) -> T:
        """
        Значение успешного результата.

        Raises:
            DimensionMismatchError: неуспех по DIMENSION_MISMATCH
            UnitMismatchError: неуспех по UNIT_MISMATCH
        """
        if self.ok:
            return self.value  # type: ignore[return-value]
        raise _REASON_ERRORS[self.reason](self.details)  # type: ignore[index]

    def unwrap_or(self, default: T) -> T:
        """Значение успешного результата или default при неуспехе."""
        if self.ok:
            return self.value  # type: ignore[return-value]
        return default


__all__ = [
    "AlgebraError",
    "AlgebraResult",
    "DimensionMismatchError",
    "FailureReason",
    "Ordering",
    "UnitMismatchError",
]
