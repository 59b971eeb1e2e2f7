"""
Numeric — Decimal & Rational Primitives

Общие числовые примитивы для всех слоёв алгебры (Dimension → Unit → Measure):
- Приведение входных чисел к Decimal (int, float, str, Decimal)
- Приведение показателей степени к точной дроби (int, Fraction)
- Возведение Decimal в целую и рациональную степень
- Деление и нормализация Decimal в изолированном decimal-контексте
- Сравнение Decimal с возвратом Ordering

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Показатели степени никогда не хранятся как float (только Fraction)
2. float переводится в Decimal через repr, поэтому 0.01 → Decimal("0.01")
3. NaN/Inf никогда не попадают в алгебру (ValueError)
4. Глобальный decimal-контекст вызывающего кода не влияет на результат
5. Рациональная (нецелая) степень Decimal вычисляется в Decimal с округлением
   показателя p/q; это единственная неточная операция модуля
"""

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Context, Decimal, InvalidOperation, localcontext
from enum import Enum
from fractions import Fraction
from typing import Final, Union

logger = logging.getLogger(__name__)


# =============================================================================
# ТИПЫ
# =============================================================================

# Всё, что принимается как скаляр (scale, quantity, голый множитель)
Numeric = Union[int, float, str, Decimal]

# Всё, что принимается как показатель степени
Exponent = Union[int, Fraction]


class Ordering(str, Enum):
    """Результат сравнения двух значений"""

    LT = "lt"
    EQ = "eq"
    GT = "gt"


# =============================================================================
# КОНФИГУРАЦИЯ DECIMAL
# =============================================================================

# Точность decimal-арифметики (значащих цифр)
DECIMAL_PRECISION: Final[int] = 28

# Режим округления при превышении точности
DECIMAL_ROUNDING: Final[str] = ROUND_HALF_EVEN

# Дополнительные цифры точности для показателя p/q в рациональной степени
RATIONAL_POW_GUARD_DIGITS: Final[int] = 10


@dataclass(frozen=True)
class NumericConfig:
    """Конфигурация decimal-арифметики.

    Деление, возведение в степень и нормализация выполняются внутри
    decimal.localcontext, построенного из этой конфигурации.
    """

    precision: int = DECIMAL_PRECISION
    rounding: str = DECIMAL_ROUNDING

    def __post_init__(self) -> None:
        if self.precision <= 0:
            raise ValueError(f"precision must be positive, got {self.precision}")

    def context(self) -> Context:
        """Новый decimal.Context с точностью и округлением конфигурации."""
        return Context(prec=self.precision, rounding=self.rounding)


DEFAULT_NUMERIC_CONFIG: Final[NumericConfig] = NumericConfig()


# =============================================================================
# ПРИВЕДЕНИЕ ТИПОВ
# =============================================================================


def is_numeric(value: object) -> bool:
    """
    Проверка, можно ли трактовать значение как скаляр.

    bool исключён явно: True/False не являются величинами.
    """
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float, Decimal))


def to_decimal(value: Numeric) -> Decimal:
    """
    Приведение числа к Decimal.

    Args:
        value: int, float, str или Decimal

    Returns:
        Конечное Decimal значение

    Raises:
        TypeError: Если тип не поддерживается (в том числе bool)
        ValueError: Если значение NaN/Inf или строка не является числом

    Examples:
        >>> to_decimal(0.01)
        Decimal('0.01')
        >>> to_decimal(1000)
        Decimal('1000')
    """
    if isinstance(value, bool):
        raise TypeError(f"bool is not a numeric value: {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        # repr даёт кратчайшее представление: 0.1 → "0.1", а не 0.1000000000000000055...
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise ValueError(f"Not a decimal number: {value!r}") from None
    else:
        raise TypeError(f"Expected int, float, str or Decimal, got {type(value).__name__}")

    if not result.is_finite():
        raise ValueError(f"Numeric value must be finite, got {value!r}")

    return result


def to_fraction(exponent: Exponent) -> Fraction:
    """
    Приведение показателя степени к точной дроби.

    float отклоняется: 1/3 непредставима в двоичной плавающей точке,
    а показатели размерности обязаны оставаться точными.

    Raises:
        TypeError: Если показатель не int и не Fraction
    """
    if isinstance(exponent, bool):
        raise TypeError(f"bool is not a valid exponent: {exponent!r}")
    if isinstance(exponent, Fraction):
        return exponent
    if isinstance(exponent, int):
        return Fraction(exponent)
    raise TypeError(
        f"Exponent must be int or Fraction, got {type(exponent).__name__} ({exponent!r})"
    )


def is_integral(exponent: Exponent) -> bool:
    """True если показатель — целое число."""
    return to_fraction(exponent).denominator == 1


# =============================================================================
# DECIMAL-АРИФМЕТИКА
# =============================================================================


def normalize_decimal(value: Decimal, config: NumericConfig = DEFAULT_NUMERIC_CONFIG) -> Decimal:
    """
    Минимальная форма Decimal: без хвостовых нулей.

    Examples:
        >>> normalize_decimal(Decimal("1000"))
        Decimal('1E+3')
        >>> normalize_decimal(Decimal("0.0100"))
        Decimal('0.01')
    """
    with localcontext(config.context()):
        return value.normalize()


def decimal_add(a: Decimal, b: Decimal, config: NumericConfig = DEFAULT_NUMERIC_CONFIG) -> Decimal:
    """Сумма в контексте конфигурации."""
    with localcontext(config.context()):
        return a + b


def decimal_subtract(
    a: Decimal, b: Decimal, config: NumericConfig = DEFAULT_NUMERIC_CONFIG
) -> Decimal:
    """Разность в контексте конфигурации."""
    with localcontext(config.context()):
        return a - b


def decimal_multiply(
    a: Decimal, b: Decimal, config: NumericConfig = DEFAULT_NUMERIC_CONFIG
) -> Decimal:
    """Произведение в контексте конфигурации."""
    with localcontext(config.context()):
        return a * b


def decimal_divide(
    numerator: Decimal, denominator: Decimal, config: NumericConfig = DEFAULT_NUMERIC_CONFIG
) -> Decimal:
    """
    Деление Decimal в контексте конфигурации.

    Raises:
        ZeroDivisionError: Если знаменатель равен нулю (в том числе 0 / 0)
    """
    if denominator == 0:
        raise ZeroDivisionError(f"Decimal division by zero: {numerator} / {denominator}")
    with localcontext(config.context()):
        return numerator / denominator


def decimal_pow(
    base: Decimal, exponent: Exponent, config: NumericConfig = DEFAULT_NUMERIC_CONFIG
) -> Decimal:
    """
    Возведение Decimal в целую или рациональную степень.

    Алгоритм:
        exp == 0          → Decimal(1) (в том числе 0^0)
        exp целое > 0     → итеративное умножение
        exp целое < 0     → 1 / base^|exp| (одно округление на обратной величине)
        exp нецелое       → Decimal-степень с округлённым p/q (ПОТЕРЯ ТОЧНОСТИ
                            в последнем знаке; диапазон Decimal, а не float)

    Args:
        base: Основание
        exponent: Показатель (int или Fraction)
        config: Конфигурация decimal-контекста

    Returns:
        base ** exponent

    Raises:
        ZeroDivisionError: base == 0 и exponent < 0
        ValueError: base < 0 и exponent нецелый (нет вещественного корня)

    Examples:
        >>> decimal_pow(Decimal("10"), 3)
        Decimal('1000')
        >>> decimal_pow(Decimal("8"), Fraction(1, 3))
        Decimal('2.000000000000000000000000000')
    """
    exp = to_fraction(exponent)

    if exp == 0:
        return Decimal(1)

    if exp.denominator == 1:
        power = abs(exp.numerator)
        with localcontext(config.context()):
            result = Decimal(1)
            for _ in range(power):
                result *= base
        if exp < 0:
            return decimal_divide(Decimal(1), result, config)
        return result

    return _decimal_pow_rational(base, exp, config)


def _decimal_pow_rational(base: Decimal, exp: Fraction, config: NumericConfig) -> Decimal:
    # p/q непредставим точно в Decimal: показатель считается с запасом цифр,
    # результат округляется до точности конфигурации
    if base < 0:
        raise ValueError(
            f"Cannot raise negative value {base} to non-integer exponent {exp}"
        )
    if base == 0 and exp < 0:
        raise ZeroDivisionError(f"Cannot raise zero to negative exponent {exp}")

    with localcontext(config.context()) as ctx:
        ctx.prec += RATIONAL_POW_GUARD_DIGITS
        power = base ** (Decimal(exp.numerator) / Decimal(exp.denominator))
    with localcontext(config.context()):
        result = +power
    logger.debug("Lossy rational power: %s ** %s -> %s", base, exp, result)
    return result


def compare_decimals(a: Decimal, b: Decimal) -> Ordering:
    """
    Точное сравнение двух Decimal (без толерантности).

    Examples:
        >>> compare_decimals(Decimal("1"), Decimal("1.00"))
        <Ordering.EQ: 'eq'>
    """
    if a < b:
        return Ordering.LT
    if a > b:
        return Ordering.GT
    return Ordering.EQ


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_positive(value: Decimal, name: str) -> None:
    """
    Валидация, что значение строго положительное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    if not value.is_finite():
        raise ValueError(f"{name} must be a finite decimal, got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be strictly positive, got {value}")
