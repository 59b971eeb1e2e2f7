"""
Тесты для модуля Numeric — Decimal & Rational Primitives

Проверяет:
1. Приведение чисел к Decimal (float через repr, отказ для bool/NaN/Inf)
2. Приведение показателей к Fraction (отказ для float)
3. Целое и рациональное возведение Decimal в степень
4. Деление и нормализацию в изолированном decimal-контексте
5. Сравнение и валидацию
"""

import logging
from decimal import Decimal, localcontext
from fractions import Fraction

import pytest

from dimalgebra.core.math.numeric import (
    DECIMAL_PRECISION,
    DEFAULT_NUMERIC_CONFIG,
    NumericConfig,
    Ordering,
    compare_decimals,
    decimal_add,
    decimal_divide,
    decimal_multiply,
    decimal_pow,
    decimal_subtract,
    is_integral,
    is_numeric,
    normalize_decimal,
    to_decimal,
    to_fraction,
    validate_positive,
)


# =============================================================================
# ПРИВЕДЕНИЕ ТИПОВ
# =============================================================================


class TestToDecimal:
    """Тесты для to_decimal"""

    def test_float_uses_shortest_repr(self) -> None:
        """0.01 превращается в Decimal('0.01'), а не в двоичный хвост"""
        assert to_decimal(0.01) == Decimal("0.01")
        assert str(to_decimal(0.1)) == "0.1"

    def test_int_exact(self) -> None:
        """int конвертируется без потерь"""
        assert to_decimal(9_460_730_472_580_800) == Decimal("9460730472580800")

    def test_decimal_passthrough(self) -> None:
        """Decimal возвращается как есть"""
        value = Decimal("3.14")
        assert to_decimal(value) is value

    def test_string_parsed(self) -> None:
        """Числовая строка разбирается"""
        assert to_decimal(" 1.5 ") == Decimal("1.5")

    def test_bool_rejected(self) -> None:
        """bool не является величиной"""
        with pytest.raises(TypeError):
            to_decimal(True)  # type: ignore[arg-type]

    def test_unsupported_type_rejected(self) -> None:
        """Неподдерживаемый тип → TypeError"""
        with pytest.raises(TypeError):
            to_decimal([1])  # type: ignore[arg-type]

    def test_non_finite_rejected(self) -> None:
        """NaN/Inf никогда не попадают в алгебру"""
        with pytest.raises(ValueError):
            to_decimal(float("nan"))
        with pytest.raises(ValueError):
            to_decimal(float("inf"))
        with pytest.raises(ValueError):
            to_decimal(Decimal("-Infinity"))

    def test_garbage_string_rejected(self) -> None:
        """Нечисловая строка → ValueError"""
        with pytest.raises(ValueError, match="Not a decimal number"):
            to_decimal("meter")


class TestIsNumeric:
    """Тесты для is_numeric"""

    def test_numbers(self) -> None:
        assert is_numeric(1)
        assert is_numeric(1.5)
        assert is_numeric(Decimal("2"))

    def test_non_numbers(self) -> None:
        assert not is_numeric(True)
        assert not is_numeric("1")
        assert not is_numeric(None)


class TestToFraction:
    """Тесты для to_fraction и is_integral"""

    def test_int_becomes_fraction(self) -> None:
        assert to_fraction(-2) == Fraction(-2)
        assert isinstance(to_fraction(3), Fraction)

    def test_fraction_passthrough(self) -> None:
        exp = Fraction(1, 3)
        assert to_fraction(exp) is exp

    def test_float_rejected(self) -> None:
        """float непредставим точно — показатель отклоняется"""
        with pytest.raises(TypeError, match="Exponent must be int or Fraction"):
            to_fraction(0.5)  # type: ignore[arg-type]

    def test_bool_rejected(self) -> None:
        with pytest.raises(TypeError):
            to_fraction(True)

    def test_is_integral(self) -> None:
        assert is_integral(3)
        assert is_integral(Fraction(4, 2))
        assert not is_integral(Fraction(1, 3))


# =============================================================================
# DECIMAL-АРИФМЕТИКА
# =============================================================================


class TestDecimalPow:
    """Тесты для decimal_pow"""

    def test_positive_integer_exponent(self) -> None:
        assert decimal_pow(Decimal("10"), 3) == Decimal("1000")
        assert decimal_pow(Decimal("0.1"), 2) == Decimal("0.01")

    def test_negative_integer_exponent(self) -> None:
        """Отрицательный показатель — обратная величина"""
        assert decimal_pow(Decimal("2"), -2) == Decimal("0.25")
        assert decimal_pow(Decimal("1000"), -1) == Decimal("0.001")

    def test_negative_exponent_rounds_to_precision(self) -> None:
        """1/3 округляется до точности контекста"""
        result = decimal_pow(Decimal("3"), -1)
        assert result == Decimal("0.3333333333333333333333333333")

    def test_zero_exponent(self) -> None:
        """x^0 == 1, в том числе 0^0"""
        assert decimal_pow(Decimal("123.456"), 0) == Decimal(1)
        assert decimal_pow(Decimal(0), 0) == Decimal(1)
        assert decimal_pow(Decimal(5), Fraction(0, 7)) == Decimal(1)

    def test_zero_base_negative_exponent(self) -> None:
        with pytest.raises(ZeroDivisionError):
            decimal_pow(Decimal(0), -1)

    def test_rational_exponent(self) -> None:
        """Кубический корень из 8 — неточный путь, но результат округляется до 2"""
        assert decimal_pow(Decimal(8), Fraction(1, 3)) == Decimal(2)
        assert decimal_pow(Decimal(4), Fraction(-1, 2)) == Decimal("0.5")

    def test_rational_exponent_beyond_float_range(self) -> None:
        """Основания вне диапазона float не переполняются и не обнуляются"""
        assert decimal_pow(Decimal("1E+400"), Fraction(1, 2)) == Decimal("1E+200")
        assert decimal_pow(Decimal("1E-400"), Fraction(1, 2)) == Decimal("1E-200")
        root = decimal_pow(Decimal("8E+600"), Fraction(1, 3))
        assert abs(root / Decimal("2E+200") - 1) < Decimal("1E-25")

    def test_rational_exponent_zero_base(self) -> None:
        assert decimal_pow(Decimal(0), Fraction(1, 2)) == 0
        with pytest.raises(ZeroDivisionError):
            decimal_pow(Decimal(0), Fraction(-1, 2))

    def test_rational_exponent_respects_precision(self) -> None:
        result = decimal_pow(Decimal(2), Fraction(1, 2), NumericConfig(precision=5))
        assert result == Decimal("1.4142")

    def test_rational_exponent_negative_base(self) -> None:
        """Отрицательное основание и нецелый показатель — нет вещественного корня"""
        with pytest.raises(ValueError, match="non-integer exponent"):
            decimal_pow(Decimal(-8), Fraction(1, 3))

    def test_integral_fraction_stays_exact(self) -> None:
        """Fraction(6, 2) — целый показатель, путь через float не используется"""
        assert decimal_pow(Decimal("1.1"), Fraction(6, 2)) == Decimal("1.331")

    def test_rational_exponent_logs_precision_loss(self, caplog: pytest.LogCaptureFixture) -> None:
        """Потеря точности фиксируется в логе на уровне DEBUG"""
        with caplog.at_level(logging.DEBUG, logger="dimalgebra.core.math.numeric"):
            decimal_pow(Decimal(2), Fraction(1, 2))
        assert "Lossy rational power" in caplog.text

    def test_float_exponent_rejected(self) -> None:
        with pytest.raises(TypeError):
            decimal_pow(Decimal(2), 0.5)  # type: ignore[arg-type]


class TestDecimalDivide:
    """Тесты для decimal_divide и конфигурации"""

    def test_exact_division(self) -> None:
        assert decimal_divide(Decimal("1"), Decimal("8")) == Decimal("0.125")

    def test_division_by_zero(self) -> None:
        """Деление на ноль (в том числе 0/0) → ZeroDivisionError"""
        with pytest.raises(ZeroDivisionError):
            decimal_divide(Decimal(1), Decimal(0))
        with pytest.raises(ZeroDivisionError):
            decimal_divide(Decimal(0), Decimal(0))

    def test_custom_precision(self) -> None:
        config = NumericConfig(precision=5)
        assert decimal_divide(Decimal(1), Decimal(3), config) == Decimal("0.33333")

    def test_global_context_does_not_leak(self) -> None:
        """Глобальный decimal-контекст вызывающего кода не влияет на результат"""
        with localcontext() as ctx:
            ctx.prec = 3
            result = decimal_divide(Decimal(1), Decimal(3))
        assert result == Decimal("0.3333333333333333333333333333")

    def test_add_subtract_multiply(self) -> None:
        assert decimal_add(Decimal("100"), Decimal("1.00")) == Decimal("101")
        assert decimal_subtract(Decimal("1"), Decimal("2.5")) == Decimal("-1.5")
        assert decimal_multiply(Decimal("2"), Decimal("0.01")) == Decimal("0.02")


class TestNumericConfig:
    """Тесты для NumericConfig"""

    def test_defaults(self) -> None:
        assert DEFAULT_NUMERIC_CONFIG.precision == DECIMAL_PRECISION
        assert DEFAULT_NUMERIC_CONFIG.context().prec == DECIMAL_PRECISION

    def test_non_positive_precision_rejected(self) -> None:
        with pytest.raises(ValueError, match="precision must be positive"):
            NumericConfig(precision=0)


class TestNormalizeDecimal:
    """Тесты для normalize_decimal"""

    def test_trailing_zeros_removed(self) -> None:
        assert str(normalize_decimal(Decimal("0.0100"))) == "0.01"
        assert str(normalize_decimal(Decimal("1000"))) == "1E+3"

    def test_value_preserved(self) -> None:
        assert normalize_decimal(Decimal("1000")) == 1000


class TestCompareAndValidate:
    """Тесты для compare_decimals и validate_positive"""

    def test_compare(self) -> None:
        assert compare_decimals(Decimal(1), Decimal(2)) == Ordering.LT
        assert compare_decimals(Decimal(2), Decimal(1)) == Ordering.GT
        assert compare_decimals(Decimal("1"), Decimal("1.000")) == Ordering.EQ

    def test_validate_positive_accepts(self) -> None:
        validate_positive(Decimal("0.0001"), "scale")

    def test_validate_positive_rejects(self) -> None:
        with pytest.raises(ValueError, match="scale must be strictly positive"):
            validate_positive(Decimal(0), "scale")
        with pytest.raises(ValueError):
            validate_positive(Decimal(-1), "scale")
