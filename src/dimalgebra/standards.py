"""
Standards — каталог стандартных размерностей, единиц и констант

Каталог построен ТОЛЬКО через публичные операции алгебры
(Dimension.new, Unit.new, multiply, divide, pow) и не добавляет новой
алгебры. Базовые единицы (scale = 1): meter, second, kilogram, radian,
newton; остальные выражены через них.

Examples:
    >>> from dimalgebra.core.domain import Measure
    >>> Measure.new(KILOMETER, 2).convert(METER).unwrap().quantity == 2000
    True
"""

from decimal import Decimal
from typing import Final

from dimalgebra.core.domain.dimension import Dimension
from dimalgebra.core.domain.unit import Unit


# =============================================================================
# БЕЗРАЗМЕРНЫЕ КОНСТАНТЫ
# =============================================================================

PI: Final[Decimal] = Decimal("3.141592653589793238462643383279503")
EULER_E: Final[Decimal] = Decimal("2.718281828459045235360287471352663")


# =============================================================================
# РАЗМЕРНОСТИ
# =============================================================================

LENGTH: Final[Dimension] = Dimension.new("length")
TIME: Final[Dimension] = Dimension.new("time")
MASS: Final[Dimension] = Dimension.new("mass")
ANGLE: Final[Dimension] = Dimension.new("angle")

SPEED: Final[Dimension] = LENGTH.divide(TIME)
ACCELERATION: Final[Dimension] = SPEED.divide(TIME)
FREQUENCY: Final[Dimension] = TIME.pow(-1)
MOMENTUM: Final[Dimension] = MASS.multiply(SPEED)
ENERGY: Final[Dimension] = MOMENTUM.multiply(SPEED)
FORCE: Final[Dimension] = MOMENTUM.divide(TIME)
VOLUME: Final[Dimension] = LENGTH.pow(3)


# =============================================================================
# ДЛИНА
# =============================================================================

METER: Final[Unit] = Unit.new(LENGTH, 1, name="meter")
MILLIMETER: Final[Unit] = METER.multiply(Decimal("0.001")).with_name("millimeter")
CENTIMETER: Final[Unit] = MILLIMETER.multiply(10).with_name("centimeter")
KILOMETER: Final[Unit] = METER.multiply(1000).with_name("kilometer")
INCH: Final[Unit] = CENTIMETER.multiply(Decimal("2.54")).with_name("inch")
FOOT: Final[Unit] = INCH.multiply(12).with_name("foot")
YARD: Final[Unit] = FOOT.multiply(3).with_name("yard")
MILE: Final[Unit] = FOOT.multiply(5280).with_name("mile")
LIGHT_SECOND: Final[Unit] = METER.multiply(299_792_458).with_name("light_second")
LIGHT_MINUTE: Final[Unit] = LIGHT_SECOND.multiply(60).with_name("light_minute")
LIGHT_YEAR: Final[Unit] = Unit.new(LENGTH, 9_460_730_472_580_800, name="light_year")
ASTRONOMICAL_UNIT: Final[Unit] = Unit.new(LENGTH, 149_597_870_700, name="astronomical_unit")
# 1 pc = 648000 / pi au
PARSEC: Final[Unit] = ASTRONOMICAL_UNIT.multiply(648_000).divide(PI).with_name("parsec")


# =============================================================================
# ВРЕМЯ
# =============================================================================

SECOND: Final[Unit] = Unit.new(TIME, 1, name="second")
MINUTE: Final[Unit] = SECOND.multiply(60).with_name("minute")
HOUR: Final[Unit] = MINUTE.multiply(60).with_name("hour")
DAY: Final[Unit] = HOUR.multiply(24).with_name("day")
YEAR: Final[Unit] = DAY.multiply(365).with_name("year")


# =============================================================================
# МАССА
# =============================================================================

KILOGRAM: Final[Unit] = Unit.new(MASS, 1, name="kilogram")
GRAM: Final[Unit] = KILOGRAM.divide(1000).with_name("gram")


# =============================================================================
# УГЛЫ
# =============================================================================

RADIAN: Final[Unit] = Unit.new(ANGLE, 1, name="radian")
DEGREE: Final[Unit] = RADIAN.multiply(PI).divide(180).with_name("degree")
ARCSEC: Final[Unit] = DEGREE.divide(3600).with_name("arcsec")
ARCMIN: Final[Unit] = ARCSEC.multiply(60).with_name("arcmin")


# =============================================================================
# СИЛА
# =============================================================================

NEWTON: Final[Unit] = Unit.new(FORCE, 1, name="newton")
POUND: Final[Unit] = NEWTON.multiply(Decimal("4.4482216152605")).with_name("pound")


# =============================================================================
# ОБЪЁМ (US customary)
# =============================================================================

LITER: Final[Unit] = METER.multiply(Decimal("0.1")).pow(3).with_name("liter")
MILLILITER: Final[Unit] = LITER.divide(1000).with_name("milliliter")
TEASPOON: Final[Unit] = MILLILITER.multiply(Decimal("4.92892159375")).with_name("teaspoon")
TABLESPOON: Final[Unit] = TEASPOON.multiply(3).with_name("tablespoon")
FLUID_OUNCE: Final[Unit] = TABLESPOON.multiply(2).with_name("fluid_ounce")
CUP: Final[Unit] = FLUID_OUNCE.multiply(8).with_name("cup")
