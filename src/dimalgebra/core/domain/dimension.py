"""
Dimension — Canonical Dimension Algebra

Immutable Pydantic модель размерности. Внутреннее представление:
- лист: одна BaseDimension (length^1)
- композит: каноническое отображение BaseDimension → ненулевой Fraction

Канонизация (compose):
1. Каждый операнд (Dimension, exp) разворачивается в термы (BaseDimension, exp):
   лист даёт себя с показателем exp, композит даёт свои канонические термы,
   умноженные на exp
2. Показатели одинаковых баз (равенство по имени) суммируются
3. Термы с точным нулём отбрасываются, оставшиеся сортируются по имени базы

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Показатели — только Fraction; cbrt(length^3) == length^1 точно
2. Равенство — равенство канонических наборов термов (без толерантности)
3. Лист равен композиту, чья каноническая форма {база: 1}
4. Пустой композит — безразмерная величина, единица умножения
"""

from fractions import Fraction
from typing import Iterable, Iterator, NamedTuple, Sequence, Union

from pydantic import BaseModel, field_validator

from dimalgebra.core.display import render_dimension
from dimalgebra.core.domain.base import BaseDimension
from dimalgebra.core.math.numeric import Exponent, to_fraction


class Term(NamedTuple):
    """Канонический терм: база в рациональной степени."""

    base: BaseDimension
    exponent: Fraction


class Dimension(BaseModel):
    """
    Физическая размерность.

    Создаётся через Dimension.new(name) для базы или
    Dimension.new([(dim, exp), ...]) для композита.
    """

    components: Union[BaseDimension, tuple[Term, ...]] = ()

    model_config = {"frozen": True, "arbitrary_types_allowed": True}  # Immutable

    @field_validator("components")
    @classmethod
    def canonicalize_terms(
        cls, v: Union[BaseDimension, tuple[Term, ...]]
    ) -> Union[BaseDimension, tuple[Term, ...]]:
        """
        Набор термов приводится к канонической форме при любом способе
        конструирования: показатели одной базы суммируются, нули
        отбрасываются, термы сортируются по имени базы.
        """
        if isinstance(v, BaseDimension):
            return v
        return _fold_terms(v)

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def new(cls, definition: Union[str, Sequence[tuple["Dimension", Exponent]]]) -> "Dimension":
        """
        Листовая размерность по имени или композит по парам (Dimension, exp).

        Examples:
            >>> length = Dimension.new("length")
            >>> time = Dimension.new("time")
            >>> str(Dimension.new([(length, 1), (time, -1)]))
            'length^1 time^-1'
        """
        if isinstance(definition, str):
            return cls.of(definition)
        return cls.compose(definition)

    @classmethod
    def of(cls, name: str) -> "Dimension":
        """Листовая размерность для базы с именем name."""
        return cls(components=BaseDimension(name=name))

    @classmethod
    def compose(cls, pairs: Iterable[tuple["Dimension", Exponent]]) -> "Dimension":
        """Канонический композит из пар (Dimension, exp)."""
        return cls(components=_canonicalize(pairs))

    @classmethod
    def dimensionless(cls) -> "Dimension":
        return cls(components=())

    # =========================================================================
    # АЛГЕБРА
    # =========================================================================

    def pow(self, exponent: Exponent) -> "Dimension":
        """
        Возведение в целую или рациональную степень.

        Examples:
            >>> volume = Dimension.new("length").pow(3)
            >>> volume.pow(Fraction(1, 3)) == Dimension.new("length")
            True
        """
        exp = to_fraction(exponent)
        if exp == 0:
            return Dimension.dimensionless()
        return Dimension.compose([(self, exp)])

    def multiply(self, other: "Dimension") -> "Dimension":
        return Dimension.compose([(self, 1), (other, 1)])

    def divide(self, other: "Dimension") -> "Dimension":
        return self.multiply(other.pow(-1))

    def equals(self, other: "Dimension") -> bool:
        """True если канонические наборы термов совпадают."""
        return self.terms() == other.terms()

    # =========================================================================
    # ИНТРОСПЕКЦИЯ
    # =========================================================================

    def terms(self) -> tuple[Term, ...]:
        """Канонические термы, отсортированные по имени базы."""
        if isinstance(self.components, BaseDimension):
            return (Term(self.components, Fraction(1)),)
        return self.components

    def exponent_of(self, name: str) -> Fraction:
        """Показатель базы name (Fraction(0), если база отсутствует)."""
        for term in self.terms():
            if term.base.name == name:
                return term.exponent
        return Fraction(0)

    def is_base(self) -> bool:
        return isinstance(self.components, BaseDimension)

    def is_dimensionless(self) -> bool:
        return not self.terms()

    # =========================================================================
    # VALUE SEMANTICS
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dimension):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self.terms())

    def __str__(self) -> str:
        return render_dimension(self)

    def __repr__(self) -> str:
        return f"<Dimension {self}>"


# =============================================================================
# КАНОНИЗАЦИЯ
# =============================================================================


def _flatten(
    pairs: Iterable[tuple[Dimension, Exponent]], exponent: Fraction
) -> Iterator[Term]:
    for pair in pairs:
        try:
            dim, exp = pair
        except (TypeError, ValueError):
            raise TypeError(f"Expected (Dimension, exponent) pair, got {pair!r}") from None

        if not isinstance(dim, Dimension):
            raise TypeError(f"Expected Dimension, got {type(dim).__name__}")

        scaled = exponent * to_fraction(exp)
        # Термы композита уже каноничны: лист даёт себя, композит свои термы
        for term in dim.terms():
            yield Term(term.base, scaled * term.exponent)


def _fold_terms(terms: Iterable[Term]) -> tuple[Term, ...]:
    # Ключ: BaseDimension по значению (имени), а не по идентичности объекта
    totals: dict[BaseDimension, Fraction] = {}
    for term in terms:
        totals[term.base] = totals.get(term.base, Fraction(0)) + to_fraction(term.exponent)

    return tuple(
        sorted(
            (Term(base, exp) for base, exp in totals.items() if exp != 0),
            key=lambda term: term.base.name,
        )
    )


def _canonicalize(pairs: Iterable[tuple[Dimension, Exponent]]) -> tuple[Term, ...]:
    return _fold_terms(_flatten(pairs, Fraction(1)))
