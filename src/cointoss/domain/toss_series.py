"""
TossSeries — Модель серии подбрасываний

Immutable Pydantic модель: монета + упорядоченные исходы.
Производные счётчики (total, heads_count, tails_count) не хранятся,
а всегда пересчитываются из outcomes — рассинхронизация невозможна.

Все преобразования (extend, replace_at) создают новый экземпляр.

ИНВАРИАНТЫ:
1. total == len(outcomes)
2. heads_count + tails_count == total
3. Каждый исход ∈ coin.sides
"""

import logging
import random
from collections.abc import Iterable
from typing import Any, Optional

from pydantic import BaseModel, Field, computed_field, model_validator

from cointoss.domain.coin import DEFAULT_PROBABILITIES, Coin, create_coin
from cointoss.domain.frequencies import RunningFrequencies
from cointoss.domain.sampler import sample, validate_count
from cointoss.errors import (
    IndexOutOfBoundsError,
    InvalidSidesError,
    InvalidValueError,
    UnsupportedTypeError,
)
from cointoss.math.numerical_safeguards import safe_divide

logger = logging.getLogger(__name__)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def check_outcomes(coin: Coin, outcomes: Iterable[Any]) -> None:
    """
    Проверка, что все исходы являются сторонами монеты.

    Raises:
        InvalidValueError: При первом исходе вне coin.sides
    """
    for position, outcome in enumerate(outcomes, start=1):
        if outcome not in coin.sides:
            raise InvalidValueError(
                f"outcome {outcome!r} at position {position} is not one of "
                f"{coin.sides[0]!r}, {coin.sides[1]!r}"
            )


# =============================================================================
# SUMMARY MODEL
# =============================================================================


class TossSummary(BaseModel):
    """
    Расширенное описание серии: счётчики + пропорции.

    При total == 0 пропорции равны 0.0 (fallback безопасного деления).
    """

    sides: tuple[str, str] = Field(..., description="Стороны монеты")
    total: int = Field(..., ge=0, description="Количество подбрасываний")
    heads_count: int = Field(..., ge=0, description="Количество sides[0]")
    tails_count: int = Field(..., ge=0, description="Количество sides[1]")
    heads_proportion: float = Field(..., ge=0, le=1, description="heads_count / total")
    tails_proportion: float = Field(..., ge=0, le=1, description="tails_count / total")

    model_config = {"frozen": True}

    def render(self) -> str:
        width = max(4, *(len(side) for side in self.sides))
        lines = [
            'summary "toss"',
            "",
            f'coin: "{self.sides[0]}", "{self.sides[1]}"',
            f"number of tosses: {self.total}",
            "",
            f"  {'side':<{width}}  {'count':>5}  prop",
        ]
        rows = (
            (self.sides[0], self.heads_count, self.heads_proportion),
            (self.sides[1], self.tails_count, self.tails_proportion),
        )
        for side, count, prop in rows:
            lines.append(f"  {side:<{width}}  {count:>5}  {prop:.4g}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()


# =============================================================================
# TOSS SERIES MODEL
# =============================================================================


class TossSeries(BaseModel):
    """
    Модель серии подбрасываний.

    Immutable модель (frozen=True). Монета разделяется, не копируется.
    Позиции в element_at/replace_at 1-based: допустимый диапазон [1, total].
    """

    coin: Coin = Field(..., description="Монета, использованная для серии")
    outcomes: tuple[str, ...] = Field(
        default_factory=tuple, description="Упорядоченные исходы (метки сторон)"
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_outcomes_in_sides(self) -> "TossSeries":
        check_outcomes(self.coin, self.outcomes)
        return self

    # -------------------------------------------------------------------------
    # Производные счётчики
    # -------------------------------------------------------------------------

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        return len(self.outcomes)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def heads_count(self) -> int:
        """Количество исходов, равных coin.sides[0]."""
        return self.outcomes.count(self.coin.sides[0])

    @computed_field  # type: ignore[prop-decorator]
    @property
    def tails_count(self) -> int:
        """Количество исходов, равных coin.sides[1]."""
        return self.outcomes.count(self.coin.sides[1])

    def count_of(self, side: str) -> int:
        """Количество исходов side (InvalidSideError для чужой стороны)."""
        self.coin.side_index(side)
        return self.outcomes.count(side)

    # -------------------------------------------------------------------------
    # Описание
    # -------------------------------------------------------------------------

    def describe(self) -> str:
        """Короткое описание: стороны монеты, total, счётчики сторон."""
        heads, tails = self.coin.sides
        return "\n".join(
            [
                'object "toss"',
                "",
                f'coin: "{heads}", "{tails}"',
                f"total tosses: {self.total}",
                f"num of {heads}: {self.heads_count}",
                f"num of {tails}: {self.tails_count}",
            ]
        )

    def summarize(self) -> TossSummary:
        """Расширенное описание с пропорциями сторон."""
        return TossSummary(
            sides=self.coin.sides,
            total=self.total,
            heads_count=self.heads_count,
            tails_count=self.tails_count,
            heads_proportion=safe_divide(self.heads_count, self.total),
            tails_proportion=safe_divide(self.tails_count, self.total),
        )

    def running_frequencies(self, side: str) -> RunningFrequencies:
        """
        Кумулятивные частоты стороны side.

        Raises:
            InvalidSideError: Если side не является стороной монеты
        """
        self.coin.side_index(side)
        return RunningFrequencies(outcomes=self.outcomes, side=side)

    # -------------------------------------------------------------------------
    # Доступ и преобразования
    # -------------------------------------------------------------------------

    def _check_position(self, position: Any) -> int:
        if isinstance(position, bool) or not isinstance(position, int):
            raise IndexOutOfBoundsError(
                f"position must be an integer in [1, {self.total}], got {position!r}"
            )
        if position < 1 or position > self.total:
            raise IndexOutOfBoundsError(
                f"position {position} out of bounds [1, {self.total}]"
            )
        return position

    def element_at(self, position: int) -> str:
        """
        Исход на 1-based позиции.

        Raises:
            IndexOutOfBoundsError: Если position вне [1, total]
        """
        return self.outcomes[self._check_position(position) - 1]

    def replace_at(self, position: int, value: str) -> "TossSeries":
        """
        Новая серия с заменённым исходом на 1-based позиции.

        Позиция проверяется раньше значения.

        Raises:
            IndexOutOfBoundsError: Если position вне [1, total]
            InvalidValueError: Если value не является стороной монеты
        """
        index = self._check_position(position) - 1

        if value not in self.coin.sides:
            raise InvalidValueError(
                f"replacement value must be {self.coin.sides[0]!r} or "
                f"{self.coin.sides[1]!r}, got {value!r}"
            )

        outcomes = self.outcomes[:index] + (value,) + self.outcomes[index + 1 :]
        logger.debug("Replaced outcome at position %d with %r", position, value)
        return TossSeries(coin=self.coin, outcomes=outcomes)

    def extend(
        self, additional_count: int, rng: Optional[random.Random] = None
    ) -> "TossSeries":
        """
        Новая серия с additional_count дополнительными исходами.

        Raises:
            InvalidCountError: Если additional_count не положительное целое
        """
        validate_count(additional_count, "additional_count")

        more = sample(self.coin, additional_count, rng=rng)
        logger.debug("Extended series of %d by %d tosses", self.total, additional_count)
        return TossSeries(coin=self.coin, outcomes=self.outcomes + more)

    def __add__(self, other: Any) -> "TossSeries":
        # series + n → extend(n)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.extend(other)
        return NotImplemented

    def __len__(self) -> int:
        return self.total

    def __bool__(self) -> bool:
        # Пустая серия — валидная запись
        return True

    def __str__(self) -> str:
        return self.describe()


# =============================================================================
# ОПЕРАЦИИ
# =============================================================================


def is_toss_series(x: Any) -> bool:
    """Проверка, удовлетворяет ли x контракту TossSeries."""
    return isinstance(x, TossSeries)


def _require_series(x: Any, operation: str) -> TossSeries:
    if not is_toss_series(x):
        raise UnsupportedTypeError(
            f"{operation}() requires a TossSeries, got {type(x).__name__}"
        )
    return x


def make_series(coin: Coin, outcomes: Iterable[str]) -> TossSeries:
    """
    Конструктор серии из готовых исходов.

    Raises:
        InvalidValueError: Если исход не является стороной монеты
    """
    values = tuple(outcomes)
    check_outcomes(coin, values)
    return TossSeries(coin=coin, outcomes=values)


def toss(coin: Coin, times: int = 1, rng: Optional[random.Random] = None) -> TossSeries:
    """
    Подбрасывание монеты times раз.

    times проверяется до сэмплирования.

    Args:
        coin: Монета
        times: Количество подбрасываний (default: 1)
        rng: Источник случайности (default: процесс-глобальный)

    Returns:
        Новая TossSeries

    Raises:
        InvalidCountError: Если times не положительное целое
    """
    validate_count(times, "times")

    series = make_series(coin, sample(coin, times, rng=rng))
    logger.debug(
        "Tossed coin %s %d times: %d/%d",
        coin.sides,
        times,
        series.heads_count,
        series.tails_count,
    )
    return series


def extend(
    series: TossSeries, additional_count: int, rng: Optional[random.Random] = None
) -> TossSeries:
    """Новая серия с additional_count дополнительными исходами."""
    return _require_series(series, "extend").extend(additional_count, rng=rng)


def replace_at(series: TossSeries, position: int, value: str) -> TossSeries:
    """Новая серия с value на 1-based позиции position."""
    return _require_series(series, "replace_at").replace_at(position, value)


def element_at(series: TossSeries, position: int) -> str:
    """Исход на 1-based позиции position."""
    return _require_series(series, "element_at").element_at(position)


def running_frequencies(series: TossSeries, side: str) -> RunningFrequencies:
    """Кумулятивные частоты стороны side в серии."""
    return _require_series(series, "running_frequencies").running_frequencies(side)


def from_binary(bits: Iterable[Any]) -> TossSeries:
    """
    Коэрсия последовательности из двух различных значений в TossSeries.

    Различность определяется по исходным значениям (0 == 0.0), стороны
    монеты — str() различных значений в порядке первого появления,
    вероятности по умолчанию.

    Examples:
        >>> from_binary([0, 1, 1, 0, 1]).coin.sides
        ('0', '1')

    Raises:
        InvalidSidesError: Если различных значений не ровно два или
            их строковые метки совпадают
    """
    if isinstance(bits, (str, bytes)) or not isinstance(bits, Iterable):
        raise InvalidSidesError(f"'bits' must be a sequence of values, got {bits!r}")

    values = list(bits)

    # Сравнение через ==, чтобы не требовать hashable значений
    distinct: list[Any] = []
    for value in values:
        if not any(value == seen for seen in distinct):
            distinct.append(value)

    if len(distinct) != 2:
        raise InvalidSidesError(
            f"'bits' must contain exactly 2 distinct values, got {len(distinct)}"
        )

    first, second = distinct
    sides = (str(first), str(second))
    if sides[0] == sides[1]:
        raise InvalidSidesError(
            f"'bits' values {first!r} and {second!r} share the label {sides[0]!r}"
        )

    labels = [sides[0] if value == first else sides[1] for value in values]

    coin = create_coin(sides, DEFAULT_PROBABILITIES)
    return make_series(coin, labels)
