"""
Coin — Модель двусторонней монеты

Immutable Pydantic модель: две различные стороны и вероятности,
позиционно выровненные со сторонами.

Единственный валидирующий конструктор — create_coin(). Прямое создание
Coin(...) также валидируется, но ошибки оборачиваются в pydantic.ValidationError.
"""

from collections.abc import Iterable, Sequence
from numbers import Real
from typing import Any, Final

from pydantic import BaseModel, Field, field_validator

from cointoss.errors import InvalidProbabilityError, InvalidSideError, InvalidSidesError
from cointoss.math.numerical_safeguards import (
    EPS_PROBABILITY_SUM,
    is_close,
    is_valid_float,
)

# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_SIDES: Final[tuple[str, str]] = ("heads", "tails")

DEFAULT_PROBABILITIES: Final[tuple[float, float]] = (0.5, 0.5)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def check_probabilities(probabilities: Sequence[float]) -> bool:
    """
    Проверка вектора вероятностей монеты.

    Чистый предикат без side effects, используется независимо от
    конструирования Coin.

    Условия:
    1. Ровно 2 значения
    2. Все значения числовые и конечные (bool не допускается)
    3. Каждое значение в [0, 1]
    4. Сумма == 1 с абсолютной толерантностью EPS_PROBABILITY_SUM

    Args:
        probabilities: Вероятности сторон

    Returns:
        True если вероятности валидны

    Raises:
        InvalidProbabilityError: Если хотя бы одно условие нарушено
    """
    if isinstance(probabilities, (str, bytes)) or not isinstance(probabilities, Iterable):
        raise InvalidProbabilityError(
            f"'probabilities' must be a sequence of 2 numbers, got {probabilities!r}"
        )

    values = list(probabilities)

    if len(values) != 2:
        raise InvalidProbabilityError(
            f"'probabilities' must contain exactly 2 values, got {len(values)}"
        )

    for p in values:
        if isinstance(p, bool) or not isinstance(p, Real):
            raise InvalidProbabilityError(
                f"'probabilities' must be numeric, got {p!r}"
            )
        if not is_valid_float(float(p)):
            raise InvalidProbabilityError(
                f"'probabilities' must be finite (not NaN/Inf), got {p}"
            )
        if p < 0 or p > 1:
            raise InvalidProbabilityError(
                f"'probabilities' values must be between 0 and 1, got {p}"
            )

    total = float(sum(values))
    if not is_close(total, 1.0, rel_tol=0.0, abs_tol=EPS_PROBABILITY_SUM):
        raise InvalidProbabilityError(
            f"elements in 'probabilities' must add up to 1, got sum={total}"
        )

    return True


def are_valid_probabilities(probabilities: Sequence[float]) -> bool:
    """Проверка валидности вероятностей без exception."""
    try:
        return check_probabilities(probabilities)
    except InvalidProbabilityError:
        return False


def normalize_sides(sides: Any) -> tuple[str, str]:
    """
    Приведение сторон к паре различных строковых меток.

    Args:
        sides: Последовательность меток (любые значения, приводятся к str)

    Returns:
        Кортеж (side_0, side_1)

    Raises:
        InvalidSidesError: Если сторон не 2 или они совпадают
    """
    if isinstance(sides, (str, bytes)) or not isinstance(sides, Iterable):
        raise InvalidSidesError(f"'sides' must be a sequence of 2 labels, got {sides!r}")

    labels = tuple(str(side) for side in sides)

    if len(labels) != 2:
        raise InvalidSidesError(
            f"'sides' must contain exactly 2 elements, got {len(labels)}"
        )

    if labels[0] == labels[1]:
        raise InvalidSidesError(f"'sides' must be distinct, got {labels[0]!r} twice")

    return labels


# =============================================================================
# COIN MODEL
# =============================================================================


class Coin(BaseModel):
    """
    Модель монеты.

    Immutable модель (frozen=True): после создания стороны и вероятности
    не меняются. Монета разделяется сериями подбрасываний только для чтения.
    """

    sides: tuple[str, str] = Field(
        DEFAULT_SIDES, description="Две различные метки сторон"
    )
    probabilities: tuple[float, float] = Field(
        DEFAULT_PROBABILITIES, description="Вероятности сторон (в [0, 1], сумма 1)"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("sides")
    @classmethod
    def validate_distinct_sides(cls, v: tuple[str, str]) -> tuple[str, str]:
        """Стороны должны различаться."""
        return normalize_sides(v)

    @field_validator("probabilities", mode="before")
    @classmethod
    def validate_probabilities(cls, v: Any) -> Any:
        """Проверка исходного значения до lax-коэрсии (True → 1.0)."""
        check_probabilities(v)
        return v

    def side_index(self, side: str) -> int:
        """
        Индекс стороны (0 или 1).

        Raises:
            InvalidSideError: Если side не является стороной монеты
        """
        if side == self.sides[0]:
            return 0
        if side == self.sides[1]:
            return 1
        raise InvalidSideError(
            f"side must be one of {self.sides[0]!r}, {self.sides[1]!r}; got {side!r}"
        )

    def probability_of(self, side: str) -> float:
        """Вероятность выпадения стороны."""
        return self.probabilities[self.side_index(side)]

    def describe(self) -> str:
        """Короткое описание монеты: стороны и их вероятности."""
        width = max(4, *(len(side) for side in self.sides))
        lines = ['object "coin"', "", f"  {'side':<{width}}  prob"]
        for side, prob in zip(self.sides, self.probabilities):
            lines.append(f"  {side:<{width}}  {prob:g}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()


def create_coin(
    sides: Sequence[Any] = DEFAULT_SIDES,
    probabilities: Sequence[float] = DEFAULT_PROBABILITIES,
) -> Coin:
    """
    Валидирующий конструктор монеты.

    Args:
        sides: Две различные метки (приводятся к str)
        probabilities: Две вероятности, выровненные со sides

    Returns:
        Immutable Coin

    Raises:
        InvalidSidesError: Если сторон не 2 или они совпадают
        InvalidProbabilityError: Если вероятности невалидны

    Examples:
        >>> create_coin().sides
        ('heads', 'tails')
        >>> create_coin(["a", "b", "c"])  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidSidesError: 'sides' must contain exactly 2 elements, got 3
    """
    labels = normalize_sides(sides)
    check_probabilities(probabilities)

    return Coin(sides=labels, probabilities=tuple(float(p) for p in probabilities))
