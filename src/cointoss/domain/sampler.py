"""
Sampler — взвешенное сэмплирование сторон монеты

Независимые одинаково распределённые draws с возвращением,
веса = coin.probabilities.

Источник случайности инжектируется (random.Random). Если не передан,
используется процесс-глобальный генератор, который пересевается set_seed().
Одинаковый seed → одинаковая последовательность исходов.
"""

import logging
import random
from dataclasses import dataclass
from typing import Any, Optional

from cointoss.domain.coin import Coin
from cointoss.errors import InvalidCountError

logger = logging.getLogger(__name__)

# Процесс-глобальный генератор (аналог глобального seed)
_DEFAULT_RNG = random.Random()


@dataclass(frozen=True)
class SamplerConfig:
    """Конфигурация источника случайности.

    seed=None → генератор инициализируется из системной энтропии.
    """

    seed: Optional[int] = None

    def make_rng(self) -> random.Random:
        """Новый независимый генератор для этого seed."""
        return random.Random(self.seed)


def set_seed(seed: Optional[int]) -> None:
    """Пересев процесс-глобального генератора."""
    _DEFAULT_RNG.seed(seed)
    logger.debug("Default sampler reseeded (seed=%s)", seed)


def resolve_rng(rng: Optional[random.Random] = None) -> random.Random:
    """Инжектированный генератор или процесс-глобальный."""
    return rng if rng is not None else _DEFAULT_RNG


def validate_count(count: Any, name: str = "count") -> int:
    """
    Валидация количества повторений.

    Args:
        count: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        count как int

    Raises:
        InvalidCountError: Если count не целое (bool не допускается) или <= 0
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidCountError(f"'{name}' must be an integer, got {count!r}")

    if count <= 0:
        raise InvalidCountError(f"'{name}' must be a positive integer, got {count}")

    return count


def sample(
    coin: Coin, count: int, rng: Optional[random.Random] = None
) -> tuple[str, ...]:
    """
    Сэмплирование count сторон монеты.

    Args:
        coin: Монета
        count: Количество draws (положительное целое)
        rng: Источник случайности (default: процесс-глобальный)

    Returns:
        Кортеж меток сторон длины count

    Raises:
        InvalidCountError: Если count не положительное целое
    """
    validate_count(count, "count")

    outcomes = resolve_rng(rng).choices(coin.sides, weights=coin.probabilities, k=count)

    logger.debug("Sampled %d outcomes from coin %s", count, coin.sides)
    return tuple(outcomes)
