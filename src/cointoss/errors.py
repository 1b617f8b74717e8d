"""
Errors — иерархия исключений cointoss

Все ошибки валидации поднимаются сразу на границе операции (fail fast).
Частично валидные объекты никогда не создаются.

Сообщения содержат имя аргумента и ожидаемое ограничение.
"""


class CoinTossError(Exception):
    """Базовое исключение для всех ошибок cointoss."""

    pass


class InvalidSidesError(CoinTossError, ValueError):
    """
    Некорректные стороны монеты.

    - количество сторон != 2
    - стороны не различны
    - вход from_binary не содержит ровно два различных значения
    """

    pass


class InvalidProbabilityError(CoinTossError, ValueError):
    """Неверная длина, нечисловые значения, выход за [0, 1] или сумма != 1."""

    pass


class InvalidCountError(CoinTossError, ValueError):
    """Количество повторений не положительное целое."""

    pass


class InvalidSideError(CoinTossError, ValueError):
    """Селектор стороны не совпадает ни с одной стороной монеты."""

    pass


class InvalidValueError(CoinTossError, ValueError):
    """Значение исхода не является одной из двух сторон монеты."""

    pass


class IndexOutOfBoundsError(CoinTossError, IndexError):
    """Позиция вне диапазона [1, total]."""

    pass


class UnsupportedTypeError(CoinTossError, TypeError):
    """Generic-операция вызвана для объекта без нужной capability."""

    pass
