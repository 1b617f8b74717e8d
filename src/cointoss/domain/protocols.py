"""
Capability Protocols — generic операции cointoss

Generic операции (describe, summarize, heads_count, tails_count) работают
с любым объектом, реализующим соответствующую capability, а не только
с TossSeries. Объект без capability → UnsupportedTypeError.

- Describable: короткое текстовое описание (Coin, TossSeries)
- Summarizable: расширенное описание (TossSeries)
- SideCounted: счётчики сторон (TossSeries)
"""

from typing import Any, Protocol, runtime_checkable

from cointoss.errors import UnsupportedTypeError

# =============================================================================
# PROTOCOLS
# =============================================================================


@runtime_checkable
class Describable(Protocol):
    def describe(self) -> str: ...


@runtime_checkable
class Summarizable(Protocol):
    def summarize(self) -> Any: ...


@runtime_checkable
class SideCounted(Protocol):
    @property
    def heads_count(self) -> int: ...

    @property
    def tails_count(self) -> int: ...


# =============================================================================
# GENERIC ОПЕРАЦИИ
# =============================================================================


def _unsupported(operation: str, x: Any) -> UnsupportedTypeError:
    return UnsupportedTypeError(
        f"{operation}() is not supported for objects of type {type(x).__name__}"
    )


def describe(x: Any) -> str:
    """
    Короткое описание объекта (print-эквивалент).

    Protocol проверяет только наличие describe(); тип результата
    проверяется после вызова.

    Raises:
        UnsupportedTypeError: Нет describe() или он вернул не str
    """
    if not isinstance(x, Describable):
        raise _unsupported("describe", x)

    text = x.describe()
    if not isinstance(text, str):
        raise UnsupportedTypeError(
            f"describe() of {type(x).__name__} must return str, "
            f"got {type(text).__name__}"
        )
    return text


def summarize(x: Any) -> Any:
    """Расширенное описание объекта (summary-эквивалент)."""
    if not isinstance(x, Summarizable):
        raise _unsupported("summarize", x)
    return x.summarize()


def heads_count(x: Any) -> int:
    """Количество исходов первой стороны."""
    if not isinstance(x, SideCounted):
        raise _unsupported("heads_count", x)
    return x.heads_count


def tails_count(x: Any) -> int:
    """Количество исходов второй стороны."""
    if not isinstance(x, SideCounted):
        raise _unsupported("tails_count", x)
    return x.tails_count
