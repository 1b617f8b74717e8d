"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает численную устойчивость вычислений cointoss:
- Безопасное деление с защитой от деления на ноль (пропорции пустой серии)
- NaN/Inf санитизация для предотвращения распространения невалидных значений
- Epsilon-защиты для сравнений float (сумма вероятностей)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль никогда не происходит (возвращается fallback)
2. NaN/Inf никогда не пропагируют (заменяются на fallback)
3. Float сравнения всегда учитывают машинную точность
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для общих вычислений
EPS_CALC: Final[float] = 1e-12

# Абсолютная толерантность для проверки sum(probabilities) == 1
# (0.33, 0.66) → sum = 0.99 → невалидно
EPS_PROBABILITY_SUM: Final[float] = 1e-9

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# БЕЗОПАСНОЕ ДЕЛЕНИЕ
# =============================================================================


def denom_safe_unsigned(value: float, eps: float = EPS_CALC) -> float:
    """
    Безопасный беззнаковый делитель с epsilon-защитой.

    denom_safe_unsigned(x, eps) = max(abs(x), eps)

    Args:
        value: Исходное значение (может быть любым)
        eps: Минимальный абсолютный порог (default: EPS_CALC)

    Returns:
        Безопасный делитель >= eps (всегда положительный)

    Examples:
        >>> denom_safe_unsigned(10.0, 1e-6)
        10.0
        >>> denom_safe_unsigned(-10.0, 1e-6)
        10.0
        >>> denom_safe_unsigned(0.0, 1e-6)
        1e-06
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    return max(abs(value), eps)


def safe_divide(
    numerator: float,
    denominator: float,
    eps: float = EPS_CALC,
    fallback: float = 0.0,
) -> float:
    """
    Безопасное деление с защитой от деления на ноль и NaN/Inf.

    ВАЖНО: Если denominator точно равен 0.0, возвращается fallback.
    Для малых ненулевых значений применяется epsilon-защита.

    Используется для пропорций серии: count / total при total == 0 → fallback.

    Args:
        numerator: Числитель
        denominator: Знаменатель (ожидается неотрицательный)
        eps: Минимальный абсолютный порог для знаменателя
        fallback: Значение при делении на ноль (default: 0.0)

    Returns:
        Результат деления или fallback при делении на ноль

    Examples:
        >>> safe_divide(3, 5)
        0.6
        >>> safe_divide(0, 0)
        0.0
    """
    num_clean = sanitize_float(numerator, fallback=0.0)
    denom_raw = sanitize_float(denominator, fallback=0.0)

    if denom_raw == 0.0:
        return fallback

    result = num_clean / denom_safe_unsigned(denom_raw, eps)

    return sanitize_float(result, fallback=fallback)


# =============================================================================
# NaN/Inf САНИТИЗАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли число валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def sanitize_float(value: float, fallback: float = 0.0) -> float:
    """
    Санитизация float: замена NaN/Inf на fallback значение.

    Examples:
        >>> sanitize_float(10.0)
        10.0
        >>> sanitize_float(float('nan'))
        0.0
        >>> sanitize_float(float('-inf'), fallback=-1.0)
        -1.0
    """
    if is_valid_float(value):
        return value
    return fallback


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(0.99, 1.0, abs_tol=EPS_PROBABILITY_SUM)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
