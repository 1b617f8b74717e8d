"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Безопасное деление (включая деление на ноль)
2. NaN/Inf санитизацию
3. Epsilon-сравнения float
"""

import math

import pytest

from cointoss.math.numerical_safeguards import (
    EPS_CALC,
    EPS_PROBABILITY_SUM,
    denom_safe_unsigned,
    is_close,
    is_valid_float,
    safe_divide,
    sanitize_float,
)

# =============================================================================
# ТЕСТЫ БЕЗОПАСНОГО ДЕЛЕНИЯ
# =============================================================================


class TestDenomSafeUnsigned:
    """Тесты для denom_safe_unsigned"""

    def test_large_values_absolute(self) -> None:
        assert denom_safe_unsigned(10.0, eps=1e-6) == 10.0
        assert denom_safe_unsigned(-10.0, eps=1e-6) == 10.0

    def test_small_value_clamped_to_eps(self) -> None:
        assert denom_safe_unsigned(1e-9, eps=1e-6) == 1e-6
        assert denom_safe_unsigned(0.0, eps=1e-6) == 1e-6

    def test_invalid_eps(self) -> None:
        with pytest.raises(ValueError, match="eps must be positive"):
            denom_safe_unsigned(1.0, eps=0.0)


class TestSafeDivide:
    """Тесты для safe_divide"""

    def test_normal_division(self) -> None:
        assert safe_divide(3, 5) == pytest.approx(0.6)
        assert safe_divide(5, 5) == 1.0

    def test_zero_denominator_returns_fallback(self) -> None:
        """Пустая серия: 0 / 0 → fallback"""
        assert safe_divide(0, 0) == 0.0
        assert safe_divide(3, 0, fallback=-1.0) == -1.0

    def test_nan_inputs_sanitized(self) -> None:
        assert safe_divide(math.nan, 2.0) == 0.0
        assert safe_divide(1.0, math.nan, fallback=0.5) == 0.5

    def test_tiny_denominator_protected(self) -> None:
        result = safe_divide(1.0, 1e-20)
        assert result == pytest.approx(1.0 / EPS_CALC)
        assert is_valid_float(result)


# =============================================================================
# NaN/Inf САНИТИЗАЦИЯ
# =============================================================================


class TestSanitize:
    """Тесты для is_valid_float и sanitize_float"""

    @pytest.mark.parametrize("value", [0.0, 1.0, -1e300, 1e-300])
    def test_valid(self, value: float) -> None:
        assert is_valid_float(value)
        assert sanitize_float(value) == value

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_invalid_replaced(self, value: float) -> None:
        assert not is_valid_float(value)
        assert sanitize_float(value, fallback=0.25) == 0.25


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


class TestIsClose:
    """Тесты для is_close"""

    def test_close_values(self) -> None:
        assert is_close(1.0, 1.0 + 1e-10)
        assert is_close(0.1 + 0.2, 0.3)

    def test_distant_values(self) -> None:
        assert not is_close(1.0, 1.1)

    def test_probability_sum_tolerance(self) -> None:
        """Абсолютная толерантность суммы вероятностей"""
        assert is_close(0.99, 1.0, rel_tol=0.0, abs_tol=EPS_PROBABILITY_SUM) is False
        assert is_close(1.0 + 1e-12, 1.0, rel_tol=0.0, abs_tol=EPS_PROBABILITY_SUM)
