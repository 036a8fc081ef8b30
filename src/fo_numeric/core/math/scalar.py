"""
Scalar Safeguards — IEEE-754 примитивы для Numeric

Значение Numeric всегда 64-битный float. Python по умолчанию бросает
ZeroDivisionError / ValueError там, где float64 даёт inf или nan, и
округляет к чётному. Модуль фиксирует семантику, на которую опирается
алгебра единиц:
- Деление по IEEE-754 (x/0 → ±inf, 0/0 → nan)
- Остаток с усечением (знак делимого, как fmod)
- Округление half-up (floor(x + 0.5))
- Усечение к целому фиксированной ширины с насыщением
- Канонизация углов в диапазон [0, 360)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция не бросает исключений на конечных/бесконечных/NaN входах
2. normalize_angle идемпотентна: normalize(normalize(x)) == normalize(x)
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Период канонизации углов (градусы). Диапазон: [0, ANGLE_PERIOD_DEG)
ANGLE_PERIOD_DEG: Final[float] = 360.0

# Границы целых фиксированной ширины
INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# Толерантности сравнения float
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite
    """
    return math.isfinite(value)


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

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# АРИФМЕТИКА IEEE-754
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с семантикой float64 вместо ZeroDivisionError.

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        numerator / denominator; при denominator == 0:
        - ±inf для ненулевого числителя (знак по правилам IEEE)
        - nan для 0/0 и nan/0

    Examples:
        >>> ieee_divide(10.0, 4.0)
        2.5
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
    """
    if denominator != 0.0:
        return numerator / denominator

    if numerator == 0.0 or math.isnan(numerator):
        return math.nan

    # Знак результата: XOR знаков числителя и знаменателя (учитывая -0.0)
    negative = (math.copysign(1.0, numerator) < 0) != (math.copysign(1.0, denominator) < 0)
    return -math.inf if negative else math.inf


def truncating_mod(dividend: float, divisor: float) -> float:
    """
    Остаток от деления с усечением (знак результата = знак делимого).

    В отличие от оператора % в Python, -7 mod 3 == -1, а не 2.

    Returns:
        math.fmod(dividend, divisor); nan при divisor == 0 или
        бесконечном делимом; dividend при бесконечном делителе

    Examples:
        >>> truncating_mod(7.0, 3.0)
        1.0
        >>> truncating_mod(-7.0, 3.0)
        -1.0
    """
    if divisor == 0.0 or math.isinf(dividend) or math.isnan(dividend) or math.isnan(divisor):
        return math.nan
    return math.fmod(dividend, divisor)


def ieee_max(a: float, b: float) -> float:
    """
    Максимум двух float: nan, если хотя бы один аргумент nan.

    Встроенный max() зависит от порядка: max(1.0, nan) == 1.0,
    max(nan, 1.0) is nan.
    """
    if math.isnan(a) or math.isnan(b):
        return math.nan
    return max(a, b)


def ieee_min(a: float, b: float) -> float:
    """Минимум двух float: nan, если хотя бы один аргумент nan"""
    if math.isnan(a) or math.isnan(b):
        return math.nan
    return min(a, b)


# =============================================================================
# ОКРУГЛЕНИЕ И УСЕЧЕНИЕ
# =============================================================================


def round_half_up(value: float) -> int:
    """
    Округление к ближайшему целому, половины — вверх (к +inf).

    Встроенный round() округляет к чётному: round(2.5) == 2.
    Здесь как floor(value + 0.5), но без округления при сложении:
    2.5 → 3, -2.5 → -2, 0.49999999999999994 → 0.

    Raises:
        ValueError: Если value NaN
        OverflowError: Если value бесконечно
    """
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def to_fixed_width_int(value: float, bits: int = 64) -> int:
    """
    Усечение float к целому фиксированной ширины.

    Дробная часть отбрасывается (к нулю), результат насыщается
    границами знакового целого, NaN даёт 0.

    Args:
        value: Исходное значение
        bits: Ширина целого (32 или 64)

    Returns:
        Целое в диапазоне [-(2**(bits-1)), 2**(bits-1) - 1]

    Examples:
        >>> to_fixed_width_int(2.9)
        2
        >>> to_fixed_width_int(-2.9)
        -2
        >>> to_fixed_width_int(1e12, bits=32)
        2147483647
    """
    if bits == 32:
        low, high = INT32_MIN, INT32_MAX
    elif bits == 64:
        low, high = INT64_MIN, INT64_MAX
    else:
        raise ValueError(f"bits must be 32 or 64, got {bits}")

    if math.isnan(value):
        return 0
    if value >= high:
        return high
    if value <= low:
        return low
    return int(value)


# =============================================================================
# КАНОНИЗАЦИЯ УГЛОВ
# =============================================================================


def normalize_angle(value: float, period: float = ANGLE_PERIOD_DEG) -> float:
    """
    Приведение угла к каноническому представителю в [0, period).

    NaN и ±inf возвращаются без изменений (для них нет представителя).

    Args:
        value: Угол в градусах
        period: Период (default: 360)

    Returns:
        Угол в диапазоне [0, period)

    Examples:
        >>> normalize_angle(370.0)
        10.0
        >>> normalize_angle(-90.0)
        270.0
        >>> normalize_angle(360.0)
        0.0
    """
    if not is_valid_float(value):
        return value

    result = math.fmod(value, period)
    if result < 0:
        result += period
    # -1e-20 + 360 округляется до 360.0
    if result >= period:
        result = 0.0

    # -0.0 → 0.0
    return result + 0.0
