"""
Core math modules для fo_numeric

Скалярные примитивы с семантикой float64.
"""

from fo_numeric.core.math.scalar import (
    # Constants
    ANGLE_PERIOD_DEG,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    # Checks
    is_close,
    is_valid_float,
    # IEEE-754 arithmetic
    ieee_divide,
    ieee_max,
    ieee_min,
    truncating_mod,
    # Rounding
    round_half_up,
    to_fixed_width_int,
    # Angles
    normalize_angle,
)

__all__ = [
    # Constants
    "ANGLE_PERIOD_DEG",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    # Checks
    "is_close",
    "is_valid_float",
    # IEEE-754 arithmetic
    "ieee_divide",
    "ieee_max",
    "ieee_min",
    "truncating_mod",
    # Rounding
    "round_half_up",
    "to_fixed_width_int",
    # Angles
    "normalize_angle",
]
