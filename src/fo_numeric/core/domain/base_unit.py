"""
BaseUnit — Перечисление base units и классификация по группам

Каждое значение Numeric хранится в одном из семи base units. Группы
(NUMERIC, RELATIVE_LENGTH, UNIT, ...) определяют ветвление арифметики:

    unit      = MILLIPOINTS | HERTZ | MILLISECS | DEGREES
    relunit   = PERCENTAGE | EMS
    number    = NUMBER
    numeric   = number | relunit
    notlength = HERTZ | MILLISECS | DEGREES
    absunit   = number | unit
    notnumber = unit | relunit
    distance  = MILLIPOINTS | relunit

Предикаты is_length/is_time/is_frequency/is_angle учитывают степень:
length^2 не является length.
"""

from enum import Enum
from typing import Final


# =============================================================================
# ENUMS
# =============================================================================


class BaseUnit(str, Enum):
    """Base unit значения Numeric (каноническая единица хранения)"""

    NUMBER = "number"
    PERCENTAGE = "percentage"
    EMS = "ems"
    MILLIPOINTS = "millipoints"
    HERTZ = "hertz"
    MILLISECS = "millisecs"
    DEGREES = "degrees"


# =============================================================================
# ГРУППЫ
# =============================================================================

NUMERIC: Final[frozenset[BaseUnit]] = frozenset(
    {BaseUnit.NUMBER, BaseUnit.PERCENTAGE, BaseUnit.EMS}
)

RELATIVE_LENGTH: Final[frozenset[BaseUnit]] = frozenset({BaseUnit.PERCENTAGE, BaseUnit.EMS})

UNIT: Final[frozenset[BaseUnit]] = frozenset(
    {BaseUnit.MILLIPOINTS, BaseUnit.HERTZ, BaseUnit.MILLISECS, BaseUnit.DEGREES}
)

NOT_LENGTH: Final[frozenset[BaseUnit]] = frozenset(
    {BaseUnit.HERTZ, BaseUnit.MILLISECS, BaseUnit.DEGREES}
)

ABSOLUTE_UNIT: Final[frozenset[BaseUnit]] = frozenset({BaseUnit.NUMBER}) | UNIT

NOT_NUMBER: Final[frozenset[BaseUnit]] = UNIT | RELATIVE_LENGTH

DISTANCE: Final[frozenset[BaseUnit]] = frozenset({BaseUnit.MILLIPOINTS}) | RELATIVE_LENGTH


# Отображаемые имена base units (диагностика)
UNIT_TYPE_NAMES: Final[dict[BaseUnit, str]] = {
    BaseUnit.NUMBER: "numeric",
    BaseUnit.PERCENTAGE: "percentage",
    BaseUnit.EMS: "ems",
    BaseUnit.MILLIPOINTS: "millipoints",
    BaseUnit.HERTZ: "Hertz",
    BaseUnit.MILLISECS: "milliseconds",
    BaseUnit.DEGREES: "degrees",
}


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def coerce_base_unit(base_unit: BaseUnit | str) -> BaseUnit | None:
    """
    Приведение к BaseUnit.

    Args:
        base_unit: BaseUnit или его строковое значение ('millipoints')

    Returns:
        BaseUnit или None, если значение не входит в перечисление
    """
    if isinstance(base_unit, BaseUnit):
        return base_unit
    if isinstance(base_unit, str):
        try:
            return BaseUnit(base_unit)
        except ValueError:
            return None
    return None


def unit_name(base_unit: object) -> str:
    """
    Отображаемое имя base unit.

    Examples:
        >>> unit_name(BaseUnit.HERTZ)
        'Hertz'
        >>> unit_name(128)
        'Unrecognized baseunit type: 128'
    """
    if isinstance(base_unit, BaseUnit):
        return UNIT_TYPE_NAMES[base_unit]
    return f"Unrecognized baseunit type: {base_unit!r}"


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def is_numeric(base_unit: BaseUnit) -> bool:
    """NUMBER, PERCENTAGE или EMS (степень всегда 0)"""
    return base_unit in NUMERIC


def is_number(base_unit: BaseUnit) -> bool:
    return base_unit is BaseUnit.NUMBER


def is_ems(base_unit: BaseUnit) -> bool:
    return base_unit is BaseUnit.EMS


def is_percentage(base_unit: BaseUnit) -> bool:
    return base_unit is BaseUnit.PERCENTAGE


def is_relative_length(base_unit: BaseUnit) -> bool:
    return base_unit in RELATIVE_LENGTH


def is_unit(base_unit: BaseUnit) -> bool:
    """Именованная физическая единица: длина, частота, время, угол"""
    return base_unit in UNIT


def is_length(base_unit: BaseUnit, power: int) -> bool:
    """Длина в millipoints первой степени"""
    return base_unit is BaseUnit.MILLIPOINTS and power == 1


def is_time(base_unit: BaseUnit, power: int) -> bool:
    """Время в миллисекундах первой степени"""
    return base_unit is BaseUnit.MILLISECS and power == 1


def is_frequency(base_unit: BaseUnit, power: int) -> bool:
    """Частота в герцах первой степени"""
    return base_unit is BaseUnit.HERTZ and power == 1


def is_angle(base_unit: BaseUnit, power: int) -> bool:
    """Угол в градусах первой степени"""
    return base_unit is BaseUnit.DEGREES and power == 1


def is_distance(base_unit: BaseUnit) -> bool:
    """
    Абсолютная или относительная длина.

    Степень не учитывается: millipoints^2 тоже distance.
    """
    return base_unit in DISTANCE
