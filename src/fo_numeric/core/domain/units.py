"""
Units — Таблицы единиц по физическим видам и конверсия в canonical base unit

Единственный допустимый способ преобразований между литеральной единицей
(pt, cm, Hz, s, grad, ...) и канонической единицей хранения Numeric:
- длина → millipoints
- частота → hertz
- время → milliseconds
- угол → degrees

ЗАПРЕЩЕНО умножать на коэффициенты в обход to_canonical().
Разбор текстовых литералов ("12pt") здесь не выполняется: на вход
приходят уже разделённые число и единица.
"""

import math
from enum import Enum
from typing import Final

from .base_unit import BaseUnit


# =============================================================================
# КОЭФФИЦИЕНТЫ
# =============================================================================

# Millipoints в одном пункте
MILLIPOINTS_PER_POINT: Final[float] = 1000.0

# Пунктов в дюйме (типографский пункт PostScript)
POINTS_PER_INCH: Final[float] = 72.0

# Сантиметров в дюйме
CM_PER_INCH: Final[float] = 2.54


# =============================================================================
# ENUMS
# =============================================================================


class LengthUnit(str, Enum):
    """Литеральные единицы длины"""

    PT = "pt"
    PC = "pc"
    IN = "in"
    CM = "cm"
    MM = "mm"

    @property
    def factor(self) -> float:
        """Millipoints в одной единице"""
        return _LENGTH_FACTORS[self]


class FrequencyUnit(str, Enum):
    """Литеральные единицы частоты"""

    HZ = "Hz"
    KHZ = "kHz"

    @property
    def factor(self) -> float:
        """Герц в одной единице"""
        return _FREQUENCY_FACTORS[self]


class TimeUnit(str, Enum):
    """Литеральные единицы времени"""

    MS = "ms"
    S = "s"

    @property
    def factor(self) -> float:
        """Миллисекунд в одной единице"""
        return _TIME_FACTORS[self]


class AngleUnit(str, Enum):
    """Литеральные единицы угла"""

    DEG = "deg"
    GRAD = "grad"
    RAD = "rad"

    @property
    def factor(self) -> float:
        """Градусов в одной единице"""
        return _ANGLE_FACTORS[self]


_LENGTH_FACTORS: Final[dict[LengthUnit, float]] = {
    LengthUnit.PT: MILLIPOINTS_PER_POINT,
    LengthUnit.PC: 12.0 * MILLIPOINTS_PER_POINT,
    LengthUnit.IN: POINTS_PER_INCH * MILLIPOINTS_PER_POINT,
    LengthUnit.CM: POINTS_PER_INCH * MILLIPOINTS_PER_POINT / CM_PER_INCH,
    LengthUnit.MM: POINTS_PER_INCH * MILLIPOINTS_PER_POINT / CM_PER_INCH / 10.0,
}

_FREQUENCY_FACTORS: Final[dict[FrequencyUnit, float]] = {
    FrequencyUnit.HZ: 1.0,
    FrequencyUnit.KHZ: 1000.0,
}

_TIME_FACTORS: Final[dict[TimeUnit, float]] = {
    TimeUnit.MS: 1.0,
    TimeUnit.S: 1000.0,
}

_ANGLE_FACTORS: Final[dict[AngleUnit, float]] = {
    AngleUnit.DEG: 1.0,
    AngleUnit.GRAD: 0.9,
    AngleUnit.RAD: 180.0 / math.pi,
}

# Литеральная единица → base unit, в котором хранится значение
UNIT_KINDS: Final[dict[type[Enum], BaseUnit]] = {
    LengthUnit: BaseUnit.MILLIPOINTS,
    FrequencyUnit: BaseUnit.HERTZ,
    TimeUnit: BaseUnit.MILLISECS,
    AngleUnit: BaseUnit.DEGREES,
}

# Литеральные обозначения относительных длин
PERCENT_SIGN: Final[str] = "%"
EM_SIGN: Final[str] = "em"

PhysicalUnit = LengthUnit | FrequencyUnit | TimeUnit | AngleUnit


# =============================================================================
# ИМЕНА ЕДИНИЦ
# =============================================================================


def _table_name(unit: object, table: type[Enum], kind: str) -> str:
    if isinstance(unit, table):
        return unit.value
    if isinstance(unit, str):
        try:
            return table(unit).value
        except ValueError:
            pass
    return f"Unrecognized {kind} unit: {unit!r}"


def length_unit_name(unit: object) -> str:
    """
    Отображаемое имя единицы длины.

    Examples:
        >>> length_unit_name(LengthUnit.PT)
        'pt'
        >>> length_unit_name("furlong")
        "Unrecognized length unit: 'furlong'"
    """
    return _table_name(unit, LengthUnit, "length")


def frequency_unit_name(unit: object) -> str:
    """Отображаемое имя единицы частоты"""
    return _table_name(unit, FrequencyUnit, "frequency")


def time_unit_name(unit: object) -> str:
    """Отображаемое имя единицы времени"""
    return _table_name(unit, TimeUnit, "time")


def angle_unit_name(unit: object) -> str:
    """Отображаемое имя единицы угла"""
    return _table_name(unit, AngleUnit, "angle")


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def base_unit_for(unit: PhysicalUnit) -> BaseUnit:
    """
    Base unit, в котором хранится значение литеральной единицы.

    Raises:
        ValueError: Если unit не является физической единицей
    """
    for table, base_unit in UNIT_KINDS.items():
        if isinstance(unit, table):
            return base_unit
    raise ValueError(f"Not a physical unit: {unit!r}")


def to_canonical(value: float, unit: PhysicalUnit) -> float:
    """
    Конверсия: значение в литеральной единице → canonical base unit.

    Args:
        value: Значение в единице unit
        unit: Литеральная единица

    Returns:
        Значение в millipoints / hertz / milliseconds / degrees

    Raises:
        ValueError: Если unit не является физической единицей

    Examples:
        >>> to_canonical(12.0, LengthUnit.PT)
        12000.0
        >>> to_canonical(1.5, TimeUnit.S)
        1500.0
    """
    base_unit_for(unit)
    return value * unit.factor


def from_canonical(value: float, unit: PhysicalUnit) -> float:
    """
    Конверсия: canonical base unit → значение в литеральной единице.

    Raises:
        ValueError: Если unit не является физической единицей
    """
    base_unit_for(unit)
    return value / unit.factor


def percent_to_factor(percent: float) -> float:
    """
    Конверсия: проценты → относительный множитель (50 → 0.5).
    """
    return percent / 100.0
