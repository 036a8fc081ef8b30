"""
Numeric — Значение с единицей и степенью единицы

Числа, абсолютные длины, относительные длины (проценты, ems), углы, время
и частота представлены одним типом: значение + base unit + степень.

- Относительные длины хранятся как чистый множитель (степень 0) с base unit
  PERCENTAGE или EMS и превращаются в длину при первом умножении на
  MILLIPOINTS. Другие умножения относительных длин запрещены.
- Ненулевая степень означает длину, угол, время или частоту.
- Каждая физическая величина хранится в одной канонической единице:
  MILLIPOINTS, HERTZ, MILLISECS, DEGREES.

Правила операций (numeric = number | relunit | unit):

    numeric^n   addop  numeric^m   = Illegal
    numeric1    addop  numeric2    = Illegal
    numeric1^n  addop  numeric1^n  = numeric1^n

    number      multop anyunit     = anyunit      универсальный множитель
    unit1       multop unit2       = Illegal
    relunit     multop notlength   = Illegal
    relunit     multop relunit     = Illegal
    unit1^n     multop unit1^m     = unit1^(n±m)
    relunit     multop length      = length

Операции изменяют и возвращают self (накопитель). Для сохранения исходного
значения используйте copy(). При ошибке получатель не изменяется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. base_unit ∈ NUMERIC ⇒ power == 0
2. base_unit == DEGREES ⇒ value ∈ [0, 360)
3. original_base_unit / original_unit не меняются после создания
"""

import math
import numbers
import operator
from typing import Callable, Final, Optional

from fo_numeric.core.math.scalar import (
    ieee_divide,
    ieee_max,
    ieee_min,
    normalize_angle,
    round_half_up,
    to_fixed_width_int,
    truncating_mod,
)

from . import base_unit as bu
from .base_unit import NUMERIC, RELATIVE_LENGTH, UNIT, BaseUnit, coerce_base_unit
from .exceptions import (
    DimensionError,
    IncompatibleOperandsError,
    IncompatibleUnitsError,
    InvalidDimensionError,
    InvalidUnitError,
    MismatchReason,
    PropertyValidationError,
    UnrecognizedUnitError,
)
from .properties import PropertyCategory, PropertyRegistry, get_default_registry
from .units import (
    EM_SIGN,
    PERCENT_SIGN,
    AngleUnit,
    FrequencyUnit,
    LengthUnit,
    PhysicalUnit,
    TimeUnit,
    angle_unit_name,
    frequency_unit_name,
    length_unit_name,
    percent_to_factor,
    time_unit_name,
    to_canonical,
)

OriginalUnit = PhysicalUnit | str | None
Scalar = int | float


# Категория свойства и требуемая степень для каждого base unit
_VALIDATION_RULES: Final[dict[BaseUnit, tuple[PropertyCategory, int, str]]] = {
    BaseUnit.NUMBER: (PropertyCategory.NUMBER, 0, "Numeric"),
    BaseUnit.PERCENTAGE: (PropertyCategory.PERCENTAGE, 0, "Percentage"),
    BaseUnit.MILLIPOINTS: (PropertyCategory.LENGTH, 1, "Length"),
    BaseUnit.HERTZ: (PropertyCategory.FREQUENCY, 1, "Frequency"),
    BaseUnit.MILLISECS: (PropertyCategory.TIME, 1, "Time"),
    BaseUnit.DEGREES: (PropertyCategory.ANGLE, 1, "Angle"),
}

_UNIT_NAME_TABLES: Final[dict[BaseUnit, Callable[[object], str]]] = {
    BaseUnit.MILLIPOINTS: length_unit_name,
    BaseUnit.HERTZ: frequency_unit_name,
    BaseUnit.MILLISECS: time_unit_name,
    BaseUnit.DEGREES: angle_unit_name,
}


def _resolve_property(prop: int | str, registry: Optional[PropertyRegistry]) -> int:
    """Индекс свойства; имя разрешается через реестр"""
    if isinstance(prop, str):
        if registry is None:
            registry = get_default_registry()
        return registry.property_index(prop)
    if isinstance(prop, bool) or not isinstance(prop, int):
        raise TypeError(f"Property must be an index or a name, got {prop!r}")
    return prop


def _scalar(op: object) -> float:
    if isinstance(op, numbers.Real):
        return float(op)
    raise TypeError(f"Unsupported operand type for Numeric: {type(op).__name__}")


class Numeric:
    """
    Числовое значение свойства: value × base_unit^power.

    Attributes (read-only):
        property_id: Индекс свойства-владельца в реестре
        value: Значение в канонической единице base_unit
        power: Степень единицы
        base_unit: Текущий base unit
        original_base_unit: Base unit при создании
        original_unit: Литеральная единица при создании (None для чисел)
    """

    def __init__(
        self,
        property_id: int,
        value: Scalar,
        base_unit: BaseUnit | str,
        power: int,
        original_unit: OriginalUnit = None,
    ):
        """
        Args:
            property_id: Индекс свойства
            value: Значение в канонической единице
            base_unit: Base unit (BaseUnit или его строковое значение)
            power: Степень: 0 для чисел, 1 для длины/угла/времени/частоты,
                иное после умножений и делений
            original_unit: Литеральная единица (pt, Hz, '%', ...)

        Raises:
            InvalidUnitError: base_unit вне перечисления BaseUnit
            InvalidDimensionError: NUMERIC base unit с ненулевой степенью
        """
        unit = coerce_base_unit(base_unit)
        if unit is None:
            raise InvalidUnitError(f"Invalid baseunit: {base_unit!r}")
        if isinstance(power, bool) or not isinstance(power, int):
            raise InvalidDimensionError(f"Unit power must be an integer, got {power!r}")
        if unit in NUMERIC and power != 0:
            raise InvalidDimensionError(f"Invalid power for NUMERIC: {power}")

        self._property_id = property_id
        self._value = float(value)
        self._power = power
        self._base_unit = unit
        self._original_base_unit = unit
        self._original_unit = original_unit

        if unit is BaseUnit.DEGREES:
            self._value = normalize_angle(self._value)

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def number(
        cls,
        prop: int | str,
        value: Scalar,
        registry: Optional[PropertyRegistry] = None,
    ) -> "Numeric":
        """
        Число (NUMBER, степень 0) из float или int литерала.

        Args:
            prop: Индекс или имя свойства
            value: Литерал
            registry: Реестр для разрешения имени (default: реестр по умолчанию)
        """
        return cls(_resolve_property(prop, registry), value, BaseUnit.NUMBER, 0, None)

    @classmethod
    def from_property_name(
        cls,
        property_name: str,
        value: Scalar,
        base_unit: BaseUnit | str,
        power: int,
        original_unit: OriginalUnit = None,
        registry: Optional[PropertyRegistry] = None,
    ) -> "Numeric":
        """Полный конструктор с разрешением имени свойства через реестр"""
        return cls(
            _resolve_property(property_name, registry),
            value,
            base_unit,
            power,
            original_unit,
        )

    @classmethod
    def _physical(
        cls,
        prop: int | str,
        value: Scalar,
        unit: PhysicalUnit,
        base_unit: BaseUnit,
        registry: Optional[PropertyRegistry],
    ) -> "Numeric":
        return cls(
            _resolve_property(prop, registry),
            to_canonical(float(value), unit),
            base_unit,
            1,
            unit,
        )

    @classmethod
    def length(
        cls,
        prop: int | str,
        value: Scalar,
        unit: LengthUnit = LengthUnit.PT,
        registry: Optional[PropertyRegistry] = None,
    ) -> "Numeric":
        """Длина: 12 pt → 12000 millipoints^1"""
        return cls._physical(prop, value, unit, BaseUnit.MILLIPOINTS, registry)

    @classmethod
    def frequency(
        cls,
        prop: int | str,
        value: Scalar,
        unit: FrequencyUnit = FrequencyUnit.HZ,
        registry: Optional[PropertyRegistry] = None,
    ) -> "Numeric":
        return cls._physical(prop, value, unit, BaseUnit.HERTZ, registry)

    @classmethod
    def time(
        cls,
        prop: int | str,
        value: Scalar,
        unit: TimeUnit = TimeUnit.MS,
        registry: Optional[PropertyRegistry] = None,
    ) -> "Numeric":
        return cls._physical(prop, value, unit, BaseUnit.MILLISECS, registry)

    @classmethod
    def angle(
        cls,
        prop: int | str,
        value: Scalar,
        unit: AngleUnit = AngleUnit.DEG,
        registry: Optional[PropertyRegistry] = None,
    ) -> "Numeric":
        return cls._physical(prop, value, unit, BaseUnit.DEGREES, registry)

    @classmethod
    def percentage(
        cls,
        prop: int | str,
        percent: Scalar,
        registry: Optional[PropertyRegistry] = None,
    ) -> "Numeric":
        """Процент хранится как множитель: 50 → 0.5"""
        return cls(
            _resolve_property(prop, registry),
            percent_to_factor(float(percent)),
            BaseUnit.PERCENTAGE,
            0,
            PERCENT_SIGN,
        )

    @classmethod
    def ems(
        cls,
        prop: int | str,
        factor: Scalar,
        registry: Optional[PropertyRegistry] = None,
    ) -> "Numeric":
        """Множитель размера шрифта: 1.5em → 1.5"""
        return cls(_resolve_property(prop, registry), factor, BaseUnit.EMS, 0, EM_SIGN)

    # =========================================================================
    # ПОЛЯ
    # =========================================================================

    @property
    def property_id(self) -> int:
        return self._property_id

    @property
    def value(self) -> float:
        return self._value

    @property
    def power(self) -> int:
        return self._power

    @property
    def base_unit(self) -> BaseUnit:
        return self._base_unit

    @property
    def original_base_unit(self) -> BaseUnit:
        return self._original_base_unit

    @property
    def original_unit(self) -> OriginalUnit:
        return self._original_unit

    # =========================================================================
    # КЛАССИФИКАЦИЯ
    # =========================================================================

    def is_numeric(self) -> bool:
        """NUMBER, EMS или PERCENTAGE (степень гарантированно 0)"""
        return bu.is_numeric(self._base_unit)

    def is_number(self) -> bool:
        return bu.is_number(self._base_unit)

    def is_ems(self) -> bool:
        return bu.is_ems(self._base_unit)

    def is_percentage(self) -> bool:
        return bu.is_percentage(self._base_unit)

    def is_length(self) -> bool:
        return bu.is_length(self._base_unit, self._power)

    def is_distance(self) -> bool:
        """Абсолютная или относительная длина, без учёта степени"""
        return bu.is_distance(self._base_unit)

    def is_time(self) -> bool:
        return bu.is_time(self._base_unit, self._power)

    def is_frequency(self) -> bool:
        return bu.is_frequency(self._base_unit, self._power)

    def is_angle(self) -> bool:
        return bu.is_angle(self._base_unit, self._power)

    # =========================================================================
    # СКАЛЯРНЫЕ АКСЕССОРЫ
    # =========================================================================

    def as_double(self) -> float:
        """
        Значение как есть. Единица не проверяется: при необходимости
        вызовите is_number() и т.п. заранее.
        """
        return self._value

    def as_long(self) -> int:
        """Значение, усечённое к 64-битному целому"""
        return to_fixed_width_int(self._value, bits=64)

    def as_int(self) -> int:
        """Значение, усечённое к 32-битному целому"""
        return to_fixed_width_int(self._value, bits=32)

    def __float__(self) -> float:
        return self.as_double()

    def __int__(self) -> int:
        return self.as_long()

    # =========================================================================
    # АДДИТИВНЫЕ ОПЕРАЦИИ
    # =========================================================================

    def _commit(self, value: float, base_unit: BaseUnit, power: int) -> "Numeric":
        """Запись результата; углы канонизируются"""
        if base_unit is BaseUnit.DEGREES:
            value = normalize_angle(value)
        self._value = value
        self._base_unit = base_unit
        self._power = power
        return self

    def _check_same_dimension(self, op: "Numeric", verb: str) -> None:
        if not isinstance(op, Numeric):
            raise TypeError(f"Can't {verb} {type(op).__name__} and Numeric")
        if self._power != op._power:
            raise IncompatibleOperandsError(
                f"Can't {verb} Numerics of different unit powers: "
                f"{self._power} {op._power}",
                MismatchReason.POWER,
            )
        if self._base_unit is not op._base_unit:
            raise IncompatibleOperandsError(
                f"Can't {verb} Numerics of different baseunits: "
                f"{self.base_unit_string()} {op.base_unit_string()}",
                MismatchReason.BASE_UNIT,
            )

    def add(self, op: "Numeric") -> "Numeric":
        """
        Прибавить op. Степени и base units должны совпадать.

        Raises:
            IncompatibleOperandsError: Разные степени или base units
        """
        self._check_same_dimension(op, "add")
        return self._commit(self._value + op._value, self._base_unit, self._power)

    def subtract(self, op: "Numeric") -> "Numeric":
        """
        Вычесть op. Степени и base units должны совпадать.

        Raises:
            IncompatibleOperandsError: Разные степени или base units
        """
        self._check_same_dimension(op, "subtract")
        return self._commit(self._value - op._value, self._base_unit, self._power)

    def mod(self, op: "Numeric | Scalar") -> "Numeric":
        """
        Остаток от деления с усечением (знак делимого).

        С Numeric: степени и base units совпадают, относительные длины
        запрещены. Со скаляром: только для NUMBER (степень 0).

        Raises:
            IncompatibleOperandsError: Операнды несовместимы
        """
        if isinstance(op, Numeric):
            self._check_same_dimension(op, "mod")
            if self._base_unit in RELATIVE_LENGTH:
                raise IncompatibleOperandsError(
                    f"Can't mod relative lengths: "
                    f"{self.base_unit_string()} {op.base_unit_string()}",
                    MismatchReason.RELATIVE_LENGTH,
                )
            divisor = op._value
        else:
            divisor = _scalar(op)
            if self._power != 0:
                raise IncompatibleOperandsError(
                    f"Can't mod Numerics of different unit powers: {self._power} 0",
                    MismatchReason.POWER,
                )
            if self._base_unit is not BaseUnit.NUMBER:
                reason = (
                    MismatchReason.RELATIVE_LENGTH
                    if self._base_unit in RELATIVE_LENGTH
                    else MismatchReason.NOT_NUMBER
                )
                raise IncompatibleOperandsError(
                    f"Can't mod Numerics of different baseunits: "
                    f"{self.base_unit_string()} literal double",
                    reason,
                )

        return self._commit(
            truncating_mod(self._value, divisor), self._base_unit, self._power
        )

    # =========================================================================
    # МУЛЬТИПЛИКАТИВНЫЕ ОПЕРАЦИИ
    # =========================================================================

    def _multop(
        self,
        op: "Numeric | Scalar",
        combine_value: Callable[[float, float], float],
        combine_power: Callable[[int, int], int],
        verb: str,
    ) -> "Numeric":
        if not isinstance(op, Numeric):
            return self._commit(
                combine_value(self._value, _scalar(op)), self._base_unit, self._power
            )

        base_unit, power = self._base_unit, self._power

        if base_unit is BaseUnit.NUMBER:
            # NUMBER: результат принимает тип операнда
            base_unit, power = op._base_unit, op._power
        elif op._base_unit is BaseUnit.NUMBER:
            pass
        elif base_unit in UNIT:
            if op._base_unit in UNIT:
                if base_unit is not op._base_unit:
                    raise IncompatibleUnitsError(
                        f"Can't {verb} Numerics of different baseunits: "
                        f"{self.base_unit_string()} {op.base_unit_string()}"
                    )
                power = combine_power(power, op._power)
            elif base_unit is not BaseUnit.MILLIPOINTS:
                # op: относительная длина
                raise IncompatibleUnitsError(
                    f"Can't {verb} a unit other than a length by a relative length: "
                    f"{self.base_unit_string()} {op.base_unit_string()}"
                )
        elif op._base_unit is BaseUnit.MILLIPOINTS:
            # относительная длина × длина = длина
            base_unit, power = op._base_unit, op._power
        else:
            raise IncompatibleUnitsError(
                f"Can't {verb} a relative length by anything but a length: "
                f"{self.base_unit_string()} {op.base_unit_string()}"
            )

        if base_unit in NUMERIC and power != 0:
            raise InvalidDimensionError("Number, Ems or Percentage with non-zero power")
        # Единица, сократившаяся до степени 0, становится числом
        if power == 0 and base_unit not in NUMERIC:
            base_unit = BaseUnit.NUMBER

        return self._commit(combine_value(self._value, op._value), base_unit, power)

    def multiply(self, op: "Numeric | Scalar") -> "Numeric":
        """
        Умножить на op (Numeric или скаляр).

        Raises:
            IncompatibleUnitsError: Произведение единиц не определено
        """
        return self._multop(op, operator.mul, operator.add, "multiply")

    def divide(self, op: "Numeric | Scalar") -> "Numeric":
        """
        Разделить на op (Numeric или скаляр). Деление на ноль даёт ±inf/nan.

        Raises:
            IncompatibleUnitsError: Частное единиц не определено
        """
        return self._multop(op, ieee_divide, operator.sub, "divide")

    def negate(self) -> "Numeric":
        return self._commit(-self._value, self._base_unit, self._power)

    def __iadd__(self, other: "Numeric") -> "Numeric":
        if not isinstance(other, Numeric):
            return NotImplemented
        return self.add(other)

    def __isub__(self, other: "Numeric") -> "Numeric":
        if not isinstance(other, Numeric):
            return NotImplemented
        return self.subtract(other)

    def __imul__(self, other: "Numeric | Scalar") -> "Numeric":
        return self.multiply(other)

    def __itruediv__(self, other: "Numeric | Scalar") -> "Numeric":
        return self.divide(other)

    def __imod__(self, other: "Numeric | Scalar") -> "Numeric":
        return self.mod(other)

    def __neg__(self) -> "Numeric":
        # Унарный минус не трогает операнд
        return self.copy().negate()

    # =========================================================================
    # БИБЛИОТЕКА ФУНКЦИЙ
    # =========================================================================

    def _require_power_zero(self, function: str) -> None:
        if self._power != 0:
            raise DimensionError(
                f"{function}() requires absolute numeric of unit power zero, "
                f"got power {self._power}"
            )

    def abs(self) -> float:
        self._require_power_zero("abs")
        return math.fabs(self._value)

    def ceiling(self) -> float:
        self._require_power_zero("ceiling")
        if not math.isfinite(self._value):
            return self._value
        return float(math.ceil(self._value))

    def floor(self) -> float:
        self._require_power_zero("floor")
        if not math.isfinite(self._value):
            return self._value
        return float(math.floor(self._value))

    def round(self) -> int:
        """
        Округление half-up до 64-битного целого: 2.5 → 3, -2.5 → -2.
        NaN → 0, ±inf насыщаются.
        """
        self._require_power_zero("round")
        if not math.isfinite(self._value):
            return to_fixed_width_int(self._value)
        return to_fixed_width_int(round_half_up(self._value))

    def _require_numeric_operand(self, op: object, function: str) -> None:
        if not isinstance(op, Numeric):
            raise TypeError(f"{function}() requires a Numeric, got {type(op).__name__}")

    def max(self, op: "Numeric") -> float:
        """
        Большее из значений; nan, если хотя бы одно из них nan.

        Raises:
            DimensionError: Степень хотя бы одного операнда не 0
        """
        self._require_numeric_operand(op, "max")
        if self._power == op._power and self._power == 0:
            return ieee_max(self._value, op._value)
        raise DimensionError("max() must compare numerics of unit power 0")

    def min(self, op: "Numeric") -> float:
        """
        Меньшее из значений; nan, если хотя бы одно из них nan.

        Raises:
            DimensionError: Степень хотя бы одного операнда не 0
        """
        self._require_numeric_operand(op, "min")
        if self._power == op._power and self._power == 0:
            return ieee_min(self._value, op._value)
        raise DimensionError("min() must compare numerics of unit power 0")

    # =========================================================================
    # ВАЛИДАЦИЯ
    # =========================================================================

    def validate(self, registry: Optional[PropertyRegistry] = None) -> None:
        """
        Проверка итогового значения против допустимых категорий свойства.

        Args:
            registry: Реестр свойств (default: реестр по умолчанию)

        Raises:
            PropertyValidationError: Степень или категория недопустимы,
                либо значение является неразрешённым множителем ems
            UnrecognizedUnitError: Хранимый base unit вне перечисления
            UnknownPropertyError: Свойство не зарегистрировано
        """
        base_unit = self._base_unit
        if base_unit is BaseUnit.EMS:
            raise PropertyValidationError(
                "Attempt to validate unresolved Ems factor; "
                "it must be multiplied by a length first"
            )
        if base_unit not in _VALIDATION_RULES:
            raise UnrecognizedUnitError(f"Unrecognized baseunit type: {base_unit!r}")

        category, required_power, label = _VALIDATION_RULES[base_unit]
        if self._power != required_power:
            raise PropertyValidationError(f"{label} with unit power {self._power}")

        if registry is None:
            registry = get_default_registry()
        if category not in registry.legal_categories(self._property_id):
            raise PropertyValidationError(
                f"{category.value} is not a legal value for property "
                f"'{registry.get(self._property_id).name}'"
            )

    # =========================================================================
    # ДИАГНОСТИКА
    # =========================================================================

    @staticmethod
    def unit_name(base_unit: object) -> str:
        """Отображаемое имя base unit ('millipoints', 'Hertz', ...)"""
        return bu.unit_name(base_unit)

    def base_unit_string(self) -> str:
        return bu.unit_name(self._base_unit)

    def original_base_unit_string(self) -> str:
        return bu.unit_name(self._original_base_unit)

    def original_unit_name(self) -> str:
        """Имя литеральной единицы, в которой значение было задано"""
        original = self._original_base_unit
        if original is BaseUnit.NUMBER:
            return ""
        if original is BaseUnit.PERCENTAGE:
            return PERCENT_SIGN
        if original is BaseUnit.EMS:
            return EM_SIGN
        table = _UNIT_NAME_TABLES.get(original)
        if table is None:
            return f"Unrecognized original baseunit type: {original!r}"
        return table(self._original_unit)

    def __str__(self) -> str:
        power = f"^{self._power}" if self._power != 0 else ""
        return f"{self._value}{self.base_unit_string()}{power}"

    def __repr__(self) -> str:
        return (
            f"Numeric(property_id={self._property_id!r}, value={self._value!r}, "
            f"base_unit={self.base_unit_string()}, power={self._power}, "
            f"original_unit={self.original_unit_name()!r})"
        )

    # =========================================================================
    # КОПИРОВАНИЕ
    # =========================================================================

    def copy(self) -> "Numeric":
        """Плоская копия всех полей (все поля immutable)"""
        duplicate = self.__class__.__new__(self.__class__)
        duplicate.__dict__.update(self.__dict__)
        return duplicate

    def __copy__(self) -> "Numeric":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Numeric":
        return self.copy()
