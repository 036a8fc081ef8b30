"""
Exceptions — Ошибки алгебры единиц и валидации свойств

Все ошибки наследуют NumericError и поднимаются синхронно в точке
обнаружения. Получатель операции при ошибке не изменяется.
"""

from enum import Enum


class MismatchReason(str, Enum):
    """Причина несовместимости операндов аддитивной операции"""

    POWER = "power"
    BASE_UNIT = "base_unit"
    RELATIVE_LENGTH = "relative_length"
    NOT_NUMBER = "not_number"


class NumericError(Exception):
    """Базовая ошибка Numeric (аналог исключения свойства)"""

    pass


class InvalidUnitError(NumericError):
    """Конструктор получил base unit вне перечисления BaseUnit"""

    pass


class InvalidDimensionError(NumericError):
    """NUMERIC base unit (number/percentage/ems) с ненулевой степенью"""

    pass


class IncompatibleOperandsError(NumericError):
    """
    Операнды add/subtract/mod несовместимы.

    Attributes:
        reason: Какое условие нарушено (степень, base unit,
            относительная длина, mod со скаляром на не-NUMBER)
    """

    def __init__(self, message: str, reason: MismatchReason):
        super().__init__(message)
        self.reason = reason


class IncompatibleUnitsError(NumericError):
    """Произведение/частное для данной комбинации единиц не определено"""

    pass


class DimensionError(NumericError):
    """Функция (abs, ceiling, floor, round, max, min) требует степень 0"""

    pass


class PropertyValidationError(NumericError):
    """Итоговое значение не допустимо для свойства-владельца"""

    pass


class UnrecognizedUnitError(NumericError):
    """Хранимый base unit вне перечисления (защитная ветка)"""

    pass


class UnknownPropertyError(NumericError, KeyError):
    """Свойство с таким индексом или именем не зарегистрировано"""

    def __str__(self) -> str:
        # KeyError.__str__ оборачивает сообщение в кавычки
        return str(self.args[0]) if self.args else ""
