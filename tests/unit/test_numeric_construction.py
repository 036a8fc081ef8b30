"""
Тесты для создания Numeric

Проверяет:
1. Ошибки конструктора (base unit, степень)
2. Удобные конструкторы (number, length, percentage, ems, ...)
3. Разрешение имени свойства через реестр
4. Неизменность original_* полей и копирование
"""

import copy

import pytest

from fo_numeric.core.domain import (
    AngleUnit,
    BaseUnit,
    FrequencyUnit,
    InvalidDimensionError,
    InvalidUnitError,
    LengthUnit,
    Numeric,
    PropertyRegistry,
    TimeUnit,
    UnknownPropertyError,
)


@pytest.fixture
def registry() -> PropertyRegistry:
    return PropertyRegistry.from_dict(
        {
            "schema_version": "1",
            "properties": [
                {"index": 0, "name": "font-size", "categories": ["LENGTH", "PERCENTAGE"]},
                {"index": 1, "name": "column-count", "categories": ["NUMBER"]},
            ],
        }
    )


# =============================================================================
# КОНСТРУКТОР
# =============================================================================


class TestConstructor:
    """Тесты для Numeric.__init__"""

    def test_full_constructor(self) -> None:
        n = Numeric(5, 12000, BaseUnit.MILLIPOINTS, 1, LengthUnit.PT)
        assert n.property_id == 5
        assert n.value == 12000.0
        assert isinstance(n.value, float)
        assert n.base_unit is BaseUnit.MILLIPOINTS
        assert n.power == 1
        assert n.original_base_unit is BaseUnit.MILLIPOINTS
        assert n.original_unit is LengthUnit.PT

    def test_base_unit_from_string(self) -> None:
        n = Numeric(5, 1.0, "hertz", 1)
        assert n.base_unit is BaseUnit.HERTZ

    def test_invalid_base_unit(self) -> None:
        with pytest.raises(InvalidUnitError, match="Invalid baseunit: 'furlongs'"):
            Numeric(5, 1.0, "furlongs", 1)

    @pytest.mark.parametrize("base_unit", [BaseUnit.NUMBER, BaseUnit.PERCENTAGE, BaseUnit.EMS])
    def test_numeric_kinds_require_power_zero(self, base_unit: BaseUnit) -> None:
        with pytest.raises(InvalidDimensionError, match="Invalid power for NUMERIC: 1"):
            Numeric(5, 1.0, base_unit, 1)

    def test_non_integer_power_rejected(self) -> None:
        with pytest.raises(InvalidDimensionError):
            Numeric(5, 1.0, BaseUnit.MILLIPOINTS, 1.0)
        with pytest.raises(InvalidDimensionError):
            Numeric(5, 1.0, BaseUnit.MILLIPOINTS, True)

    def test_unit_with_power_zero_allowed(self) -> None:
        """Степень 0 у физической единицы не запрещена конструктором"""
        n = Numeric(5, 1.0, BaseUnit.MILLIPOINTS, 0)
        assert n.power == 0

    def test_angle_normalized_on_construction(self) -> None:
        assert Numeric(0, 370.0, BaseUnit.DEGREES, 1).value == pytest.approx(10.0)
        assert Numeric(0, -90.0, BaseUnit.DEGREES, 1).value == pytest.approx(270.0)


# =============================================================================
# УДОБНЫЕ КОНСТРУКТОРЫ
# =============================================================================


class TestConvenienceConstructors:
    """Тесты для number / length / frequency / time / angle / percentage / ems"""

    def test_number(self) -> None:
        n = Numeric.number(1, 3)
        assert n.value == 3.0
        assert n.base_unit is BaseUnit.NUMBER
        assert n.power == 0
        assert n.original_unit is None

    def test_literal_round_trip(self) -> None:
        """Литерал без операций читается обратно без изменений"""
        assert Numeric.number(1, 0.1).as_double() == 0.1
        assert Numeric.number(1, 42).as_long() == 42
        assert Numeric.number(1, -7).as_int() == -7

    def test_length(self) -> None:
        n = Numeric.length(5, 1, LengthUnit.IN)
        assert n.value == 72000.0
        assert n.base_unit is BaseUnit.MILLIPOINTS
        assert n.power == 1
        assert n.original_unit is LengthUnit.IN

    def test_length_defaults_to_points(self) -> None:
        assert Numeric.length(5, 12).value == 12000.0

    def test_frequency(self) -> None:
        n = Numeric.frequency(20, 2, FrequencyUnit.KHZ)
        assert n.value == 2000.0
        assert n.is_frequency()

    def test_time(self) -> None:
        n = Numeric.time(18, 1.5, TimeUnit.S)
        assert n.value == 1500.0
        assert n.is_time()

    def test_angle(self) -> None:
        n = Numeric.angle(0, 100, AngleUnit.GRAD)
        assert n.value == pytest.approx(90.0)
        assert n.is_angle()

    def test_angle_wraps(self) -> None:
        assert Numeric.angle(0, -45).value == pytest.approx(315.0)

    def test_percentage_stored_as_factor(self) -> None:
        n = Numeric.percentage(5, 50)
        assert n.value == 0.5
        assert n.base_unit is BaseUnit.PERCENTAGE
        assert n.power == 0
        assert n.original_unit == "%"
        assert n.is_percentage()
        assert n.is_numeric()

    def test_ems(self) -> None:
        n = Numeric.ems(11, 1.5)
        assert n.value == 1.5
        assert n.is_ems()
        assert n.original_unit == "em"


class TestPropertyNameResolution:
    """Имя свойства разрешается через реестр"""

    def test_number_by_name(self, registry: PropertyRegistry) -> None:
        assert Numeric.number("column-count", 3, registry=registry).property_id == 1

    def test_length_by_name(self, registry: PropertyRegistry) -> None:
        assert Numeric.length("font-size", 12, registry=registry).property_id == 0

    def test_from_property_name(self, registry: PropertyRegistry) -> None:
        n = Numeric.from_property_name(
            "font-size", 12000, BaseUnit.MILLIPOINTS, 1, LengthUnit.PT, registry
        )
        assert n.property_id == 0
        assert n.original_unit is LengthUnit.PT

    def test_default_registry(self) -> None:
        assert Numeric.length("font-size", 12).property_id == 5

    def test_unknown_name(self, registry: PropertyRegistry) -> None:
        with pytest.raises(UnknownPropertyError, match="Unknown property name: 'kerning'"):
            Numeric.number("kerning", 1, registry=registry)

    def test_property_must_be_index_or_name(self) -> None:
        with pytest.raises(TypeError):
            Numeric.number(True, 1)
        with pytest.raises(TypeError):
            Numeric.number(1.5, 1)


# =============================================================================
# НЕИЗМЕННОСТЬ И КОПИРОВАНИЕ
# =============================================================================


class TestOriginalFieldsAndCopy:
    """original_* поля и копирование"""

    def test_fields_read_only(self) -> None:
        n = Numeric.length(5, 12)
        with pytest.raises(AttributeError):
            n.value = 1.0
        with pytest.raises(AttributeError):
            n.original_unit = LengthUnit.CM

    def test_original_fields_survive_operations(self) -> None:
        n = Numeric.percentage(5, 50)
        n.multiply(Numeric.length(5, 10))
        assert n.base_unit is BaseUnit.MILLIPOINTS
        assert n.power == 1
        assert n.original_base_unit is BaseUnit.PERCENTAGE
        assert n.original_unit == "%"

    def test_copy_is_independent(self) -> None:
        n = Numeric.length(5, 12, LengthUnit.CM)
        duplicate = n.copy()
        duplicate.multiply(2)
        assert n.value == pytest.approx(12 * 72000.0 / 2.54)
        assert duplicate.value == pytest.approx(2 * n.value)
        assert duplicate.original_unit is LengthUnit.CM

    def test_copy_module(self) -> None:
        n = Numeric.angle(0, 45)
        for duplicate in (copy.copy(n), copy.deepcopy(n)):
            assert duplicate is not n
            assert duplicate.value == n.value
            assert duplicate.base_unit is n.base_unit
            assert duplicate.power == n.power
            assert duplicate.original_unit is n.original_unit
