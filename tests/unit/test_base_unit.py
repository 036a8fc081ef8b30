"""
Тесты для классификации base units

Проверяет:
1. Состав групп NUMERIC / RELATIVE_LENGTH / UNIT / NOT_LENGTH
2. Производные группы ABSOLUTE_UNIT / NOT_NUMBER / DISTANCE
3. Предикаты с учётом степени (is_length и т.п.)
4. Отображаемые имена base units
"""

import pytest

from fo_numeric.core.domain.base_unit import (
    ABSOLUTE_UNIT,
    DISTANCE,
    NOT_LENGTH,
    NOT_NUMBER,
    NUMERIC,
    RELATIVE_LENGTH,
    UNIT,
    BaseUnit,
    coerce_base_unit,
    is_angle,
    is_distance,
    is_ems,
    is_frequency,
    is_length,
    is_number,
    is_numeric,
    is_percentage,
    is_relative_length,
    is_time,
    is_unit,
    unit_name,
)

# =============================================================================
# ГРУППЫ
# =============================================================================


class TestGroups:
    """Состав групп base units"""

    def test_enumeration_is_closed(self) -> None:
        assert len(BaseUnit) == 7

    def test_numeric_group(self) -> None:
        assert NUMERIC == {BaseUnit.NUMBER, BaseUnit.PERCENTAGE, BaseUnit.EMS}

    def test_relative_length_group(self) -> None:
        assert RELATIVE_LENGTH == {BaseUnit.PERCENTAGE, BaseUnit.EMS}

    def test_unit_group(self) -> None:
        assert UNIT == {
            BaseUnit.MILLIPOINTS,
            BaseUnit.HERTZ,
            BaseUnit.MILLISECS,
            BaseUnit.DEGREES,
        }

    def test_not_length_group(self) -> None:
        assert NOT_LENGTH == {BaseUnit.HERTZ, BaseUnit.MILLISECS, BaseUnit.DEGREES}

    def test_numeric_and_unit_partition_all_kinds(self) -> None:
        """Каждый base unit ровно в одной из групп NUMERIC / UNIT"""
        assert NUMERIC.isdisjoint(UNIT)
        assert NUMERIC | UNIT == set(BaseUnit)

    def test_derived_groups(self) -> None:
        assert ABSOLUTE_UNIT == UNIT | {BaseUnit.NUMBER}
        assert NOT_NUMBER == set(BaseUnit) - {BaseUnit.NUMBER}
        assert DISTANCE == {BaseUnit.MILLIPOINTS, BaseUnit.PERCENTAGE, BaseUnit.EMS}


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


class TestPredicates:
    """Предикаты классификации"""

    @pytest.mark.parametrize("base_unit", list(NUMERIC))
    def test_is_numeric(self, base_unit: BaseUnit) -> None:
        assert is_numeric(base_unit)
        assert not is_unit(base_unit)

    def test_exact_kind_predicates(self) -> None:
        assert is_number(BaseUnit.NUMBER)
        assert not is_number(BaseUnit.PERCENTAGE)
        assert is_ems(BaseUnit.EMS)
        assert not is_ems(BaseUnit.PERCENTAGE)
        assert is_percentage(BaseUnit.PERCENTAGE)
        assert not is_percentage(BaseUnit.EMS)

    def test_relative_length(self) -> None:
        assert is_relative_length(BaseUnit.PERCENTAGE)
        assert is_relative_length(BaseUnit.EMS)
        assert not is_relative_length(BaseUnit.MILLIPOINTS)

    def test_length_requires_power_one(self) -> None:
        assert is_length(BaseUnit.MILLIPOINTS, 1)
        assert not is_length(BaseUnit.MILLIPOINTS, 2)
        assert not is_length(BaseUnit.MILLIPOINTS, 0)
        assert not is_length(BaseUnit.HERTZ, 1)

    def test_time_frequency_angle_require_power_one(self) -> None:
        assert is_time(BaseUnit.MILLISECS, 1)
        assert not is_time(BaseUnit.MILLISECS, -1)
        assert is_frequency(BaseUnit.HERTZ, 1)
        assert not is_frequency(BaseUnit.HERTZ, 2)
        assert is_angle(BaseUnit.DEGREES, 1)
        assert not is_angle(BaseUnit.DEGREES, 0)

    def test_distance_ignores_power(self) -> None:
        assert is_distance(BaseUnit.MILLIPOINTS)
        assert is_distance(BaseUnit.PERCENTAGE)
        assert is_distance(BaseUnit.EMS)
        assert not is_distance(BaseUnit.DEGREES)
        assert not is_distance(BaseUnit.NUMBER)


# =============================================================================
# ИМЕНА И КОНВЕРСИЯ
# =============================================================================


class TestNames:
    """Отображаемые имена и приведение к BaseUnit"""

    @pytest.mark.parametrize(
        "base_unit, expected",
        [
            (BaseUnit.NUMBER, "numeric"),
            (BaseUnit.PERCENTAGE, "percentage"),
            (BaseUnit.EMS, "ems"),
            (BaseUnit.MILLIPOINTS, "millipoints"),
            (BaseUnit.HERTZ, "Hertz"),
            (BaseUnit.MILLISECS, "milliseconds"),
            (BaseUnit.DEGREES, "degrees"),
        ],
    )
    def test_unit_name(self, base_unit: BaseUnit, expected: str) -> None:
        assert unit_name(base_unit) == expected

    def test_unrecognized_name_carries_raw_value(self) -> None:
        assert unit_name(128) == "Unrecognized baseunit type: 128"
        assert unit_name("furlongs") == "Unrecognized baseunit type: 'furlongs'"

    def test_coerce_from_string_value(self) -> None:
        assert coerce_base_unit("millipoints") is BaseUnit.MILLIPOINTS
        assert coerce_base_unit(BaseUnit.EMS) is BaseUnit.EMS

    def test_coerce_rejects_unknown(self) -> None:
        assert coerce_base_unit("parsecs") is None
        assert coerce_base_unit(8) is None
        assert coerce_base_unit(None) is None
