"""
Domain models and value objects.

Contains the Numeric value type, base unit classification, unit tables
and the property registry.
"""

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
from fo_numeric.core.domain.exceptions import (
    DimensionError,
    IncompatibleOperandsError,
    IncompatibleUnitsError,
    InvalidDimensionError,
    InvalidUnitError,
    MismatchReason,
    NumericError,
    PropertyValidationError,
    UnknownPropertyError,
    UnrecognizedUnitError,
)
from fo_numeric.core.domain.numeric import Numeric
from fo_numeric.core.domain.properties import (
    PropertyCategory,
    PropertyDefinition,
    PropertyRegistry,
    RegistryConfig,
    get_default_registry,
    reset_default_registry,
)
from fo_numeric.core.domain.units import (
    AngleUnit,
    FrequencyUnit,
    LengthUnit,
    TimeUnit,
    angle_unit_name,
    frequency_unit_name,
    from_canonical,
    length_unit_name,
    percent_to_factor,
    time_unit_name,
    to_canonical,
)

__all__ = [
    # Base units
    "BaseUnit",
    "NUMERIC",
    "RELATIVE_LENGTH",
    "UNIT",
    "NOT_LENGTH",
    "ABSOLUTE_UNIT",
    "NOT_NUMBER",
    "DISTANCE",
    "coerce_base_unit",
    "unit_name",
    "is_numeric",
    "is_number",
    "is_ems",
    "is_percentage",
    "is_relative_length",
    "is_unit",
    "is_length",
    "is_time",
    "is_frequency",
    "is_angle",
    "is_distance",
    # Exceptions
    "NumericError",
    "MismatchReason",
    "InvalidUnitError",
    "InvalidDimensionError",
    "IncompatibleOperandsError",
    "IncompatibleUnitsError",
    "DimensionError",
    "PropertyValidationError",
    "UnrecognizedUnitError",
    "UnknownPropertyError",
    # Numeric
    "Numeric",
    # Properties
    "PropertyCategory",
    "PropertyDefinition",
    "PropertyRegistry",
    "RegistryConfig",
    "get_default_registry",
    "reset_default_registry",
    # Units
    "LengthUnit",
    "FrequencyUnit",
    "TimeUnit",
    "AngleUnit",
    "length_unit_name",
    "frequency_unit_name",
    "time_unit_name",
    "angle_unit_name",
    "to_canonical",
    "from_canonical",
    "percent_to_factor",
]
