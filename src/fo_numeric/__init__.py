"""
fo_numeric — numeric/unit value engine for formatting properties.
"""

from fo_numeric.core.domain import (
    AngleUnit,
    BaseUnit,
    DimensionError,
    FrequencyUnit,
    IncompatibleOperandsError,
    IncompatibleUnitsError,
    InvalidDimensionError,
    InvalidUnitError,
    LengthUnit,
    MismatchReason,
    Numeric,
    NumericError,
    PropertyCategory,
    PropertyDefinition,
    PropertyRegistry,
    PropertyValidationError,
    RegistryConfig,
    TimeUnit,
    UnknownPropertyError,
    UnrecognizedUnitError,
    get_default_registry,
)

__version__ = "0.1.0"

__all__ = [
    "Numeric",
    "BaseUnit",
    "LengthUnit",
    "FrequencyUnit",
    "TimeUnit",
    "AngleUnit",
    "PropertyCategory",
    "PropertyDefinition",
    "PropertyRegistry",
    "RegistryConfig",
    "get_default_registry",
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
]
