"""
Contract Validation Module

Модуль для валидации JSON контрактов fo_numeric.
"""

from .validators import (
    ContractValidator,
    PropertyRegistryValidator,
    SchemaLoader,
    validate_property_registry,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PropertyRegistryValidator",
    # Functions
    "validate_property_registry",
]
