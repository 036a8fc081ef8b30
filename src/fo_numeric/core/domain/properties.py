"""
Properties — Реестр свойств и допустимых категорий значений

Каждое свойство форматирования (font-size, pitch, azimuth, ...) имеет
индекс и набор допустимых категорий значения (NUMBER, LENGTH, ...).
Numeric хранит индекс свойства-владельца и сверяется с реестром в validate().

Реестр загружается из JSON документа, который сначала проверяется
JSON Schema контрактом (core/contracts/schema/property_registry.json),
затем превращается в immutable Pydantic модели.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Optional

from pydantic import BaseModel, Field, field_validator

from fo_numeric.core.contracts import ContractValidator

from .exceptions import UnknownPropertyError

_LOGGER = logging.getLogger("fo_numeric.registry")

# Переменная окружения для подмены таблицы свойств
REGISTRY_PATH_ENV = "FO_NUMERIC_REGISTRY_PATH"


# =============================================================================
# ENUMS
# =============================================================================


class PropertyCategory(str, Enum):
    """Категория значения, допустимая для свойства"""

    NUMBER = "NUMBER"
    PERCENTAGE = "PERCENTAGE"
    LENGTH = "LENGTH"
    FREQUENCY = "FREQUENCY"
    TIME = "TIME"
    ANGLE = "ANGLE"


# =============================================================================
# CONFIG
# =============================================================================


def _default_registry_path() -> Path:
    override = os.getenv(REGISTRY_PATH_ENV)
    if override:
        return Path(override)
    return Path(__file__).resolve().parents[2] / "data" / "properties.json"


@dataclass(frozen=True)
class RegistryConfig:
    """Конфигурация загрузки реестра свойств.

    - registry_path: JSON документ реестра (env FO_NUMERIC_REGISTRY_PATH
      или таблица, поставляемая с пакетом)
    - schema_name: имя JSON Schema контракта для проверки документа
    """
    registry_path: Path = field(default_factory=_default_registry_path)
    schema_name: str = "property_registry"


# =============================================================================
# PROPERTY DEFINITION MODEL
# =============================================================================


class PropertyDefinition(BaseModel):
    """
    Определение свойства.

    Immutable модель (frozen=True): реестр раздаёт одни и те же экземпляры.
    """

    index: int = Field(..., ge=0, description="Индекс свойства (property id)")
    name: str = Field(
        ...,
        min_length=1,
        pattern=r"^[a-z][a-z0-9]*(-[a-z0-9]+)*$",
        description="Имя свойства (например, 'font-size')",
    )
    categories: frozenset[PropertyCategory] = Field(
        ..., description="Допустимые категории значения"
    )
    description: Optional[str] = Field(default=None, description="Краткое описание")

    model_config = {"frozen": True}

    @field_validator("categories")
    @classmethod
    def validate_categories_not_empty(
        cls, v: frozenset[PropertyCategory]
    ) -> frozenset[PropertyCategory]:
        """Свойство без допустимых категорий не может принять ни одного значения"""
        if not v:
            raise ValueError("categories must not be empty")
        return v

    def allows(self, category: PropertyCategory) -> bool:
        return category in self.categories


# =============================================================================
# REGISTRY
# =============================================================================


class PropertyRegistry:
    """
    Реестр свойств: индекс ↔ имя ↔ допустимые категории.

    Индексы и имена уникальны, повторная регистрация запрещена.
    """

    def __init__(self, definitions: Iterable[PropertyDefinition] = ()):
        self._by_index: Dict[int, PropertyDefinition] = {}
        self._by_name: Dict[str, PropertyDefinition] = {}
        for definition in definitions:
            self._add(definition)

    # -------------------------------------------------------------------------
    # Загрузка
    # -------------------------------------------------------------------------

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        validator: Optional[ContractValidator] = None,
    ) -> "PropertyRegistry":
        """
        Построение реестра из документа property_registry.

        Args:
            data: Документ (dict), как в data/properties.json
            validator: Валидатор контракта (default: property_registry)

        Raises:
            jsonschema.ValidationError: Документ не соответствует схеме
            ValueError: Повторяющийся индекс или имя
        """
        (validator or ContractValidator("property_registry")).validate(data)
        definitions = [PropertyDefinition(**item) for item in data["properties"]]
        return cls(definitions)

    @classmethod
    def from_json(
        cls, path: Path | str, schema_name: str = "property_registry"
    ) -> "PropertyRegistry":
        """
        Загрузка реестра из JSON файла.

        Raises:
            FileNotFoundError: Файл не найден
            json.JSONDecodeError: Файл не является валидным JSON
            jsonschema.ValidationError: Документ не соответствует схеме
        """
        path = Path(path)
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        registry = cls.from_dict(data, ContractValidator(schema_name))
        _LOGGER.debug("Loaded %d property definitions from %s", len(registry), path)
        return registry

    @classmethod
    def from_config(cls, config: Optional[RegistryConfig] = None) -> "PropertyRegistry":
        config = config or RegistryConfig()
        return cls.from_json(config.registry_path, config.schema_name)

    # -------------------------------------------------------------------------
    # Регистрация
    # -------------------------------------------------------------------------

    def _add(self, definition: PropertyDefinition) -> None:
        if definition.index in self._by_index:
            raise ValueError(
                f"Duplicate property index {definition.index}: "
                f"'{self._by_index[definition.index].name}' and '{definition.name}'"
            )
        if definition.name in self._by_name:
            raise ValueError(f"Duplicate property name: '{definition.name}'")

        self._by_index[definition.index] = definition
        self._by_name[definition.name] = definition

    def register(self, definition: PropertyDefinition) -> None:
        """
        Добавление определения свойства во время работы.

        Raises:
            ValueError: Индекс или имя уже заняты
        """
        self._add(definition)
        _LOGGER.info(
            "Registered property '%s' (index=%d, categories=%s)",
            definition.name,
            definition.index,
            sorted(c.value for c in definition.categories),
        )

    # -------------------------------------------------------------------------
    # Запросы
    # -------------------------------------------------------------------------

    def get(self, property_id: int) -> PropertyDefinition:
        """
        Raises:
            UnknownPropertyError: Индекс не зарегистрирован
        """
        try:
            return self._by_index[property_id]
        except KeyError:
            raise UnknownPropertyError(f"Unknown property index: {property_id}") from None

    def by_name(self, name: str) -> PropertyDefinition:
        """
        Raises:
            UnknownPropertyError: Имя не зарегистрировано
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownPropertyError(f"Unknown property name: '{name}'") from None

    def property_index(self, name: str) -> int:
        """Индекс свойства по имени"""
        return self.by_name(name).index

    def legal_categories(self, property_id: int) -> frozenset[PropertyCategory]:
        """Допустимые категории значения свойства"""
        return self.get(property_id).categories

    def is_legal(self, property_id: int, category: PropertyCategory) -> bool:
        return self.get(property_id).allows(category)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, str):
            return key in self._by_name
        return key in self._by_index

    def __len__(self) -> int:
        return len(self._by_index)

    def __iter__(self) -> Iterator[PropertyDefinition]:
        return iter(sorted(self._by_index.values(), key=lambda d: d.index))


# =============================================================================
# DEFAULT REGISTRY
# =============================================================================

# Реестр по умолчанию загружается при первом обращении
_DEFAULT_REGISTRY: Optional[PropertyRegistry] = None


def get_default_registry() -> PropertyRegistry:
    """Реестр по умолчанию (таблица свойств из RegistryConfig())"""
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = PropertyRegistry.from_config()
    return _DEFAULT_REGISTRY


def reset_default_registry() -> None:
    """Сброс кэша: следующий get_default_registry() перечитает таблицу"""
    global _DEFAULT_REGISTRY
    _DEFAULT_REGISTRY = None
