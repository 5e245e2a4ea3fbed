"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (package data, src/core/contracts/schema/):
- geo_fence.json (GeoFence: center + radius_km)
- band.json (Band: upper + lower)
- ipv4_pool.json (Ipv4Pool: network + prefix_len)

Схемы проверяют структуру и диапазоны; межполевые инварианты
(lower <= upper, каноничность адреса сети) проверяют domain модели.
"""

import functools
import json
from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Iterator, Union

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.infrastructure.logging import get_logger

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

logger = get_logger(__name__)

SchemaDir = Union[Path, "Traversable"]


# =============================================================================
# SCHEMA LOADER
# =============================================================================


def default_schema_dir() -> SchemaDir:
    """Директория схем внутри пакета src.core.contracts."""
    return resources.files(__package__).joinpath("schema")


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию читает схемы из package data (src/core/contracts/schema/),
    поэтому работает и в editable, и в обычной установке.
    """

    def __init__(self, schema_dir: SchemaDir | None = None):
        self._schema_dir = schema_dir or default_schema_dir()
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> SchemaDir:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'geo_fence')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir.joinpath(f"{schema_name}.json")
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))

        # Meta-validation самой схемы
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


@functools.lru_cache(maxsize=None)
def get_schema_loader() -> SchemaLoader:
    """Общий загрузчик схем; создаётся при первом обращении."""
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        """
        Инициализация валидатора.

        Args:
            schema_name: Имя схемы для валидации
            loader: Загрузчик схем (default: get_schema_loader())
        """
        self.schema_name = schema_name
        self.schema = (loader or get_schema_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class GeoFenceValidator(ContractValidator):
    """Валидатор для geo_fence контракта."""

    def __init__(self):
        super().__init__("geo_fence")


class BandValidator(ContractValidator):
    """Валидатор для band контракта."""

    def __init__(self):
        super().__init__("band")


class Ipv4PoolValidator(ContractValidator):
    """Валидатор для ipv4_pool контракта."""

    def __init__(self):
        super().__init__("ipv4_pool")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_geo_fence(data: Dict[str, Any]) -> None:
    """
    Валидация geo_fence данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    GeoFenceValidator().validate(data)


def validate_band(data: Dict[str, Any]) -> None:
    """
    Валидация band данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    BandValidator().validate(data)


def validate_ipv4_pool(data: Dict[str, Any]) -> None:
    """
    Валидация ipv4_pool данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    Ipv4PoolValidator().validate(data)
