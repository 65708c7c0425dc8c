"""
JSON Schema Contract Validators

Модуль для валидации JSON, который модель отдаёт рантайму графиков,
согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- chart.json (полный объект {type, data, options}; null запрещён в options)
- chart_scale.json (scales.<axisId>)
- xy_point.json (точка {x, y})
- min_max_point.json (диапазон [min, max])
- common.json (общие определения: numberOrString, record, nonNull)

Схемы ссылаются на common.json через $ref. Ссылки разрешаются через
referencing.Registry, в котором зарегистрированы все схемы каталога
под своими $id.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from referencing import Registry, Resource
from referencing.jsonschema import DRAFT202012

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}
        self._registry: Optional[Registry] = None

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'chart')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema

    @property
    def registry(self) -> Registry:
        """
        Registry всех схем каталога (ключ: $id, иначе имя файла).

        Собирается один раз при первом обращении. Каждая схема проходит
        meta-validation через load_schema.
        """
        if self._registry is None:
            resources = []
            for path in sorted(self._schema_dir.glob("*.json")):
                schema = self.load_schema(path.stem)
                resource = Resource.from_contents(schema, default_specification=DRAFT202012)
                resources.append((schema.get("$id", path.name), resource))
            self._registry = Registry().with_resources(resources)
        return self._registry


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор данных против одного JSON Schema контракта.

    Подклассы задают только schema_name.
    """

    schema_name: str = ""

    def __init__(
        self, schema_name: Optional[str] = None, loader: Optional[SchemaLoader] = None
    ):
        """
        Args:
            schema_name: Имя схемы (по умолчанию атрибут класса)
            loader: Загрузчик схем (по умолчанию глобальный)
        """
        if schema_name is not None:
            self.schema_name = schema_name
        if not self.schema_name:
            raise ValueError("schema_name is required")

        loader = loader or _SCHEMA_LOADER
        self.schema = loader.load_schema(self.schema_name)
        self.validator = Draft202012Validator(self.schema, registry=loader.registry)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        try:
            self.validator.validate(data)
        except ValidationError as e:
            logger.debug("Contract %s violated: %s", self.schema_name, e.message)
            raise

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class ChartValidator(ContractValidator):
    """Полный объект графика {type, data, options}."""

    schema_name = "chart"


class ChartScaleValidator(ContractValidator):
    """Конфигурация оси (scales.<axisId>)."""

    schema_name = "chart_scale"


class XYPointValidator(ContractValidator):
    """Точка {x, y}."""

    schema_name = "xy_point"


class MinMaxPointValidator(ContractValidator):
    """Диапазон [min, max]."""

    schema_name = "min_max_point"


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


@lru_cache(maxsize=None)
def get_validator(schema_name: str) -> ContractValidator:
    """Валидатор контракта на глобальном загрузчике (создаётся один раз)."""
    return ContractValidator(schema_name)


def validate_contract(schema_name: str, data: Any) -> None:
    """
    Валидация данных против контракта по имени схемы.

    Raises:
        FileNotFoundError: Неизвестная схема
        ValidationError: Если данные не соответствуют схеме
    """
    get_validator(schema_name).validate(data)


def validate_chart(data: Dict[str, Any]) -> None:
    validate_contract(ChartValidator.schema_name, data)


def validate_chart_scale(data: Dict[str, Any]) -> None:
    validate_contract(ChartScaleValidator.schema_name, data)


def validate_xy_point(data: Dict[str, Any]) -> None:
    validate_contract(XYPointValidator.schema_name, data)


def validate_min_max_point(data: Any) -> None:
    validate_contract(MinMaxPointValidator.schema_name, data)
