"""
DatasetData — Непрозрачное JSON-значение данных dataset

Данные точек dataset могут иметь разную форму: плоский список чисел,
пары {x, y}, диапазоны [min, max]. DatasetData хранит произвольное
JSON-дерево, захваченное сразу при создании (eager), и определяет:

- Пустоту: только пустой массив пуст; любая другая форма не пуста
- Порядок и равенство: по каноническому тексту (компактный JSON,
  ключи объектов отсортированы)
"""

import copy
import json
from typing import Any, TypeVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler, TypeAdapter
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema, to_jsonable_python

from src.core.domain.scalars import TextScalar

T = TypeVar("T")


def _jsonable_fallback(value: Any) -> Any:
    if isinstance(value, TextScalar):
        return value.to_json_value()
    if isinstance(value, DatasetData):
        return value._value
    raise TypeError(f"Value of type {type(value).__name__} is not JSON serializable")


def to_json_tree(value: Any) -> Any:
    """
    JSON-дерево значения.

    Записи сериализуются своими сериализаторами (с пропуском пустых полей
    и ключами рантайма), text-backed значения — своим JSON-скаляром.
    """
    return to_jsonable_python(value, by_alias=True, fallback=_jsonable_fallback)


class DatasetData:
    """
    Произвольное JSON-дерево данных dataset.

    Дерево копируется при создании: исходные точки и встроенная копия
    дальше живут независимо.
    """

    __slots__ = ("_value", "_rendered")

    def __init__(self, value: Any = None):
        tree = [] if value is None else to_json_tree(value)
        object.__setattr__(self, "_value", tree)
        object.__setattr__(self, "_rendered", None)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("DatasetData is immutable")

    @property
    def value(self) -> Any:
        """
        Копия захваченного JSON-дерева.

        Внутреннее дерево наружу не отдаётся: канонический текст, равенство
        и hash всегда соответствуют содержимому.
        """
        return copy.deepcopy(self._value)

    def is_empty(self) -> bool:
        """
        Пустота: дерево является массивом без элементов.

        Объект, скаляр или непустой массив не пусты.
        """
        return isinstance(self._value, list) and len(self._value) == 0

    def render(self) -> str:
        """Канонический текст дерева (компактный JSON, ключи отсортированы)."""
        if self._rendered is None:
            object.__setattr__(
                self,
                "_rendered",
                json.dumps(
                    self._value, sort_keys=True, separators=(",", ":"), ensure_ascii=False
                ),
            )
        return self._rendered

    def parse_as(self, tp: type[T]) -> T:
        """
        Разбор дерева в типизированную форму.

        Args:
            tp: Целевой тип, например list[XYPoint]

        Raises:
            pydantic.ValidationError: Дерево не соответствует типу
        """
        return TypeAdapter(tp).validate_python(self._value)

    # -------------------------------------------------------------------------
    # Сравнение по каноническому тексту
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DatasetData):
            return NotImplemented
        return self.render() == other.render()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DatasetData):
            return NotImplemented
        return self.render() < other.render()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DatasetData):
            return NotImplemented
        return self.render() <= other.render()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DatasetData):
            return NotImplemented
        return self.render() > other.render()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DatasetData):
            return NotImplemented
        return self.render() >= other.render()

    def __hash__(self) -> int:
        return hash(self.render())

    def __reduce__(self):
        return (type(self), (self._value,))

    def __copy__(self) -> "DatasetData":
        return self

    def __deepcopy__(self, memo: dict) -> "DatasetData":
        return self

    def __repr__(self) -> str:
        return f"DatasetData({self.render()})"

    # -------------------------------------------------------------------------
    # Pydantic
    # -------------------------------------------------------------------------

    @classmethod
    def validate(cls, value: Any) -> "DatasetData":
        if isinstance(value, DatasetData):
            return value
        return cls(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda v: v._value,
                when_used="always",
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {}


def to_dataset_data(value: Any) -> DatasetData:
    """
    Встраивание коллекции точек в данные dataset.

    Args:
        value: Любое сериализуемое значение (list[XYPoint], list[MinMaxPoint], ...)

    Returns:
        DatasetData с копией JSON-дерева
    """
    return DatasetData(value)
