"""
ChartRecord — Базовая модель записей конфигурации графика

Все записи (datasets, шкалы, легенды, аннотации, точки) наследуются от
ChartRecord и получают единое правило пропуска необязательных полей:

- None → ключ опускается
- text-backed значение / DatasetData / FnWithArgs → опускается, если is_empty()
- str → опускается, если пустая
- list / tuple → опускается, если нет элементов

Правило действует только для необязательных полей (с default).
Ключ никогда не эмитится как JSON null: отсутствие значения всегда
означает полное отсутствие ключа. False, 0 и словари не опускаются.
"""

from typing import Any, Dict, Mapping, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializerFunctionWrapHandler,
    model_serializer,
)

from src.core.domain.dataset_data import DatasetData
from src.core.domain.scalars import TextScalar


# =============================================================================
# ПРАВИЛО ПРОПУСКА
# =============================================================================


def is_omitted(value: Any) -> bool:
    """
    Должно ли значение поля быть опущено при сериализации.

    Args:
        value: Python-значение поля записи

    Returns:
        True, если ключ не должен попасть в JSON
    """
    if value is None:
        return True
    is_empty = getattr(value, "is_empty", None)
    if callable(is_empty):
        return bool(is_empty())
    if isinstance(value, (str, list, tuple)):
        return len(value) == 0
    return False


def _order_key(value: Any) -> tuple:
    """
    Ключ порядка значения поля.

    None меньше любого значения. Словари сравниваются по отсортированным
    парам (ключ, значение), списки поэлементно, вложенные записи по своим
    полям. Значения без собственного порядка (произвольный payload)
    сравниваются по каноническому JSON-тексту.
    """
    if value is None:
        return (0,)
    if isinstance(value, ChartRecord):
        return (1, value._ordering_key())
    if isinstance(value, Mapping):
        return (1, tuple(sorted((str(k), _order_key(v)) for k, v in value.items())))
    if isinstance(value, (list, tuple)):
        return (1, tuple(_order_key(v) for v in value))
    if isinstance(value, (TextScalar, DatasetData, str, int, float)):
        return (1, value)
    return (1, DatasetData(value).render())


# =============================================================================
# БАЗОВАЯ МОДЕЛЬ
# =============================================================================


class ChartRecord(BaseModel):
    """
    Базовая запись конфигурации графика.

    Имена полей совпадают с ключами JSON целевого рантайма (camelCase).
    Ключ "type" объявляется как поле type_ с alias "type"; на входе
    принимаются оба имени. Неизвестные ключи на входе игнорируются.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    @model_serializer(mode="wrap")
    def serialize_without_empty(
        self, handler: SerializerFunctionWrapHandler
    ) -> Dict[str, Any]:
        """Сериализация с пропуском пустых полей."""
        data = handler(self)
        for name, field in type(self).model_fields.items():
            # Обязательные поля (payload datasets, type графика) эмитятся всегда
            if field.is_required():
                continue
            if is_omitted(getattr(self, name)):
                data.pop(name, None)
                if field.alias:
                    data.pop(field.alias, None)
        return data

    # -------------------------------------------------------------------------
    # JSON
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """JSON-совместимый dict с ключами рантайма."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        """JSON-текст с ключами рантайма."""
        return self.model_dump_json(by_alias=True, indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        """
        Разбор dict в типизированную запись.

        Raises:
            pydantic.ValidationError: Некорректные скалярные значения
        """
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, text: str):
        """
        Разбор JSON-текста в типизированную запись.

        Raises:
            pydantic.ValidationError: Некорректный JSON или скалярные значения
        """
        return cls.model_validate_json(text)

    # -------------------------------------------------------------------------
    # Детерминированный порядок (по полям в порядке объявления)
    # -------------------------------------------------------------------------

    def _ordering_key(self) -> tuple:
        return tuple(_order_key(getattr(self, name)) for name in type(self).model_fields)
    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._ordering_key() < other._ordering_key()

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._ordering_key() <= other._ordering_key()

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._ordering_key() > other._ordering_key()

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._ordering_key() >= other._ordering_key()
