"""
Scalars — Text-backed значения с динамической JSON-сериализацией

Значения NumberString, BoolString и NumberOrDateString хранят пользовательский
ввод как текст и при сериализации выбирают тип JSON (число, bool или строка)
по тому, как этот текст парсится. Так воспроизводится неоднозначность API
целевого JS-рантайма графиков: свойство может быть задано как 5, "5" или "5px".

Инварианты:
- Текст — единственный источник истины, распарсенная форма не кэшируется
- Равенство, порядок и пустота определены над сырым текстом
  (лексикографический порядок: "10" < "9")
- Значения immutable: конверсии создают новые экземпляры
"""

import logging
from datetime import date, datetime
from typing import Any, ClassVar, Union

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from src.core.math.coercion import (
    text_to_json_bool_or_str,
    text_to_json_scalar,
    value_to_text,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ОШИБКИ
# =============================================================================


class ScalarParseError(ValueError):
    """
    Некорректный вход при десериализации text-backed значения.

    Поднимается внутри pydantic-валидатора, поэтому вызывающий код
    получает pydantic.ValidationError.
    """

    def __init__(self, value: Any, target: str):
        self.value = value
        self.target = target
        super().__init__(
            f"{target} expects a JSON number, string or empty array, "
            f"got {type(value).__name__}: {value!r}"
        )


# =============================================================================
# БАЗОВЫЙ ТИП
# =============================================================================


class TextScalar:
    """
    База text-backed значений.

    Хранит ровно один текстовый буфер. Подклассы определяют только
    правило сериализации (to_json_value) и допустимые входные типы.
    """

    __slots__ = ("_text",)

    # Принимает ли десериализация JSON bool / date
    accepts_bool: ClassVar[bool] = False
    accepts_date: ClassVar[bool] = False
    json_schema_types: ClassVar[tuple[str, ...]] = ("number", "string")

    def __init__(self, value: object = ""):
        object.__setattr__(self, "_text", value_to_text(value))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def text(self) -> str:
        """Сырой текст значения."""
        return self._text

    def is_empty(self) -> bool:
        """
        Пустота значения: только пустой текст.

        "0" и "false" не пусты. Используется исключительно для решения,
        опускать ли необязательное поле при сериализации.
        """
        return self._text == ""

    def __bool__(self) -> bool:
        return not self.is_empty()

    def to_json_value(self) -> Union[int, float, str, bool]:
        """JSON-скаляр, в который сериализуется значение."""
        return text_to_json_scalar(self._text)

    def convert(self, target: type["TextScalar"]) -> "TextScalar":
        """Новое значение другого text-backed типа с тем же текстом."""
        return target(self._text)

    # -------------------------------------------------------------------------
    # Сравнение по сырому тексту
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._text == other._text

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._text < other._text

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._text <= other._text

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._text > other._text

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._text >= other._text

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._text))

    def __reduce__(self):
        return (type(self), (self._text,))

    def __copy__(self) -> "TextScalar":
        return self

    def __deepcopy__(self, memo: dict) -> "TextScalar":
        return self

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._text!r})"

    # -------------------------------------------------------------------------
    # Pydantic
    # -------------------------------------------------------------------------

    @classmethod
    def validate(cls, value: Any) -> "TextScalar":
        """
        Десериализация значения.

        Принимает экземпляр любого text-backed типа, JSON число, строку или
        пустой массив (legacy placeholder без содержимого).

        Raises:
            ScalarParseError: Для любого другого входа
        """
        if type(value) is cls:
            return value
        if isinstance(value, TextScalar):
            return cls(value.text)
        if isinstance(value, bool):
            if cls.accepts_bool:
                return cls(value)
        elif isinstance(value, (str, int, float)):
            return cls(value)
        elif isinstance(value, (list, tuple)) and len(value) == 0:
            return cls("")
        elif cls.accepts_date and isinstance(value, (date, datetime)):
            return cls(value)

        logger.debug("Rejected %s input: %r", cls.__name__, value)
        raise ScalarParseError(value, cls.__name__)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda v: v.to_json_value(),
                when_used="always",
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": list(cls.json_schema_types)}


# =============================================================================
# КОНКРЕТНЫЕ ТИПЫ
# =============================================================================


class NumberString(TextScalar):
    """
    Число или строка.

    Сериализация: int, если текст парсится и как float64, и как int64;
    float, если только как float64; иначе исходная строка.
    """

    __slots__ = ()


class NumberOrDateString(TextScalar):
    """
    Число или дата/строка (ось X, границы шкал, аннотации).

    Правило сериализации то же, что у NumberString: текст "2024" станет
    числом 2024. Для строк, похожих на числа, нужно обычное строковое поле.
    """

    __slots__ = ()

    accepts_date = True


class BoolString(TextScalar):
    """
    Bool или строка.

    Сериализация: JSON bool, если текст равен "true" / "false",
    иначе исходная строка (например, "auto").
    """

    __slots__ = ()

    accepts_bool = True
    json_schema_types = ("boolean", "number", "string")

    def to_json_value(self) -> Union[bool, str]:
        return text_to_json_bool_or_str(self._text)
