"""
Coercion — Примитивы приведения текста к JSON-скаляру

Модуль содержит чистые функции, на которых построены text-backed значения
(NumberString, BoolString, NumberOrDateString):
- Строгий парсинг float64 / int64 / bool без нормализации входа
- Таблица приоритетов text → JSON scalar (int > float > str)
- Двухвариантный выбор bool / str
- Неявное текстовое представление произвольного значения

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все функции тотальны: любой текст даёт результат, исключений нет
2. Оба парсинга (float и int) выполняются всегда, int имеет приоритет
3. Non-finite float никогда не попадает в JSON (эмитится исходный текст)
4. Функции детерминированы и не имеют побочных эффектов
"""

import math
import re
from datetime import date, datetime, time
from typing import Final, Optional, Union

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

I64_MIN: Final[int] = -(2**63)
I64_MAX: Final[int] = 2**63 - 1

# Грамматика float64 без пробелов, разделителей "_" и hex
_FLOAT_RE: Final = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)
_INT_RE: Final = re.compile(r"[+-]?[0-9]+")

JsonScalar = Union[int, float, str]


# =============================================================================
# СТРОГИЙ ПАРСИНГ
# =============================================================================


def parse_f64(text: str) -> Optional[float]:
    """
    Строгий парсинг 64-битного float.

    Принимает знак, цифры с необязательной дробной частью и экспонентой,
    а также inf / infinity / nan в любом регистре.

    Args:
        text: Исходный текст

    Returns:
        float или None, если текст не является числом

    Examples:
        >>> parse_f64("5.5")
        5.5
        >>> parse_f64(" 5") is None
        True
        >>> parse_f64("1_000") is None
        True
    """
    if not _FLOAT_RE.fullmatch(text):
        return None
    return float(text)


def parse_i64(text: str) -> Optional[int]:
    """
    Строгий парсинг знакового 64-битного целого.

    Args:
        text: Исходный текст

    Returns:
        int или None при ошибке формата или переполнении i64
    """
    if not _INT_RE.fullmatch(text):
        return None
    value = int(text)
    if value < I64_MIN or value > I64_MAX:
        return None
    return value


def parse_bool(text: str) -> Optional[bool]:
    """Парсинг bool: только "true" / "false" (регистр важен)."""
    if text == "true":
        return True
    if text == "false":
        return False
    return None


# =============================================================================
# TEXT → JSON SCALAR
# =============================================================================


def text_to_json_scalar(text: str) -> JsonScalar:
    """
    Приведение текста к JSON-скаляру по таблице приоритетов.

    Порядок:
    1. Выполняются оба парсинга: float64 и int64
    2. Оба успешны → int (целочисленный парсинг авторитетен)
    3. Успешен только float → float
    4. Ни один → исходный текст без изменений

    Non-finite float (NaN, inf) в JSON невыразим и эмитится как текст.

    Args:
        text: Сохранённый текст значения

    Returns:
        int, float или str

    Examples:
        >>> text_to_json_scalar("5")
        5
        >>> text_to_json_scalar("5.5")
        5.5
        >>> text_to_json_scalar("5px")
        '5px'
        >>> text_to_json_scalar("NaN")
        'NaN'
    """
    fnum = parse_f64(text)
    inum = parse_i64(text)

    if fnum is not None and inum is not None:
        return inum
    if fnum is not None and math.isfinite(fnum):
        return fnum
    return text


def text_to_json_bool_or_str(text: str) -> Union[bool, str]:
    """
    Приведение текста к JSON bool или строке.

    Args:
        text: Сохранённый текст значения

    Returns:
        bool, если текст парсится как bool, иначе исходный текст
    """
    parsed = parse_bool(text)
    if parsed is not None:
        return parsed
    return text


# =============================================================================
# НЕЯВНОЕ ТЕКСТОВОЕ ПРЕДСТАВЛЕНИЕ
# =============================================================================


def float_to_text(value: float) -> str:
    """
    Десятичное представление float.

    Целые конечные значения печатаются без дробной части (5.0 → "5"),
    NaN → "NaN", бесконечности → "inf" / "-inf".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def value_to_text(value: object) -> str:
    """
    Текстовое представление произвольного значения (без валидации).

    Args:
        value: Любое значение, имеющее текстовое представление

    Returns:
        Текст, который будет сохранён как есть
    """
    # bool проверяется до int: bool является подклассом int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return float_to_text(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)
