"""
Tests for Coercion primitives

Проверяет:
1. Строгий парсинг float64 / int64 / bool
2. Таблицу приоритетов text → JSON scalar (int > float > str)
3. Двухвариантный выбор bool / str
4. Неявное текстовое представление значений
"""

import math
from datetime import date, datetime

import pytest

from src.core.math import (
    I64_MAX,
    I64_MIN,
    float_to_text,
    parse_bool,
    parse_f64,
    parse_i64,
    text_to_json_bool_or_str,
    text_to_json_scalar,
    value_to_text,
)


# =============================================================================
# STRICT PARSING
# =============================================================================


class TestParseF64:
    """Тесты строгого парсинга float64"""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("5", 5.0),
            ("-5.25", -5.25),
            ("+7", 7.0),
            (".5", 0.5),
            ("5.", 5.0),
            ("1e3", 1000.0),
            ("2.5E-2", 0.025),
        ],
    )
    def test_valid_numbers(self, text: str, expected: float) -> None:
        """Десятичные числа с дробью и экспонентой"""
        assert parse_f64(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["inf", "-inf", "Infinity", "NaN", "nan"])
    def test_non_finite_words(self, text: str) -> None:
        """inf / infinity / nan в любом регистре"""
        value = parse_f64(text)
        assert value is not None
        assert not math.isfinite(value)

    @pytest.mark.parametrize(
        "text", ["", " 5", "5 ", "1_000", "0x10", ".", "e5", "5px", "--5", "1e"]
    )
    def test_rejected(self, text: str) -> None:
        """Пробелы, разделители, hex и мусор не парсятся"""
        assert parse_f64(text) is None


class TestParseI64:
    """Тесты строгого парсинга int64"""

    def test_valid_integers(self) -> None:
        """Целые со знаком"""
        assert parse_i64("42") == 42
        assert parse_i64("-42") == -42
        assert parse_i64("+42") == 42
        assert parse_i64("007") == 7

    def test_bounds(self) -> None:
        """Границы i64 включительно, за границами — None"""
        assert parse_i64(str(I64_MAX)) == I64_MAX
        assert parse_i64(str(I64_MIN)) == I64_MIN
        assert parse_i64(str(I64_MAX + 1)) is None
        assert parse_i64(str(I64_MIN - 1)) is None

    @pytest.mark.parametrize("text", ["", "5.0", "1e3", " 5", "1_000", "five"])
    def test_rejected(self, text: str) -> None:
        """Дробные, экспоненциальные и нечисловые строки не парсятся"""
        assert parse_i64(text) is None


class TestParseBool:
    """Тесты парсинга bool"""

    def test_exact_words(self) -> None:
        assert parse_bool("true") is True
        assert parse_bool("false") is False

    @pytest.mark.parametrize("text", ["True", "FALSE", "1", "0", "", "yes"])
    def test_rejected(self, text: str) -> None:
        """Регистр важен, числа не являются bool"""
        assert parse_bool(text) is None


# =============================================================================
# TEXT → JSON SCALAR
# =============================================================================


class TestTextToJsonScalar:
    """Тесты таблицы приоритетов"""

    @pytest.mark.parametrize("text,expected", [("5", 5), ("-12", -12), ("+7", 7), ("0", 0)])
    def test_int_wins_when_both_parse(self, text: str, expected: int) -> None:
        """Текст парсится и как float, и как int → int"""
        result = text_to_json_scalar(text)
        assert result == expected
        assert type(result) is int

    @pytest.mark.parametrize("text,expected", [("5.5", 5.5), ("5.0", 5.0), ("1e3", 1000.0)])
    def test_float_when_only_float_parses(self, text: str, expected: float) -> None:
        """Текст парсится только как float → float"""
        result = text_to_json_scalar(text)
        assert result == expected
        assert type(result) is float

    def test_i64_overflow_becomes_float(self) -> None:
        """Целое за пределами i64 парсится только как float"""
        result = text_to_json_scalar("9223372036854775808")
        assert type(result) is float
        assert result == pytest.approx(9.223372036854776e18)

    @pytest.mark.parametrize("text", ["5px", "", " 5", "2024-01-01", "auto", "1_000"])
    def test_string_when_nothing_parses(self, text: str) -> None:
        """Ни один парсинг не успешен → исходный текст"""
        assert text_to_json_scalar(text) == text

    @pytest.mark.parametrize("text", ["NaN", "inf", "-inf"])
    def test_non_finite_stays_text(self, text: str) -> None:
        """NaN/inf невыразимы в JSON и эмитятся как текст"""
        assert text_to_json_scalar(text) == text

    @pytest.mark.parametrize("text", ["1e400", "-1e400"])
    def test_overflowing_exponent_stays_text(self, text: str) -> None:
        """Экспонента за пределами float64 даёт inf, значит эмитится текст"""
        assert math.isinf(parse_f64(text))
        assert parse_i64(text) is None
        assert text_to_json_scalar(text) == text

    def test_numeric_looking_date_is_number(self) -> None:
        """Год "2024" становится числом 2024"""
        assert text_to_json_scalar("2024") == 2024


class TestTextToJsonBoolOrStr:
    """Тесты выбора bool / str"""

    def test_bool_words(self) -> None:
        assert text_to_json_bool_or_str("true") is True
        assert text_to_json_bool_or_str("false") is False

    @pytest.mark.parametrize("text", ["auto", "True", "", "1"])
    def test_everything_else_is_text(self, text: str) -> None:
        assert text_to_json_bool_or_str(text) == text


# =============================================================================
# TEXT CONVERSION
# =============================================================================


class TestValueToText:
    """Тесты неявного текстового представления"""

    def test_bool_lowercase(self) -> None:
        assert value_to_text(True) == "true"
        assert value_to_text(False) == "false"

    def test_ints_and_strings(self) -> None:
        assert value_to_text(5) == "5"
        assert value_to_text("5px") == "5px"
        assert value_to_text("") == ""

    def test_floats(self) -> None:
        """Целые float без дробной части, остальные — кратчайший repr"""
        assert value_to_text(5.0) == "5"
        assert value_to_text(5.5) == "5.5"
        assert value_to_text(0.1) == "0.1"
        assert value_to_text(1e20) == "100000000000000000000"

    def test_non_finite_floats(self) -> None:
        assert float_to_text(float("nan")) == "NaN"
        assert float_to_text(float("inf")) == "inf"
        assert float_to_text(float("-inf")) == "-inf"

    def test_dates(self) -> None:
        """Даты в ISO-8601"""
        assert value_to_text(date(2024, 1, 2)) == "2024-01-02"
        assert value_to_text(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03:04:05"
