"""
Core math modules

Чистые примитивы приведения текста к JSON-скалярам.
"""

from src.core.math.coercion import (
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

__all__ = [
    # Constants
    "I64_MIN",
    "I64_MAX",
    # Strict parsing
    "parse_f64",
    "parse_i64",
    "parse_bool",
    # Coercion
    "text_to_json_scalar",
    "text_to_json_bool_or_str",
    # Text conversion
    "float_to_text",
    "value_to_text",
]
