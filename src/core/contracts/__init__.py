"""
Contract Validation Module

Модуль для валидации JSON конфигураций графиков против JSON Schema контрактов.
"""

from .validators import (
    ChartScaleValidator,
    ChartValidator,
    ContractValidator,
    MinMaxPointValidator,
    SchemaLoader,
    XYPointValidator,
    get_validator,
    validate_chart,
    validate_chart_scale,
    validate_contract,
    validate_min_max_point,
    validate_xy_point,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ChartValidator",
    "ChartScaleValidator",
    "XYPointValidator",
    "MinMaxPointValidator",
    # Functions
    "get_validator",
    "validate_contract",
    "validate_chart",
    "validate_chart_scale",
    "validate_xy_point",
    "validate_min_max_point",
]
