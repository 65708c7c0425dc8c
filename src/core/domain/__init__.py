"""
Domain models and value objects.

Contains the leaf values of a chart configuration tree: text-backed scalars,
opaque dataset data, points, and the ChartRecord base with the omission rule.
"""

from src.core.domain.dataset_data import DatasetData, to_dataset_data, to_json_tree
from src.core.domain.fn_with_args import FnWithArgs
from src.core.domain.points import MinMaxPoint, XYPoint, min_max_point
from src.core.domain.record import ChartRecord, is_omitted
from src.core.domain.scalars import (
    BoolString,
    NumberOrDateString,
    NumberString,
    ScalarParseError,
    TextScalar,
)

__all__ = [
    # Scalars
    "TextScalar",
    "NumberString",
    "NumberOrDateString",
    "BoolString",
    "ScalarParseError",
    # Opaque data
    "DatasetData",
    "to_dataset_data",
    "to_json_tree",
    # Points
    "XYPoint",
    "MinMaxPoint",
    "min_max_point",
    # Records
    "ChartRecord",
    "is_omitted",
    "FnWithArgs",
]
