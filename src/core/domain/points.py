"""
Points — Точки и диапазоны данных dataset

- XYPoint: точка {x, y} с необязательным описанием
- MinMaxPoint: диапазон [min, max] из двух NumberOrDateString

Обе формы встраиваются в DatasetData копированием значения; правило пропуска
полей при встраивании то же, что и при прямой сериализации.
"""

from typing import Any, Iterable, Tuple

from pydantic import Field, model_validator

from src.core.domain.dataset_data import DatasetData, to_dataset_data
from src.core.domain.record import ChartRecord
from src.core.domain.scalars import NumberOrDateString, NumberString


# =============================================================================
# XY POINT
# =============================================================================


class XYPoint(ChartRecord):
    """
    Точка линейного/точечного графика.

    Все поля по умолчанию пусты и тогда не попадают в JSON.
    """

    x: NumberOrDateString = Field(default_factory=NumberOrDateString)
    y: NumberString = Field(default_factory=NumberString)
    description: str = ""

    @model_validator(mode="before")
    @classmethod
    def accept_pair(cls, data: Any) -> Any:
        """Пара (x, y) в виде tuple превращается в {x, y}."""
        if isinstance(data, tuple) and len(data) == 2:
            x, y = data
            return {"x": NumberOrDateString(x), "y": NumberString(y)}
        return data

    @classmethod
    def from_tuple(cls, pair: Tuple[Any, Any]) -> "XYPoint":
        """Точка из пары (x, y) любых значений с текстовым представлением."""
        return cls.model_validate(tuple(pair))

    @classmethod
    def nan(cls) -> "XYPoint":
        """
        Точка-разрыв: x и y равны тексту "NaN".

        Рантайм не отрисовывает такую точку, поэтому она разрывает линию.
        Сериализуется как {"x": "NaN", "y": "NaN"}.
        """
        return cls(x=NumberOrDateString("NaN"), y=NumberString("NaN"))

    @staticmethod
    def to_dataset_data(points: Iterable["XYPoint"]) -> DatasetData:
        """Встраивание последовательности точек в данные dataset."""
        return to_dataset_data(list(points))


# =============================================================================
# MIN/MAX POINT
# =============================================================================

MinMaxPoint = Tuple[NumberOrDateString, NumberOrDateString]


def min_max_point(low: Any, high: Any) -> MinMaxPoint:
    """
    Диапазон [low, high] (floating bars и т.п.).

    Args:
        low: Нижняя граница (число или дата)
        high: Верхняя граница (число или дата)
    """
    return (NumberOrDateString(low), NumberOrDateString(high))
