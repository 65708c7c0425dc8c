"""
Annotations — Формы аннотаций плагина annotation

Любой сериализуемый тип может быть формой аннотации для ChartOptions[A].
Здесь объявлены формы, которые нужны чаще всего: линия и прямоугольник.
"""

from typing import List

from pydantic import Field

from src.core.domain import ChartRecord, NumberOrDateString, NumberString


class NoAnnotations(ChartRecord):
    """Пустая форма аннотации (график без аннотаций)."""


class LineAnnotation(ChartRecord):
    """
    Линия-аннотация (type="line").

    Границы задаются числом или датой; пустые границы опускаются.
    """

    type_: str = Field("", alias="type")
    drawTime: str = ""
    xMin: NumberOrDateString = NumberOrDateString()
    xMax: NumberOrDateString = NumberOrDateString()
    yMin: NumberOrDateString = NumberOrDateString()
    yMax: NumberOrDateString = NumberOrDateString()
    borderColor: str = ""
    borderDash: List[NumberString] = Field(default_factory=list)
    borderWidth: NumberString = NumberString()
    yScaleID: NumberString = NumberString()


class BoxAnnotation(ChartRecord):
    """Прямоугольник-аннотация (type="box"). Границы — обычные строки."""

    type_: str = Field("", alias="type")
    drawTime: str = ""
    xMin: str = ""
    xMax: str = ""
    yMin: str = ""
    yMax: str = ""
    borderColor: str = ""
    backgroundColor: str = ""
    borderDash: List[NumberString] = Field(default_factory=list)
    borderWidth: NumberString = NumberString()
