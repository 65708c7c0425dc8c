"""
Options — Generic-дерево опций графика

ChartOptions[A] параметризуется формой аннотаций (annotation capability).
Аннотации живут по пути plugins.annotation.annotations.<key>, шкалы — по
пути scales.<axisId>. Все секции необязательны и опускаются, если не заданы.
"""

from typing import Dict, Generic, Optional, TypeVar

from pydantic import Field

from src.chart.dataset import Font
from src.core.domain import ChartRecord, NumberOrDateString, NumberString

# Форма аннотации: любой сериализуемый тип
A = TypeVar("A")


# =============================================================================
# ТЕКСТ И ЛЕГЕНДЫ
# =============================================================================


class Title(ChartRecord):
    text: str = ""
    display: Optional[bool] = None
    font: Optional[Font] = None


class LegendLabel(ChartRecord):
    usePointStyle: Optional[bool] = None
    useBorderRadius: Optional[bool] = None
    boxHeight: Optional[int] = None
    boxWidth: Optional[int] = None
    pointStyle: str = ""
    pointStyleWidth: NumberString = NumberString()


class ChartLegend(ChartRecord):
    display: Optional[bool] = None
    position: str = ""
    labels: Optional[LegendLabel] = None


class PluginLegend(ChartRecord):
    display: Optional[bool] = None
    labels: Optional[LegendLabel] = None
    reverse: Optional[bool] = None


class TooltipPlugins(ChartRecord):
    enabled: Optional[bool] = None
    bodyColor: str = ""
    bodyAlign: str = ""
    displayColors: Optional[bool] = None
    backgroundColor: str = ""
    titleColor: str = ""
    titleAlign: str = ""
    titleMarginBottom: NumberString = NumberString()


# =============================================================================
# ШКАЛЫ
# =============================================================================


class ScaleBorder(ChartRecord):
    display: Optional[bool] = None
    color: str = ""
    width: NumberString = NumberString()
    dash: NumberString = NumberString()
    dashOffset: NumberString = NumberString()
    z: NumberString = NumberString()


class Grid(ChartRecord):
    display: Optional[bool] = None
    drawOnChartArea: Optional[bool] = None


class DisplayFormats(ChartRecord):
    """Форматы подписей временной шкалы по единицам времени."""

    year: str = ""
    quarter: str = ""
    month: str = ""
    week: str = ""
    day: str = ""
    hour: str = ""
    minute: str = ""


class ScaleTime(ChartRecord):
    displayFormats: Optional[DisplayFormats] = None
    unit: str = ""


class ScaleTicks(ChartRecord):
    align: str = ""
    maxTicksLimit: NumberString = NumberString()
    stepSize: NumberString = NumberString()
    count: NumberString = NumberString()
    precision: NumberString = NumberString()


class ChartScale(ChartRecord):
    """
    Конфигурация одной оси (scales.<axisId>).

    min/max/grace принимают число или дату ("2024-01-01", "5%").
    Без заданных полей сериализуется в {}.
    """

    type_: str = Field("", alias="type")
    alignToPixels: Optional[bool] = None
    backgroundColour: str = ""
    beginAtZero: Optional[bool] = None
    border: Optional[ScaleBorder] = None
    bounds: str = ""
    display: Optional[bool] = None
    reverse: Optional[bool] = None
    barPercentage: NumberString = NumberString()
    categoryPercentage: NumberString = NumberString()
    grace: NumberOrDateString = NumberOrDateString()
    grid: Optional[Grid] = None
    grouped: Optional[bool] = None
    offset: Optional[bool] = None
    max: NumberOrDateString = NumberOrDateString()
    min: NumberOrDateString = NumberOrDateString()
    position: str = ""
    stacked: Optional[bool] = None
    suggestedMax: NumberOrDateString = NumberOrDateString()
    suggestedMin: NumberOrDateString = NumberOrDateString()
    ticks: Optional[ScaleTicks] = None
    time: Optional[ScaleTime] = None
    title: Optional[Title] = None
    weight: NumberString = NumberString()


# =============================================================================
# ВЗАИМОДЕЙСТВИЕ, АНИМАЦИЯ, ЭЛЕМЕНТЫ
# =============================================================================


class ChartInteraction(ChartRecord):
    intersect: Optional[bool] = None
    mode: str = ""
    axis: str = ""


class ChartTooltips(ChartRecord):
    position: str = ""


class Animation(ChartRecord):
    duration: NumberString = NumberString()


class BarElementConfiguration(ChartRecord):
    fill: Optional[bool] = None
    borderRadius: NumberString = NumberString()
    borderWidth: NumberString = NumberString()
    hoverBorderWidth: NumberString = NumberString()


class LineElementConfiguration(ChartRecord):
    fill: Optional[bool] = None
    borderWidth: NumberString = NumberString()
    cubicInterpolationMode: str = ""


class PointElementConfiguration(ChartRecord):
    radius: NumberString = NumberString()
    hitRadius: NumberString = NumberString()
    hoverRadius: NumberString = NumberString()
    borderWidth: NumberString = NumberString()
    hoverBorderWidth: NumberString = NumberString()


class ChartElements(ChartRecord):
    bar: Optional[BarElementConfiguration] = None
    line: Optional[LineElementConfiguration] = None
    point: Optional[PointElementConfiguration] = None


# =============================================================================
# GENERIC ENVELOPE
# =============================================================================


class Annotations(ChartRecord, Generic[A]):
    """
    Опции плагина annotation.

    Attributes:
        annotations: Аннотации формы A по строковому ключу
    """

    annotations: Optional[Dict[str, A]] = Field(
        None, description="Аннотации по ключу (plugins.annotation.annotations.<key>)"
    )


class ChartPlugins(ChartRecord, Generic[A]):
    """Секция plugins: автоцвета, tooltip, аннотации, заголовок, легенда."""

    autocolors: Optional[bool] = None
    tooltip: Optional[TooltipPlugins] = None
    annotation: Optional[Annotations[A]] = None
    title: Optional[Title] = None
    legend: Optional[PluginLegend] = None


class ChartOptions(ChartRecord, Generic[A]):
    """
    Объект options конфигурации графика.

    Attributes:
        plugins: Плагины (включая аннотации формы A)
        scales: Оси по идентификатору ("x", "y", "y1", ...)
        interaction: Режим взаимодействия
        tooltips: Позиционирование tooltip
        maintainAspectRatio: Сохранять ли пропорции canvas
        legend: Легенда
        animation: Анимация
        spanGaps: Соединять ли линии через пропуски данных
        elements: Опции элементов по умолчанию
        responsive: Подстраивать ли размер под контейнер
    """

    plugins: Optional[ChartPlugins[A]] = None
    scales: Optional[Dict[str, ChartScale]] = None
    interaction: Optional[ChartInteraction] = None
    tooltips: Optional[ChartTooltips] = None
    maintainAspectRatio: Optional[bool] = None
    legend: Optional[ChartLegend] = None
    animation: Optional[Animation] = None
    spanGaps: Optional[bool] = None
    elements: Optional[ChartElements] = None
    responsive: Optional[bool] = None
