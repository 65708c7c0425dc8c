"""
Dataset — Generic-обёртка данных графика и payload-записи datasets

Dataset[D] параметризуется формой datasets (payload capability): любой
сериализуемый тип. Новые формы добавляются новым типом payload без
изменения обёртки.

Готовые формы:
- list[SinglePointDataset] — плоские числовые данные (bar, pie)
- list[XYDataset] — данные DatasetData: точки {x, y}, диапазоны [min, max]
- NoDatasets — пустой payload
"""

from typing import Generic, List, Optional, TypeVar

from pydantic import Field

from src.core.domain import (
    BoolString,
    ChartRecord,
    DatasetData,
    FnWithArgs,
    NumberOrDateString,
    NumberString,
)

# Форма datasets: любой сериализуемый тип
D = TypeVar("D")


# =============================================================================
# ENVELOPE
# =============================================================================


class Dataset(ChartRecord, Generic[D]):
    """
    Объект data конфигурации графика.

    Attributes:
        datasets: Payload формы D
        labels: Подписи оси категорий (опускаются, если не заданы или пусты)
    """

    datasets: D = Field(..., description="Payload datasets формы D")
    labels: Optional[List[NumberOrDateString]] = Field(
        None, description="Подписи оси категорий"
    )


class NoDatasets(ChartRecord):
    """Пустой payload datasets."""


# =============================================================================
# NESTED RECORDS
# =============================================================================


class Padding(ChartRecord):
    top: NumberString = NumberString()
    bottom: NumberString = NumberString()
    left: NumberString = NumberString()
    right: NumberString = NumberString()


class Font(ChartRecord):
    """Шрифт. style и weight допускают строки ("italic", "bold")."""

    size: NumberString = NumberString()
    style: NumberString = NumberString()
    weight: NumberString = NumberString()
    lineHeight: NumberString = NumberString()


class DataLabels(ChartRecord):
    """Опции плагина datalabels для dataset."""

    align: str = ""
    anchor: str = ""
    backgroundColor: str = ""
    borderRadius: NumberString = NumberString()
    drawTime: NumberString = NumberString()
    color: str = ""
    clip: Optional[bool] = None
    display: Optional[BoolString] = None
    offset: NumberString = NumberString()
    padding: Optional[Padding] = None
    font: Optional[Font] = None
    z: NumberString = NumberString()


class Segment(ChartRecord):
    """Scriptable-стили сегментов линии."""

    borderDash: FnWithArgs = Field(default_factory=FnWithArgs)
    borderColor: FnWithArgs = Field(default_factory=FnWithArgs)


# =============================================================================
# DATASET PAYLOADS
# =============================================================================


class SinglePointDataset(ChartRecord):
    """
    Dataset с плоским списком значений (по одному на label).

    Используется как Dataset[list[SinglePointDataset]].
    """

    backgroundColor: List[str] = Field(default_factory=list)
    base: NumberString = NumberString()
    barThickness: NumberString = NumberString()
    barPercentage: NumberString = NumberString()
    borderColor: str = ""
    borderSkipped: str = ""
    borderWidth: NumberString = NumberString()
    borderRadius: NumberString = NumberString()
    borderJoinStyle: str = ""
    categoryPercentage: NumberString = NumberString()
    clip: NumberString = NumberString()
    data: List[NumberString] = Field(default_factory=list)
    grouped: Optional[bool] = None
    hoverBackgroundColor: str = ""
    hoverBorderColor: str = ""
    hoverBorderWidth: NumberString = NumberString()
    hoverBorderRadius: NumberString = NumberString()
    indexAxis: str = ""
    inflateAmount: NumberString = NumberString()
    label: str = ""
    maxBarThickness: NumberString = NumberString()
    minBarLength: NumberString = NumberString()
    order: NumberString = NumberString()
    pointBackgroundColor: str = ""
    pointBorderColor: str = ""
    pointBorderWidth: NumberString = NumberString()
    pointHoverBackgroundColor: str = ""
    pointHoverBorderWidth: NumberString = NumberString()
    pointHoverRadius: NumberOrDateString = NumberOrDateString()
    pointRadius: NumberString = NumberString()
    pointStyle: str = ""
    datalabels: Optional[DataLabels] = None
    type_: str = Field("", alias="type")
    stepped: Optional[bool] = None
    skipNull: Optional[bool] = None
    stack: str = ""
    xAxisID: str = ""
    yAxisID: str = ""


class XYDataset(ChartRecord):
    """
    Dataset с данными произвольной формы (DatasetData).

    data заполняется через XYPoint.to_dataset_data() или to_dataset_data().
    Используется как Dataset[list[XYDataset]].
    """

    backgroundColor: str = ""
    barThickness: NumberString = NumberString()
    borderColor: str = ""
    borderDash: List[NumberString] = Field(default_factory=list)
    borderJoinStyle: str = ""
    borderWidth: NumberString = NumberString()
    data: DatasetData = Field(default_factory=DatasetData)
    datalabels: Optional[DataLabels] = None
    description: str = ""
    category_label: str = ""
    hoverBackgroundColor: str = ""
    label: str = ""
    order: NumberString = NumberString()
    pointBackgroundColor: str = ""
    pointBorderColor: str = ""
    pointBorderWidth: NumberString = NumberString()
    pointHoverBackgroundColor: str = ""
    pointHoverBorderWidth: NumberString = NumberString()
    pointHoverRadius: NumberOrDateString = NumberOrDateString()
    pointRadius: NumberString = NumberString()
    pointHitRadius: NumberString = NumberString()
    hitRadius: NumberString = NumberString()
    pointStyle: str = ""
    type_: str = Field("", alias="type")
    stepped: Optional[BoolString] = None
    tension: NumberString = NumberString()
    xAxisID: str = ""
    yAxisID: str = ""
    fill: str = ""
    base: NumberString = NumberString()
    barPercentage: NumberString = NumberString()
    borderSkipped: str = ""
    borderRadius: NumberString = NumberString()
    categoryPercentage: NumberString = NumberString()
    clip: NumberString = NumberString()
    grouped: Optional[bool] = None
    hoverBorderColor: str = ""
    hoverBorderWidth: NumberString = NumberString()
    hoverBorderRadius: NumberString = NumberString()
    indexAxis: str = ""
    inflateAmount: NumberString = NumberString()
    maxBarThickness: NumberString = NumberString()
    minBarLength: NumberString = NumberString()
    skipNull: Optional[bool] = None
    stack: str = ""
    z: NumberString = NumberString()
    segment: Optional[Segment] = None
    spanGaps: Optional[bool] = None
