"""Chart — generic-обёртки конфигурации графика.

- Dataset[D]: объект data с payload формы D
- ChartOptions[A]: объект options с аннотациями формы A
- Chart[D, A]: полный объект {type, data, options}
"""

from .annotations import BoxAnnotation, LineAnnotation, NoAnnotations
from .chart import Chart, RenderConfig
from .dataset import (
    DataLabels,
    Dataset,
    Font,
    NoDatasets,
    Padding,
    Segment,
    SinglePointDataset,
    XYDataset,
)
from .options import (
    Animation,
    Annotations,
    BarElementConfiguration,
    ChartElements,
    ChartInteraction,
    ChartLegend,
    ChartOptions,
    ChartPlugins,
    ChartScale,
    ChartTooltips,
    DisplayFormats,
    Grid,
    LegendLabel,
    LineElementConfiguration,
    PluginLegend,
    PointElementConfiguration,
    ScaleBorder,
    ScaleTicks,
    ScaleTime,
    Title,
    TooltipPlugins,
)

__all__ = [
    # Envelope
    "Chart",
    "RenderConfig",
    "Dataset",
    "ChartOptions",
    "ChartPlugins",
    "Annotations",
    # Dataset payloads
    "NoDatasets",
    "SinglePointDataset",
    "XYDataset",
    "DataLabels",
    "Padding",
    "Font",
    "Segment",
    # Annotation shapes
    "NoAnnotations",
    "LineAnnotation",
    "BoxAnnotation",
    # Options
    "Animation",
    "PluginLegend",
    "TooltipPlugins",
    "ChartScale",
    "ScaleBorder",
    "Grid",
    "ScaleTime",
    "DisplayFormats",
    "ScaleTicks",
    "Title",
    "ChartInteraction",
    "ChartTooltips",
    "ChartLegend",
    "LegendLabel",
    "ChartElements",
    "BarElementConfiguration",
    "LineElementConfiguration",
    "PointElementConfiguration",
]
