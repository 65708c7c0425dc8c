"""
Chart — Полный объект конфигурации графика

Chart[D, A] — объект {type, data, options}, который передаётся конструктору
рантайма графиков. D — форма datasets, A — форма аннотаций.
"""

import json
import logging
from dataclasses import dataclass
from typing import Generic, Optional

from pydantic import Field

from src.chart.dataset import D, Dataset
from src.chart.options import A, ChartOptions
from src.core.contracts import validate_chart
from src.core.domain import ChartRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderConfig:
    """Конфигурация рендеринга графика в JSON-текст.

    indent — отступ JSON (None = компактный вывод)
    validate_contract — проверять ли результат по схеме chart.json
    """
    indent: Optional[int] = None
    validate_contract: bool = False


class Chart(ChartRecord, Generic[D, A]):
    """
    Конфигурация графика.

    Attributes:
        type_: Тип графика рантайма ("line", "bar", "scatter", ...), ключ "type"
        data: Данные графика
        options: Опции графика (опускаются, если не заданы)
    """

    type_: str = Field(..., alias="type", description="Тип графика рантайма")
    data: Dataset[D] = Field(..., description="Данные графика")
    options: Optional[ChartOptions[A]] = Field(None, description="Опции графика")

    def render(self, config: RenderConfig = RenderConfig()) -> str:
        """
        Рендеринг графика в JSON-текст.

        Args:
            config: Конфигурация рендеринга

        Returns:
            JSON-текст конфигурации

        Raises:
            jsonschema.ValidationError: Если включена проверка контракта
                и результат ей не соответствует
        """
        payload = self.to_dict()
        if config.validate_contract:
            validate_chart(payload)
            logger.debug("Chart %r passed contract validation", self.type_)
        return json.dumps(payload, indent=config.indent, ensure_ascii=False)
