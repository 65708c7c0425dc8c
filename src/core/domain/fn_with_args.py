"""
FnWithArgs — Заглушка функционального выражения стиля

Рантайм принимает функции для scriptable-опций (например, segment.borderColor).
Модель знает о таком значении только одно: пусто ли оно (тогда поле
опускается). JS-рендеринг функции вне зоны ответственности модели.
"""

from typing import List

from pydantic import Field

from src.core.domain.record import ChartRecord


class FnWithArgs(ChartRecord):
    """Функция с именами аргументов и телом."""

    args: List[str] = Field(default_factory=list)
    body: str = ""

    def is_empty(self) -> bool:
        """Пусто, если у функции нет тела."""
        return self.body == ""
