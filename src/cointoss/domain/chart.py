"""
ChartFeed — граница с внешним charting-коллаборатором

Ядро не рендерит графики. Единственный feed для внешнего построителя —
пары (position, running_frequency) для position в 1..total,
линейный график по y в [0, 1] с горизонтальной опорной линией 0.5.

Dict-форма (to_contract) валидируется JSON Schema chart_feed.
"""

import logging
from typing import Any, Final

from pydantic import BaseModel, Field

from cointoss.domain.toss_series import TossSeries, running_frequencies

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ГРАФИКА
# =============================================================================

CHART_Y_MIN: Final[float] = 0.0

CHART_Y_MAX: Final[float] = 1.0

# Горизонтальная опорная линия (честная монета)
CHART_REFERENCE_LINE: Final[float] = 0.5

CHART_X_LABEL: Final[str] = "number of tosses"


class ChartFeed(BaseModel):
    """Данные линейного графика кумулятивной частоты стороны."""

    side: str = Field(..., description="Сторона, частота которой строится")
    points: tuple[tuple[int, float], ...] = Field(
        default_factory=tuple, description="Пары (position, running_frequency)"
    )
    y_min: float = Field(CHART_Y_MIN, description="Нижняя граница оси y")
    y_max: float = Field(CHART_Y_MAX, description="Верхняя граница оси y")
    reference_line: float = Field(
        CHART_REFERENCE_LINE, ge=0, le=1, description="Горизонтальная опорная линия"
    )
    x_label: str = Field(CHART_X_LABEL, description="Подпись оси x")
    y_label: str = Field(..., description="Подпись оси y")

    model_config = {"frozen": True}

    def to_contract(self) -> dict[str, Any]:
        """Dict-форма для внешнего построителя (JSON-совместимая)."""
        return self.model_dump(mode="json")


def plot_feed(series: TossSeries, side: str) -> ChartFeed:
    """
    Feed для внешнего построителя графика частоты стороны side.

    Raises:
        InvalidSideError: Если side не является стороной монеты
        UnsupportedTypeError: Если series не TossSeries
    """
    frequencies = running_frequencies(series, side)
    feed = ChartFeed(
        side=side,
        points=tuple(frequencies.points()),
        y_label=f"relative frequency of {side}",
    )
    logger.debug("Built chart feed for side %r with %d points", side, len(feed.points))
    return feed
