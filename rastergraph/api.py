from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rastergraph.chart import Chart
from rastergraph.layout import (
    DEFAULT_AXIS_COLOR,
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_HEIGHT,
    DEFAULT_SERIES_COLOR,
    DEFAULT_WIDTH,
)
from rastergraph.series import Series


@dataclass(frozen=True)
class ChartStyle:
    background: str = DEFAULT_BACKGROUND_COLOR
    axis: str = DEFAULT_AXIS_COLOR
    series: str = DEFAULT_SERIES_COLOR


def create(
    points: Any,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    *,
    style: ChartStyle | None = None,
) -> bytes:
    style = style or ChartStyle()
    series = Series(points, style.series)
    chart = Chart(width, height, style.background, style.axis)
    return chart.create_bmp_vec(series)
