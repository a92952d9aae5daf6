from __future__ import annotations

import logging

from rastergraph.errors import NotEnoughSpaceError
from rastergraph.layout import (
    DEFAULT_AXIS_COLOR,
    DEFAULT_BACKGROUND_COLOR,
    H_ARROW_HALF,
    LEFT_SHIFT,
    MIN_EXTENT,
)
from rastergraph.raster import IndexedCanvas, extrapolate
from rastergraph.scales import Axis, calculate_axis, map_to_pixels, padded_range, round_half_away
from rastergraph.series import DisplayPoint, Series


LOGGER = logging.getLogger(__name__)


class Chart:
    """Single-series line chart rendered into an indexed-color bitmap.

    A chart renders exactly one series; build a new instance for each image.
    """

    def __init__(
        self,
        width: int,
        height: int,
        background_color: str = DEFAULT_BACKGROUND_COLOR,
        axis_color: str = DEFAULT_AXIS_COLOR,
    ) -> None:
        if width < MIN_EXTENT or height < MIN_EXTENT:
            raise NotEnoughSpaceError()
        self.canvas = IndexedCanvas(width, height, background_color)
        self.background_index = self.canvas.background_index
        self.axis_index = self.canvas.add_color(axis_color)
        self.axis_x: Axis | None = None
        self.axis_y: Axis | None = None

    @classmethod
    def new(
        cls,
        width: int,
        height: int,
        background_color: str = DEFAULT_BACKGROUND_COLOR,
        axis_color: str = DEFAULT_AXIS_COLOR,
    ) -> "Chart":
        return cls(width, height, background_color, axis_color)

    @property
    def width(self) -> int:
        return self.canvas.width

    @property
    def height(self) -> int:
        return self.canvas.height

    def create_bmp_vec(self, series: Series) -> bytes:
        if self.axis_x is not None:
            raise RuntimeError("chart already rendered; create a new Chart for each series")

        # Register the line color first so a full palette fails before anything is painted.
        points_color = self.canvas.add_color(series.color)
        self.draw_axes(series)

        func_points = list(extrapolate(self.serie_to_points(series)))
        self.canvas.draw_points(func_points, points_color)
        LOGGER.debug("painted %d line pixels for %d points", len(func_points), len(series))

        return self.canvas.to_bytes()

    def draw_axes(self, series: Series) -> None:
        # Both axes are calibrated before any pixel is written.
        min_x, max_x = padded_range(series.min_x, series.max_x)
        min_y, max_y = padded_range(series.min_y, series.max_y)
        axis_x = calculate_axis(max_x, min_x, self.width)
        axis_y = calculate_axis(max_y, min_y, self.height).rotate()
        LOGGER.debug(
            "axis x=[%g, %g] step=%g ticks=%d; axis y=[%g, %g] step=%g ticks=%d",
            axis_x.min_value,
            axis_x.max_value,
            axis_x.tick_interval,
            axis_x.tick_count,
            axis_y.min_value,
            axis_y.max_value,
            axis_y.tick_interval,
            axis_y.tick_count,
        )

        self.canvas.draw_points(self.minor_net(axis_x, axis_y), self.axis_index)
        self.canvas.draw_points(axis_x.create_points(), self.axis_index)
        self.canvas.draw_points(axis_y.create_points(), self.axis_index)

        self.axis_x = axis_x
        self.axis_y = axis_y

    def minor_net(self, axis_x: Axis, axis_y: Axis) -> list[DisplayPoint]:
        """Dashed grid: every odd pixel of each tick's gridline."""
        net: list[DisplayPoint] = []
        for i in range(axis_x.tick_count):
            shift = LEFT_SHIFT + round_half_away(axis_x.tick_pixel_spacing * i)
            for j in range(LEFT_SHIFT, self.height - H_ARROW_HALF):
                if j % 2 != 0:
                    net.append(DisplayPoint(x=shift, y=j))

        for i in range(axis_y.tick_count):
            shift = LEFT_SHIFT + round_half_away(axis_y.tick_pixel_spacing * i)
            for j in range(LEFT_SHIFT, self.width - H_ARROW_HALF):
                if j % 2 != 0:
                    net.append(DisplayPoint(x=j, y=shift))
        return net

    def serie_to_points(self, series: Series) -> list[DisplayPoint]:
        if self.axis_x is None or self.axis_y is None:
            raise RuntimeError("axes are not calibrated; call draw_axes first")
        px, py = map_to_pixels(series.xs, series.ys, self.axis_x, self.axis_y, self.width, self.height)
        return [DisplayPoint(x=x, y=y) for x, y in zip(px.tolist(), py.tolist(), strict=True)]
