from __future__ import annotations

from dataclasses import dataclass, replace
import math
import sys
from typing import Literal

import numpy as np

from rastergraph.errors import InvalidPointsError
from rastergraph.layout import (
    H_ARROW_HALF,
    LEFT_SHIFT,
    TICK_LENGTH,
    TICK_TARGET_SPACING_PX,
    W_BORDER,
    usable_extent,
)
from rastergraph.series import DisplayPoint


Orientation = Literal["horizontal", "vertical"]

# (upper bound on the mantissa, step) pairs; mantissas past the last bound step up a decade.
_ROUNDED_STEPS = ((1.5, 1.0), (3.0, 2.0), (7.0, 5.0))
_CEILING_STEPS = ((1.0, 1.0), (2.0, 2.0), (5.0, 5.0))


@dataclass(frozen=True)
class Axis:
    min_value: float
    max_value: float
    tick_interval: float
    tick_count: int
    tick_pixel_spacing: float
    pixel_extent: int
    orientation: Orientation = "horizontal"

    def rotate(self) -> "Axis":
        flipped: Orientation = "vertical" if self.orientation == "horizontal" else "horizontal"
        return replace(self, orientation=flipped)

    def tick_positions(self) -> list[int]:
        return [LEFT_SHIFT + round_half_away(self.tick_pixel_spacing * i) for i in range(self.tick_count + 1)]

    def create_points(self) -> list[DisplayPoint]:
        """Pixels of the solid axis line, its arrow head and the tick marks."""
        tip = self.pixel_extent - W_BORDER - 1
        along_across: list[tuple[int, int]] = [(i, LEFT_SHIFT) for i in range(LEFT_SHIFT, tip + 1)]
        for k in range(1, H_ARROW_HALF + 1):
            along_across.append((tip - k, LEFT_SHIFT + k))
            along_across.append((tip - k, LEFT_SHIFT - k))
        for pos in self.tick_positions():
            for k in range(1, TICK_LENGTH + 1):
                along_across.append((pos, LEFT_SHIFT - k))

        if self.orientation == "horizontal":
            return [DisplayPoint(x=a, y=c) for a, c in along_across]
        return [DisplayPoint(x=c, y=a) for a, c in along_across]


def calculate_axis(max_value: float, min_value: float, pixel_extent: int) -> Axis:
    if not max_value > min_value:
        raise ValueError("max_value must be > min_value")
    usable = usable_extent(pixel_extent)
    if usable <= 0:
        raise ValueError("pixel_extent leaves no room for the plot area")

    target = max(2, usable // TICK_TARGET_SPACING_PX)
    span = _nice_number(max_value - min_value, round_result=False)
    interval = _nice_number(span / (target - 1), round_result=True)

    lo = math.floor(min_value / interval) * interval
    hi = math.ceil(max_value / interval) * interval
    if not math.isfinite(hi - lo):
        raise InvalidPointsError(f"range [{min_value!r}, {max_value!r}] overflows once widened to ticks of {interval!r}")
    # Snap float drift back onto the interval grid without losing coverage of the data.
    lo = min(round(lo / interval) * interval, min_value)
    hi = max(round(hi / interval) * interval, max_value)

    tick_count = max(1, int(round((hi - lo) / interval)))
    return Axis(
        min_value=float(lo),
        max_value=float(hi),
        tick_interval=float(interval),
        tick_count=tick_count,
        tick_pixel_spacing=usable / tick_count,
        pixel_extent=int(pixel_extent),
    )


def map_to_pixels(
    xs: np.ndarray,
    ys: np.ndarray,
    axis_x: Axis,
    axis_y: Axis,
    width: int,
    height: int,
) -> tuple[np.ndarray, np.ndarray]:
    px = _map_axis(np.asarray(xs, dtype=np.float64), axis_x, width)
    py = _map_axis(np.asarray(ys, dtype=np.float64), axis_y, height)
    return px, py


def _map_axis(values: np.ndarray, axis: Axis, extent: int) -> np.ndarray:
    resolution = (axis.max_value - axis.min_value) / usable_extent(extent)
    idx = np.floor((values - axis.min_value) / resolution + 0.5).astype(np.int64)
    # Boundary rounding artifact: an index equal to the extent is pulled back inside.
    idx[idx == extent] -= 1
    np.maximum(idx, 0, out=idx)
    return idx + LEFT_SHIFT


def round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _nice_number(value: float, *, round_result: bool) -> float:
    """Snap ``value`` to 1, 2 or 5 (or 10) times a power of ten.

    With ``round_result`` the mantissa goes to the nearest step; otherwise to the next step up.
    """
    if not math.isfinite(value) or value < sys.float_info.min:
        raise InvalidPointsError(f"cannot derive a tick interval from a span of {value!r}")
    exp = math.floor(math.log10(value))
    magnitude = 10.0**exp
    mantissa = value / magnitude

    nice_frac = 10.0
    for bound, step in _ROUNDED_STEPS if round_result else _CEILING_STEPS:
        if (mantissa < bound) if round_result else (mantissa <= bound):
            nice_frac = step
            break

    nice = nice_frac * magnitude
    if not math.isfinite(nice):
        raise InvalidPointsError(f"tick interval for a span of {value!r} is not representable")
    return nice


def padded_range(min_value: float, max_value: float, buffer_ratio: float = 0.05) -> tuple[float, float]:
    """Widen a zero-width range so a flat dimension still gets a calibrated axis."""
    if max_value > min_value:
        return (min_value, max_value)
    delta = max(1.0, abs(min_value) * buffer_ratio)
    return (min_value - delta, max_value + delta)
