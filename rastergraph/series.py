from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
import math
import sys
from typing import Any

import numpy as np

from rastergraph.adapters import normalize_points
from rastergraph.errors import InvalidPointsError, NonUniquePointsError, NotEnoughPointsError
from rastergraph.layout import DEFAULT_SERIES_COLOR
from rastergraph.palette import resolve_color


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    @classmethod
    def from_pair(cls, pair: tuple[float, float]) -> "Point":
        x, y = pair
        return cls(x=float(x), y=float(y))

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class DisplayPoint:
    x: int
    y: int


class Series:
    """One validated data stream, plotted as a single line.

    Points are materialized once at construction so bounds computation and rendering can each
    traverse them independently.
    """

    def __init__(self, points: Any, color: str = DEFAULT_SERIES_COLOR) -> None:
        xs, ys = normalize_points(points)
        if xs.size < 2:
            raise NotEnoughPointsError()
        if not np.any((xs[1:] != xs[0]) | (ys[1:] != ys[0])):
            raise NonUniquePointsError()

        resolve_color(color)
        max_x, min_x, max_y, min_y = _calculate_max_min(xs, ys)
        _check_span("x", min_x, max_x)
        _check_span("y", min_y, max_y)

        xs.setflags(write=False)
        ys.setflags(write=False)
        self._xs = xs
        self._ys = ys
        self._color = color
        self._max_x, self._min_x, self._max_y, self._min_y = max_x, min_x, max_y, min_y

    @classmethod
    def new(cls, points: Any, color: str = DEFAULT_SERIES_COLOR) -> "Series":
        return cls(points, color)

    @property
    def color(self) -> str:
        return self._color

    @property
    def xs(self) -> np.ndarray:
        return self._xs

    @property
    def ys(self) -> np.ndarray:
        return self._ys

    @property
    def min_x(self) -> float:
        return self._min_x

    @property
    def max_x(self) -> float:
        return self._max_x

    @property
    def min_y(self) -> float:
        return self._min_y

    @property
    def max_y(self) -> float:
        return self._max_y

    def points(self) -> Iterator[Point]:
        for x, y in zip(self._xs.tolist(), self._ys.tolist(), strict=True):
            yield Point(x=x, y=y)

    def __iter__(self) -> Iterator[Point]:
        return self.points()

    def __len__(self) -> int:
        return int(self._xs.size)

    def __repr__(self) -> str:
        return (
            f"Series(n={len(self)}, color={self._color!r}, "
            f"x=[{self._min_x:g}, {self._max_x:g}], y=[{self._min_y:g}, {self._max_y:g}])"
        )


def _calculate_max_min(xs: np.ndarray, ys: np.ndarray) -> tuple[float, float, float, float]:
    return (float(np.max(xs)), float(np.min(xs)), float(np.max(ys)), float(np.min(ys)))


def _check_span(label: str, lo: float, hi: float) -> None:
    # A flat dimension is padded later; anything else must be a finite, normal float width.
    span = hi - lo
    if span == 0.0:
        return
    if not math.isfinite(span) or span < sys.float_info.min:
        raise InvalidPointsError(f"{label} range [{lo!r}, {hi!r}] is too wide or too narrow to calibrate")
