from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from rastergraph.encode import encode_indexed_bmp
from rastergraph.palette import Palette
from rastergraph.series import DisplayPoint


def new_canvas(width: int, height: int, index: int = 0) -> np.ndarray:
    return np.full((height, width), index, dtype=np.uint8)


def draw_points(dst: np.ndarray, points: Iterable[DisplayPoint], index: int) -> None:
    pts = points if isinstance(points, list) else list(points)
    if not pts:
        return
    xs = np.fromiter((p.x for p in pts), dtype=np.int64, count=len(pts))
    ys = np.fromiter((p.y for p in pts), dtype=np.int64, count=len(pts))
    keep = (xs >= 0) & (xs < dst.shape[1]) & (ys >= 0) & (ys < dst.shape[0])
    dst[ys[keep], xs[keep]] = index


class IndexedCanvas:
    """Row-major palette-index pixel buffer plus the palette it refers to."""

    def __init__(self, width: int, height: int, background_color: str, *, palette: Palette | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        self.width = width
        self.height = height
        self.palette = palette if palette is not None else Palette()
        self.background_index = self.palette.add_color(background_color)
        self.pixels = new_canvas(width, height, self.background_index)

    def add_color(self, descriptor: str) -> int:
        return self.palette.add_color(descriptor)

    def draw_points(self, points: Iterable[DisplayPoint], index: int) -> None:
        draw_points(self.pixels, points, index)

    def to_bytes(self) -> bytes:
        return encode_indexed_bmp(self.width, self.height, self.palette.colors, self.pixels)
