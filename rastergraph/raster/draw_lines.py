from __future__ import annotations

from collections.abc import Iterable, Iterator

from rastergraph.scales import round_half_away
from rastergraph.series import DisplayPoint


def extrapolate(points: Iterable[DisplayPoint]) -> Iterator[DisplayPoint]:
    """Lazily fill the gaps between consecutive mapped points of a polyline.

    Every segment contributes its start pixel, so the concatenation is continuous. A pixel
    repeated back to back (two data points landing on the same pixel) is emitted once.
    """
    it = iter(points)
    start = next(it, None)
    if start is None:
        return
    last: DisplayPoint | None = None
    for end in it:
        for p in interpolate_segment(start, end):
            if p == end:
                break
            if p != last:
                yield p
                last = p
        start = end
    if start != last:
        yield start


def interpolate_segment(a: DisplayPoint, b: DisplayPoint) -> Iterator[DisplayPoint]:
    """Yield every pixel from ``a`` to ``b`` inclusive.

    The axis with the larger delta drives the walk one pixel per step; the other coordinate is
    the proportional rounded position.
    """
    dx = b.x - a.x
    dy = b.y - a.y
    steps = max(abs(dx), abs(dy))
    if steps == 0:
        yield a
        return

    if abs(dx) >= abs(dy):
        sx = 1 if dx > 0 else -1
        for i in range(steps + 1):
            yield DisplayPoint(x=a.x + sx * i, y=a.y + round_half_away(dy * i / steps))
    else:
        sy = 1 if dy > 0 else -1
        for i in range(steps + 1):
            yield DisplayPoint(x=a.x + round_half_away(dx * i / steps), y=a.y + sy * i)
