from .canvas import IndexedCanvas, draw_points, new_canvas
from .draw_lines import extrapolate, interpolate_segment

__all__ = [
    "IndexedCanvas",
    "draw_points",
    "extrapolate",
    "interpolate_segment",
    "new_canvas",
]
