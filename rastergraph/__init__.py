from rastergraph.api import ChartStyle, create
from rastergraph.chart import Chart
from rastergraph.errors import (
    GraphError,
    InvalidColorError,
    InvalidPointsError,
    NonUniquePointsError,
    NotEnoughPointsError,
    NotEnoughSpaceError,
    PaletteFullError,
)
from rastergraph.palette import Palette
from rastergraph.scales import Axis, calculate_axis
from rastergraph.series import DisplayPoint, Point, Series

__all__ = [
    "Axis",
    "Chart",
    "ChartStyle",
    "DisplayPoint",
    "GraphError",
    "InvalidColorError",
    "InvalidPointsError",
    "NonUniquePointsError",
    "NotEnoughPointsError",
    "NotEnoughSpaceError",
    "Palette",
    "PaletteFullError",
    "Point",
    "Series",
    "calculate_axis",
    "create",
]
