from __future__ import annotations


class GraphError(ValueError):
    """Base class for input that cannot be turned into a chart."""

    default_message = "invalid graph input"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class NotEnoughPointsError(GraphError):
    default_message = "There are not enough points to display on graph."


class NonUniquePointsError(GraphError):
    default_message = "There are only one unique point. Can't construct line."


class NotEnoughSpaceError(GraphError):
    default_message = "There are not enough width and height to form graph with axis."


class InvalidPointsError(GraphError):
    default_message = "point source must be a re-iterable collection of (x, y) pairs"


class InvalidColorError(GraphError):
    default_message = "unrecognized color descriptor"


class PaletteFullError(GraphError):
    default_message = "palette capacity exceeded"
