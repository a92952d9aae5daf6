from __future__ import annotations


# Pixel layout of the chart frame. Fixtures rendered elsewhere depend on these exact values.
W_ARROW = 4
W_NUMBER = 4
H_NUMBER = 5
W_BORDER = 1
H_ARROW_HALF = 3

LEFT_SHIFT = W_BORDER + W_NUMBER + H_NUMBER
RIGHT_SHIFT = W_ARROW

MIN_EXTENT = 2 * H_NUMBER + 2 * W_NUMBER + W_ARROW + 2 * W_BORDER

TICK_LENGTH = 2
TICK_TARGET_SPACING_PX = 40

MAX_PALETTE_SIZE = 256

DEFAULT_WIDTH = 740
DEFAULT_HEIGHT = 480
DEFAULT_BACKGROUND_COLOR = "#ffffff"
DEFAULT_AXIS_COLOR = "#000000"
DEFAULT_SERIES_COLOR = "#0000ff"


def usable_extent(pixel_extent: int) -> int:
    return pixel_extent - LEFT_SHIFT - RIGHT_SHIFT
