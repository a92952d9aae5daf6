from __future__ import annotations

from collections.abc import Sequence
import io
import logging

import numpy as np
from PIL import Image


LOGGER = logging.getLogger(__name__)


def encode_indexed_bmp(
    width: int,
    height: int,
    palette_rgb: Sequence[tuple[int, int, int]],
    pixels: np.ndarray,
) -> bytes:
    """Encode a palette-index buffer as an 8-bit BMP.

    Row 0 of ``pixels`` becomes the bottom row of the image, which is also the first row BMP
    stores on disk.
    """
    if pixels.dtype != np.uint8:
        raise ValueError("pixels must be uint8")
    if pixels.ndim != 2 or pixels.shape != (height, width):
        raise ValueError(f"pixels must have shape ({height}, {width}), got {pixels.shape}")
    if not palette_rgb:
        raise ValueError("palette must contain at least one color")
    if len(palette_rgb) > 256:
        raise ValueError("palette must contain at most 256 colors")
    if int(pixels.max()) >= len(palette_rgb):
        raise ValueError(f"pixel index {int(pixels.max())} is outside the {len(palette_rgb)}-color palette")

    flat: list[int] = []
    for r, g, b in palette_rgb:
        flat.extend((int(r), int(g), int(b)))

    image = Image.frombytes("P", (width, height), np.ascontiguousarray(np.flipud(pixels)).tobytes())
    image.putpalette(flat, rawmode="RGB")
    out = io.BytesIO()
    image.save(out, format="BMP")
    data = out.getvalue()
    LOGGER.debug("encoded %dx%d BMP with %d colors (%d bytes)", width, height, len(palette_rgb), len(data))
    return data
