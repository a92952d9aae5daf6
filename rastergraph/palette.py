from __future__ import annotations

import logging

from PIL import ImageColor

from rastergraph.errors import InvalidColorError, PaletteFullError
from rastergraph.layout import MAX_PALETTE_SIZE


LOGGER = logging.getLogger(__name__)

RGB = tuple[int, int, int]


class Palette:
    """Registry mapping color descriptors to small, stable palette indexes."""

    def __init__(self, capacity: int = MAX_PALETTE_SIZE) -> None:
        if capacity <= 0 or capacity > MAX_PALETTE_SIZE:
            raise ValueError(f"capacity must be in 1..{MAX_PALETTE_SIZE}")
        self._capacity = capacity
        self._colors: list[RGB] = []
        self._index_by_rgb: dict[RGB, int] = {}
        self._index_by_descriptor: dict[str, int] = {}

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def colors(self) -> list[RGB]:
        return list(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __contains__(self, descriptor: object) -> bool:
        return isinstance(descriptor, str) and descriptor in self._index_by_descriptor

    def add_color(self, descriptor: str) -> int:
        cached = self._index_by_descriptor.get(descriptor)
        if cached is not None:
            return cached

        rgb = resolve_color(descriptor)
        index = self._index_by_rgb.get(rgb)
        if index is not None:
            LOGGER.debug("color %r aliases palette entry %d %s", descriptor, index, rgb)
        else:
            if len(self._colors) >= self._capacity:
                raise PaletteFullError(f"palette already holds {self._capacity} colors; cannot add {descriptor!r}")
            index = len(self._colors)
            self._colors.append(rgb)
            self._index_by_rgb[rgb] = index
        self._index_by_descriptor[descriptor] = index
        return index


def resolve_color(descriptor: str) -> RGB:
    if not isinstance(descriptor, str) or not descriptor.strip():
        raise InvalidColorError(f"color descriptor must be a non-empty string, got {descriptor!r}")
    try:
        value = ImageColor.getrgb(descriptor.strip())
    except ValueError as exc:
        raise InvalidColorError(f"unrecognized color descriptor: {descriptor!r}") from exc
    return (int(value[0]), int(value[1]), int(value[2]))
