from __future__ import annotations

import argparse
import logging
from pathlib import Path
import re
import sys
from typing import TextIO

from rastergraph.api import ChartStyle, create
from rastergraph.errors import GraphError, InvalidPointsError
from rastergraph.layout import (
    DEFAULT_AXIS_COLOR,
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_HEIGHT,
    DEFAULT_SERIES_COLOR,
    DEFAULT_WIDTH,
)


LOGGER = logging.getLogger(__name__)
_SPLIT = re.compile(r"[,;\s]+")


def parse_points(stream: TextIO) -> list[tuple[float, float]]:
    points: list[tuple[float, float]] = []
    for lineno, raw in enumerate(stream, start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        fields = _SPLIT.split(line)
        if len(fields) != 2:
            raise InvalidPointsError(f"line {lineno}: expected two values, got {len(fields)}")
        try:
            points.append((float(fields[0]), float(fields[1])))
        except ValueError as exc:
            raise InvalidPointsError(f"line {lineno}: non-numeric value in {line!r}") from exc
    return points


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="rastergraph", description="Render (x, y) points as a BMP line chart.")
    p.add_argument("points", help="Text file with one 'x y' or 'x,y' pair per line, or '-' for stdin.")
    p.add_argument("-o", "--out", type=Path, default=Path("graph.bmp"))
    p.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    p.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    p.add_argument("--background", default=DEFAULT_BACKGROUND_COLOR)
    p.add_argument("--axis", default=DEFAULT_AXIS_COLOR)
    p.add_argument("--color", default=DEFAULT_SERIES_COLOR)
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.points == "-":
            points = parse_points(sys.stdin)
        else:
            with open(args.points, encoding="utf-8") as fh:
                points = parse_points(fh)
        style = ChartStyle(background=args.background, axis=args.axis, series=args.color)
        data = create(points, args.width, args.height, style=style)
        args.out.write_bytes(data)
    except GraphError as exc:
        print(f"rastergraph: {exc}", file=sys.stderr)
        return 2
    except OSError as exc:
        print(f"rastergraph: I/O error: {exc}", file=sys.stderr)
        return 2

    LOGGER.info("wrote %s (%d bytes, %d points)", args.out, len(data), len(points))
    return 0
