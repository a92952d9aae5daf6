from __future__ import annotations

from collections.abc import Collection, Iterator
from decimal import Decimal
from typing import Any

import numpy as np

from rastergraph.errors import InvalidPointsError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]


def normalize_points(points: Any) -> tuple[np.ndarray, np.ndarray]:
    """Coerce a point source into two float64 arrays of equal length.

    Accepted sources are collections of ``(x, y)`` pairs or ``Point`` values, numpy arrays of
    shape ``(n, 2)`` and pandas DataFrames with ``x``/``y`` columns (or exactly two numeric
    columns). Single-use iterators are rejected because the chart traverses its points more
    than once.
    """
    if points is None:
        raise InvalidPointsError("point source is required")

    if pd is not None and isinstance(points, pd.DataFrame):
        xs, ys = _coerce_dataframe(points)
    elif isinstance(points, np.ndarray):
        xs, ys = _coerce_ndarray(points)
    elif isinstance(points, Iterator):
        raise InvalidPointsError("point source must be re-iterable; pass a list or array instead of an iterator")
    elif isinstance(points, Collection) and not isinstance(points, (str, bytes, bytearray)):
        xs, ys = _coerce_pairs(points)
    else:
        raise InvalidPointsError(f"unsupported point source type: {type(points)!r}")

    finite = np.isfinite(xs) & np.isfinite(ys)
    if not np.all(finite):
        bad = int(np.flatnonzero(~finite)[0])
        raise InvalidPointsError(f"point at index {bad} is not finite: ({xs[bad]!r}, {ys[bad]!r})")
    return xs, ys


def _coerce_dataframe(frame: Any) -> tuple[np.ndarray, np.ndarray]:
    if "x" in frame.columns and "y" in frame.columns:
        cols = ["x", "y"]
    else:
        cols = [c for c in frame.columns if pd.api.types.is_numeric_dtype(frame[c])]
        if len(cols) != 2:
            raise InvalidPointsError("DataFrame input needs x/y columns or exactly two numeric columns")
    return _coerce_ndarray(frame[cols].to_numpy())


def _coerce_ndarray(arr: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    if arr.size == 0:
        return np.empty(0, dtype=np.float64), np.empty(0, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidPointsError(f"array input must have shape (n, 2), got {arr.shape}")
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        out = arr.astype(np.float64)
    else:
        out = np.empty(arr.shape, dtype=np.float64)
        for i, row in enumerate(arr.tolist()):
            out[i, 0] = _coerce_scalar(row[0], index=i)
            out[i, 1] = _coerce_scalar(row[1], index=i)
    return np.ascontiguousarray(out[:, 0]), np.ascontiguousarray(out[:, 1])


def _coerce_pairs(points: Collection[Any]) -> tuple[np.ndarray, np.ndarray]:
    xs = np.empty(len(points), dtype=np.float64)
    ys = np.empty(len(points), dtype=np.float64)
    for i, raw in enumerate(points):
        if hasattr(raw, "x") and hasattr(raw, "y"):
            xs[i] = _coerce_scalar(raw.x, index=i)
            ys[i] = _coerce_scalar(raw.y, index=i)
            continue
        try:
            x_raw, y_raw = raw
        except (TypeError, ValueError) as exc:
            raise InvalidPointsError(f"point at index {i} is not an (x, y) pair: {raw!r}") from exc
        xs[i] = _coerce_scalar(x_raw, index=i)
        ys[i] = _coerce_scalar(y_raw, index=i)
    return xs, ys


def _coerce_scalar(raw: Any, *, index: int) -> float:
    if isinstance(raw, Decimal):
        return float(raw)
    if isinstance(raw, (str, bytes)) or raw is None:
        raise InvalidPointsError(f"point at index {index} contains non-numeric value: {raw!r}")
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise InvalidPointsError(f"point at index {index} contains non-numeric value: {raw!r}") from exc
