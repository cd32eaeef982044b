"""Minimum-delta trackpoint decimation.

Keeps the first point of a segment, then every point whose planar
distance in degree space from the last *kept* point exceeds the
threshold.  This is not a geodesic distance: at the spacing of recorded
trackpoints the planar approximation only decides which near-duplicates
to drop, so it is adequate for display.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from gpx_overlay.core.config import validate_min_delta
from gpx_overlay.core.constants import DEFAULT_MIN_TRACK_POINT_DELTA

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from gpx_overlay.models.point import Point


def planar_distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points in lat/lon degrees."""
    return math.hypot(a.lat - b.lat, a.lon - b.lon)


def iter_simplified(
    points: Iterable[Point],
    min_delta: float = DEFAULT_MIN_TRACK_POINT_DELTA,
) -> Iterator[Point]:
    """Yield the decimated path in a single streaming pass.

    Raises:
        InvalidConfigError: If ``min_delta`` is negative or NaN.
    """
    validate_min_delta(min_delta)
    return _decimate(points, min_delta)


def _decimate(points: Iterable[Point], min_delta: float) -> Iterator[Point]:
    anchor: Point | None = None
    for point in points:
        if anchor is None or planar_distance(point, anchor) > min_delta:
            anchor = point
            yield point


def simplify_track(
    points: Iterable[Point],
    min_delta: float = DEFAULT_MIN_TRACK_POINT_DELTA,
) -> list[Point]:
    """Return the decimated path as a list (empty input gives ``[]``)."""
    return list(iter_simplified(points, min_delta))
