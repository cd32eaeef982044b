"""Geodesic path length on the WGS 84 ellipsoid."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


def path_length_m(points: Sequence[tuple[float, float]]) -> float:
    """Return the geodesic length of a ``(lat, lon)`` path in metres.

    Uses ``pyproj.Geod`` so the figure is accurate at any latitude,
    unlike the degree-space distance used for decimation.
    """
    if len(points) < 2:
        return 0.0

    from pyproj import Geod

    geod = Geod(ellps="WGS84")
    lats = [p[0] for p in points]
    lons = [p[1] for p in points]
    return float(geod.line_length(lons, lats))
