"""Bounding box, centre and zoom for a set of plotted points.

Bounds are a running min/max fold: the first point seen (of any kind)
initialises the box and every later point widens it.  Emptiness is
tracked with an explicit point count, so a genuine point at (0, 0) is
framed like any other.

Zoom policies:
- ``fit_bounds``: hand the box to the surface and let it pick the zoom.
- ``computed``: ``level = floor(log2(span / K))`` where ``K`` is
  ``zoom_step_degrees``.  Levels count outward (a bigger box gives a
  bigger level), so the surface zoom is ``ZOOM_LEVEL_OFFSET - level``,
  clamped to the configured ``[min_zoom, max_zoom]``.

An empty point set never raises: it produces the configured fallback
viewport.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from gpx_overlay.core.constants import (
    DEFAULT_BOUNDS_TAGS,
    DEFAULT_MAX_ZOOM,
    DEFAULT_MIN_ZOOM,
    DEFAULT_ZOOM_STEP_DEGREES,
    ZOOM_LEVEL_OFFSET,
)
from gpx_overlay.models.instructions import ViewportSpec
from gpx_overlay.models.point import BoundingBox
from gpx_overlay.parse_gpx import extract_positions

if TYPE_CHECKING:
    from collections.abc import Iterable

    from gpx_overlay.core.config import RenderConfig
    from gpx_overlay.models.point import Point
    from gpx_overlay.parse_gpx import GpxDocument

logger = logging.getLogger("gpx_overlay.geometry.bounds")


class BoundsAccumulator:
    """Running min/max over every point added so far."""

    __slots__ = ("_max_lat", "_max_lon", "_min_lat", "_min_lon", "count")

    def __init__(self) -> None:
        self.count = 0
        self._min_lat = self._max_lat = 0.0
        self._min_lon = self._max_lon = 0.0

    def add(self, lat: float, lon: float) -> None:
        if self.count == 0:
            self._min_lat = self._max_lat = lat
            self._min_lon = self._max_lon = lon
        else:
            self._min_lat = min(self._min_lat, lat)
            self._max_lat = max(self._max_lat, lat)
            self._min_lon = min(self._min_lon, lon)
            self._max_lon = max(self._max_lon, lon)
        self.count += 1

    def add_points(self, points: Iterable[Point]) -> None:
        for point in points:
            self.add(point.lat, point.lon)

    def add_positions(self, positions: Iterable[tuple[float, float]]) -> None:
        for lat, lon in positions:
            self.add(lat, lon)

    @property
    def box(self) -> BoundingBox | None:
        """The current box, or ``None`` if no point has been added."""
        if self.count == 0:
            return None
        return BoundingBox(
            min_lat=self._min_lat,
            max_lat=self._max_lat,
            min_lon=self._min_lon,
            max_lon=self._max_lon,
        )


def compute_bounds(points: Iterable[Point]) -> BoundingBox | None:
    """Return the bounding box of ``points``, or ``None`` when empty."""
    acc = BoundsAccumulator()
    acc.add_points(points)
    return acc.box


def compute_document_bounds(
    doc: GpxDocument,
    tags: Iterable[str] = DEFAULT_BOUNDS_TAGS,
) -> BoundingBox | None:
    """Scan every point element of the given kinds and fold their bounds.

    Tags are scanned in order (``trkpt`` then ``wpt`` by default); other
    point-like kinds such as ``photo`` can be added.  Only coordinates are
    read (no labels are built).  Malformed points are
    skipped with a warning.
    """
    acc = BoundsAccumulator()
    for tag in tags:
        acc.add_positions(extract_positions(doc.find_by_tag(tag), context=f"bounds:{tag}"))
    return acc.box


def merge_bounds(boxes: Iterable[BoundingBox | None]) -> BoundingBox | None:
    """Union several boxes, ignoring ``None`` entries."""
    merged: BoundingBox | None = None
    for box in boxes:
        if box is None:
            continue
        merged = box if merged is None else merged.union(box)
    return merged


# ---------------------------------------------------------------------------
# Zoom
# ---------------------------------------------------------------------------


def compute_zoom_level(
    box: BoundingBox,
    *,
    step_degrees: float = DEFAULT_ZOOM_STEP_DEGREES,
) -> int:
    """Outward zoom level ``floor(log2(span / step_degrees))``, never below 0.

    Spans smaller than ``step_degrees`` (including single-point boxes)
    are level 0.
    """
    span = max(box.span, step_degrees)
    return int(math.floor(math.log2(span / step_degrees)))


def zoom_for_bounds(
    box: BoundingBox,
    *,
    step_degrees: float = DEFAULT_ZOOM_STEP_DEGREES,
    min_zoom: int = DEFAULT_MIN_ZOOM,
    max_zoom: int = DEFAULT_MAX_ZOOM,
) -> int:
    """Surface zoom (larger is closer) that frames ``box``, clamped to range."""
    zoom = ZOOM_LEVEL_OFFSET - compute_zoom_level(box, step_degrees=step_degrees)
    return max(min_zoom, min(max_zoom, zoom))


def compute_viewport(
    box: BoundingBox | None,
    config: RenderConfig,
    *,
    delegate_zoom: bool,
    map_type: str = "",
) -> ViewportSpec:
    """Build the viewport instruction for ``box``.

    Args:
        box: Bounds to frame, or ``None`` for an empty document.
        config: Supplies the zoom tuning and fallback viewport.
        delegate_zoom: When true the surface fits ``bounds`` itself and
            ``zoom`` is left as ``None``.
        map_type: Optional base layer name passed through to the surface.
    """
    if box is None:
        logger.info(
            "No points to frame, using fallback viewport | center=(%.6f, %.6f) | zoom=%d",
            config.fallback_lat,
            config.fallback_lon,
            config.fallback_zoom,
        )
        return ViewportSpec(
            center_lat=config.fallback_lat,
            center_lon=config.fallback_lon,
            zoom=config.fallback_zoom,
            map_type=map_type,
            is_fallback=True,
        )

    center_lat, center_lon = box.center
    zoom: int | None = None
    if not delegate_zoom:
        zoom = zoom_for_bounds(
            box,
            step_degrees=config.zoom_step_degrees,
            min_zoom=config.min_zoom,
            max_zoom=config.max_zoom,
        )

    return ViewportSpec(
        center_lat=center_lat,
        center_lon=center_lon,
        zoom=zoom,
        bounds=box,
        map_type=map_type,
    )
