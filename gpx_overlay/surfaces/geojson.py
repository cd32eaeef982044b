"""GeoJSON surface: overlays as a FeatureCollection built with shapely.

Markers become ``Point`` features and polylines ``LineString`` features
(a single-vertex polyline degrades to a ``Point``).  GeoJSON has no
notion of a viewport, so the centre and zoom are written as a
``viewport`` foreign member and fit-bounds is not supported natively.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from gpx_overlay.surfaces.base import MapSurface

if TYPE_CHECKING:
    from collections.abc import Sequence

    from shapely.geometry.base import BaseGeometry

    from gpx_overlay.models.point import BoundingBox


class GeoJsonSurface(MapSurface):
    """Accumulates overlays as GeoJSON features (coordinates are ``[lon, lat]``)."""

    name = "geojson"

    def __init__(self) -> None:
        self._geometries: list[BaseGeometry] = []
        self._properties: list[dict[str, object]] = []
        self._viewport: dict[str, object] = {}

    @property
    def supports_fit_bounds(self) -> bool:
        return False

    def add_marker(self, position: tuple[float, float], label: str) -> None:
        from shapely.geometry import Point

        lat, lon = position
        self._append(Point(lon, lat), {"overlay": "marker", "label": label})

    def add_polyline(
        self,
        points: Sequence[tuple[float, float]],
        color: str,
        width: int,
    ) -> None:
        from shapely.geometry import LineString, Point

        coords = [(lon, lat) for lat, lon in points]
        if not coords:
            return
        geometry = LineString(coords) if len(coords) >= 2 else Point(coords[0])
        self._append(geometry, {"overlay": "polyline", "color": color, "width": width})

    def set_center(self, lat: float, lon: float) -> None:
        self._viewport["center"] = [lon, lat]

    def set_zoom(self, level: int) -> None:
        self._viewport["zoom"] = level

    def fit_bounds(self, box: BoundingBox) -> None:
        self._viewport["bounds"] = [box.min_lon, box.min_lat, box.max_lon, box.max_lat]

    def to_dict(self) -> dict[str, object]:
        """Return the FeatureCollection, with ``bbox`` when anything was drawn."""
        from shapely.geometry import GeometryCollection, mapping

        collection: dict[str, object] = {
            "type": "FeatureCollection",
            "features": [
                {"type": "Feature", "geometry": mapping(geom), "properties": dict(props)}
                for geom, props in zip(self._geometries, self._properties, strict=True)
            ],
        }
        if self._geometries:
            collection["bbox"] = list(GeometryCollection(self._geometries).bounds)
        if self._viewport:
            collection["viewport"] = dict(self._viewport)
        return collection

    def to_json(self, *, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def _append(self, geometry: BaseGeometry, properties: dict[str, object]) -> None:
        self._geometries.append(geometry)
        self._properties.append(properties)
