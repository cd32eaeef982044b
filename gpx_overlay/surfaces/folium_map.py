"""Leaflet map surface built with folium.

Drawing calls are buffered and turned into a ``folium.Map`` by
``build_map()``, so the viewport can be set after the overlays without
reaching into folium's option internals.  Labels become popup HTML with
line breaks as ``<br>``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gpx_overlay.surfaces.base import MapSurface

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    import folium

    from gpx_overlay.models.point import BoundingBox

logger = logging.getLogger(__name__)

DEFAULT_TILES = "OpenStreetMap"
DEFAULT_POPUP_MAX_WIDTH = 300
DEFAULT_ZOOM_START = 1

# Map-type names (case-insensitive) to folium / xyzservices tile names.
MAP_TYPE_TILES: dict[str, str] = {
    "roadmap": "OpenStreetMap",
    "normal": "OpenStreetMap",
    "street": "OpenStreetMap",
    "satellite": "Esri.WorldImagery",
    "hybrid": "Esri.WorldImagery",
    "terrain": "OpenTopoMap",
    "physical": "OpenTopoMap",
    "topo": "OpenTopoMap",
    "light": "CartoDB positron",
}


def resolve_tiles(map_type: str) -> str | None:
    """Return the folium tile name for ``map_type``, or ``None`` if unknown.

    Both map-type aliases (``satellite``, ``terrain`` ...) and the tile
    names themselves are accepted.
    """
    key = map_type.strip().lower()
    if key in MAP_TYPE_TILES:
        return MAP_TYPE_TILES[key]
    for tiles in MAP_TYPE_TILES.values():
        if tiles.lower() == key:
            return tiles
    return None


def label_to_html(label: str) -> str:
    """Turn a newline-delimited label into popup HTML."""
    return label.replace("\r\n", "\n").replace("\n", "<br>")


class FoliumSurface(MapSurface):
    """Collects overlays and renders them onto a folium (Leaflet) map."""

    name = "folium"

    def __init__(
        self,
        *,
        tiles: str = DEFAULT_TILES,
        popup_max_width: int = DEFAULT_POPUP_MAX_WIDTH,
    ) -> None:
        self._tiles = tiles
        self._popup_max_width = popup_max_width
        self._markers: list[tuple[tuple[float, float], str]] = []
        self._polylines: list[tuple[list[tuple[float, float]], str, int]] = []
        self._center: tuple[float, float] = (0.0, 0.0)
        self._zoom: int = DEFAULT_ZOOM_START
        self._bounds: BoundingBox | None = None
        self._map_type = ""

    def add_marker(self, position: tuple[float, float], label: str) -> None:
        self._markers.append((position, label))

    def add_polyline(
        self,
        points: Sequence[tuple[float, float]],
        color: str,
        width: int,
    ) -> None:
        self._polylines.append((list(points), color, width))

    def set_center(self, lat: float, lon: float) -> None:
        self._center = (lat, lon)

    def set_zoom(self, level: int) -> None:
        self._zoom = level
        self._bounds = None

    def fit_bounds(self, box: BoundingBox) -> None:
        self._bounds = box

    def set_map_type(self, map_type: str) -> None:
        """Switch the base layer.  Unknown names keep the configured tiles."""
        tiles = resolve_tiles(map_type)
        if tiles is None:
            logger.warning(
                "Unknown map type, keeping default tiles | map_type=%s | tiles=%s",
                map_type,
                self._tiles,
            )
            return
        self._map_type = tiles

    def build_map(self) -> folium.Map:
        """Create a ``folium.Map`` holding every buffered overlay."""
        import folium

        fmap = folium.Map(
            location=list(self._center),
            zoom_start=self._zoom,
            tiles=self._map_type or self._tiles,
        )

        for points, color, width in self._polylines:
            folium.PolyLine(
                locations=[list(p) for p in points],
                color=color,
                weight=width,
            ).add_to(fmap)

        for (lat, lon), label in self._markers:
            folium.Marker(
                location=[lat, lon],
                popup=folium.Popup(label_to_html(label), max_width=self._popup_max_width),
            ).add_to(fmap)

        if self._bounds is not None:
            fmap.fit_bounds([list(self._bounds.south_west), list(self._bounds.north_east)])

        logger.debug(
            "Built folium map | markers=%d | polylines=%d | fitted=%s",
            len(self._markers),
            len(self._polylines),
            self._bounds is not None,
        )
        return fmap

    def to_html(self) -> str:
        """Render the map to a standalone HTML document."""
        return self.build_map().get_root().render()

    def save(self, path: Path | str) -> None:
        """Write the map as a standalone HTML file."""
        self.build_map().save(str(path))
        logger.info("Saved folium map | path=%s", path)
