"""Draw instructions emitted by the renderer.

Each render operation returns the instructions it sent to the map
surface, so callers (and tests) can inspect what was drawn without
depending on a particular surface implementation.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from gpx_overlay.models.point import BoundingBox, Point


@dataclass(frozen=True, slots=True)
class MarkerSpec:
    """A point marker with a click-to-show label.

    Attributes:
        lat: Marker latitude.
        lon: Marker longitude.
        label: HTML-safe popup content.
        kind: Source tag of the point (``"wpt"`` or ``"trkpt"``).
    """

    lat: float
    lon: float
    label: str = ""
    kind: str = ""

    @classmethod
    def from_point(cls, point: Point) -> MarkerSpec:
        return cls(lat=point.lat, lon=point.lon, label=point.label, kind=point.kind)

    def to_dict(self) -> dict[str, object]:
        return {"lat": self.lat, "lon": self.lon, "label": self.label, "kind": self.kind}


@dataclass(frozen=True, slots=True)
class PolylineSpec:
    """A simplified track segment drawn as one polyline.

    Attributes:
        points: Simplified ``(lat, lon)`` vertices in document order.
        color: CSS colour string.
        width: Line width in pixels.
        track_index: Zero-based index of the ``<trk>`` in the document.
        segment_index: Zero-based index of the ``<trkseg>`` within its track.
        raw_point_count: Trackpoints in the segment before simplification.
        length_m: Geodesic length of the simplified path in metres.
    """

    points: tuple[tuple[float, float], ...]
    color: str
    width: int
    track_index: int = 0
    segment_index: int = 0
    raw_point_count: int = 0
    length_m: float = 0.0

    @property
    def point_count(self) -> int:
        return len(self.points)

    def to_dict(self) -> dict[str, object]:
        return {
            "points": [list(p) for p in self.points],
            "color": self.color,
            "width": self.width,
            "track_index": self.track_index,
            "segment_index": self.segment_index,
            "raw_point_count": self.raw_point_count,
            "length_m": self.length_m,
        }


@dataclass(frozen=True, slots=True)
class ViewportSpec:
    """The single viewport instruction of a ``center_and_zoom`` call.

    Attributes:
        center_lat: Viewport centre latitude.
        center_lon: Viewport centre longitude.
        zoom: Discrete zoom sent via ``set_zoom``, or ``None`` when the
            surface fitted ``bounds`` itself.
        bounds: The framed bounding box (``None`` for the fallback view).
        map_type: Optional surface-specific base layer name.
        is_fallback: True when the document had no points to frame.
    """

    center_lat: float
    center_lon: float
    zoom: int | None = None
    bounds: BoundingBox | None = None
    map_type: str = ""
    is_fallback: bool = False

    @property
    def center(self) -> tuple[float, float]:
        return (self.center_lat, self.center_lon)

    def to_dict(self) -> dict[str, object]:
        return {
            "center_lat": self.center_lat,
            "center_lon": self.center_lon,
            "zoom": self.zoom,
            "bounds": self.bounds.to_dict() if self.bounds is not None else None,
            "map_type": self.map_type,
            "is_fallback": self.is_fallback,
        }


@dataclass(frozen=True, slots=True)
class RenderResult:
    """Everything one full ``GpxRenderer.render`` pass drew."""

    polylines: list[PolylineSpec] = field(default_factory=list)
    markers: list[MarkerSpec] = field(default_factory=list)
    viewport: ViewportSpec | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "polylines": [p.to_dict() for p in self.polylines],
            "markers": [m.to_dict() for m in self.markers],
            "viewport": self.viewport.to_dict() if self.viewport is not None else None,
        }
