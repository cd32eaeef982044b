"""Geographic value types: Point and BoundingBox.

All coordinates are geographic decimal degrees.  Both types are frozen
so that a render pass can hand them to any surface without copying.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """A single plotted point extracted from a GPX element.

    Attributes:
        lat: Latitude in degrees.
        lon: Longitude in degrees.
        label: HTML-safe popup text (explicit ``<html>`` content or a
            synthesized multi-line description).
        kind: Local tag name of the source element (``"wpt"``, ``"trkpt"``).
    """

    lat: float
    lon: float
    label: str = ""
    kind: str = ""

    @property
    def position(self) -> tuple[float, float]:
        """Return ``(lat, lon)``."""
        return (self.lat, self.lon)

    def to_dict(self) -> dict[str, object]:
        return {"lat": self.lat, "lon": self.lon, "label": self.label, "kind": self.kind}


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned lat/lon rectangle.  Invariant: ``min <= max`` per axis.

    Emptiness is never encoded as an all-zero box; callers that may have
    seen no points use ``BoundingBox | None``.
    """

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    def __post_init__(self) -> None:
        if self.min_lat > self.max_lat or self.min_lon > self.max_lon:
            msg = (
                f"Inverted bounding box: lat [{self.min_lat}, {self.max_lat}], "
                f"lon [{self.min_lon}, {self.max_lon}]"
            )
            raise ValueError(msg)

    @classmethod
    def from_point(cls, lat: float, lon: float) -> BoundingBox:
        return cls(min_lat=lat, max_lat=lat, min_lon=lon, max_lon=lon)

    @property
    def center(self) -> tuple[float, float]:
        """Midpoint of the box as ``(lat, lon)``, not a centroid of the points."""
        return ((self.min_lat + self.max_lat) / 2, (self.min_lon + self.max_lon) / 2)

    @property
    def width(self) -> float:
        """Longitude extent in degrees."""
        return self.max_lon - self.min_lon

    @property
    def height(self) -> float:
        """Latitude extent in degrees."""
        return self.max_lat - self.min_lat

    @property
    def span(self) -> float:
        """The larger of width and height."""
        return max(self.width, self.height)

    @property
    def south_west(self) -> tuple[float, float]:
        return (self.min_lat, self.min_lon)

    @property
    def north_east(self) -> tuple[float, float]:
        return (self.max_lat, self.max_lon)

    def contains(self, lat: float, lon: float) -> bool:
        return self.min_lat <= lat <= self.max_lat and self.min_lon <= lon <= self.max_lon

    def extend(self, lat: float, lon: float) -> BoundingBox:
        """Return a new box widened to include ``(lat, lon)``."""
        return BoundingBox(
            min_lat=min(self.min_lat, lat),
            max_lat=max(self.max_lat, lat),
            min_lon=min(self.min_lon, lon),
            max_lon=max(self.max_lon, lon),
        )

    def union(self, other: BoundingBox) -> BoundingBox:
        """Return the smallest box containing both boxes."""
        return BoundingBox(
            min_lat=min(self.min_lat, other.min_lat),
            max_lat=max(self.max_lat, other.max_lat),
            min_lon=min(self.min_lon, other.min_lon),
            max_lon=max(self.max_lon, other.max_lon),
        )

    def to_dict(self) -> dict[str, float]:
        return {
            "min_lat": self.min_lat,
            "max_lat": self.max_lat,
            "min_lon": self.min_lon,
            "max_lon": self.max_lon,
        }
