"""In-memory surface that records every drawing call as a plain dict.

Useful for headless rendering (e.g. returning instructions as JSON to a
browser that draws them itself) and for inspecting renderer output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gpx_overlay.surfaces.base import MapSurface

if TYPE_CHECKING:
    from collections.abc import Sequence

    from gpx_overlay.models.point import BoundingBox


class RecordingSurface(MapSurface):
    """Append-only log of surface instructions."""

    name = "recording"

    def __init__(self, *, fit_bounds: bool = True) -> None:
        self._fit_bounds = fit_bounds
        self.instructions: list[dict[str, object]] = []

    @property
    def supports_fit_bounds(self) -> bool:
        return self._fit_bounds

    def add_marker(self, position: tuple[float, float], label: str) -> None:
        lat, lon = position
        self.instructions.append({"op": "add_marker", "lat": lat, "lon": lon, "label": label})

    def add_polyline(
        self,
        points: Sequence[tuple[float, float]],
        color: str,
        width: int,
    ) -> None:
        self.instructions.append(
            {
                "op": "add_polyline",
                "points": [list(p) for p in points],
                "color": color,
                "width": width,
            }
        )

    def set_center(self, lat: float, lon: float) -> None:
        self.instructions.append({"op": "set_center", "lat": lat, "lon": lon})

    def set_zoom(self, level: int) -> None:
        self.instructions.append({"op": "set_zoom", "level": level})

    def fit_bounds(self, box: BoundingBox) -> None:
        self.instructions.append({"op": "fit_bounds", **box.to_dict()})

    def set_map_type(self, map_type: str) -> None:
        self.instructions.append({"op": "set_map_type", "map_type": map_type})

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def ops(self) -> list[str]:
        """Instruction names in call order."""
        return [str(i["op"]) for i in self.instructions]

    def of(self, op: str) -> list[dict[str, object]]:
        """Return every recorded instruction named ``op``."""
        return [i for i in self.instructions if i["op"] == op]

    def clear(self) -> None:
        self.instructions.clear()
