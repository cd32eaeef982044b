"""Render style for track polylines."""

from __future__ import annotations

from dataclasses import dataclass

from gpx_overlay.core.constants import DEFAULT_TRACK_COLOR, DEFAULT_TRACK_WIDTH


@dataclass(frozen=True, slots=True)
class RenderStyle:
    """Colour and width passed through to the map surface unchanged.

    Attributes:
        track_color: CSS colour string (e.g. ``"#ff00ff"``).
        track_width: Line width in pixels, must be > 0.
    """

    track_color: str = DEFAULT_TRACK_COLOR
    track_width: int = DEFAULT_TRACK_WIDTH

    def to_dict(self) -> dict[str, object]:
        return {"track_color": self.track_color, "track_width": self.track_width}
