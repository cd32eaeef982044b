"""Data models.

Defines the data structures used throughout the renderer:
- Point / BoundingBox: geographic value types
- RenderStyle: track colour and width
- MarkerSpec / PolylineSpec / ViewportSpec / RenderResult: draw instructions
"""

from gpx_overlay.models.instructions import (
    MarkerSpec,
    PolylineSpec,
    RenderResult,
    ViewportSpec,
)
from gpx_overlay.models.point import BoundingBox, Point
from gpx_overlay.models.style import RenderStyle

__all__ = [
    "BoundingBox",
    "MarkerSpec",
    "Point",
    "PolylineSpec",
    "RenderResult",
    "RenderStyle",
    "ViewportSpec",
]
