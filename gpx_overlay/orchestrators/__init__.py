"""Render orchestration.

- renderer: ``GpxRenderer``: tracks, waypoints and viewport onto a surface
"""

from gpx_overlay.orchestrators.renderer import GpxRenderer

__all__ = ["GpxRenderer"]
