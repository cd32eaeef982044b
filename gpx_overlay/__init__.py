"""GPX Map Overlay Renderer.

Turns a parsed GPX document (waypoints and tracks) into map overlays:
point markers with popup labels, decimated track polylines, and a
viewport that frames everything that was drawn.
"""

__version__ = "0.1.0"
