"""Shared constants: single source of truth.

Centralises GPX tag names, render defaults and zoom tuning values that
are used across the parser, the geometry helpers and the renderer.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# GPX vocabulary
# ---------------------------------------------------------------------------

GPX_NAMESPACES: tuple[str, ...] = (
    "http://www.topografix.com/GPX/1/1",
    "http://www.topografix.com/GPX/1/0",
)
"""Namespaces a ``<gpx>`` root may carry. Lookups are namespace-agnostic."""

TAG_GPX = "gpx"
TAG_TRACK = "trk"
TAG_SEGMENT = "trkseg"
TAG_TRACKPOINT = "trkpt"
TAG_WAYPOINT = "wpt"
TAG_RICH_DESCRIPTION = "html"

POINT_KIND_NAMES: dict[str, str] = {
    TAG_WAYPOINT: "Waypoint",
    TAG_TRACKPOINT: "Track Point",
}
"""Human-readable label headers, keyed by point tag."""

DEFAULT_BOUNDS_TAGS: tuple[str, ...] = (TAG_TRACKPOINT, TAG_WAYPOINT)

# ---------------------------------------------------------------------------
# Render defaults
# ---------------------------------------------------------------------------

DEFAULT_TRACK_COLOR = "#ff00ff"
DEFAULT_TRACK_WIDTH = 5
DEFAULT_MIN_TRACK_POINT_DELTA = 0.0001
"""Minimum planar distance (degrees) between kept trackpoints."""

DEFAULT_MIN_POLYLINE_POINTS = 1

# ---------------------------------------------------------------------------
# Viewport
# ---------------------------------------------------------------------------

ZOOM_POLICY_FIT_BOUNDS = "fit_bounds"
ZOOM_POLICY_COMPUTED = "computed"
ZOOM_POLICIES: frozenset[str] = frozenset({ZOOM_POLICY_FIT_BOUNDS, ZOOM_POLICY_COMPUTED})

DEFAULT_ZOOM_STEP_DEGREES = 0.0035
"""Box span (degrees) that corresponds to the innermost computed level."""

ZOOM_LEVEL_OFFSET = 17
"""Surface zoom of computed level 0; each outward level subtracts one."""

DEFAULT_MIN_ZOOM = 0
DEFAULT_MAX_ZOOM = 18

DEFAULT_FALLBACK_LAT = 49.327667
DEFAULT_FALLBACK_LON = -122.942333
DEFAULT_FALLBACK_ZOOM = 14

DEFAULT_SURFACE = "recording"
