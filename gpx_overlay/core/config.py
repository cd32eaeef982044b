"""Render configuration loaded from environment variables.

All configuration values have defaults matching the classic GPX viewer
behaviour (magenta 5 px tracks, 0.0001 degree decimation).

Fail-fast validation:
    ``from_env()`` and ``validate_config()`` raise ``InvalidConfigError``
    if any value is out of its valid range, so a bad deployment setting
    surfaces at startup instead of as odd-looking maps.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from gpx_overlay.core.constants import (
    DEFAULT_BOUNDS_TAGS,
    DEFAULT_FALLBACK_LAT,
    DEFAULT_FALLBACK_LON,
    DEFAULT_FALLBACK_ZOOM,
    DEFAULT_MAX_ZOOM,
    DEFAULT_MIN_POLYLINE_POINTS,
    DEFAULT_MIN_TRACK_POINT_DELTA,
    DEFAULT_MIN_ZOOM,
    DEFAULT_SURFACE,
    DEFAULT_TRACK_COLOR,
    DEFAULT_TRACK_WIDTH,
    DEFAULT_ZOOM_STEP_DEGREES,
    ZOOM_POLICIES,
    ZOOM_POLICY_FIT_BOUNDS,
)
from gpx_overlay.core.exceptions import InvalidConfigError
from gpx_overlay.models.style import RenderStyle

_TRUE_VALUES = frozenset({"1", "true", "yes", "y", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "n", "off"})


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Owned by one ``GpxRenderer`` per render session and replaced wholesale
    by ``GpxRenderer.configure``; it is never mutated in place.

    Attributes:
        style: Track colour and width passed through to the surface.
        min_track_point_delta: Decimation threshold in degrees (>= 0).
        min_polyline_points: Smallest simplified path that is still drawn.
        mark_segment_starts: Drop a marker on the first point of every segment.
        bounds_tags: Point tags scanned when framing the viewport.
        zoom_policy: ``"fit_bounds"`` (delegate to surface) or ``"computed"``.
        zoom_step_degrees: Span tuning constant for the computed policy.
        min_zoom: Lowest zoom the surface accepts.
        max_zoom: Highest zoom the surface accepts.
        fallback_lat: Viewport latitude used when the document has no points.
        fallback_lon: Viewport longitude used when the document has no points.
        fallback_zoom: Viewport zoom used when the document has no points.
        surface: Default map surface name for ``get_surface``.
    """

    style: RenderStyle = field(default_factory=RenderStyle)
    min_track_point_delta: float = DEFAULT_MIN_TRACK_POINT_DELTA
    min_polyline_points: int = DEFAULT_MIN_POLYLINE_POINTS
    mark_segment_starts: bool = False
    bounds_tags: tuple[str, ...] = DEFAULT_BOUNDS_TAGS
    zoom_policy: str = ZOOM_POLICY_FIT_BOUNDS
    zoom_step_degrees: float = DEFAULT_ZOOM_STEP_DEGREES
    min_zoom: int = DEFAULT_MIN_ZOOM
    max_zoom: int = DEFAULT_MAX_ZOOM
    fallback_lat: float = DEFAULT_FALLBACK_LAT
    fallback_lon: float = DEFAULT_FALLBACK_LON
    fallback_zoom: int = DEFAULT_FALLBACK_ZOOM
    surface: str = DEFAULT_SURFACE

    @classmethod
    def from_env(cls) -> RenderConfig:
        """Load and validate configuration from environment variables.

        Raises:
            InvalidConfigError: If a value is out of range.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``GPX_TRACK_WIDTH=wide``).
        """
        config = cls(
            style=RenderStyle(
                track_color=os.getenv("GPX_TRACK_COLOR", DEFAULT_TRACK_COLOR),
                track_width=int(os.getenv("GPX_TRACK_WIDTH", str(DEFAULT_TRACK_WIDTH))),
            ),
            min_track_point_delta=float(
                os.getenv("GPX_MIN_TRACK_POINT_DELTA", str(DEFAULT_MIN_TRACK_POINT_DELTA))
            ),
            min_polyline_points=int(
                os.getenv("GPX_MIN_POLYLINE_POINTS", str(DEFAULT_MIN_POLYLINE_POINTS))
            ),
            mark_segment_starts=_env_bool("GPX_MARK_SEGMENT_STARTS", default=False),
            bounds_tags=_env_tags("GPX_BOUNDS_TAGS", DEFAULT_BOUNDS_TAGS),
            zoom_policy=os.getenv("GPX_ZOOM_POLICY", ZOOM_POLICY_FIT_BOUNDS).strip().lower(),
            zoom_step_degrees=float(
                os.getenv("GPX_ZOOM_STEP_DEGREES", str(DEFAULT_ZOOM_STEP_DEGREES))
            ),
            min_zoom=int(os.getenv("GPX_MIN_ZOOM", str(DEFAULT_MIN_ZOOM))),
            max_zoom=int(os.getenv("GPX_MAX_ZOOM", str(DEFAULT_MAX_ZOOM))),
            fallback_lat=float(os.getenv("GPX_FALLBACK_LAT", str(DEFAULT_FALLBACK_LAT))),
            fallback_lon=float(os.getenv("GPX_FALLBACK_LON", str(DEFAULT_FALLBACK_LON))),
            fallback_zoom=int(os.getenv("GPX_FALLBACK_ZOOM", str(DEFAULT_FALLBACK_ZOOM))),
            surface=os.getenv("GPX_MAP_SURFACE", DEFAULT_SURFACE).strip(),
        )
        validate_config(config)
        return config


def validate_style(style: RenderStyle) -> None:
    """Validate a render style.  Raises ``InvalidConfigError``."""
    if isinstance(style.track_width, bool) or not isinstance(style.track_width, int):
        raise InvalidConfigError("GPX_TRACK_WIDTH", style.track_width, "must be an integer")
    if style.track_width <= 0:
        raise InvalidConfigError("GPX_TRACK_WIDTH", style.track_width, "must be > 0 (pixels)")


def validate_min_delta(min_delta: float) -> None:
    """Validate a decimation threshold.  Raises ``InvalidConfigError``."""
    # NaN fails every comparison, so test the accepted range positively.
    if not min_delta >= 0:
        raise InvalidConfigError(
            "GPX_MIN_TRACK_POINT_DELTA",
            min_delta,
            "must be >= 0 (degrees)",
        )


def validate_config(config: RenderConfig) -> None:
    """Validate configuration ranges.  Raises ``InvalidConfigError``."""
    validate_style(config.style)
    validate_min_delta(config.min_track_point_delta)

    if config.min_polyline_points < 1:
        raise InvalidConfigError(
            "GPX_MIN_POLYLINE_POINTS",
            config.min_polyline_points,
            "must be >= 1",
        )

    if not config.bounds_tags:
        raise InvalidConfigError("GPX_BOUNDS_TAGS", config.bounds_tags, "must not be empty")

    if config.zoom_policy not in ZOOM_POLICIES:
        raise InvalidConfigError(
            "GPX_ZOOM_POLICY",
            config.zoom_policy,
            f"must be one of {', '.join(sorted(ZOOM_POLICIES))}",
        )

    if not config.zoom_step_degrees > 0:
        raise InvalidConfigError(
            "GPX_ZOOM_STEP_DEGREES",
            config.zoom_step_degrees,
            "must be > 0 (degrees)",
        )

    if config.min_zoom < 0 or config.max_zoom < config.min_zoom:
        raise InvalidConfigError(
            "GPX_MAX_ZOOM",
            config.max_zoom,
            f"zoom range must satisfy 0 <= min ({config.min_zoom}) <= max",
        )

    if not config.min_zoom <= config.fallback_zoom <= config.max_zoom:
        raise InvalidConfigError(
            "GPX_FALLBACK_ZOOM",
            config.fallback_zoom,
            f"must be between {config.min_zoom} and {config.max_zoom}",
        )

    if not -90.0 <= config.fallback_lat <= 90.0:
        raise InvalidConfigError("GPX_FALLBACK_LAT", config.fallback_lat, "must be in [-90, 90]")

    if not -180.0 <= config.fallback_lon <= 180.0:
        raise InvalidConfigError(
            "GPX_FALLBACK_LON", config.fallback_lon, "must be in [-180, 180]"
        )

    if not config.surface:
        raise InvalidConfigError("GPX_MAP_SURFACE", config.surface, "must not be empty")


def _env_bool(name: str, *, default: bool) -> bool:
    """Parse a boolean-like environment value with a fallback default."""
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


def _env_tags(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    """Parse a comma-separated tag list, e.g. ``"trkpt,wpt,photo"``."""
    raw = os.getenv(name, "")
    if not raw.strip():
        return default
    return tuple(tag.strip() for tag in raw.split(",") if tag.strip())
