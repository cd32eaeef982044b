"""GPX renderer: walks a document and drives a map surface.

Coordinates the transform steps for one render session:

1. Tracks, per ``trkseg``: extract points, decimate, draw one polyline
2. Waypoints, per ``wpt``: extract point and label, draw one marker
3. Viewport: fold bounds over the configured point kinds, then centre
   and zoom (or fit bounds) once

Configuration is an immutable ``RenderConfig`` owned by the renderer.
``configure`` swaps it for a new value; every render method also accepts
a per-call ``config`` override.  The input document is never mutated and
all output goes through the ``MapSurface`` primitives.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING

from gpx_overlay.core.config import (
    RenderConfig,
    validate_config,
    validate_min_delta,
    validate_style,
)
from gpx_overlay.core.constants import (
    TAG_SEGMENT,
    TAG_TRACK,
    TAG_TRACKPOINT,
    TAG_WAYPOINT,
    ZOOM_POLICY_FIT_BOUNDS,
)
from gpx_overlay.geometry.bounds import compute_document_bounds, compute_viewport, merge_bounds
from gpx_overlay.geometry.measure import path_length_m
from gpx_overlay.geometry.simplify import simplify_track
from gpx_overlay.models.instructions import MarkerSpec, PolylineSpec, RenderResult
from gpx_overlay.parse_gpx import extract_points

if TYPE_CHECKING:
    from collections.abc import Iterable

    from gpx_overlay.models.instructions import ViewportSpec
    from gpx_overlay.models.point import BoundingBox
    from gpx_overlay.models.style import RenderStyle
    from gpx_overlay.parse_gpx import GpxDocument
    from gpx_overlay.surfaces.base import MapSurface

logger = logging.getLogger("gpx_overlay.orchestrators.renderer")


class GpxRenderer:
    """Render GPX tracks, waypoints and viewport onto one ``MapSurface``."""

    def __init__(self, surface: MapSurface, config: RenderConfig | None = None) -> None:
        if config is None:
            config = RenderConfig()
        else:
            validate_config(config)
        self._surface = surface
        self._config = config

    @property
    def surface(self) -> MapSurface:
        return self._surface

    @property
    def config(self) -> RenderConfig:
        """The current session configuration (read-only)."""
        return self._config

    def configure(self, style: RenderStyle, min_delta: float) -> RenderConfig:
        """Replace the session style and decimation threshold.

        Raises:
            InvalidConfigError: If ``style.track_width <= 0`` or ``min_delta < 0``.
        """
        validate_style(style)
        validate_min_delta(min_delta)
        self._config = dataclasses.replace(
            self._config,
            style=style,
            min_track_point_delta=min_delta,
        )
        logger.debug(
            "Renderer configured | color=%s | width=%d | min_delta=%g",
            style.track_color,
            style.track_width,
            min_delta,
        )
        return self._config

    # ------------------------------------------------------------------
    # Tracks
    # ------------------------------------------------------------------

    def render_tracks(
        self,
        doc: GpxDocument,
        *,
        config: RenderConfig | None = None,
    ) -> list[PolylineSpec]:
        """Draw one polyline per non-empty track segment.

        Returns:
            The polylines sent to the surface, in document order.
        """
        cfg = self._resolve(config)
        style = cfg.style
        polylines: list[PolylineSpec] = []

        for track_idx, track in enumerate(doc.find_by_tag(TAG_TRACK)):
            for seg_idx, segment in enumerate(track.find_by_tag(TAG_SEGMENT)):
                raw = extract_points(
                    segment.find_by_tag(TAG_TRACKPOINT),
                    context=f"trk[{track_idx}]/trkseg[{seg_idx}]",
                )
                path = simplify_track(raw, cfg.min_track_point_delta)
                if len(path) < cfg.min_polyline_points:
                    logger.debug(
                        "Skipping segment | track=%d | segment=%d | points=%d",
                        track_idx,
                        seg_idx,
                        len(path),
                    )
                    continue

                positions = tuple(p.position for p in path)
                spec = PolylineSpec(
                    points=positions,
                    color=style.track_color,
                    width=style.track_width,
                    track_index=track_idx,
                    segment_index=seg_idx,
                    raw_point_count=len(raw),
                    length_m=path_length_m(positions),
                )
                self._surface.add_polyline(spec.points, spec.color, spec.width)
                polylines.append(spec)

                if cfg.mark_segment_starts:
                    start = path[0]
                    self._surface.add_marker(start.position, start.label)

                logger.info(
                    "Segment drawn | track=%d | segment=%d | raw=%d | kept=%d | length=%.1f m",
                    track_idx,
                    seg_idx,
                    spec.raw_point_count,
                    spec.point_count,
                    spec.length_m,
                )

        return polylines

    # ------------------------------------------------------------------
    # Waypoints
    # ------------------------------------------------------------------

    def render_waypoints(
        self,
        doc: GpxDocument,
        *,
        config: RenderConfig | None = None,
    ) -> list[MarkerSpec]:
        """Draw one marker per waypoint; its label is shown on click."""
        self._resolve(config)
        markers = [
            MarkerSpec.from_point(point)
            for point in extract_points(doc.find_by_tag(TAG_WAYPOINT), context=TAG_WAYPOINT)
        ]
        for marker in markers:
            self._surface.add_marker((marker.lat, marker.lon), marker.label)

        logger.info("Waypoints drawn | markers=%d", len(markers))
        return markers

    # ------------------------------------------------------------------
    # Viewport
    # ------------------------------------------------------------------

    def center_and_zoom(
        self,
        doc: GpxDocument,
        *,
        config: RenderConfig | None = None,
        map_type: str = "",
    ) -> ViewportSpec:
        """Frame every configured point kind in the document.

        An empty document is not an error: the fallback viewport is used.
        """
        cfg = self._resolve(config)
        box = compute_document_bounds(doc, cfg.bounds_tags)
        return self._emit_viewport(box, cfg, map_type)

    def center_and_zoom_to_bounds(
        self,
        boxes: Iterable[BoundingBox | None],
        *,
        config: RenderConfig | None = None,
        map_type: str = "",
    ) -> ViewportSpec:
        """Frame the union of previously computed boxes (``None`` entries ignored)."""
        cfg = self._resolve(config)
        return self._emit_viewport(merge_bounds(boxes), cfg, map_type)

    # ------------------------------------------------------------------
    # Full pass
    # ------------------------------------------------------------------

    def render(
        self,
        doc: GpxDocument,
        *,
        config: RenderConfig | None = None,
        map_type: str = "",
    ) -> RenderResult:
        """Draw tracks, then waypoints, then set the viewport."""
        cfg = self._resolve(config)
        polylines = self.render_tracks(doc, config=cfg)
        markers = self.render_waypoints(doc, config=cfg)
        viewport = self.center_and_zoom(doc, config=cfg, map_type=map_type)

        logger.info(
            "Render complete | source=%s | surface=%s | polylines=%d | markers=%d | "
            "center=(%.6f, %.6f) | zoom=%s",
            doc.source_name,
            self._surface.name,
            len(polylines),
            len(markers),
            viewport.center_lat,
            viewport.center_lon,
            "fit" if viewport.zoom is None else viewport.zoom,
        )
        return RenderResult(polylines=polylines, markers=markers, viewport=viewport)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _resolve(self, config: RenderConfig | None) -> RenderConfig:
        if config is None:
            return self._config
        if config is not self._config:
            validate_config(config)
        return config

    def _emit_viewport(
        self,
        box: BoundingBox | None,
        cfg: RenderConfig,
        map_type: str,
    ) -> ViewportSpec:
        delegate = cfg.zoom_policy == ZOOM_POLICY_FIT_BOUNDS and self._surface.supports_fit_bounds
        viewport = compute_viewport(box, cfg, delegate_zoom=delegate, map_type=map_type)

        self._surface.set_center(viewport.center_lat, viewport.center_lon)
        if viewport.zoom is None and viewport.bounds is not None:
            self._surface.fit_bounds(viewport.bounds)
        elif viewport.zoom is not None:
            self._surface.set_zoom(viewport.zoom)
        if viewport.map_type:
            self._surface.set_map_type(viewport.map_type)

        return viewport
