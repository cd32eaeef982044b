"""Geometry helpers: trackpoint decimation, bounds/zoom and path length."""

from gpx_overlay.geometry.bounds import (
    BoundsAccumulator,
    compute_bounds,
    compute_document_bounds,
    compute_viewport,
    compute_zoom_level,
    merge_bounds,
    zoom_for_bounds,
)
from gpx_overlay.geometry.measure import path_length_m
from gpx_overlay.geometry.simplify import iter_simplified, planar_distance, simplify_track

__all__ = [
    "BoundsAccumulator",
    "compute_bounds",
    "compute_document_bounds",
    "compute_viewport",
    "compute_zoom_level",
    "iter_simplified",
    "merge_bounds",
    "path_length_m",
    "planar_distance",
    "simplify_track",
    "zoom_for_bounds",
]
