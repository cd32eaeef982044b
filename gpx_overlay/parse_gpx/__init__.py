"""GPX parsing: typed document model, point extraction and labels.

The parsing layer is split into focused stages:
- **_document**: lxml-backed ``GpxDocument``/``GpxNode`` and the loader
- **_extraction**: ``lat``/``lon`` parsing and ``Point`` construction
- **_labels**: fallback popup text for points without ``<html>``

Supported GPX structures:
- ``gpx > trk > trkseg > trkpt[lat,lon]``
- ``gpx > wpt[lat,lon]``
- Optional ``<html>`` rich description under any point element
- GPX 1.0, GPX 1.1 and namespace-less documents

Malformed points (missing or non-numeric coordinates) are skipped with a
warning by ``extract_points``; they never abort the remaining points.
"""

from __future__ import annotations

from gpx_overlay.core.exceptions import GpxParseError, MalformedPointError
from gpx_overlay.parse_gpx._document import GpxDocument, GpxNode, load_document
from gpx_overlay.parse_gpx._extraction import (
    extract_point,
    extract_position,
    extract_points,
    extract_positions,
    parse_coordinate,
)
from gpx_overlay.parse_gpx._labels import (
    LABEL_LINE_SEPARATOR,
    synthesize_label,
    translate_kind,
)

__all__ = [
    "LABEL_LINE_SEPARATOR",
    "GpxDocument",
    "GpxNode",
    "GpxParseError",
    "MalformedPointError",
    "extract_point",
    "extract_position",
    "extract_points",
    "extract_positions",
    "load_document",
    "parse_coordinate",
    "synthesize_label",
    "translate_kind",
]
