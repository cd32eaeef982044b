"""Point extraction: one GPX element in, one ``Point`` out."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, TypeVar

from gpx_overlay.core.constants import TAG_RICH_DESCRIPTION
from gpx_overlay.core.exceptions import MalformedPointError
from gpx_overlay.models.point import Point
from gpx_overlay.parse_gpx._labels import synthesize_label

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from gpx_overlay.parse_gpx._document import GpxNode

logger = logging.getLogger("gpx_overlay.parse_gpx")

_T = TypeVar("_T")


def parse_coordinate(node: GpxNode, attribute: str) -> float:
    """Read a ``lat``/``lon`` attribute as a finite float.

    Raises:
        MalformedPointError: If the attribute is absent, non-numeric,
            or NaN/infinite.
    """
    raw = node.attr(attribute)
    if raw is None:
        raise MalformedPointError(node.tag, attribute, None)
    try:
        value = float(raw.strip())
    except ValueError as exc:
        raise MalformedPointError(node.tag, attribute, raw) from exc
    if not math.isfinite(value):
        raise MalformedPointError(node.tag, attribute, raw)
    return value


def extract_point(node: GpxNode) -> Point:
    """Build a ``Point`` from a waypoint or trackpoint element.

    The label is the text of the first ``<html>`` descendant when present
    (directly under the point or nested in ``<extensions>``), used
    verbatim; otherwise it is synthesized from the element's attributes
    and text-bearing children.

    Raises:
        MalformedPointError: If ``lat`` or ``lon`` is missing or not a number.
    """
    lat, lon = extract_position(node)

    rich = node.find_by_tag(TAG_RICH_DESCRIPTION)
    label = rich[0].text_content() if rich else synthesize_label(node)

    return Point(lat=lat, lon=lon, label=label, kind=node.tag)


def extract_position(node: GpxNode) -> tuple[float, float]:
    """Read ``(lat, lon)`` without building a label.

    Raises:
        MalformedPointError: If ``lat`` or ``lon`` is missing or not a number.
    """
    return (parse_coordinate(node, "lat"), parse_coordinate(node, "lon"))


def extract_points(nodes: Iterable[GpxNode], *, context: str = "") -> list[Point]:
    """Extract every node, skipping malformed points with a warning.

    One bad point never aborts the rest of its segment or document.
    """
    return list(_skip_malformed(extract_point, nodes, context))


def extract_positions(
    nodes: Iterable[GpxNode],
    *,
    context: str = "",
) -> list[tuple[float, float]]:
    """Coordinates-only ``extract_points``, used for bounds."""
    return list(_skip_malformed(extract_position, nodes, context))


def _skip_malformed(
    extract: Callable[[GpxNode], _T],
    nodes: Iterable[GpxNode],
    context: str,
) -> Iterator[_T]:
    for idx, node in enumerate(nodes):
        try:
            yield extract(node)
        except MalformedPointError as exc:
            logger.warning(
                "Skipping malformed point | index=%d | context=%s | reason=%s",
                idx,
                context or node.tag,
                exc,
            )
