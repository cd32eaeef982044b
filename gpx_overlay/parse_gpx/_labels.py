"""Fallback popup labels for points without an embedded ``<html>`` description."""

from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING

from gpx_overlay.core.constants import POINT_KIND_NAMES

if TYPE_CHECKING:
    from gpx_overlay.parse_gpx._document import GpxNode

LABEL_LINE_SEPARATOR = "\n"


def translate_kind(tag: str) -> str:
    """Return the label header for a point tag, or ``""`` for unknown kinds."""
    return POINT_KIND_NAMES.get(tag, "")


def synthesize_label(node: GpxNode) -> str:
    """Describe a point element as ``name = value`` lines.

    Lines, in order: the kind header (when the tag is known), every
    attribute in document order, then every direct child element that
    carries text.  Children without text (e.g. ``<extensions>`` holding
    only elements) are skipped.  Names and values are HTML-escaped.

    Example::

        <wpt lat="49.1" lon="-123.1" name="Cairn"/>

        Waypoint
        lat = 49.1
        lon = -123.1
        name = Cairn
    """
    lines: list[str] = []

    header = translate_kind(node.tag)
    if header:
        lines.append(header)

    for name, value in node.attributes():
        lines.append(_line(name, value))

    for child in node.children():
        text = child.own_text().strip()
        if not text:
            continue
        lines.append(_line(child.tag, text))

    return LABEL_LINE_SEPARATOR.join(lines)


def _line(name: str, value: str) -> str:
    return f"{escape(name, quote=False)} = {escape(value, quote=False)}"
