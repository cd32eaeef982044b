"""MapSurface abstract base class.

Defines the minimal drawing contract the renderer needs from a map.
The renderer interacts exclusively with this interface: it never knows
which concrete surface is behind it.

Primitives:
    1. ``add_marker(position, label)``      : point marker, label shown on click.
    2. ``add_polyline(points, color, width)``: one track segment.
    3. ``set_center(lat, lon)``              : viewport centre.
    4. ``set_zoom(level)`` or ``fit_bounds(box)``: viewport scale.

Each concrete adapter (``RecordingSurface``, ``FoliumSurface``,
``GeoJsonSurface``) maps these primitives onto its own drawing API.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from gpx_overlay.models.point import BoundingBox


class MapSurface(abc.ABC):
    """Abstract base class for map surface adapters.

    Example usage::

        surface = get_surface("folium")
        renderer = GpxRenderer(surface)
        renderer.render(load_document("ride.gpx"))
        surface.save("ride.html")
    """

    #: Registry name of the adapter.
    name: str = ""

    @property
    def supports_fit_bounds(self) -> bool:
        """Whether ``fit_bounds`` picks a zoom natively.

        Surfaces returning ``False`` are sent a computed ``set_zoom``
        instead, whatever the configured zoom policy.
        """
        return True

    # ------------------------------------------------------------------
    # Abstract methods: every adapter must implement these
    # ------------------------------------------------------------------

    @abc.abstractmethod
    def add_marker(self, position: tuple[float, float], label: str) -> None:
        """Place a marker at ``(lat, lon)`` that shows ``label`` when clicked."""

    @abc.abstractmethod
    def add_polyline(
        self,
        points: Sequence[tuple[float, float]],
        color: str,
        width: int,
    ) -> None:
        """Draw an ordered ``(lat, lon)`` path with the given CSS colour and width."""

    @abc.abstractmethod
    def set_center(self, lat: float, lon: float) -> None:
        """Centre the viewport."""

    @abc.abstractmethod
    def set_zoom(self, level: int) -> None:
        """Set a discrete zoom level (larger is closer)."""

    @abc.abstractmethod
    def fit_bounds(self, box: BoundingBox) -> None:
        """Choose a zoom that contains ``box``."""

    # ------------------------------------------------------------------
    # Optional hooks
    # ------------------------------------------------------------------

    def set_map_type(self, map_type: str) -> None:  # noqa: B027
        """Select a base layer.  Surfaces without base layers ignore it."""
