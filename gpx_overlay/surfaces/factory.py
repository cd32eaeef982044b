"""Surface factory: selects the active map surface by name.

The factory maintains a registry of known adapters. New adapters are
registered with ``register_surface``.

Usage::

    from gpx_overlay.surfaces.factory import get_surface

    surface = get_surface("folium", tiles="CartoDB positron")

The default surface name is read from the ``GPX_MAP_SURFACE``
environment variable via ``RenderConfig.surface``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gpx_overlay.core.exceptions import SurfaceError

if TYPE_CHECKING:
    from collections.abc import Callable

    from gpx_overlay.surfaces.base import MapSurface

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Surface name constants
# ---------------------------------------------------------------------------

RECORDING = "recording"
FOLIUM = "folium"
GEOJSON = "geojson"

# ---------------------------------------------------------------------------
# Lazy-import adapter registry
# ---------------------------------------------------------------------------

# Each entry maps a surface name to a callable that returns the adapter
# *class*, so folium is only imported when the folium surface is selected.

_SURFACE_REGISTRY: dict[str, Callable[[], type[MapSurface]]] = {}


def _register_builtin_surfaces() -> None:
    """Register the built-in surface adapters as lazy import thunks."""

    def _recording() -> type[MapSurface]:
        from gpx_overlay.surfaces.recording import RecordingSurface

        return RecordingSurface

    def _folium() -> type[MapSurface]:
        from gpx_overlay.surfaces.folium_map import FoliumSurface

        return FoliumSurface

    def _geojson() -> type[MapSurface]:
        from gpx_overlay.surfaces.geojson import GeoJsonSurface

        return GeoJsonSurface

    _SURFACE_REGISTRY[RECORDING] = _recording
    _SURFACE_REGISTRY[FOLIUM] = _folium
    _SURFACE_REGISTRY[GEOJSON] = _geojson


def _ensure_registry() -> None:
    """Initialise the adapter registry once (idempotent)."""
    if not _SURFACE_REGISTRY:
        _register_builtin_surfaces()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def register_surface(name: str, loader: Callable[[], type[MapSurface]]) -> None:
    """Register a custom surface adapter.

    Args:
        name: Surface name (e.g. ``"leaflet_json"``).
        loader: A zero-argument callable that returns the adapter class.

    Raises:
        ValueError: If the name is empty.
    """
    if not name:
        msg = "Surface name must be non-empty"
        raise ValueError(msg)
    _ensure_registry()
    _SURFACE_REGISTRY[name] = loader
    logger.debug("Registered map surface: %s", name)


def get_surface(name: str, **options: object) -> MapSurface:
    """Create and return a map surface instance.

    Args:
        name: Surface identifier (``"recording"``, ``"folium"``, ``"geojson"``).
        **options: Keyword arguments forwarded to the adapter constructor.

    Raises:
        SurfaceError: If the surface is not registered or rejects ``options``.
    """
    _ensure_registry()

    loader = _SURFACE_REGISTRY.get(name)
    if loader is None:
        available = ", ".join(sorted(_SURFACE_REGISTRY))
        msg = f"Unknown map surface: {name!r}. Available: {available}"
        raise SurfaceError(surface=name, message=msg)

    surface_cls = loader()
    try:
        surface = surface_cls(**options)
    except TypeError as exc:
        msg = f"Invalid options for map surface: {exc}"
        raise SurfaceError(surface=name, message=msg) from exc

    logger.info("Creating map surface: %s", name)
    return surface


def list_surfaces() -> list[str]:
    """Return the names of all registered surface adapters."""
    _ensure_registry()
    return sorted(_SURFACE_REGISTRY)
