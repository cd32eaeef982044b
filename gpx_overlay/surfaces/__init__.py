"""Map surface adapters.

Implements the surface-agnostic adapter pattern (Strategy pattern):
- MapSurface: Abstract base class defining the drawing primitives
- RecordingSurface: in-memory instruction log (headless / JSON output)
- FoliumSurface: Leaflet map rendered to HTML with folium
- GeoJsonSurface: GeoJSON FeatureCollection built with shapely

Adapters other than the recording surface are imported lazily by the
factory.
"""

from gpx_overlay.core.exceptions import SurfaceError
from gpx_overlay.surfaces.base import MapSurface
from gpx_overlay.surfaces.factory import (
    FOLIUM,
    GEOJSON,
    RECORDING,
    get_surface,
    list_surfaces,
    register_surface,
)
from gpx_overlay.surfaces.recording import RecordingSurface

__all__ = [
    "FOLIUM",
    "GEOJSON",
    "RECORDING",
    "MapSurface",
    "RecordingSurface",
    "SurfaceError",
    "get_surface",
    "list_surfaces",
    "register_surface",
]
