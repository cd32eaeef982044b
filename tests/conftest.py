"""Shared pytest fixtures for the gpx_overlay test suite."""

from pathlib import Path

import pytest

from gpx_overlay.parse_gpx import GpxDocument, load_document
from gpx_overlay.surfaces.recording import RecordingSurface

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"
EDGE_CASES_DIR = DATA_DIR / "edge_cases"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


@pytest.fixture()
def edge_cases_dir() -> Path:
    """Return the path to the edge-cases test data directory."""
    return EDGE_CASES_DIR


# ---------------------------------------------------------------------------
# Sample GPX file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def waypoints_and_track_gpx(data_dir: Path) -> Path:
    """GPX 1.1 with two waypoints and one track of two segments (4 + 2 points)."""
    return data_dir / "01_waypoints_and_track.gpx"


@pytest.fixture()
def empty_segment_gpx(data_dir: Path) -> Path:
    """One track: a 3-point segment and an empty segment."""
    return data_dir / "02_track_with_empty_segment.gpx"


@pytest.fixture()
def no_points_gpx(data_dir: Path) -> Path:
    """Valid GPX with metadata and an empty track but no points at all."""
    return data_dir / "03_no_points.gpx"


@pytest.fixture()
def gpx10_gpx(data_dir: Path) -> Path:
    """GPX 1.0 document with three waypoints framing (8..12, 18..22)."""
    return data_dir / "04_gpx10_no_namespace_prefix.gpx"


# ---------------------------------------------------------------------------
# Edge-case GPX file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def not_xml_gpx(edge_cases_dir: Path) -> Path:
    return edge_cases_dir / "11_malformed_not_xml.gpx"


@pytest.fixture()
def not_gpx_root(edge_cases_dir: Path) -> Path:
    return edge_cases_dir / "12_not_gpx_root.gpx"


@pytest.fixture()
def malformed_points_gpx(edge_cases_dir: Path) -> Path:
    """Waypoints and trackpoints with missing / non-numeric coordinates."""
    return edge_cases_dir / "13_malformed_points.gpx"


# ---------------------------------------------------------------------------
# Object fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def waypoints_and_track_doc(waypoints_and_track_gpx: Path) -> GpxDocument:
    return load_document(waypoints_and_track_gpx)


@pytest.fixture()
def recording_surface() -> RecordingSurface:
    return RecordingSurface()
