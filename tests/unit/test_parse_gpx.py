"""Tests for GPX loading, point extraction and label synthesis.

Covers:
- Loading from a path, raw bytes and XML text
- GPX 1.0, GPX 1.1 and namespace-less documents
- Load failures (not XML, wrong root, empty, missing file)
- Coordinate parsing and malformed-point skipping
- Explicit ``<html>`` labels versus synthesized labels
"""

from __future__ import annotations

import logging
import textwrap
from pathlib import Path

import pytest

from gpx_overlay.core.exceptions import GpxParseError, MalformedPointError
from gpx_overlay.parse_gpx import (
    GpxDocument,
    GpxNode,
    extract_point,
    extract_points,
    extract_positions,
    load_document,
    parse_coordinate,
    synthesize_label,
    translate_kind,
)


def _doc(xml: str) -> GpxDocument:
    return load_document(textwrap.dedent(xml).lstrip())


def _first(xml: str, tag: str) -> GpxNode:
    return _doc(xml).find_by_tag(tag)[0]


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


class TestLoadDocument:
    def test_load_from_path(self, waypoints_and_track_gpx: Path) -> None:
        doc = load_document(waypoints_and_track_gpx)
        assert doc.source_name == "01_waypoints_and_track.gpx"
        assert doc.root.tag == "gpx"

    def test_load_from_str_path(self, waypoints_and_track_gpx: Path) -> None:
        doc = load_document(str(waypoints_and_track_gpx))
        assert doc.source_name == "01_waypoints_and_track.gpx"
        assert len(doc.find_by_tag("wpt")) == 2

    def test_load_from_bytes(self, waypoints_and_track_gpx: Path) -> None:
        doc = load_document(waypoints_and_track_gpx.read_bytes(), source_name="upload")
        assert doc.source_name == "upload"
        assert len(doc.find_by_tag("trkpt")) == 6

    def test_load_from_xml_text(self) -> None:
        doc = _doc(
            """
            <gpx version="1.1" xmlns="http://www.topografix.com/GPX/1/1">
              <wpt lat="1" lon="2"/>
            </gpx>
            """
        )
        assert doc.source_name == ""
        assert len(doc.find_by_tag("wpt")) == 1

    def test_counts_in_gpx11(self, waypoints_and_track_doc: GpxDocument) -> None:
        assert len(waypoints_and_track_doc.find_by_tag("trk")) == 1
        assert len(waypoints_and_track_doc.find_by_tag("trkseg")) == 2
        assert len(waypoints_and_track_doc.find_by_tag("trkpt")) == 6

    def test_gpx10_namespace(self, gpx10_gpx: Path) -> None:
        doc = load_document(gpx10_gpx)
        assert [n.attr("lat") for n in doc.find_by_tag("wpt")] == ["10", "12", "8"]

    def test_no_namespace(self) -> None:
        doc = _doc('<gpx><trk><trkseg><trkpt lat="1" lon="1"/></trkseg></trk></gpx>')
        assert len(doc.find_by_tag("trkpt")) == 1

    def test_unknown_namespace_warns_but_parses(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="gpx_overlay.parse_gpx"):
            doc = _doc('<gpx xmlns="urn:acme:gpx/2"><wpt lat="1" lon="2"/></gpx>')
        assert len(doc.find_by_tag("wpt")) == 1
        assert any("Unrecognised GPX namespace" in r.getMessage() for r in caplog.records)

    def test_known_namespace_is_quiet(
        self, gpx10_gpx: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="gpx_overlay.parse_gpx"):
            load_document(gpx10_gpx)
        assert caplog.records == []

    def test_not_xml(self, not_xml_gpx: Path) -> None:
        with pytest.raises(GpxParseError, match="Not valid XML"):
            load_document(not_xml_gpx)

    def test_wrong_root(self, not_gpx_root: Path) -> None:
        with pytest.raises(GpxParseError, match="Not a GPX document"):
            load_document(not_gpx_root)

    def test_empty_bytes(self) -> None:
        with pytest.raises(GpxParseError, match="empty"):
            load_document(b"   \n")

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(GpxParseError, match="Cannot read GPX file"):
            load_document(tmp_path / "absent.gpx")

    def test_parse_error_payload(self, not_xml_gpx: Path) -> None:
        with pytest.raises(GpxParseError) as exc_info:
            load_document(not_xml_gpx)
        payload = exc_info.value.to_error_dict()
        assert payload["category"] == "validation"
        assert payload["stage"] == "parse_gpx"

    def test_entities_are_not_expanded(self) -> None:
        doc = _doc(
            """
            <?xml version="1.0"?>
            <!DOCTYPE gpx [<!ENTITY secret SYSTEM "file:///etc/passwd">]>
            <gpx><wpt lat="1" lon="2"><name>&secret;</name></wpt></gpx>
            """
        )
        name = doc.find_by_tag("name")[0]
        assert "root:" not in name.text_content()

    def test_str_input_ignores_declared_encoding(self) -> None:
        doc = load_document(
            '<?xml version="1.0" encoding="ISO-8859-1"?>'
            '<gpx><wpt lat="1" lon="2"><name>Café</name></wpt></gpx>'
        )
        assert extract_point(doc.find_by_tag("wpt")[0]).label.endswith("name = Café")

    def test_bytes_input_honours_declared_encoding(self) -> None:
        raw = (
            '<?xml version="1.0" encoding="ISO-8859-1"?>'
            '<gpx><wpt lat="1" lon="2"><name>Café</name></wpt></gpx>'
        ).encode("latin-1")
        doc = load_document(raw)
        assert extract_point(doc.find_by_tag("wpt")[0]).label.endswith("name = Café")


class TestGpxNode:
    def test_children_skip_comments(self) -> None:
        node = _first('<gpx><wpt lat="1" lon="2"><!-- note --><name>A</name></wpt></gpx>', "wpt")
        assert [c.tag for c in node.children()] == ["name"]

    def test_attributes_in_document_order(self) -> None:
        node = _first('<gpx><wpt lon="2" lat="1" name="x"/></gpx>', "wpt")
        assert node.attributes() == [("lon", "2"), ("lat", "1"), ("name", "x")]

    def test_attr_absent(self) -> None:
        node = _first('<gpx><wpt lat="1"/></gpx>', "wpt")
        assert node.attr("lon") is None

    def test_find_by_tag_excludes_self(self) -> None:
        trk = _first("<gpx><trk><trkseg/><trkseg/></trk></gpx>", "trk")
        assert len(trk.find_by_tag("trkseg")) == 2
        assert trk.find_by_tag("trk") == []

    def test_own_text_joins_text_around_comments(self) -> None:
        node = _first("<gpx><desc>a<!--x-->b</desc></gpx>", "desc")
        assert node.own_text() == "ab"

    def test_own_text_keeps_tails_of_child_elements(self) -> None:
        node = _first("<gpx><desc><b>x</b>tail</desc></gpx>", "desc")
        assert node.own_text() == "tail"


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------


class TestParseCoordinate:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("49.1", 49.1), (" -123.5 ", -123.5), ("0", 0.0)],
    )
    def test_valid(self, raw: str, expected: float) -> None:
        node = _first(f'<gpx><wpt lat="{raw}" lon="0"/></gpx>', "wpt")
        assert parse_coordinate(node, "lat") == expected

    @pytest.mark.parametrize("raw", ["north", "", "NaN", "inf", "-Infinity"])
    def test_invalid(self, raw: str) -> None:
        node = _first(f'<gpx><wpt lat="{raw}" lon="0"/></gpx>', "wpt")
        with pytest.raises(MalformedPointError) as exc_info:
            parse_coordinate(node, "lat")
        assert exc_info.value.raw_value == raw
        assert exc_info.value.attribute == "lat"

    def test_missing(self) -> None:
        node = _first('<gpx><trkpt lon="0"/></gpx>', "trkpt")
        with pytest.raises(MalformedPointError) as exc_info:
            parse_coordinate(node, "lat")
        assert exc_info.value.raw_value is None
        assert exc_info.value.tag == "trkpt"


class TestExtractPoint:
    def test_synthesized_waypoint_label(self) -> None:
        node = _first('<gpx><wpt lat="49.1" lon="-123.1" name="Cairn"/></gpx>', "wpt")
        point = extract_point(node)
        assert (point.lat, point.lon) == (49.1, -123.1)
        assert point.kind == "wpt"
        assert point.label == "Waypoint\nlat = 49.1\nlon = -123.1\nname = Cairn"

    def test_children_with_text_follow_attributes(
        self, waypoints_and_track_doc: GpxDocument
    ) -> None:
        trailhead = extract_point(waypoints_and_track_doc.find_by_tag("wpt")[0])
        assert trailhead.label == (
            "Waypoint\nlat = 49.3277\nlon = -122.9423\nele = 210\nname = Trailhead"
        )

    def test_explicit_html_used_verbatim(self, waypoints_and_track_doc: GpxDocument) -> None:
        viewpoint = extract_point(waypoints_and_track_doc.find_by_tag("wpt")[1])
        assert viewpoint.label == "<b>Viewpoint</b><br>Bring a camera"

    def test_html_nested_in_extensions_is_used(self) -> None:
        node = _first(
            '<gpx><wpt lat="1" lon="2"><extensions><html>Hello</html></extensions></wpt></gpx>',
            "wpt",
        )
        assert extract_point(node).label == "Hello"

    def test_trackpoint_header(self, waypoints_and_track_doc: GpxDocument) -> None:
        first = extract_point(waypoints_and_track_doc.find_by_tag("trkpt")[0])
        assert first.kind == "trkpt"
        assert first.label == "Track Point\nlat = 49.3277\nlon = -122.9423\nele = 210"

    def test_unknown_kind_has_no_header(self) -> None:
        node = _first('<gpx><rtept lat="1" lon="2"/></gpx>', "rtept")
        assert extract_point(node).label == "lat = 1\nlon = 2"

    def test_label_text_is_escaped(self) -> None:
        node = _first(
            '<gpx><wpt lat="1" lon="2"><name>Fish &amp; Chips &lt;3</name></wpt></gpx>',
            "wpt",
        )
        assert extract_point(node).label.endswith("name = Fish &amp; Chips &lt;3")

    def test_malformed_raises(self) -> None:
        node = _first('<gpx><wpt lat="north" lon="2"/></gpx>', "wpt")
        with pytest.raises(MalformedPointError):
            extract_point(node)


class TestExtractPoints:
    def test_malformed_waypoints_skipped(self, malformed_points_gpx: Path) -> None:
        doc = load_document(malformed_points_gpx)
        points = extract_points(doc.find_by_tag("wpt"))
        assert [(p.lat, p.lon) for p in points] == [(49.1, -123.1)]

    def test_malformed_trackpoints_skipped(self, malformed_points_gpx: Path) -> None:
        doc = load_document(malformed_points_gpx)
        points = extract_points(doc.find_by_tag("trkpt"))
        assert [p.lat for p in points] == [49.0, 49.02]

    def test_skip_is_logged(
        self, malformed_points_gpx: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        doc = load_document(malformed_points_gpx)
        with caplog.at_level(logging.WARNING, logger="gpx_overlay.parse_gpx"):
            extract_points(doc.find_by_tag("wpt"), context="test")
        skipped = [r for r in caplog.records if "Skipping malformed point" in r.getMessage()]
        assert len(skipped) == 2
        assert "context=test" in skipped[0].getMessage()

    def test_empty_input(self) -> None:
        assert extract_points([]) == []

    def test_positions_skip_malformed(self, malformed_points_gpx: Path) -> None:
        doc = load_document(malformed_points_gpx)
        positions = extract_positions(doc.find_by_tag("trkpt"))
        assert positions == [(49.0, -123.0), (49.02, -123.0)]

    def test_positions_log_skips(
        self, malformed_points_gpx: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        doc = load_document(malformed_points_gpx)
        with caplog.at_level(logging.WARNING, logger="gpx_overlay.parse_gpx"):
            extract_positions(doc.find_by_tag("wpt"), context="bounds:wpt")
        skipped = [r for r in caplog.records if "Skipping malformed point" in r.getMessage()]
        assert len(skipped) == 2
        assert "context=bounds:wpt" in skipped[0].getMessage()


class TestLabels:
    def test_translate_kind(self) -> None:
        assert translate_kind("wpt") == "Waypoint"
        assert translate_kind("trkpt") == "Track Point"
        assert translate_kind("photo") == ""

    def test_element_only_children_are_skipped(self) -> None:
        node = _first(
            '<gpx><wpt lat="1" lon="2"><extensions><x>9</x></extensions></wpt></gpx>',
            "wpt",
        )
        assert synthesize_label(node) == "Waypoint\nlat = 1\nlon = 2"

    def test_attribute_values_are_escaped(self) -> None:
        node = _first('<gpx><wpt lat="1" lon="2" name="a&lt;b"/></gpx>', "wpt")
        assert synthesize_label(node).splitlines()[-1] == "name = a&lt;b"

    def test_text_split_by_comment_is_joined(self) -> None:
        node = _first('<gpx><wpt lat="1" lon="2"><desc>a<!--x-->b</desc></wpt></gpx>', "wpt")
        assert synthesize_label(node).endswith("desc = ab")

    def test_text_after_child_element_is_kept(self) -> None:
        node = _first('<gpx><wpt lat="1" lon="2"><desc><b>x</b>tail</desc></wpt></gpx>', "wpt")
        assert synthesize_label(node).endswith("desc = tail")
