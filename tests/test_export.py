"""Tests for segment measurement and shapefile export."""

import pytest
import shapefile

from railnet_pipeline import (
    Line,
    PlanePoint,
    build_network,
    compute_segments,
    geodesic_length_km,
    new_network,
    write_shapefiles,
)


class TestSegments:
    def test_segments_between_points(self):
        line = Line(points=[PlanePoint(x=0, y=0, z=1), PlanePoint(x=3, y=4, z=3), PlanePoint(x=3, y=10, z=2)], code="A")
        segments = compute_segments(line, line_index=7)
        assert len(segments) == 2
        assert segments[0].segment == "1 -> 2"
        assert segments[0].line == 7
        assert segments[0].code == "A"
        assert segments[0].length == 5.0
        assert segments[0].z_change == 2
        assert segments[1].cumulative_start == 5.0
        assert segments[1].cumulative_end == 11.0

    def test_single_point_has_no_segments(self):
        assert compute_segments(Line(points=[PlanePoint(x=1, y=1)])) == []


class TestGeodesicLength:
    def test_one_degree_of_latitude(self):
        assert geodesic_length_km([(2.0, 45.0, 0.0), (2.0, 46.0, 0.0)]) == pytest.approx(111.1, abs=0.5)

    def test_short_paths(self):
        assert geodesic_length_km([]) == 0.0
        assert geodesic_length_km([(2.0, 45.0)]) == 0.0


class TestShapefileWriter:
    def test_writes_lines_and_stations(self, stations, edges, tmp_path):
        network = build_network(stations, edges).network
        written = write_shapefiles(network, tmp_path / "rfn")
        assert [p.name for p in written] == ["rfn_lines", "rfn_stations"]

        with shapefile.Reader(str(tmp_path / "rfn_lines")) as r:
            assert r.shapeType == shapefile.POLYLINEZ
            assert len(r) == network.line_count()
            first = r.shape(0)
            assert [tuple(pt) for pt in first.points] == [(p.x, p.y) for p in network.lines[0].points]
            assert list(first.z) == [p.z for p in network.lines[0].points]
            assert r.record(0)["CODE"] == "830000"
            assert r.record(0)["LENGTH_KM"] == pytest.approx(network.lines[0].length_km, abs=0.001)

        with shapefile.Reader(str(tmp_path / "rfn_stations")) as r:
            assert r.shapeType == shapefile.POINTZ
            assert len(r) == network.point_count()
            labels = [rec["LABEL"] for rec in r.records()]
            assert labels == ["Paris-Gare-de-Lyon", "Lyon-Part-Dieu", "Saint-Quentin-Fallavier-Fret"]
            assert [rec["VOYAGEURS"] for rec in r.records()] == ["O", "O", "N"]
            assert r.record(0)["STATION"] == 1

    def test_empty_network_writes_nothing(self, tmp_path):
        assert write_shapefiles(new_network(), tmp_path / "empty") == []
        assert list(tmp_path.iterdir()) == []
