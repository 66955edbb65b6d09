"""Tests for normalization and the coordinate projector."""

import pytest
from pydantic import ValidationError

from railnet_pipeline import (
    BoundingBox,
    DegenerateInterval,
    InvalidElevation,
    OutOfBounds,
    ProjectionConfig,
    Projector,
    RailNetworkError,
    normalize,
    project,
)


class TestNormalize:
    def test_ascending_interval(self):
        assert normalize(0, 10, 100, 0) == 0
        assert normalize(0, 10, 100, 5) == 50
        assert normalize(0, 10, 100, 10) == 100

    def test_descending_interval(self):
        assert normalize(30, 10, 100, 30) == 0
        assert normalize(30, 10, 100, 20) == 50
        assert normalize(30, 10, 100, 10) == 100

    def test_interval_across_zero(self):
        assert normalize(-10, 10, 100, -10) == 0
        assert normalize(-10, 10, 100, 0) == 50
        assert normalize(-10, 10, 100, 10) == 100

    def test_box_bounds(self):
        assert normalize(-7, 10, 1500, -7) == 0
        assert normalize(-7, 10, 1500, 10) == 1500
        assert normalize(52, 40, 1500, 52) == 0
        assert normalize(52, 40, 1500, 40) == 1500
        assert normalize(40, 52, 1500, 52) == 1500
        assert normalize(40, 52, 1500, 40) == 0

    @pytest.mark.parametrize("a,b", [(0, 1), (-700000, 1000000), (5200000, 4000000), (3, -3)])
    def test_endpoints_exact_both_directions(self, a, b):
        assert normalize(a, b, 1300, a) == 0
        assert normalize(a, b, 1300, b) == 1300
        assert normalize(b, a, 1300, a) == 1300
        assert normalize(b, a, 1300, b) == 0

    def test_truncates_instead_of_rounding(self):
        # 2/3 of 100 is 66.66...
        assert normalize(0, 3, 100, 2) == 66
        assert normalize(3, 0, 100, 1) == 66

    def test_reversed_interval_mirrors(self):
        for pos in (10, 15, 20, 25, 30):
            assert normalize(30, 10, 100, pos) == 100 - normalize(10, 30, 100, pos)

    def test_degenerate_interval(self):
        with pytest.raises(DegenerateInterval) as excinfo:
            normalize(5, 5, 100, 5)
        assert excinfo.value.start == 5
        assert excinfo.value.end == 5
        assert "[5, 5]" in str(excinfo.value)


class TestProject:
    def test_north_west_corner_is_origin(self):
        p = project(-7.0, 52.0, 0.0)
        assert (p.x, p.y, p.z) == (0, 0, 0)

    def test_south_east_corner_is_grid_size(self):
        p = project(10.0, 40.0, 0.0)
        assert (p.x, p.y) == (1300, 1300)

    def test_other_corners(self):
        assert (project(-7.0, 40.0).x, project(-7.0, 40.0).y) == (0, 1300)
        assert (project(10.0, 52.0).x, project(10.0, 52.0).y) == (1300, 0)

    def test_elevation(self):
        assert project(2.0, 46.0, 0.0).z == 0
        assert project(2.0, 46.0, 100.0).z == 1
        assert project(2.0, 46.0, 99.9).z == 0
        assert project(2.0, 46.0, 1234.0).z == 12
        assert project(2.0, 46.0, -250.0).z == 2

    def test_longitude_is_monotonic(self):
        xs = [project(lon / 10, 46.0).x for lon in range(-70, 101, 7)]
        assert xs == sorted(xs)

    def test_latitude_is_inverted(self):
        ys = [project(2.0, lat / 10).y for lat in range(400, 521, 3)]
        assert ys == sorted(ys, reverse=True)

    @pytest.mark.parametrize(
        "lon,lat",
        [(-8.0, 46.0), (10.5, 46.0), (2.0, 39.9), (2.0, 52.1), (55.45, -20.88), (float("nan"), 46.0)],
    )
    def test_out_of_bounds(self, lon, lat):
        with pytest.raises(OutOfBounds) as excinfo:
            project(lon, lat, 0.0)
        assert str(lon) in str(excinfo.value)
        assert str(lat) in str(excinfo.value)

    def test_out_of_bounds_carries_coordinate(self):
        with pytest.raises(OutOfBounds) as excinfo:
            project(-8.0, 45.0)
        assert excinfo.value.lon == -8.0
        assert excinfo.value.lat == 45.0
        assert excinfo.value.bounds == (-7.0, 10.0, 40.0, 52.0)

    def test_point_is_immutable(self):
        p = project(2.0, 46.0)
        with pytest.raises(ValidationError):
            p.x = 5


class TestProjector:
    def test_custom_grid_size(self):
        projector = Projector(ProjectionConfig(grid_size=2000))
        assert projector.grid_size == 2000
        p = projector.project(10.0, 40.0)
        assert (p.x, p.y) == (2000, 2000)

    def test_custom_bounds(self):
        bounds = BoundingBox(min_lon=0.0, max_lon=10.0, min_lat=40.0, max_lat=50.0)
        projector = Projector(ProjectionConfig(grid_size=100, bounds=bounds))
        p = projector.project(5.0, 45.0)
        assert (p.x, p.y) == (50, 50)
        with pytest.raises(OutOfBounds):
            projector.project(-1.0, 45.0)

    def test_default_matches_module_function(self):
        assert Projector().project(4.85, 45.76, 170.0) == project(4.85, 45.76, 170.0)

    def test_empty_bounding_box_rejected(self):
        with pytest.raises(ValueError):
            BoundingBox(min_lon=1.0, max_lon=1.0)


class TestNonFiniteElevation:
    @pytest.mark.parametrize("elevation", [float("nan"), float("inf"), float("-inf")])
    def test_rejected_with_typed_error(self, elevation):
        with pytest.raises(InvalidElevation) as excinfo:
            project(2.0, 46.0, elevation)
        assert excinfo.value.lon == 2.0
        assert excinfo.value.lat == 46.0
        assert str(elevation) in str(excinfo.value)

    def test_is_a_record_error(self):
        assert issubclass(InvalidElevation, RailNetworkError)
