import pytest

from geoutil.center import CenterResult, get_center
from geoutil.geometry import Position, distance


def test_center_of_single_origin_point():
    center = get_center([(0.0, 0.0), (0.0, 0.0), (0.0, 0.0)], with_max_radius=True)
    assert center == CenterResult(0.0, 0.0, 0.0)


def test_center_of_repeated_point_has_zero_radius():
    point = (48.8566, 2.3522)
    center = get_center([point] * 4, with_max_radius=True)

    assert center.latitude == pytest.approx(point[0])
    assert center.longitude == pytest.approx(point[1])
    # Rounding in the unit-vector mean may leave a sub-meter residue
    assert center.radius_meters == pytest.approx(0.0, abs=1.0)


def test_radius_defaults_to_zero():
    center = get_center([(0.0, -10.0), (0.0, 10.0)])
    assert center.radius_meters == 0


def test_center_of_two_equatorial_points():
    center = get_center([(0.0, -10.0), (0.0, 10.0)], with_max_radius=True)

    assert center.latitude == pytest.approx(0.0, abs=1e-9)
    assert center.longitude == pytest.approx(0.0, abs=1e-9)
    expected_radius = distance(0.0, 0.0, 0.0, 10.0) * 1000
    assert center.radius_meters == pytest.approx(expected_radius, rel=1e-6)


def test_center_of_points_around_meridian():
    center = get_center([(10.0, 0.0), (-10.0, 0.0)])
    assert center.latitude == pytest.approx(0.0, abs=1e-9)
    assert center.longitude == pytest.approx(0.0, abs=1e-9)


def test_center_across_antimeridian():
    # A naive average of longitudes would give 0
    center = get_center([(0.0, 179.0), (0.0, -179.0)])
    assert abs(center.longitude) == pytest.approx(180.0)


def test_center_of_four_equatorial_points():
    # Unit vectors cancel out; the z component sums to exactly zero
    center = get_center([(0, 0), (0, 90), (0, -90), (0, 180)])
    assert center.latitude == pytest.approx(0.0, abs=1e-9)
    assert -180.0 <= center.longitude <= 180.0


def test_max_radius_is_farthest_point():
    coords = [
        Position(latitude=47.0, longitude=8.0),
        Position(latitude=47.01, longitude=8.0),
        Position(latitude=47.1, longitude=8.2),
    ]
    center = get_center(coords, with_max_radius=True)

    radii = [distance(center.latitude, center.longitude, *c) * 1000 for c in coords]
    assert center.radius_meters == pytest.approx(max(radii))


def test_accepts_tuple_of_positions():
    coords = (Position(1.0, 2.0), Position(3.0, 4.0))
    center = get_center(coords)
    assert center.latitude == pytest.approx(2.0, abs=0.01)
    assert center.longitude == pytest.approx(3.0, abs=0.01)


@pytest.mark.parametrize(
    "value",
    [None, 5, 3.14, "12.3,45.6", b"abc", {(0.0, 0.0)}, {"lat": 0.0}],
)
def test_non_sequence_input_returns_none(value):
    assert get_center(value) is None


def test_generator_input_returns_none():
    assert get_center(p for p in [(0.0, 0.0)]) is None


def test_empty_input_raises():
    with pytest.raises(ValueError):
        get_center([])
