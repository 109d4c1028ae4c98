import pytest
from hypothesis import assume, given, strategies as st
from shapely.geometry import Point, Polygon

from geoutil.polygon import is_point_in_polygon, parse_polygon, polygon_vertices

UNIT_SQUARE = [(0, 0), (0, 1), (1, 1), (1, 0)]

# L-shaped (concave) polygon
L_SHAPE = [(0, 0), (4, 0), (4, 1), (1, 1), (1, 4), (0, 4)]


def test_unit_square():
    assert is_point_in_polygon(0.5, 0.5, UNIT_SQUARE) is True
    assert is_point_in_polygon(2, 2, UNIT_SQUARE) is False
    assert is_point_in_polygon(-0.5, 0.5, UNIT_SQUARE) is False
    assert is_point_in_polygon(0.5, 1.5, UNIT_SQUARE) is False


def test_vertex_order_does_not_matter():
    reversed_square = list(reversed(UNIT_SQUARE))
    assert is_point_in_polygon(0.5, 0.5, reversed_square) is True
    assert is_point_in_polygon(2, 2, reversed_square) is False


def test_concave_polygon():
    assert is_point_in_polygon(0.5, 3.5, L_SHAPE) is True
    assert is_point_in_polygon(3.5, 0.5, L_SHAPE) is True
    # In the notch of the L
    assert is_point_in_polygon(2.5, 2.5, L_SHAPE) is False


def test_triangle():
    triangle = [(0, 0), (10, 0), (5, 10)]
    assert is_point_in_polygon(5, 5, triangle) is True
    assert is_point_in_polygon(1, 8, triangle) is False


def test_string_coordinates_are_converted():
    square = [("0", "0"), ("0", "1"), ("1", "1"), ("1", "0")]
    assert is_point_in_polygon("0.5", "0.5", square) is True


def test_shapely_polygon_input():
    square = Polygon(UNIT_SQUARE)
    assert is_point_in_polygon(0.5, 0.5, square) is True
    assert is_point_in_polygon(2, 2, square) is False


def test_closed_ring_input():
    # Repeating the first vertex at the end adds a zero-length edge
    ring = UNIT_SQUARE + [UNIT_SQUARE[0]]
    assert is_point_in_polygon(0.5, 0.5, ring) is True
    assert is_point_in_polygon(2, 2, ring) is False


def test_empty_polygon_is_outside():
    assert is_point_in_polygon(0, 0, []) is False


def test_geographic_polygon():
    # Rough outline around central Paris, as (latitude, longitude)
    paris = [(48.90, 2.25), (48.90, 2.42), (48.81, 2.42), (48.81, 2.25)]
    assert is_point_in_polygon(48.8566, 2.3522, paris) is True
    assert is_point_in_polygon(51.5074, -0.1278, paris) is False


@given(
    st.floats(-1.0, 5.0, allow_nan=False),
    st.floats(-1.0, 5.0, allow_nan=False),
)
def test_agrees_with_shapely(x, y):
    shape = Polygon(L_SHAPE)
    point = Point(x, y)
    # Boundary behaviour is not specified
    assume(shape.exterior.distance(point) > 1e-9)
    assert is_point_in_polygon(x, y, L_SHAPE) == shape.contains(point)


class TestPolygonVertices:
    def test_sequence(self):
        assert polygon_vertices(UNIT_SQUARE) == [
            (0.0, 0.0),
            (0.0, 1.0),
            (1.0, 1.0),
            (1.0, 0.0),
        ]

    def test_shapely_polygon_drops_closing_vertex(self):
        vertices = polygon_vertices(Polygon(UNIT_SQUARE))
        assert len(vertices) == 4
        assert vertices[0] != vertices[-1]


class TestParsePolygon:
    def test_wkt(self):
        vertices = parse_polygon("POLYGON ((0 0, 0 1, 1 1, 1 0, 0 0))")
        assert vertices == [(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)]

    def test_pairs(self):
        vertices = parse_polygon("0,0; 0,1; 1,1; 1,0;")
        assert vertices == [(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)]

    def test_negative_pairs(self):
        assert parse_polygon("-1.5,2;3,-4;5,6") == [(-1.5, 2.0), (3.0, -4.0), (5.0, 6.0)]

    @pytest.mark.parametrize(
        "text",
        [
            "POLYGON ((0 0, 0 1",
            "0,0;0,1,2;1,1",
            "a,b;c,d;e,f",
            "LINESTRING (0 0, 1 1)",
        ],
    )
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_polygon(text)
