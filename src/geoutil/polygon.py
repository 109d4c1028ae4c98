"""
Point-in-polygon testing.

Polygons are given either as an ordered sequence of (x, y) vertices, closed
implicitly from the last vertex back to the first, or as a Shapely Polygon
whose exterior ring is used. Holes are ignored.
"""

from typing import List, Sequence, Tuple, Union
from shapely import wkt
from shapely.errors import ShapelyError
from shapely.geometry import Polygon

PolygonLike = Union[Sequence[Sequence[float]], Polygon]


def polygon_vertices(polygon: PolygonLike) -> List[Tuple[float, float]]:
    """
    Convert a polygon argument to a list of (x, y) float tuples.

    Args:
        polygon: Sequence of (x, y) pairs or a Shapely Polygon

    Returns:
        List of vertices. For a Shapely Polygon the closing vertex is dropped.
    """
    if isinstance(polygon, Polygon):
        coords = list(polygon.exterior.coords)[:-1]
    else:
        coords = list(polygon)
    return [(float(vertex[0]), float(vertex[1])) for vertex in coords]


def parse_polygon(text: str) -> List[Tuple[float, float]]:
    """
    Parse a polygon from WKT or from "x,y;x,y;..." text.

    Raises:
        ValueError: If the text cannot be parsed, or is WKT for something
            other than a polygon
    """
    text = text.strip()
    if text.upper().startswith("POLYGON"):
        try:
            geometry = wkt.loads(text)
        except ShapelyError as e:
            raise ValueError(f"Invalid WKT polygon: {e}") from e
        if not isinstance(geometry, Polygon):
            raise ValueError(f"Expected a polygon, got {geometry.geom_type}")
        return polygon_vertices(geometry)

    vertices = []
    for pair in text.split(";"):
        if not pair.strip():
            continue
        parts = pair.split(",")
        if len(parts) != 2:
            raise ValueError(f"Invalid vertex {pair.strip()!r}, expected 'x,y'")
        vertices.append((float(parts[0]), float(parts[1])))
    return vertices


def is_point_in_polygon(x: float, y: float, polygon: PolygonLike) -> bool:
    """
    Check whether a point lies inside a polygon.

    Ray-casting (even-odd rule), based on
    https://wrf.ecse.rpi.edu/Research/Short_Notes/pnpoly.html

    Points exactly on an edge may be reported either way.

    Args:
        x: Point x coordinate
        y: Point y coordinate
        polygon: At least three (x, y) vertices, or a Shapely Polygon

    Returns:
        True if the point is inside the polygon
    """
    vertices = polygon_vertices(polygon)
    x = float(x)
    y = float(y)

    inside = False
    j = len(vertices) - 1
    for i in range(len(vertices)):
        xi, yi = vertices[i]
        xj, yj = vertices[j]

        # yi != yj whenever the first test passes, so the division is safe
        if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
            inside = not inside
        j = i

    return inside
