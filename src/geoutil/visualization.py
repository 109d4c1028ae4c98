#!/usr/bin/env python3
"""
Track centre visualization using folium maps.
"""

from typing import List, Optional, Tuple
import logging
import folium
from folium.template import Template

from .center import CenterResult
from .track import Track

logger = logging.getLogger(__name__)

TRACK_COLOR = "#2E86AB"
CENTER_COLOR = "#D23C4C"
POLYGON_COLOR = "#69498F"


class CenterLegend(folium.MacroElement):
    """Legend for the track centre map."""

    def __init__(self, point_count: int, center: CenterResult, has_polygon: bool):
        super().__init__()
        self.point_count = point_count
        self.radius_meters = f"{center.radius_meters:.0f}"
        self.show_radius = center.radius_meters > 0
        self.has_polygon = has_polygon

        self._template = Template(
            """
        {% macro html(this, kwargs) %}
        <div id="center-legend" style="
            position: fixed;
            bottom: 50px;
            left: 50px;
            width: 230px;
            background-color: white;
            border: 2px solid grey;
            z-index: 9999;
            font-size: 13px;
            padding: 12px;
            font-family: Arial, sans-serif;
            border-radius: 5px;
            box-shadow: 0 2px 5px rgba(0,0,0,0.2);
            box-sizing: border-box;
        ">
            <b>Legend</b><br>
            <div style="margin: 4px 0; line-height: 1.3;">
                <span style="color: #2E86AB; font-size: 18px;">&mdash;</span>
                GPX Track ({{ this.point_count }} points)
            </div>
            {% if this.show_radius %}
            <div style="margin: 4px 0; line-height: 1.3;">
                <span style="color: #D23C4C; font-weight: bold; font-size: 18px;">&#9675;</span>
                Max radius ({{ this.radius_meters }} m)
            </div>
            {% endif %}
            {% if this.has_polygon %}
            <div style="margin: 4px 0; line-height: 1.3;">
                <span style="color: #69498F; font-weight: bold; font-size: 18px;">&#9633;</span>
                Polygon
            </div>
            {% endif %}
        </div>
        {% endmacro %}
        """
        )


def create_center_map(
    track: Track,
    center: CenterResult,
    output_filename: str,
    polygon: Optional[List[Tuple[float, float]]] = None,
) -> None:
    """
    Create an interactive map showing a track and its centre, save as HTML.

    Args:
        track: Track to display
        center: CenterResult computed for the track
        output_filename: Path where HTML map file should be saved
        polygon: Optional (latitude, longitude) vertices to outline

    Raises:
        ValueError: If track is empty
    """
    if not track:
        raise ValueError("Cannot create map for empty track")

    south, west, north, east = track.get_bbox()

    logger.debug(
        f"Creating map centered at ({center.latitude:.4f}, {center.longitude:.4f})"
    )

    center_map = folium.Map(location=[center.latitude, center.longitude], tiles=None)

    folium.TileLayer(
        tiles="CartoDB positron",
        attr=(
            "&copy; <a href='https://www.openstreetmap.org/copyright'>OpenStreetMap</a> "
            "contributors &copy; <a href='https://carto.com/attributions'>CARTO</a>"
        ),
        name="Standard",
        control=True,
        show=True,
    ).add_to(center_map)

    folium.LayerControl().add_to(center_map)

    coordinates = [[point.latitude, point.longitude] for point in track]

    folium.PolyLine(
        coordinates,
        color=TRACK_COLOR,
        weight=2,
        opacity=0.6,
        popup="GPX Track",
    ).add_to(center_map)

    folium.Marker(
        [track[0].latitude, track[0].longitude],
        popup="Start",
        icon=folium.Icon(color="green", icon="play"),
    ).add_to(center_map)

    folium.Marker(
        [track[-1].latitude, track[-1].longitude],
        popup="End",
        icon=folium.Icon(color="red", icon="stop"),
    ).add_to(center_map)

    folium.Marker(
        [center.latitude, center.longitude],
        popup=f"Centre ({center.latitude:.6f}, {center.longitude:.6f})",
        icon=folium.Icon(color="darkred", icon="screenshot"),
    ).add_to(center_map)

    if center.radius_meters > 0:
        folium.Circle(
            location=[center.latitude, center.longitude],
            radius=center.radius_meters,
            color=CENTER_COLOR,
            weight=2,
            fill=False,
            popup=f"Max radius: {center.radius_meters:.0f} m",
        ).add_to(center_map)

    if polygon:
        folium.Polygon(
            locations=[[lat, lon] for lat, lon in polygon],
            color=POLYGON_COLOR,
            weight=2,
            fill=True,
            fill_opacity=0.1,
        ).add_to(center_map)

    center_map.add_child(CenterLegend(len(track), center, bool(polygon)))

    center_map.fit_bounds([[south, west], [north, east]])

    center_map.save(output_filename)

    logger.debug(f"Map saved to {output_filename}")
