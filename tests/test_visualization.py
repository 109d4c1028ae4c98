import unittest
from unittest.mock import patch, MagicMock

from geoutil.center import CenterResult
from geoutil.track import Track, TrackPoint
from geoutil.visualization import create_center_map


def make_track():
    return Track(
        [TrackPoint(47.0, 8.0), TrackPoint(47.01, 8.01), TrackPoint(47.02, 8.0)]
    )


class TestCreateCenterMap(unittest.TestCase):

    @patch("geoutil.visualization.folium.LayerControl")
    @patch("geoutil.visualization.folium.TileLayer")
    @patch("geoutil.visualization.folium.Map")
    @patch("geoutil.visualization.CenterLegend")
    @patch("geoutil.visualization.folium.Circle")
    @patch("geoutil.visualization.folium.PolyLine")
    @patch("geoutil.visualization.folium.Marker")
    def test_adds_radius_circle_and_saves(
        self,
        mock_marker,
        mock_polyline,
        mock_circle,
        mock_legend,
        mock_map,
        mock_tilelayer,
        mock_layercontrol,
    ):
        mock_map_instance = MagicMock(name="map_instance")
        mock_map.return_value = mock_map_instance

        center = CenterResult(47.01, 8.005, 1234.0)
        create_center_map(make_track(), center, "center_map.html")

        mock_map.assert_called_once()
        self.assertEqual(mock_map.call_args.kwargs["location"], [47.01, 8.005])

        # Start, end and centre markers
        self.assertEqual(mock_marker.call_count, 3)

        mock_circle.assert_called_once()
        self.assertEqual(mock_circle.call_args.kwargs["radius"], 1234.0)

        mock_map_instance.fit_bounds.assert_called_once_with(
            [[47.0, 8.0], [47.02, 8.01]]
        )
        mock_map_instance.save.assert_called_once_with("center_map.html")

    @patch("geoutil.visualization.folium.Map")
    @patch("geoutil.visualization.folium.Circle")
    def test_no_circle_without_radius(self, mock_circle, mock_map):
        mock_map.return_value = MagicMock(name="map_instance")

        create_center_map(make_track(), CenterResult(47.01, 8.005), "center_map.html")

        mock_circle.assert_not_called()

    def test_writes_html_file(self):
        import tempfile
        import os

        with tempfile.TemporaryDirectory() as tmpdir:
            output = os.path.join(tmpdir, "map.html")
            polygon = [(46.9, 7.9), (46.9, 8.1), (47.1, 8.1), (47.1, 7.9)]
            create_center_map(
                make_track(), CenterResult(47.01, 8.005, 900.0), output, polygon
            )

            with open(output, encoding="utf-8") as f:
                html = f.read()

        self.assertIn("center-legend", html)
        self.assertIn("Max radius", html)
        self.assertIn("GPX Track (3 points)", html)


if __name__ == "__main__":
    unittest.main()
