"""
Tests for geometry helpers.
"""

from types import MappingProxyType

from shapely.geometry import MultiPolygon, Polygon, mapping

from wofpip.geometry import bbox_from_geometry, geometry_type


def test_geometry_type():
    """Test reading the GeoJSON type."""
    assert geometry_type({"type": "Polygon"}) == "Polygon"
    assert geometry_type({}) is None
    assert geometry_type(None) is None


def test_bbox_polygon():
    """Test bbox of a polygon."""
    poly = Polygon([(0, 0), (2, 0), (2, 1), (0, 1), (0, 0)])
    assert bbox_from_geometry(mapping(poly)) == "0.0,0.0,2.0,1.0"


def test_bbox_multipolygon():
    """Test bbox spanning several parts."""
    multi = MultiPolygon(
        [
            Polygon([(0, 0), (1, 0), (1, 1), (0, 0)]),
            Polygon([(5, 5), (6, 5), (6, 7), (5, 5)]),
        ]
    )
    assert bbox_from_geometry(mapping(multi)) == "0.0,0.0,6.0,7.0"


def test_bbox_unreadable_geometry():
    """Test that unreadable geometries yield None instead of raising."""
    assert bbox_from_geometry(None) is None
    assert bbox_from_geometry({"coordinates": [0, 0]}) is None
    assert bbox_from_geometry({"type": "Blob", "coordinates": []}) is None


def test_bbox_empty_geometry():
    """Test that empty geometries have no bbox."""
    assert bbox_from_geometry({"type": "Polygon", "coordinates": []}) is None


def test_read_only_mapping_geometry():
    """Test that non-dict mappings are read like dicts."""
    geometry = MappingProxyType({"type": "Polygon", "coordinates": [[[0, 0], [3, 0], [3, 2], [0, 0]]]})

    assert geometry_type(geometry) == "Polygon"
    assert bbox_from_geometry(geometry) == "0.0,0.0,3.0,2.0"
