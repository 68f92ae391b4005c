"""
Geometry helpers for WOF records.

Geometries stay GeoJSON dicts; shapely is only used to read them.
"""

import logging
from collections.abc import Mapping
from typing import Any

from shapely.errors import ShapelyError
from shapely.geometry import shape

logger = logging.getLogger(__name__)

POINT_TYPE = "Point"


def geometry_type(geometry: Any) -> str | None:
    """Return the GeoJSON ``type`` of a geometry, or None if it has none."""
    if isinstance(geometry, Mapping):
        return geometry.get("type")
    return None


def bbox_from_geometry(geometry: Any) -> str | None:
    """
    Compute a WOF-style bounding box string from a GeoJSON geometry.

    Args:
        geometry: GeoJSON geometry dict in WGS84 (EPSG:4326).

    Returns:
        "minx,miny,maxx,maxy" like geom:bbox, or None if the geometry
        cannot be read or is empty.

    Examples:
        >>> bbox_from_geometry({"type": "Polygon", "coordinates": [[[0, 0], [2, 0], [2, 1], [0, 0]]]})
        '0.0,0.0,2.0,1.0'
    """
    if not isinstance(geometry, Mapping) or "type" not in geometry:
        return None
    try:
        geom = shape(dict(geometry))
    except (ShapelyError, ValueError, TypeError, KeyError, AttributeError, IndexError) as e:
        logger.debug("Cannot derive bbox from %s geometry: %s", geometry.get("type"), e)
        return None
    if geom.is_empty:
        return None
    return ",".join(str(float(v)) for v in geom.bounds)
