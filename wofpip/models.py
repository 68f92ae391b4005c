"""
Output models for normalized place records.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Centroid(BaseModel):
    """Representative point copied from geom:latitude / geom:longitude."""

    lat: Any = None
    lon: Any = None


class PlaceProperties(BaseModel):
    """
    Fixed property schema consumed by the PIP indexer.

    Values are copied from the source without coercion, so absent
    properties come through as None and an unresolved name as False.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Any = Field(default=None, alias="Id", description="wof:id of the record")
    name: Any = Field(default=False, alias="Name", description="Resolved display name, False if none")
    placetype: Any = Field(default=None, alias="Placetype", description="wof:placetype, unvalidated")
    centroid: Centroid = Field(default_factory=Centroid, alias="Centroid")
    bounding_box: Any = Field(default=None, alias="BoundingBox", description="geom:bbox, copied through")
    hierarchy: list[list[Any]] = Field(alias="Hierarchy", description="Ancestor id chains, never empty")
    abbrev: Any = Field(default=None, alias="Abbrev", description="Place-type specific short code")


class PlaceRecord(BaseModel):
    """A normalized record: fixed properties plus the untouched source geometry."""

    properties: PlaceProperties
    geometry: Any = None

    def to_feature(self) -> dict[str, Any]:
        """
        Serialize to the plain dict shape emitted by the pipeline.

        The geometry object is passed through as-is, not copied.
        """
        return {
            "properties": self.properties.model_dump(by_alias=True),
            "geometry": self.geometry,
        }
