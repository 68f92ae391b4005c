"""
Field extraction: maps WOF records to the fixed PIP output schema.
"""

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any

from .config import PipelineConfig
from .diagnostics import DiagnosticsSink
from .geometry import bbox_from_geometry
from .models import Centroid, PlaceProperties, PlaceRecord
from .names import NameResolver, NameStrategy
from .properties import get_properties, is_empty


class FieldExtractor:
    """
    Extracts id, name, placetype, centroid, bbox, hierarchy and abbreviation.

    Missing optional properties never fail the transform: they come through
    as None (or False for the name).

    Examples:
        >>> extractor = FieldExtractor(PipelineConfig())
        >>> record = {"properties": {"wof:id": 101, "wof:name": "Paris"}, "geometry": {"type": "Polygon"}}
        >>> extractor.extract(record).properties.hierarchy
        [[101]]
    """

    def __init__(
        self,
        config: PipelineConfig | None = None,
        diagnostics: DiagnosticsSink | None = None,
        default_name: NameStrategy | None = None,
    ):
        """
        Initialize the extractor.

        Args:
            config: Pipeline configuration. If None, uses defaults
            diagnostics: Sink for name resolution diagnostics
            default_name: Name strategy used when localization is disabled
        """
        self.config = config or PipelineConfig()
        self.name_resolver = NameResolver(diagnostics=diagnostics, default_name=default_name)

    def extract(self, record: Mapping[str, Any]) -> PlaceRecord:
        """
        Transform a single WOF record.

        Args:
            record: WOF record with ``properties`` and ``geometry``

        Returns:
            PlaceRecord with the fixed output schema

        Raises:
            RecordFormatError: If the record or its properties are not mappings
        """
        properties = get_properties(record)
        geometry = record.get("geometry")
        wof_id = properties.get("wof:id")
        placetype = properties.get("wof:placetype")

        bounding_box = properties.get("geom:bbox")
        if bounding_box is None and self.config.fill_missing_bbox:
            bounding_box = bbox_from_geometry(geometry)

        return PlaceRecord(
            properties=PlaceProperties(
                id=wof_id,
                name=self.name_resolver.resolve(
                    record, self.config.enable_localized_names, self.config.lang_key
                ),
                placetype=placetype,
                centroid=Centroid(
                    lat=properties.get("geom:latitude"),
                    lon=properties.get("geom:longitude"),
                ),
                bounding_box=bounding_box,
                hierarchy=extract_hierarchy(properties.get("wof:hierarchy"), wof_id),
                abbrev=extract_abbrev(properties, placetype),
            ),
            geometry=geometry,
        )

    def __call__(self, record: Mapping[str, Any]) -> dict[str, Any]:
        return self.extract(record).to_feature()


def extract_hierarchy(hierarchy: Any, wof_id: Any) -> list[list[Any]]:
    """
    Condense wof:hierarchy down to its ids, or synthesize one from the record id.

    Each hierarchy entry maps ancestor placetype to id (e.g.
    ``{"country_id": 85633147, "region_id": 85683431}``); only the ids are
    kept, in the entry's own order.

    Args:
        hierarchy: Raw wof:hierarchy value
        wof_id: Id of the record, used when there is no usable hierarchy

    Returns:
        Non-empty list of non-empty id lists

    Examples:
        >>> extract_hierarchy([{"country_id": 1, "region_id": 2}], 2)
        [[1, 2]]
        >>> extract_hierarchy([], 101)
        [[101]]
    """
    condensed = []
    if not is_empty(hierarchy) and isinstance(hierarchy, Sequence) and not isinstance(hierarchy, str):
        condensed = [list(h.values()) for h in hierarchy if isinstance(h, Mapping) and h]
    return condensed or [[wof_id]]


def extract_abbrev(properties: Mapping[str, Any], placetype: Any) -> Any:
    """
    Choose the abbreviation field for a place type.

    Countries use their ISO alpha-3 code; other places prefer a shortcode
    and fall back to wof:abbreviation.
    """
    if placetype == "country":
        return properties.get("wof:country_alpha3")
    if properties.get("wof:shortcode"):
        return properties["wof:shortcode"]
    return properties.get("wof:abbreviation")


def extract_fields(
    records: Iterable[Mapping[str, Any]],
    enable_localized_names: Any = False,
    lang_key: str | None = None,
    *,
    diagnostics: DiagnosticsSink | None = None,
    default_name: NameStrategy | None = None,
) -> Iterator[dict[str, Any]]:
    """
    Yield the extracted feature dict of each record, in input order.

    Args:
        records: WOF records (typically already point-filtered)
        enable_localized_names: Bool, or "true"/"false" in any case
        lang_key: Target language code, or None to derive it per record
        diagnostics: Sink for name resolution diagnostics
        default_name: Name strategy used when localization is disabled
    """
    config = PipelineConfig(enable_localized_names=enable_localized_names, lang_key=lang_key)
    extractor = FieldExtractor(config, diagnostics=diagnostics, default_name=default_name)
    for record in records:
        yield extractor(record)
