"""
Composition of the record stages.

    records -> filter_out_point_records -> FieldExtractor -> features
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from .config import PipelineConfig
from .diagnostics import DiagnosticsSink
from .extract import FieldExtractor
from .filters import filter_out_point_records
from .names import NameStrategy


def process_records(
    records: Iterable[Mapping[str, Any]],
    config: PipelineConfig | None = None,
    diagnostics: DiagnosticsSink | None = None,
    default_name: NameStrategy | None = None,
) -> Iterator[dict[str, Any]]:
    """
    Run WOF records through the point filter and field extraction.

    Records are pulled lazily, one at a time; output order mirrors the
    order of admitted input records.

    Args:
        records: WOF records
        config: Pipeline configuration. If None, uses defaults
        diagnostics: Sink for name resolution diagnostics
        default_name: Name strategy used when localization is disabled

    Yields:
        Feature dicts with the fixed output schema

    Examples:
        >>> records = [
        ...     {"properties": {"wof:id": 1, "wof:name": "A"}, "geometry": {"type": "Point"}},
        ...     {"properties": {"wof:id": 2, "wof:name": "B"}, "geometry": {"type": "Polygon"}},
        ... ]
        >>> [f["properties"]["Id"] for f in process_records(records)]
        [2]
    """
    extractor = FieldExtractor(config, diagnostics=diagnostics, default_name=default_name)
    for record in filter_out_point_records(records):
        yield extractor(record)
