"""
Record filters applied before field extraction.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from .geometry import POINT_TYPE, geometry_type

logger = logging.getLogger(__name__)


def is_not_point(record: Mapping[str, Any]) -> bool:
    """
    Check whether a record should be kept for polygon indexing.

    Only bare points are rejected. A geometry without a ``type`` (or a record
    without geometry) is not a point and is kept.
    """
    return geometry_type(record.get("geometry")) != POINT_TYPE


def filter_out_point_records(records: Iterable[Mapping[str, Any]]) -> Iterator[Mapping[str, Any]]:
    """
    Yield the records whose geometry is not a Point, in input order.

    Args:
        records: WOF records

    Yields:
        Admitted records, unchanged
    """
    for record in records:
        if is_not_point(record):
            yield record
        else:
            properties = record.get("properties")
            wof_id = properties.get("wof:id") if isinstance(properties, Mapping) else None
            logger.debug("Dropping point record %s", wof_id)
