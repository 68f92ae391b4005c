"""
Default (non-localized) name strategy.
"""

from collections.abc import Mapping
from typing import Any, Literal

from .properties import Scalar, get_property_value
from .rules import DEFAULT_NAME_RULES, US_COUNTY_NAME_KEY, first_qualifying_value, is_us_county


def get_default_name(record: Mapping[str, Any]) -> Scalar | Literal[False]:
    """
    Return the unlocalized display name of a record, or False if it has none.

    US counties use their full alternate name; everything else prefers
    wof:label over wof:name.
    """
    if is_us_county(record):
        return get_property_value(record, US_COUNTY_NAME_KEY)
    return first_qualifying_value(record, DEFAULT_NAME_RULES)
