"""
Ordered lookup rules for picking a name out of a WOF property bag.

A fallback chain is a tuple of NameRule evaluated by first_qualifying_value,
so each step can be tested on its own and chains can be extended by
prepending or appending rules.
"""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Literal

from .properties import Scalar, get_properties, get_property_value, has_property, qualifies


@dataclass(frozen=True)
class NameRule:
    """
    A single candidate property in a fallback chain.

    Attributes:
        template: Property key, with a ``{lang}`` placeholder for localized rules
        localized: Whether the key depends on a language code
    """

    template: str
    localized: bool = False

    def key(self, lang_key: str | None = None) -> str:
        """Property key for a language (ignored by non-localized rules)."""
        if self.localized:
            return self.template.format(lang=lang_key)
        return self.template


# Fields declaring a record's languages, in priority order
LANGUAGE_FIELDS: tuple[str, ...] = (
    "wof:lang_x_preferred",
    "wof:lang_x_spoken",
    "wof:lang_x_official",
    "wof:lang",
)

LOCALIZED_NAME_RULES: tuple[NameRule, ...] = (
    NameRule("label:{lang}_x_preferred", localized=True),
    NameRule("name:{lang}_x_preferred", localized=True),
    NameRule("wof:label"),
    NameRule("wof:name"),
)

DEFAULT_NAME_RULES: tuple[NameRule, ...] = (
    NameRule("wof:label"),
    NameRule("wof:name"),
)

US_COUNTY_NAME_KEY = "qs:a2_alt"


def first_qualifying_value(
    record: Mapping[str, Any],
    rules: Iterable[NameRule],
    lang_key: str | None = None,
    on_rejected: Callable[[NameRule, str], None] | None = None,
) -> Scalar | Literal[False]:
    """
    Return the value of the first rule whose property qualifies.

    Localized rules are skipped when no language key is known. A property
    that is present but does not qualify (empty, "unk", "und") is reported
    to ``on_rejected`` before moving on to the next rule.

    Args:
        record: WOF record
        rules: Ordered fallback chain
        lang_key: Language code substituted into localized rules
        on_rejected: Callback receiving the rule and the resolved key

    Returns:
        The qualifying value (first element for lists), or False
    """
    for rule in rules:
        if rule.localized and lang_key is None:
            continue
        key = rule.key(lang_key)
        if not has_property(record, key):
            continue
        if qualifies(record, key):
            return get_property_value(record, key)
        if on_rejected is not None:
            on_rejected(rule, key)
    return False


def is_us_county(record: Mapping[str, Any]) -> bool:
    """True for US counties that carry a full alternate name (e.g. "Lancaster County")."""
    properties = get_properties(record)
    return (
        properties.get("iso:country") == "US"
        and properties.get("wof:placetype") == "county"
        and US_COUNTY_NAME_KEY in properties
    )
