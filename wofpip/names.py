"""
Display name resolution for WOF records.

Chooses a single name per record, either through the default strategy or
through the localized algorithm:

1. US counties with a ``qs:a2_alt`` use it directly
2. The language key is taken from the caller or derived from the record's
   declared languages
3. ``label:<lang>_x_preferred``, ``name:<lang>_x_preferred``, ``wof:label``
   and ``wof:name`` are tried in order, skipping empty and unknown values
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Literal

from .config import coerce_bool
from .default_name import get_default_name
from .diagnostics import DiagnosticsSink, emit
from .properties import Scalar, first_value, get_properties, get_property_value
from .rules import (
    LANGUAGE_FIELDS,
    LOCALIZED_NAME_RULES,
    US_COUNTY_NAME_KEY,
    NameRule,
    first_qualifying_value,
    is_us_county,
)

logger = logging.getLogger(__name__)

NameStrategy = Callable[[Mapping[str, Any]], Scalar | Literal[False]]


class NameResolver:
    """
    Resolves the display name of WOF records.

    Examples:
        >>> resolver = NameResolver()
        >>> record = {"properties": {"wof:name": "Paris", "name:fra_x_preferred": ["Paris"]}}
        >>> resolver.resolve(record, enable_localized_names=True, lang_key="fra")
        'Paris'
        >>> resolver.resolve(record, enable_localized_names=False)
        'Paris'
    """

    def __init__(
        self,
        diagnostics: DiagnosticsSink | None = None,
        default_name: NameStrategy | None = None,
        rules: Sequence[NameRule] = LOCALIZED_NAME_RULES,
    ):
        """
        Initialize the resolver.

        Args:
            diagnostics: Sink for data-quality events. Defaults to this module's logger
            default_name: Strategy used when localization is disabled
            rules: Localized fallback chain
        """
        self.diagnostics = diagnostics if diagnostics is not None else logger
        self.default_name = default_name or get_default_name
        self.rules = tuple(rules)

    def resolve(
        self,
        record: Mapping[str, Any],
        enable_localized_names: Any = False,
        lang_key: str | None = None,
    ) -> Scalar | Literal[False]:
        """
        Resolve the display name of a record.

        Args:
            record: WOF record
            enable_localized_names: Bool, or "true"/"false" in any case
            lang_key: Target language code. Derived from the record when empty

        Returns:
            The display name, or False if no name-like field qualifies
        """
        if coerce_bool(enable_localized_names):
            return self.get_localized_name(record, lang_key)
        return self.default_name(record)

    def get_localized_name(self, record: Mapping[str, Any], lang_key: str | None = None) -> Scalar | Literal[False]:
        """Run the localized resolution algorithm."""
        # eg - wof:name = 'Lancaster' and qs:a2_alt = 'Lancaster County', use latter
        if is_us_county(record):
            return get_property_value(record, US_COUNTY_NAME_KEY)

        if not lang_key:
            lang_key = self.derive_lang_key(record)

        return first_qualifying_value(
            record,
            self.rules,
            lang_key,
            on_rejected=lambda rule, key: self._report_missing(record, rule, key),
        )

    def derive_lang_key(self, record: Mapping[str, Any]) -> str | None:
        """
        Pick a language from the first declared language field present.

        Returns:
            The first language of that field, or None if no field is present
        """
        properties = get_properties(record)
        for field in LANGUAGE_FIELDS:
            if field not in properties:
                continue
            languages = properties[field]
            if isinstance(languages, Sequence) and not isinstance(languages, str) and len(languages) > 1:
                emit(
                    self.diagnostics,
                    "debug",
                    "more than one %s specified: %s",
                    field,
                    languages,
                    extra={"wof_id": properties.get("wof:id"), "lang_field": field},
                )
            lang_key = first_value(languages)
            return str(lang_key) if lang_key else None
        return None

    def _report_missing(self, record: Mapping[str, Any], rule: NameRule, key: str) -> None:
        if not rule.localized:
            return
        properties = get_properties(record)
        emit(
            self.diagnostics,
            "warning",
            "%s [missing] %s %s %s",
            key,
            properties.get("wof:name"),
            properties.get("wof:placetype"),
            properties.get("wof:id"),
            extra={"wof_id": properties.get("wof:id"), "property_key": key},
        )


def resolve_name(
    record: Mapping[str, Any],
    enable_localized_names: Any = False,
    lang_key: str | None = None,
    *,
    diagnostics: DiagnosticsSink | None = None,
    default_name: NameStrategy | None = None,
) -> Scalar | Literal[False]:
    """
    Resolve a record's display name with a one-off NameResolver.

    See NameResolver.resolve for arguments.
    """
    resolver = NameResolver(diagnostics=diagnostics, default_name=default_name)
    return resolver.resolve(record, enable_localized_names, lang_key)
