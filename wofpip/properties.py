"""
Accessors for the loosely-typed WOF property bag.

WOF properties map namespaced keys (``wof:name``, ``name:fra_x_preferred``, ...)
to either a scalar or a list of scalars. These helpers normalize that union
so callers never repeat ``isinstance(value, list)`` checks.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Literal

from .exceptions import RecordFormatError

Scalar = str | int | float | bool | None
PropertyValue = Scalar | Sequence[Scalar]

# Language markers meaning "unknown" / "undetermined"
UNKNOWN_VALUES: frozenset[str] = frozenset({"unk", "und"})


def get_properties(record: Mapping[str, Any]) -> Mapping[str, PropertyValue]:
    """
    Return the ``properties`` mapping of a record.

    Raises:
        RecordFormatError: If the record or its properties are not mappings.
    """
    if not isinstance(record, Mapping):
        raise RecordFormatError(
            f"WOF record must be a mapping, got {type(record).__name__}",
            field="record",
            detail=repr(record)[:80],
        )
    properties = record.get("properties")
    if not isinstance(properties, Mapping):
        raise RecordFormatError(
            f"WOF record 'properties' must be a mapping, got {type(properties).__name__}",
            field="properties",
        )
    return properties


def has_property(record: Mapping[str, Any], key: str) -> bool:
    """True if the key is present in the record's properties, whatever its value."""
    return key in get_properties(record)


def first_value(value: PropertyValue) -> Scalar:
    """Return the first element of a list value, or the scalar itself."""
    if _is_sequence(value):
        return value[0] if value else None
    return value


def get_property_value(record: Mapping[str, Any], key: str) -> Scalar | Literal[False]:
    """
    Get the value of a property, or ``False`` if the key is not present.

    List values are reduced to their first element.

    Examples:
        >>> get_property_value({"properties": {"wof:lang": ["fra", "eng"]}}, "wof:lang")
        'fra'
        >>> get_property_value({"properties": {}}, "wof:lang")
        False
    """
    properties = get_properties(record)
    if key not in properties:
        return False
    return first_value(properties[key])


def is_empty(value: Any) -> bool:
    """True for ``None`` and for empty strings, sequences and mappings."""
    if value is None:
        return True
    if isinstance(value, (str, Sequence, Mapping)):
        return len(value) == 0
    return False


def is_unknown(value: PropertyValue) -> bool:
    """True if the value is an unknown/undetermined marker, bare or as a one-element list."""
    if _is_sequence(value):
        return len(value) == 1 and isinstance(value[0], str) and value[0] in UNKNOWN_VALUES
    return isinstance(value, str) and value in UNKNOWN_VALUES


def qualifies(record: Mapping[str, Any], key: str) -> bool:
    """
    Check that a property is present, non-empty and not an unknown marker.
    """
    properties = get_properties(record)
    if key not in properties:
        return False
    value = properties[key]
    return not is_empty(value) and not is_unknown(value) and not is_empty(first_value(value))


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))
