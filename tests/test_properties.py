"""
Tests for property bag accessors.
"""

import pytest

from wofpip.exceptions import RecordFormatError
from wofpip.properties import (
    UNKNOWN_VALUES,
    first_value,
    get_property_value,
    has_property,
    is_empty,
    is_unknown,
    qualifies,
)


def record(**properties):
    return {"properties": {k.replace("__", ":"): v for k, v in properties.items()}}


def test_get_property_value_scalar():
    """Test that scalar values are returned as-is."""
    assert get_property_value(record(wof__name="Paris"), "wof:name") == "Paris"
    assert get_property_value(record(wof__id=101), "wof:id") == 101


def test_get_property_value_list_returns_first():
    """Test that list values are reduced to their first element."""
    assert get_property_value(record(wof__lang=["fra", "eng"]), "wof:lang") == "fra"


def test_get_property_value_missing():
    """Test that a missing key yields False rather than raising."""
    assert get_property_value(record(), "wof:name") is False


def test_has_property():
    """Test presence check, including keys holding falsy values."""
    rec = record(wof__label="")
    assert has_property(rec, "wof:label")
    assert not has_property(rec, "wof:name")


def test_first_value_empty_list():
    """Test that an empty list has no first value."""
    assert first_value([]) is None


def test_is_empty():
    """Test emptiness on the shapes WOF properties take."""
    assert is_empty(None)
    assert is_empty("")
    assert is_empty([])
    assert is_empty({})
    assert not is_empty("Paris")
    assert not is_empty(["Paris"])
    assert not is_empty(0)


def test_unknown_values_set():
    """Test the closed set of unknown markers."""
    assert UNKNOWN_VALUES == {"unk", "und"}


@pytest.mark.parametrize("value", ["unk", "und", ["unk"], ["und"]])
def test_is_unknown(value):
    """Test unknown markers as scalar and one-element list."""
    assert is_unknown(value)


@pytest.mark.parametrize("value", ["Paris", ["unk", "Paris"], "", 5])
def test_is_not_unknown(value):
    """Test that other values, including multi-element lists, are not markers."""
    assert not is_unknown(value)


def test_qualifies():
    """Test the qualification predicate."""
    rec = record(
        name__fra_x_preferred=["Paris"],
        name__deu_x_preferred="unk",
        name__ita_x_preferred=[],
        name__spa_x_preferred=[""],
    )
    assert qualifies(rec, "name:fra_x_preferred")
    assert not qualifies(rec, "name:deu_x_preferred")
    assert not qualifies(rec, "name:ita_x_preferred")
    assert not qualifies(rec, "name:spa_x_preferred")
    assert not qualifies(rec, "name:eng_x_preferred")


def test_non_mapping_record_raises():
    """Test that a record that is not a mapping is rejected."""
    with pytest.raises(RecordFormatError) as exc_info:
        get_property_value(["not", "a", "record"], "wof:name")

    assert exc_info.value.field == "record"


def test_missing_properties_raises():
    """Test that a record without a properties mapping is rejected."""
    with pytest.raises(RecordFormatError) as exc_info:
        has_property({"geometry": {"type": "Polygon"}}, "wof:name")

    assert exc_info.value.field == "properties"


@pytest.mark.parametrize("value", [[["unk"]], [{"lang": "unk"}]])
def test_is_unknown_unhashable_first_element(value):
    """Test that nested values in a one-element list are not markers and do not raise."""
    assert not is_unknown(value)


def test_qualifies_nested_value():
    """Test qualification of a list holding a nested value."""
    assert qualifies(record(wof__name=[{"text": "Paris"}]), "wof:name")
