"""
Tests for the default (non-localized) name strategy.
"""

from wofpip.default_name import get_default_name


def test_prefers_label():
    """Test that wof:label wins over wof:name."""
    assert get_default_name({"properties": {"wof:label": "Paris, France", "wof:name": "Paris"}}) == "Paris, France"


def test_falls_back_to_name():
    """Test fallback to wof:name."""
    assert get_default_name({"properties": {"wof:name": ["Paris", "Lutèce"]}}) == "Paris"


def test_ignores_localized_fields():
    """Test that language-suffixed fields are never consulted."""
    record = {"properties": {"label:fra_x_preferred": "Paris", "name:fra_x_preferred": "Paris"}}
    assert get_default_name(record) is False


def test_us_county():
    """Test the US county alternate name."""
    record = {
        "properties": {
            "iso:country": "US",
            "wof:placetype": "county",
            "qs:a2_alt": "Lancaster County",
            "wof:name": "Lancaster",
        }
    }
    assert get_default_name(record) == "Lancaster County"


def test_skips_unknown_label():
    """Test that an unknown label falls through to the name."""
    assert get_default_name({"properties": {"wof:label": "unk", "wof:name": "Paris"}}) == "Paris"
