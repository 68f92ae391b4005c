"""
wofpip - Who's On First record normalization for point-in-polygon indexing

Filter out point records and map WOF place records to a fixed schema with a
resolved display name.
"""

# Main API
from .config import PipelineConfig, coerce_bool
from .default_name import get_default_name

# Diagnostics
from .diagnostics import DiagnosticsSink

# Exceptions
from .exceptions import DiagnosticsSinkWarning, RecordFormatError, WofPipError
from .extract import FieldExtractor, extract_fields

# Filters
from .filters import filter_out_point_records, is_not_point

# Models (for type hints and result access)
from .models import Centroid, PlaceProperties, PlaceRecord
from .names import NameResolver, resolve_name
from .pipeline import process_records

# Rules
from .rules import LANGUAGE_FIELDS, LOCALIZED_NAME_RULES, NameRule, first_qualifying_value

__all__ = [
    # Main API
    "process_records",
    "FieldExtractor",
    "extract_fields",
    "NameResolver",
    "resolve_name",
    "get_default_name",
    # Filters
    "filter_out_point_records",
    "is_not_point",
    # Models
    "PlaceRecord",
    "PlaceProperties",
    "Centroid",
    # Configuration
    "PipelineConfig",
    "coerce_bool",
    # Rules
    "NameRule",
    "LANGUAGE_FIELDS",
    "LOCALIZED_NAME_RULES",
    "first_qualifying_value",
    # Diagnostics
    "DiagnosticsSink",
    # Exceptions
    "WofPipError",
    "RecordFormatError",
    "DiagnosticsSinkWarning",
]
