"""
Pipeline configuration and boolean coercion for string-only config channels.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

ENV_PREFIX = "WOFPIP_"


def coerce_bool(value: Any) -> bool:
    """
    Normalize a flag that may arrive as a string.

    Booleans pass through, ``"true"``/``"false"`` map to their value in any
    case, and everything else (other strings, None, numbers) is False.

    Examples:
        >>> coerce_bool("TRUE")
        True
        >>> coerce_bool("maybe")
        False
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.lower() == "true"
    return False


@dataclass
class PipelineConfig:
    """
    Parameters threaded through every record transform.

    Attributes:
        enable_localized_names: Use the localized name resolution algorithm
            instead of the default name strategy. Strings are coerced.
        lang_key: ISO 639-3 style language code (e.g. "fra"). None derives the
            language from each record's declared languages.
        fill_missing_bbox: Derive BoundingBox from the geometry when the record
            has no geom:bbox property.
    """

    enable_localized_names: bool = False
    lang_key: str | None = None
    fill_missing_bbox: bool = False

    def __post_init__(self):
        self.enable_localized_names = coerce_bool(self.enable_localized_names)
        self.fill_missing_bbox = coerce_bool(self.fill_missing_bbox)
        if not self.lang_key:
            self.lang_key = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "PipelineConfig":
        """
        Build a config from WOFPIP_* environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            PipelineConfig with unset variables left at their defaults
        """
        environ = os.environ if environ is None else environ
        return cls(
            enable_localized_names=environ.get(f"{ENV_PREFIX}ENABLE_LOCALIZED_NAMES", False),
            lang_key=environ.get(f"{ENV_PREFIX}LANG_KEY"),
            fill_missing_bbox=environ.get(f"{ENV_PREFIX}FILL_MISSING_BBOX", False),
        )
