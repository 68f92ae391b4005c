"""
Protocol definition for diagnostics sinks.

Any object with ``debug`` and ``warning`` methods can receive diagnostics,
without needing to inherit from a base class (structural typing).
A ``logging.Logger`` satisfies the protocol as-is.
"""

import warnings
from typing import Any, Literal, Protocol

from .exceptions import DiagnosticsSinkWarning


class DiagnosticsSink(Protocol):
    """
    Protocol for receiving data-quality diagnostics.

    Events are informational: the transform never depends on what the sink
    does with them.
    """

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Low-severity notice (e.g. a record declares several languages)."""
        ...

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Data-quality warning (e.g. a localized name is missing)."""
        ...


def emit(
    sink: DiagnosticsSink,
    level: Literal["debug", "warning"],
    msg: str,
    *args: Any,
    extra: dict[str, Any] | None = None,
) -> None:
    """
    Send an event to a sink, isolating the caller from sink failures.

    A sink that raises is reported through ``warnings.warn`` with a
    DiagnosticsSinkWarning and the event is dropped.
    """
    try:
        getattr(sink, level)(msg, *args, extra=extra)
    except Exception as e:
        warnings.warn(
            DiagnosticsSinkWarning(f"Diagnostics sink failed on {level} event: {e}", original_error=e),
            stacklevel=2,
        )
