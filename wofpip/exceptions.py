"""
Custom exceptions and warnings for WOF record processing.
"""


class WofPipError(Exception):
    """Base exception for all wofpip errors."""

    pass


class RecordFormatError(WofPipError):
    """Input is not shaped like a WOF record at all."""

    def __init__(self, message: str, field: str | None = None, detail: str | None = None):
        """
        Initialize record format error.

        Args:
            message: Error description
            field: Name of the malformed top-level member
            detail: Additional detail about what was found instead
        """
        self.field = field
        self.detail = detail
        super().__init__(message)


class DiagnosticsSinkWarning(UserWarning):
    """The injected diagnostics sink raised while handling an event."""

    def __init__(self, message: str = "", original_error: Exception | None = None):
        """
        Initialize diagnostics sink warning.

        Args:
            message: Warning message
            original_error: Exception raised by the sink
        """
        self.original_error = original_error
        super().__init__(message)
