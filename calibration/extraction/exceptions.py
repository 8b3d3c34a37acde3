class ExtractionError(Exception):
    """Base exception for all extraction-related errors."""


class DigitTableError(ExtractionError):
    """Raised when a digit-word table cannot be scanned unambiguously."""
