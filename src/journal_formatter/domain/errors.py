"""Domain errors — custom exceptions for Journal Formatter.

These exceptions are raised by domain services and caught by application
or presentation layers. They carry no infrastructure dependencies.
"""


class JournalFormatterError(Exception):
    """Base exception for all Journal Formatter errors."""


class EmptyInputError(JournalFormatterError):
    """Raised when a blank manuscript is submitted for formatting."""


class FormatValidationError(JournalFormatterError):
    """Raised when a custom journal format is missing a name."""


class FormatNotFoundError(JournalFormatterError):
    """Raised when no journal format matches the requested identifier."""


class ExtractionError(JournalFormatterError):
    """Raised when no usable text can be extracted from an uploaded file."""


class StorageReadError(JournalFormatterError):
    """Raised when the persisted custom format list cannot be read."""


class StorageWriteError(JournalFormatterError):
    """Raised when a custom format cannot be persisted."""


class ExportError(JournalFormatterError):
    """Raised when a formatted manuscript cannot be written to disk."""


class ConfigurationError(JournalFormatterError):
    """Raised when configuration is invalid or missing."""
