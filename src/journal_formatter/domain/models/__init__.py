"""Domain models — public API.

Provides convenient imports for the most commonly used domain entities.
"""

from journal_formatter.domain.models.enums import FontFamily, ReferenceStyle
from journal_formatter.domain.models.format_registry import FormatRegistry
from journal_formatter.domain.models.journal_format import (
    FormatDraft,
    FormattedResult,
    JournalFormat,
    Margins,
    download_name_for,
)

__all__ = [
    # Enums
    "FontFamily",
    "ReferenceStyle",
    # Formats
    "FormatDraft",
    "FormatRegistry",
    "JournalFormat",
    "Margins",
    # Results
    "FormattedResult",
    "download_name_for",
]
