"""Text extractors for uploaded manuscripts."""

from journal_formatter.infrastructure.extractors.text_extractor import (
    extract_text,
    extract_text_from_bytes,
)

__all__ = ["extract_text", "extract_text_from_bytes"]
