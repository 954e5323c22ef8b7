"""Journal format configuration package."""

from journal_formatter.config.loader import (
    get_builtin_formats,
    load_builtin_formats,
    load_sample_manuscript,
)

__all__ = ["get_builtin_formats", "load_builtin_formats", "load_sample_manuscript"]
