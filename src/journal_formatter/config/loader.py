"""Loader for the built-in journal formats.

Loads the JSON list of formats shipped with the package and returns
validated ``JournalFormat`` instances. Uses module-level caching so the file
is only parsed once per process.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from journal_formatter.domain.errors import ConfigurationError
from journal_formatter.domain.models.journal_format import JournalFormat

# Module-level cache
_formats_cache: dict[str, tuple[JournalFormat, ...]] = {}

# Default paths — live next to this module
_DEFAULT_FORMATS_PATH = Path(__file__).parent / "builtin_formats.json"
_SAMPLE_MANUSCRIPT_PATH = Path(__file__).parent / "sample_manuscript.txt"


def load_builtin_formats(path: Optional[Path] = None) -> tuple[JournalFormat, ...]:
    """Load and validate journal formats from a JSON file.

    Parameters
    ----------
    path : Path | None
        Path to a custom JSON list of formats.
        If ``None``, the packaged ``builtin_formats.json`` is used.

    Returns
    -------
    tuple[JournalFormat, ...]
        Validated formats, in file order.

    Raises
    ------
    FileNotFoundError
        If the specified path does not exist.
    ConfigurationError
        If the file is not a JSON list of valid formats, or repeats an id.
    """
    formats_path = path or _DEFAULT_FORMATS_PATH
    cache_key = str(formats_path.resolve())

    if cache_key in _formats_cache:
        return _formats_cache[cache_key]

    if not formats_path.exists():
        raise FileNotFoundError(f"Formats file not found: {formats_path}")

    try:
        raw = json.loads(formats_path.read_text(encoding="utf-8"))
        if not isinstance(raw, list):
            raise ValueError("expected a JSON list of formats")
        formats = tuple(JournalFormat.model_validate(item) for item in raw)
    except ValueError as exc:
        # json.JSONDecodeError and pydantic.ValidationError are ValueErrors
        raise ConfigurationError(f"Invalid formats file {formats_path}: {exc}") from exc

    ids = [f.id for f in formats]
    if len(set(ids)) != len(ids):
        raise ConfigurationError(f"Duplicate format ids in {formats_path}")

    _formats_cache[cache_key] = formats
    return formats


def get_builtin_formats() -> tuple[JournalFormat, ...]:
    """Get the packaged built-in formats (cached).

    This is the main entry point used by the rest of the application.
    """
    return load_builtin_formats()


def load_sample_manuscript() -> str:
    """Return the sample manuscript used to try the formatter."""
    return _SAMPLE_MANUSCRIPT_PATH.read_text(encoding="utf-8")


def clear_cache() -> None:
    """Clear the formats cache — useful for testing."""
    _formats_cache.clear()
