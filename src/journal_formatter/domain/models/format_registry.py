"""Ordered registry of journal formats.

Built-in formats come first, followed by the user-defined ones restored
from storage and those registered during the session.

This module belongs to the Domain layer. It only depends on:
- Python stdlib (logging, time)
- Domain models, ports and errors
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Iterator

from journal_formatter.domain.errors import FormatNotFoundError, StorageReadError
from journal_formatter.domain.models.journal_format import FormatDraft, JournalFormat
from journal_formatter.domain.ports.format_storage import FormatStoragePort

logger = logging.getLogger(__name__)

_CUSTOM_ID_PREFIX = "custom_"


class FormatRegistry:
    """Holds the journal formats a manuscript can be formatted for.

    Parameters
    ----------
    builtin_formats : Iterable[JournalFormat]
        The fixed formats shipped with the application.
    storage : FormatStoragePort | None
        Where user-defined formats are persisted. Without storage the
        registry lives in memory only.
    """

    def __init__(
        self,
        builtin_formats: Iterable[JournalFormat],
        storage: FormatStoragePort | None = None,
    ) -> None:
        self._storage = storage
        self._builtins: list[JournalFormat] = list(builtin_formats)
        self._formats: list[JournalFormat] = list(self._builtins)
        self._formats.extend(self._load_saved())

    # -- Queries -------------------------------------------------------------

    @property
    def formats(self) -> tuple[JournalFormat, ...]:
        """All formats, built-ins first."""
        return tuple(self._formats)

    @property
    def builtin_formats(self) -> tuple[JournalFormat, ...]:
        return tuple(self._builtins)

    @property
    def custom_formats(self) -> tuple[JournalFormat, ...]:
        return tuple(self._formats[len(self._builtins) :])

    @property
    def default(self) -> JournalFormat:
        """The format selected when the user has not picked one."""
        return self._formats[0]

    def get(self, format_id: str) -> JournalFormat:
        """Return the format whose ``id`` is *format_id*.

        Raises:
            FormatNotFoundError: If no format has that identifier.
        """
        for journal_format in self._formats:
            if journal_format.id == format_id:
                return journal_format
        raise FormatNotFoundError(f"Unknown journal format: {format_id}")

    def __iter__(self) -> Iterator[JournalFormat]:
        return iter(self._formats)

    def __len__(self) -> int:
        return len(self._formats)

    # -- Commands ------------------------------------------------------------

    def register(self, draft: FormatDraft) -> JournalFormat:
        """Turn *draft* into a new format, append it and persist it.

        Raises:
            FormatValidationError: If the draft has an empty name.
            StorageWriteError: If the format could not be persisted.
        """
        journal_format = draft.build(self._new_id())
        if self._storage is not None:
            self._storage.append_format(journal_format)
        self._formats.append(journal_format)
        logger.info("Registered custom format %s (%s)", journal_format.id, journal_format.name)
        return journal_format

    # -- Internals -----------------------------------------------------------

    def _load_saved(self) -> list[JournalFormat]:
        if self._storage is None:
            return []
        try:
            return self._storage.load_formats()
        except StorageReadError as exc:
            logger.warning("Ignoring saved custom formats: %s", exc)
            return []

    def _new_id(self) -> str:
        """Time-based identifier that does not collide with any known id."""
        taken = {f.id for f in self._formats}
        stamp = time.time_ns()
        while f"{_CUSTOM_ID_PREFIX}{stamp}" in taken:
            stamp += 1
        return f"{_CUSTOM_ID_PREFIX}{stamp}"
