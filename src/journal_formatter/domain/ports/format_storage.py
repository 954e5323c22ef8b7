"""Port (ABC) for custom journal format persistence.

Domain layer interface — infrastructure provides the concrete implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from journal_formatter.domain.models.journal_format import JournalFormat


class FormatStoragePort(ABC):
    """Abstract interface for loading / saving user-defined journal formats."""

    @abstractmethod
    def load_formats(self) -> list[JournalFormat]:
        """Return every persisted custom format, in insertion order.

        Raises:
            StorageReadError: If the stored value is corrupt.
        """

    @abstractmethod
    def append_format(self, journal_format: JournalFormat) -> None:
        """Persist *journal_format* after the already stored ones."""
