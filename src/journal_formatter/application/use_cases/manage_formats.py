"""Use Case: List, look up and register journal formats."""

from __future__ import annotations

from journal_formatter.domain.models.format_registry import FormatRegistry
from journal_formatter.domain.models.journal_format import FormatDraft, JournalFormat


class ManageFormatsUseCase:
    """Thin facade over the ``FormatRegistry``."""

    def __init__(self, registry: FormatRegistry) -> None:
        self._registry = registry

    def list_formats(self) -> tuple[JournalFormat, ...]:
        return self._registry.formats

    def get(self, format_id: str | None = None) -> JournalFormat:
        """Return the format *format_id*, or the default one when ``None``.

        Raises:
            FormatNotFoundError: If *format_id* is unknown.
        """
        if format_id is None:
            return self._registry.default
        return self._registry.get(format_id)

    def register(self, draft: FormatDraft) -> JournalFormat:
        """Register a custom format built from *draft*.

        Raises:
            FormatValidationError: If the draft has no name.
        """
        return self._registry.register(draft)
