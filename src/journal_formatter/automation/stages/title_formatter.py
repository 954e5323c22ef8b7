"""Title formatting stage.

  • The first non-empty line is the manuscript title and becomes
    ``TITLE: <TITLE IN UPPER CASE>``
  • A section header already laid out as ``\\n\\nName\\n`` is upper-cased and
    underlined with ``=`` characters

This stage runs *before* section formatting, so the underline rule only sees
headers that were already on their own line in the submitted text.
"""

from __future__ import annotations

import re

from journal_formatter.automation.base import BaseStage, StageCategory, StageResult
from journal_formatter.automation.stages.sections import SECTION_NAMES
from journal_formatter.domain.models.journal_format import JournalFormat

_SECTION_HEADER_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (section, re.compile(rf"\n\n{section}\n", re.IGNORECASE)) for section in SECTION_NAMES
)


class TitleFormatter(BaseStage):
    """Mark the manuscript title and underline standalone section headers."""

    @property
    def name(self) -> str:
        return "Title Formatter"

    @property
    def category(self) -> StageCategory:
        return StageCategory.TITLE

    def apply(self, text: str, journal_format: JournalFormat) -> StageResult:
        entries = []

        text, title = self._mark_title(text)
        if title is not None:
            entries.append(self._entry(f"Manuscript title marked: {title}"))

        underlined = 0
        for section, pattern in _SECTION_HEADER_PATTERNS:
            replacement = f"\n\n{section}\n{'=' * len(section)}\n"
            text, n = pattern.subn(replacement, text)
            underlined += n
        if underlined:
            entries.append(self._entry("Section headers underlined", count=underlined))

        return StageResult(text=text, entries=entries)

    @staticmethod
    def _mark_title(text: str) -> tuple[str, str | None]:
        lines = text.split("\n")
        for i, line in enumerate(lines):
            if line.strip():
                lines[i] = f"TITLE: {line.upper()}"
                return "\n".join(lines), line.strip()
        return text, None
