"""Section formatting stage.

Every whole-word occurrence of a known section name, in any letter case and
anywhere in the text, is promoted to a standalone upper-case header line.
A section word used inside a sentence ("the results show…") is promoted too.
"""

from __future__ import annotations

import re

from journal_formatter.automation.base import BaseStage, StageCategory, StageResult
from journal_formatter.automation.stages.sections import SECTION_NAMES
from journal_formatter.domain.models.journal_format import JournalFormat

_SECTION_WORD_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (section, re.compile(rf"\b{section}\b", re.IGNORECASE | re.ASCII))
    for section in SECTION_NAMES
)

_THREE_OR_MORE_NEWLINES = re.compile(r"\n{3,}")


class SectionFormatter(BaseStage):
    """Put section names on their own header lines."""

    @property
    def name(self) -> str:
        return "Section Formatter"

    @property
    def category(self) -> StageCategory:
        return StageCategory.SECTION

    def apply(self, text: str, journal_format: JournalFormat) -> StageResult:
        entries = []

        promoted = 0
        for section, pattern in _SECTION_WORD_PATTERNS:
            text, n = pattern.subn(f"\n\n{section}\n", text)
            promoted += n
        if promoted:
            entries.append(self._entry("Section names promoted to headers", count=promoted))

        text, n = _THREE_OR_MORE_NEWLINES.subn("\n\n", text)
        if n:
            entries.append(self._entry("Blank line runs collapsed", count=n))

        return StageResult(text=text, entries=entries)
