"""Word-limit truncation stage.

Manuscripts longer than the journal's word limit keep only their first
``word_limit`` words, re-joined with single spaces. Truncation therefore
flattens the line structure; text within the limit passes through untouched.
"""

from __future__ import annotations

from journal_formatter.automation.base import BaseStage, StageCategory, StageResult
from journal_formatter.domain.models.journal_format import JournalFormat


class WordLimitStage(BaseStage):
    """Cut the manuscript down to the journal's word limit."""

    @property
    def name(self) -> str:
        return "Word Limit"

    @property
    def category(self) -> StageCategory:
        return StageCategory.WORD_LIMIT

    def apply(self, text: str, journal_format: JournalFormat) -> StageResult:
        words = text.split()
        limit = journal_format.word_limit
        if len(words) <= limit:
            return StageResult(text=text)

        dropped = len(words) - limit
        return StageResult(
            text=" ".join(words[:limit]),
            entries=[
                self._entry(
                    f"Manuscript truncated from {len(words):,} to {limit:,} words",
                    count=dropped,
                )
            ],
        )
