"""Manuscript formatting pipeline.

Runs a fixed chain of ``BaseStage`` instances to turn raw manuscript text
into text laid out for a target journal:

  1. **WordLimitStage** — truncate to the journal's word limit
  2. **TitleFormatter** — mark the title, underline standalone headers
  3. **ReferenceStyleConverter** — rewrite numeric citation markers
  4. **SectionFormatter** — promote section names to header lines
  5. **ParagraphFormatter** — collapse blank lines, indent body lines
  6. **JournalBanner** — prepend the journal's specification banner

The order is part of the observable behaviour. Title formatting looks for
``\\n\\nNAME\\n`` headers before section formatting creates them, so only
headers already on their own line in the input get underlined. Reordering
the stages changes the output, which is why the chain cannot be edited.
"""

from __future__ import annotations

import logging

from journal_formatter.automation.base import BaseStage, StageResult, count_words
from journal_formatter.automation.stages.journal_banner import JournalBanner
from journal_formatter.automation.stages.paragraph_formatter import ParagraphFormatter
from journal_formatter.automation.stages.reference_style import ReferenceStyleConverter
from journal_formatter.automation.stages.section_formatter import SectionFormatter
from journal_formatter.automation.stages.title_formatter import TitleFormatter
from journal_formatter.automation.stages.word_limit import WordLimitStage
from journal_formatter.domain.errors import EmptyInputError
from journal_formatter.domain.models.journal_format import (
    DEFAULT_SOURCE_NAME,
    FormattedResult,
    JournalFormat,
)

logger = logging.getLogger(__name__)


class ManuscriptFormatter:
    """High-level orchestrator that runs every stage in sequence.

    Usage::

        formatter = ManuscriptFormatter()
        result = formatter.format(raw_text, journal_format)
        print(result.content)      # formatted text
        print(result.word_count)   # words in the formatted text
    """

    def __init__(self) -> None:
        self._stages: tuple[BaseStage, ...] = (
            WordLimitStage(),
            TitleFormatter(),
            ReferenceStyleConverter(),
            SectionFormatter(),
            ParagraphFormatter(),
            JournalBanner(),
        )

    # -- Public API ------------------------------------------------------

    def run(self, text: str, journal_format: JournalFormat) -> StageResult:
        """Pipe *text* through every stage.

        Returns a ``StageResult`` containing the final text and the
        consolidated list of ``StageEntry`` logs from every stage.
        """
        all_entries = []

        for stage in self._stages:
            result = stage.apply(text, journal_format)
            text = result.text
            all_entries.extend(result.entries)
            logger.debug("%s: %d change(s)", stage.name, result.total_changes)

        return StageResult(text=text, entries=all_entries)

    def format(
        self,
        raw_text: str,
        journal_format: JournalFormat,
        source_name: str = DEFAULT_SOURCE_NAME,
    ) -> FormattedResult:
        """Format *raw_text* for *journal_format*.

        Surrounding whitespace is stripped before the first stage runs.

        Raises:
            EmptyInputError: If *raw_text* is empty or whitespace only.
        """
        text = raw_text.strip()
        if not text:
            raise EmptyInputError("Please enter your manuscript text")

        result = self.run(text, journal_format)
        return FormattedResult(
            content=result.text,
            word_count=count_words(result.text),
            format=journal_format,
            source_name=source_name,
            original_word_count=count_words(text),
            changes=tuple(str(e) for e in result.entries),
        )
