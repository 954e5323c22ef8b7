"""Use Case: Format a manuscript for a journal.

Accepts either text or an uploaded file, runs the manuscript pipeline and
returns the ``FormattedResult``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from journal_formatter.automation.pipeline import ManuscriptFormatter
from journal_formatter.domain.models.journal_format import (
    DEFAULT_SOURCE_NAME,
    FormattedResult,
    JournalFormat,
)

logger = logging.getLogger(__name__)


class FormatManuscriptUseCase:
    """Format raw manuscript text, or a manuscript file, for one journal."""

    def __init__(
        self,
        formatter: ManuscriptFormatter | None = None,
        extractor: Callable[[Path], str] | None = None,
    ) -> None:
        self._formatter = formatter or ManuscriptFormatter()
        self._extractor = extractor

    def execute(
        self,
        raw_text: str,
        journal_format: JournalFormat,
        source_name: str = DEFAULT_SOURCE_NAME,
    ) -> FormattedResult:
        """Run the pipeline on *raw_text*.

        Raises:
            EmptyInputError: If *raw_text* is blank.
        """
        result = self._formatter.format(raw_text, journal_format, source_name)
        if result.truncated:
            logger.info(
                "Manuscript truncated from %d to %d words for %s",
                result.original_word_count,
                journal_format.word_limit,
                journal_format.id,
            )
        logger.debug("Formatted %s for %s: %d words", source_name, journal_format.id, result.word_count)
        return result

    def execute_file(self, path: Path, journal_format: JournalFormat) -> FormattedResult:
        """Extract the text of *path* and format it.

        Raises:
            ExtractionError: If no text can be extracted from the file.
            EmptyInputError: If the extracted text is blank.
        """
        if self._extractor is None:
            raise RuntimeError("No text extractor configured")
        path = Path(path)
        return self.execute(self._extractor(path), journal_format, source_name=path.name)
