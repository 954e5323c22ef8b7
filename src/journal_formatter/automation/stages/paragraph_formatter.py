"""Paragraph formatting stage.

  • Runs of blank lines collapse to a single blank line
  • Every non-empty line after the first is indented by four spaces,
    except header lines made only of capital letters and whitespace
"""

from __future__ import annotations

import re

from journal_formatter.automation.base import BaseStage, StageCategory, StageResult
from journal_formatter.domain.models.journal_format import JournalFormat

INDENT = "    "

_TWO_OR_MORE_NEWLINES = re.compile(r"\n{2,}")
_HEADER_LINE = re.compile(r"[A-Z\s]+")


def collapse_blank_lines(text: str) -> str:
    """Collapse every run of two or more newlines to exactly two."""
    return _TWO_OR_MORE_NEWLINES.sub("\n\n", text)


def is_header_line(line: str) -> bool:
    """Whether *line* is an all-capitals header such as ``RESULTS``."""
    return bool(_HEADER_LINE.fullmatch(line.strip()))


class ParagraphFormatter(BaseStage):
    """Indent body lines."""

    @property
    def name(self) -> str:
        return "Paragraph Formatter"

    @property
    def category(self) -> StageCategory:
        return StageCategory.PARAGRAPH

    def apply(self, text: str, journal_format: JournalFormat) -> StageResult:
        lines = collapse_blank_lines(text).split("\n")
        result: list[str] = []
        indented = 0

        for index, line in enumerate(lines):
            if index > 0 and line.strip() and not is_header_line(line):
                result.append(f"{INDENT}{line}")
                indented += 1
            else:
                result.append(line)

        entries = []
        if indented:
            entries.append(self._entry("Body lines indented", count=indented))
        return StageResult(text="\n".join(result), entries=entries)
