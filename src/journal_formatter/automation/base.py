"""Base interface for manuscript pipeline stages and shared result types.

Every stage follows the same contract:
  1. Receives the current text and the target ``JournalFormat``
  2. Returns rewritten text + a list of StageEntry logs
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from journal_formatter.domain.models.journal_format import JournalFormat


# ---------------------------------------------------------------------------
# Data types
# ---------------------------------------------------------------------------


class StageCategory(str, Enum):
    """Broad category a change belongs to."""

    WORD_LIMIT = "word-limit"
    TITLE = "title"
    REFERENCE = "reference"
    SECTION = "section"
    PARAGRAPH = "paragraph"
    BANNER = "banner"


@dataclass
class StageEntry:
    """Single logged change."""

    category: StageCategory
    message: str
    count: int = 1

    def __str__(self) -> str:
        if self.count > 1:
            return f"[{self.category.value}] {self.message} (×{self.count})"
        return f"[{self.category.value}] {self.message}"


@dataclass
class StageResult:
    """Combined output of a stage or the full pipeline."""

    text: str
    entries: list[StageEntry] = field(default_factory=list)

    @property
    def total_changes(self) -> int:
        return sum(e.count for e in self.entries)


def count_words(text: str) -> int:
    """Number of whitespace-delimited tokens in *text*."""
    return len(text.split())


# ---------------------------------------------------------------------------
# Abstract base
# ---------------------------------------------------------------------------


class BaseStage(ABC):
    """Abstract base for every stage of the manuscript pipeline.

    Subclasses must implement ``apply(text, journal_format) -> StageResult``.
    The pipeline calls stages in a fixed order, piping text through each one.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name used in reports."""

    @property
    @abstractmethod
    def category(self) -> StageCategory:
        """Category of changes this stage applies."""

    @abstractmethod
    def apply(self, text: str, journal_format: JournalFormat) -> StageResult:
        """Rewrite *text* for *journal_format* and return a ``StageResult``."""

    # Convenience helper used by concrete stages
    def _entry(self, message: str, count: int = 1) -> StageEntry:
        return StageEntry(category=self.category, message=message, count=count)
