"""Individual pipeline stages — each rewrites one aspect of the manuscript."""

from journal_formatter.automation.stages.journal_banner import JournalBanner
from journal_formatter.automation.stages.paragraph_formatter import ParagraphFormatter
from journal_formatter.automation.stages.reference_style import ReferenceStyleConverter
from journal_formatter.automation.stages.section_formatter import SectionFormatter
from journal_formatter.automation.stages.title_formatter import TitleFormatter
from journal_formatter.automation.stages.word_limit import WordLimitStage

__all__ = [
    "JournalBanner",
    "ParagraphFormatter",
    "ReferenceStyleConverter",
    "SectionFormatter",
    "TitleFormatter",
    "WordLimitStage",
]
