"""Tests for the individual manuscript pipeline stages."""

from __future__ import annotations

import pytest

from journal_formatter.automation.base import StageCategory, StageEntry, StageResult, count_words
from journal_formatter.automation.stages.journal_banner import (
    JournalBanner,
    build_banner,
    format_number,
)
from journal_formatter.automation.stages.paragraph_formatter import (
    ParagraphFormatter,
    collapse_blank_lines,
    is_header_line,
)
from journal_formatter.automation.stages.reference_style import (
    ReferenceStyleConverter,
    convert_citations,
)
from journal_formatter.automation.stages.section_formatter import SectionFormatter
from journal_formatter.automation.stages.title_formatter import TitleFormatter
from journal_formatter.automation.stages.word_limit import WordLimitStage
from journal_formatter.domain.models.enums import ReferenceStyle
from journal_formatter.domain.models.journal_format import JournalFormat, Margins


def _fmt(**overrides) -> JournalFormat:
    defaults = dict(
        id="test",
        name="Test Journal",
        line_spacing=1.5,
        word_limit=1000,
        reference_style=ReferenceStyle.IEEE,
        font_family="Arial",
        font_size=12,
        margins=Margins(),
    )
    defaults.update(overrides)
    return JournalFormat(**defaults)


# ═══════════════════════════════════════════════════════════════════════════
# Base / Data types
# ═══════════════════════════════════════════════════════════════════════════


class TestStageResult:
    def test_total_changes(self) -> None:
        r = StageResult(
            text="x",
            entries=[
                StageEntry(StageCategory.SECTION, "a", count=3),
                StageEntry(StageCategory.REFERENCE, "b", count=2),
            ],
        )
        assert r.total_changes == 5

    def test_count_words_ignores_whitespace_runs(self) -> None:
        assert count_words("  one\n\ntwo\t three  ") == 3
        assert count_words("") == 0


# ═══════════════════════════════════════════════════════════════════════════
# WordLimitStage
# ═══════════════════════════════════════════════════════════════════════════


class TestWordLimitStage:
    def setup_method(self) -> None:
        self.stage = WordLimitStage()

    def test_within_limit_keeps_line_breaks(self) -> None:
        text = "Title\n\nBody   text here"
        r = self.stage.apply(text, _fmt(word_limit=4))
        assert r.text == text
        assert r.total_changes == 0

    def test_over_limit_truncates_and_flattens(self) -> None:
        r = self.stage.apply("one two\nthree\n\nfour   five", _fmt(word_limit=3))
        assert r.text == "one two three"
        assert r.total_changes == 2

    def test_truncated_token_count_equals_limit(self) -> None:
        text = " ".join(f"w{i}" for i in range(50))
        for limit in (1, 7, 49):
            r = self.stage.apply(text, _fmt(word_limit=limit))
            assert count_words(r.text) == limit

    def test_exact_limit_untouched(self) -> None:
        r = self.stage.apply("a\nb\nc", _fmt(word_limit=3))
        assert r.text == "a\nb\nc"


# ═══════════════════════════════════════════════════════════════════════════
# TitleFormatter
# ═══════════════════════════════════════════════════════════════════════════


class TestTitleFormatter:
    def setup_method(self) -> None:
        self.stage = TitleFormatter()

    def test_first_line_marked_as_title(self) -> None:
        r = self.stage.apply("My Title\nBody text.", _fmt())
        assert r.text == "TITLE: MY TITLE\nBody text."

    def test_first_non_empty_line_is_title(self) -> None:
        r = self.stage.apply("\n\nLate Title\nBody", _fmt())
        assert r.text == "\n\nTITLE: LATE TITLE\nBody"

    def test_standalone_header_underlined(self) -> None:
        r = self.stage.apply("T\n\nresults\nWe found things.", _fmt())
        assert r.text == "TITLE: T\n\nRESULTS\n=======\nWe found things."

    def test_header_without_blank_line_not_underlined(self) -> None:
        r = self.stage.apply("T\nResults\nWe found things.", _fmt())
        assert "=" not in r.text

    def test_inline_section_word_not_underlined(self) -> None:
        r = self.stage.apply("T\n\nThe results are in.", _fmt())
        assert "=" not in r.text

    def test_underline_length_matches_section(self) -> None:
        r = self.stage.apply("T\n\nMethodology\nText", _fmt())
        assert "\n\nMETHODOLOGY\n" + "=" * len("METHODOLOGY") + "\n" in r.text


# ═══════════════════════════════════════════════════════════════════════════
# ReferenceStyleConverter
# ═══════════════════════════════════════════════════════════════════════════


class TestReferenceStyleConverter:
    @pytest.mark.parametrize(
        ("style", "expected"),
        [
            (ReferenceStyle.VANCOUVER, "See (12) and (3)."),
            (ReferenceStyle.APA, "See [Author, Year] and (Author, Year)."),
            (ReferenceStyle.HARVARD, "See [Author, Year] and (Author, Year)."),
            (ReferenceStyle.CHICAGO, "See [Author Year] and (Author Year)."),
            (ReferenceStyle.MLA, "See [Author Page] and (Author Page)."),
            (ReferenceStyle.IEEE, "See [12] and [3]."),
            (ReferenceStyle.AMA, "See ^12^ and ^3^."),
            (ReferenceStyle.CSE, "See ^12^ and ^3^."),
            (ReferenceStyle.ACS, "See ^12^ and ^3^."),
            (ReferenceStyle.NATURE, "See ^12^ and ^3^."),
            (ReferenceStyle.SCIENCE, "See ^12^ and ^3^."),
        ],
    )
    def test_every_style(self, style: ReferenceStyle, expected: str) -> None:
        text, n = convert_citations("See [12] and (3).", style)
        assert text == expected
        assert n == 2

    def test_all_styles_covered(self) -> None:
        for style in ReferenceStyle:
            convert_citations("[1] (2)", style)

    def test_non_numeric_markers_untouched(self) -> None:
        text, n = convert_citations("Studies [1,2] (p) [a] (2020a).", ReferenceStyle.AMA)
        assert text == "Studies [1,2] (p) [a] (2020a)."
        assert n == 0

    def test_every_occurrence_rewritten_identically(self) -> None:
        text, _ = convert_citations("[1] [1] [2]", ReferenceStyle.APA)
        assert text == "[Author, Year] [Author, Year] [Author, Year]"

    def test_stage_logs_conversions(self) -> None:
        r = ReferenceStyleConverter().apply("A [1] b (2).", _fmt(reference_style=ReferenceStyle.NATURE))
        assert r.text == "A ^1^ b ^2^."
        assert r.total_changes == 2
        assert "Nature" in str(r.entries[0])


# ═══════════════════════════════════════════════════════════════════════════
# SectionFormatter
# ═══════════════════════════════════════════════════════════════════════════


class TestSectionFormatter:
    def setup_method(self) -> None:
        self.stage = SectionFormatter()

    def test_inline_word_promoted(self) -> None:
        r = self.stage.apply("We report results here.", _fmt())
        assert r.text == "We report \n\nRESULTS\n here."

    def test_case_insensitive(self) -> None:
        r = self.stage.apply("intro\nDiScUsSiOn\nend", _fmt())
        assert "\n\nDISCUSSION\n" in r.text

    def test_whole_word_only(self) -> None:
        r = self.stage.apply("Methodological resultsx abstracts", _fmt())
        assert r.text == "Methodological resultsx abstracts"

    def test_methodology_and_methods_are_distinct(self) -> None:
        r = self.stage.apply("Methodology then Methods", _fmt())
        assert "\n\nMETHODOLOGY\n" in r.text
        assert "\n\nMETHODS\n" in r.text

    def test_blank_line_runs_collapsed(self) -> None:
        r = self.stage.apply("Intro text\n\nAbstract\nBody", _fmt())
        assert "\n\n\n" not in r.text
        assert r.text == "Intro text\n\nABSTRACT\n\nBody"


# ═══════════════════════════════════════════════════════════════════════════
# ParagraphFormatter
# ═══════════════════════════════════════════════════════════════════════════


class TestParagraphFormatter:
    def setup_method(self) -> None:
        self.stage = ParagraphFormatter()

    def test_indents_body_lines_not_headers(self) -> None:
        r = self.stage.apply("Title\n\n\n\nBody line\nRESULTS\nMore", _fmt())
        assert r.text == "Title\n\n    Body line\nRESULTS\n    More"

    def test_first_line_never_indented(self) -> None:
        r = self.stage.apply("lower first line\nsecond", _fmt())
        assert r.text.startswith("lower first line\n")

    def test_multi_word_header_not_indented(self) -> None:
        r = self.stage.apply("T\nRESULTS AND DISCUSSION\nx", _fmt())
        assert "\nRESULTS AND DISCUSSION\n" in r.text

    def test_underline_is_indented(self) -> None:
        r = self.stage.apply("T\nRESULTS\n=======", _fmt())
        assert r.text.endswith("\n    =======")

    def test_is_header_line(self) -> None:
        assert is_header_line("ABSTRACT")
        assert is_header_line("  RESULTS AND DISCUSSION ")
        assert not is_header_line("Results")
        assert not is_header_line("TITLE: X")

    def test_collapse_is_idempotent(self) -> None:
        for text in ("a\n\n\n\nb", "a\nb", "\n\n\nx\n\n", "a\n\n\n\n\n\nb\n\n\nc"):
            once = collapse_blank_lines(text)
            assert collapse_blank_lines(once) == once
            assert "\n\n\n" not in once


# ═══════════════════════════════════════════════════════════════════════════
# JournalBanner
# ═══════════════════════════════════════════════════════════════════════════


class TestJournalBanner:
    def test_banner_block(self) -> None:
        fmt = _fmt(
            name="Journal of Clinical Dentistry (JCD)",
            word_limit=4000,
            line_spacing=2.0,
            reference_style=ReferenceStyle.APA,
            font_size=11,
            margins=Margins(top=1.25, bottom=1.25, left=1.25, right=1.25),
        )
        header = "FORMATTED FOR: JOURNAL OF CLINICAL DENTISTRY (JCD)"
        assert build_banner(fmt) == (
            f"{header}\n{'=' * len(header)}\n\n"
            "FORMATTING SPECIFICATIONS:\n"
            "- Word Limit: 4,000 words\n"
            "- Line Spacing: 2\n"
            "- Reference Style: APA\n"
            "- Font: Arial 11pt\n"
            '- Margins: 1.25" top, 1.25" bottom, 1.25" left, 1.25" right\n\n'
        )

    def test_numbers_keep_full_precision(self) -> None:
        fmt = _fmt(
            line_spacing=1.123456789,
            margins=Margins(top=0.00001, bottom=1, left=1.5, right=1234567.5),
        )
        banner = build_banner(fmt)
        assert "- Line Spacing: 1.123456789\n" in banner
        assert '- Margins: 0.00001" top, 1" bottom, 1.5" left, 1234567.5" right\n' in banner

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (2.0, "2"),
            (1.25, "1.25"),
            (1.123456789, "1.123456789"),
            (0.00001, "0.00001"),
            (1e16, "10000000000000000"),
        ],
    )
    def test_format_number(self, value: float, expected: str) -> None:
        assert format_number(value) == expected

    def test_underline_matches_header_length(self) -> None:
        for name in ("X", "Nature", "A much longer journal name with ümlauts"):
            lines = build_banner(_fmt(name=name)).split("\n")
            assert len(lines[0]) == len(lines[1])
            assert set(lines[1]) == {"="}

    def test_stage_prepends_banner(self) -> None:
        r = JournalBanner().apply("BODY", _fmt())
        assert r.text.startswith("FORMATTED FOR: TEST JOURNAL\n")
        assert r.text.endswith("\n\nBODY")
