"""Reference-style conversion stage.

Rewrites numeric citation markers, ``[n]`` and ``(n)``, into the marker shape
of the journal's reference style:

  =================================  ===================  ===================
  Style                              ``[n]`` becomes      ``(n)`` becomes
  =================================  ===================  ===================
  Vancouver                          ``(n)``              ``(n)``
  APA, Harvard                       ``[Author, Year]``   ``(Author, Year)``
  Chicago                            ``[Author Year]``    ``(Author Year)``
  MLA                                ``[Author Page]``    ``(Author Page)``
  IEEE                               ``[n]``              ``[n]``
  AMA, CSE, ACS, Nature, Science     ``^n^``              ``^n^``
  =================================  ===================  ===================

This is a syntactic substitution only: every marker of a given bracket shape
is rewritten the same way and nothing is resolved against a bibliography.
"""

from __future__ import annotations

import re

from journal_formatter.automation.base import BaseStage, StageCategory, StageResult
from journal_formatter.domain.models.enums import ReferenceStyle
from journal_formatter.domain.models.journal_format import JournalFormat

_BRACKETED = re.compile(r"\[(\d+)\]", re.ASCII)
_PARENTHESIZED = re.compile(r"\((\d+)\)", re.ASCII)

_SUPERSCRIPT = (r"^\1^", r"^\1^")

# Style → (replacement for [n], replacement for (n)), applied in that order.
_REPLACEMENTS: dict[ReferenceStyle, tuple[str, str]] = {
    ReferenceStyle.VANCOUVER: (r"(\1)", r"(\1)"),
    ReferenceStyle.APA: ("[Author, Year]", "(Author, Year)"),
    ReferenceStyle.HARVARD: ("[Author, Year]", "(Author, Year)"),
    ReferenceStyle.CHICAGO: ("[Author Year]", "(Author Year)"),
    ReferenceStyle.MLA: ("[Author Page]", "(Author Page)"),
    ReferenceStyle.IEEE: (r"[\1]", r"[\1]"),
    ReferenceStyle.AMA: _SUPERSCRIPT,
    ReferenceStyle.CSE: _SUPERSCRIPT,
    ReferenceStyle.ACS: _SUPERSCRIPT,
    ReferenceStyle.NATURE: _SUPERSCRIPT,
    ReferenceStyle.SCIENCE: _SUPERSCRIPT,
}


def convert_citations(text: str, style: ReferenceStyle) -> tuple[str, int]:
    """Rewrite every numeric citation marker in *text* for *style*.

    Returns the new text and the number of markers found in the input.
    """
    bracketed, parenthesized = _REPLACEMENTS[ReferenceStyle(style)]
    found = len(_PARENTHESIZED.findall(text))
    text, n = _BRACKETED.subn(bracketed, text)
    return _PARENTHESIZED.sub(parenthesized, text), found + n


class ReferenceStyleConverter(BaseStage):
    """Convert numeric citation markers to the journal's reference style."""

    @property
    def name(self) -> str:
        return "Reference Style Converter"

    @property
    def category(self) -> StageCategory:
        return StageCategory.REFERENCE

    def apply(self, text: str, journal_format: JournalFormat) -> StageResult:
        style = journal_format.reference_style
        text, n = convert_citations(text, style)
        entries = []
        if n:
            entries.append(self._entry(f"Citation markers converted to {style.value} style", count=n))
        return StageResult(text=text, entries=entries)
