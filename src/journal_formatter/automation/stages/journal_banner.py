"""Journal banner stage.

Prepends a header block naming the target journal and listing its
formatting specifications::

    FORMATTED FOR: INTERNATIONAL JOURNAL OF DENTAL RESEARCH (IJDR)
    ==============================================================

    FORMATTING SPECIFICATIONS:
    - Word Limit: 5,000 words
    - Line Spacing: 1.5
    - Reference Style: Vancouver
    - Font: Times New Roman 12pt
    - Margins: 1" top, 1" bottom, 1" left, 1" right

"""

from __future__ import annotations

from decimal import Decimal

from journal_formatter.automation.base import BaseStage, StageCategory, StageResult
from journal_formatter.domain.models.journal_format import JournalFormat


def format_number(value: float) -> str:
    """Render ``2.0`` as ``2`` and ``0.00001`` as ``0.00001``.

    Non-integers keep their shortest round-trip digits, never exponent
    notation.
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def build_banner(journal_format: JournalFormat) -> str:
    """Return the banner block, ending with a blank line."""
    header = f"FORMATTED FOR: {journal_format.name.upper()}"
    margins = journal_format.margins
    specs = [
        "FORMATTING SPECIFICATIONS:",
        f"- Word Limit: {journal_format.word_limit:,} words",
        f"- Line Spacing: {format_number(journal_format.line_spacing)}",
        f"- Reference Style: {journal_format.reference_style.value}",
        f"- Font: {journal_format.font_family} {journal_format.font_size}pt",
        (
            f'- Margins: {format_number(margins.top)}" top, '
            f'{format_number(margins.bottom)}" bottom, '
            f'{format_number(margins.left)}" left, '
            f'{format_number(margins.right)}" right'
        ),
    ]
    return f"{header}\n{'=' * len(header)}\n\n" + "\n".join(specs) + "\n\n"


class JournalBanner(BaseStage):
    """Prepend the journal banner to the formatted body."""

    @property
    def name(self) -> str:
        return "Journal Banner"

    @property
    def category(self) -> StageCategory:
        return StageCategory.BANNER

    def apply(self, text: str, journal_format: JournalFormat) -> StageResult:
        return StageResult(
            text=build_banner(journal_format) + text,
            entries=[self._entry(f"Banner added for {journal_format.name}")],
        )
