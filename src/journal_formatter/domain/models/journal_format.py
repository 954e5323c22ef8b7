"""Journal format and formatting result models.

These are Pydantic models (pragmatic choice: validation plus JSON round-trip
of the persisted custom formats). Stored records use camelCase keys, so every
model carries a camel-case alias generator and accepts both spellings.

This module belongs to the Domain layer. It only depends on:
- Python stdlib (pathlib)
- Pydantic (pragmatic exception for validation)
- Domain enums and errors
"""

from __future__ import annotations

import re
from pathlib import PurePath
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from journal_formatter.domain.errors import FormatValidationError
from journal_formatter.domain.models.enums import FontFamily, ReferenceStyle

_MODEL_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)

DEFAULT_SOURCE_NAME = "manuscript.txt"

_EXTENSION_RE = re.compile(r"\.[^/.]+$")


# ---------------------------------------------------------------------------
# Journal format
# ---------------------------------------------------------------------------


class Margins(BaseModel):
    """Page margins in inches."""

    model_config = _MODEL_CONFIG

    top: float = Field(default=1.0, gt=0)
    bottom: float = Field(default=1.0, gt=0)
    left: float = Field(default=1.0, gt=0)
    right: float = Field(default=1.0, gt=0)


class JournalFormat(BaseModel):
    """One target publication's house style.

    Only ``name``, ``word_limit`` and ``reference_style`` change the text;
    spacing, font and margins are reported in the banner as metadata.
    """

    model_config = _MODEL_CONFIG

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: str = ""
    line_spacing: float = Field(gt=0)
    word_limit: int = Field(gt=0)
    reference_style: ReferenceStyle
    font_family: str = Field(min_length=1)
    font_size: int = Field(gt=0)
    margins: Margins

    def to_record(self) -> dict:
        """Return the JSON-safe camelCase record used for storage."""
        return self.model_dump(mode="json", by_alias=True)


class FormatDraft(BaseModel):
    """A partially filled custom format, as entered by a user.

    Missing or zero values fall back to the draft defaults when the draft
    is turned into a :class:`JournalFormat` with :meth:`build`.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = ""
    description: str = ""
    line_spacing: Optional[float] = 1.5
    word_limit: Optional[int] = 5000
    reference_style: Optional[ReferenceStyle] = ReferenceStyle.VANCOUVER
    font_family: Optional[str] = FontFamily.TIMES_NEW_ROMAN.value
    font_size: Optional[int] = 12
    margins: Optional[Margins] = None

    def build(self, format_id: str) -> JournalFormat:
        """Resolve defaults and return a complete ``JournalFormat``.

        Raises:
            FormatValidationError: If the draft has no usable name or a
                value is out of range.
        """
        if not self.name or not self.name.strip():
            raise FormatValidationError("Please enter a journal name")

        try:
            return JournalFormat(
                id=format_id,
                name=self.name,
                description=self.description or "",
                line_spacing=self.line_spacing or 1.5,
                word_limit=self.word_limit or 5000,
                reference_style=self.reference_style or ReferenceStyle.VANCOUVER,
                font_family=self.font_family or FontFamily.TIMES_NEW_ROMAN.value,
                font_size=self.font_size or 12,
                margins=self.margins or Margins(),
            )
        except ValidationError as exc:
            raise FormatValidationError(f"Invalid journal format: {exc}") from exc


# ---------------------------------------------------------------------------
# Formatting result
# ---------------------------------------------------------------------------


class FormattedResult(BaseModel):
    """Output of one formatting request."""

    model_config = _MODEL_CONFIG

    content: str
    word_count: int = Field(ge=0)
    format: JournalFormat
    source_name: str = DEFAULT_SOURCE_NAME
    original_word_count: int = Field(default=0, ge=0)
    changes: tuple[str, ...] = ()

    @property
    def truncated(self) -> bool:
        """Whether the manuscript was cut down to the word limit."""
        return self.original_word_count > self.format.word_limit

    @property
    def download_name(self) -> str:
        """File name offered for download: ``formatted_<stem>.txt``."""
        return download_name_for(self.source_name)


def download_name_for(source_name: str) -> str:
    """Build the download name for *source_name*.

    Only the last extension is dropped: ``paper.v2.docx`` becomes
    ``formatted_paper.v2.txt``.
    """
    name = PurePath(source_name).name or DEFAULT_SOURCE_NAME
    return f"formatted_{_EXTENSION_RE.sub('', name)}.txt"
