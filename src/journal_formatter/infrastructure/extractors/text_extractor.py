"""Manuscript text extraction.

Turns an uploaded file into the plain UTF-8 text the pipeline consumes.
Supports plain text (``.txt``) and Word documents (``.docx``, one paragraph
per block, blocks separated by a blank line); anything else
is rejected with an :class:`ExtractionError`.
"""

from __future__ import annotations

import io
import zipfile
from pathlib import Path

from docx import Document
from docx.opc.exceptions import PackageNotFoundError
from lxml import etree

from journal_formatter.domain.errors import ExtractionError

_TEXT_SUFFIXES = {".txt"}
_DOCX_SUFFIXES = {".docx"}

_TEXT_MIME = "text/plain"
_DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

# Every .docx is a ZIP package
_ZIP_SIGNATURE = b"PK"


def extract_text(path: Path) -> str:
    """Extract manuscript text from the file at *path*.

    Raises:
        ExtractionError: If the file cannot be read, has an unsupported
            type, or contains no text.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ExtractionError(f"Could not read file: {path}") from exc
    return extract_text_from_bytes(data, path.name)


def extract_text_from_bytes(
    data: bytes,
    filename: str,
    content_type: str | None = None,
) -> str:
    """Extract manuscript text from an uploaded file's bytes.

    The file type is taken from *content_type* when given, otherwise from
    the extension of *filename*.
    """
    suffix = Path(filename).suffix.lower()

    if content_type == _TEXT_MIME or (content_type is None and suffix in _TEXT_SUFFIXES):
        return _decode_text(data)
    if content_type == _DOCX_MIME or (content_type is None and suffix in _DOCX_SUFFIXES):
        return _extract_docx(data)

    raise ExtractionError("Unsupported file type. Please use .docx or .txt files.")


def _decode_text(data: bytes) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ExtractionError("Text file is not valid UTF-8.") from exc


def _extract_docx(data: bytes) -> str:
    if not data.startswith(_ZIP_SIGNATURE):
        raise ExtractionError("Invalid DOCX file format")

    try:
        doc = Document(io.BytesIO(data))
    except (
        PackageNotFoundError,
        zipfile.BadZipFile,
        etree.XMLSyntaxError,
        KeyError,
        ValueError,
    ) as exc:
        raise ExtractionError(
            "Failed to extract text from DOCX file. "
            "Please try converting to .txt format first."
        ) from exc

    blocks = [para.text for para in doc.paragraphs]
    for table in doc.tables:
        for row in table.rows:
            blocks.extend(cell.text for cell in row.cells)

    text = "\n\n".join(block for block in blocks if block.strip())
    if not text.strip():
        raise ExtractionError("No readable text content found in DOCX file")
    return text
