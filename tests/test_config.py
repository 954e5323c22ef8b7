"""Tests for the built-in format configuration loader."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from journal_formatter.config.loader import (
    clear_cache,
    get_builtin_formats,
    load_builtin_formats,
    load_sample_manuscript,
)
from journal_formatter.domain.errors import ConfigurationError
from journal_formatter.domain.models.enums import ReferenceStyle


@pytest.fixture(autouse=True)
def _fresh_cache():
    clear_cache()
    yield
    clear_cache()


def _write(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestBuiltinFormats:
    def test_five_builtins(self) -> None:
        formats = get_builtin_formats()
        assert [f.id for f in formats] == ["ijdr", "jcd", "joe", "custom_modern", "custom_classic"]

    def test_builtin_values(self) -> None:
        by_id = {f.id: f for f in get_builtin_formats()}
        ijdr = by_id["ijdr"]
        assert ijdr.reference_style is ReferenceStyle.VANCOUVER
        assert ijdr.word_limit == 5000
        assert ijdr.font_family == "Times New Roman"
        joe = by_id["joe"]
        assert joe.margins.left == 1.5
        assert joe.margins.right == 1
        assert by_id["custom_modern"].line_spacing == 1.15
        assert by_id["custom_classic"].reference_style is ReferenceStyle.MLA

    def test_cached(self) -> None:
        assert get_builtin_formats() is get_builtin_formats()


class TestLoadBuiltinFormats:
    _ONE = {
        "id": "only",
        "name": "Only Journal",
        "lineSpacing": 1,
        "wordLimit": 100,
        "referenceStyle": "IEEE",
        "fontFamily": "Arial",
        "fontSize": 10,
    }

    def test_custom_file(self, tmp_path: Path) -> None:
        formats = load_builtin_formats(_write(tmp_path / "f.json", [self._ONE]))
        assert len(formats) == 1
        assert formats[0].margins.top == 1

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_builtin_formats(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text("[{", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_builtin_formats(bad)

    def test_not_a_list(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError):
            load_builtin_formats(_write(tmp_path / "obj.json", self._ONE))

    def test_invalid_format(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError):
            load_builtin_formats(_write(tmp_path / "f.json", [{**self._ONE, "wordLimit": 0}]))

    def test_duplicate_ids(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError):
            load_builtin_formats(_write(tmp_path / "f.json", [self._ONE, self._ONE]))


class TestSampleManuscript:
    def test_sample_has_every_section(self) -> None:
        text = load_sample_manuscript()
        for section in ("Abstract", "Introduction", "Methodology", "Results", "Discussion", "Conclusion", "References"):
            assert f"\n\n{section}\n" in text
        assert "[1,2]" in text
