"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together. All other layers refer to ports (interfaces).
"""

from __future__ import annotations

from pathlib import Path

from journal_formatter.application.use_cases.export_result import ExportResultUseCase
from journal_formatter.application.use_cases.format_manuscript import FormatManuscriptUseCase
from journal_formatter.application.use_cases.generate_sample import GenerateSampleUseCase
from journal_formatter.application.use_cases.manage_formats import ManageFormatsUseCase
from journal_formatter.automation.pipeline import ManuscriptFormatter
from journal_formatter.config.loader import get_builtin_formats, load_builtin_formats
from journal_formatter.domain.models.format_registry import FormatRegistry
from journal_formatter.domain.ports.format_storage import FormatStoragePort
from journal_formatter.infrastructure.extractors.text_extractor import extract_text
from journal_formatter.infrastructure.persistence.json_format_store import JsonFormatStore


class Container:
    """Simple dependency injection container.

    Wires the format store and registry and provides pre-configured use cases.

    Usage::

        container = Container()
        fmt = container.manage_formats().get("ijdr")
        result = container.format_manuscript().execute(text, fmt)
    """

    def __init__(
        self,
        data_dir: Path | None = None,
        formats_path: Path | None = None,
        storage: FormatStoragePort | None = None,
    ) -> None:
        # -- Infrastructure singletons ---------------------------------------
        self._storage = storage or JsonFormatStore(data_dir)
        builtins = load_builtin_formats(formats_path) if formats_path else get_builtin_formats()
        self._registry = FormatRegistry(builtins, storage=self._storage)
        self._formatter = ManuscriptFormatter()

    # -- Use cases -----------------------------------------------------------

    def format_manuscript(self) -> FormatManuscriptUseCase:
        return FormatManuscriptUseCase(self._formatter, extractor=extract_text)

    def manage_formats(self) -> ManageFormatsUseCase:
        return ManageFormatsUseCase(self._registry)

    def export_result(self) -> ExportResultUseCase:
        return ExportResultUseCase()

    def generate_sample(self) -> GenerateSampleUseCase:
        return GenerateSampleUseCase()

    # -- Direct access (for advanced usage) ----------------------------------

    @property
    def registry(self) -> FormatRegistry:
        return self._registry
