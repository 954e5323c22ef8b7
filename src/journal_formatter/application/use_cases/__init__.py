"""Use cases exposed to the presentation layer."""

from journal_formatter.application.use_cases.export_result import ExportResultUseCase
from journal_formatter.application.use_cases.format_manuscript import FormatManuscriptUseCase
from journal_formatter.application.use_cases.generate_sample import GenerateSampleUseCase
from journal_formatter.application.use_cases.manage_formats import ManageFormatsUseCase

__all__ = [
    "ExportResultUseCase",
    "FormatManuscriptUseCase",
    "GenerateSampleUseCase",
    "ManageFormatsUseCase",
]
