"""Use Case: Save a formatted manuscript as a plain-text download."""

from __future__ import annotations

from pathlib import Path

from journal_formatter.domain.errors import ExportError
from journal_formatter.domain.models.journal_format import FormattedResult


class ExportResultUseCase:
    """Write ``FormattedResult.content`` to ``formatted_<name>.txt``."""

    def execute(self, result: FormattedResult, output_dir: Path) -> Path:
        """Write *result* into *output_dir* and return the file path.

        Raises:
            ExportError: If the file cannot be written.
        """
        output_path = Path(output_dir) / result.download_name
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(result.content, encoding="utf-8")
        except OSError as exc:
            raise ExportError(f"Could not write {output_path}: {exc}") from exc
        return output_path
