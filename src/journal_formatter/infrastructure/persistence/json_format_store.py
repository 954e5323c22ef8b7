"""JSON format store — implements FormatStoragePort on a local key-value file.

The store is a single JSON object written to the platform data directory
(``~/.local/share/journal_formatter/formats_store.json`` on Linux, via
``platformdirs``). Custom formats live under the ``customFormats`` key as
a JSON array of camelCase records.
"""

from __future__ import annotations

import json
import logging
import tempfile
from pathlib import Path
from typing import Any

import platformdirs
from pydantic import ValidationError

from journal_formatter.domain.errors import StorageReadError, StorageWriteError
from journal_formatter.domain.models.journal_format import JournalFormat
from journal_formatter.domain.ports.format_storage import FormatStoragePort

logger = logging.getLogger(__name__)

_APP_NAME = "journal_formatter"
_STORE_FILENAME = "formats_store.json"
CUSTOM_FORMATS_KEY = "customFormats"


class JsonFormatStore(FormatStoragePort):
    """Concrete implementation of :class:`FormatStoragePort`.

    Parameters
    ----------
    data_dir : Path | None
        Override the default data directory (useful for testing).
    """

    def __init__(self, data_dir: Path | None = None) -> None:
        self._data_dir = data_dir or Path(platformdirs.user_data_dir(_APP_NAME))
        self._store_path = self._data_dir / _STORE_FILENAME

    # -- Key-value access ----------------------------------------------------

    def get(self, key: str) -> Any:
        """Return the value stored under *key*, or ``None`` if absent.

        Raises:
            StorageReadError: If the store file is not a JSON object.
        """
        return self._read_all().get(key)

    def set(self, key: str, value: Any) -> None:
        """Store *value* under *key*, keeping every other entry."""
        try:
            data = self._read_all()
        except StorageReadError as exc:
            logger.warning("Overwriting unreadable store %s: %s", self._store_path, exc)
            data = {}
        data[key] = value
        self._write_all(data)

    # -- FormatStoragePort ---------------------------------------------------

    def load_formats(self) -> list[JournalFormat]:
        raw = self.get(CUSTOM_FORMATS_KEY)
        if raw is None:
            return []
        if not isinstance(raw, list):
            raise StorageReadError(f"'{CUSTOM_FORMATS_KEY}' is not a list")
        try:
            return [JournalFormat.model_validate(item) for item in raw]
        except ValidationError as exc:
            raise StorageReadError(f"Invalid saved format: {exc}") from exc

    def append_format(self, journal_format: JournalFormat) -> None:
        try:
            saved = self.get(CUSTOM_FORMATS_KEY)
        except StorageReadError:
            saved = None
        if not isinstance(saved, list):
            saved = []
        saved.append(journal_format.to_record())
        self.set(CUSTOM_FORMATS_KEY, saved)

    # -- Internals -----------------------------------------------------------

    def _read_all(self) -> dict[str, Any]:
        if not self._store_path.exists():
            return {}
        try:
            data = json.loads(self._store_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise StorageReadError(f"Cannot read {self._store_path}: {exc}") from exc
        if not isinstance(data, dict):
            raise StorageReadError(f"{self._store_path} does not hold a JSON object")
        return data

    def _write_all(self, data: dict[str, Any]) -> None:
        """Persist the store atomically (write to temp, then rename)."""
        try:
            self._data_dir.mkdir(parents=True, exist_ok=True)
            tmp_fd, tmp_path = tempfile.mkstemp(dir=self._data_dir, suffix=".tmp")
        except OSError as exc:
            raise StorageWriteError(f"Cannot write {self._store_path}: {exc}") from exc
        try:
            with open(tmp_fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, indent=2, ensure_ascii=False)
            Path(tmp_path).replace(self._store_path)
        except OSError as exc:
            Path(tmp_path).unlink(missing_ok=True)
            raise StorageWriteError(f"Cannot write {self._store_path}: {exc}") from exc
