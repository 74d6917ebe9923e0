"""Key-value storage backends holding string values under string keys."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

from ticklist.config.constants import PREFS_FILE
from ticklist.errors import StorageError

logger = logging.getLogger("ticklist.storage.backends")


@runtime_checkable
class KeyValueStorage(Protocol):
    """Minimal string key-value slot API."""

    def get_string(self, key: str) -> str | None: ...

    def set_string(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStorage:
    """Dict-backed storage; nothing outlives the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get_string(self, key: str) -> str | None:
        return self._data.get(key)

    def set_string(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStorage:
    """Flat JSON object on disk, one string value per key.

    Uses atomic writes (write to .tmp, then replace) to prevent corruption.
    The file is re-read on every access so several processes (TUI and CLI)
    can share it.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or PREFS_FILE

    @property
    def path(self) -> Path:
        return self._path

    def get_string(self, key: str) -> str | None:
        value = self._read().get(key)
        if value is not None and not isinstance(value, str):
            # Hand the raw JSON back so the caller sees what is there.
            return json.dumps(value)
        return value

    def set_string(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    # -- File I/O --------------------------------------------------------------

    def _read(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise StorageError(f"{self._path} is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise StorageError(f"{self._path} does not hold a JSON object")
        return data

    def _write(self, data: dict) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(".tmp")
        try:
            tmp.write_text(json.dumps(data, indent=2), encoding="utf-8")
            tmp.replace(self._path)
        except OSError:
            tmp.unlink(missing_ok=True)
            raise
        logger.debug("Wrote %d key(s) to %s", len(data), self._path)
