from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Optional, Protocol, Sequence

from ..core.logger import logger


class LocalStore(Protocol):
    """String-keyed, string-valued persistent store (localStorage semantics)."""

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError

    def keys(self) -> Sequence[str]:
        raise NotImplementedError


class JsonFileStore(LocalStore):
    """Keeps the whole key space in one JSON object on disk.

    Every write rewrites the file through a temp file + os.replace, so a crash
    never leaves a half-written store behind. Single-process use only.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except json.JSONDecodeError:
            logger.warning("Local store %s is corrupted; starting empty", self._path)
            return {}
        if not isinstance(data, dict):
            logger.warning("Local store %s does not hold an object; starting empty", self._path)
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _write(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=self._path.name, suffix=".tmp", dir=self._path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp, self._path)
        except BaseException:
            if os.path.exists(tmp):
                os.remove(tmp)
            raise

    def get_item(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)

    def keys(self) -> Sequence[str]:
        return list(self._read().keys())
