"""JSON file implementation of progress storage."""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from bodycalc.services.progress import ProgressStorage

logger = logging.getLogger(__name__)


@dataclass
class JsonFileStorage(ProgressStorage):
    """Stores raw values under keys in a single JSON object file."""

    path: Path

    def get_item(self, key: str) -> str | None:
        """Return the stored value for ``key``."""
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, rewriting the whole file."""
        items = self._read()
        items[key] = value
        self._write(items)

    def remove_item(self, key: str) -> None:
        """Delete ``key``; a missing key or file is not an error."""
        items = self._read()
        if key not in items:
            return
        del items[key]
        self._write(items)

    def _read(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            items = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.warning("Failed to read storage file %s", self.path)
            return {}
        if not isinstance(items, dict):
            logger.warning("Storage file %s does not hold an object", self.path)
            return {}
        return items

    def _write(self, items: dict[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        try:
            tmp_path.write_text(json.dumps(items), encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise
