"""Progress tracking service backed by a single key-value storage slot."""

import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import uuid4

from bodycalc.domain.progress import (
    ChartPoint,
    EntryData,
    EntryType,
    ImportResult,
    ProgressEntry,
    ProgressStats,
    build_entry_data,
)
from bodycalc.services.units import round_one

logger = logging.getLogger(__name__)

STORAGE_KEY = "bodycalc_progress"
EXPORT_VERSION = 1
DEFAULT_CHART_LIMIT = 30

_UPDATABLE_FIELDS = {"type", "date", "data"}
_ENTRY_TYPE_VALUES = {entry_type.value for entry_type in EntryType}


class ProgressStorage(Protocol):
    """Key-value persistence interface for serialized progress data."""

    def get_item(self, key: str) -> str | None:
        """Return the raw value stored under ``key``."""

    def set_item(self, key: str, value: str) -> None:
        """Replace the raw value stored under ``key``."""

    def remove_item(self, key: str) -> None:
        """Delete ``key`` if present."""


def generate_id() -> str:
    """Return a millisecond timestamp with a random suffix."""
    millis = int(datetime.now(tz=UTC).timestamp() * 1000)
    return f"{millis}-{uuid4().hex[:9]}"


@dataclass
class ProgressService:
    """Append-only time series of saved calculator results.

    Every call reads the whole collection from storage; every mutation writes
    the whole collection back in one call.
    """

    storage: ProgressStorage
    storage_key: str = STORAGE_KEY
    id_factory: Callable[[], str] = field(default=generate_id)

    def list_entries(self) -> list[ProgressEntry]:
        """Return all entries, newest date first."""
        raw = self.storage.get_item(self.storage_key)
        if not raw:
            return []
        try:
            payload = json.loads(raw)
        except (ValueError, TypeError):
            logger.warning("Failed to read progress data, treating it as empty")
            return []
        if not isinstance(payload, list):
            logger.warning("Progress data is not a list, treating it as empty")
            return []
        entries = []
        for index, item in enumerate(payload):
            if not _is_importable(item):
                logger.warning("Skipping malformed progress entry at index %s", index)
                continue
            entries.append(_parse_entry(item))
        return _sort_newest_first(entries)

    def save(
        self,
        entry_type: EntryType | str,
        entry_date: date | str,
        data: EntryData | Mapping[str, object],
    ) -> ProgressEntry:
        """Append a new entry and return it."""
        resolved_type = EntryType(entry_type)
        date_value = _date_string(entry_date)
        if not date_value:
            raise ValueError("Progress entry date is required")
        entry = ProgressEntry(
            id=self.id_factory(),
            type=resolved_type,
            date=date_value,
            data=_coerce_data(resolved_type, data),
            created_at=_now_iso(),
        )
        entries = self.list_entries()
        entries.append(entry)
        self._write(entries)
        return entry

    def update(
        self, entry_id: str, changes: Mapping[str, object]
    ) -> ProgressEntry | None:
        """Merge ``type``, ``date`` or ``data`` into an entry.

        Returns None when no entry has ``entry_id``. Raises ValueError for
        fields other than those three, an empty date, or data that does not
        fit the entry type.
        """
        unknown = set(changes) - _UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")
        entries = self.list_entries()
        for index, entry in enumerate(entries):
            if entry.id != entry_id:
                continue
            entry_type = EntryType(changes.get("type", entry.type))
            raw_data = changes.get("data", entry.data.to_mapping())
            date_value = _date_string(changes.get("date", entry.date))
            if not date_value:
                raise ValueError("Progress entry date is required")
            updated = replace(
                entry,
                type=entry_type,
                date=date_value,
                data=_coerce_data(entry_type, raw_data),
                updated_at=_now_iso(),
            )
            entries[index] = updated
            self._write(entries)
            return updated
        return None

    def delete(self, entry_id: str) -> bool:
        """Remove an entry; return False when it does not exist."""
        entries = self.list_entries()
        remaining = [entry for entry in entries if entry.id != entry_id]
        if len(remaining) == len(entries):
            return False
        self._write(remaining)
        return True

    def list_by_type(self, entry_type: EntryType | str) -> list[ProgressEntry]:
        """Return entries of one type, newest first."""
        return [entry for entry in self.list_entries() if entry.type == entry_type]

    def list_by_date_range(
        self, start: date | str, end: date | str
    ) -> list[ProgressEntry]:
        """Return entries whose date falls within ``[start, end]``."""
        start_date = _parse_date(_date_string(start))
        end_date = _parse_date(_date_string(end))
        if start_date is None or end_date is None:
            return []
        results = []
        for entry in self.list_entries():
            entry_date = _parse_date(entry.date)
            if entry_date is not None and start_date <= entry_date <= end_date:
                results.append(entry)
        return results

    def latest(self, entry_type: EntryType | str) -> ProgressEntry | None:
        """Return the newest entry of a type, if any."""
        entries = self.list_by_type(entry_type)
        return entries[0] if entries else None

    def chart_series(
        self,
        entry_type: EntryType | str,
        metric: str,
        limit: int = DEFAULT_CHART_LIMIT,
    ) -> list[ChartPoint]:
        """Return up to ``limit`` recent values in chronological order."""
        recent = self.list_by_type(entry_type)[:limit]
        points = []
        for entry in reversed(recent):
            value = entry.data.get(metric)
            if value is None:
                continue
            points.append(ChartPoint(date=entry.date, value=value, id=entry.id))
        return points

    def stats(self, entry_type: EntryType | str, metric: str) -> ProgressStats:
        """Return count, range, average and change for a metric."""
        values = []
        for entry in self.list_by_type(entry_type):
            value = entry.data.get(metric)
            if _is_number(value):
                values.append(value)
        if not values:
            return ProgressStats(count=0)

        newest = values[0]
        oldest = values[-1]
        change = newest - oldest
        percent_change = round_one(change / oldest * 100) if oldest != 0 else None
        return ProgressStats(
            count=len(values),
            min=round_one(min(values)),
            max=round_one(max(values)),
            average=round_one(sum(values) / len(values)),
            change=round_one(change),
            percent_change=percent_change,
        )

    def export_data(self) -> str:
        """Serialize every entry into the export document."""
        document = {
            "version": EXPORT_VERSION,
            "exportedAt": _now_iso(),
            "entries": [serialize_entry(entry) for entry in self.list_entries()],
        }
        return json.dumps(document, indent=2)

    def import_data(self, json_string: str, merge: bool = True) -> ImportResult:
        """Import an export document, merging with or replacing current data."""
        try:
            document = json.loads(json_string)
        except (ValueError, TypeError):
            return ImportResult(success=False, error="Failed to parse import data")
        raw_entries = document.get("entries") if isinstance(document, dict) else None
        if not isinstance(raw_entries, list):
            return ImportResult(
                success=False, error="Invalid import format: missing entries array"
            )

        valid = [_parse_entry(item) for item in raw_entries if _is_importable(item)]
        existing = self.list_entries() if merge else []
        taken = {entry.id for entry in existing}
        imported = []
        for entry in valid:
            entry_id = entry.id
            if not entry_id or entry_id in taken:
                entry_id = self._fresh_id(taken)
            taken.add(entry_id)
            imported.append(replace(entry, id=entry_id))

        combined = existing + imported
        try:
            self._write(combined)
        except OSError:
            logger.exception("Failed to write imported progress data")
            return ImportResult(success=False, error="Failed to save import data")
        logger.info(
            "Imported %s progress entries (merge=%s, total=%s)",
            len(imported),
            merge,
            len(combined),
        )
        return ImportResult(success=True, imported=len(imported), total=len(combined))

    def clear_all(self) -> bool:
        """Remove all stored progress data."""
        try:
            self.storage.remove_item(self.storage_key)
        except OSError:
            logger.exception("Failed to clear progress data")
            return False
        logger.info("Cleared progress data")
        return True

    def _fresh_id(self, taken: set[str]) -> str:
        entry_id = self.id_factory()
        while entry_id in taken:
            entry_id = self.id_factory()
        return entry_id

    def _write(self, entries: list[ProgressEntry]) -> None:
        payload = json.dumps([serialize_entry(entry) for entry in entries])
        self.storage.set_item(self.storage_key, payload)


def serialize_entry(entry: ProgressEntry) -> dict[str, object]:
    """Return the persisted JSON shape of an entry."""
    payload: dict[str, object] = {
        "id": entry.id,
        "type": entry.type.value,
        "date": entry.date,
        "data": entry.data.to_mapping(),
    }
    if entry.created_at is not None:
        payload["createdAt"] = entry.created_at
    if entry.updated_at is not None:
        payload["updatedAt"] = entry.updated_at
    return payload


def _parse_entry(raw: dict[str, object]) -> ProgressEntry:
    entry_type = EntryType(raw["type"])
    data = raw.get("data")
    if not isinstance(data, dict):
        raise TypeError("progress entry data must be an object")
    return ProgressEntry(
        id=str(raw.get("id") or ""),
        type=entry_type,
        date=str(raw["date"]),
        data=build_entry_data(entry_type, data),
        created_at=raw.get("createdAt"),
        updated_at=raw.get("updatedAt"),
    )


def _is_importable(raw: object) -> bool:
    if not isinstance(raw, dict):
        return False
    entry_type = raw.get("type")
    return (
        isinstance(entry_type, str)
        and entry_type in _ENTRY_TYPE_VALUES
        and isinstance(raw.get("date"), str)
        and bool(raw["date"])
        and isinstance(raw.get("data"), dict)
    )


def _coerce_data(
    entry_type: EntryType, data: EntryData | Mapping[str, object] | object
) -> EntryData:
    if isinstance(data, EntryData):
        if data.entry_type != entry_type:
            raise ValueError(
                f"{type(data).__name__} does not match entry type {entry_type.value}"
            )
        return data
    if not isinstance(data, Mapping):
        raise ValueError("Progress entry data must be a mapping")
    return build_entry_data(entry_type, dict(data))


def _sort_newest_first(entries: list[ProgressEntry]) -> list[ProgressEntry]:
    def sort_key(entry: ProgressEntry) -> tuple[bool, date]:
        parsed = _parse_date(entry.date)
        return parsed is not None, parsed or date.min

    return sorted(entries, key=sort_key, reverse=True)


def _parse_date(value: str) -> date | None:
    try:
        return date.fromisoformat(value[:10])
    except (ValueError, TypeError):
        return None


def _date_string(value: object) -> str:
    if isinstance(value, date):
        return value.isoformat()
    return str(value or "")


def _is_number(value: object) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _now_iso() -> str:
    return datetime.now(tz=UTC).isoformat()
