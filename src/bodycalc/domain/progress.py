"""Domain models for progress tracking."""

from dataclasses import dataclass, field, fields
from enum import StrEnum
from typing import ClassVar


class EntryType(StrEnum):
    """Metric kinds a progress entry can hold."""

    WEIGHT = "weight"
    BODY_FAT = "bodyFat"
    TDEE = "tdee"
    MACROS = "macros"


def _key(name: str) -> dict[str, str]:
    return {"key": name}


@dataclass(frozen=True)
class EntryData:
    """Base for the per-type payloads.

    Field metadata ``key`` names the JSON key a field is stored under. Keys
    that no field claims are carried in ``extra`` so imported payloads survive
    a round trip untouched.
    """

    entry_type: ClassVar[EntryType]

    extra: dict[str, object] = field(default_factory=dict)

    def to_mapping(self) -> dict[str, object]:
        """Return the JSON-ready mapping, omitting unset metrics."""
        mapping: dict[str, object] = dict(self.extra)
        for data_field in _metric_fields(type(self)):
            value = getattr(self, data_field.name)
            if value is not None:
                mapping[data_field.metadata["key"]] = value
        return mapping

    def get(self, metric: str) -> object | None:
        """Return the value stored under a JSON metric key, if any."""
        return self.to_mapping().get(metric)

    @classmethod
    def from_mapping(cls, raw: dict[str, object]) -> "EntryData":
        """Build a payload from a JSON mapping."""
        values: dict[str, object] = {}
        extra = dict(raw)
        for data_field in _metric_fields(cls):
            key = data_field.metadata["key"]
            if key in extra:
                values[data_field.name] = extra.pop(key)
        return cls(extra=extra, **values)


@dataclass(frozen=True)
class WeightData(EntryData):
    """Body weight reading."""

    entry_type: ClassVar[EntryType] = EntryType.WEIGHT

    weight: float | None = field(default=None, metadata=_key("weight"))
    unit: str | None = field(default=None, metadata=_key("unit"))


@dataclass(frozen=True)
class BodyFatData(EntryData):
    """Body-fat percentage reading."""

    entry_type: ClassVar[EntryType] = EntryType.BODY_FAT

    body_fat: float | None = field(default=None, metadata=_key("bodyFat"))


@dataclass(frozen=True)
class TdeeData(EntryData):
    """Energy expenditure result."""

    entry_type: ClassVar[EntryType] = EntryType.TDEE

    tdee: float | None = field(default=None, metadata=_key("tdee"))
    bmr: float | None = field(default=None, metadata=_key("bmr"))


@dataclass(frozen=True)
class MacrosData(EntryData):
    """Macro targets snapshot."""

    entry_type: ClassVar[EntryType] = EntryType.MACROS

    calories: float | None = field(default=None, metadata=_key("calories"))
    protein: float | None = field(default=None, metadata=_key("protein"))
    carbs: float | None = field(default=None, metadata=_key("carbs"))
    fat: float | None = field(default=None, metadata=_key("fat"))
    weight: float | None = field(default=None, metadata=_key("weight"))
    weight_unit: str | None = field(default=None, metadata=_key("weightUnit"))


DATA_TYPES: dict[EntryType, type[EntryData]] = {
    EntryType.WEIGHT: WeightData,
    EntryType.BODY_FAT: BodyFatData,
    EntryType.TDEE: TdeeData,
    EntryType.MACROS: MacrosData,
}


def build_entry_data(entry_type: EntryType, raw: dict[str, object]) -> EntryData:
    """Return the payload variant for an entry type."""
    return DATA_TYPES[entry_type].from_mapping(raw)


def _metric_fields(cls: type[EntryData]) -> list:
    return [data_field for data_field in fields(cls) if "key" in data_field.metadata]


@dataclass(frozen=True)
class ProgressEntry:
    """One saved measurement in the progress time series."""

    id: str
    type: EntryType
    date: str
    data: EntryData
    created_at: str | None = None
    updated_at: str | None = None


@dataclass(frozen=True)
class ChartPoint:
    """Single point of a chart series."""

    date: str
    value: object
    id: str


@dataclass(frozen=True)
class ProgressStats:
    """Aggregate statistics for one metric."""

    count: int
    min: float | None = None
    max: float | None = None
    average: float | None = None
    change: float | None = None
    percent_change: float | None = None


@dataclass(frozen=True)
class ImportResult:
    """Outcome of importing exported progress data."""

    success: bool
    imported: int = 0
    total: int = 0
    error: str | None = None
