"""Domain models for energy expenditure."""

from dataclasses import dataclass
from enum import StrEnum


class BmrFormula(StrEnum):
    """BMR formula variants."""

    MIFFLIN_ST_JEOR = "mifflin-st-jeor"
    KATCH_MCARDLE = "katch-mcardle"


@dataclass(frozen=True)
class ActivityLevel:
    """Activity multiplier with display metadata."""

    key: str
    multiplier: float
    label: str
    description: str


@dataclass(frozen=True)
class TdeeResult:
    """BMR and TDEE for a set of inputs."""

    bmr: int
    tdee: int
    formula: BmrFormula
    lean_mass_kg: float | None = None
