"""Domain models for body composition."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BodyFatCategory:
    """Body-fat range with a label and display color."""

    label: str
    color: str
    min: float | None = None
    max: float | None = None


UNKNOWN_CATEGORY = BodyFatCategory(label="Unknown", color="secondary")


@dataclass(frozen=True)
class MassComposition:
    """Fat and lean mass in pounds."""

    fat_mass: float
    lean_mass: float


@dataclass(frozen=True)
class BodyFatResult:
    """Navy-method body-fat analysis."""

    body_fat_percentage: float
    category: BodyFatCategory
    fat_mass: float
    lean_mass: float
    weight_lbs: float
