"""Domain models for fat-loss targets."""

from dataclasses import dataclass

from bodycalc.domain.units import WeightUnit


@dataclass(frozen=True)
class FatLossResult:
    """Outcome of a fat-loss target calculation.

    When ``is_valid`` is False only ``error``, ``current_weight`` and
    ``weight_unit`` are populated.
    """

    is_valid: bool
    current_weight: float
    weight_unit: WeightUnit
    error: str | None = None
    current_body_fat: float | None = None
    target_body_fat: float | None = None
    lean_mass: float | None = None
    current_fat_mass: float | None = None
    goal_weight: float | None = None
    goal_fat_mass: float | None = None
    weight_to_lose: float | None = None
    fat_to_lose: float | None = None
