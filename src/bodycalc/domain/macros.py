"""Domain models for macronutrient targets."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Goal:
    """Calorie adjustment for a training goal."""

    key: str
    adjustment: int
    label: str
    description: str


@dataclass(frozen=True)
class MacroBreakdown:
    """Calories and percentage of actual calories per macro."""

    protein_calories: int
    fat_calories: int
    carb_calories: int
    protein_percentage: int
    fat_percentage: int
    carb_percentage: int


@dataclass(frozen=True)
class MacroResult:
    """Daily macro split in grams."""

    target_calories: float
    actual_calories: int
    protein: int
    fat: int
    carbs: int
    breakdown: MacroBreakdown
