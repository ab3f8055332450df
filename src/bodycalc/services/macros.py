"""Macro split calculations."""

from bodycalc.domain.macros import Goal, MacroBreakdown, MacroResult
from bodycalc.services.lookup import LookupPolicy, lenient_lookup
from bodycalc.services.units import round_half_up, round_two

GOALS: dict[str, Goal] = {
    goal.key: goal
    for goal in (
        Goal("cut", -500, "Cut", "Lose fat (-500 cal)"),
        Goal("maintain", 0, "Maintain", "Maintain weight"),
        Goal("recomp", 0, "Recomp", "Body recomposition"),
        Goal("lean_bulk", 250, "Lean Bulk", "Gain muscle slowly (+250 cal)"),
        Goal("bulk", 500, "Bulk", "Gain muscle (+500 cal)"),
    )
}

NO_ADJUSTMENT = Goal("none", 0, "None", "No adjustment")

PROTEIN_CALORIES_PER_GRAM = 4
CARB_CALORIES_PER_GRAM = 4
FAT_CALORIES_PER_GRAM = 9

DEFAULT_PROTEIN_MULTIPLIER = 1.0
DEFAULT_FAT_FRACTION = 0.25


def calculate_target_calories(
    tdee: float,
    goal: str | None,
    custom_adjustment: float | None = None,
    policy: LookupPolicy = lenient_lookup,
) -> float:
    """Apply the custom adjustment, or the goal's fixed delta, to TDEE."""
    if custom_adjustment is not None:
        return tdee + custom_adjustment
    return tdee + policy(GOALS, goal, NO_ADJUSTMENT).adjustment


def calculate_protein(
    bodyweight_lbs: float, multiplier: float = DEFAULT_PROTEIN_MULTIPLIER
) -> int:
    """Return protein grams from grams-per-pound."""
    return round_half_up(bodyweight_lbs * multiplier)


def calculate_fat(
    target_calories: float, fraction: float = DEFAULT_FAT_FRACTION
) -> int:
    """Return fat grams for a fraction of target calories."""
    return round_half_up(target_calories * fraction / FAT_CALORIES_PER_GRAM)


def calculate_carbs(target_calories: float, protein: int, fat: int) -> int:
    """Fill the remaining calories with carbs, never going below zero."""
    remaining = (
        target_calories
        - protein * PROTEIN_CALORIES_PER_GRAM
        - fat * FAT_CALORIES_PER_GRAM
    )
    return max(0, round_half_up(remaining / CARB_CALORIES_PER_GRAM))


def calculate_macros(  # noqa: PLR0913
    *,
    tdee: float,
    bodyweight_lbs: float,
    goal: str | None = None,
    custom_adjustment: float | None = None,
    protein_multiplier: float = DEFAULT_PROTEIN_MULTIPLIER,
    fat_fraction: float = DEFAULT_FAT_FRACTION,
    policy: LookupPolicy = lenient_lookup,
) -> MacroResult:
    """Compute a full macro split from TDEE and bodyweight."""
    target_calories = calculate_target_calories(
        tdee, goal, custom_adjustment, policy
    )
    protein = calculate_protein(bodyweight_lbs, protein_multiplier)
    fat = calculate_fat(target_calories, fat_fraction)
    carbs = calculate_carbs(target_calories, protein, fat)
    return _build_result(target_calories, protein, fat, carbs)


def calculate_macros_from_percentages(
    target_calories: float, protein_percentage: float, fat_percentage: float
) -> MacroResult:
    """Compute a macro split from protein and fat shares of target calories.

    Carbs take whatever is left and clamp to zero once protein and fat reach
    100% between them.
    """
    protein = round_half_up(
        target_calories * protein_percentage / 100 / PROTEIN_CALORIES_PER_GRAM
    )
    fat = round_half_up(target_calories * fat_percentage / 100 / FAT_CALORIES_PER_GRAM)
    carbs = calculate_carbs(target_calories, protein, fat)
    return _build_result(target_calories, protein, fat, carbs)


def protein_grams_to_percentage(
    multiplier: float, bodyweight_lbs: float, target_calories: float
) -> int:
    """Return the share of target calories a grams-per-pound target represents."""
    if target_calories <= 0:
        return 0
    protein_calories = multiplier * bodyweight_lbs * PROTEIN_CALORIES_PER_GRAM
    return round_half_up(protein_calories / target_calories * 100)


def protein_percentage_to_grams(
    percentage: float, bodyweight_lbs: float, target_calories: float
) -> float:
    """Return the grams-per-pound multiplier for a share of target calories."""
    if bodyweight_lbs == 0:
        return 0
    grams = target_calories * percentage / 100 / PROTEIN_CALORIES_PER_GRAM
    return round_two(grams / bodyweight_lbs)


def _build_result(
    target_calories: float, protein: int, fat: int, carbs: int
) -> MacroResult:
    protein_calories = protein * PROTEIN_CALORIES_PER_GRAM
    fat_calories = fat * FAT_CALORIES_PER_GRAM
    carb_calories = carbs * CARB_CALORIES_PER_GRAM
    actual_calories = protein_calories + fat_calories + carb_calories
    return MacroResult(
        target_calories=target_calories,
        actual_calories=actual_calories,
        protein=protein,
        fat=fat,
        carbs=carbs,
        breakdown=MacroBreakdown(
            protein_calories=protein_calories,
            fat_calories=fat_calories,
            carb_calories=carb_calories,
            protein_percentage=_percentage(protein_calories, actual_calories),
            fat_percentage=_percentage(fat_calories, actual_calories),
            carb_percentage=_percentage(carb_calories, actual_calories),
        ),
    )


def _percentage(part: int, total: int) -> int:
    if total == 0:
        return 0
    return round_half_up(part / total * 100)
