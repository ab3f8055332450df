"""Weight needed to reach a target body-fat percentage."""

from bodycalc.domain.fat_loss import FatLossResult
from bodycalc.domain.units import WeightUnit
from bodycalc.services.energy import calculate_lean_mass
from bodycalc.services.units import round_one

ESSENTIAL_FAT_FLOOR = 3


def calculate_fat_mass(weight: float, body_fat_percentage: float) -> float:
    """Return fat mass in the unit of ``weight``."""
    return weight * (body_fat_percentage / 100)


def calculate_goal_weight(lean_mass: float, target_body_fat: float) -> float:
    """Return the weight at which ``lean_mass`` makes up the target share.

    Falls back to ``lean_mass`` for targets of 100% or more.
    """
    target_lean_ratio = 1 - target_body_fat / 100
    if target_lean_ratio <= 0:
        return lean_mass
    return lean_mass / target_lean_ratio


def calculate_fat_loss_required(
    *,
    current_weight: float,
    current_body_fat: float,
    target_body_fat: float,
    weight_unit: WeightUnit = WeightUnit.LBS,
) -> FatLossResult:
    """Return the weight and fat to lose while preserving lean mass."""
    if target_body_fat >= current_body_fat:
        return FatLossResult(
            is_valid=False,
            error="Target body fat must be lower than current body fat",
            current_weight=current_weight,
            weight_unit=weight_unit,
        )
    if target_body_fat < ESSENTIAL_FAT_FLOOR:
        return FatLossResult(
            is_valid=False,
            error=(
                f"Target body fat cannot be below {ESSENTIAL_FAT_FLOOR}% "
                "(essential fat)"
            ),
            current_weight=current_weight,
            weight_unit=weight_unit,
        )

    lean_mass = calculate_lean_mass(current_weight, current_body_fat)
    current_fat_mass = calculate_fat_mass(current_weight, current_body_fat)
    goal_weight = calculate_goal_weight(lean_mass, target_body_fat)
    goal_fat_mass = calculate_fat_mass(goal_weight, target_body_fat)

    return FatLossResult(
        is_valid=True,
        current_weight=round_one(current_weight),
        weight_unit=weight_unit,
        current_body_fat=current_body_fat,
        target_body_fat=target_body_fat,
        lean_mass=round_one(lean_mass),
        current_fat_mass=round_one(current_fat_mass),
        goal_weight=round_one(goal_weight),
        goal_fat_mass=round_one(goal_fat_mass),
        weight_to_lose=round_one(current_weight - goal_weight),
        fat_to_lose=round_one(current_fat_mass - goal_fat_mass),
    )
