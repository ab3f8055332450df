"""BMR and TDEE calculations."""

from bodycalc.domain.energy import ActivityLevel, BmrFormula, TdeeResult
from bodycalc.domain.units import LengthUnit, Sex, WeightUnit
from bodycalc.services.lookup import LookupPolicy, lenient_lookup
from bodycalc.services.units import inches_to_cm, lbs_to_kg, round_half_up

ACTIVITY_LEVELS: dict[str, ActivityLevel] = {
    level.key: level
    for level in (
        ActivityLevel("sedentary", 1.2, "Sedentary", "Little or no exercise"),
        ActivityLevel("light", 1.375, "Light", "Light exercise 1-3 days/week"),
        ActivityLevel(
            "moderate", 1.55, "Moderate", "Moderate exercise 3-5 days/week"
        ),
        ActivityLevel("active", 1.725, "Active", "Hard exercise 6-7 days/week"),
        ActivityLevel(
            "veryActive", 1.9, "Very Active", "Very hard exercise, physical job"
        ),
    )
}

DEFAULT_ACTIVITY_LEVEL = ACTIVITY_LEVELS["sedentary"]


def calculate_bmr(weight_kg: float, height_cm: float, age: float, sex: Sex) -> int:
    """Return BMR using the Mifflin-St Jeor equation."""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    if sex == Sex.MALE:
        return round_half_up(base + 5)
    return round_half_up(base - 161)


def calculate_lean_mass(weight: float, body_fat_percent: float) -> float:
    """Return lean mass in the unit of ``weight``."""
    return weight * (100 - body_fat_percent) / 100


def calculate_bmr_katch_mcardle(lean_mass_kg: float) -> int:
    """Return BMR using the Katch-McArdle equation."""
    return round_half_up(370 + 21.6 * lean_mass_kg)


def calculate_tdee(
    bmr: float, activity_level: str | None, policy: LookupPolicy = lenient_lookup
) -> int:
    """Scale BMR by the activity multiplier; unknown levels count as sedentary."""
    level = policy(ACTIVITY_LEVELS, activity_level, DEFAULT_ACTIVITY_LEVEL)
    return round_half_up(bmr * level.multiplier)


def calculate_full_tdee(  # noqa: PLR0913
    *,
    weight: float,
    weight_unit: WeightUnit,
    height: float,
    height_unit: LengthUnit,
    age: float,
    sex: Sex,
    activity_level: str | None,
    body_fat_percent: float | None = None,
    policy: LookupPolicy = lenient_lookup,
) -> TdeeResult:
    """Compute BMR and TDEE from raw form inputs.

    Katch-McArdle is used whenever a positive body-fat percentage is given,
    Mifflin-St Jeor otherwise.
    """
    weight_kg = lbs_to_kg(weight) if weight_unit == WeightUnit.LBS else weight
    height_cm = inches_to_cm(height) if height_unit == LengthUnit.INCHES else height

    if body_fat_percent is not None and body_fat_percent > 0:
        lean_mass_kg = calculate_lean_mass(weight_kg, body_fat_percent)
        bmr = calculate_bmr_katch_mcardle(lean_mass_kg)
        return TdeeResult(
            bmr=bmr,
            tdee=calculate_tdee(bmr, activity_level, policy),
            formula=BmrFormula.KATCH_MCARDLE,
            lean_mass_kg=lean_mass_kg,
        )

    bmr = calculate_bmr(weight_kg, height_cm, age, sex)
    return TdeeResult(
        bmr=bmr,
        tdee=calculate_tdee(bmr, activity_level, policy),
        formula=BmrFormula.MIFFLIN_ST_JEOR,
    )
