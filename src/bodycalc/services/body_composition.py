"""Navy-method body-fat estimation."""

import math

from bodycalc.domain.body_composition import (
    UNKNOWN_CATEGORY,
    BodyFatCategory,
    BodyFatResult,
    MassComposition,
)
from bodycalc.domain.units import LengthUnit, Sex, WeightUnit
from bodycalc.services.units import cm_to_inches, kg_to_lbs, round_one

BODY_FAT_CATEGORIES: dict[Sex, list[BodyFatCategory]] = {
    Sex.MALE: [
        BodyFatCategory("Essential Fat", "warning", 0, 5),
        BodyFatCategory("Athletic", "success", 6, 13),
        BodyFatCategory("Fitness", "success", 14, 17),
        BodyFatCategory("Average", "warning", 18, 24),
        BodyFatCategory("Obese", "error", 25, 100),
    ],
    Sex.FEMALE: [
        BodyFatCategory("Essential Fat", "warning", 0, 13),
        BodyFatCategory("Athletic", "success", 14, 20),
        BodyFatCategory("Fitness", "success", 21, 24),
        BodyFatCategory("Average", "warning", 25, 31),
        BodyFatCategory("Obese", "error", 32, 100),
    ],
}


def calculate_male_body_fat(
    waist_inches: float, neck_inches: float, height_inches: float
) -> float:
    """Return male body-fat percentage; 0 when the waist is not above the neck."""
    if waist_inches <= neck_inches:
        return 0
    body_fat = (
        86.010 * math.log10(waist_inches - neck_inches)
        - 70.041 * math.log10(height_inches)
        + 36.76
    )
    return max(0, round_one(body_fat))


def calculate_female_body_fat(
    waist_inches: float, hip_inches: float, neck_inches: float, height_inches: float
) -> float:
    """Return female body-fat percentage; 0 when waist + hip is not above the neck."""
    if waist_inches + hip_inches - neck_inches <= 0:
        return 0
    body_fat = (
        163.205 * math.log10(waist_inches + hip_inches - neck_inches)
        - 97.684 * math.log10(height_inches)
        - 78.387
    )
    return max(0, round_one(body_fat))


def get_body_fat_category(body_fat_percentage: float, sex: Sex) -> BodyFatCategory:
    """Return the category for a percentage, or Unknown outside [0, 100].

    A category covers everything from its ``min`` up to the next category's
    ``min``, so fractional values between the listed integer bounds (for
    example 5.5 for males) fall into the lower bucket.
    """
    categories = BODY_FAT_CATEGORIES.get(sex, BODY_FAT_CATEGORIES[Sex.MALE])
    if not categories[0].min <= body_fat_percentage <= categories[-1].max:
        return UNKNOWN_CATEGORY
    match = categories[0]
    for category in categories[1:]:
        if body_fat_percentage < category.min:
            break
        match = category
    return match


def calculate_mass_composition(
    body_fat_percentage: float, weight_lbs: float
) -> MassComposition:
    """Split body weight into fat and lean mass."""
    fat_mass = round_one(body_fat_percentage / 100 * weight_lbs)
    lean_mass = round_one(weight_lbs - fat_mass)
    return MassComposition(fat_mass=fat_mass, lean_mass=lean_mass)


def calculate_body_fat(  # noqa: PLR0913
    *,
    sex: Sex,
    weight: float,
    weight_unit: WeightUnit,
    height: float,
    height_unit: LengthUnit,
    neck: float,
    waist: float,
    measurement_unit: LengthUnit,
    hip: float | None = None,
) -> BodyFatResult:
    """Run the full Navy-method analysis from raw form inputs."""

    def to_inches(value: float) -> float:
        return cm_to_inches(value) if measurement_unit == LengthUnit.CM else value

    height_inches = cm_to_inches(height) if height_unit == LengthUnit.CM else height
    neck_inches = to_inches(neck)
    waist_inches = to_inches(waist)
    hip_inches = to_inches(hip) if hip else 0
    weight_lbs = kg_to_lbs(weight) if weight_unit == WeightUnit.KG else weight

    if sex == Sex.MALE:
        body_fat = calculate_male_body_fat(waist_inches, neck_inches, height_inches)
    else:
        body_fat = calculate_female_body_fat(
            waist_inches, hip_inches, neck_inches, height_inches
        )

    composition = calculate_mass_composition(body_fat, weight_lbs)
    return BodyFatResult(
        body_fat_percentage=body_fat,
        category=get_body_fat_category(body_fat, sex),
        fat_mass=composition.fat_mass,
        lean_mass=composition.lean_mass,
        weight_lbs=weight_lbs,
    )
