"""Unit and sex enumerations shared by the calculators."""

from enum import StrEnum


class WeightUnit(StrEnum):
    """Mass units."""

    LBS = "lbs"
    KG = "kg"


class LengthUnit(StrEnum):
    """Length units."""

    INCHES = "in"
    CM = "cm"


class Sex(StrEnum):
    """Biological sex used by the formulas."""

    MALE = "male"
    FEMALE = "female"
