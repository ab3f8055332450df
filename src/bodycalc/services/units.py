"""Unit conversions and rounding helpers shared by the calculators."""

import math

LBS_TO_KG = 0.453592
INCHES_TO_CM = 2.54
INCHES_PER_FOOT = 12


def lbs_to_kg(lbs: float) -> float:
    """Convert pounds to kilograms."""
    return lbs * LBS_TO_KG


def kg_to_lbs(kg: float) -> float:
    """Convert kilograms to pounds."""
    return kg / LBS_TO_KG


def inches_to_cm(inches: float) -> float:
    """Convert inches to centimeters."""
    return inches * INCHES_TO_CM


def cm_to_inches(cm: float) -> float:
    """Convert centimeters to inches."""
    return cm / INCHES_TO_CM


def feet_inches_to_inches(feet: float, inches: float) -> float:
    """Convert a feet and inches pair to total inches."""
    return feet * INCHES_PER_FOOT + inches


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up.

    ``round()`` uses banker's rounding, which would turn 1752.5 into 1752.
    """
    return math.floor(value + 0.5)


def round_one(value: float) -> float:
    """Round to one decimal place with halves rounded up."""
    return math.floor(value * 10 + 0.5) / 10


def round_two(value: float) -> float:
    """Round to two decimal places with halves rounded up."""
    return math.floor(value * 100 + 0.5) / 100
