"""Tests for macro split calculations."""

import pytest

from bodycalc.services.lookup import UnknownKeyError, strict_lookup
from bodycalc.services.macros import (
    GOALS,
    calculate_carbs,
    calculate_fat,
    calculate_macros,
    calculate_macros_from_percentages,
    calculate_protein,
    calculate_target_calories,
    protein_grams_to_percentage,
    protein_percentage_to_grams,
)


@pytest.mark.parametrize(
    ("goal", "expected"),
    [
        ("cut", 2000),
        ("maintain", 2500),
        ("recomp", 2500),
        ("lean_bulk", 2750),
        ("bulk", 3000),
        ("unknown", 2500),
        (None, 2500),
    ],
)
def test_calculate_target_calories(goal: str | None, expected: int) -> None:
    assert calculate_target_calories(2500, goal) == expected


def test_custom_adjustment_overrides_goal() -> None:
    assert calculate_target_calories(2500, "bulk", custom_adjustment=-300) == 2200
    assert calculate_target_calories(2500, "bulk", custom_adjustment=0) == 2500


def test_strict_policy_rejects_unknown_goal() -> None:
    with pytest.raises(UnknownKeyError):
        calculate_target_calories(2500, "shred", policy=strict_lookup)


def test_goals_table_keys() -> None:
    assert set(GOALS) == {"cut", "maintain", "recomp", "lean_bulk", "bulk"}


def test_protein_fat_and_carbs() -> None:
    assert calculate_protein(180) == 180
    assert calculate_protein(180, 1.2) == 216
    assert calculate_protein(175, 1.1) == 193
    assert calculate_fat(2000) == 56
    assert calculate_fat(2000, 0.30) == 67
    assert calculate_carbs(2000, 180, 56) == 194


def test_carbs_never_negative() -> None:
    assert calculate_carbs(1000, 200, 100) == 0


def test_calculate_macros_cut() -> None:
    result = calculate_macros(tdee=2500, bodyweight_lbs=180, goal="cut")

    assert result.target_calories == 2000
    assert result.protein == 180
    assert result.fat == 56
    assert result.carbs == 194
    assert result.actual_calories == 180 * 4 + 56 * 9 + 194 * 4


def test_calculate_macros_breakdown_sums_close_to_100() -> None:
    result = calculate_macros(tdee=2800, bodyweight_lbs=165, goal="bulk")
    breakdown = result.breakdown

    assert breakdown.protein_calories == result.protein * 4
    assert breakdown.fat_calories == result.fat * 9
    assert breakdown.carb_calories == result.carbs * 4
    total = (
        breakdown.protein_percentage
        + breakdown.fat_percentage
        + breakdown.carb_percentage
    )
    assert 99 <= total <= 101


def test_calculate_macros_custom_protein_multiplier() -> None:
    result = calculate_macros(
        tdee=2500, bodyweight_lbs=180, goal="maintain", protein_multiplier=1.2
    )

    assert result.protein == 216


def test_calculate_macros_clamps_carbs_when_protein_and_fat_exceed_target() -> None:
    result = calculate_macros(
        tdee=1200, bodyweight_lbs=250, goal="cut", protein_multiplier=1.5
    )

    assert result.carbs == 0
    assert result.actual_calories == result.protein * 4 + result.fat * 9
    assert result.actual_calories > result.target_calories


def test_calculate_macros_from_percentages() -> None:
    result = calculate_macros_from_percentages(2000, 30, 25)

    assert result.protein == 150
    assert result.fat == 56
    assert result.carbs == 224
    assert result.actual_calories == 150 * 4 + 56 * 9 + 224 * 4


def test_calculate_macros_from_percentages_clamps_carbs() -> None:
    result = calculate_macros_from_percentages(2000, 60, 50)

    assert result.carbs == 0
    assert result.breakdown.carb_percentage == 0


def test_protein_grams_to_percentage() -> None:
    assert protein_grams_to_percentage(1, 180, 2000) == 36
    assert protein_grams_to_percentage(1, 180, 0) == 0
    assert protein_grams_to_percentage(1, 180, -100) == 0


def test_protein_percentage_to_grams() -> None:
    assert protein_percentage_to_grams(36, 180, 2000) == 1
    assert protein_percentage_to_grams(30, 165, 2200) == pytest.approx(1.0)
    assert protein_percentage_to_grams(30, 0, 2200) == 0
