"""Tests for unit conversions and rounding."""

import pytest

from bodycalc.services.units import (
    cm_to_inches,
    feet_inches_to_inches,
    inches_to_cm,
    kg_to_lbs,
    lbs_to_kg,
    round_half_up,
    round_one,
)


def test_mass_conversions() -> None:
    assert lbs_to_kg(150) == pytest.approx(68.04, abs=0.01)
    assert lbs_to_kg(200) == pytest.approx(90.72, abs=0.01)
    assert kg_to_lbs(70) == pytest.approx(154.32, abs=0.01)


def test_length_conversions() -> None:
    assert inches_to_cm(70) == pytest.approx(177.8)
    assert cm_to_inches(180) == pytest.approx(70.87, abs=0.01)
    assert feet_inches_to_inches(5, 10) == 70
    assert feet_inches_to_inches(6, 0) == 72


@pytest.mark.parametrize("value", [0.5, 1, 63.2, 180, 2500.75])
def test_conversions_are_reversible(value: float) -> None:
    assert kg_to_lbs(lbs_to_kg(value)) == pytest.approx(value, rel=1e-6)
    assert cm_to_inches(inches_to_cm(value)) == pytest.approx(value, rel=1e-6)


def test_negative_input_propagates() -> None:
    assert lbs_to_kg(-10) == pytest.approx(-4.53592)


def test_rounding_rounds_halves_up() -> None:
    assert round_half_up(1752.5) == 1753
    assert round_half_up(2.5) == 3
    assert round_half_up(-2.5) == -2
    assert round_one(177.66) == 177.7
    assert round_one(-5.0) == -5.0
