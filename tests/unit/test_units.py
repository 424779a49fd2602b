from __future__ import annotations

import pytest

from gymcalc.core.models import Weight
from gymcalc.core.units import Unit, convert, from_kg, round_half_away, to_kg


def test_kg_to_lbs_rounds_to_two_decimals() -> None:
    assert convert(100.0, Unit.KG, Unit.LBS) == 220.46


def test_lbs_to_kg_rounds_to_two_decimals() -> None:
    assert convert(225.0, Unit.LBS, Unit.KG) == 102.06


def test_same_unit_returns_input_untouched() -> None:
    assert convert(1.234567, Unit.KG, Unit.KG) == 1.234567
    assert convert(99.999, Unit.LBS, Unit.LBS) == 99.999


def test_negative_and_zero_values_convert_without_error() -> None:
    assert convert(0.0, Unit.KG, Unit.LBS) == 0.0
    assert convert(-10.0, Unit.KG, Unit.LBS) == -22.05


@pytest.mark.parametrize("value", [0.0, 2.5, 20.0, 102.5, 137.77, 500.0])
def test_kg_round_trip_within_a_hundredth(value: float) -> None:
    there = convert(value, Unit.KG, Unit.LBS)
    back = convert(there, Unit.LBS, Unit.KG)
    assert back == pytest.approx(value, abs=0.01)


@pytest.mark.parametrize("value", [45.0, 225.0])
def test_common_pound_loads_survive_round_trip(value: float) -> None:
    assert convert(convert(value, Unit.LBS, Unit.KG), Unit.KG, Unit.LBS) == value


@pytest.mark.parametrize(
    ("value", "places", "expected"),
    [
        (2.675, 2, 2.68),
        (0.125, 2, 0.13),
        (1.005, 2, 1.01),
        (-1.25, 1, -1.3),
        (112.5, 1, 112.5),
        (108.52941, 1, 108.5),
    ],
)
def test_round_half_away_from_zero(value: float, places: int, expected: float) -> None:
    assert round_half_away(value, places) == expected


def test_to_and_from_kg_helpers() -> None:
    assert to_kg(45.0, Unit.LBS) == 20.41
    assert from_kg(20.0, Unit.LBS) == 44.09
    assert to_kg(20.0, Unit.KG) == 20.0


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("kg", Unit.KG), ("KG", Unit.KG), ("kgs", Unit.KG), ("lb", Unit.LBS), ("Lbs", Unit.LBS), ("pounds", Unit.LBS)],
)
def test_unit_parse_aliases(raw: str, expected: Unit) -> None:
    assert Unit.parse(raw) is expected


def test_unit_parse_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown unit"):
        Unit.parse("stone")


def test_unit_other() -> None:
    assert Unit.KG.other is Unit.LBS
    assert Unit.LBS.other is Unit.KG


def test_weight_convert_and_in_kg() -> None:
    weight = Weight(45.0, Unit.LBS)
    assert weight.convert(Unit.KG) == Weight(20.41, Unit.KG)
    assert weight.in_kg() == 20.41
    assert weight.convert(Unit.LBS) == weight
    assert weight.to_dict() == {"value": 45.0, "unit": "lbs"}
