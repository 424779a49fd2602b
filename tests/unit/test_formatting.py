from __future__ import annotations

import pytest

from gymcalc.core.models import PlateCount, Weight, WeightSuggestion
from gymcalc.core.units import Unit
from gymcalc.utils.formatting import (
    format_breakdown,
    format_number,
    format_plate_count,
    format_suggestion,
    format_weight,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [(100.0, "100"), (112.5, "112.5"), (106.875, "106.9"), (44.09, "44.1"), (0.04, "0")],
)
def test_format_number(value: float, expected: str) -> None:
    assert format_number(value) == expected


def test_format_weight() -> None:
    assert format_weight(102.5, Unit.KG) == "102.5 kg"
    assert format_weight(225.0, Unit.LBS) == "225 lbs"


def test_format_plate_count() -> None:
    assert format_plate_count(PlateCount(Weight(20.0), 2)) == "2 x 20 kg"
    bar = PlateCount(Weight(45.0, Unit.LBS), 1, label="Gym Bar")
    assert format_plate_count(bar) == "Bar: Gym Bar (45 lbs)"


def test_format_breakdown_lists_bar_then_plates() -> None:
    lines = format_breakdown(
        [
            PlateCount(Weight(20.0), 1, label="Olympic Bar (Men's)"),
            PlateCount(Weight(35.0), 1),
            PlateCount(Weight(5.0), 1),
        ]
    )
    assert lines == ["Bar: Olympic Bar (Men's) (20 kg)", "Per side:", "  1 x 35 kg", "  1 x 5 kg"]


def test_format_breakdown_bar_only() -> None:
    lines = format_breakdown([PlateCount(Weight(20.0), 1, label="Olympic Bar (Men's)")])
    assert lines[-1] == "No plates needed"


def test_format_suggestion() -> None:
    missing = WeightSuggestion(43.0, 40.0, 45.0, Unit.KG, False)
    assert format_suggestion(missing) == (
        "43 kg cannot be achieved with your current plates. Nearest: 40 kg (3 kg lighter) or 45 kg (2 kg heavier)."
    )
    ok = WeightSuggestion(100.0, 100.0, 100.0, Unit.KG, True)
    assert format_suggestion(ok) == "100 kg can be loaded with your current plates."
