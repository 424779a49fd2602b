"""Formatting helpers used for console output."""

from __future__ import annotations

from typing import Iterable, List

from gymcalc.core.models import PlateCount, WeightSuggestion
from gymcalc.core.units import Unit, round_half_away


def format_number(value: float) -> str:
    """Format with at most one decimal and no trailing '.0'."""
    rounded = round_half_away(value, 1)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.1f}"


def format_weight(value: float, unit: Unit) -> str:
    return f"{format_number(value)} {unit.value}"


def format_plate_count(plate: PlateCount) -> str:
    """Format one breakdown entry, e.g. '2 x 20 kg'."""
    weight = format_weight(plate.weight.value, plate.weight.unit)
    if plate.is_barbell:
        return f"Bar: {plate.label} ({weight})"
    return f"{plate.count} x {weight}"


def format_breakdown(plates: Iterable[PlateCount]) -> List[str]:
    """Format a breakdown as lines, bar first, then plates per side."""
    lines: List[str] = []
    plate_lines: List[str] = []
    for plate in plates:
        if plate.is_barbell:
            lines.append(format_plate_count(plate))
        else:
            plate_lines.append(format_plate_count(plate))
    if plate_lines:
        lines.append("Per side:")
        lines.extend(f"  {line}" for line in plate_lines)
    else:
        lines.append("No plates needed")
    return lines


def format_suggestion(suggestion: WeightSuggestion) -> str:
    """Describe an achievability result in one sentence."""
    target = format_weight(suggestion.target_weight, suggestion.unit)
    if suggestion.is_achievable:
        return f"{target} can be loaded with your current plates."
    lower = format_weight(suggestion.lower_weight, suggestion.unit)
    higher = format_weight(suggestion.higher_weight, suggestion.unit)
    below = format_weight(suggestion.difference_lower, suggestion.unit)
    above = format_weight(suggestion.difference_higher, suggestion.unit)
    return (
        f"{target} cannot be achieved with your current plates. "
        f"Nearest: {lower} ({below} lighter) or {higher} ({above} heavier)."
    )
