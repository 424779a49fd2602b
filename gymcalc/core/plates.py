"""Greedy plate resolution for a target barbell load."""

from __future__ import annotations

import math
from typing import Dict, Iterable, List, Tuple

from gymcalc.core.constants import MAX_PLATES_PER_DENOMINATION, REMAINDER_TOLERANCE_KG
from gymcalc.core.models import Barbell, CalculationInputs, PlateCount, Weight
from gymcalc.core.units import Unit, convert, to_kg

# Absorbs float error in remaining / denomination (0.3 / 0.1 == 2.9999...).
_FLOAT_SLACK = 1e-9


def bar_contribution_kg(barbell: Barbell, consider_barbell_weight: bool) -> float:
    return barbell.weight.in_kg() if consider_barbell_weight else 0.0


def denominations_in_kg(selected_plates: Iterable[float], plate_unit: Unit) -> Dict[float, float]:
    """Map each usable denomination in kg to its value as supplied."""
    mapping: Dict[float, float] = {}
    for plate in selected_plates:
        if plate <= 0:
            continue
        mapping.setdefault(to_kg(float(plate), plate_unit), float(plate))
    return mapping


def greedy_decompose(
    net_per_side: float,
    denominations: Iterable[float],
    cap: int = MAX_PLATES_PER_DENOMINATION,
) -> Tuple[List[Tuple[float, int]], float]:
    """Fill `net_per_side` largest plate first.

    Returns the (denomination, count) pairs used and the leftover weight.
    """
    remaining = net_per_side
    counts: List[Tuple[float, int]] = []
    for denomination in sorted(denominations, reverse=True):
        count = min(int(math.floor(remaining / denomination + _FLOAT_SLACK)), cap)
        if count > 0:
            counts.append((denomination, count))
            remaining -= denomination * count
        if remaining < REMAINDER_TOLERANCE_KG:
            break
    return counts, remaining


def resolve_plates(
    target_weight: float,
    unit: Unit,
    barbell: Barbell,
    consider_barbell_weight: bool,
    selected_plates: Iterable[float],
    plate_unit: Unit = Unit.KG,
) -> List[PlateCount]:
    """Return the plates to load on each side for an exact target.

    The barbell comes first as a labelled entry when its weight counts
    towards the total. An empty list means the target cannot be built
    exactly: below the bar, no plates selected, or a leftover remainder.
    """
    target_kg = to_kg(target_weight, unit)
    bar_kg = bar_contribution_kg(barbell, consider_barbell_weight)
    if target_kg < bar_kg:
        return []

    plates = denominations_in_kg(selected_plates, plate_unit)
    if not plates:
        return []

    net_per_side = (target_kg - bar_kg) / 2
    counts, remaining = greedy_decompose(net_per_side, plates.keys())
    if remaining >= REMAINDER_TOLERANCE_KG:
        return []

    result: List[PlateCount] = []
    if consider_barbell_weight:
        result.append(PlateCount(weight=barbell.weight.convert(unit), count=1, label=barbell.name))
    for denomination, count in counts:
        value = convert(plates[denomination], plate_unit, unit)
        result.append(PlateCount(weight=Weight(value, unit), count=count))
    return result


def resolve_inputs(inputs: CalculationInputs) -> List[PlateCount]:
    return resolve_plates(
        inputs.target_weight,
        inputs.unit,
        inputs.barbell,
        inputs.consider_barbell_weight,
        inputs.selected_plates,
        inputs.plate_unit,
    )
