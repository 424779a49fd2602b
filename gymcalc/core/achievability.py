"""Exact-achievability checks and nearest buildable weights."""

from __future__ import annotations

import math
import threading
from typing import Iterable, List, Optional, Sequence, Tuple

from gymcalc.core.constants import (
    MAX_PLATES_PER_DENOMINATION,
    MAX_SEARCH_COMBINATIONS,
    REMAINDER_TOLERANCE_KG,
)
from gymcalc.core.models import Barbell, CalculationInputs, WeightSuggestion
from gymcalc.core.plates import bar_contribution_kg, denominations_in_kg, greedy_decompose
from gymcalc.core.units import Unit, from_kg, to_kg

_FLOAT_SLACK = 1e-9


def search_upper_total(
    net_per_side: float,
    denominations: Sequence[float],
    max_combinations: int = MAX_SEARCH_COMBINATIONS,
    cap: int = MAX_PLATES_PER_DENOMINATION,
) -> Optional[float]:
    """Find the smallest per-side plate total >= `net_per_side`.

    Backtracks over denominations largest first, trying higher counts
    before lower ones. Every finished combination (one that reaches the
    target, can no longer beat the best total, or runs out of plates)
    counts against `max_combinations`, which bounds the whole search.
    Returns None when nothing reaches the target.
    """
    ordered = sorted((d for d in denominations if d > 0), reverse=True)
    best: Optional[float] = None
    explored = 0

    def visit(index: int, total: float) -> None:
        nonlocal best, explored
        if explored >= max_combinations:
            return
        if best is not None and total >= best - _FLOAT_SLACK:
            explored += 1
            return
        if total >= net_per_side - _FLOAT_SLACK:
            explored += 1
            best = total
            return
        if index == len(ordered):
            explored += 1
            return

        denomination = ordered[index]
        remaining = net_per_side - total
        max_count = min(int(math.ceil(remaining / denomination - _FLOAT_SLACK)), cap)
        for count in range(max_count, -1, -1):
            visit(index + 1, total + denomination * count)
            if explored >= max_combinations:
                return

    visit(0, 0.0)
    return best


def check_achievability(
    target_weight: float,
    unit: Unit,
    barbell: Barbell,
    consider_barbell_weight: bool,
    selected_plates: Iterable[float],
    plate_unit: Unit = Unit.KG,
) -> WeightSuggestion:
    """Report whether a target is buildable, with the nearest alternatives.

    Lower and higher weights are returned in the caller's unit. When the
    target is exactly buildable both equal the target itself.
    """
    target_kg = to_kg(target_weight, unit)
    bar_kg = bar_contribution_kg(barbell, consider_barbell_weight)
    plates: List[float] = list(denominations_in_kg(selected_plates, plate_unit).keys())
    largest = max(plates) if plates else 0.0

    if target_kg < bar_kg:
        return WeightSuggestion(
            target_weight=target_weight,
            lower_weight=from_kg(bar_kg, unit),
            higher_weight=from_kg(bar_kg + 2 * largest, unit),
            unit=unit,
            is_achievable=False,
        )

    net_per_side = (target_kg - bar_kg) / 2
    counts, remaining = greedy_decompose(net_per_side, plates)
    if remaining < REMAINDER_TOLERANCE_KG:
        return WeightSuggestion(
            target_weight=target_weight,
            lower_weight=target_weight,
            higher_weight=target_weight,
            unit=unit,
            is_achievable=True,
        )

    lower_kg = bar_kg + 2 * sum(denomination * count for denomination, count in counts)
    upper_per_side = search_upper_total(net_per_side, plates)
    if upper_per_side is None:
        higher_kg = lower_kg + 2 * largest
    else:
        higher_kg = bar_kg + 2 * upper_per_side

    return WeightSuggestion(
        target_weight=target_weight,
        lower_weight=from_kg(lower_kg, unit),
        higher_weight=from_kg(higher_kg, unit),
        unit=unit,
        is_achievable=False,
    )


class AchievabilityAnalyzer:
    """Achievability checks that remember the most recent answer."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last: Optional[Tuple[CalculationInputs, WeightSuggestion]] = None
        self.hits = 0

    def check(self, inputs: CalculationInputs) -> WeightSuggestion:
        with self._lock:
            if self._last is not None and self._last[0] == inputs:
                self.hits += 1
                return self._last[1]

        suggestion = check_achievability(
            inputs.target_weight,
            inputs.unit,
            inputs.barbell,
            inputs.consider_barbell_weight,
            inputs.selected_plates,
            inputs.plate_unit,
        )
        with self._lock:
            self._last = (inputs, suggestion)
        return suggestion

    def clear(self) -> None:
        with self._lock:
            self._last = None
