"""Memoised access to the plate, achievability and max calculations."""

from __future__ import annotations

import threading
from typing import List, Optional

from gymcalc.core.achievability import AchievabilityAnalyzer
from gymcalc.core.estimate import estimate_max, percentage_table
from gymcalc.core.models import CalculationInputs, PlateCount, RepPercentage, WeightSuggestion
from gymcalc.core.plates import resolve_inputs


class CalculationCache:
    """Caches results for the most recent inputs.

    Any change to the inputs (target beyond 0.01, unit, barbell, plate set,
    or whether the bar counts) drops every cached result at once. A change
    of rep count only drops the max estimate and its table.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._analyzer = AchievabilityAnalyzer()
        self._inputs: Optional[CalculationInputs] = None
        self._reps: Optional[int] = None
        self._plates: Optional[List[PlateCount]] = None
        self._suggestion: Optional[WeightSuggestion] = None
        self._max: Optional[float] = None
        self._table: Optional[List[RepPercentage]] = None
        self.hits = 0
        self.misses = 0

    @property
    def inputs(self) -> Optional[CalculationInputs]:
        return self._inputs

    def invalidate(self) -> None:
        with self._lock:
            self._inputs = None
            self._reps = None
            self._plates = None
            self._suggestion = None
            self._max = None
            self._table = None
            self._analyzer.clear()

    def _sync(self, inputs: CalculationInputs, reps: Optional[int] = None) -> None:
        if not inputs.matches(self._inputs):
            self.invalidate()
            self._inputs = inputs
        if reps is not None and reps != self._reps:
            self._reps = reps
            self._max = None
            self._table = None

    def _record(self, cached: bool) -> None:
        if cached:
            self.hits += 1
        else:
            self.misses += 1

    def plates(self, inputs: CalculationInputs) -> List[PlateCount]:
        with self._lock:
            self._sync(inputs)
            self._record(self._plates is not None)
            if self._plates is None:
                self._plates = resolve_inputs(self._inputs)
            return list(self._plates)

    def suggestion(self, inputs: CalculationInputs) -> WeightSuggestion:
        with self._lock:
            self._sync(inputs)
            self._record(self._suggestion is not None)
            if self._suggestion is None:
                self._suggestion = self._analyzer.check(self._inputs)
            return self._suggestion

    def estimated_max(self, inputs: CalculationInputs, reps: int) -> float:
        with self._lock:
            self._sync(inputs, reps)
            self._record(self._max is not None)
            if self._max is None:
                self._max = estimate_max(self._inputs.target_weight, reps)
            return self._max

    def percentage_table(self, inputs: CalculationInputs, reps: int) -> List[RepPercentage]:
        with self._lock:
            self._sync(inputs, reps)
            self._record(self._table is not None)
            if self._table is None:
                self._table = percentage_table(self._inputs.target_weight, reps)
            return list(self._table)
