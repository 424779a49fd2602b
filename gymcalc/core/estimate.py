"""One-rep max estimation and percentage-of-max tables."""

from __future__ import annotations

from typing import List

from gymcalc.core.constants import (
    BRZYCKI_NUMERATOR,
    BRZYCKI_SINGULARITY,
    MAX_TABLE_REPS,
    MIN_TABLE_REPS,
    PERCENTAGE_TABLE,
)
from gymcalc.core.models import RepPercentage
from gymcalc.core.units import round_half_away


def estimate_max(weight: float, reps: int) -> float:
    """Estimate a one-rep max with the Brzycki formula.

    The formula breaks down at 37 reps and beyond, where the lifted weight
    is returned unchanged.
    """
    if reps >= BRZYCKI_SINGULARITY:
        return weight
    return round_half_away(weight * (BRZYCKI_NUMERATOR / (BRZYCKI_SINGULARITY - reps)), 1)


def percentage_table(weight: float, reps: int) -> List[RepPercentage]:
    """Build the fixed percentage-of-max table for a weight/reps pair.

    Only defined for 1-12 reps. The reps column is the reference value for
    each percentage, not the reps that were performed.
    """
    if reps < MIN_TABLE_REPS or reps > MAX_TABLE_REPS:
        return []
    one_rep_max = estimate_max(weight, reps)
    return [
        RepPercentage(percentage=percentage, weight=one_rep_max * percentage / 100, reps=table_reps)
        for percentage, table_reps in PERCENTAGE_TABLE
    ]
