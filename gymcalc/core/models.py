"""Data models shared by the calculators and commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Tuple

from gymcalc.core.constants import CACHE_EPSILON
from gymcalc.core.units import Unit, convert


@dataclass(frozen=True)
class Weight:
    """A physical mass in a given unit."""

    value: float
    unit: Unit = Unit.KG

    def convert(self, to_unit: Unit) -> "Weight":
        return Weight(convert(self.value, self.unit, to_unit), to_unit)

    def in_kg(self) -> float:
        return self.convert(Unit.KG).value

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "unit": self.unit.value}


@dataclass(frozen=True)
class Barbell:
    """A bar the plates are loaded on."""

    id: str
    name: str
    weight: Weight
    is_custom: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "weight": self.weight.to_dict(),
            "is_custom": self.is_custom,
        }


@dataclass(frozen=True)
class PlateCount:
    """N plates of one weight on a single side, or the labelled barbell."""

    weight: Weight
    count: int
    label: Optional[str] = None

    @property
    def is_barbell(self) -> bool:
        return self.label is not None

    @property
    def total(self) -> float:
        return self.weight.value * self.count

    def to_dict(self) -> Dict[str, Any]:
        return {
            "weight": self.weight.value,
            "unit": self.weight.unit.value,
            "count": self.count,
            "label": self.label,
        }


@dataclass(frozen=True)
class WeightSuggestion:
    """Whether a target can be built, and the closest weights that can."""

    target_weight: float
    lower_weight: float
    higher_weight: float
    unit: Unit
    is_achievable: bool

    @property
    def difference_lower(self) -> float:
        return round(self.target_weight - self.lower_weight, 2)

    @property
    def difference_higher(self) -> float:
        return round(self.higher_weight - self.target_weight, 2)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "target_weight": self.target_weight,
            "lower_weight": self.lower_weight,
            "higher_weight": self.higher_weight,
            "unit": self.unit.value,
            "is_achievable": self.is_achievable,
        }


@dataclass(frozen=True)
class RepPercentage:
    """One row of the percentage-of-max training table."""

    percentage: int
    weight: float
    reps: int

    def to_dict(self) -> Dict[str, Any]:
        return {"percentage": self.percentage, "weight": self.weight, "reps": self.reps}


@dataclass(frozen=True)
class CalculationInputs:
    """Everything a plate calculation depends on."""

    target_weight: float
    unit: Unit
    barbell: Barbell
    consider_barbell_weight: bool = True
    selected_plates: Tuple[float, ...] = field(default_factory=tuple)
    plate_unit: Unit = Unit.KG

    @classmethod
    def build(
        cls,
        target_weight: float,
        unit: Unit,
        barbell: Barbell,
        consider_barbell_weight: bool = True,
        selected_plates: Iterable[float] = (),
        plate_unit: Unit = Unit.KG,
    ) -> "CalculationInputs":
        """Create inputs with the plate set normalised to a sorted tuple."""
        return cls(
            target_weight=float(target_weight),
            unit=unit,
            barbell=barbell,
            consider_barbell_weight=consider_barbell_weight,
            selected_plates=tuple(sorted({float(p) for p in selected_plates})),
            plate_unit=plate_unit,
        )

    def key(self) -> Tuple[Any, ...]:
        """Everything except the target weight, for exact comparison."""
        return (
            self.unit,
            self.barbell.id,
            self.barbell.weight,
            self.consider_barbell_weight,
            self.selected_plates,
            self.plate_unit,
        )

    def matches(self, other: Optional["CalculationInputs"]) -> bool:
        """True when cached results for `other` are still valid for self."""
        if other is None:
            return False
        if abs(self.target_weight - other.target_weight) > CACHE_EPSILON:
            return False
        return self.key() == other.key()
