"""Mass units and conversion between them."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from gymcalc.core.constants import LBS_PER_KG

_UNIT_ALIASES = {
    "kg": "kg",
    "kgs": "kg",
    "kilo": "kg",
    "kilos": "kg",
    "kilogram": "kg",
    "kilograms": "kg",
    "lb": "lbs",
    "lbs": "lbs",
    "pound": "lbs",
    "pounds": "lbs",
}


class Unit(str, Enum):
    """Supported mass units."""

    KG = "kg"
    LBS = "lbs"

    @property
    def other(self) -> "Unit":
        return Unit.LBS if self is Unit.KG else Unit.KG

    @classmethod
    def parse(cls, value: "str | Unit") -> "Unit":
        """Parse a unit name such as 'kg', 'lb' or 'pounds'."""
        if isinstance(value, Unit):
            return value
        key = _UNIT_ALIASES.get(str(value).strip().lower())
        if key is None:
            raise ValueError(f"Unknown unit '{value}'. Expected kg or lbs")
        return cls(key)


def round_half_away(value: float, places: int) -> float:
    """Round to `places` decimals, ties away from zero.

    Works on the shortest decimal repr of the float, so 2.675 rounds to 2.68
    the way it reads rather than the way it is stored.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def convert(value: float, from_unit: Unit, to_unit: Unit) -> float:
    """Convert a mass between units via kg, rounded to 2 decimals.

    Same-unit conversions return the input untouched. Each hop rounds, so
    repeated round trips can drift by up to 0.01.
    """
    if from_unit == to_unit:
        return value
    value_in_kg = value if from_unit == Unit.KG else value / LBS_PER_KG
    result = value_in_kg if to_unit == Unit.KG else value_in_kg * LBS_PER_KG
    return round_half_away(result, 2)


def to_kg(value: float, unit: Unit) -> float:
    return convert(value, unit, Unit.KG)


def from_kg(value: float, unit: Unit) -> float:
    return convert(value, Unit.KG, unit)
