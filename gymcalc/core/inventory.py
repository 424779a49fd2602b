"""Barbell catalog and plate inventory management."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from gymcalc.core.constants import (
    BARBELL_PRESETS,
    DEFAULT_PLATES,
    MAX_PLATE_WEIGHT,
    STANDARD_BARBELL_ID,
)
from gymcalc.core.models import Barbell, Weight
from gymcalc.core.units import Unit


class InventoryError(ValueError):
    """Raised when an inventory change would leave invalid equipment."""


def barbell_id(name: str) -> str:
    """Derive a stable id from a barbell name."""
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
    return slug[:50] or "barbell"


def preset_barbells() -> List[Barbell]:
    return [
        Barbell(id=barbell_id(name), name=name, weight=Weight(weight, Unit.KG))
        for name, weight in BARBELL_PRESETS
    ]


def standard_barbell() -> Barbell:
    return next(bar for bar in preset_barbells() if bar.id == STANDARD_BARBELL_ID)


@dataclass
class BarbellCatalog:
    """Built-in presets plus user-created barbells."""

    custom: List[Barbell] = field(default_factory=list)

    def all(self) -> List[Barbell]:
        return preset_barbells() + list(self.custom)

    def find(self, key: str) -> Optional[Barbell]:
        """Look up a barbell by id or (case-insensitive) name."""
        needle = key.strip().lower()
        for barbell in self.all():
            if barbell.id == needle or barbell.name.lower() == needle:
                return barbell
        return None

    def resolve_selected(self, key: Optional[str]) -> Barbell:
        """Return the selected barbell, or the standard bar if it is gone."""
        if key:
            found = self.find(key)
            if found is not None:
                return found
        return standard_barbell()

    def add_custom(self, name: str, weight: Weight) -> Barbell:
        if not name.strip():
            raise InventoryError("Barbell name must not be empty")
        if weight.value <= 0:
            raise InventoryError(f"Barbell weight must be positive, got {weight.value}")
        barbell = Barbell(id=barbell_id(name), name=name.strip(), weight=weight, is_custom=True)
        if any(existing.id == barbell.id for existing in self.all()):
            raise InventoryError(f"Barbell '{barbell.id}' already exists")
        self.custom.append(barbell)
        return barbell

    def update_custom(
        self,
        barbell_id: str,
        name: Optional[str] = None,
        weight: Optional[Weight] = None,
    ) -> Barbell:
        """Rename or reweigh a custom barbell. Its id stays the same."""
        if any(preset.id == barbell_id for preset in preset_barbells()):
            raise InventoryError(f"Cannot edit preset barbell '{barbell_id}'")
        for index, existing in enumerate(self.custom):
            if existing.id != barbell_id:
                continue
            if name is not None and not name.strip():
                raise InventoryError("Barbell name must not be empty")
            if weight is not None and weight.value <= 0:
                raise InventoryError(f"Barbell weight must be positive, got {weight.value}")
            updated = replace(
                existing,
                name=name.strip() if name is not None else existing.name,
                weight=weight if weight is not None else existing.weight,
            )
            self.custom[index] = updated
            return updated
        raise InventoryError(f"Unknown barbell '{barbell_id}'")

    def remove_custom(self, barbell_id: str) -> Barbell:
        if any(preset.id == barbell_id for preset in preset_barbells()):
            raise InventoryError(f"Cannot remove preset barbell '{barbell_id}'")
        for index, existing in enumerate(self.custom):
            if existing.id == barbell_id:
                return self.custom.pop(index)
        raise InventoryError(f"Unknown barbell '{barbell_id}'")

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "BarbellCatalog":
        raw = config.get("barbells", {}).get("custom", {}) or {}
        custom: List[Barbell] = []
        for barbell_id, item in raw.items():
            if not isinstance(item, dict):
                continue
            unit = Unit.parse(item.get("unit", "kg"))
            custom.append(
                Barbell(
                    id=str(barbell_id),
                    name=str(item.get("name") or barbell_id),
                    weight=Weight(float(item.get("weight", 0.0)), unit),
                    is_custom=True,
                )
            )
        return cls(custom=custom)

    def to_config(self) -> Dict[str, Any]:
        return {
            barbell.id: {
                "name": barbell.name,
                "weight": barbell.weight.value,
                "unit": barbell.weight.unit.value,
            }
            for barbell in self.custom
        }


@dataclass
class PlateInventory:
    """Plate denominations on hand and the subset used in calculations."""

    available: List[float] = field(default_factory=lambda: list(DEFAULT_PLATES))
    selected: List[float] = field(default_factory=lambda: list(DEFAULT_PLATES))
    unit: Unit = Unit.KG

    def validated(self) -> "PlateInventory":
        """Keep only available plates selected, and never select nothing."""
        available = sorted({float(w) for w in self.available if w > 0}) or list(DEFAULT_PLATES)
        selected = sorted({float(w) for w in self.selected if w in available})
        if not selected:
            selected = [max(available)]
        return PlateInventory(available=available, selected=selected, unit=self.unit)

    def add_custom_plate(self, weight: float) -> None:
        if weight <= 0 or weight > MAX_PLATE_WEIGHT:
            raise InventoryError(
                f"Plate weight must be between 0 and {MAX_PLATE_WEIGHT:g}, got {weight:g}"
            )
        if weight in self.available:
            raise InventoryError(f"Plate weight {weight:g} already exists")
        self.available = sorted(self.available + [weight])
        self.selected = sorted(set(self.selected) | {weight})

    def remove_custom_plate(self, weight: float) -> None:
        if weight in DEFAULT_PLATES:
            raise InventoryError(f"Cannot remove standard plate {weight:g}")
        if weight not in self.available:
            raise InventoryError(f"Unknown plate weight {weight:g}")
        self.available = [w for w in self.available if w != weight]
        self.selected = [w for w in self.selected if w != weight]
        if not self.selected:
            self.selected = [max(self.available)]

    def set_enabled(self, weight: float, enabled: bool) -> None:
        if weight not in self.available:
            raise InventoryError(f"Unknown plate weight {weight:g}")
        if enabled:
            if weight not in self.selected:
                self.selected = sorted(self.selected + [weight])
            return
        if weight in self.selected and len(self.selected) <= 1:
            raise InventoryError("At least one plate weight must stay selected")
        self.selected = [w for w in self.selected if w != weight]

    def reset(self) -> None:
        self.available = list(DEFAULT_PLATES)
        self.selected = list(DEFAULT_PLATES)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "PlateInventory":
        raw = config.get("plates", {})
        inventory = cls(
            available=[float(w) for w in raw.get("available", DEFAULT_PLATES)],
            selected=[float(w) for w in raw.get("selected", DEFAULT_PLATES)],
            unit=Unit.parse(raw.get("unit", "kg")),
        )
        return inventory.validated()

    def to_config(self) -> Dict[str, Any]:
        return {
            "unit": self.unit.value,
            "available": list(self.available),
            "selected": list(self.selected),
        }
