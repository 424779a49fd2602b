"""Parsing helpers for command-line weight and plate input."""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

import typer

from gymcalc.core.units import Unit

_WEIGHT_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([a-zA-Z]*)\s*$")


def parse_weight(value: str) -> Tuple[float, Optional[Unit]]:
    """Parse '100', '100kg' or '225 lbs' into (value, unit or None)."""
    match = _WEIGHT_RE.match(value)
    if not match:
        raise ValueError(f"Invalid weight '{value}'. Expected a number like 100 or 102.5kg")
    number = float(match.group(1))
    suffix = match.group(2)
    return number, (Unit.parse(suffix) if suffix else None)


def parse_plate_list(value: str) -> List[float]:
    """Parse a comma separated list of plate weights."""
    plates: List[float] = []
    for raw in value.split(","):
        item = raw.strip()
        if not item:
            continue
        try:
            plate = float(item)
        except ValueError:
            raise ValueError(f"Invalid plate weight '{item}'") from None
        if plate <= 0:
            raise ValueError(f"Plate weights must be positive, got {item}")
        plates.append(plate)
    if not plates:
        raise ValueError("Plate list must contain at least one weight")
    return sorted(set(plates))


def validate_unit(value: Optional[str]) -> Optional[str]:
    """Typer callback that accepts kg/lbs style unit names."""
    if value is None:
        return value
    try:
        return Unit.parse(value).value
    except ValueError as exc:
        raise typer.BadParameter(str(exc))


def validate_plates(value: Optional[str]) -> Optional[str]:
    """Typer callback that checks a comma separated plate list."""
    if value is None:
        return value
    try:
        parse_plate_list(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc))
    return value
