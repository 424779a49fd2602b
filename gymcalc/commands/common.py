"""Shared command helpers."""

from __future__ import annotations

import json
from typing import Any, Optional

import typer

from gymcalc.core.inventory import BarbellCatalog, PlateInventory
from gymcalc.core.models import CalculationInputs
from gymcalc.core.state import CLIState
from gymcalc.core.units import Unit
from gymcalc.utils.parsing import parse_plate_list, parse_weight


def get_state(ctx: typer.Context) -> CLIState:
    """Extract validated CLI state from Typer context."""
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=2)
    return state


def print_json_payload(state: CLIState, payload: Any) -> None:
    """Print JSON payload with plain-mode fallback for piping."""
    if state.plain_output:
        typer.echo(json.dumps(payload, separators=(",", ":")))
        return
    state.console.print_json(data=payload)


def default_unit(state: CLIState) -> Unit:
    return Unit.parse(state.config.get("defaults", {}).get("unit", "kg"))


def resolve_weight(state: CLIState, weight: str, unit: Optional[str]) -> tuple[float, Unit]:
    """Parse a weight argument; an explicit --unit beats a suffix, which beats config."""
    try:
        value, suffix_unit = parse_weight(weight)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="WEIGHT")
    if unit is not None:
        return value, Unit.parse(unit)
    return value, suffix_unit or default_unit(state)


def build_inputs(
    state: CLIState,
    weight: str,
    unit: Optional[str] = None,
    barbell: Optional[str] = None,
    no_bar: bool = False,
    plates: Optional[str] = None,
    plate_unit: Optional[str] = None,
) -> CalculationInputs:
    """Combine command options with configured equipment into calculation inputs."""
    defaults = state.config.get("defaults", {})
    target, target_unit = resolve_weight(state, weight, unit)

    catalog = BarbellCatalog.from_config(state.config)
    if barbell is not None and catalog.find(barbell) is None:
        raise typer.BadParameter(f"Unknown barbell '{barbell}'", param_hint="--barbell")
    selected_bar = catalog.resolve_selected(barbell or defaults.get("barbell"))

    inventory = PlateInventory.from_config(state.config)
    selected_plates = parse_plate_list(plates) if plates else inventory.selected
    plates_unit = Unit.parse(plate_unit) if plate_unit else inventory.unit

    consider_bar = bool(defaults.get("consider_barbell_weight", True)) and not no_bar
    inputs = CalculationInputs.build(
        target_weight=target,
        unit=target_unit,
        barbell=selected_bar,
        consider_barbell_weight=consider_bar,
        selected_plates=selected_plates,
        plate_unit=plates_unit,
    )
    state.debug(
        f"inputs: {target:g} {target_unit.value}, bar={selected_bar.id}, "
        f"consider_bar={consider_bar}, plates={list(inputs.selected_plates)} {plates_unit.value}"
    )
    return inputs
