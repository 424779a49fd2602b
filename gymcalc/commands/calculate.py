"""Plate breakdown and achievability commands."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import typer
from rich.table import Table

from gymcalc.commands.common import build_inputs, get_state, print_json_payload
from gymcalc.core.models import CalculationInputs, PlateCount, WeightSuggestion
from gymcalc.core.plates import bar_contribution_kg
from gymcalc.core.state import CLIState
from gymcalc.core.units import to_kg
from gymcalc.utils.formatting import (
    format_breakdown,
    format_number,
    format_suggestion,
    format_weight,
)
from gymcalc.utils.parsing import validate_plates, validate_unit

UNIT_HELP = "Unit of WEIGHT: kg|lbs (default: suffix or config)"


def _debug_net(state: CLIState, inputs: CalculationInputs) -> None:
    if not state.verbose:
        return
    target_kg = to_kg(inputs.target_weight, inputs.unit)
    bar_kg = bar_contribution_kg(inputs.barbell, inputs.consider_barbell_weight)
    state.debug(f"target={target_kg:g} kg, bar={bar_kg:g} kg, net per side={(target_kg - bar_kg) / 2:g} kg")


def _breakdown_payload(
    inputs: CalculationInputs,
    plates: List[PlateCount],
    suggestion: Optional[WeightSuggestion],
) -> Dict[str, Any]:
    return {
        "target_weight": inputs.target_weight,
        "unit": inputs.unit.value,
        "barbell": inputs.barbell.to_dict(),
        "consider_barbell_weight": inputs.consider_barbell_weight,
        "achievable": bool(plates),
        "barbell_entry": next((p.to_dict() for p in plates if p.is_barbell), None),
        "plates_per_side": [p.to_dict() for p in plates if not p.is_barbell],
        "suggestion": suggestion.to_dict() if suggestion else None,
    }


def _print_suggestion(state: CLIState, suggestion: WeightSuggestion) -> None:
    if state.plain_output:
        typer.echo(f"achievable\t{str(suggestion.is_achievable).lower()}")
        typer.echo(f"target\t{format_number(suggestion.target_weight)}")
        typer.echo(f"lower\t{format_number(suggestion.lower_weight)}")
        typer.echo(f"higher\t{format_number(suggestion.higher_weight)}")
        typer.echo(f"unit\t{suggestion.unit.value}")
        return
    state.console.print(format_suggestion(suggestion))


def plates_command(
    ctx: typer.Context,
    weight: str = typer.Argument(..., help="Target total weight, e.g. 100 or 225lbs"),
    unit: Optional[str] = typer.Option(None, "--unit", "-u", help=UNIT_HELP, callback=validate_unit),
    barbell: Optional[str] = typer.Option(None, "--barbell", "-b", help="Barbell id or name"),
    no_bar: bool = typer.Option(False, "--no-bar", help="Do not count the barbell weight"),
    plates: Optional[str] = typer.Option(
        None, "--plates", help="Comma separated plate weights to use", callback=validate_plates
    ),
    plate_unit: Optional[str] = typer.Option(
        None, "--plate-unit", help="Unit of plate weights: kg|lbs", callback=validate_unit
    ),
) -> None:
    """Show the plates to load on each side of the bar."""
    state = get_state(ctx)
    inputs = build_inputs(state, weight, unit, barbell, no_bar, plates, plate_unit)
    _debug_net(state, inputs)

    breakdown = state.cache.plates(inputs)
    suggestion = None if breakdown else state.cache.suggestion(inputs)
    state.debug(f"cache hits={state.cache.hits} misses={state.cache.misses}")

    if state.json_output:
        print_json_payload(state, _breakdown_payload(inputs, breakdown, suggestion))
        return

    if suggestion is not None:
        _print_suggestion(state, suggestion)
        return

    if state.plain_output:
        for plate in breakdown:
            if plate.is_barbell:
                typer.echo(f"bar\t{plate.label}\t{format_number(plate.weight.value)}")
            else:
                typer.echo(f"plate\t{format_number(plate.weight.value)}\t{plate.count}")
        return

    state.console.print(
        f"[bold]{format_weight(inputs.target_weight, inputs.unit)}[/bold] "
        f"on {inputs.barbell.name}"
    )
    table = Table(title="Plates per side")
    table.add_column("Plate", justify="right")
    table.add_column("Count", justify="right")
    table.add_column("Total", justify="right")
    plate_rows = [plate for plate in breakdown if not plate.is_barbell]
    for plate in plate_rows:
        table.add_row(
            format_weight(plate.weight.value, plate.weight.unit),
            str(plate.count),
            format_weight(plate.total, plate.weight.unit),
        )
    if plate_rows:
        state.console.print(table)
    else:
        for line in format_breakdown(breakdown):
            state.console.print(line)


def check_command(
    ctx: typer.Context,
    weight: str = typer.Argument(..., help="Target total weight, e.g. 100 or 225lbs"),
    unit: Optional[str] = typer.Option(None, "--unit", "-u", help=UNIT_HELP, callback=validate_unit),
    barbell: Optional[str] = typer.Option(None, "--barbell", "-b", help="Barbell id or name"),
    no_bar: bool = typer.Option(False, "--no-bar", help="Do not count the barbell weight"),
    plates: Optional[str] = typer.Option(
        None, "--plates", help="Comma separated plate weights to use", callback=validate_plates
    ),
    plate_unit: Optional[str] = typer.Option(
        None, "--plate-unit", help="Unit of plate weights: kg|lbs", callback=validate_unit
    ),
) -> None:
    """Check whether a weight can be loaded and suggest the nearest ones."""
    state = get_state(ctx)
    inputs = build_inputs(state, weight, unit, barbell, no_bar, plates, plate_unit)
    _debug_net(state, inputs)
    suggestion = state.cache.suggestion(inputs)

    if state.json_output:
        print_json_payload(state, suggestion.to_dict())
        return
    _print_suggestion(state, suggestion)
