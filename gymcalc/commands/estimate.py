"""One-rep max estimation command."""

from __future__ import annotations

from typing import Optional

import typer
from rich.table import Table

from gymcalc.commands.common import build_inputs, get_state, print_json_payload
from gymcalc.utils.formatting import format_number, format_weight
from gymcalc.utils.parsing import validate_unit


def max_command(
    ctx: typer.Context,
    weight: str = typer.Argument(..., help="Weight lifted, e.g. 100 or 225lbs"),
    reps: Optional[int] = typer.Option(None, "--reps", "-r", min=1, max=36, help="Reps performed (1-36)"),
    unit: Optional[str] = typer.Option(None, "--unit", "-u", help="Unit of WEIGHT: kg|lbs", callback=validate_unit),
) -> None:
    """Estimate a one-rep max and show the percentage table."""
    state = get_state(ctx)
    if reps is None:
        reps = int(state.config.get("defaults", {}).get("reps", 1))
    inputs = build_inputs(state, weight, unit)

    one_rep_max = state.cache.estimated_max(inputs, reps)
    table_rows = state.cache.percentage_table(inputs, reps)
    unit_value = inputs.unit

    if state.json_output:
        print_json_payload(
            state,
            {
                "weight": inputs.target_weight,
                "reps": reps,
                "unit": unit_value.value,
                "estimated_max": one_rep_max,
                "table": [row.to_dict() for row in table_rows],
            },
        )
        return

    if state.plain_output:
        typer.echo(f"estimated_max\t{format_number(one_rep_max)}")
        typer.echo(f"unit\t{unit_value.value}")
        for row in table_rows:
            typer.echo(f"{row.percentage}%\t{format_number(row.weight)}\t{row.reps}")
        return

    state.console.print(
        f"Estimated 1RM from {format_weight(inputs.target_weight, unit_value)} x {reps}: "
        f"[bold]{format_weight(one_rep_max, unit_value)}[/bold]"
    )
    if not table_rows:
        state.console.print("Percentage table is only available for 1-12 reps.")
        return

    table = Table(title="Percentage of max")
    table.add_column("%", justify="right")
    table.add_column("Weight", justify="right")
    table.add_column("Reps", justify="right")
    for row in table_rows:
        table.add_row(f"{row.percentage}%", format_weight(row.weight, unit_value), str(row.reps))
    state.console.print(table)
