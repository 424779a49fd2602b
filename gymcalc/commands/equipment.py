"""Barbell listing command."""

from __future__ import annotations

import typer
from rich.table import Table

from gymcalc.commands.common import get_state, print_json_payload
from gymcalc.core.inventory import BarbellCatalog
from gymcalc.utils.formatting import format_weight


def barbells_command(ctx: typer.Context) -> None:
    """List preset and custom barbells."""
    state = get_state(ctx)
    catalog = BarbellCatalog.from_config(state.config)
    selected = catalog.resolve_selected(state.config.get("defaults", {}).get("barbell"))
    barbells = catalog.all()

    if state.json_output:
        print_json_payload(
            state,
            {"selected": selected.id, "barbells": [bar.to_dict() for bar in barbells]},
        )
        return

    if state.plain_output:
        for bar in barbells:
            marker = "*" if bar.id == selected.id else ""
            typer.echo(f"{bar.id}\t{bar.name}\t{bar.weight.value:g}\t{bar.weight.unit.value}\t{marker}")
        return

    table = Table(title="Barbells")
    table.add_column("Id")
    table.add_column("Name")
    table.add_column("Weight", justify="right")
    table.add_column("Type")
    for bar in barbells:
        name = f"[bold]{bar.name}[/bold] *" if bar.id == selected.id else bar.name
        table.add_row(
            bar.id,
            name,
            format_weight(bar.weight.value, bar.weight.unit),
            "custom" if bar.is_custom else "preset",
        )
    state.console.print(table)
