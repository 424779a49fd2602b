"""Unit conversion command."""

from __future__ import annotations

from typing import Optional

import typer

from gymcalc.commands.common import get_state, print_json_payload, resolve_weight
from gymcalc.core.units import Unit, convert
from gymcalc.utils.formatting import format_weight
from gymcalc.utils.parsing import validate_unit


def convert_command(
    ctx: typer.Context,
    weight: str = typer.Argument(..., help="Weight to convert, e.g. 100kg"),
    from_unit: Optional[str] = typer.Option(None, "--from", help="Source unit: kg|lbs", callback=validate_unit),
    to_unit: Optional[str] = typer.Option(None, "--to", help="Target unit (default: the other one)", callback=validate_unit),
) -> None:
    """Convert a weight between kg and lbs."""
    state = get_state(ctx)
    value, source = resolve_weight(state, weight, from_unit)
    target = Unit.parse(to_unit) if to_unit else source.other
    converted = convert(value, source, target)
    state.debug(f"round trip: {convert(converted, target, source):g} {source.value}")

    if state.json_output:
        print_json_payload(
            state,
            {
                "value": value,
                "from": source.value,
                "converted": converted,
                "to": target.value,
            },
        )
        return

    if state.plain_output:
        typer.echo(f"{converted:g}\t{target.value}")
        return

    state.console.print(f"{format_weight(value, source)} = [bold]{converted:g} {target.value}[/bold]")
