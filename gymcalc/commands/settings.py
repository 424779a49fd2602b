"""Equipment settings commands that edit the config file."""

from __future__ import annotations

from typing import Any, Callable, Dict, NoReturn, Optional

import typer

from gymcalc.commands.common import get_state, print_json_payload
from gymcalc.core.config import save_config
from gymcalc.core.inventory import BarbellCatalog, InventoryError, PlateInventory
from gymcalc.core.models import Weight
from gymcalc.core.state import CLIState
from gymcalc.core.units import Unit
from gymcalc.utils.formatting import format_weight
from gymcalc.utils.parsing import parse_weight, validate_unit

app = typer.Typer(help="Manage plates, barbells and defaults")


def _report_error(state: CLIState, exc: InventoryError) -> NoReturn:
    if state.json_output:
        print_json_payload(state, {"status": "error", "message": str(exc)})
    elif state.plain_output:
        typer.echo("status\terror")
        typer.echo(f"message\t{exc}")
    else:
        state.console.print(f"[red]Error:[/red] {exc}")
    raise typer.Exit(code=1)


def _settings_payload(state: CLIState) -> Dict[str, Any]:
    inventory = PlateInventory.from_config(state.config)
    catalog = BarbellCatalog.from_config(state.config)
    return {
        "config_path": str(state.config_path),
        "defaults": dict(state.config.get("defaults", {})),
        "plates": inventory.to_config(),
        "custom_barbells": [bar.to_dict() for bar in catalog.custom],
    }


def _update_plates(state: CLIState, change: Callable[[PlateInventory], None], message: str) -> None:
    inventory = PlateInventory.from_config(state.config)
    try:
        change(inventory)
    except InventoryError as exc:
        _report_error(state, exc)
    state.config["plates"] = inventory.to_config()
    _save(state, message)


def _parse_bar_weight(weight: str, unit: Optional[str], param_hint: str) -> Weight:
    try:
        value, suffix_unit = parse_weight(weight)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint=param_hint)
    return Weight(value, Unit.parse(unit) if unit else (suffix_unit or Unit.KG))


def _save(state: CLIState, message: str) -> None:
    path = save_config(state.config, state.config_path)
    state.debug(f"saved {path}")
    if state.json_output:
        print_json_payload(state, {"status": "success", "message": message, **_settings_payload(state)})
        return
    if state.plain_output:
        typer.echo("status\tsuccess")
        typer.echo(f"message\t{message}")
        return
    state.console.print(message)


@app.command("show")
def show_command(ctx: typer.Context) -> None:
    """Show configured defaults, plates and custom barbells."""
    state = get_state(ctx)
    payload = _settings_payload(state)

    if state.json_output:
        print_json_payload(state, payload)
        return

    plates = payload["plates"]
    selected = set(plates["selected"])
    plate_text = ", ".join(
        f"{w:g}" if w in selected else f"({w:g})" for w in plates["available"]
    )
    if state.plain_output:
        typer.echo(f"config\t{payload['config_path']}")
        for key, value in payload["defaults"].items():
            typer.echo(f"{key}\t{value}")
        typer.echo(f"plates\t{plate_text}\t{plates['unit']}")
        for bar in payload["custom_barbells"]:
            typer.echo(f"barbell\t{bar['id']}\t{bar['weight']['value']:g}\t{bar['weight']['unit']}")
        return

    state.console.print(f"Config: {payload['config_path']}")
    for key, value in payload["defaults"].items():
        state.console.print(f"{key}: {value}")
    state.console.print(f"Plates ({plates['unit']}, disabled in parentheses): {plate_text}")
    if payload["custom_barbells"]:
        state.console.print("Custom barbells:")
        for bar in payload["custom_barbells"]:
            state.console.print(f"- {bar['name']} ({bar['weight']['value']:g} {bar['weight']['unit']})")


@app.command("add-plate")
def add_plate_command(
    ctx: typer.Context,
    weight: float = typer.Argument(..., help="Plate weight to add"),
) -> None:
    """Add a custom plate weight (selected immediately)."""
    state = get_state(ctx)
    _update_plates(state, lambda inv: inv.add_custom_plate(weight), f"Added plate {weight:g}")


@app.command("remove-plate")
def remove_plate_command(
    ctx: typer.Context,
    weight: float = typer.Argument(..., help="Custom plate weight to remove"),
) -> None:
    """Remove a custom plate weight."""
    state = get_state(ctx)
    _update_plates(state, lambda inv: inv.remove_custom_plate(weight), f"Removed plate {weight:g}")


@app.command("enable-plate")
def enable_plate_command(
    ctx: typer.Context,
    weight: float = typer.Argument(..., help="Plate weight to use in calculations"),
) -> None:
    """Use a plate weight in calculations."""
    state = get_state(ctx)
    _update_plates(state, lambda inv: inv.set_enabled(weight, True), f"Enabled plate {weight:g}")


@app.command("disable-plate")
def disable_plate_command(
    ctx: typer.Context,
    weight: float = typer.Argument(..., help="Plate weight to leave out of calculations"),
) -> None:
    """Leave a plate weight out of calculations."""
    state = get_state(ctx)
    _update_plates(state, lambda inv: inv.set_enabled(weight, False), f"Disabled plate {weight:g}")


@app.command("reset-plates")
def reset_plates_command(ctx: typer.Context) -> None:
    """Restore the default plate set."""
    state = get_state(ctx)
    _update_plates(state, lambda inv: inv.reset(), "Plates reset to defaults")


@app.command("add-barbell")
def add_barbell_command(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Barbell name"),
    weight: str = typer.Argument(..., help="Barbell weight, e.g. 18 or 35lbs"),
    unit: Optional[str] = typer.Option(None, "--unit", "-u", help="Unit of WEIGHT: kg|lbs", callback=validate_unit),
) -> None:
    """Add a custom barbell."""
    state = get_state(ctx)
    bar_weight = _parse_bar_weight(weight, unit, "WEIGHT")

    catalog = BarbellCatalog.from_config(state.config)
    try:
        barbell = catalog.add_custom(name, bar_weight)
    except InventoryError as exc:
        _report_error(state, exc)
    state.config.setdefault("barbells", {})["custom"] = catalog.to_config()
    _save(state, f"Added barbell {barbell.name} ({barbell.id})")


@app.command("edit-barbell")
def edit_barbell_command(
    ctx: typer.Context,
    barbell_id: str = typer.Argument(..., help="Custom barbell id"),
    name: Optional[str] = typer.Option(None, "--name", help="New barbell name"),
    weight: Optional[str] = typer.Option(None, "--weight", "-w", help="New weight, e.g. 18 or 35lbs"),
    unit: Optional[str] = typer.Option(None, "--unit", "-u", help="Unit of --weight: kg|lbs", callback=validate_unit),
) -> None:
    """Rename or reweigh a custom barbell."""
    state = get_state(ctx)
    if name is None and weight is None:
        raise typer.BadParameter("Pass --name and/or --weight", param_hint="--name/--weight")
    bar_weight = _parse_bar_weight(weight, unit, "--weight") if weight is not None else None

    catalog = BarbellCatalog.from_config(state.config)
    try:
        barbell = catalog.update_custom(barbell_id, name=name, weight=bar_weight)
    except InventoryError as exc:
        _report_error(state, exc)
    state.config.setdefault("barbells", {})["custom"] = catalog.to_config()
    _save(
        state,
        f"Updated barbell {barbell.name} ({format_weight(barbell.weight.value, barbell.weight.unit)})",
    )


@app.command("remove-barbell")
def remove_barbell_command(
    ctx: typer.Context,
    barbell_id: str = typer.Argument(..., help="Custom barbell id"),
) -> None:
    """Remove a custom barbell."""
    state = get_state(ctx)
    catalog = BarbellCatalog.from_config(state.config)
    try:
        removed = catalog.remove_custom(barbell_id)
    except InventoryError as exc:
        _report_error(state, exc)
    state.config.setdefault("barbells", {})["custom"] = catalog.to_config()

    defaults = state.config.setdefault("defaults", {})
    if defaults.get("barbell") == removed.id:
        defaults["barbell"] = catalog.resolve_selected(None).id
    _save(state, f"Removed barbell {removed.name}")


@app.command("set-default")
def set_default_command(
    ctx: typer.Context,
    unit: Optional[str] = typer.Option(None, "--unit", "-u", help="Default unit: kg|lbs", callback=validate_unit),
    barbell: Optional[str] = typer.Option(None, "--barbell", "-b", help="Default barbell id or name"),
    consider_bar: Optional[bool] = typer.Option(
        None, "--consider-bar/--ignore-bar", help="Count the barbell weight in totals"
    ),
    reps: Optional[int] = typer.Option(None, "--reps", min=1, max=36, help="Default rep count"),
) -> None:
    """Change default unit, barbell, bar handling or reps."""
    state = get_state(ctx)
    defaults = state.config.setdefault("defaults", {})
    if barbell is not None:
        found = BarbellCatalog.from_config(state.config).find(barbell)
        if found is None:
            raise typer.BadParameter(f"Unknown barbell '{barbell}'", param_hint="--barbell")
        defaults["barbell"] = found.id
    if unit is not None:
        defaults["unit"] = unit
    if consider_bar is not None:
        defaults["consider_barbell_weight"] = consider_bar
    if reps is not None:
        defaults["reps"] = reps
    _save(state, "Defaults updated")
