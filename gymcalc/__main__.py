"""Entry point for gymcalc."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gymcalc import __version__
from gymcalc.commands import settings as settings_commands
from gymcalc.commands.calculate import check_command, plates_command
from gymcalc.commands.convert import convert_command
from gymcalc.commands.equipment import barbells_command
from gymcalc.commands.estimate import max_command
from gymcalc.core.config import ConfigError, default_config_path, load_config
from gymcalc.core.state import CLIState

app = typer.Typer(
    add_completion=False,
    help="Barbell plate and one-rep max calculator",
    invoke_without_command=True,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output JSON where available"),
    plain_output: bool = typer.Option(
        False,
        "--plain",
        help="Output plain text (no rich formatting/tables)",
    ),
    config: Optional[Path] = typer.Option(None, "--config", help="Path to config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Quiet output"),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
) -> None:
    """Initialize global CLI state."""
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if json_output and plain_output:
        typer.echo("Options --json and --plain are mutually exclusive.")
        raise typer.Exit(code=2)

    cfg_path = (config or default_config_path()).expanduser().resolve()
    try:
        cfg = load_config(cfg_path)
    except ConfigError as exc:
        typer.echo(f"Config error: {exc}")
        raise typer.Exit(code=2)

    console = Console(
        quiet=quiet,
        no_color=plain_output,
        log_time=False,
        log_path=False,
    )
    ctx.obj = CLIState(
        json_output=(json_output and not plain_output),
        plain_output=plain_output,
        verbose=verbose,
        quiet=quiet,
        config_path=cfg_path,
        config=cfg,
        console=console,
    )

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)


# Top-level commands
app.command("plates")(plates_command)
app.command("check")(check_command)
app.command("max")(max_command)
app.command("convert")(convert_command)
app.command("barbells")(barbells_command)
app.add_typer(settings_commands.app, name="settings")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
