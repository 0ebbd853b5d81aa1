"""Config command for viewing and managing threadchain configuration."""

import typer

from ..app import app, console
from ...config import (
    get_config,
    parse_bool,
    reset_config,
    CONFIG_FILE,
)


VALID_KEYS = {
    "search.allow_direct",
    "display.max_chains",
    "defaults.inventory_path",
}

INT_FIELDS = {"max_chains"}
BOOL_FIELDS = {"allow_direct"}


@app.command("config")
def config_command(
    action: str = typer.Argument(
        ...,
        help="Action: show, set, reset",
    ),
    key: str | None = typer.Argument(
        None,
        help="Config key (e.g. search.allow_direct, defaults.inventory_path)",
    ),
    value: str | None = typer.Argument(
        None,
        help="Value to set",
    ),
):
    """View or modify threadchain configuration.

    Examples:
        threadchain config show
        threadchain config set defaults.inventory_path ~/gear/bag.yaml
        threadchain config set search.allow_direct true
        threadchain config reset
    """
    if action == "show":
        _show_config()
    elif action == "set":
        if not key or value is None:
            console.print("[red]Usage:[/red] threadchain config set <key> <value>")
            console.print()
            console.print("Available keys:")
            for k in sorted(VALID_KEYS):
                console.print(f"  {k}")
            raise typer.Exit(1)
        _set_config(key, value)
    elif action == "reset":
        _reset_config()
    else:
        console.print(f"[red]Unknown action:[/red] {action}")
        console.print("Valid actions: show, set, reset")
        raise typer.Exit(1)


def _show_config():
    """Display current resolved configuration."""
    config = get_config()

    console.print()
    console.print("[bold]threadchain Configuration[/bold]")
    console.print("─" * 40)

    console.print()
    console.print("[bold cyan]Search[/bold cyan]")
    console.print(f"  allow_direct   = {config.search.allow_direct}")

    console.print()
    console.print("[bold cyan]Display[/bold cyan]")
    max_chains = config.display.max_chains or "[dim](all)[/dim]"
    console.print(f"  max_chains     = {max_chains}")

    console.print()
    console.print("[bold cyan]Defaults[/bold cyan]")
    inventory = config.defaults.inventory_path or "[dim](bundled sample)[/dim]"
    console.print(f"  inventory_path = {inventory}")

    console.print()
    if CONFIG_FILE.exists():
        console.print(f"Config file: {CONFIG_FILE}")
    else:
        console.print(f"Config file: [dim]not created yet[/dim] ({CONFIG_FILE})")
    console.print()


def _set_config(key: str, value: str):
    """Set a config value and save."""
    if key not in VALID_KEYS:
        console.print(f"[red]Unknown key:[/red] {key}")
        console.print()
        console.print("Available keys:")
        for k in sorted(VALID_KEYS):
            console.print(f"  {k}")
        raise typer.Exit(1)

    config = get_config()
    zone, field_name = key.split(".", 1)
    target = getattr(config, zone)

    if field_name in INT_FIELDS:
        try:
            parsed = int(value)
        except ValueError:
            console.print(f"[red]Invalid integer value:[/red] {value}")
            raise typer.Exit(1)
        if parsed < 0:
            console.print(f"[red]Value must be >= 0:[/red] {value}")
            raise typer.Exit(1)
        setattr(target, field_name, parsed)
    elif field_name in BOOL_FIELDS:
        try:
            setattr(target, field_name, parse_bool(value))
        except ValueError:
            console.print(f"[red]Invalid boolean value:[/red] {value}")
            raise typer.Exit(1)
    else:
        setattr(target, field_name, value)

    config.save()
    reset_config()  # Clear cached singleton so next get_config() reloads

    console.print(f"[green]✓[/green] Set {key} = {value}")
    console.print(f"  Saved to {CONFIG_FILE}")


def _reset_config():
    """Reset config to defaults."""
    if CONFIG_FILE.exists():
        CONFIG_FILE.unlink()
        reset_config()
        console.print("[green]✓[/green] Config reset to defaults")
        console.print(f"  Removed {CONFIG_FILE}")
    else:
        console.print("Config already at defaults (no config file exists)")
