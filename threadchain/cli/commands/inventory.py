"""Inventory command: show the adapters a search would draw from."""

from pathlib import Path

import typer
from rich.markup import escape

from ..app import app, console, get_json_mode
from ..utils import Output, load_equipment
from ...config import get_config
from ...core.models import Thread
from ...search import thread_vocabulary


@app.command("inventory")
def inventory_command(
    inventory: Path | None = typer.Option(
        None,
        "--inventory",
        "-i",
        help="Inventory YAML file (defaults to config, then the bundled sample)",
    ),
):
    """List the inventory's adapters and the threads it can connect."""
    out = Output(console=console, json_mode=get_json_mode())
    config = get_config()

    loaded = load_equipment(inventory or config.inventory_path, None, out)
    if loaded is None:
        raise typer.Exit(out.finish())
    spec, equipment = loaded

    out.text(escape(spec.summary()))
    out.blank()

    rows = [
        [str(i), adapter.label, str(adapter.a), str(adapter.b)]
        for i, adapter in enumerate(equipment, 1)
    ]
    out.table(spec.name, ["#", "Label", "End A", "End B"], rows, data_key="adapters")

    ends = [str(thread) for thread in spec.threads()]
    vocabulary = [
        str(thread) for thread in sorted(thread_vocabulary(equipment), key=Thread.sort_key)
    ]
    out.set_data("threads", ends)
    out.set_data("connectable_threads", vocabulary)
    out.blank()
    out.text("[bold]Thread ends[/bold]")
    out.text("  " + escape(", ".join(ends)))
    out.text("[bold]Connectable threads[/bold]")
    out.text("  " + escape(", ".join(vocabulary)))

    out.blank()
    out.success(
        f"Loaded {len(equipment)} adapters from {spec.name}",
        name=spec.name,
        count=len(equipment),
    )
    raise typer.Exit(out.finish())
