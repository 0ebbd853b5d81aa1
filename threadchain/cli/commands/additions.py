"""Additions command: rank hypothetical adapters by newly reachable pairs."""

import time
from pathlib import Path

import typer
from rich.markup import escape
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn

from ..app import app, console, get_json_mode
from ..utils import Output, load_equipment
from ...config import get_config
from ...search import find_useful_additions, render_addition


@app.command("additions")
def additions_command(
    inventory: Path | None = typer.Option(
        None,
        "--inventory",
        "-i",
        help="Inventory YAML file (defaults to config, then the bundled sample)",
    ),
    add: list[str] | None = typer.Option(
        None,
        "--add",
        "-a",
        help="Extra adapter to assume owned, e.g. '52(M) -> 58(F)' (repeatable)",
    ),
    top: int | None = typer.Option(
        None,
        "--top",
        "-t",
        min=1,
        help="Only show the N most useful candidates",
    ),
    direct: bool | None = typer.Option(
        None,
        "--direct/--no-direct",
        help="Count threads that mate directly as already connected",
    ),
):
    """Score every adapter you could add by how many thread pairs it connects.

    Candidates are all adapters joining two threads your inventory can
    already reach. Output is sorted ascending, so the best pick is last.
    """
    out = Output(console=console, json_mode=get_json_mode())
    config = get_config()

    loaded = load_equipment(inventory or config.inventory_path, add, out)
    if loaded is None:
        raise typer.Exit(out.finish())
    spec, equipment = loaded

    allow_direct = config.search.allow_direct if direct is None else direct
    start_time = time.time()

    if out.json_mode:
        results = find_useful_additions(equipment, allow_direct=allow_direct)
    else:
        with Progress(
            TextColumn("[cyan]Scoring candidates"),
            BarColumn(),
            MofNCompleteColumn(),
            console=console,
            transient=True,
        ) as progress:
            task = progress.add_task("score", total=None)
            results = find_useful_additions(
                equipment,
                allow_direct=allow_direct,
                on_progress=lambda done, total: progress.update(
                    task, completed=done, total=total
                ),
            )

    shown = results[-top:] if top else results
    for addition in shown:
        out.text(escape(render_addition(addition)))

    out.set_data("inventory", spec.name)
    out.set_data(
        "additions",
        [
            {
                "adapter": str(addition.adapter),
                "ends": [str(thread) for thread in addition.adapter.ends],
                "count": addition.count,
            }
            for addition in shown
        ],
    )
    out.blank()
    out.success(
        f"Scored {len(results)} candidate adapters in {time.time() - start_time:.1f}s",
        candidates=len(results),
    )
    raise typer.Exit(out.finish())
