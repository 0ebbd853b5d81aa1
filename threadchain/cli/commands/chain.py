"""Chain command: list every adapter chain between two threads."""

from pathlib import Path

import typer
from rich.markup import escape

from ..app import app, console, get_json_mode
from ..utils import Output, ExitCode, load_equipment
from ...config import get_config
from ...core.errors import ThreadParseError
from ...core.models import parse_thread
from ...search import make_chain


@app.command("chain")
def chain_command(
    start: str = typer.Argument(..., help="Start thread, e.g. 'EF(F)' for a camera body"),
    end: str = typer.Argument(..., help="End thread, e.g. '52(M)'"),
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
        help="Extra adapter for this run only, e.g. 'new 52-58: 52(M) -> 58(F)' (repeatable)",
    ),
    direct: bool | None = typer.Option(
        None,
        "--direct/--no-direct",
        help="Also report a marker-only chain when start already mates with end",
    ),
    limit: int | None = typer.Option(
        None,
        "--limit",
        "-n",
        min=0,
        help="Print at most N chains (0 = all)",
    ),
):
    """Find every chain of adapters connecting START to END.

    Each inventory piece is used at most once per chain. Chains that use the
    same pieces in a different order are listed separately.

    Examples:
        threadchain chain "EF(F)" "52(M)"
        threadchain chain "EF(F)" "LTM(F)" --add "new 52-58: 52(M) -> 58(F)"
    """
    out = Output(console=console, json_mode=get_json_mode())
    config = get_config()

    try:
        start_thread = parse_thread(start)
        end_thread = parse_thread(end)
    except ThreadParseError as e:
        out.error(str(e), exit_code=ExitCode.VALIDATION_ERROR)
        raise typer.Exit(out.finish())

    loaded = load_equipment(inventory or config.inventory_path, add, out)
    if loaded is None:
        raise typer.Exit(out.finish())
    spec, equipment = loaded

    allow_direct = config.search.allow_direct if direct is None else direct
    chains = make_chain(start_thread, end_thread, equipment, allow_direct=allow_direct)

    out.set_data("start", str(start_thread))
    out.set_data("end", str(end_thread))
    out.set_data("inventory", spec.name)
    out.set_data(
        "chains",
        [
            {"text": str(chain), "adapters": [str(adapter) for adapter in chain]}
            for chain in chains
        ],
    )

    if not chains:
        out.warning(
            f"No chains connect {start_thread} to {end_thread}",
            suggestion="Try 'threadchain additions' to see which piece would help",
        )
        out.set_data("count", 0)
        raise typer.Exit(out.finish())

    max_chains = config.display.max_chains if limit is None else limit
    shown = chains[:max_chains] if max_chains else chains
    for chain in shown:
        out.text(escape(str(chain)))
    if len(shown) < len(chains):
        out.text(f"[dim]… {len(chains) - len(shown)} more[/dim]")

    out.blank()
    out.success(
        f"Found {len(chains)} chains from {start_thread} to {end_thread}",
        count=len(chains),
    )
    raise typer.Exit(out.finish())
