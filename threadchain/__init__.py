"""threadchain: enumerate adapter chains between two thread endpoints.

Given an inventory of two-ended adapter pieces, find every way to bridge a
start thread to an end thread, and score which new piece would connect the
most currently unreachable thread pairs.

Package use:
    from threadchain import load_inventory, make_chain, parse_thread

    equipment = load_inventory("bag.yaml").to_adapters()
    for chain in make_chain(parse_thread("EF(F)"), parse_thread("52(M)"), equipment):
        print(chain)
"""

from .core.errors import (
    ThreadchainError,
    ThreadParseError,
    InvalidAdapterError,
    InventoryError,
    InventoryNotFoundError,
)
from .core.models import (
    Gender,
    Thread,
    NIL_THREAD,
    male,
    female,
    parse_thread,
    Adapter,
    parse_adapter,
    InventorySpec,
    load_inventory,
)
from .search import (
    Chain,
    make_chain,
    Addition,
    find_useful_additions,
    render_addition,
)

__version__ = "0.1.0"
__all__ = [
    "ThreadchainError",
    "ThreadParseError",
    "InvalidAdapterError",
    "InventoryError",
    "InventoryNotFoundError",
    "Gender",
    "Thread",
    "NIL_THREAD",
    "male",
    "female",
    "parse_thread",
    "Adapter",
    "parse_adapter",
    "InventorySpec",
    "load_inventory",
    "Chain",
    "make_chain",
    "Addition",
    "find_useful_additions",
    "render_addition",
]
