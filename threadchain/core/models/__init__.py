"""Domain models for threadchain.

- thread: Gender, Thread, NIL_THREAD and thread parsing
- adapter: Adapter (unordered pair of threads) and adapter parsing
- inventory: YAML-facing inventory spec and loader
"""

from .thread import Gender, Thread, NIL_THREAD, male, female, parse_thread
from .adapter import Adapter, parse_adapter
from .inventory import (
    AdapterEntry,
    InventorySpec,
    load_inventory,
    SAMPLE_INVENTORY_PATH,
)

__all__ = [
    "Gender",
    "Thread",
    "NIL_THREAD",
    "male",
    "female",
    "parse_thread",
    "Adapter",
    "parse_adapter",
    "AdapterEntry",
    "InventorySpec",
    "load_inventory",
    "SAMPLE_INVENTORY_PATH",
]
