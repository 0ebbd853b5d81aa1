"""CLI commands for threadchain."""

from . import (
    chain,
    additions,
    inventory,
    config_cmd,
)

__all__ = [
    "chain",
    "additions",
    "inventory",
    "config_cmd",
]
