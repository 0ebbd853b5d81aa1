"""Core models and errors for threadchain."""

from .errors import (
    ThreadchainError,
    ThreadParseError,
    InvalidAdapterError,
    InventoryError,
    InventoryNotFoundError,
)

__all__ = [
    "ThreadchainError",
    "ThreadParseError",
    "InvalidAdapterError",
    "InventoryError",
    "InventoryNotFoundError",
]
