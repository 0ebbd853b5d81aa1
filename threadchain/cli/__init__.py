"""Command-line interface for threadchain."""

from .app import app

__all__ = ["app"]
