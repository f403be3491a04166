"""CLI command modules."""

from . import session

__all__ = ["session"]
