"""Utility helpers for ProjectDesk."""

from .name_validator import validate_name, split_name, InvalidNameError

__all__ = ["validate_name", "split_name", "InvalidNameError"]
