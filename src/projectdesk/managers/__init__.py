"""ProjectDesk managers."""

from projectdesk.managers.completion import CompletionExporter, NullExporter
from projectdesk.managers.registry import (
    ProjectRegistry,
    LoadResult,
    MissingFile,
    MissingDirectory,
)

__all__ = [
    "CompletionExporter",
    "NullExporter",
    "ProjectRegistry",
    "LoadResult",
    "MissingFile",
    "MissingDirectory",
]
