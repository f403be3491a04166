"""Core ProjectDesk functionality."""

from projectdesk.core.store import RegistryStore
from projectdesk.core.session import SessionAdapter, MemorySession, StateFileSession
from projectdesk.core.grouping import group_projects, render_groups

__all__ = [
    "RegistryStore",
    "SessionAdapter",
    "MemorySession",
    "StateFileSession",
    "group_projects",
    "render_groups",
]
