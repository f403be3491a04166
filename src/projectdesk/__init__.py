"""ProjectDesk - named workspace snapshots for an editor session."""

from projectdesk.core.dispatcher import Dispatcher
from projectdesk.managers.registry import ProjectRegistry

try:
    from importlib.metadata import version
    __version__ = version("projectdesk")
except Exception:
    # Package metadata is not available when running from a source checkout
    __version__ = "0.1.0"

__all__ = ["Dispatcher", "ProjectRegistry"]
