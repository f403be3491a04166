"""Wiring of configuration, store, session and exporter into a dispatcher."""

from pathlib import Path
from typing import Optional

from projectdesk.config import Config
from projectdesk.core.dispatcher import Dispatcher
from projectdesk.core.session import SessionAdapter, StateFileSession
from projectdesk.core.store import RegistryStore
from projectdesk.managers.completion import CompletionExporter, NullExporter
from projectdesk.managers.registry import ProjectRegistry


def open_desk(
    home_dir: Optional[Path] = None,
    session: Optional[SessionAdapter] = None,
) -> Dispatcher:
    """Open the registry and return a dispatcher for it.

    Args:
        home_dir: ProjectDesk home directory (default: PROJECTDESK_HOME or ~/.projectdesk)
        session: Session adapter (default: session state file in the home directory)

    Returns:
        Dispatcher owning the loaded registry

    Examples:
        >>> desk = open_desk()
        >>> desk.dispatch(["save", "web:api"])
    """
    config = Config(home_dir)
    settings = config.load()

    if session is None:
        session = StateFileSession(config.session_path)

    completion_path = config.completion_path
    exporter = CompletionExporter(completion_path) if completion_path else NullExporter()

    registry = ProjectRegistry(
        RegistryStore(config.store_path),
        session,
        exporter=exporter,
        default_dir=settings.default_directory,
    )
    return Dispatcher(registry)
