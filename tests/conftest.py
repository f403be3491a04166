"""Pytest configuration and shared fixtures."""

import pytest

from projectdesk.core.session import MemorySession
from projectdesk.core.store import RegistryStore
from projectdesk.managers.registry import ProjectRegistry

ENV_VARS = [
    "PROJECTDESK_HOME",
    "PROJECTDESK_DEFAULT_DIR",
    "PROJECTDESK_STORE",
    "PROJECTDESK_COMPLETION_FILE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the user's ProjectDesk environment out of the tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def workdir(tmp_path):
    """A working directory holding a few files to open."""
    root = tmp_path / "work"
    root.mkdir()
    for name in ("a.txt", "b.txt", "c.txt"):
        (root / name).write_text(name)
    return root


@pytest.fixture
def session(workdir):
    """An in-memory session rooted in the working directory."""
    return MemorySession(working_directory=str(workdir))


@pytest.fixture
def store(tmp_path):
    """A registry store that has not been written yet."""
    return RegistryStore(tmp_path / "home" / "projects.json")


@pytest.fixture
def registry(store, session):
    """A freshly bootstrapped registry."""
    return ProjectRegistry(store, session)
