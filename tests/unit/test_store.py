"""Tests for the registry store."""

import json

import pytest

from projectdesk.core.store import RegistryStore
from projectdesk.exceptions import StoreError
from projectdesk.models import Project, RegistryState


class TestRegistryStore:
    """Test loading and saving the registry."""

    def test_load_missing(self, tmp_path):
        store = RegistryStore(tmp_path / "projects.json")

        assert not store.exists
        with pytest.raises(FileNotFoundError):
            store.load()

    def test_load_or_create_bootstraps(self, tmp_path):
        """Test the first-run registry is created and persisted."""
        store = RegistryStore(tmp_path / "nested" / "projects.json")

        state = store.load_or_create("/home/user")

        assert store.exists
        assert state.names == ["default"]
        assert state.active_index == 0
        assert state.active.opened_files == []
        assert store.load() == state

    def test_load_or_create_keeps_existing(self, tmp_path):
        store = RegistryStore(tmp_path / "projects.json")
        state = RegistryState(
            projects=[
                Project(name="default", active_dir="/"),
                Project(name="web", active_dir="/srv"),
            ],
            active_index=1,
        )
        store.save(state)

        assert store.load_or_create("/elsewhere") == state

    def test_round_trip(self, tmp_path):
        """Test that project order and the active index round-trip exactly."""
        store = RegistryStore(tmp_path / "projects.json")
        state = RegistryState(
            projects=[
                Project(name="default", active_dir="/"),
                Project(name="zeta", opened_files=["/b", "/a", "/b"], active_dir="/z"),
                Project(name="alpha", active_dir="/a"),
            ],
            active_index=2,
        )

        store.save(state)
        loaded = store.load()

        assert loaded.names == ["default", "zeta", "alpha"]
        assert loaded.active_index == 2
        assert loaded.projects[1].opened_files == ["/b", "/a", "/b"]

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / "projects.json"
        path.write_text("{not json")

        with pytest.raises(StoreError, match="corrupt"):
            RegistryStore(path).load()

    def test_invalid_registry(self, tmp_path):
        """Test a registry whose active index points nowhere."""
        path = tmp_path / "projects.json"
        path.write_text(
            json.dumps(
                {
                    "projects": [{"name": "default", "opened_files": [], "active_dir": "/"}],
                    "active_index": 4,
                }
            )
        )

        with pytest.raises(StoreError, match="invalid"):
            RegistryStore(path).load()

    def test_save_failure(self, tmp_path):
        """Test that a write failure surfaces as StoreError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        store = RegistryStore(blocker / "projects.json")

        with pytest.raises(StoreError):
            store.save(RegistryState.bootstrap("/"))

    def test_store_error_is_os_error(self, tmp_path):
        path = tmp_path / "projects.json"
        path.write_text("[]")

        with pytest.raises(OSError):
            RegistryStore(path).load()
