"""Tests for ProjectDesk models."""

import pytest
from pydantic import ValidationError

from projectdesk.models import (
    Project,
    RegistryState,
    DEFAULT_PROJECT,
    RenameCommand,
    ShowCommand,
)


class TestRegistryState:
    """Test the registry state model."""

    def test_bootstrap(self):
        """Test the first-run registry."""
        state = RegistryState.bootstrap("/home/user")

        assert state.names == [DEFAULT_PROJECT]
        assert state.active_index == 0
        assert state.active.opened_files == []
        assert state.active.active_dir == "/home/user"

    def test_find_ignores_case(self):
        state = RegistryState(
            projects=[
                Project(name="default", active_dir="/"),
                Project(name="Web:API", active_dir="/srv"),
            ]
        )

        assert state.find("web:api") == 1
        assert state.find("DEFAULT") == 0
        assert state.find("tools") is None

    def test_active_index_out_of_range(self):
        with pytest.raises(ValidationError):
            RegistryState(projects=[Project(name="default", active_dir="/")], active_index=1)

    def test_empty_registry_rejected(self):
        with pytest.raises(ValidationError):
            RegistryState(projects=[], active_index=0)

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError):
            Project(name="x", active_dir="/", colour="red")

    def test_json_round_trip(self):
        """Test that order and the active index survive serialization."""
        state = RegistryState(
            projects=[
                Project(name="default", active_dir="/"),
                Project(name="b", opened_files=["/z.txt", "/a.txt"], active_dir="/b"),
                Project(name="a", active_dir="/a"),
            ],
            active_index=2,
        )

        restored = RegistryState.model_validate_json(state.model_dump_json())
        assert restored == state
        assert restored.projects[1].opened_files == ["/z.txt", "/a.txt"]


class TestCommands:
    """Test command variants."""

    def test_commands_are_frozen(self):
        command = ShowCommand(name="web")
        with pytest.raises(ValidationError):
            command.name = "other"

    def test_rename_requires_new_name(self):
        with pytest.raises(ValidationError):
            RenameCommand()

    def test_verbs(self):
        assert ShowCommand().verb == "show"
        assert RenameCommand(new_name="lib").verb == "rename"
