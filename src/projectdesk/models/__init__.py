"""Core data models for ProjectDesk."""

from .base import ProjectDeskBaseModel
from .project import Project, RegistryState, DEFAULT_PROJECT, REGISTRY_VERSION
from .command import (
    BaseCommand,
    Command,
    ListCommand,
    ShowCommand,
    ActiveCommand,
    SaveCommand,
    LoadCommand,
    RenameCommand,
    DeleteCommand,
    ModifiedCommand,
    CloseCommand,
    NewCommand,
    SwitchCommand,
)

__all__ = [
    "ProjectDeskBaseModel",
    "Project",
    "RegistryState",
    "DEFAULT_PROJECT",
    "REGISTRY_VERSION",
    "BaseCommand",
    "Command",
    "ListCommand",
    "ShowCommand",
    "ActiveCommand",
    "SaveCommand",
    "LoadCommand",
    "RenameCommand",
    "DeleteCommand",
    "ModifiedCommand",
    "CloseCommand",
    "NewCommand",
    "SwitchCommand",
]
