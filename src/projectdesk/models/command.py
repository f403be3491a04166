"""Command variants understood by the dispatcher.

Each verb is its own model carrying exactly the arguments it accepts, so the
dispatcher can route on the type instead of on raw strings.
"""

from typing import Optional, Union
from pydantic import ConfigDict

from .base import ProjectDeskBaseModel


class BaseCommand(ProjectDeskBaseModel):
    """Common base for all commands."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    verb: str = ""


class ListCommand(BaseCommand):
    verb: str = "list"


class ShowCommand(BaseCommand):
    verb: str = "show"
    name: Optional[str] = None


class ActiveCommand(BaseCommand):
    verb: str = "active"


class SaveCommand(BaseCommand):
    verb: str = "save"
    name: Optional[str] = None


class LoadCommand(BaseCommand):
    verb: str = "load"
    name: Optional[str] = None


class RenameCommand(BaseCommand):
    verb: str = "rename"
    new_name: str
    old_name: Optional[str] = None


class DeleteCommand(BaseCommand):
    verb: str = "delete"
    name: Optional[str] = None


class ModifiedCommand(BaseCommand):
    verb: str = "modified"


class CloseCommand(BaseCommand):
    verb: str = "close"


class NewCommand(BaseCommand):
    verb: str = "new"
    name: str


class SwitchCommand(BaseCommand):
    """Save the active project, then load ``name`` unless it is already active."""

    verb: str = "switch"
    name: str


Command = Union[
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
]
