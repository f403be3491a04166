"""Command dispatcher: maps command verbs onto registry operations."""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

from projectdesk.core.grouping import group_projects
from projectdesk.exceptions import AmbiguousArityError, UnknownCommandError
from projectdesk.managers.registry import ProjectRegistry, RestoreWarning
from projectdesk.models import (
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

logger = logging.getLogger(__name__)


def _no_args(verb: str, args: Sequence[str]) -> None:
    if args:
        raise AmbiguousArityError(f"'{verb}' takes no arguments")


def _optional_name(verb: str, args: Sequence[str]) -> Optional[str]:
    if len(args) > 1:
        raise AmbiguousArityError(f"'{verb}' takes at most one project name")
    return args[0] if args else None


def _parse_list(verb, args):
    _no_args(verb, args)
    return ListCommand()


def _parse_show(verb, args):
    return ShowCommand(name=_optional_name(verb, args))


def _parse_active(verb, args):
    _no_args(verb, args)
    return ActiveCommand()


def _parse_save(verb, args):
    return SaveCommand(name=_optional_name(verb, args))


def _parse_load(verb, args):
    return LoadCommand(name=_optional_name(verb, args))


def _parse_rename(verb, args):
    if len(args) == 1:
        return RenameCommand(new_name=args[0])
    if len(args) == 2:
        return RenameCommand(old_name=args[0], new_name=args[1])
    if not args:
        raise AmbiguousArityError("Project name was not specified")
    raise AmbiguousArityError("Too many input arguments")


def _parse_delete(verb, args):
    return DeleteCommand(name=_optional_name(verb, args))


def _parse_modified(verb, args):
    _no_args(verb, args)
    return ModifiedCommand()


def _parse_close(verb, args):
    _no_args(verb, args)
    return CloseCommand()


def _parse_new(verb, args):
    if len(args) != 1:
        raise AmbiguousArityError("'new' takes exactly one project name")
    return NewCommand(name=args[0])


PARSERS: Dict[str, Callable[[str, Sequence[str]], BaseCommand]] = {
    "list": _parse_list,
    "show": _parse_show,
    "info": _parse_show,
    "active": _parse_active,
    "save": _parse_save,
    "load": _parse_load,
    "open": _parse_load,
    "rename": _parse_rename,
    "delete": _parse_delete,
    "modified": _parse_modified,
    "close": _parse_close,
    "new": _parse_new,
}


def parse_command(tokens: Sequence[str], names: Sequence[str] = ()) -> Command:
    """Turn raw command tokens into a command.

    No tokens means ``list``. A first token that is not a verb but names an
    existing project (ignoring case) becomes a switch to that project.

    Args:
        tokens: Verb followed by its arguments
        names: Current project names

    Returns:
        The parsed command

    Raises:
        AmbiguousArityError: If the verb gets an unsupported number of arguments
        UnknownCommandError: If the first token is neither a verb nor a project
    """
    if not tokens:
        return ListCommand()

    head, args = tokens[0], list(tokens[1:])
    parser = PARSERS.get(head.lower())
    if parser is not None:
        return parser(head.lower(), args)

    match = next((n for n in names if n.casefold() == head.casefold()), None)
    if match is None:
        raise UnknownCommandError(head)
    if args:
        raise AmbiguousArityError(f"Switching to '{match}' takes no arguments")
    return SwitchCommand(name=match)


@dataclass
class CommandResult:
    """Outcome of a dispatched command."""

    command: BaseCommand
    message: str = ""
    value: Any = None
    warnings: List[RestoreWarning] = field(default_factory=list)


class Dispatcher:
    """Runs one command at a time against a project registry."""

    def __init__(self, registry: ProjectRegistry):
        """Initialize dispatcher.

        Args:
            registry: Registry that owns the projects
        """
        self.registry = registry
        self.current: Optional[BaseCommand] = None
        self._handlers: Dict[type, Callable[[Any], CommandResult]] = {
            ListCommand: self._list,
            ShowCommand: self._show,
            ActiveCommand: self._active,
            SaveCommand: self._save,
            LoadCommand: self._load,
            RenameCommand: self._rename,
            DeleteCommand: self._delete,
            ModifiedCommand: self._modified,
            CloseCommand: self._close,
            NewCommand: self._new,
            SwitchCommand: self._switch,
        }

    @property
    def is_idle(self) -> bool:
        return self.current is None

    def dispatch(self, tokens: Sequence[str]) -> CommandResult:
        """Parse raw tokens and execute the resulting command."""
        return self.execute(parse_command(tokens, self.registry.names))

    def execute(self, command: BaseCommand) -> CommandResult:
        """Execute a single command to completion.

        Raises:
            UnknownCommandError: If no handler exists for the command
            RuntimeError: If another command is already executing
        """
        handler = self._handlers.get(type(command))
        if handler is None:
            raise UnknownCommandError(command.verb)
        if self.current is not None:
            raise RuntimeError(
                f"Cannot run '{command.verb}' while '{self.current.verb}' is executing"
            )

        self.current = command
        try:
            logger.debug(f"Executing {command!r}")
            return handler(command)
        finally:
            self.current = None

    def _list(self, command: ListCommand) -> CommandResult:
        groups = group_projects(self.registry.names, self.registry.active_index)
        return CommandResult(
            command, message="List of available projects:", value=groups
        )

    def _show(self, command: ShowCommand) -> CommandResult:
        project = self.registry.get(command.name)
        return CommandResult(command, message=f'Project "{project.name}"', value=project)

    def _active(self, command: ActiveCommand) -> CommandResult:
        name = self.registry.current_name()
        return CommandResult(command, message=f'Active project is "{name}"', value=name)

    def _save(self, command: SaveCommand) -> CommandResult:
        project = self.registry.save(command.name)
        return CommandResult(
            command, message=f'Project "{project.name}" saved', value=project
        )

    def _load(self, command: LoadCommand) -> CommandResult:
        result = self.registry.load(command.name)
        if result.restored:
            message = f'Project "{result.name}" restored'
        else:
            message = f'Project "{result.name}" was already active; all OK'
        return CommandResult(
            command, message=message, value=result, warnings=result.warnings
        )

    def _rename(self, command: RenameCommand) -> CommandResult:
        previous = self.registry.rename(command.new_name, command.old_name)
        return CommandResult(
            command,
            message=f'Project "{previous}" was renamed to "{command.new_name}"',
            value=command.new_name,
        )

    def _delete(self, command: DeleteCommand) -> CommandResult:
        previous = self.registry.current_name()
        project = self.registry.delete(command.name)
        message = f'Project "{project.name}" deleted'
        if self.registry.current_name() != previous:
            message += f'\nCurrent project changed to "{self.registry.current_name()}"'
        return CommandResult(command, message=message, value=project)

    def _modified(self, command: ModifiedCommand) -> CommandResult:
        modified = self.registry.modified()
        negation = "" if modified else " not"
        return CommandResult(
            command,
            message=f'Project "{self.registry.current_name()}" was{negation} modified',
            value=modified,
        )

    def _close(self, command: CloseCommand) -> CommandResult:
        name = self.registry.current_name()
        saved = self.registry.close()
        message = "All files closed"
        if saved:
            message = f'Project "{name}" saved\n{message}'
        return CommandResult(command, message=message, value=saved)

    def _new(self, command: NewCommand) -> CommandResult:
        project = self.registry.new(command.name)
        return CommandResult(
            command, message=f'Project "{project.name}" created', value=project
        )

    def _switch(self, command: SwitchCommand) -> CommandResult:
        target = self.registry.resolve(command.name)
        active = self.registry.current_name()
        self.registry.save()
        if target == self.registry.active_index:
            return CommandResult(
                command, message=f'Project "{active}" saved', value=None
            )

        result = self.registry.load(command.name)
        return CommandResult(
            command,
            message=f'Project "{active}" saved\nProject "{result.name}" restored',
            value=result,
            warnings=result.warnings,
        )
