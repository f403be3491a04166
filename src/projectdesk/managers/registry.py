"""Project registry: the named snapshots and the active project pointer."""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from projectdesk.core.drift import files_modified, session_matches
from projectdesk.core.session import SessionAdapter
from projectdesk.core.store import RegistryStore
from projectdesk.exceptions import (
    CannotDeleteDefaultError,
    DuplicateProjectError,
    UnknownProjectError,
)
from projectdesk.managers.completion import NullExporter
from projectdesk.models import DEFAULT_PROJECT, Project, RegistryState
from projectdesk.utils.name_validator import validate_name

logger = logging.getLogger(__name__)

# The default project lives in the first slot and is never deleted
DEFAULT_INDEX = 0


@dataclass(frozen=True)
class MissingFile:
    """A stored open file that no longer exists."""

    path: str

    @property
    def message(self) -> str:
        return f"File '{self.path}' was not found"


@dataclass(frozen=True)
class MissingDirectory:
    """A stored working directory that no longer exists."""

    path: str

    @property
    def message(self) -> str:
        return f"Directory '{self.path}' does not exist"


RestoreWarning = Union[MissingFile, MissingDirectory]


@dataclass
class LoadResult:
    """Outcome of loading a project."""

    name: str
    restored: bool
    closed_saved: bool = False
    warnings: List[RestoreWarning] = field(default_factory=list)


class ProjectRegistry:
    """Manages projects against a live session.

    The registry is loaded from the store once, kept in memory, and written
    back after every mutation.
    """

    def __init__(
        self,
        store: RegistryStore,
        session: SessionAdapter,
        exporter=None,
        default_dir: Optional[str] = None,
    ):
        """Initialize project registry.

        Args:
            store: Store holding the persisted registry
            session: Live session the projects mirror
            exporter: Completion exporter notified of name changes
            default_dir: Directory of the default project on first run (default: session directory)
        """
        self.store = store
        self.session = session
        self.exporter = exporter or NullExporter()
        self._state = store.load_or_create(
            default_dir or session.get_working_directory()
        )

    @property
    def state(self) -> RegistryState:
        return self._state

    @property
    def names(self) -> List[str]:
        return self._state.names

    @property
    def active_index(self) -> int:
        return self._state.active_index

    def resolve(self, name: str) -> int:
        """Find a project index by name, ignoring case.

        Raises:
            UnknownProjectError: If no project has that name
        """
        index = self._state.find(name)
        if index is None:
            raise UnknownProjectError(name)
        return index

    def current_name(self) -> str:
        return self._state.active.name

    def get(self, name: Optional[str] = None) -> Project:
        """Get a project by name, or the active project."""
        if name is None:
            return self._state.active
        return self._state.projects[self.resolve(name)]

    def modified(self) -> bool:
        """Check whether the session's open files drifted from the active project."""
        result = files_modified(
            self._state.active.opened_files, self.session.list_open_files()
        )
        logger.debug(f"Project '{self.current_name()}' modified: {result}")
        return result

    def save(self, name: Optional[str] = None) -> Project:
        """Save the session under a project and make it active.

        Args:
            name: Project name. Defaults to the active project. A name that
                matches no project creates a new one at the end.

        Returns:
            The saved Project
        """
        if name is None:
            index = self._state.active_index
        else:
            index = self._state.find(name)
            if index is None:
                validate_name(name)
                self._state.projects.append(
                    Project(name=name, opened_files=[], active_dir="")
                )
                index = len(self._state.projects) - 1

        project = self._state.projects[index]
        project.opened_files = self.session.list_open_files()
        project.active_dir = self.session.get_working_directory()
        self._state.active_index = index

        self._persist()
        self._export()
        logger.info(f"Project '{project.name}' saved")
        return project

    def close(self) -> bool:
        """Close the session, saving the active project first if modified.

        The default project becomes active.

        Returns:
            True if the active project was saved
        """
        saved = False
        if self.modified():
            self.save()
            saved = True

        self.session.close_all_files()
        self._state.active_index = DEFAULT_INDEX
        self._persist()
        return saved

    def load(self, name: Optional[str] = None) -> LoadResult:
        """Restore a project's open files and working directory.

        Loading the active project is a no-op when the session still matches
        it; otherwise its stored state is restored over the session. Loading
        another project closes the current one first.

        Args:
            name: Project name (default: "default")

        Returns:
            LoadResult describing what happened
        """
        name = DEFAULT_PROJECT if name is None else name
        index = self.resolve(name)
        project = self._state.projects[index]
        result = LoadResult(name=project.name, restored=True)

        if index == self._state.active_index:
            if session_matches(
                project,
                self.session.list_open_files(),
                self.session.get_working_directory(),
            ):
                logger.info(f"Project '{project.name}' was already active")
                result.restored = False
                return result
            logger.info(f"Project '{project.name}' drifted from the session, restoring")
            # No save-if-modified here: saving would overwrite the stored state being restored
            self.session.close_all_files()
        else:
            result.closed_saved = self.close()

        for path in project.opened_files:
            try:
                self.session.open_file(path)
            except FileNotFoundError:
                warning = MissingFile(path)
                logger.warning(warning.message)
                result.warnings.append(warning)

        try:
            self.session.set_working_directory(project.active_dir)
        except (FileNotFoundError, NotADirectoryError):
            warning = MissingDirectory(project.active_dir)
            logger.warning(warning.message)
            result.warnings.append(warning)

        self._state.active_index = index
        self._persist()
        logger.info(f"Project '{project.name}' restored")
        return result

    def new(self, name: str) -> Project:
        """Close the session and start a new project from the empty session."""
        validate_name(name)
        self.close()
        return self.save(name)

    def rename(self, new_name: str, old_name: Optional[str] = None) -> str:
        """Rename a project.

        Renaming the default project is allowed; only deleting it is not.

        Args:
            new_name: New project name
            old_name: Project to rename (default: active project)

        Returns:
            The previous name

        Raises:
            UnknownProjectError: If old_name does not resolve
            DuplicateProjectError: If new_name belongs to another project
        """
        index = self._state.active_index if old_name is None else self.resolve(old_name)
        validate_name(new_name)

        other = self._state.find(new_name)
        if other is not None and other != index:
            raise DuplicateProjectError(self._state.projects[other].name)

        project = self._state.projects[index]
        previous = project.name
        project.name = new_name

        self._persist()
        self._export()
        logger.info(f"Project '{previous}' was renamed to '{new_name}'")
        return previous

    def delete(self, name: Optional[str] = None) -> Project:
        """Delete a project.

        If the deleted project was active, the default project becomes
        active; otherwise the active project stays the same.

        Args:
            name: Project name (default: active project)

        Returns:
            The deleted Project

        Raises:
            UnknownProjectError: If name does not resolve
            CannotDeleteDefaultError: If the project is the default one
        """
        index = self._state.active_index if name is None else self.resolve(name)
        if index == DEFAULT_INDEX:
            raise CannotDeleteDefaultError(self._state.projects[index].name)

        was_active = index == self._state.active_index
        active_name = self.current_name()

        project = self._state.projects.pop(index)
        if was_active:
            self._state.active_index = DEFAULT_INDEX
        else:
            found = self._state.find(active_name)
            self._state.active_index = DEFAULT_INDEX if found is None else found

        self._persist()
        self._export()
        logger.info(f"Project '{project.name}' deleted")
        return project

    def _persist(self) -> None:
        self.store.save(self._state)

    def _export(self) -> None:
        self.exporter.export(self.names)
