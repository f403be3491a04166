"""Project and registry models for ProjectDesk."""

from typing import List, Optional
from pydantic import Field, model_validator

from .base import ProjectDeskBaseModel

DEFAULT_PROJECT = "default"
REGISTRY_VERSION = 1


class Project(ProjectDeskBaseModel):
    """A named snapshot of a working directory and its open files."""

    name: str = Field(description="Project name, unique ignoring case")
    opened_files: List[str] = Field(
        default_factory=list, description="Open file paths, in editor order"
    )
    active_dir: str = Field(description="Working directory of the project")


class RegistryState(ProjectDeskBaseModel):
    """Ordered collection of projects plus the active project pointer.

    The first slot always holds the default project and is never deleted.
    ``active_index`` is zero-based.
    """

    version: int = Field(default=REGISTRY_VERSION, description="Format version")
    projects: List[Project] = Field(description="Projects in insertion order")
    active_index: int = Field(default=0, description="Index of the active project")

    @model_validator(mode="after")
    def check_active_index(self) -> "RegistryState":
        """Reject states whose active index points outside the project list."""
        if not self.projects:
            raise ValueError("Registry must contain at least the default project")
        if not 0 <= self.active_index < len(self.projects):
            raise ValueError(
                f"Active index {self.active_index} is out of range "
                f"for {len(self.projects)} projects"
            )
        return self

    @classmethod
    def bootstrap(cls, default_dir: str) -> "RegistryState":
        """Create the first-run registry holding only the default project."""
        return cls(
            projects=[Project(name=DEFAULT_PROJECT, opened_files=[], active_dir=default_dir)],
            active_index=0,
        )

    @property
    def names(self) -> List[str]:
        return [project.name for project in self.projects]

    @property
    def active(self) -> Project:
        return self.projects[self.active_index]

    def find(self, name: str) -> Optional[int]:
        """Find a project index by name, ignoring case."""
        folded = name.casefold()
        for index, project in enumerate(self.projects):
            if project.name.casefold() == folded:
                return index
        return None
