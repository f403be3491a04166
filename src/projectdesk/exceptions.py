"""Error taxonomy for ProjectDesk."""


class ProjectDeskError(Exception):
    """Base class for all structural ProjectDesk errors."""

    pass


class UnknownProjectError(ProjectDeskError, ValueError):
    """Raised when a project name does not resolve."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown project name '{name}'")


class UnknownCommandError(ProjectDeskError, ValueError):
    """Raised when a token is neither a command verb nor a project name."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unknown command '{token}'")


class CannotDeleteDefaultError(ProjectDeskError):
    """Raised on an attempt to delete the protected default project."""

    def __init__(self, name: str = "default"):
        self.name = name
        super().__init__(f"Cannot delete the '{name}' project")


class AmbiguousArityError(ProjectDeskError, ValueError):
    """Raised when a command gets an unsupported number of arguments."""

    pass


class DuplicateProjectError(ProjectDeskError, ValueError):
    """Raised when a rename would collide with another project."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Project '{name}' already exists")


class StoreError(ProjectDeskError, OSError):
    """Raised when the registry store cannot be read or written."""

    pass
