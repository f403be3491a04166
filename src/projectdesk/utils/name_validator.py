"""Name validation utilities for ProjectDesk projects.

Project names are free-form labels, but they must survive a round trip
through the command line and may carry a single ``parent:child`` separator
that the listing uses to group related projects.
"""

from typing import Optional, Tuple

GROUP_SEPARATOR = ":"

MAX_NAME_LENGTH = 255


class InvalidNameError(ValueError):
    """Raised when a name doesn't meet validation requirements."""

    pass


def split_name(name: str) -> Tuple[Optional[str], str]:
    """Split a project name on its first group separator.

    Args:
        name: Project name

    Returns:
        Tuple of (parent, child). Parent is None for ungrouped names.
    """
    if GROUP_SEPARATOR not in name:
        return None, name
    parent, child = name.split(GROUP_SEPARATOR, 1)
    return parent, child


def validate_name(name: str) -> None:
    """Validate that a name can be used as a project name.

    Valid names must:
    - Contain at least one non-whitespace character
    - Not have leading or trailing whitespace
    - Not exceed 255 characters
    - Not contain control characters
    - Contain at most one ':' with non-empty text on both sides

    Args:
        name: The name to validate

    Raises:
        InvalidNameError: If the name is invalid
    """
    if not name or not name.strip():
        raise InvalidNameError("Project name cannot be empty")

    if name != name.strip():
        raise InvalidNameError(
            f"Project name '{name}' cannot start or end with whitespace"
        )

    if len(name) > MAX_NAME_LENGTH:
        raise InvalidNameError(
            f"Project name cannot exceed {MAX_NAME_LENGTH} characters"
        )

    if any(ord(c) < 32 or ord(c) == 127 for c in name):
        raise InvalidNameError("Project name contains invalid control characters")

    if name.count(GROUP_SEPARATOR) > 1:
        raise InvalidNameError(
            f"Invalid project name '{name}'. "
            f"Use a single '{GROUP_SEPARATOR}' to separate parent and child."
        )

    parent, child = split_name(name)
    if parent is not None and (not parent.strip() or not child.strip()):
        raise InvalidNameError(
            f"Invalid project name '{name}'. "
            f"Both parent and child parts must be non-empty."
        )
