"""Drift detection between a stored project and the live session."""

from typing import Sequence

from projectdesk.models import Project


def files_modified(saved: Sequence[str], live: Sequence[str]) -> bool:
    """Check whether the live open files differ from the saved ones.

    Comparison is positional and ignores case, so reordering the same files
    counts as a modification. The working directory is not considered.

    Args:
        saved: Open files stored in the project
        live: Open files reported by the session

    Returns:
        True if the lists differ in length or in any position
    """
    if len(saved) != len(live):
        return True
    return any(s.casefold() != l.casefold() for s, l in zip(saved, live))


def session_matches(project: Project, live_files: Sequence[str], live_dir: str) -> bool:
    """Check whether the session already reflects ``project``.

    Used when loading the project that is already active. Open files are
    compared as sets, exactly and without regard to order, and the working
    directory must be equal.

    Args:
        project: The stored project
        live_files: Open files reported by the session
        live_dir: Working directory reported by the session

    Returns:
        True if no restore is needed
    """
    files_ok = set(project.opened_files) == set(live_files)
    dir_ok = project.active_dir == live_dir
    return files_ok and dir_ok
