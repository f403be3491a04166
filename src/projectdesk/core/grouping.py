"""Hierarchical grouping of project names for display.

Names of the form ``parent:child`` are gathered under a heading derived from
``parent``; all other names go to an ungrouped bucket shown first. This is a
pure function of the name list and the active index.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from projectdesk.utils.name_validator import split_name

UNGROUPED_HEADING = "NO PARENT PROJECT"


@dataclass(frozen=True)
class GroupEntry:
    """A single project line in the listing."""

    number: int  # 1-based position in the registry
    name: str
    label: str
    is_active: bool = False


@dataclass
class ProjectGroup:
    """A heading and the projects listed under it."""

    heading: Optional[str]
    entries: List[GroupEntry] = field(default_factory=list)

    @property
    def is_active(self) -> bool:
        return any(entry.is_active for entry in self.entries)


def group_projects(names: Sequence[str], active_index: int) -> List[ProjectGroup]:
    """Derive the grouped listing order.

    When no name contains a group separator the result is a single group
    without a heading. Otherwise the ungrouped bucket comes first (omitted if
    empty), followed by one group per distinct parent in order of first
    appearance, ignoring case. Registry order is preserved inside every group.

    Args:
        names: Project names in registry order
        active_index: Zero-based index of the active project

    Returns:
        List of ProjectGroup
    """
    ungrouped = ProjectGroup(heading=UNGROUPED_HEADING)
    groups: Dict[str, ProjectGroup] = {}

    for index, name in enumerate(names):
        parent, child = split_name(name)
        is_active = index == active_index
        if parent is None:
            ungrouped.entries.append(
                GroupEntry(number=index + 1, name=name, label=name, is_active=is_active)
            )
            continue
        key = parent.casefold()
        if key not in groups:
            groups[key] = ProjectGroup(heading=parent.upper())
        groups[key].entries.append(
            GroupEntry(number=index + 1, name=name, label=child, is_active=is_active)
        )

    if not groups:
        ungrouped.heading = None
        return [ungrouped]

    result = [ungrouped] if ungrouped.entries else []
    result.extend(groups.values())
    return result


def render_groups(groups: Sequence[ProjectGroup]) -> List[str]:
    """Render groups as plain text lines.

    The active line is prefixed with ``->`` and the heading of the group
    holding it is prefixed with ``*``.
    """
    lines: List[str] = []
    for group in groups:
        if group.heading is not None:
            if lines:
                lines.append("")
            marker = "* " if group.is_active else ""
            lines.append(f"{marker}{group.heading}:")
        for entry in group.entries:
            prefix = "-> " if entry.is_active else "   "
            lines.append(f"{prefix}{entry.number:2d}: {entry.label}")
    return lines
