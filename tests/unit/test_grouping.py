"""Tests for grouped project listings."""

from projectdesk.core.grouping import (
    UNGROUPED_HEADING,
    group_projects,
    render_groups,
)


class TestGroupProjects:
    """Test grouping of parent:child names."""

    def test_groups_and_active_marker(self):
        """Test ungrouped names first, then one group per parent."""
        names = ["default", "web:api", "web:ui", "tools"]
        groups = group_projects(names, active_index=1)

        assert [g.heading for g in groups] == [UNGROUPED_HEADING, "WEB"]
        assert [e.label for e in groups[0].entries] == ["default", "tools"]
        assert [e.number for e in groups[0].entries] == [1, 4]
        assert [e.label for e in groups[1].entries] == ["api", "ui"]
        assert [e.name for e in groups[1].entries] == ["web:api", "web:ui"]

        assert groups[1].entries[0].is_active
        assert not groups[1].entries[1].is_active
        assert groups[1].is_active
        assert not groups[0].is_active

    def test_deterministic(self):
        names = ["default", "web:api", "web:ui", "tools"]

        first = render_groups(group_projects(names, 1))
        second = render_groups(group_projects(names, 1))
        assert first == second

    def test_no_groups(self):
        """Test a flat list has a single group without heading."""
        groups = group_projects(["default", "tools", "docs"], active_index=2)

        assert len(groups) == 1
        assert groups[0].heading is None
        assert [e.label for e in groups[0].entries] == ["default", "tools", "docs"]
        assert groups[0].entries[2].is_active

    def test_group_order_follows_first_appearance(self):
        names = ["default", "zed:one", "alpha:one", "zed:two"]
        groups = group_projects(names, active_index=0)

        assert [g.heading for g in groups] == [UNGROUPED_HEADING, "ZED", "ALPHA"]
        assert [e.number for e in groups[1].entries] == [2, 4]

    def test_parents_differing_in_case_share_a_group(self):
        groups = group_projects(["default", "Web:a", "tools", "web:b"], active_index=3)

        assert [g.heading for g in groups] == [UNGROUPED_HEADING, "WEB"]
        assert [e.name for e in groups[1].entries] == ["Web:a", "web:b"]
        assert groups[1].entries[1].is_active

    def test_empty_ungrouped_bucket_omitted(self):
        groups = group_projects(["web:api", "web:ui"], active_index=0)

        assert [g.heading for g in groups] == ["WEB"]

    def test_input_not_modified(self):
        names = ["default", "web:api"]
        group_projects(names, 0)

        assert names == ["default", "web:api"]


class TestRenderGroups:
    """Test plain text rendering."""

    def test_render(self):
        lines = render_groups(group_projects(["default", "web:api", "web:ui", "tools"], 1))

        assert lines == [
            f"{UNGROUPED_HEADING}:",
            "    1: default",
            "    4: tools",
            "",
            "* WEB:",
            "->  2: api",
            "    3: ui",
        ]

    def test_render_flat(self):
        lines = render_groups(group_projects(["default", "tools"], 0))

        assert lines == ["->  1: default", "    2: tools"]
