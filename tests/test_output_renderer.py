"""Tests for the output renderer and schemas."""

from datetime import UTC, datetime

import pytest
from jinja2 import TemplateNotFound

from src.models.action_item import ActionItem, ActionItemPriority
from src.models.participant import Participant, placeholder_participants
from src.output.renderer import ActionItemsRenderer
from src.output.schemas import ActionItemRow, ExportContext

EXPORTED_AT = datetime(2025, 6, 20, 9, 30, tzinfo=UTC)


@pytest.fixture
def renderer() -> ActionItemsRenderer:
    return ActionItemsRenderer()


@pytest.fixture
def action_items() -> list[ActionItem]:
    return [
        ActionItem(id="1", description="Update the roadmap", priority=ActionItemPriority.LOW),
        ActionItem(
            id="2",
            description="Fix the login bug",
            priority=ActionItemPriority.HIGH,
            assigned_to=Participant(id="1", name="Speaker 1"),
            deadline="2025-06-27",
        ),
        ActionItem(id="3", description="Email the vendor", priority=ActionItemPriority.HIGH),
    ]


class TestExportContext:
    """Tests for ExportContext.build."""

    def test_groups_by_priority_high_first(self, action_items):
        context = ExportContext.build(action_items, [], "Sprint Review", EXPORTED_AT)

        assert [g.priority for g in context.groups] == ["high", "low"]
        assert [row.description for row in context.groups[0].items] == [
            "Fix the login bug",
            "Email the vendor",
        ]
        assert context.total_items == 3

    def test_empty_items_have_no_groups(self):
        context = ExportContext.build([], [], "Sprint Review", EXPORTED_AT)
        assert context.groups == []
        assert context.total_items == 0

    def test_participant_lines(self):
        participants = [
            Participant(id="1", name="Alice", email="alice@example.com", role="PM"),
            Participant(id="2", name="Bob"),
        ]
        context = ExportContext.build([], participants, "Sync", EXPORTED_AT)
        assert context.participants == ["Alice (alice@example.com) - PM", "Bob"]

    def test_row_flattens_assignee(self, action_items):
        assert ActionItemRow.from_action_item(action_items[0]).assignee == "Unassigned"
        assert ActionItemRow.from_action_item(action_items[1]).assignee == "Speaker 1"


class TestActionItemsRenderer:
    """Tests for HTML rendering."""

    def test_renders_heading_and_totals(self, renderer, action_items):
        html = renderer.render_html(
            action_items, placeholder_participants(), "Sprint Review", EXPORTED_AT
        )

        assert "Meeting Action Items: Sprint Review" in html
        assert "2025-06-20" in html
        assert "Total Action Items:</strong> 3" in html
        assert "Speaker 2 - Marketing Specialist" in html

    def test_groups_in_priority_order(self, renderer, action_items):
        html = renderer.render_html(action_items, [], "Sprint Review", EXPORTED_AT)

        assert "High Priority (2)" in html
        assert "Low Priority (1)" in html
        assert "Medium Priority" not in html
        assert html.index("High Priority") < html.index("Low Priority")

    def test_deadline_only_when_set(self, renderer, action_items):
        html = renderer.render_html(action_items, [], "Sprint Review", EXPORTED_AT)
        assert html.count("Deadline:") == 1
        assert "2025-06-27" in html

    def test_escapes_html(self, renderer):
        item = ActionItem(id="1", description="Fix <script>alert(1)</script> & more")
        html = renderer.render_html([item], [], "A & B", EXPORTED_AT)

        assert "<script>" not in html
        assert "&lt;script&gt;" in html
        assert "A &amp; B" in html

    def test_no_items_message(self, renderer):
        html = renderer.render_html([], [], "Empty", EXPORTED_AT)
        assert "No action items." in html

    def test_missing_template_raises(self, renderer, action_items):
        with pytest.raises(TemplateNotFound):
            renderer.render_html(action_items, [], "x", EXPORTED_AT, template_name="nonexistent")

    def test_custom_template_dir(self, tmp_path, action_items):
        (tmp_path / "brief.html.j2").write_text(
            "{{ meeting_title }}: {{ total_items }} items"
        )
        renderer = ActionItemsRenderer(template_dir=tmp_path)

        assert renderer.render_html(action_items, [], "Sync", EXPORTED_AT, "brief") == (
            "Sync: 3 items"
        )
