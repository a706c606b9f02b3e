"""Output schemas for action item export rendering."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from src.models.action_item import ActionItem, ActionItemPriority
from src.models.participant import Participant


class ActionItemRow(BaseModel):
    """Action item data for template rendering (flattened from domain model)."""

    description: str = Field(description="What needs to be done")
    assignee: str = Field(default="Unassigned", description="Who is responsible")
    priority: str = Field(description="high, medium or low")
    status: str = Field(description="pending, in-progress or completed")
    category: str = Field(description="Free-text category")
    deadline: str | None = Field(default=None, description="Deadline, if any")
    context: str = Field(default="", description="Source span or 'Manually added'")

    @classmethod
    def from_action_item(cls, item: ActionItem) -> "ActionItemRow":
        """Flatten a domain action item."""
        return cls(
            description=item.description,
            assignee=item.assignee_name,
            priority=item.priority.value,
            status=item.status.value,
            category=item.category,
            deadline=item.deadline,
            context=item.extracted_from_context,
        )


class PriorityGroup(BaseModel):
    """Action items sharing one priority."""

    priority: str
    items: list[ActionItemRow] = Field(default_factory=list)


class ExportContext(BaseModel):
    """Context data for rendering the action items document.

    This is the main input to the ActionItemsRenderer.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    meeting_title: str = Field(description="Title of the meeting")
    exported_at: datetime = Field(description="When the export was produced")
    participants: list[str] = Field(
        default_factory=list,
        description="Participant lines, e.g. 'Speaker 1 - Project Manager'",
    )
    total_items: int = Field(default=0, ge=0)
    groups: list[PriorityGroup] = Field(
        default_factory=list,
        description="Non-empty priority groups, high to low",
    )

    @classmethod
    def build(
        cls,
        action_items: list[ActionItem],
        participants: list[Participant],
        meeting_title: str,
        exported_at: datetime,
    ) -> "ExportContext":
        """Build the context from a meeting's final state."""
        groups = []
        for priority in ActionItemPriority:
            rows = [
                ActionItemRow.from_action_item(item)
                for item in action_items
                if item.priority is priority
            ]
            if rows:
                groups.append(PriorityGroup(priority=priority.value, items=rows))

        return cls(
            meeting_title=meeting_title,
            exported_at=exported_at,
            participants=[_participant_line(p) for p in participants],
            total_items=len(action_items),
            groups=groups,
        )


def _participant_line(participant: Participant) -> str:
    line = participant.name
    if participant.email:
        line += f" ({participant.email})"
    if participant.role:
        line += f" - {participant.role}"
    return line
