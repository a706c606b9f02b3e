"""ActionItem model for tasks extracted from meetings."""

from enum import Enum

from pydantic import Field, field_validator

from src.models.base import Record, new_id
from src.models.participant import Participant

MANUALLY_ADDED = "Manually added"
DEFAULT_CATEGORY = "General"


class ActionItemPriority(str, Enum):
    """Priority of an action item."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ActionItemStatus(str, Enum):
    """Status of an action item."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class NewActionItem(Record):
    """An action item as submitted by a user, before it has an id.

    Defaults match a blank manual entry.
    """

    description: str = Field(
        min_length=1,
        max_length=2000,
        description="What needs to be done, starting with a verb",
    )
    assigned_to: Participant | None = Field(
        default=None,
        alias="assignedTo",
        description="Copy of the responsible participant (None = unassigned)",
    )
    priority: ActionItemPriority = Field(default=ActionItemPriority.MEDIUM)
    deadline: str | None = Field(
        default=None,
        description="ISO-8601 date string, not validated further",
    )
    status: ActionItemStatus = Field(default=ActionItemStatus.PENDING)
    category: str = Field(default=DEFAULT_CATEGORY, description="Free-text label")
    extracted_from_context: str = Field(
        default=MANUALLY_ADDED,
        alias="extractedFromContext",
        description="Verbatim source span, or 'Manually added'",
    )

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, v: str) -> str:
        """Strip the description and reject whitespace-only input."""
        if not v.strip():
            msg = "Description cannot be empty or whitespace"
            raise ValueError(msg)
        return v.strip()


class ActionItem(NewActionItem):
    """An action item attached to a meeting.

    Action items are created in bulk by extraction or one at a time by a
    user, and are replaced whole on edit (latest write wins).
    """

    id: str = Field(default_factory=new_id, description="Unique within a meeting")

    @property
    def is_assigned(self) -> bool:
        """Check if action item has an assignee."""
        return self.assigned_to is not None

    @property
    def assignee_name(self) -> str:
        """Assignee display name, 'Unassigned' when nobody owns the item."""
        return self.assigned_to.name if self.assigned_to else "Unassigned"

    @classmethod
    def from_new(cls, item: NewActionItem, item_id: str) -> "ActionItem":
        """Attach an id to a submitted action item."""
        data = {name: getattr(item, name) for name in NewActionItem.model_fields}
        return cls.model_validate({**data, "id": item_id})
