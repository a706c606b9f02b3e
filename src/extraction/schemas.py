"""Pydantic model for one action item as returned by the LLM.

This schema is intentionally more lenient than the domain model:
- id is optional (backfilled during conversion)
- priority and status accept anything and repair to defaults
- assignedTo may be null, a bare name, or a participant object; an owner
  that cannot be repaired becomes unassigned instead of losing the item
- unknown fields are ignored
- extractedFromContext is kept verbatim
"""

from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from src.models.action_item import (
    DEFAULT_CATEGORY,
    ActionItem,
    ActionItemPriority,
    ActionItemStatus,
)
from src.models.participant import NAME_MAX_LENGTH, Participant

logger = structlog.get_logger()

_UNASSIGNED = {"", "none", "null", "unassigned", "n/a", "tbd", "unknown"}


def _blank_to_none(v: Any) -> Any:
    if isinstance(v, str) and not v.strip():
        return None
    return v


def _scalar_text(v: Any) -> str | None:
    """Render a scalar owner attribute as text; drop containers and blanks."""
    if v is None or isinstance(v, dict | list):
        return None
    text = str(v).strip()
    return text or None


def _owner(v: Any) -> Participant | None:
    """Build a Participant snapshot from a model-supplied owner, if possible."""
    if isinstance(v, str):
        raw = {"name": v}
    elif isinstance(v, dict):
        raw = v
    else:
        return None

    name = _scalar_text(raw.get("name"))
    if name is None or name.lower() in _UNASSIGNED:
        return None

    owner: dict[str, Any] = {"name": name[:NAME_MAX_LENGTH]}
    for key in ("id", "email", "role"):
        value = _scalar_text(raw.get(key))
        if value is not None:
            owner[key] = value
    try:
        return Participant.model_validate(owner)
    except ValidationError as e:
        logger.warning("dropping unusable action item owner", errors=e.error_count())
        return None


class ExtractedActionItem(BaseModel):
    """Schema for one element of the LLM's JSON array."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )

    id: str | None = Field(default=None)
    description: str = Field(min_length=1, max_length=2000)
    assigned_to: Participant | None = Field(default=None, alias="assignedTo")
    priority: ActionItemPriority = Field(default=ActionItemPriority.MEDIUM)
    deadline: str | None = Field(default=None)
    status: ActionItemStatus = Field(default=ActionItemStatus.PENDING)
    category: str = Field(default=DEFAULT_CATEGORY)
    extracted_from_context: str = Field(default="", alias="extractedFromContext")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        """Accept numeric ids; treat blank ids as missing."""
        if isinstance(v, int | float) and not isinstance(v, bool):
            return str(v)
        if not isinstance(v, str):
            return None
        return _blank_to_none(v.strip())

    @field_validator("description", mode="before")
    @classmethod
    def strip_description(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @field_validator("assigned_to", mode="before")
    @classmethod
    def coerce_owner(cls, v: Any) -> Any:
        """Repair the owner; anything unusable leaves the item unassigned."""
        return _owner(v)

    @field_validator("priority", mode="before")
    @classmethod
    def repair_priority(cls, v: Any) -> Any:
        """Unknown or missing priorities become medium."""
        if isinstance(v, str):
            value = v.strip().lower()
            if value in {p.value for p in ActionItemPriority}:
                return value
        return ActionItemPriority.MEDIUM

    @field_validator("status", mode="before")
    @classmethod
    def repair_status(cls, v: Any) -> Any:
        """Unknown or missing statuses become pending."""
        if isinstance(v, str):
            value = v.strip().lower().replace("_", "-").replace(" ", "-")
            if value in {s.value for s in ActionItemStatus}:
                return value
        return ActionItemStatus.PENDING

    @field_validator("deadline", mode="before")
    @classmethod
    def coerce_deadline(cls, v: Any) -> Any:
        """Keep deadlines as given; drop non-text values."""
        if not isinstance(v, str):
            return None
        return _blank_to_none(v.strip())

    @field_validator("category", mode="before")
    @classmethod
    def coerce_category(cls, v: Any) -> Any:
        if not isinstance(v, str) or not v.strip():
            return DEFAULT_CATEGORY
        return v.strip()

    @field_validator("extracted_from_context", mode="before")
    @classmethod
    def coerce_context(cls, v: Any) -> Any:
        return v if isinstance(v, str) else ""

    def to_action_item(self, item_id: str) -> ActionItem:
        """Convert to the domain model under ``item_id``."""
        return ActionItem(
            id=item_id,
            description=self.description,
            assigned_to=self.assigned_to,
            priority=self.priority,
            deadline=self.deadline,
            status=self.status,
            category=self.category,
            extracted_from_context=self.extracted_from_context,
        )
