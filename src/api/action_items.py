"""Action item review endpoints: add, edit and delete items of a meeting.

Edits are refused with 409 while the meeting is being transcribed or
processed; the run would otherwise publish over them.
"""

import structlog
from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from src.api.dependencies import get_store, load_meeting
from src.errors import MeetingBusyError, MeetingNotFoundError
from src.models.action_item import (
    ActionItem,
    ActionItemPriority,
    ActionItemStatus,
    NewActionItem,
)
from src.models.participant import Participant
from src.store.meeting_store import MeetingStore

logger = structlog.get_logger()

router = APIRouter(prefix="/meetings/{meeting_id}/action-items", tags=["action-items"])


class ActionItemUpdate(BaseModel):
    """Partial edit of an action item; omitted fields are left unchanged."""

    model_config = ConfigDict(populate_by_name=True)

    description: str | None = Field(default=None, min_length=1, max_length=2000)
    assigned_to: Participant | None = Field(default=None, alias="assignedTo")
    priority: ActionItemPriority | None = None
    deadline: str | None = None
    status: ActionItemStatus | None = None
    category: str | None = None
    extracted_from_context: str | None = Field(default=None, alias="extractedFromContext")


@router.post("", response_model=ActionItem, status_code=201)
async def add_action_item(
    meeting_id: str,
    item: NewActionItem,
    store: MeetingStore = Depends(get_store),
) -> ActionItem:
    """Add a manually created action item. The server assigns its id."""
    try:
        return store.add_action_item(meeting_id, item)
    except MeetingNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except MeetingBusyError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e


@router.put("/{item_id}", response_model=ActionItem)
async def update_action_item(
    meeting_id: str,
    item_id: str,
    update: ActionItemUpdate,
    store: MeetingStore = Depends(get_store),
) -> ActionItem:
    """Apply an edit to an existing action item.

    Fields sent as null explicitly (for example ``assignedTo``) are
    cleared; fields not sent keep their value.
    """
    meeting = load_meeting(store, meeting_id)
    existing = meeting.find_action_item(item_id)
    if existing is None:
        raise HTTPException(status_code=404, detail=f"Action item not found: {item_id}")

    changes = update.model_dump(exclude_unset=True)
    try:
        edited = existing.evolve(**changes)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False)) from e

    try:
        store.update_action_item(meeting_id, edited)
    except MeetingBusyError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    logger.info("action_item_updated", meeting_id=meeting_id, item_id=item_id)
    return edited


@router.delete("/{item_id}", status_code=204)
async def delete_action_item(
    meeting_id: str,
    item_id: str,
    store: MeetingStore = Depends(get_store),
) -> Response:
    """Remove an action item. Deleting an unknown item id is a no-op."""
    try:
        store.delete_action_item(meeting_id, item_id)
    except MeetingNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except MeetingBusyError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    return Response(status_code=204)
