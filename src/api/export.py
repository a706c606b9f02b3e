"""Export endpoint for a meeting's action items (CSV, JSON, HTML)."""

import structlog
from fastapi import APIRouter, Depends, HTTPException, Response

from src.api.dependencies import get_renderer, get_store, load_meeting
from src.output.exporters import EXPORT_FORMATS, export_csv, export_filename, export_json
from src.output.renderer import ActionItemsRenderer
from src.store.meeting_store import MeetingStore

logger = structlog.get_logger()

router = APIRouter(prefix="/meetings", tags=["export"])


@router.get("/{meeting_id}/export/{fmt}")
async def export_action_items(
    meeting_id: str,
    fmt: str,
    store: MeetingStore = Depends(get_store),
    renderer: ActionItemsRenderer = Depends(get_renderer),
) -> Response:
    """Download the meeting's action items.

    Supported formats: ``csv``, ``json`` and ``html`` (a Word-compatible
    document grouped by priority).

    Raises:
        HTTPException: 404 for unknown meetings, 400 for unknown formats.
    """
    fmt = fmt.lower()
    if fmt not in EXPORT_FORMATS:
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported export format: {fmt}. Use one of: {', '.join(EXPORT_FORMATS)}",
        )

    meeting = load_meeting(store, meeting_id)
    if fmt == "csv":
        body = export_csv(meeting.action_items)
    elif fmt == "json":
        body = export_json(meeting.action_items, meeting.participants, meeting.title)
    else:
        body = renderer.render_html(meeting.action_items, meeting.participants, meeting.title)

    logger.info(
        "action_items_exported",
        meeting_id=meeting_id,
        format=fmt,
        count=len(meeting.action_items),
    )
    filename = export_filename(meeting.title, fmt)
    return Response(
        content=body,
        media_type=EXPORT_FORMATS[fmt],
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
