"""CSV and JSON exports of a meeting's action items.

Exports are pure functions of the final meeting state: action items,
participants and the meeting title.
"""

import csv
import io
import json
import re
from datetime import UTC, datetime

from src.models.action_item import ActionItem
from src.models.participant import Participant

CSV_HEADERS = (
    "Description",
    "Assigned To",
    "Priority",
    "Status",
    "Category",
    "Deadline",
    "Context",
)

EXPORT_FORMATS = {
    "csv": "text/csv",
    "json": "application/json",
    "html": "text/html",
}


def export_filename(meeting_title: str, extension: str) -> str:
    """Build a download filename like ``weekly_standup_action_items.csv``."""
    slug = re.sub(r"[^a-z0-9]", "_", meeting_title, flags=re.IGNORECASE).lower()
    return f"{slug}_action_items.{extension}"


def export_csv(action_items: list[ActionItem]) -> str:
    """Render action items as CSV.

    Every field is quoted and embedded quotes are doubled, so
    descriptions containing commas, quotes or newlines survive a round
    trip through any CSV reader.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for item in action_items:
        writer.writerow(
            [
                item.description,
                item.assignee_name,
                item.priority.value,
                item.status.value,
                item.category,
                item.deadline or "",
                item.extracted_from_context,
            ]
        )
    return buffer.getvalue().rstrip("\n")


def export_json(
    action_items: list[ActionItem],
    participants: list[Participant],
    meeting_title: str,
    exported_at: datetime | None = None,
) -> str:
    """Render the meeting snapshot as indented JSON with an export timestamp."""
    data = {
        "meeting": {
            "title": meeting_title,
            "date": (exported_at or datetime.now(UTC)).isoformat(),
            "participants": [
                p.model_dump(mode="json", by_alias=True, exclude_none=True)
                for p in participants
            ],
            "actionItems": [
                item.model_dump(mode="json", by_alias=True, exclude_none=True)
                for item in action_items
            ],
        }
    }
    return json.dumps(data, indent=2, ensure_ascii=False)
