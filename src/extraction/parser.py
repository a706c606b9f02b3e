"""Parse step between raw LLM text and ActionItem records.

Everything the model returns passes through :func:`parse_action_items`,
so the rest of the application only ever sees validated ActionItems.
Malformed replies degrade to an empty list.
"""

import json
import re

import structlog
from pydantic import ValidationError

from src.extraction.schemas import ExtractedActionItem
from src.models.action_item import ActionItem
from src.models.base import new_id

logger = structlog.get_logger()

_FENCE_RE = re.compile(r"^```[\w-]*[ \t]*\n?(.*?)\n?[ \t]*```$", re.DOTALL)


def strip_code_fences(text: str) -> str:
    """Remove a surrounding ``` or ```json fence, if any.

    Args:
        text: Raw model reply

    Returns:
        The fenced content, or the stripped input when it is not fenced
    """
    stripped = text.strip()
    match = _FENCE_RE.match(stripped)
    if match:
        return match.group(1).strip()
    return stripped


def parse_action_items(text: str) -> list[ActionItem]:
    """Parse a model reply into validated action items.

    Steps:
    1. Strip code fences
    2. Parse JSON; anything other than an array yields []
    3. Validate each element, skipping ones without a usable description
    4. Backfill missing ids and replace ids repeated within the batch

    Args:
        text: Raw model reply

    Returns:
        List of ActionItem, possibly empty
    """
    cleaned = strip_code_fences(text)
    try:
        data = json.loads(cleaned)
    except ValueError as e:
        logger.warning("action item reply is not valid JSON", error=str(e))
        return []

    if not isinstance(data, list):
        logger.warning(
            "action item reply is not a JSON array",
            received_type=type(data).__name__,
        )
        return []

    items: list[ActionItem] = []
    seen_ids: set[str] = set()
    for index, element in enumerate(data):
        if not isinstance(element, dict):
            logger.warning("skipping non-object action item", index=index)
            continue
        try:
            extracted = ExtractedActionItem.model_validate(element)
        except ValidationError as e:
            logger.warning(
                "skipping invalid action item",
                index=index,
                errors=e.error_count(),
            )
            continue

        item_id = extracted.id
        if item_id is None or item_id in seen_ids:
            item_id = new_id()
        seen_ids.add(item_id)
        items.append(extracted.to_action_item(item_id))

    return items
