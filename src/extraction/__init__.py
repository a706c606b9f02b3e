"""Action item extraction module for LLM-based extraction."""

from src.extraction.parser import parse_action_items, strip_code_fences
from src.extraction.prompts import ACTION_ITEM_PROMPT
from src.extraction.schemas import ExtractedActionItem

__all__ = [
    "ACTION_ITEM_PROMPT",
    "ExtractedActionItem",
    "parse_action_items",
    "strip_code_fences",
]
