"""Output module for action item export (CSV, JSON, HTML)."""

from src.output.exporters import (
    CSV_HEADERS,
    EXPORT_FORMATS,
    export_csv,
    export_filename,
    export_json,
)
from src.output.renderer import ActionItemsRenderer
from src.output.schemas import ActionItemRow, ExportContext, PriorityGroup

__all__ = [
    "CSV_HEADERS",
    "EXPORT_FORMATS",
    "ActionItemRow",
    "ActionItemsRenderer",
    "ExportContext",
    "PriorityGroup",
    "export_csv",
    "export_filename",
    "export_json",
]
