"""Jinja2-based template renderer for the action items document."""

from datetime import UTC, datetime
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, select_autoescape

from src.models.action_item import ActionItem
from src.models.participant import Participant
from src.output.schemas import ExportContext

TEMPLATE_DIR = Path(__file__).parent / "templates"


class ActionItemsRenderer:
    """Render a meeting's action items as an HTML document.

    Items are grouped by priority (high, medium, low). The document opens
    in Word or any browser.
    """

    def __init__(self, template_dir: str | Path = TEMPLATE_DIR):
        """Initialize renderer with template directory.

        Args:
            template_dir: Path to directory containing .j2 templates.
                          Defaults to the templates bundled with this package.
        """
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["html", "htm"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render_html(
        self,
        action_items: list[ActionItem],
        participants: list[Participant],
        meeting_title: str,
        exported_at: datetime | None = None,
        template_name: str = "action_items",
    ) -> str:
        """Render the action items document.

        Args:
            action_items: Final action items of the meeting
            participants: Meeting participants
            meeting_title: Title shown in the heading
            exported_at: Export timestamp, defaults to now (UTC)
            template_name: Base name of template (without .html.j2)

        Returns:
            Rendered HTML string

        Raises:
            TemplateNotFound: If template file doesn't exist
        """
        context = ExportContext.build(
            action_items,
            participants,
            meeting_title,
            exported_at or datetime.now(UTC),
        )
        return self.render_context(context, template_name)

    def render_context(
        self,
        context: ExportContext,
        template_name: str = "action_items",
    ) -> str:
        """Render a prepared ExportContext."""
        template = self.env.get_template(f"{template_name}.html.j2")
        return template.render(context.model_dump())


__all__ = ["ActionItemsRenderer", "TemplateNotFound"]
