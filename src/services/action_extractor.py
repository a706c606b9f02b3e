"""ActionItemExtractor service for extracting action items from transcripts.

Runs LLM-based extraction over the transcript summary and converts the
reply to domain models. Extraction is best-effort: any failure is logged
and reported as "no action items found" so a successful transcription
is never lost.
"""

import structlog

from src.errors import ExtractionError
from src.extraction.parser import parse_action_items
from src.extraction.prompts import ACTION_ITEM_PROMPT
from src.models.action_item import ActionItem
from src.models.transcript import Transcript
from src.services.llm_client import LLMClient

logger = structlog.get_logger()


class ActionItemExtractor:
    """Extracts action items from a meeting transcript summary using an LLM.

    Only ``transcript.summary`` is sent to the model, not the full text.
    """

    def __init__(self, llm_client: LLMClient):
        """Initialize extractor with LLM client.

        Args:
            llm_client: LLM client for text generation
        """
        self._llm_client = llm_client

    @property
    def configured(self) -> bool:
        """True when the underlying LLM client can make requests."""
        return self._llm_client.configured

    @staticmethod
    def build_prompt(transcript: Transcript) -> str:
        """Build the extraction prompt for a transcript."""
        return ACTION_ITEM_PROMPT.format(summary=transcript.summary)

    async def extract(self, transcript: Transcript) -> list[ActionItem]:
        """Extract action items from a transcript.

        Args:
            transcript: Transcript whose summary is analysed

        Returns:
            List of ActionItem domain models; empty on any failure
        """
        try:
            return await self._extract(transcript)
        except Exception as e:
            logger.error("Failed to extract action items", error=str(e))
            return []

    async def _extract(self, transcript: Transcript) -> list[ActionItem]:
        if not transcript.has_summary:
            raise ExtractionError("Transcript has no summary to extract from")

        reply = await self._llm_client.generate(self.build_prompt(transcript))
        items = parse_action_items(reply)
        logger.info("action items extracted", count=len(items))
        return items
