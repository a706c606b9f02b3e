"""Tests for ActionItemExtractor service."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.models.action_item import ActionItemPriority, ActionItemStatus
from src.models.transcript import Transcript
from src.services.action_extractor import ActionItemExtractor
from src.services.llm_client import LLMClient, LLMClientError

# Fixtures


@pytest.fixture
def mock_llm_client():
    """Create a mock LLM client."""
    client = MagicMock(spec=LLMClient)
    client.generate = AsyncMock()
    client.configured = True
    return client


@pytest.fixture
def extractor(mock_llm_client) -> ActionItemExtractor:
    return ActionItemExtractor(mock_llm_client)


def reply(items) -> str:
    return json.dumps(items)


# Tests


class TestExtract:
    """Tests for extraction from a transcript summary."""

    async def test_extracts_items(self, extractor, mock_llm_client, standup_transcript):
        mock_llm_client.generate.return_value = reply(
            [
                {
                    "id": "AI-1",
                    "description": "Prepare the Q3 report",
                    "assignedTo": {"id": "a", "name": "Alice"},
                    "priority": "high",
                    "deadline": "2025-07-01",
                    "status": "pending",
                    "category": "Reporting",
                    "extractedFromContext": "Alice will prepare the Q3 report by 2025-07-01.",
                },
                {
                    "id": "AI-2",
                    "description": "Schedule the client demo",
                    "assignedTo": None,
                    "priority": "medium",
                    "status": "pending",
                    "category": "Sales",
                    "extractedFromContext": "Bob should schedule the client demo next week.",
                },
            ]
        )

        items = await extractor.extract(standup_transcript)

        assert [i.id for i in items] == ["AI-1", "AI-2"]
        assert items[0].priority == ActionItemPriority.HIGH
        assert items[0].assigned_to.name == "Alice"
        assert items[0].deadline == "2025-07-01"
        assert items[1].assigned_to is None
        assert items[1].status == ActionItemStatus.PENDING

    async def test_sends_only_summary(self, extractor, mock_llm_client, standup_transcript):
        """The prompt carries the summary, not the full transcript text."""
        mock_llm_client.generate.return_value = "[]"

        await extractor.extract(standup_transcript)

        prompt = mock_llm_client.generate.call_args.args[0]
        assert standup_transcript.summary in prompt
        assert standup_transcript.text not in prompt

    async def test_fenced_reply(self, extractor, mock_llm_client, standup_transcript):
        mock_llm_client.generate.return_value = (
            '```json\n[{"id": "1", "description": "Send the notes"}]\n```'
        )

        items = await extractor.extract(standup_transcript)

        assert len(items) == 1
        assert items[0].description == "Send the notes"

    async def test_empty_array(self, extractor, mock_llm_client, standup_transcript):
        mock_llm_client.generate.return_value = "[]"
        assert await extractor.extract(standup_transcript) == []


class TestExtractFailures:
    """Extraction degrades to an empty list on any failure."""

    async def test_llm_error_returns_empty(self, extractor, mock_llm_client, standup_transcript):
        mock_llm_client.generate.side_effect = LLMClientError("rate limited")
        assert await extractor.extract(standup_transcript) == []

    async def test_unexpected_error_returns_empty(
        self, extractor, mock_llm_client, standup_transcript
    ):
        mock_llm_client.generate.side_effect = RuntimeError("boom")
        assert await extractor.extract(standup_transcript) == []

    async def test_non_json_reply_returns_empty(
        self, extractor, mock_llm_client, standup_transcript
    ):
        mock_llm_client.generate.return_value = "Here are your action items: none!"
        assert await extractor.extract(standup_transcript) == []

    async def test_object_reply_returns_empty(self, extractor, mock_llm_client, standup_transcript):
        mock_llm_client.generate.return_value = '{"items": []}'
        assert await extractor.extract(standup_transcript) == []

    async def test_no_summary_skips_llm(self, extractor, mock_llm_client):
        """Without a summary there is nothing to extract from."""
        items = await extractor.extract(Transcript(text="Full text only", summary=""))

        assert items == []
        mock_llm_client.generate.assert_not_called()


class TestBuildPrompt:
    """Tests for prompt construction."""

    def test_summary_is_appended(self):
        prompt = ActionItemExtractor.build_prompt(Transcript(summary="Ship v2 on Monday."))
        assert prompt.rstrip().endswith("Ship v2 on Monday.")

    def test_summary_with_braces_is_safe(self):
        """Braces inside the summary are not treated as format fields."""
        prompt = ActionItemExtractor.build_prompt(Transcript(summary="Fix {config} loader"))
        assert "Fix {config} loader" in prompt

    def test_configured_follows_client(self, mock_llm_client):
        mock_llm_client.configured = False
        assert not ActionItemExtractor(mock_llm_client).configured
