"""Transcription adapter for the Deepgram speech-to-text service.

Transcription is a two-phase call:

1. The raw audio bytes are posted to the recognition endpoint, which
   returns the transcript text, a confidence score and, when available,
   per-utterance diarization.
2. The transcript text is posted to the summarization endpoint.

A failed recognition call raises TranscriptionError. A failed
summarization call only leaves the summary empty.
"""

from typing import Any

import httpx
import structlog

from src.config import settings
from src.errors import TranscriptionError
from src.models.meeting import AudioFile
from src.models.transcript import SpeakerSegment, Transcript

logger = structlog.get_logger()


def _score(value: Any) -> float:
    """Coerce a provider confidence to [0, 1], defaulting to 0."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return 0.0
    return min(max(float(value), 0.0), 1.0)


class TranscriptionAdapter:
    """Adapter normalizing Deepgram responses into Transcript records.

    Uses a single httpx.AsyncClient with a bounded timeout so a stalled
    provider surfaces as TranscriptionError instead of hanging the
    pipeline.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout_seconds: float | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize with credentials and endpoint.

        Args:
            api_key: Deepgram API key. Falls back to settings.
            base_url: API root (e.g. https://api.deepgram.com/v1).
                      Falls back to settings.
            timeout_seconds: Per-request timeout. Falls back to settings.
            client: Optional httpx client for dependency injection.
        """
        self._api_key = api_key or settings.deepgram_api_key
        self._base_url = (base_url or settings.deepgram_base_url).rstrip("/")
        self._timeout = timeout_seconds or settings.request_timeout_seconds
        self._client = client

    @property
    def configured(self) -> bool:
        """True when an API key is available."""
        return bool(self._api_key)

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self._timeout))
        return self._client

    def _headers(self, content_type: str) -> dict[str, str]:
        return {
            "Authorization": f"Token {self._api_key}",
            "Content-Type": content_type,
        }

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def transcribe(self, audio: AudioFile) -> Transcript:
        """Transcribe and summarize an audio file.

        Args:
            audio: Audio payload with its declared content type

        Returns:
            Transcript with summary, text, speaker segments and confidence

        Raises:
            TranscriptionError: If the service is not configured, the
                recognition request fails or times out, the provider
                returns a non-success status, or the payload is malformed
        """
        if not self._api_key:
            raise TranscriptionError(
                "Transcription service is not configured. "
                "Set the DEEPGRAM_API_KEY environment variable."
            )

        payload = await self._recognize(audio)
        alternative = self._first_alternative(payload)

        text = alternative.get("transcript")
        if not isinstance(text, str):
            raise TranscriptionError(
                "Malformed transcription response: missing transcript text"
            )

        summary = await self._summarize(text)

        transcript = Transcript(
            summary=summary,
            text=text,
            speakers=self._speaker_segments(payload),
            confidence=_score(alternative.get("confidence")),
        )
        logger.info(
            "transcription complete",
            filename=audio.filename,
            characters=len(transcript.text),
            speaker_segments=len(transcript.speakers),
            has_summary=transcript.has_summary,
        )
        return transcript

    async def _recognize(self, audio: AudioFile) -> dict[str, Any]:
        """POST the raw audio to the recognition endpoint."""
        content_type = audio.content_type or settings.default_audio_content_type
        logger.info(
            "starting transcription",
            filename=audio.filename,
            content_type=content_type,
            size_bytes=audio.size,
        )
        try:
            response = await self._get_client().post(
                f"{self._base_url}/listen",
                content=audio.data,
                headers=self._headers(content_type),
            )
        except httpx.TimeoutException as e:
            raise TranscriptionError(
                f"Transcription timed out after {self._timeout:g} seconds"
            ) from e
        except httpx.HTTPError as e:
            raise TranscriptionError(f"Transcription request failed: {e}") from e

        if not response.is_success:
            raise TranscriptionError(
                "Failed to transcribe audio: "
                f"{response.status_code} {response.reason_phrase}".rstrip()
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise TranscriptionError(
                "Malformed transcription response: body is not JSON"
            ) from e
        if not isinstance(payload, dict):
            raise TranscriptionError(
                "Malformed transcription response: expected a JSON object"
            )
        return payload

    @staticmethod
    def _first_alternative(payload: dict[str, Any]) -> dict[str, Any]:
        """Return results.channels[0].alternatives[0] or raise."""
        try:
            alternative = payload["results"]["channels"][0]["alternatives"][0]
        except (KeyError, IndexError, TypeError) as e:
            raise TranscriptionError(
                "Malformed transcription response: no transcript alternatives"
            ) from e
        if not isinstance(alternative, dict):
            raise TranscriptionError(
                "Malformed transcription response: alternative is not an object"
            )
        return alternative

    async def _summarize(self, text: str) -> str:
        """POST the transcript text to the summarization endpoint.

        Returns:
            Summary text, or an empty string on any failure
        """
        try:
            response = await self._get_client().post(
                f"{self._base_url}/read",
                params={"language": "en", "summarize": "true"},
                json={"text": text},
                headers=self._headers("application/json"),
            )
            response.raise_for_status()
            summary = response.json()["results"]["summary"]["text"]
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.warning("summarization failed, continuing without summary", error=str(e))
            return ""

        if not isinstance(summary, str):
            logger.warning("summarization returned non-text summary")
            return ""
        return summary

    @staticmethod
    def _speaker_segments(payload: dict[str, Any]) -> list[SpeakerSegment]:
        """Map results.utterances to speaker segments, if present.

        Diarization is best-effort; anything unexpected yields fewer
        segments rather than an error.
        """
        results = payload.get("results")
        utterances = results.get("utterances") if isinstance(results, dict) else None
        if not isinstance(utterances, list):
            return []

        segments: list[SpeakerSegment] = []
        for utterance in utterances:
            if not isinstance(utterance, dict):
                continue
            speaker = utterance.get("speaker")
            start = utterance.get("start")
            segments.append(
                SpeakerSegment(
                    speaker=f"Speaker {speaker}" if speaker is not None else "Unknown",
                    text=str(utterance.get("transcript") or ""),
                    timestamp=str(start) if start is not None else "",
                    confidence=_score(utterance.get("confidence")),
                )
            )
        return segments
