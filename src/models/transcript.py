"""Transcript model produced by the transcription adapter."""

from pydantic import Field

from src.models.base import Record


class SpeakerSegment(Record):
    """A single diarized utterance."""

    speaker: str = Field(description="Speaker label, e.g. 'Speaker 1'")
    text: str = Field(description="What was said")
    timestamp: str = Field(default="", description="Start offset in seconds")
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)


class Transcript(Record):
    """Canonical transcript of a meeting recording.

    ``speakers`` may be empty when the provider returns no diarization;
    that is a valid transcript. ``summary`` is empty when summarization
    failed.
    """

    summary: str = Field(default="", description="Human-readable summary")
    text: str = Field(default="", description="Full transcript text")
    speakers: list[SpeakerSegment] = Field(default_factory=list)
    confidence: float = Field(
        default=0.0,
        ge=0.0,
        le=1.0,
        description="Provider-reported confidence, 0 when unavailable",
    )

    @property
    def has_summary(self) -> bool:
        """Check if a summary is available for extraction."""
        return bool(self.summary.strip())
