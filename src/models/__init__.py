"""Canonical data models for meeting processing.

This module exports all domain models used throughout the application:
- Record: Immutable base class with validated copies
- Participant: Meeting attendees
- Transcript / SpeakerSegment: Transcription output
- ActionItem / NewActionItem: Tasks extracted or added by users
- Meeting / AudioFile: The aggregate advanced by the pipeline
"""

from src.models.action_item import (
    DEFAULT_CATEGORY,
    MANUALLY_ADDED,
    ActionItem,
    ActionItemPriority,
    ActionItemStatus,
    NewActionItem,
)
from src.models.base import Record, new_id
from src.models.meeting import AudioFile, Meeting, MeetingStatus
from src.models.participant import Participant, placeholder_participants
from src.models.transcript import SpeakerSegment, Transcript

__all__ = [
    # Base
    "Record",
    "new_id",
    # Participant
    "Participant",
    "placeholder_participants",
    # Transcript
    "SpeakerSegment",
    "Transcript",
    # Action items
    "ActionItem",
    "ActionItemPriority",
    "ActionItemStatus",
    "NewActionItem",
    "DEFAULT_CATEGORY",
    "MANUALLY_ADDED",
    # Meeting
    "AudioFile",
    "Meeting",
    "MeetingStatus",
]
