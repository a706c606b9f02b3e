"""In-memory meeting store."""

from src.store.meeting_store import MeetingStore

__all__ = ["MeetingStore"]
