"""Participant model for meeting attendees."""

from pydantic import Field, field_validator

from src.models.base import Record, new_id

NAME_MAX_LENGTH = 200


class Participant(Record):
    """A person who took part in a meeting.

    Action items embed a copy of the Participant they are assigned to
    rather than a reference by id. Renaming a participant afterwards does
    not alter action items that were already extracted or edited.
    """

    id: str = Field(default_factory=new_id, description="Unique within a meeting")
    name: str = Field(
        min_length=1,
        max_length=NAME_MAX_LENGTH,
        description="Display name (speaker label or person name)",
    )
    email: str | None = Field(default=None, description="Email address, if known")
    role: str | None = Field(default=None, description="Role in the meeting")

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        """Ensure name is not just whitespace."""
        if not v.strip():
            msg = "Name cannot be empty or whitespace"
            raise ValueError(msg)
        return v.strip()


def placeholder_participants() -> list[Participant]:
    """Participants seeded on every new meeting.

    Speaker diarization is not mapped to real identities, so each meeting
    starts with three generic speakers that users can assign items to.
    """
    return [
        Participant(id="1", name="Speaker 1", role="Project Manager"),
        Participant(id="2", name="Speaker 2", role="Marketing Specialist"),
        Participant(id="3", name="Speaker 3", role="Account Manager"),
    ]
