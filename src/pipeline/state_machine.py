"""Meeting status state machine.

uploaded -> transcribing -> processing -> completed

A failure during transcribing or processing returns the meeting to
uploaded, from where it can be processed again. completed is terminal.
"""

from typing import Any

from pydantic import ValidationError

from src.errors import InvalidTransitionError
from src.models.meeting import Meeting, MeetingStatus

ALLOWED_TRANSITIONS: dict[MeetingStatus, frozenset[MeetingStatus]] = {
    MeetingStatus.UPLOADED: frozenset({MeetingStatus.TRANSCRIBING}),
    MeetingStatus.TRANSCRIBING: frozenset(
        {MeetingStatus.PROCESSING, MeetingStatus.UPLOADED}
    ),
    MeetingStatus.PROCESSING: frozenset(
        {MeetingStatus.COMPLETED, MeetingStatus.UPLOADED}
    ),
    MeetingStatus.COMPLETED: frozenset(),
}

# Steps of the upload -> transcribe -> extract -> export flow
PROGRESS_STEPS: dict[MeetingStatus, int] = {
    MeetingStatus.UPLOADED: 1,
    MeetingStatus.TRANSCRIBING: 2,
    MeetingStatus.PROCESSING: 3,
    MeetingStatus.COMPLETED: 4,
}

STEP_NAMES = ("Upload Audio", "Transcribe", "Extract Actions", "Export Results")


def can_transition(current: MeetingStatus, target: MeetingStatus) -> bool:
    """Check whether ``current -> target`` is in the transition table."""
    return target in ALLOWED_TRANSITIONS[current]


def transition(meeting: Meeting, target: MeetingStatus, **changes: Any) -> Meeting:
    """Move a meeting to ``target``, applying ``changes`` in the same snapshot.

    Args:
        meeting: Current snapshot
        target: Status to move to
        **changes: Other fields to set together with the status

    Returns:
        New validated Meeting snapshot

    Raises:
        InvalidTransitionError: If the transition is not allowed, or the
            resulting snapshot violates a meeting invariant
    """
    if not can_transition(meeting.status, target):
        raise InvalidTransitionError(
            f"Cannot move meeting {meeting.id} from "
            f"{meeting.status.value} to {target.value}"
        )
    try:
        return meeting.evolve(status=target, **changes)
    except ValidationError as e:
        raise InvalidTransitionError(
            f"Meeting {meeting.id} cannot enter {target.value}: {e}"
        ) from e


def progress_step(status: MeetingStatus) -> int:
    """Return the 1-based progress step shown for a status."""
    return PROGRESS_STEPS[status]
