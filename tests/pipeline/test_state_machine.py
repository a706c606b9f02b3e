"""Tests for the meeting status state machine."""

import pytest

from src.errors import InvalidTransitionError
from src.models.meeting import AudioFile, Meeting, MeetingStatus
from src.models.transcript import Transcript
from src.pipeline.state_machine import (
    ALLOWED_TRANSITIONS,
    STEP_NAMES,
    can_transition,
    progress_step,
    transition,
)


@pytest.fixture
def uploaded(audio_file: AudioFile) -> Meeting:
    return Meeting(title="Standup", audio_file=audio_file)


class TestTransitionTable:
    """Tests for the allowed transitions."""

    @pytest.mark.parametrize(
        "current,target",
        [
            (MeetingStatus.UPLOADED, MeetingStatus.TRANSCRIBING),
            (MeetingStatus.TRANSCRIBING, MeetingStatus.PROCESSING),
            (MeetingStatus.TRANSCRIBING, MeetingStatus.UPLOADED),
            (MeetingStatus.PROCESSING, MeetingStatus.COMPLETED),
            (MeetingStatus.PROCESSING, MeetingStatus.UPLOADED),
        ],
    )
    def test_allowed(self, current, target):
        assert can_transition(current, target)

    @pytest.mark.parametrize(
        "current,target",
        [
            (MeetingStatus.UPLOADED, MeetingStatus.COMPLETED),
            (MeetingStatus.UPLOADED, MeetingStatus.PROCESSING),
            (MeetingStatus.TRANSCRIBING, MeetingStatus.COMPLETED),
            (MeetingStatus.COMPLETED, MeetingStatus.UPLOADED),
            (MeetingStatus.COMPLETED, MeetingStatus.TRANSCRIBING),
        ],
    )
    def test_rejected(self, current, target):
        assert not can_transition(current, target)

    def test_completed_is_terminal(self):
        assert ALLOWED_TRANSITIONS[MeetingStatus.COMPLETED] == frozenset()

    def test_every_status_has_an_entry(self):
        assert set(ALLOWED_TRANSITIONS) == set(MeetingStatus)


class TestTransition:
    """Tests for applying transitions to snapshots."""

    def test_moves_status_and_applies_changes(self, uploaded: Meeting):
        transcribing = transition(uploaded, MeetingStatus.TRANSCRIBING, error=None)
        processing = transition(
            transcribing, MeetingStatus.PROCESSING, transcript=Transcript(summary="s")
        )

        assert uploaded.status == MeetingStatus.UPLOADED
        assert transcribing.status == MeetingStatus.TRANSCRIBING
        assert processing.status == MeetingStatus.PROCESSING
        assert processing.transcript.summary == "s"

    def test_invalid_transition_raises(self, uploaded: Meeting):
        with pytest.raises(InvalidTransitionError, match="uploaded to completed"):
            transition(uploaded, MeetingStatus.COMPLETED)

    def test_invariant_violation_raises(self, uploaded: Meeting):
        """Entering processing without a transcript is rejected."""
        transcribing = transition(uploaded, MeetingStatus.TRANSCRIBING)
        with pytest.raises(InvalidTransitionError, match="cannot enter processing"):
            transition(transcribing, MeetingStatus.PROCESSING)

    def test_transcribing_without_audio_raises(self):
        meeting = Meeting(title="No audio")
        with pytest.raises(InvalidTransitionError):
            transition(meeting, MeetingStatus.TRANSCRIBING)


class TestProgressStep:
    """Tests for the four-step progress indicator."""

    @pytest.mark.parametrize(
        "status,step",
        [
            (MeetingStatus.UPLOADED, 1),
            (MeetingStatus.TRANSCRIBING, 2),
            (MeetingStatus.PROCESSING, 3),
            (MeetingStatus.COMPLETED, 4),
        ],
    )
    def test_steps(self, status, step):
        assert progress_step(status) == step

    def test_step_names(self):
        assert len(STEP_NAMES) == 4
        assert STEP_NAMES[progress_step(MeetingStatus.COMPLETED) - 1] == "Export Results"
