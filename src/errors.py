"""Exception hierarchy for meeting processing.

Adapters raise these as far as the pipeline; the pipeline decides how a
failure changes meeting state, and the API maps them to status codes.
"""


class MeetingActionsError(Exception):
    """Base class for all application errors."""


class UploadValidationError(MeetingActionsError):
    """Raised when an uploaded file is rejected before processing.

    Attributes:
        reason: Machine-readable rejection reason
            ("missing_filename", "empty", "too_large", "unsupported_format")
    """

    def __init__(self, message: str, reason: str):
        super().__init__(message)
        self.reason = reason


class TranscriptionError(MeetingActionsError):
    """Raised when the transcription service cannot produce a transcript."""


class ExtractionError(MeetingActionsError):
    """Raised inside extraction; always degraded to an empty result."""


class InvalidTransitionError(MeetingActionsError):
    """Raised when a meeting status change is not in the transition table."""


class MeetingNotFoundError(MeetingActionsError):
    """Raised when a meeting id is not registered in the store."""

    def __init__(self, meeting_id: str):
        super().__init__(f"Meeting not found: {meeting_id}")
        self.meeting_id = meeting_id


class MeetingBusyError(MeetingActionsError):
    """Raised when a meeting has a processing run in flight.

    Starting a second run and editing action items are both refused until
    the run publishes its final state.
    """

    def __init__(self, meeting_id: str):
        super().__init__(f"Meeting {meeting_id} is being processed")
        self.meeting_id = meeting_id
