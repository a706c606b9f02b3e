"""Meeting processing pipeline and its state machine."""

from src.pipeline.processor import MeetingPipeline
from src.pipeline.state_machine import (
    ALLOWED_TRANSITIONS,
    STEP_NAMES,
    can_transition,
    progress_step,
    transition,
)

__all__ = [
    "ALLOWED_TRANSITIONS",
    "STEP_NAMES",
    "MeetingPipeline",
    "can_transition",
    "progress_step",
    "transition",
]
