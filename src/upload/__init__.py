"""Upload validation for meeting recordings."""

from src.upload.validation import (
    ALLOWED_EXTENSIONS,
    DEFAULT_MAX_SIZE_MB,
    validate_audio_upload,
)

__all__ = ["ALLOWED_EXTENSIONS", "DEFAULT_MAX_SIZE_MB", "validate_audio_upload"]
