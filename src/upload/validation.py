"""Validation of uploaded audio before a meeting is created."""

from pathlib import Path

from src.errors import UploadValidationError

ALLOWED_EXTENSIONS = (".mp3", ".wav", ".m4a", ".mp4")
DEFAULT_MAX_SIZE_MB = 100


def validate_audio_upload(
    filename: str | None,
    size_bytes: int,
    max_size_mb: int = DEFAULT_MAX_SIZE_MB,
    allowed_extensions: tuple[str, ...] = ALLOWED_EXTENSIONS,
) -> str:
    """Check an uploaded audio file's name and size.

    Args:
        filename: Name of the uploaded file
        size_bytes: Size of the uploaded content
        max_size_mb: Maximum accepted size in megabytes
        allowed_extensions: Accepted extensions, lowercase with leading dot

    Returns:
        The normalized (lowercase) extension

    Raises:
        UploadValidationError: With a user-facing message and a reason of
            "missing_filename", "empty", "too_large" or "unsupported_format"
    """
    if not filename:
        raise UploadValidationError("Filename is required", reason="missing_filename")

    if size_bytes > max_size_mb * 1024 * 1024:
        raise UploadValidationError(
            f"File size must be less than {max_size_mb}MB", reason="too_large"
        )

    ext = Path(filename).suffix.lower()
    if ext not in allowed_extensions:
        raise UploadValidationError(
            "Please upload a file with one of these formats: "
            f"{', '.join(allowed_extensions)}",
            reason="unsupported_format",
        )

    if size_bytes == 0:
        raise UploadValidationError("File is empty", reason="empty")

    return ext
