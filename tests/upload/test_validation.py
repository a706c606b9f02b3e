"""Tests for uploaded audio validation."""

import pytest

from src.errors import UploadValidationError
from src.upload.validation import validate_audio_upload

MB = 1024 * 1024


class TestValidateAudioUpload:
    """Tests for validate_audio_upload."""

    @pytest.mark.parametrize(
        "filename,expected",
        [
            ("standup.mp3", ".mp3"),
            ("call.WAV", ".wav"),
            ("voice memo.m4a", ".m4a"),
            ("recording.final.mp4", ".mp4"),
        ],
    )
    def test_accepts_supported_formats(self, filename, expected):
        assert validate_audio_upload(filename, 1024) == expected

    def test_accepts_exactly_max_size(self):
        assert validate_audio_upload("big.mp3", 100 * MB) == ".mp3"

    def test_rejects_oversized(self):
        with pytest.raises(UploadValidationError, match="less than 100MB") as exc_info:
            validate_audio_upload("big.mp3", 100 * MB + 1)
        assert exc_info.value.reason == "too_large"

    def test_custom_size_limit(self):
        with pytest.raises(UploadValidationError, match="less than 5MB"):
            validate_audio_upload("clip.mp3", 6 * MB, max_size_mb=5)

    @pytest.mark.parametrize("filename", ["notes.txt", "video.mov", "noextension", "audio.mp3.exe"])
    def test_rejects_unsupported_formats(self, filename):
        with pytest.raises(UploadValidationError) as exc_info:
            validate_audio_upload(filename, 1024)
        assert exc_info.value.reason == "unsupported_format"
        assert ".mp3, .wav, .m4a, .mp4" in str(exc_info.value)

    def test_rejects_empty_file(self):
        with pytest.raises(UploadValidationError, match="empty") as exc_info:
            validate_audio_upload("silent.mp3", 0)
        assert exc_info.value.reason == "empty"

    @pytest.mark.parametrize("filename", [None, ""])
    def test_rejects_missing_filename(self, filename):
        with pytest.raises(UploadValidationError) as exc_info:
            validate_audio_upload(filename, 1024)
        assert exc_info.value.reason == "missing_filename"
