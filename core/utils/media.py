"""Media file utilities."""

from pathlib import PurePath

DEFAULT_CONTENT_TYPE = "application/octet-stream"

MIME_TYPES = {
    ".mp4": "video/mp4",
    ".mkv": "video/x-matroska",
    ".webm": "video/webm",
    ".avi": "video/x-msvideo",
    ".mov": "video/quicktime",
    ".m4v": "video/x-m4v",
    ".mp3": "audio/mpeg",
    ".wav": "audio/wav",
    ".flac": "audio/flac",
    ".m4a": "audio/mp4",
    ".aac": "audio/aac",
    ".ogg": "audio/ogg",
    ".opus": "audio/opus",
}


def resolve_content_type(file_name: str | PurePath) -> str:
    """Map a file name to its MIME type by extension, case-insensitively."""
    suffix = PurePath(file_name).suffix.lower()
    return MIME_TYPES.get(suffix, DEFAULT_CONTENT_TYPE)
