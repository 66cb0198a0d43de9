"""
Media models for WhatsApp media operations.

MediaType carries the Cloud API's supported MIME types and size limits; the
result models wrap responses from the media endpoints:
- POST /PHONE_NUMBER_ID/media -> {"id": "<MEDIA_ID>"}
- GET /MEDIA_ID -> {"url", "mime_type", "sha256", "file_size", "id"}
- DELETE /MEDIA_ID -> {"success": true}
"""

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MediaType(Enum):
    """Supported media types for WhatsApp messages."""

    AUDIO = "audio"
    DOCUMENT = "document"
    IMAGE = "image"
    STICKER = "sticker"
    VIDEO = "video"

    @classmethod
    def get_supported_mime_types(cls, media_type: "MediaType") -> set[str]:
        """Returns set of supported MIME types for each media type."""
        supported_types = {
            cls.AUDIO: {
                "audio/aac",
                "audio/mp4",
                "audio/mpeg",
                "audio/amr",
                "audio/ogg",
            },
            cls.DOCUMENT: {
                "text/plain",
                "application/pdf",
                "application/vnd.ms-powerpoint",
                "application/msword",
                "application/vnd.ms-excel",
                "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
                "application/vnd.openxmlformats-officedocument.presentationml.presentation",
                "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            },
            cls.IMAGE: {"image/jpeg", "image/png"},
            cls.STICKER: {"image/webp"},
            cls.VIDEO: {"video/3gp", "video/mp4"},
        }
        return supported_types[media_type]

    @classmethod
    def get_max_file_size(cls, media_type: "MediaType") -> int:
        """Returns maximum file size in bytes for each media type."""
        max_sizes = {
            cls.AUDIO: 16 * 1024 * 1024,  # 16MB
            cls.DOCUMENT: 100 * 1024 * 1024,  # 100MB
            cls.IMAGE: 5 * 1024 * 1024,  # 5MB
            cls.STICKER: 500 * 1024,  # 500KB (animated), 100KB (static)
            cls.VIDEO: 16 * 1024 * 1024,  # 16MB
        }
        return max_sizes[media_type]

    @classmethod
    def from_mime_type(cls, mime_type: str) -> "MediaType | None":
        """Find the media type that accepts a MIME type, if any."""
        for media_type in cls:
            if mime_type in cls.get_supported_mime_types(media_type):
                return media_type
        return None


class MediaUploadResult(BaseModel):
    """Result of a media upload operation."""

    success: bool
    media_id: str | None = None
    file_size: int | None = None
    mime_type: str | None = None
    error: str | None = None
    error_code: str | None = None
    uploaded_at: datetime = Field(default_factory=_utcnow)
    phone_number_id: str | None = None


class MediaInfoResult(BaseModel):
    """Result of a media info retrieval operation."""

    success: bool
    media_id: str | None = None
    url: str | None = None
    mime_type: str | None = None
    file_size: int | None = None
    sha256: str | None = None
    error: str | None = None
    error_code: str | None = None
    retrieved_at: datetime = Field(default_factory=_utcnow)
    phone_number_id: str | None = None


class MediaDownloadResult(BaseModel):
    """Result of a media download operation (content kept in memory)."""

    success: bool
    file_data: bytes | None = None
    mime_type: str | None = None
    file_size: int | None = None
    error: str | None = None
    error_code: str | None = None
    downloaded_at: datetime = Field(default_factory=_utcnow)
    phone_number_id: str | None = None


class MediaDeleteResult(BaseModel):
    """Result of a media delete operation."""

    success: bool
    media_id: str | None = None
    error: str | None = None
    error_code: str | None = None
    deleted_at: datetime = Field(default_factory=_utcnow)
    phone_number_id: str | None = None


class MediaHandleResult(BaseModel):
    """Result of a resumable template media upload.

    ``handle`` is the file handle template definitions use for header media.
    """

    success: bool
    handle: str | None = None
    upload_session_id: str | None = None
    file_size: int | None = None
    mime_type: str | None = None
    error: str | None = None
    error_code: str | None = None
    uploaded_at: datetime = Field(default_factory=_utcnow)
    phone_number_id: str | None = None
