"""
WhatsApp media handler.

Wraps the Cloud API media endpoints. Content is handled in memory as bytes:
- POST /PHONE_NUMBER_ID/media (upload)
- POST /APP_ID/uploads, POST /UPLOAD_SESSION_ID (template media upload)
- GET /MEDIA_ID (get info/URL)
- GET /MEDIA_URL (download)
- DELETE /MEDIA_ID (delete)
"""

from wacloud.core.logging.logger import get_logger
from wacloud.messaging.whatsapp.client.whatsapp_client import WhatsAppClient
from wacloud.messaging.whatsapp.models.media_models import (
    MediaDeleteResult,
    MediaDownloadResult,
    MediaHandleResult,
    MediaInfoResult,
    MediaType,
    MediaUploadResult,
)
from wacloud.messaging.whatsapp.utils.error_helpers import WhatsAppHttpError


class WhatsAppMediaHandler:
    """
    Handler for WhatsApp media operations.

    Every operation returns a result model; API and transport failures are
    logged and reported through ``success``/``error``/``error_code``.
    """

    def __init__(self, client: WhatsAppClient):
        """Initialize media handler.

        Args:
            client: Configured WhatsApp client for API operations
        """
        self.client = client
        self.logger = get_logger(__name__, phone_number_id=client.phone_number_id)

    @property
    def phone_number_id(self) -> str:
        return self.client.phone_number_id

    @property
    def supported_media_types(self) -> set[str]:
        """Get supported MIME types for WhatsApp."""
        supported_types = set()
        for media_type in MediaType:
            supported_types.update(MediaType.get_supported_mime_types(media_type))
        return supported_types

    def validate_media_type(self, mime_type: str) -> bool:
        return mime_type in self.supported_media_types

    def validate_file_size(self, file_size: int, mime_type: str) -> bool:
        media_type = MediaType.from_mime_type(mime_type)
        if media_type is None:
            return True
        return file_size <= MediaType.get_max_file_size(media_type)

    @staticmethod
    def _error_code(error: Exception, default: str) -> str:
        if isinstance(error, WhatsAppHttpError):
            return f"HTTP_{error.http_status}"
        return default

    def _check_upload(self, file_size: int, mime_type: str) -> tuple[str, str] | None:
        """Return (error_code, message) when content cannot be uploaded."""
        if not self.validate_media_type(mime_type):
            return (
                "MIME_TYPE_UNSUPPORTED",
                f"Unsupported MIME type '{mime_type}'. "
                f"Supported types: {sorted(self.supported_media_types)}",
            )
        if not self.validate_file_size(file_size, mime_type):
            max_size = MediaType.get_max_file_size(MediaType.from_mime_type(mime_type))
            return (
                "FILE_SIZE_EXCEEDED",
                f"File size ({file_size} bytes) exceeds the limit "
                f"({max_size} bytes) for type {mime_type}",
            )
        return None

    async def upload_media(
        self, file_data: bytes, media_type: str, filename: str
    ) -> MediaUploadResult:
        """
        Upload media content to WhatsApp servers.

        Args:
            file_data: Media content
            media_type: MIME type, e.g. "image/png"
            filename: Filename reported to the API

        Returns:
            MediaUploadResult with the new media ID on success
        """
        file_size = len(file_data)
        rejection = self._check_upload(file_size, media_type)
        if rejection:
            error_code, error = rejection
            return MediaUploadResult(
                success=False,
                error=error,
                error_code=error_code,
                phone_number_id=self.phone_number_id,
            )

        data = {"messaging_product": "whatsapp", "type": media_type}
        files = {"file": (filename, file_data, media_type)}

        try:
            self.logger.debug(f"Uploading media {filename} ({file_size} bytes)")
            result = await self.client.post_request(
                payload=data,
                custom_url=self.client.url_builder.get_media_url(),
                files=files,
            ) or {}
        except Exception as e:
            self.logger.exception(f"Failed to upload {filename}: {e}")
            return MediaUploadResult(
                success=False,
                error=str(e),
                error_code=self._error_code(e, "UPLOAD_FAILED"),
                phone_number_id=self.phone_number_id,
            )

        media_id = result.get("id")
        if not media_id:
            return MediaUploadResult(
                success=False,
                error=f"No media ID in response for {filename}: {result}",
                error_code="NO_MEDIA_ID",
                phone_number_id=self.phone_number_id,
            )

        self.logger.info(f"Successfully uploaded {filename} (ID: {media_id})")
        return MediaUploadResult(
            success=True,
            media_id=media_id,
            file_size=file_size,
            mime_type=media_type,
            phone_number_id=self.phone_number_id,
        )

    async def upload_template_media(
        self, file_data: bytes, media_type: str, app_id: str
    ) -> MediaHandleResult:
        """
        Upload template header media through a resumable upload session.

        Opens a session on the app (POST /APP_ID/uploads), then sends the whole
        content from offset 0 (POST /UPLOAD_SESSION_ID).

        Args:
            file_data: Media content
            media_type: MIME type, e.g. "image/png"
            app_id: Meta app ID that owns the upload session

        Returns:
            MediaHandleResult with the file handle (``h``) on success
        """
        file_size = len(file_data)
        rejection = self._check_upload(file_size, media_type)
        if rejection:
            error_code, error = rejection
            return MediaHandleResult(
                success=False,
                error=error,
                error_code=error_code,
                phone_number_id=self.phone_number_id,
            )

        session_id = None
        try:
            session = await self.client.post_request(
                payload={"file_length": file_size, "file_type": media_type},
                custom_url=self.client.url_builder.get_endpoint_url(
                    f"{app_id}/uploads"
                ),
            ) or {}
            session_id = session.get("id")
            if not session_id:
                return MediaHandleResult(
                    success=False,
                    error=f"No upload session ID in response for app {app_id}: {session}",
                    error_code="NO_UPLOAD_SESSION",
                    phone_number_id=self.phone_number_id,
                )

            self.logger.debug(f"Uploading {file_size} bytes to session {session_id}")
            result = await self.client.send_request(
                endpoint=session_id,
                http_method="post",
                headers={
                    "file_offset": "0",
                    "Content-Type": "application/octet-stream",
                },
                body=file_data,
            ) or {}
        except Exception as e:
            self.logger.exception(
                f"Failed to upload template media for app {app_id}: {e}"
            )
            return MediaHandleResult(
                success=False,
                upload_session_id=session_id,
                error=str(e),
                error_code=self._error_code(e, "UPLOAD_FAILED"),
                phone_number_id=self.phone_number_id,
            )

        handle = result.get("h")
        if not handle:
            return MediaHandleResult(
                success=False,
                upload_session_id=session_id,
                error=f"No file handle in response for session {session_id}: {result}",
                error_code="NO_MEDIA_HANDLE",
                phone_number_id=self.phone_number_id,
            )

        self.logger.info(f"Template media uploaded (session: {session_id})")
        return MediaHandleResult(
            success=True,
            handle=handle,
            upload_session_id=session_id,
            file_size=file_size,
            mime_type=media_type,
            phone_number_id=self.phone_number_id,
        )

    async def get_media_info(self, media_id: str) -> MediaInfoResult:
        """Retrieve media URL and metadata using the media ID."""
        try:
            self.logger.debug(f"Fetching media info for ID: {media_id}")
            result = await self.client.get_request(endpoint=media_id)
        except Exception as e:
            self.logger.exception(f"Error getting info for media ID {media_id}: {e}")
            return MediaInfoResult(
                success=False,
                media_id=media_id,
                error=str(e),
                error_code=self._error_code(e, "INFO_RETRIEVAL_FAILED"),
                phone_number_id=self.phone_number_id,
            )

        if not result or "url" not in result:
            return MediaInfoResult(
                success=False,
                media_id=media_id,
                error=f"Invalid response for media ID {media_id}: {result}",
                error_code="INVALID_RESPONSE",
                phone_number_id=self.phone_number_id,
            )

        return MediaInfoResult(
            success=True,
            media_id=result.get("id", media_id),
            url=result["url"],
            mime_type=result.get("mime_type"),
            file_size=result.get("file_size"),
            sha256=result.get("sha256"),
            phone_number_id=self.phone_number_id,
        )

    async def download_media(
        self, url: str, media_type: str | None = None
    ) -> MediaDownloadResult:
        """
        Download media content from a media URL.

        Unsupported MIME types are let through since the Cloud API may still
        serve them.

        Args:
            url: Media URL returned by get_media_info
            media_type: Expected MIME type, used when the response has none

        Returns:
            MediaDownloadResult with the content in ``file_data``
        """
        try:
            response = await self.client.get_request_stream(url)
        except Exception as e:
            self.logger.exception(f"Error downloading media from {url}: {e}")
            return MediaDownloadResult(
                success=False,
                error=str(e),
                error_code="DOWNLOAD_FAILED",
                phone_number_id=self.phone_number_id,
            )

        try:
            if response.status != 200:
                error_text = await response.text()
                return MediaDownloadResult(
                    success=False,
                    error=f"Download failed: {response.status} - {error_text}",
                    error_code=f"HTTP_{response.status}",
                    phone_number_id=self.phone_number_id,
                )

            content_type = response.headers.get("content-type", media_type)
            data = await response.read()

            self.logger.info(f"Media downloaded from {url} ({len(data)} bytes)")
            return MediaDownloadResult(
                success=True,
                file_data=data,
                mime_type=content_type,
                file_size=len(data),
                phone_number_id=self.phone_number_id,
            )
        finally:
            response.release()

    async def download_media_by_id(self, media_id: str) -> MediaDownloadResult:
        """Resolve the media URL for an ID, then download it."""
        info = await self.get_media_info(media_id)
        if not info.success:
            return MediaDownloadResult(
                success=False,
                error=f"Failed to get media URL for ID {media_id}: {info.error}",
                error_code="MEDIA_INFO_FAILED",
                phone_number_id=self.phone_number_id,
            )
        return await self.download_media(info.url, media_type=info.mime_type)

    async def delete_media(self, media_id: str) -> MediaDeleteResult:
        """Delete uploaded media by ID."""
        try:
            result = await self.client.delete_request(endpoint=media_id) or {}
        except Exception as e:
            self.logger.exception(f"Error deleting media ID {media_id}: {e}")
            return MediaDeleteResult(
                success=False,
                media_id=media_id,
                error=str(e),
                error_code=self._error_code(e, "DELETE_FAILED"),
                phone_number_id=self.phone_number_id,
            )

        if not result.get("success"):
            return MediaDeleteResult(
                success=False,
                media_id=media_id,
                error=f"Delete not confirmed for media ID {media_id}: {result}",
                error_code="DELETE_NOT_CONFIRMED",
                phone_number_id=self.phone_number_id,
            )

        self.logger.info(f"Deleted media ID: {media_id}")
        return MediaDeleteResult(
            success=True, media_id=media_id, phone_number_id=self.phone_number_id
        )
