"""
WhatsApp messenger facade.

Single entry point for applications:
- Basic messaging: send_text
- Template messaging: send_template
- Media: upload_media, upload_template_media, get_media_info, download_media,
  delete_media

Uses composition with one shared WhatsAppClient:
- WhatsAppTemplateHandler: template message operations
- WhatsAppMediaHandler: media endpoint operations
"""

import aiohttp

from wacloud.core.config.settings import settings
from wacloud.core.logging.logger import get_logger
from wacloud.messaging.whatsapp.client.whatsapp_client import WhatsAppClient
from wacloud.messaging.whatsapp.handlers.whatsapp_media_handler import (
    WhatsAppMediaHandler,
)
from wacloud.messaging.whatsapp.handlers.whatsapp_template_handler import (
    WhatsAppTemplateHandler,
)
from wacloud.messaging.whatsapp.models.basic_models import (
    BasicTextMessage,
    MessageResult,
)
from wacloud.messaging.whatsapp.models.media_models import (
    MediaDeleteResult,
    MediaDownloadResult,
    MediaHandleResult,
    MediaInfoResult,
    MediaUploadResult,
)
from wacloud.messaging.whatsapp.models.template_models import Component
from wacloud.messaging.whatsapp.utils.error_helpers import handle_whatsapp_error


class WhatsAppMessenger:
    """
    WhatsApp Cloud API messenger for one sending phone number.

    Example:
        async with aiohttp.ClientSession() as session:
            messenger = WhatsAppMessenger.create(session)
            body = Component(type=ComponentType.BODY)
            body.add_parameter(TextParameter(text="Ada"))
            await messenger.send_template("15551234567", "welcome", "en_US", [body])
    """

    def __init__(
        self,
        client: WhatsAppClient,
        media_handler: WhatsAppMediaHandler,
        template_handler: WhatsAppTemplateHandler,
    ):
        """Initialize messenger with its handlers.

        Args:
            client: Configured WhatsApp client for API operations
            media_handler: Media handler for upload/download operations
            template_handler: Template handler for template messages
        """
        self.client = client
        self.media_handler = media_handler
        self.template_handler = template_handler
        self.logger = get_logger(__name__, phone_number_id=client.phone_number_id)

    @classmethod
    def create(
        cls,
        session: aiohttp.ClientSession,
        access_token: str | None = None,
        phone_number_id: str | None = None,
        api_version: str | None = None,
        log_bodies: bool | None = None,
    ) -> "WhatsAppMessenger":
        """Build a messenger, filling missing values from settings.

        Raises:
            ValueError: If credentials are missing from both arguments and
                settings, or the API version is unsupported
        """
        if not access_token or not phone_number_id:
            default_token, default_phone_id = settings.require_credentials()
            access_token = access_token or default_token
            phone_number_id = phone_number_id or default_phone_id

        client = WhatsAppClient(
            session=session,
            access_token=access_token,
            phone_number_id=phone_number_id,
            api_version=api_version or settings.api_version,
            log_bodies=settings.log_http_bodies if log_bodies is None else log_bodies,
        )
        return cls(
            client=client,
            media_handler=WhatsAppMediaHandler(client),
            template_handler=WhatsAppTemplateHandler(client),
        )

    @property
    def phone_number_id(self) -> str:
        return self.client.phone_number_id

    async def send_text(
        self,
        text: str,
        recipient: str,
        reply_to_message_id: str | None = None,
        disable_preview: bool = False,
    ) -> MessageResult:
        """Send text message using WhatsApp API.

        Args:
            text: Text content of the message (1-4096 characters)
            recipient: Recipient phone number
            reply_to_message_id: Optional message ID to reply to
            disable_preview: Whether to disable URL preview

        Returns:
            MessageResult with operation status and metadata
        """
        try:
            message = BasicTextMessage(
                text=text,
                recipient=recipient,
                reply_to_message_id=reply_to_message_id,
                disable_preview=disable_preview,
            )

            self.logger.debug(f"Sending text message to {recipient}: {text[:50]}...")
            response = await self.client.post_request(message.to_dict()) or {}
        except Exception as e:
            return handle_whatsapp_error(
                error=e,
                operation="send text message",
                recipient=recipient,
                phone_number_id=self.phone_number_id,
                logger=self.logger,
                error_code="TEXT_SEND_FAILED",
            )

        messages = response.get("messages") or [{}]
        message_id = messages[0].get("id")
        if not message_id:
            error_msg = f"No message ID in response for text message to {recipient}"
            self.logger.error(error_msg)
            return MessageResult(
                success=False,
                recipient=recipient,
                error=error_msg,
                error_code="NO_MESSAGE_ID",
                api_response=response,
                phone_number_id=self.phone_number_id,
            )

        self.logger.info(
            f"Text message sent successfully to {recipient}, id: {message_id}"
        )
        return MessageResult(
            success=True,
            message_id=message_id,
            recipient=recipient,
            api_response=response,
            phone_number_id=self.phone_number_id,
        )

    async def send_template(
        self,
        recipient: str,
        template_name: str,
        language_code: str = "en_US",
        components: list[Component] | None = None,
    ) -> MessageResult:
        """Send a template message built from components."""
        return await self.template_handler.send_template(
            recipient=recipient,
            template_name=template_name,
            language_code=language_code,
            components=components,
        )

    async def upload_media(
        self, file_data: bytes, media_type: str, filename: str
    ) -> MediaUploadResult:
        return await self.media_handler.upload_media(file_data, media_type, filename)

    async def upload_template_media(
        self, file_data: bytes, media_type: str, app_id: str
    ) -> MediaHandleResult:
        return await self.media_handler.upload_template_media(
            file_data, media_type, app_id
        )

    async def get_media_info(self, media_id: str) -> MediaInfoResult:
        return await self.media_handler.get_media_info(media_id)

    async def download_media(self, media_id: str) -> MediaDownloadResult:
        return await self.media_handler.download_media_by_id(media_id)

    async def delete_media(self, media_id: str) -> MediaDeleteResult:
        return await self.media_handler.delete_media(media_id)
