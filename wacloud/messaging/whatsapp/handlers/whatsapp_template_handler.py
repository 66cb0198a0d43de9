"""
WhatsApp template message handler.

Sends template messages built from typed components (header, body, button)
through the messages endpoint of the WhatsApp Cloud API.
"""

from pydantic import ValidationError

from wacloud.core.logging.logger import get_logger
from wacloud.messaging.whatsapp.client.whatsapp_client import WhatsAppClient
from wacloud.messaging.whatsapp.models.basic_models import MessageResult
from wacloud.messaging.whatsapp.models.template_models import (
    Component,
    TemplateLanguage,
    TemplateMessage,
)
from wacloud.messaging.whatsapp.utils.error_helpers import handle_whatsapp_error


class WhatsAppTemplateHandler:
    """
    Handler for WhatsApp template message operations.

    Components are validated when they are constructed, so a malformed
    component never reaches this handler; errors here come from the language
    code or the API itself.
    """

    def __init__(self, client: WhatsAppClient):
        """Initialize template handler.

        Args:
            client: Configured WhatsApp client for API operations
        """
        self.client = client
        self.logger = get_logger(__name__, phone_number_id=client.phone_number_id)

    @property
    def phone_number_id(self) -> str:
        return self.client.phone_number_id

    @staticmethod
    def _validation_error_code(error: ValidationError) -> str:
        # TemplateLanguage is validated on its own, so its errors have no
        # "language" prefix in the location
        for err in error.errors():
            if err["loc"][:1] in (("language",), ("code",)):
                return "INVALID_LANGUAGE"
        return "INVALID_TEMPLATE"

    async def send_template(
        self,
        recipient: str,
        template_name: str,
        language_code: str = "en_US",
        components: list[Component] | None = None,
    ) -> MessageResult:
        """
        Send a WhatsApp template message.

        Args:
            recipient: Recipient's phone number in E.164 format
            template_name: Name of the approved template
            language_code: Template language code (e.g. "en_US")
            components: Header, body and button components in template order

        Returns:
            MessageResult with operation status and metadata
        """
        try:
            message = TemplateMessage(
                recipient=recipient,
                name=template_name,
                language=TemplateLanguage(code=language_code),
                components=components or [],
            )
        except ValidationError as e:
            self.logger.error(f"Invalid template message '{template_name}': {e}")
            return MessageResult(
                success=False,
                recipient=recipient,
                error=str(e),
                error_code=self._validation_error_code(e),
                phone_number_id=self.phone_number_id,
            )

        payload = message.to_dict()
        self.logger.debug(f"Sending template '{template_name}' to {recipient}")

        try:
            response = await self.client.post_request(payload) or {}
        except Exception as e:
            return handle_whatsapp_error(
                error=e,
                operation=f"send template '{template_name}'",
                recipient=recipient,
                phone_number_id=self.phone_number_id,
                logger=self.logger,
                error_code="TEMPLATE_SEND_FAILED",
            )

        messages = response.get("messages") or [{}]
        message_id = messages[0].get("id")
        if not message_id:
            error_msg = f"No message ID in response for template '{template_name}'"
            self.logger.error(error_msg)
            return MessageResult(
                success=False,
                recipient=recipient,
                error=error_msg,
                error_code="NO_MESSAGE_ID",
                api_response=response,
                phone_number_id=self.phone_number_id,
            )

        self.logger.info(f"Template '{template_name}' sent successfully to {recipient}")
        return MessageResult(
            success=True,
            message_id=message_id,
            recipient=recipient,
            api_response=response,
            phone_number_id=self.phone_number_id,
        )
