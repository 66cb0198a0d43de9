"""
Basic message models for WhatsApp messaging.

Pydantic schemas shared by every messaging operation: the MessageResult
returned by send operations and the BasicTextMessage schema for send_text.
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MessageResult(BaseModel):
    """Result of a messaging operation.

    Standard response model for all send operations.
    """

    success: bool
    message_id: str | None = None
    recipient: str | None = None
    error: str | None = None
    error_code: str | None = None
    api_response: dict[str, Any] | None = None
    timestamp: datetime = Field(default_factory=_utcnow)
    phone_number_id: str | None = None


class BasicTextMessage(BaseModel):
    """Basic text message schema for send_text operations."""

    text: str = Field(
        ..., min_length=1, max_length=4096, description="Text content of the message"
    )
    recipient: str = Field(..., min_length=1, description="Recipient phone number")
    reply_to_message_id: str | None = Field(
        None, description="Message ID to reply to (creates a thread)"
    )
    disable_preview: bool = Field(
        False, description="Disable URL preview for links in the message"
    )

    def to_dict(self) -> dict[str, Any]:
        has_url = "http://" in self.text or "https://" in self.text
        payload: dict[str, Any] = {
            "messaging_product": "whatsapp",
            "recipient_type": "individual",
            "to": self.recipient,
            "type": "text",
            "text": {
                "body": self.text,
                "preview_url": has_url and not self.disable_preview,
            },
        }
        if self.reply_to_message_id:
            payload["context"] = {"message_id": self.reply_to_message_id}
        return payload
