"""WhatsApp utility functions and helpers."""

from wacloud.messaging.whatsapp.utils.error_helpers import (
    WhatsAppHttpError,
    handle_whatsapp_error,
    is_authentication_error,
)

__all__ = [
    "WhatsAppHttpError",
    "handle_whatsapp_error",
    "is_authentication_error",
]
