"""WhatsApp client package."""

from .whatsapp_client import (
    SUPPORTED_API_VERSIONS,
    WhatsAppClient,
    WhatsAppFormDataBuilder,
    WhatsAppUrlBuilder,
)

__all__ = [
    "SUPPORTED_API_VERSIONS",
    "WhatsAppClient",
    "WhatsAppUrlBuilder",
    "WhatsAppFormDataBuilder",
]
