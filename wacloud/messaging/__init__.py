"""
wacloud messaging components.

Platform implementations live in subpackages; WhatsApp Cloud API is the only
one.
"""

from .whatsapp import (
    WhatsAppClient,
    WhatsAppHttpError,
    WhatsAppMediaHandler,
    WhatsAppMessenger,
    WhatsAppTemplateHandler,
)

__all__ = [
    "WhatsAppClient",
    "WhatsAppHttpError",
    "WhatsAppMediaHandler",
    "WhatsAppMessenger",
    "WhatsAppTemplateHandler",
]
