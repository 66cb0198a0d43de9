"""
WhatsApp Cloud API messaging.

Usage:
    from wacloud.messaging.whatsapp import WhatsAppClient, WhatsAppMessenger
    from wacloud.messaging.whatsapp.models import Component, ComponentType
"""

from .client import WhatsAppClient, WhatsAppFormDataBuilder, WhatsAppUrlBuilder
from .handlers import WhatsAppMediaHandler, WhatsAppTemplateHandler
from .messenger import WhatsAppMessenger
from .utils import WhatsAppHttpError

__all__ = [
    "WhatsAppClient",
    "WhatsAppUrlBuilder",
    "WhatsAppFormDataBuilder",
    "WhatsAppMessenger",
    "WhatsAppMediaHandler",
    "WhatsAppTemplateHandler",
    "WhatsAppHttpError",
]
