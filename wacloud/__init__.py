"""
wacloud - WhatsApp Cloud API client SDK

Compose and send WhatsApp Business messages, including template messages
built from typed header, body and button components.

Clean Import Interface:
- Messenger, client and template component models at top level
- Everything else via wacloud.messaging.whatsapp paths
"""

from .core.config.settings import settings
from .messaging.whatsapp import WhatsAppClient, WhatsAppHttpError, WhatsAppMessenger
from .messaging.whatsapp.models.template_models import (
    ButtonParameter,
    Component,
    ComponentSubType,
    ComponentType,
    Currency,
    CurrencyParameter,
    DateTimeFallback,
    DateTimeParameter,
    DocumentParameter,
    ImageParameter,
    InvalidFieldError,
    MediaReference,
    ParameterObject,
    PayloadButtonParameter,
    TemplateMediaType,
    TextButtonParameter,
    TextParameter,
    VideoParameter,
)

__version__ = settings.version

__all__ = [
    "WhatsAppMessenger",
    "WhatsAppClient",
    "WhatsAppHttpError",
    "InvalidFieldError",
    "Component",
    "ComponentType",
    "ComponentSubType",
    "ParameterObject",
    "TextParameter",
    "CurrencyParameter",
    "DateTimeParameter",
    "ImageParameter",
    "DocumentParameter",
    "VideoParameter",
    "ButtonParameter",
    "PayloadButtonParameter",
    "TextButtonParameter",
    "Currency",
    "DateTimeFallback",
    "MediaReference",
    "TemplateMediaType",
]
