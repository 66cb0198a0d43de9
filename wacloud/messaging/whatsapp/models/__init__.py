"""WhatsApp models package."""

from .basic_models import BasicTextMessage, MessageResult
from .languages import AVAILABLE_LANGUAGES
from .media_models import (
    MediaDeleteResult,
    MediaDownloadResult,
    MediaHandleResult,
    MediaInfoResult,
    MediaType,
    MediaUploadResult,
)
from .template_models import (
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
    TemplateLanguage,
    TemplateMediaType,
    TemplateMessage,
    TextButtonParameter,
    TextParameter,
    VideoParameter,
    parse_button_parameter,
    parse_parameter,
)

__all__ = [
    "MessageResult",
    "BasicTextMessage",
    "AVAILABLE_LANGUAGES",
    "MediaType",
    "MediaUploadResult",
    "MediaInfoResult",
    "MediaDownloadResult",
    "MediaDeleteResult",
    "MediaHandleResult",
    "InvalidFieldError",
    "ComponentType",
    "ComponentSubType",
    "TemplateMediaType",
    "Currency",
    "DateTimeFallback",
    "MediaReference",
    "TextParameter",
    "CurrencyParameter",
    "DateTimeParameter",
    "ImageParameter",
    "DocumentParameter",
    "VideoParameter",
    "ParameterObject",
    "PayloadButtonParameter",
    "TextButtonParameter",
    "ButtonParameter",
    "Component",
    "TemplateLanguage",
    "TemplateMessage",
    "parse_parameter",
    "parse_button_parameter",
]
