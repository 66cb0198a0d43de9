"""
WhatsApp template message models.

Provides Pydantic v2 models for the Cloud API template "components" wire format:
- Leaf values: Currency, DateTimeFallback, MediaReference
- ParameterObject: discriminated union over text, currency, date_time, image,
  document and video parameters
- ButtonParameter: discriminated union over payload and text button parameters
- Component: one header, body or button section of a template
- TemplateMessage: the outgoing template message envelope

Every model serializes through an explicit to_dict() that builds keys in the
order the Cloud API expects.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    field_validator,
    model_validator,
)

from wacloud.messaging.whatsapp.models.languages import AVAILABLE_LANGUAGES


class InvalidFieldError(Exception):
    """Raised when a component field is not allowed for the component type."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(message)


class ComponentType(str, Enum):
    """Template component sections."""

    HEADER = "header"
    BODY = "body"
    BUTTON = "button"


class ComponentSubType(str, Enum):
    """Button sub types (only valid on button components)."""

    QUICK_REPLY = "quick_reply"
    URL = "url"


class TemplateMediaType(str, Enum):
    """Media types accepted as template parameters."""

    IMAGE = "image"
    DOCUMENT = "document"
    VIDEO = "video"


# ================================================================
# Leaf values
# ================================================================


class Currency(BaseModel):
    """Currency value.

    amount is sent as-is under ``amount_1000``; callers pass it already
    multiplied by 1000 (e.g. 100.99 USD -> 100990).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    code: str = Field(..., min_length=1, description="ISO 4217 currency code")
    amount: int = Field(..., description="Amount multiplied by 1000")
    fallback_value: str = Field(..., description="Text shown if localization fails")

    def to_dict(self) -> dict[str, Any]:
        return {
            "fallback_value": self.fallback_value,
            "code": self.code,
            "amount_1000": self.amount,
        }


class DateTimeFallback(BaseModel):
    """Date/time value rendered from its fallback string (never parsed)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    fallback_value: str = Field(..., description="Text shown for the date/time")

    def to_dict(self) -> dict[str, Any]:
        return {"fallback_value": self.fallback_value}


class MediaReference(BaseModel):
    """Media used as a template parameter.

    Either ``id`` (uploaded media) or ``link`` (hosted URL) is expected.
    ``caption`` applies to images and documents, ``filename`` to documents.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: TemplateMediaType = Field(..., description="Media type")
    id: str | None = Field(None, description="Uploaded media ID")
    link: str | None = Field(None, description="Hosted media URL")
    caption: str | None = Field(None, description="Media caption")
    filename: str | None = Field(None, description="Document filename")

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.id is not None:
            payload["id"] = self.id
        if self.link is not None:
            payload["link"] = self.link
        if self.caption is not None:
            payload["caption"] = self.caption
        if self.filename is not None:
            payload["filename"] = self.filename
        return payload


# ================================================================
# Parameter objects
# ================================================================


class TextParameter(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["text"] = "text"
    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "text": self.text}


class CurrencyParameter(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["currency"] = "currency"
    currency: Currency

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "currency": self.currency.to_dict()}


class DateTimeParameter(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["date_time"] = "date_time"
    date_time: DateTimeFallback

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "date_time": self.date_time.to_dict()}


class ImageParameter(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["image"] = "image"
    image: MediaReference

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "image": self.image.to_dict()}


class DocumentParameter(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["document"] = "document"
    document: MediaReference

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "document": self.document.to_dict()}


class VideoParameter(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["video"] = "video"
    video: MediaReference

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "video": self.video.to_dict()}


ParameterObject = Annotated[
    Union[
        TextParameter,
        CurrencyParameter,
        DateTimeParameter,
        ImageParameter,
        DocumentParameter,
        VideoParameter,
    ],
    Field(discriminator="type"),
]


# ================================================================
# Button parameters
# ================================================================


class PayloadButtonParameter(BaseModel):
    """Developer-defined payload returned when a quick reply button is tapped."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["payload"] = "payload"
    payload: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "payload": self.payload}


class TextButtonParameter(BaseModel):
    """Text appended to a URL button."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["text"] = "text"
    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "text": self.text}


ButtonParameter = Annotated[
    Union[PayloadButtonParameter, TextButtonParameter],
    Field(discriminator="type"),
]

ComponentParameter = Union[ParameterObject, ButtonParameter]

_parameter_adapter: TypeAdapter[ParameterObject] = TypeAdapter(ParameterObject)
_button_parameter_adapter: TypeAdapter[ButtonParameter] = TypeAdapter(ButtonParameter)


def parse_parameter(data: dict[str, Any]) -> ParameterObject:
    """Build the matching ParameterObject variant from its wire dict."""
    return _parameter_adapter.validate_python(data)


def parse_button_parameter(data: dict[str, Any]) -> ButtonParameter:
    """Build the matching ButtonParameter variant from its wire dict."""
    return _button_parameter_adapter.validate_python(data)


# ================================================================
# Component
# ================================================================


class Component(BaseModel):
    """Template component (header, body or button).

    sub_type and index are only accepted on button components; a button
    component without an index gets index 0. Parameters keep insertion order.

    type, sub_type and index are fixed once the component is built; only the
    parameter list changes afterwards.

    Raises:
        InvalidFieldError: If sub_type or index is set on a non-button component
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    type: ComponentType = Field(..., frozen=True, description="Component type")
    sub_type: ComponentSubType | None = Field(
        None, frozen=True, description="Button sub type"
    )
    index: int | None = Field(None, ge=0, frozen=True, description="Button position")
    parameters: list[ComponentParameter] = Field(
        default_factory=list, description="Component parameters"
    )

    @model_validator(mode="before")
    @classmethod
    def default_button_index(cls, data: Any) -> Any:
        if (
            isinstance(data, dict)
            and data.get("type") == ComponentType.BUTTON
            and data.get("index") is None
        ):
            return {**data, "index": 0}
        return data

    @model_validator(mode="after")
    def validate_button_only_fields(self) -> "Component":
        if self.type != ComponentType.BUTTON:
            if self.sub_type is not None:
                raise InvalidFieldError(
                    "sub_type", "sub_type is not required when type is not button"
                )
            if self.index is not None:
                raise InvalidFieldError(
                    "index", "index is not required when type is not button"
                )
        return self

    def add_parameter(self, parameter: ComponentParameter) -> "Component":
        """Append a parameter (duplicates allowed) and return the component."""
        self.parameters.append(parameter)
        return self

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "type": self.type.value,
            "parameters": [parameter.to_dict() for parameter in self.parameters],
        }
        if self.type == ComponentType.BUTTON:
            if self.sub_type is not None:
                payload["sub_type"] = self.sub_type.value
            payload["index"] = self.index
        return payload


# ================================================================
# Template message envelope
# ================================================================


class TemplateLanguage(BaseModel):
    """Template language configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    code: str = Field(default="en_US", description="Template language code")

    @field_validator("code")
    @classmethod
    def validate_language_code(cls, v: str) -> str:
        """Validate the code against the Cloud API template languages."""
        if v not in AVAILABLE_LANGUAGES:
            raise ValueError(f"Unsupported template language code: {v}")
        return v


class TemplateMessage(BaseModel):
    """Template message sent to the messages endpoint."""

    recipient: str = Field(..., min_length=1, description="Recipient phone number")
    name: str = Field(..., min_length=1, max_length=512, description="Template name")
    language: TemplateLanguage = Field(
        default_factory=TemplateLanguage, description="Template language"
    )
    components: list[Component] = Field(
        default_factory=list, description="Template components"
    )

    def to_dict(self) -> dict[str, Any]:
        template: dict[str, Any] = {
            "name": self.name,
            "language": {"code": self.language.code},
        }
        if self.components:
            template["components"] = [
                component.to_dict() for component in self.components
            ]

        return {
            "messaging_product": "whatsapp",
            "recipient_type": "individual",
            "to": self.recipient,
            "type": "template",
            "template": template,
        }
