"""Tests for the template message envelope and language handling."""

import json

import pytest
from pydantic import ValidationError

from wacloud.messaging.whatsapp.models.languages import AVAILABLE_LANGUAGES, is_available
from wacloud.messaging.whatsapp.models.template_models import (
    Component,
    ComponentSubType,
    ComponentType,
    PayloadButtonParameter,
    TemplateLanguage,
    TemplateMessage,
    TextParameter,
)


class TestTemplateLanguage:
    def test_default_code(self):
        assert TemplateLanguage().code == "en_US"

    @pytest.mark.parametrize("code", ["en_US", "pt_BR", "es", "zh_CN", "zu"])
    def test_known_codes_are_accepted(self, code):
        assert TemplateLanguage(code=code).code == code

    @pytest.mark.parametrize("code", ["xx_YY", "EN_US", ""])
    def test_unknown_codes_are_rejected(self, code):
        with pytest.raises(ValidationError):
            TemplateLanguage(code=code)

    def test_is_available(self):
        assert is_available("en_US")
        assert not is_available("klingon")
        assert "pt_BR" in AVAILABLE_LANGUAGES


class TestTemplateMessage:
    def test_envelope_without_components(self):
        message = TemplateMessage(recipient="15551234567", name="hello_world")

        payload = message.to_dict()

        assert payload == {
            "messaging_product": "whatsapp",
            "recipient_type": "individual",
            "to": "15551234567",
            "type": "template",
            "template": {"name": "hello_world", "language": {"code": "en_US"}},
        }
        assert list(payload) == [
            "messaging_product",
            "recipient_type",
            "to",
            "type",
            "template",
        ]

    def test_envelope_with_components_keeps_order(self):
        body = Component(type=ComponentType.BODY)
        body.add_parameter(TextParameter(text="Ada"))
        button = Component(
            type=ComponentType.BUTTON,
            sub_type=ComponentSubType.QUICK_REPLY,
            index=1,
            parameters=[PayloadButtonParameter(payload="STOP")],
        )

        message = TemplateMessage(
            recipient="15551234567",
            name="welcome",
            language=TemplateLanguage(code="pt_BR"),
            components=[body, button],
        )

        template = message.to_dict()["template"]

        assert list(template) == ["name", "language", "components"]
        assert template["language"] == {"code": "pt_BR"}
        assert template["components"] == [
            {"type": "body", "parameters": [{"type": "text", "text": "Ada"}]},
            {
                "type": "button",
                "parameters": [{"type": "payload", "payload": "STOP"}],
                "sub_type": "quick_reply",
                "index": 1,
            },
        ]

    def test_envelope_is_json_serializable(self):
        message = TemplateMessage(
            recipient="15551234567",
            name="welcome",
            components=[Component(type=ComponentType.HEADER)],
        )

        assert json.loads(json.dumps(message.to_dict())) == message.to_dict()

    def test_empty_recipient_is_rejected(self):
        with pytest.raises(ValidationError):
            TemplateMessage(recipient="", name="welcome")

    def test_empty_name_is_rejected(self):
        with pytest.raises(ValidationError):
            TemplateMessage(recipient="15551234567", name="")
