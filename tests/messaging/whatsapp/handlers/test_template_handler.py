"""Tests for WhatsAppTemplateHandler."""

import pytest

from conftest import API_URL, TEST_PHONE_ID, FakeResponse
from wacloud.messaging.whatsapp.handlers.whatsapp_template_handler import (
    WhatsAppTemplateHandler,
)
from wacloud.messaging.whatsapp.models.template_models import (
    Component,
    ComponentSubType,
    ComponentType,
    PayloadButtonParameter,
    TextParameter,
)

SEND_RESPONSE = {
    "messaging_product": "whatsapp",
    "contacts": [{"input": "15551234567", "wa_id": "15551234567"}],
    "messages": [{"id": "wamid.HBgL"}],
}


@pytest.fixture
def handler(client) -> WhatsAppTemplateHandler:
    return WhatsAppTemplateHandler(client)


@pytest.mark.asyncio
async def test_send_template_posts_envelope(handler, fake_session):
    fake_session.queue(FakeResponse(200, SEND_RESPONSE))
    body = Component(type=ComponentType.BODY).add_parameter(TextParameter(text="Ada"))
    button = Component(
        type=ComponentType.BUTTON,
        sub_type=ComponentSubType.QUICK_REPLY,
        parameters=[PayloadButtonParameter(payload="OK")],
    )

    result = await handler.send_template(
        "15551234567", "welcome", "en_US", [body, button]
    )

    assert result.success is True
    assert result.message_id == "wamid.HBgL"
    assert result.recipient == "15551234567"
    assert result.phone_number_id == TEST_PHONE_ID
    assert result.api_response == SEND_RESPONSE

    call = fake_session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == f"{API_URL}/{TEST_PHONE_ID}/messages"
    assert call["json"] == {
        "messaging_product": "whatsapp",
        "recipient_type": "individual",
        "to": "15551234567",
        "type": "template",
        "template": {
            "name": "welcome",
            "language": {"code": "en_US"},
            "components": [
                {"type": "body", "parameters": [{"type": "text", "text": "Ada"}]},
                {
                    "type": "button",
                    "parameters": [{"type": "payload", "payload": "OK"}],
                    "sub_type": "quick_reply",
                    "index": 0,
                },
            ],
        },
    }


@pytest.mark.asyncio
async def test_send_template_without_components(handler, fake_session):
    fake_session.queue(FakeResponse(200, SEND_RESPONSE))

    result = await handler.send_template("15551234567", "hello_world")

    assert result.success is True
    assert "components" not in fake_session.calls[0]["json"]["template"]


@pytest.mark.asyncio
async def test_invalid_language_fails_without_request(handler, fake_session):
    result = await handler.send_template("15551234567", "welcome", "xx_XX")

    assert result.success is False
    assert result.error_code == "INVALID_LANGUAGE"
    assert fake_session.calls == []


@pytest.mark.asyncio
async def test_invalid_template_fails_without_request(handler, fake_session):
    result = await handler.send_template("15551234567", "")

    assert result.success is False
    assert result.error_code == "INVALID_TEMPLATE"
    assert fake_session.calls == []


@pytest.mark.asyncio
async def test_http_error_becomes_failed_result(handler, fake_session):
    error_body = {"error": {"message": "Invalid OAuth access token", "code": 190}}
    fake_session.queue(FakeResponse(401, error_body))

    result = await handler.send_template("15551234567", "welcome")

    assert result.success is False
    assert result.error_code == "HTTP_401"
    assert result.api_response == error_body
    assert "Invalid OAuth access token" in result.error


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [{"messaging_product": "whatsapp"}, {"messages": []}, {"messages": [{}]}, ""],
)
async def test_missing_message_id(handler, fake_session, body):
    fake_session.queue(FakeResponse(200, body))

    result = await handler.send_template("15551234567", "welcome")

    assert result.success is False
    assert result.error_code == "NO_MESSAGE_ID"
