"""Tests for WhatsApp error helpers."""

import logging

from wacloud.core.logging.logger import get_logger
from wacloud.messaging.whatsapp.utils.error_helpers import (
    WhatsAppHttpError,
    handle_whatsapp_error,
    is_authentication_error,
)


def test_http_error_without_body():
    error = WhatsAppHttpError(502)

    assert error.body == {}
    assert error.error_message is None
    assert str(error) == "HTTP 502"


def test_is_authentication_error():
    assert is_authentication_error(WhatsAppHttpError(401))
    assert not is_authentication_error(WhatsAppHttpError(400))
    assert is_authentication_error(RuntimeError("401 Unauthorized"))
    assert not is_authentication_error(RuntimeError("timeout"))


def test_handle_http_error_uses_status_code(caplog):
    caplog.set_level(logging.ERROR)
    body = {"error": {"message": "bad token", "code": 190}}

    result = handle_whatsapp_error(
        error=WhatsAppHttpError(401, body),
        operation="send template",
        recipient="15551234567",
        phone_number_id="111",
        logger=get_logger("wacloud.test", phone_number_id="111"),
        error_code="TEMPLATE_SEND_FAILED",
    )

    assert result.success is False
    assert result.error_code == "HTTP_401"
    assert result.api_response == body
    assert result.recipient == "15551234567"
    assert "CRITICAL: WhatsApp Authentication Failed" in caplog.text


def test_handle_other_error_uses_given_code():
    result = handle_whatsapp_error(
        error=RuntimeError("boom"),
        operation="send text message",
        recipient="15551234567",
        phone_number_id="111",
        logger=get_logger("wacloud.test"),
        error_code="TEXT_SEND_FAILED",
    )

    assert result.error_code == "TEXT_SEND_FAILED"
    assert result.error == "boom"
    assert result.api_response is None
