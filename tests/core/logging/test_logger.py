"""Tests for the context-aware logger."""

import logging

import pytest

from wacloud.core.logging.context import (
    clear_phone_context,
    get_current_phone_context,
    set_phone_context,
)
from wacloud.core.logging.logger import (
    CompactFormatter,
    ContextLogger,
    get_logger,
    setup_logging,
)


def test_message_is_prefixed_with_phone_id(caplog):
    caplog.set_level(logging.INFO)
    logger = get_logger("wacloud.test", phone_number_id="111")

    logger.info("hello")

    assert caplog.records[-1].getMessage() == "[P:111] hello"


def test_no_prefix_without_phone_id(caplog):
    caplog.set_level(logging.INFO)

    get_logger("wacloud.test").info("hello")

    assert caplog.records[-1].getMessage() == "hello"


def test_context_variable_overrides_bound_phone(caplog):
    caplog.set_level(logging.INFO)
    logger = get_logger("wacloud.test", phone_number_id="111")

    set_phone_context("222")
    logger.warning("hi")

    assert get_current_phone_context() == "222"
    assert caplog.records[-1].getMessage() == "[P:222] hi"

    clear_phone_context()
    assert get_current_phone_context() is None


def test_bind_returns_new_logger():
    logger = get_logger("wacloud.test", phone_number_id="111")

    bound = logger.bind(phone_number_id="333")

    assert isinstance(bound, ContextLogger)
    assert bound is not logger
    assert bound.phone_number_id == "333"
    assert logger.phone_number_id == "111"


def test_compact_formatter_shortens_package_names():
    formatter = CompactFormatter("%(name)s %(message)s")
    record = logging.LogRecord(
        "wacloud.messaging.whatsapp.client.whatsapp_client",
        logging.INFO,
        __file__,
        1,
        "msg",
        None,
        None,
    )

    assert formatter.format(record) == "client.whatsapp_client msg"


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_dev_writes_log_file(tmp_path, restore_root_logging):
    setup_logging(level="debug", mode="DEV", log_dir=str(tmp_path))

    logging.getLogger("wacloud.test").info("to file")
    for handler in logging.getLogger().handlers:
        handler.flush()

    log_files = list(tmp_path.glob("wacloud_*.log"))
    assert len(log_files) == 1
    assert "to file" in log_files[0].read_text(encoding="utf-8")
    assert logging.getLogger().level == logging.DEBUG


def test_setup_logging_prod_is_console_only(tmp_path, restore_root_logging):
    setup_logging(level="bogus", mode="PROD", log_dir=str(tmp_path))

    assert list(tmp_path.iterdir()) == []
    assert logging.getLogger().level == logging.INFO
