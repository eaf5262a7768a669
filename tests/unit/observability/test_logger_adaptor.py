import pytest
from loguru import logger

from credential_sdk.observability.logger_adaptor import CredentialLogger, get_logger


@pytest.fixture
def captured_messages():
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record), level="DEBUG")
    yield messages
    logger.remove(handler_id)


def test_get_logger_is_cached():
    assert get_logger("credential_sdk.tests") is get_logger("credential_sdk.tests")


def test_default_name():
    assert get_logger().name == "credential_sdk"


def test_logger_binds_name(captured_messages):
    test_logger = get_logger("credential_sdk.tests.binding")
    assert isinstance(test_logger, CredentialLogger)

    test_logger.info("Credentials read from console input")

    record = captured_messages[-1]
    assert record["message"] == "Credentials read from console input"
    assert record["extra"]["logger_name"] == "credential_sdk.tests.binding"
    assert record["level"].name == "INFO"


@pytest.mark.parametrize("level", ["debug", "info", "warning", "error"])
def test_levels(captured_messages, level):
    getattr(get_logger("credential_sdk.tests.levels"), level)("message")
    assert captured_messages[-1]["level"].name == level.upper()
