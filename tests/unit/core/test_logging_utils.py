"""Unit tests for logging utilities."""

import logging

import pytest
from rocketapi.core.common.logging_utils import (
    ApiKeyRedactionFilter,
    get_logger,
    install_api_key_redaction_filter,
    redact,
)

from tests.mocks.rocketapi_mocks import TEST_TOKEN


class TestApiKeyRedactionFilter:
    def test_sanitize_string(self) -> None:
        filter_instance = ApiKeyRedactionFilter([TEST_TOKEN])

        result = filter_instance._sanitize(f"Authorization: Token {TEST_TOKEN}")

        assert TEST_TOKEN not in result
        assert result == "Authorization: Token ***"

    def test_sanitize_nested_containers(self) -> None:
        filter_instance = ApiKeyRedactionFilter([TEST_TOKEN])

        result = filter_instance._sanitize(
            {"headers": [TEST_TOKEN, "other"], "n": 1}
        )

        assert result == {"headers": ["***", "other"], "n": 1}

    def test_filter_rewrites_record(self) -> None:
        filter_instance = ApiKeyRedactionFilter([TEST_TOKEN])
        record = logging.LogRecord(
            "rocketapi", logging.INFO, __file__, 1, "token=%s", (TEST_TOKEN,), None
        )

        assert filter_instance.filter(record) is True
        assert record.getMessage() == "token=***"


def test_install_filter_masks_token_in_output(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("rocketapi.test.redaction")
    install_api_key_redaction_filter(TEST_TOKEN, logger=logger)

    with caplog.at_level(logging.INFO, logger="rocketapi.test.redaction"):
        logger.info("sending with %s", TEST_TOKEN)

    assert TEST_TOKEN not in caplog.text
    assert "sending with ***" in caplog.text


def test_install_filter_twice_extends_existing() -> None:
    logger = logging.getLogger("rocketapi.test.redaction.twice")

    first = install_api_key_redaction_filter("token-one", logger=logger)
    second = install_api_key_redaction_filter(["token-two"], logger=logger)

    assert first is second
    assert first.api_keys == {"token-one", "token-two"}


@pytest.mark.parametrize(
    ("value", "expected"),
    [("", ""), ("short", "***"), ("abcdefghij", "ab***ij")],
)
def test_redact(value: str, expected: str) -> None:
    assert redact(value) == expected


def test_structured_logger_goes_through_stdlib(caplog: pytest.LogCaptureFixture) -> None:
    logger = get_logger("rocketapi.test.structured")

    with caplog.at_level(logging.DEBUG, logger="rocketapi.test.structured"):
        logger.debug("dispatch", method="instagram/search", counter=3)

    assert "event='dispatch'" in caplog.text
    assert "method='instagram/search'" in caplog.text
    assert "counter=3" in caplog.text
