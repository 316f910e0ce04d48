import logging

import pytest

from intelliforms.logging.logger import Log


class TestLog:
    def test_renders_context_pairs(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="intelliforms"):
            Log.info("Processing started", file_name="a.txt", template="moderna")
        assert "Processing started [file_name=a.txt template=moderna]" in caplog.text

    def test_plain_message_without_context(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="intelliforms"):
            Log.warning("Templates directory not found")
        assert caplog.records[-1].getMessage() == "Templates directory not found"

    def test_configure_sets_level_once(self) -> None:
        logger = logging.getLogger("intelliforms")
        previous_level, previous_handlers = logger.level, list(logger.handlers)
        logger.handlers.clear()
        try:
            Log.configure("debug")
            Log.configure("warning")
            assert logger.level == logging.WARNING
            assert len(logger.handlers) == 1
        finally:
            logger.handlers[:] = previous_handlers
            logger.setLevel(previous_level)
