"""Tests for structured logging setup."""

import logging

from idea_scout.utils.logging import StructuredFormatter, setup_logger


class TestStructuredFormatter:
    """Test suite for StructuredFormatter."""

    def test_appends_extra_fields(self):
        formatter = StructuredFormatter("%(levelname)s | %(message)s")
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "Search done", None, None)
        record.query = "study app"
        record.results = 3

        assert formatter.format(record) == "INFO | Search done | query=study app results=3"

    def test_plain_message_without_extras(self):
        formatter = StructuredFormatter("%(levelname)s | %(message)s")
        record = logging.LogRecord("test", logging.WARNING, __file__, 1, "No results", None, None)

        assert formatter.format(record) == "WARNING | No results"


class TestSetupLogger:
    """Test suite for setup_logger."""

    def test_single_handler_per_logger(self):
        logger = setup_logger("idea_scout.tests.single_handler", level="DEBUG")
        again = setup_logger("idea_scout.tests.single_handler", level="DEBUG")

        assert logger is again
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_records_not_repeated_by_root_handler(self):
        logger = setup_logger("idea_scout.tests.no_propagate", level="INFO")
        root_records = []

        class _Collect(logging.Handler):
            def emit(self, record):
                root_records.append(record)

        root_handler = _Collect()
        logging.getLogger().addHandler(root_handler)
        try:
            logger.info("Search done")
        finally:
            logging.getLogger().removeHandler(root_handler)

        assert logger.propagate is False
        assert root_records == []
