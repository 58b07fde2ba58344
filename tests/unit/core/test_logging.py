"""
Tests for structured logging configuration.
"""

import json
import logging

import pytest
import structlog

from planecut.core.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()
    logging.basicConfig(force=True)


@pytest.mark.unit
class TestConfigureLogging:

    def test_sets_root_level(self):
        configure_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        configure_logging(level="nonsense")
        assert logging.getLogger().level == logging.INFO

    def test_log_file(self, temp_dir):
        log_file = temp_dir / "planecut.log"
        configure_logging(json_output=True, log_file=str(log_file))

        get_logger("planecut.test").info("cut_complete", splits=3)
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = [line for line in log_file.read_text().splitlines() if line.strip()]
        record = json.loads(lines[-1])
        assert record["event"] == "cut_complete"
        assert record["splits"] == 3
        assert record["level"] == "info"

    def test_stdlib_records_use_same_renderer(self, temp_dir):
        log_file = temp_dir / "planecut.log"
        configure_logging(json_output=True, log_file=str(log_file))

        logging.getLogger("planecut.io.obj").warning("Loaded %s", "a.obj")
        for handler in logging.getLogger().handlers:
            handler.flush()

        record = json.loads(log_file.read_text().splitlines()[-1])
        assert record["event"] == "Loaded a.obj"
        assert record["level"] == "warning"
