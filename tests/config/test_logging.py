"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from orgunits import parse, set_default
from orgunits.config.logging import configure_logging
from orgunits.domain.errors import InvalidFormatError


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("orgunits").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("orgunits").level == logging.WARNING

    def test_human_mode_output(self) -> None:
        configure_logging(verbose=True, log_json=False)
        log = structlog.get_logger("orgunits.test")
        log.warning("hello world", key="val")
        # Smoke test — verify no exception; format depends on terminal

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("orgunits.test")
        log.warning("json test", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "orgunits.test"
        assert "timestamp" in parsed

    def test_default_reconfiguration_logged(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        set_default(delimiter="/")
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "orgunits.config.models"
        assert "Default org unit config set" in parsed["event"]

    def test_rejected_input_logged(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        with pytest.raises(InvalidFormatError):
            parse("a..b")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["logger"] == "orgunits.domain.unit"
        assert "a..b" in parsed["event"]

    def test_debug_suppressed_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        set_default(delimiter="/")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        root = logging.getLogger()
        assert len(root.handlers) == 1
