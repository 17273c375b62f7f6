"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from eralabel.config.logging import configure_from_settings, configure_logging
from eralabel.config.settings import EraLabelSettings
from eralabel.domain.language import Language


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("eralabel")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("eralabel").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("eralabel").level == logging.WARNING

    def test_human_mode_output(self) -> None:
        configure_logging(verbose=True, log_json=False)
        log = structlog.get_logger("eralabel.test")
        log.warning("hello world", key="val")

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("eralabel.test")
        log.warning("json test", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "eralabel.test"
        assert "timestamp" in parsed

    def test_language_fallback_logged_as_json(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)

        Language.from_code("zz")

        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert "zz" in parsed["event"]
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "eralabel.domain.language"

    def test_debug_suppressed_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)

        Language.from_code("zz")

        captured = capfd.readouterr()
        assert captured.err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        root = logging.getLogger()
        assert len(root.handlers) == 1


class TestConfigureFromSettings:
    def test_uses_settings_flags(
        self, clean_env: None, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_from_settings(EraLabelSettings(verbose=True, log_json=True))
        assert logging.getLogger("eralabel").level == logging.DEBUG

        structlog.get_logger("eralabel.test").info("from settings")

        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "from settings"
        assert parsed["level"] == "info"

    def test_quiet_settings(self, clean_env: None) -> None:
        configure_from_settings(EraLabelSettings())
        assert logging.getLogger("eralabel").level == logging.WARNING
