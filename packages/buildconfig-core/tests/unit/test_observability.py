"""Unit tests for configure_logging."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
import structlog

from buildconfig_core.observability import configure_logging


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None, None, None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_verbose_emits_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True)
        structlog.get_logger("test").debug("compile_step_created", step="compileBuildConfig")

        captured = capsys.readouterr()
        assert "compile_step_created" in captured.err
        assert captured.out == ""
        assert logging.getLogger().level == logging.DEBUG

    def test_default_hides_info(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging()
        log = structlog.get_logger("test")
        log.info("planning_started")
        log.warning("profile_skipped", profile="test")

        err = capsys.readouterr().err
        assert "planning_started" not in err
        assert "profile_skipped" in err

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, json_output=True)
        structlog.get_logger("test").info("planning_completed", registered=2)

        err = capsys.readouterr().err
        assert '"event": "planning_completed"' in err
        assert '"registered": 2' in err
