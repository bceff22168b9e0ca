"""Shared test fixtures for buildconfig-cli tests.

Provides CliRunner fixtures and buildconfig.yaml helpers
for testing CLI commands.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner
from rich.console import Console

from buildconfig_cli import output

BUILDCONFIG_YAML_FILENAME = "buildconfig.yaml"


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Route structlog to stderr with no filtering for each test."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


@pytest.fixture(autouse=True)
def wide_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep Rich from wrapping long paths and step names in test output."""
    monkeypatch.setattr(output, "console", Console(width=300, no_color=True))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture
def isolated_runner(cli_runner: CliRunner) -> Generator[CliRunner, None, None]:
    """Create a Click test runner with an isolated filesystem.

    Yields:
        CliRunner instance with isolated filesystem.
    """
    with cli_runner.isolated_filesystem():
        yield cli_runner


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


def _copy_fixture(fixtures_dir: Path, tmp_path: Path, name: str) -> Path:
    target = tmp_path / BUILDCONFIG_YAML_FILENAME
    target.write_text((fixtures_dir / name).read_text())
    return target


@pytest.fixture
def valid_buildconfig_yaml(fixtures_dir: Path, tmp_path: Path) -> Path:
    """Copy of valid_buildconfig.yaml in tmp_path, so builds land there."""
    return _copy_fixture(fixtures_dir, tmp_path, "valid_buildconfig.yaml")


@pytest.fixture
def invalid_buildconfig_yaml(fixtures_dir: Path) -> Path:
    """Path to a buildconfig.yaml missing project.name."""
    return fixtures_dir / "invalid_buildconfig.yaml"


@pytest.fixture
def partial_buildconfig_yaml(fixtures_dir: Path, tmp_path: Path) -> Path:
    """Copy of a buildconfig.yaml where only the main profile plans."""
    return _copy_fixture(fixtures_dir, tmp_path, "partial_buildconfig.yaml")


@pytest.fixture
def create_buildconfig_yaml(isolated_runner: CliRunner) -> Callable[..., Path]:
    """Factory fixture to create buildconfig.yaml files with custom content."""

    def _create(content: str, filename: str = BUILDCONFIG_YAML_FILENAME) -> Path:
        path = Path(filename)
        path.write_text(content)
        return path

    return _create
