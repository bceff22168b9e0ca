"""Shared pytest fixtures for buildconfig-core tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
import structlog

from buildconfig_core.planner.host import LocalBuildHost
from buildconfig_core.schemas import ProfileRegistry, ProjectMetadata


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Configure structlog to output to stdout for test capture.

    Without this, structlog may use different processors depending on
    test execution order.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,  # Important for test isolation
    )


@pytest.fixture
def project() -> ProjectMetadata:
    """Project metadata with group and version set."""
    return ProjectMetadata(name="demo", group="com.example", version="1.0")


@pytest.fixture
def registry() -> ProfileRegistry:
    """Registry with a main and a test profile.

    main declares FOO (String) and DEBUG (boolean); test only changes
    its class name.
    """
    registry = ProfileRegistry()
    registry.main.field("FOO", "String", "bar")
    registry.main.field("DEBUG", "boolean", True)
    registry.register("test").class_name = "TestConfig"
    return registry


@pytest.fixture
def host(project: ProjectMetadata, tmp_path: Path) -> LocalBuildHost:
    """Local host with main and test compilation units under tmp_path."""
    return LocalBuildHost(
        project=project,
        build_dir=tmp_path / "build",
        compilation_units=["main", "test"],
    )
