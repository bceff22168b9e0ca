"""Unit tests for LocalBuildHost."""

from __future__ import annotations

from pathlib import Path

import pytest

from buildconfig_core.errors import ResolutionError
from buildconfig_core.planner.host import (
    CompilationUnit,
    DependencyTarget,
    LocalBuildHost,
)
from buildconfig_core.planner.models import (
    CompileStep,
    DependencyRegistration,
    GenerateStep,
)
from buildconfig_core.schemas import ProfileConfig, ProjectMetadata


@pytest.fixture
def generate_step(project: ProjectMetadata, tmp_path: Path) -> GenerateStep:
    return GenerateStep(
        name="generateBuildConfig",
        profile=ProfileConfig(name="main").finalize(project),
        output_dir=tmp_path / "src",
    )


class TestLookup:
    """Tests for compilation unit and dependency target lookup."""

    def test_get_compilation_unit(self, host: LocalBuildHost) -> None:
        assert host.get_compilation_unit("test") == CompilationUnit("test")

    def test_missing_compilation_unit(self, host: LocalBuildHost) -> None:
        with pytest.raises(ResolutionError) as exc_info:
            host.get_compilation_unit("integTest")

        assert exc_info.value.entity_name == "integTest"
        assert exc_info.value.available == ["main", "test"]

    def test_dependency_targets_derived_from_units(self, host: LocalBuildHost) -> None:
        assert host.dependency_targets == ["compile", "testCompile"]
        assert host.get_dependency_target("compile") == DependencyTarget("compile")

    def test_missing_dependency_target(self, project: ProjectMetadata, tmp_path: Path) -> None:
        host = LocalBuildHost(project, tmp_path, ["main", "test"], dependency_targets=["compile"])
        with pytest.raises(ResolutionError, match="Dependency target 'testCompile' not found"):
            host.get_dependency_target("testCompile")


class TestRegistration:
    """Tests for step and dependency registration."""

    def test_register_step_is_idempotent(
        self, host: LocalBuildHost, generate_step: GenerateStep
    ) -> None:
        first = host.register_step(generate_step)
        again = host.register_step(generate_step.model_copy(update={"output_dir": Path("x")}))

        assert again is first
        assert list(host.steps) == ["generateBuildConfig"]

    def test_register_step_requires_upstream(self, host: LocalBuildHost, tmp_path: Path) -> None:
        step = CompileStep(
            name="compileBuildConfig",
            depends_on="generateBuildConfig",
            source_dir=tmp_path / "src",
            destination_dir=tmp_path / "classes",
        )
        with pytest.raises(ValueError, match="unknown step"):
            host.register_step(step)

    def test_ordered_steps(
        self, host: LocalBuildHost, generate_step: GenerateStep, tmp_path: Path
    ) -> None:
        compile_step = CompileStep(
            name="compileBuildConfig",
            depends_on="generateBuildConfig",
            source_dir=tmp_path / "src",
            destination_dir=tmp_path / "classes",
        )
        host.register_step(generate_step)
        host.register_step(compile_step)

        assert [s.name for s in host.ordered_steps()] == [
            "generateBuildConfig",
            "compileBuildConfig",
        ]

    def test_add_dependency_deduplicates(self, host: LocalBuildHost, tmp_path: Path) -> None:
        registration = DependencyRegistration(
            target="compile",
            producer="compileBuildConfig",
            files=(tmp_path / "classes",),
        )
        host.add_dependency(DependencyTarget("compile"), registration)
        host.add_dependency(DependencyTarget("compile"), registration)

        assert host.dependencies == {"compile": [registration]}
