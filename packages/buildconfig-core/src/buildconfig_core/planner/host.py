"""Host build system interface.

The planner talks to the surrounding build system only through the
BuildHost protocol:

- project metadata (name, group, version)
- lookup of compilation units and dependency targets
- step registration (idempotent by name)
- dependency registration

LocalBuildHost is an in-process implementation used by the CLI and tests.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import structlog

from buildconfig_core.errors import ResolutionError
from buildconfig_core.planner.models import BuildStep, DependencyRegistration
from buildconfig_core.planner.naming import dependency_target_name
from buildconfig_core.schemas.project import ProjectMetadata

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CompilationUnit:
    """A group of sources compiled together (e.g., "main", "test")."""

    name: str


@dataclass(frozen=True)
class DependencyTarget:
    """A host construct consuming compiled output (e.g., "compile")."""

    name: str


class BuildHost(Protocol):
    """Narrow view of the host build system used by the planner."""

    @property
    def project(self) -> ProjectMetadata: ...

    @property
    def build_dir(self) -> Path: ...

    def get_compilation_unit(self, name: str) -> CompilationUnit:
        """Raises ResolutionError if the unit does not exist."""
        ...

    def get_dependency_target(self, name: str) -> DependencyTarget:
        """Raises ResolutionError if the target does not exist."""
        ...

    def register_step(self, step: BuildStep) -> BuildStep:
        """Register a step; returns the already registered step on name reuse."""
        ...

    def add_dependency(self, target: DependencyTarget, registration: DependencyRegistration) -> None:
        ...


class LocalBuildHost:
    """In-process BuildHost backed by plain collections.

    Attributes:
        project: Project metadata.
        build_dir: Output root for generated sources and classes.
        compilation_units: Known compilation unit names.
        dependency_targets: Known dependency target names.
        steps: Registered steps by name, in registration order.
        dependencies: Registrations per dependency target name.

    Example:
        >>> host = LocalBuildHost(
        ...     project=ProjectMetadata(name="demo", version="1.0"),
        ...     build_dir=Path("build"),
        ...     compilation_units=["main", "test"],
        ... )
        >>> host.get_dependency_target("testCompile")
        DependencyTarget(name='testCompile')
    """

    def __init__(
        self,
        project: ProjectMetadata,
        build_dir: Path,
        compilation_units: Iterable[str] = ("main", "test"),
        dependency_targets: Iterable[str] | None = None,
    ) -> None:
        """Initialize the host.

        Args:
            project: Project metadata.
            build_dir: Output root.
            compilation_units: Known compilation unit names.
            dependency_targets: Known dependency target names. Derived from
                compilation_units by naming convention when None.
        """
        self._project = project
        self._build_dir = Path(build_dir)
        self.compilation_units: list[str] = list(compilation_units)
        if dependency_targets is None:
            dependency_targets = [dependency_target_name(unit) for unit in self.compilation_units]
        self.dependency_targets: list[str] = list(dependency_targets)
        self.steps: dict[str, BuildStep] = {}
        self.dependencies: dict[str, list[DependencyRegistration]] = {}
        self._log = logger.bind(component="local_build_host")

    @property
    def project(self) -> ProjectMetadata:
        return self._project

    @property
    def build_dir(self) -> Path:
        return self._build_dir

    def get_compilation_unit(self, name: str) -> CompilationUnit:
        if name not in self.compilation_units:
            raise ResolutionError(
                entity_type="compilation unit",
                entity_name=name,
                available=list(self.compilation_units),
            )
        return CompilationUnit(name)

    def get_dependency_target(self, name: str) -> DependencyTarget:
        if name not in self.dependency_targets:
            raise ResolutionError(
                entity_type="dependency target",
                entity_name=name,
                available=list(self.dependency_targets),
            )
        return DependencyTarget(name)

    def register_step(self, step: BuildStep) -> BuildStep:
        existing = self.steps.get(step.name)
        if existing is not None:
            self._log.debug("step_already_registered", step=step.name)
            return existing
        if step.depends_on is not None and step.depends_on not in self.steps:
            raise ValueError(f"Step '{step.name}' depends on unknown step '{step.depends_on}'")
        self.steps[step.name] = step
        return step

    def add_dependency(self, target: DependencyTarget, registration: DependencyRegistration) -> None:
        registrations = self.dependencies.setdefault(target.name, [])
        if registration not in registrations:
            registrations.append(registration)

    def ordered_steps(self) -> list[BuildStep]:
        """Registered steps with every step after the step it depends on.

        Registration already requires upstream steps to exist, so
        registration order is a valid execution order.
        """
        return list(self.steps.values())
