"""Planner models.

Steps registered with the host, dependency registrations, and the
per-profile outcome of planning.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from buildconfig_core.schemas.profile import ResolvedProfile


class ProfileState(str, Enum):
    """Planning state of a profile.

    Attributes:
        UNRESOLVED: Not yet looked up in the host
        RESOLVED: Compilation unit and dependency target found
        PLANNED: Source validated and step names derived
        REGISTERED: Steps and dependency registered with the host
        FAILED: Planning abandoned for this profile
    """

    UNRESOLVED = "unresolved"
    RESOLVED = "resolved"
    PLANNED = "planned"
    REGISTERED = "registered"
    FAILED = "failed"


class GenerateStep(BaseModel):
    """Write the generated source of one profile.

    Attributes:
        name: Unique step name.
        profile: Resolved profile to generate.
        output_dir: Profile-scoped source output directory.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["generate"] = "generate"
    name: str = Field(..., min_length=1)
    profile: ResolvedProfile
    output_dir: Path

    @property
    def depends_on(self) -> str | None:
        return None


class CompileStep(BaseModel):
    """Compile the generated sources of one profile.

    The generated class has no dependencies, so the classpath is empty.

    Attributes:
        name: Unique step name.
        depends_on: Name of the generate step that must run first.
        source_dir: Sole input directory (the generate step's output).
        destination_dir: Profile-scoped class output directory.
        classpath: External classpath, always empty.
        charset: Encoding of the generated sources.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["compile"] = "compile"
    name: str = Field(..., min_length=1)
    depends_on: str = Field(..., min_length=1)
    source_dir: Path
    destination_dir: Path
    classpath: tuple[Path, ...] = ()
    charset: str = "UTF-8"


BuildStep = GenerateStep | CompileStep


class DependencyRegistration(BaseModel):
    """Compiled output exposed as a dependency of a host target.

    Attributes:
        target: Dependency target name (e.g., "compile", "testCompile").
        producer: Name of the step producing the files.
        files: Files or directories added as the dependency.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    target: str
    producer: str
    files: tuple[Path, ...]


class ProfilePlan(BaseModel):
    """Outcome of planning one profile.

    Attributes:
        profile_name: Profile name.
        state: REGISTERED on success, FAILED otherwise.
        compilation_unit: Resolved compilation unit name.
        dependency_target: Resolved dependency target name.
        generate_step: Registered generate step name.
        compile_step: Registered compile step name.
        error: User-facing error message when FAILED.
        error_type: "resolution" or "configuration" when FAILED.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    profile_name: str
    state: ProfileState
    compilation_unit: str | None = None
    dependency_target: str | None = None
    generate_step: str | None = None
    compile_step: str | None = None
    error: str | None = None
    error_type: Literal["resolution", "configuration"] | None = None

    @property
    def registered(self) -> bool:
        return self.state == ProfileState.REGISTERED

    @property
    def failed(self) -> bool:
        return self.state == ProfileState.FAILED


class PlanResult(BaseModel):
    """Aggregated planning outcome across all profiles."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    profiles: list[ProfilePlan] = Field(default_factory=list)

    @property
    def registered(self) -> list[ProfilePlan]:
        return [p for p in self.profiles if p.registered]

    @property
    def failed(self) -> list[ProfilePlan]:
        return [p for p in self.profiles if p.failed]

    @property
    def succeeded(self) -> bool:
        """True when every profile was registered."""
        return not self.failed

    @property
    def errors(self) -> list[str]:
        return [p.error for p in self.failed if p.error]

    def get(self, profile_name: str) -> ProfilePlan | None:
        """Return the plan for a profile, or None."""
        for plan in self.profiles:
            if plan.profile_name == profile_name:
                return plan
        return None
