"""buildconfig-core: BuildConfig class generation and build-graph planning.

This package provides:
- ProfileRegistry / ProfileConfig: declarative profile configuration
- JavaSourceGenerator: ResolvedProfile -> Java constants class
- BuildGraphPlanner: per-profile generate/compile steps wired into a host
- BuildConfigSpec: buildconfig.yaml loading
"""

from __future__ import annotations

__version__ = "0.1.0"

# Error types
from buildconfig_core.errors import (
    BuildConfigError,
    ConfigurationError,
    ResolutionError,
    StepExecutionError,
)

# Source generation
from buildconfig_core.generator import JavaSourceGenerator, generate_source

# Planning
from buildconfig_core.planner import (
    BuildGraphPlanner,
    BuildHost,
    LocalBuildHost,
    PlanResult,
    ProfilePlan,
    ProfileState,
    StepExecutor,
    plan_build,
)

# Schema models
from buildconfig_core.schemas import (
    BuildConfigSpec,
    ClassField,
    FieldType,
    ProfileConfig,
    ProfileRegistry,
    ProjectMetadata,
    ResolvedProfile,
    resolve_deferred,
)

__all__ = [
    "__version__",
    # Errors
    "BuildConfigError",
    "ConfigurationError",
    "ResolutionError",
    "StepExecutionError",
    # Generation
    "JavaSourceGenerator",
    "generate_source",
    # Planning
    "BuildGraphPlanner",
    "plan_build",
    "BuildHost",
    "LocalBuildHost",
    "PlanResult",
    "ProfilePlan",
    "ProfileState",
    "StepExecutor",
    # Schema models
    "BuildConfigSpec",
    "ClassField",
    "FieldType",
    "ProfileConfig",
    "ProfileRegistry",
    "ProjectMetadata",
    "ResolvedProfile",
    "resolve_deferred",
]
