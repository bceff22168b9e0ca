"""Build-graph planning for buildconfig.

This module exports:
- BuildGraphPlanner / plan_build: derive and register steps per profile
- BuildHost / LocalBuildHost: host build system interface and in-process host
- StepExecutor: run registered steps (write sources, invoke javac)
- Naming helpers for step and dependency target names
"""

from __future__ import annotations

from buildconfig_core.planner.executor import (
    ExecutionReport,
    StepExecutor,
    StepOutcome,
    StepStatus,
)
from buildconfig_core.planner.host import (
    BuildHost,
    CompilationUnit,
    DependencyTarget,
    LocalBuildHost,
)
from buildconfig_core.planner.models import (
    BuildStep,
    CompileStep,
    DependencyRegistration,
    GenerateStep,
    PlanResult,
    ProfilePlan,
    ProfileState,
)
from buildconfig_core.planner.naming import (
    CLASSES_DIR_NAME,
    SOURCES_DIR_NAME,
    compile_step_name,
    dependency_target_name,
    generate_step_name,
    step_name,
)
from buildconfig_core.planner.planner import BuildGraphPlanner, plan_build

__all__: list[str] = [
    # Planner
    "BuildGraphPlanner",
    "plan_build",
    "PlanResult",
    "ProfilePlan",
    "ProfileState",
    # Steps
    "BuildStep",
    "GenerateStep",
    "CompileStep",
    "DependencyRegistration",
    # Host
    "BuildHost",
    "LocalBuildHost",
    "CompilationUnit",
    "DependencyTarget",
    # Execution
    "StepExecutor",
    "StepOutcome",
    "StepStatus",
    "ExecutionReport",
    # Naming
    "step_name",
    "generate_step_name",
    "compile_step_name",
    "dependency_target_name",
    "SOURCES_DIR_NAME",
    "CLASSES_DIR_NAME",
]
