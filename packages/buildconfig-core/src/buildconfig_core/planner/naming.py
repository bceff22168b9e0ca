"""Naming conventions for BuildConfig steps and host entities.

- main profile:   generateBuildConfig / compileBuildConfig, target "compile"
- other profiles: generate<Name>BuildConfig / compile<Name>BuildConfig,
                  target "<name>Compile"
"""

from __future__ import annotations

from buildconfig_core.schemas.profile import DEFAULT_PROFILE_NAME

GENERATE_PREFIX = "generate"
COMPILE_PREFIX = "compile"
STEP_SUFFIX = "BuildConfig"

# Dependency target of the main compilation unit
DEFAULT_DEPENDENCY_TARGET = "compile"
DEPENDENCY_TARGET_SUFFIX = "Compile"

# Profile-scoped output roots below the host build directory
SOURCES_DIR_NAME = "buildConfigSources"
CLASSES_DIR_NAME = "buildConfigClasses"


def capitalize(name: str) -> str:
    """Upper-case the first character only ("integTest" -> "IntegTest")."""
    return name[:1].upper() + name[1:]


def step_name(prefix: str, profile_name: str, suffix: str = STEP_SUFFIX) -> str:
    """Derive a step name unique to the profile.

    Example:
        >>> step_name("generate", "main")
        'generateBuildConfig'
        >>> step_name("compile", "test")
        'compileTestBuildConfig'
    """
    if profile_name == DEFAULT_PROFILE_NAME:
        return f"{prefix}{suffix}"
    return f"{prefix}{capitalize(profile_name)}{suffix}"


def generate_step_name(profile_name: str) -> str:
    return step_name(GENERATE_PREFIX, profile_name)


def compile_step_name(profile_name: str) -> str:
    return step_name(COMPILE_PREFIX, profile_name)


def dependency_target_name(unit_name: str) -> str:
    """Dependency target fed by a compilation unit.

    Example:
        >>> dependency_target_name("main")
        'compile'
        >>> dependency_target_name("test")
        'testCompile'
    """
    if unit_name == DEFAULT_PROFILE_NAME:
        return DEFAULT_DEPENDENCY_TARGET
    return f"{unit_name}{DEPENDENCY_TARGET_SUFFIX}"
