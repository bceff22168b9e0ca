"""Configuration models for buildconfig.

This module exports:
- ClassField / FieldType: typed constant declarations
- ProjectMetadata / resolve_deferred: enclosing project metadata
- ProfileConfig / ResolvedProfile: profile builder and resolved snapshot
- ProfileRegistry: profile name -> ProfileConfig mapping
- BuildConfigSpec: buildconfig.yaml root model
"""

from __future__ import annotations

from buildconfig_core.schemas.buildconfig_spec import (
    BUILDCONFIG_FILE_ENV_VAR,
    BUILDCONFIG_FILE_NAME,
    BuildConfigSpec,
    FieldSpec,
    ProfileSpec,
    ProjectSpec,
)
from buildconfig_core.schemas.field import (
    ClassField,
    FieldType,
    escape_java_string,
    is_java_identifier,
    is_java_package_name,
)
from buildconfig_core.schemas.profile import (
    DEFAULT_CHARSET,
    DEFAULT_CLASS_NAME,
    DEFAULT_PACKAGE_NAME,
    DEFAULT_PROFILE_NAME,
    UNSPECIFIED_VERSION,
    ProfileConfig,
    ResolvedProfile,
)
from buildconfig_core.schemas.project import ProjectMetadata, resolve_deferred
from buildconfig_core.schemas.registry import ProfileRegistry

__all__: list[str] = [
    # Fields
    "ClassField",
    "FieldType",
    "escape_java_string",
    "is_java_identifier",
    "is_java_package_name",
    # Project
    "ProjectMetadata",
    "resolve_deferred",
    # Profiles
    "ProfileConfig",
    "ResolvedProfile",
    "ProfileRegistry",
    "DEFAULT_PROFILE_NAME",
    "DEFAULT_PACKAGE_NAME",
    "DEFAULT_CLASS_NAME",
    "DEFAULT_CHARSET",
    "UNSPECIFIED_VERSION",
    # Configuration file
    "BuildConfigSpec",
    "ProjectSpec",
    "ProfileSpec",
    "FieldSpec",
    "BUILDCONFIG_FILE_NAME",
    "BUILDCONFIG_FILE_ENV_VAR",
]
