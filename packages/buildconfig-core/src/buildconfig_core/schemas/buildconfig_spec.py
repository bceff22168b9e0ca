"""BuildConfigSpec root model for buildconfig.yaml.

This module defines the file-level configuration model. A spec holds the
project section (metadata plus the compilation units the local host
knows about) and one section per profile.

Example buildconfig.yaml:

    project:
      name: demo
      group: com.example
      version: "1.0"
    profiles:
      main:
        fields:
          - {name: FOO, type: String, value: bar}
      test:
        class_name: TestConfig
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

from buildconfig_core.schemas.profile import DEFAULT_PROFILE_NAME
from buildconfig_core.schemas.project import ProjectMetadata
from buildconfig_core.schemas.registry import ProfileRegistry

if TYPE_CHECKING:
    from buildconfig_core.planner.host import LocalBuildHost

# Default configuration file name
BUILDCONFIG_FILE_NAME = "buildconfig.yaml"

# Environment variable overriding the configuration file path
BUILDCONFIG_FILE_ENV_VAR = "BUILDCONFIG_FILE"

DEFAULT_BUILD_DIR = "build"
DEFAULT_SOURCE_SETS = (DEFAULT_PROFILE_NAME, "test")


class FieldSpec(BaseModel):
    """One field entry of a profile section.

    The type tag stays a plain string here; it is checked when the field
    is declared on its profile so errors can name both.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Constant name")
    type: str = Field(..., min_length=1, description="Type tag")
    value: Any = Field(default=None, description="Literal value")
    raw_type: str | None = Field(default=None, description="Java type for raw fields")


class ProfileSpec(BaseModel):
    """Profile section of buildconfig.yaml."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    package_name: str | None = None
    class_name: str | None = None
    app_name: str | None = None
    version: str | None = None
    charset: str | None = None
    fields: list[FieldSpec] = Field(default_factory=list)


class ProjectSpec(BaseModel):
    """Project section of buildconfig.yaml.

    Attributes:
        name: Project name.
        group: Project group. Non-string values count as absent.
        version: Project version. Non-string values count as absent.
        build_dir: Output root, relative to the configuration file.
        source_sets: Compilation units the local host provides.
        configurations: Dependency targets the local host provides. Derived
            from source_sets by naming convention when omitted.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Project name")
    group: Any = Field(default=None, description="Project group")
    version: Any = Field(default=None, description="Project version")
    build_dir: str = Field(default=DEFAULT_BUILD_DIR, description="Build output root")
    source_sets: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SOURCE_SETS),
        description="Compilation unit names",
    )
    configurations: list[str] | None = Field(
        default=None,
        description="Dependency target names",
    )


class BuildConfigSpec(BaseModel):
    """Root configuration model for buildconfig.yaml.

    Example:
        >>> spec = BuildConfigSpec.from_yaml("buildconfig.yaml")
        >>> registry = spec.to_registry()
        >>> host = spec.to_host(Path("."))
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    project: ProjectSpec
    profiles: dict[str, ProfileSpec] = Field(default_factory=dict)

    @classmethod
    def from_yaml(cls, path: str | Path) -> BuildConfigSpec:
        """Load and validate a BuildConfigSpec from a YAML file.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            yaml.YAMLError: If YAML syntax is invalid.
            pydantic.ValidationError: If schema validation fails.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        with path.open("r", encoding="utf-8") as f:
            data: dict[str, Any] = yaml.safe_load(f) or {}

        return cls.model_validate(data)

    def to_project(self) -> ProjectMetadata:
        """Build the ProjectMetadata for default resolution."""
        return ProjectMetadata(
            name=self.project.name,
            group=self.project.group,
            version=self.project.version,
        )

    def to_registry(self) -> ProfileRegistry:
        """Populate a ProfileRegistry from the profile sections.

        Raises:
            ConfigurationError: If a profile name is invalid.
        """
        registry = ProfileRegistry()
        for name, section in self.profiles.items():
            profile = registry.register(name)
            profile.package_name = section.package_name
            profile.class_name = section.class_name
            profile.app_name = section.app_name
            profile.version = section.version
            profile.charset = section.charset
            for entry in section.fields:
                profile.field(entry.name, entry.type, entry.value, raw_type=entry.raw_type)
        return registry

    def to_host(self, base_dir: Path | None = None) -> LocalBuildHost:
        """Build the in-process host described by the project section.

        Args:
            base_dir: Directory build_dir is relative to. Defaults to cwd.
        """
        from buildconfig_core.planner.host import LocalBuildHost

        build_dir = Path(self.project.build_dir)
        if base_dir is not None and not build_dir.is_absolute():
            build_dir = base_dir / build_dir

        return LocalBuildHost(
            project=self.to_project(),
            build_dir=build_dir,
            compilation_units=self.project.source_sets,
            dependency_targets=self.project.configurations,
        )
