"""Profile models for buildconfig.

A profile describes one generated BuildConfig class and the compilation
unit it belongs to. Two shapes exist:

- ProfileConfig: mutable builder populated during configuration
- ResolvedProfile: immutable snapshot after default resolution

Defaults are applied by ProfileConfig.finalize(), never earlier:
- package_name: profile value, else project group, else DEFAULT_PACKAGE_NAME
- class_name: profile value, else DEFAULT_CLASS_NAME
- app_name: profile value, else project name
- version: profile value, else project version, else UNSPECIFIED_VERSION
- charset: profile value, else DEFAULT_CHARSET
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from buildconfig_core.errors import ConfigurationError
from buildconfig_core.schemas.field import ClassField, FieldType
from buildconfig_core.schemas.project import ProjectMetadata

# Name of the conventional default profile
DEFAULT_PROFILE_NAME = "main"

# Package used when neither the profile nor the project group names one.
# Named after this project, not a reverse-DNS namespace.
DEFAULT_PACKAGE_NAME = "buildconfig"
DEFAULT_CLASS_NAME = "BuildConfig"
DEFAULT_CHARSET = "UTF-8"

# Version used when neither the profile nor the project defines one
UNSPECIFIED_VERSION = "unspecified"

# Profile names double as compilation unit names and step name fragments
PROFILE_NAME_PATTERN = r"^[a-zA-Z][a-zA-Z0-9_]*$"


class ResolvedProfile(BaseModel):
    """Immutable profile snapshot with every default applied.

    Safe for repeated, pure source generation.

    Attributes:
        name: Profile name.
        package_name: Java package of the generated class.
        class_name: Simple name of the generated class.
        app_name: Value of the NAME constant.
        version: Value of the VERSION constant.
        charset: Encoding of the generated source file.
        fields: User-declared fields in declaration order.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., pattern=PROFILE_NAME_PATTERN)
    package_name: str
    class_name: str
    app_name: str
    version: str
    charset: str
    fields: tuple[ClassField, ...] = ()

    @property
    def is_default(self) -> bool:
        """True for the conventional main profile."""
        return self.name == DEFAULT_PROFILE_NAME


class ProfileConfig(BaseModel):
    """Mutable configuration for one profile.

    Passed to external setup code. Repeated configuration of the same
    profile accumulates fields; re-declaring a field replaces its value
    but keeps its original position.

    Example:
        >>> profile = ProfileConfig(name="main")
        >>> profile.package_name = "com.example"
        >>> profile.field("FOO", "String", "bar")
        >>> profile.field("DEBUG", "boolean", True)
        >>> [f.name for f in profile.fields.values()]
        ['FOO', 'DEBUG']
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    name: str = Field(..., pattern=PROFILE_NAME_PATTERN, description="Profile name")
    package_name: str | None = Field(default=None, description="Java package name")
    class_name: str | None = Field(default=None, description="Generated class name")
    app_name: str | None = Field(default=None, description="Application name constant")
    version: str | None = Field(default=None, description="Version constant")
    charset: str | None = Field(default=None, description="Source file encoding")
    fields: dict[str, ClassField] = Field(default_factory=dict, description="Declared fields")

    def field(
        self,
        name: str,
        type: str | FieldType,
        value: Any = None,
        *,
        raw_type: str | None = None,
    ) -> ClassField:
        """Declare (or re-declare) a typed constant.

        Args:
            name: Constant name.
            type: Type tag (String, boolean, int, long, raw).
            value: Literal value.
            raw_type: Java type expression, required for raw fields.

        Returns:
            The stored ClassField.

        Raises:
            ConfigurationError: If name or type tag is empty or not a string.
                Unknown tags and bad literals are reported at generation.
        """
        try:
            class_field = ClassField(name=name, type=type, value=value, raw_type=raw_type)
        except PydanticValidationError as e:
            details = "; ".join(err["msg"] for err in e.errors())
            raise ConfigurationError(
                f"Invalid field declaration: {details}",
                profile_name=self.name,
                field_name=name,
            ) from e

        # dict assignment keeps the original insertion position
        self.fields[name] = class_field
        return class_field

    def snapshot(self) -> ProfileConfig:
        """Return a deep copy detached from later mutation."""
        return self.model_copy(deep=True)

    def finalize(self, project: ProjectMetadata) -> ResolvedProfile:
        """Apply default resolution against project metadata.

        Args:
            project: Metadata of the enclosing project.

        Returns:
            Immutable ResolvedProfile.
        """
        return ResolvedProfile(
            name=self.name,
            package_name=self.package_name or project.resolved_group() or DEFAULT_PACKAGE_NAME,
            class_name=self.class_name or DEFAULT_CLASS_NAME,
            app_name=self.app_name or project.name,
            version=self.version or project.resolved_version() or UNSPECIFIED_VERSION,
            charset=self.charset or DEFAULT_CHARSET,
            fields=tuple(self.fields.values()),
        )
