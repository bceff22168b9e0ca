"""Java BuildConfig source generator.

This module turns a ResolvedProfile into the source of one Java class:

    // Generated by buildconfig. Do not edit.
    package com.example;

    public final class BuildConfig {
        private BuildConfig() {
        }

        public static final String NAME = "demo";
        public static final String VERSION = "1.0";
        public static final String FOO = "bar";
    }

Generation is pure and deterministic. Every field is validated before any
text is produced, so a bad field never results in a partially written file.
"""

from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from buildconfig_core.errors import ConfigurationError
from buildconfig_core.schemas.field import (
    escape_java_string,
    is_java_identifier,
    is_java_package_name,
)
from buildconfig_core.schemas.profile import ResolvedProfile

logger = logging.getLogger(__name__)

GENERATED_HEADER = "// Generated by buildconfig. Do not edit."
INDENT = "    "

# Built-in constants emitted ahead of user fields
NAME_FIELD = "NAME"
VERSION_FIELD = "VERSION"
BUILTIN_FIELD_NAMES = frozenset({NAME_FIELD, VERSION_FIELD})


@dataclass(frozen=True)
class JavaConstant:
    """One rendered `public static final` declaration."""

    java_type: str
    name: str
    literal: str

    def declaration(self) -> str:
        return f"public static final {self.java_type} {self.name} = {self.literal};"


class JavaSourceGenerator:
    """Generate BuildConfig Java sources from resolved profiles.

    Example:
        >>> generator = JavaSourceGenerator()
        >>> source = generator.generate(profile)
        >>> generator.source_path(profile)
        PurePosixPath('com/example/BuildConfig.java')
    """

    def constants(self, profile: ResolvedProfile) -> list[JavaConstant]:
        """Validate a profile and render its constants.

        Args:
            profile: Resolved profile to render.

        Returns:
            NAME, VERSION, then one constant per field in declaration order.

        Raises:
            ConfigurationError: If the package, class, charset, or any field is invalid.
        """
        if not is_java_package_name(profile.package_name):
            raise ConfigurationError(
                f"Invalid Java package name '{profile.package_name}'",
                profile_name=profile.name,
            )
        if not is_java_identifier(profile.class_name):
            raise ConfigurationError(
                f"Invalid Java class name '{profile.class_name}'",
                profile_name=profile.name,
            )
        try:
            codecs.lookup(profile.charset)
        except LookupError:
            raise ConfigurationError(
                f"Unknown charset '{profile.charset}'",
                profile_name=profile.name,
            ) from None

        constants = [
            JavaConstant("String", NAME_FIELD, f'"{escape_java_string(profile.app_name)}"'),
            JavaConstant("String", VERSION_FIELD, f'"{escape_java_string(profile.version)}"'),
        ]
        seen: set[str] = set(BUILTIN_FIELD_NAMES)

        for class_field in profile.fields:
            if not is_java_identifier(class_field.name):
                raise ConfigurationError(
                    "Field name is not a valid Java identifier",
                    profile_name=profile.name,
                    field_name=class_field.name,
                )
            if class_field.name in seen:
                raise ConfigurationError(
                    "Field name collides with another constant",
                    profile_name=profile.name,
                    field_name=class_field.name,
                )
            seen.add(class_field.name)

            try:
                constant = JavaConstant(
                    class_field.java_type(),
                    class_field.name,
                    class_field.render_literal(),
                )
            except ValueError as e:
                raise ConfigurationError(
                    str(e),
                    profile_name=profile.name,
                    field_name=class_field.name,
                ) from e
            constants.append(constant)

        return constants

    def generate(self, profile: ResolvedProfile) -> str:
        """Generate the Java source text for a profile.

        Calling this twice with equal profiles yields identical text.

        Raises:
            ConfigurationError: If the profile cannot be rendered, including
                text that the profile's charset cannot encode.
        """
        constants = self.constants(profile)

        lines = [
            GENERATED_HEADER,
            f"package {profile.package_name};",
            "",
            f"public final class {profile.class_name} {{",
            f"{INDENT}private {profile.class_name}() {{",
            f"{INDENT}}}",
            "",
        ]
        lines.extend(f"{INDENT}{constant.declaration()}" for constant in constants)
        lines.append("}")
        source = "\n".join(lines) + "\n"

        try:
            source.encode(profile.charset)
        except UnicodeEncodeError as e:
            raise ConfigurationError(
                f"Generated source cannot be encoded as {profile.charset}",
                profile_name=profile.name,
                internal_details=str(e),
            ) from e

        return source

    def source_path(self, profile: ResolvedProfile) -> PurePosixPath:
        """Path of the generated file relative to the output directory."""
        return PurePosixPath(*profile.package_name.split("."), f"{profile.class_name}.java")

    def write(self, profile: ResolvedProfile, output_dir: Path) -> Path:
        """Generate and write the source file under output_dir.

        The source is generated completely before the file is opened.

        Returns:
            Path of the written file.
        """
        source = self.generate(profile)
        target = output_dir / self.source_path(profile)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(source, encoding=profile.charset)

        logger.info("Generated %s for profile %s", target, profile.name)
        return target


def generate_source(profile: ResolvedProfile) -> str:
    """Generate Java source for a profile with the default generator."""
    return JavaSourceGenerator().generate(profile)
