"""Source generation for buildconfig.

This module exports:
- JavaSourceGenerator: ResolvedProfile -> Java source text
- generate_source: convenience wrapper around the default generator
"""

from __future__ import annotations

from buildconfig_core.generator.java_generator import (
    BUILTIN_FIELD_NAMES,
    GENERATED_HEADER,
    NAME_FIELD,
    VERSION_FIELD,
    JavaConstant,
    JavaSourceGenerator,
    generate_source,
)

__all__: list[str] = [
    "JavaSourceGenerator",
    "JavaConstant",
    "generate_source",
    "GENERATED_HEADER",
    "NAME_FIELD",
    "VERSION_FIELD",
    "BUILTIN_FIELD_NAMES",
]
