"""Project metadata consumed during default resolution.

Group and version may be deferred: a zero-argument callable that yields
the value (or another callable) when invoked. resolve_deferred() unwraps
such values once, at finalize time, so late changes made by external
configuration are honored.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Upper bound on nested deferred values, guards against self-returning callables
MAX_DEFERRED_DEPTH = 32


def resolve_deferred(value: Any) -> str | None:
    """Unwrap a possibly deferred value to a concrete string.

    Callables are invoked repeatedly until a non-callable emerges.
    Anything that is not a string at that point is treated as absent.

    Args:
        value: A string, None, or a zero-argument callable producing either.

    Returns:
        The resolved string, or None if absent or not a string.

    Example:
        >>> resolve_deferred(lambda: lambda: "1.0")
        '1.0'
        >>> resolve_deferred(lambda: 3) is None
        True
    """
    depth = 0
    while callable(value):
        if depth >= MAX_DEFERRED_DEPTH:
            return None
        value = value()
        depth += 1
    if isinstance(value, str):
        return value
    return None


class ProjectMetadata(BaseModel):
    """Name, group, and version of the enclosing project.

    Mutable on purpose: external configuration may change group or
    version after profiles are declared, and finalize() reads them late.

    Attributes:
        name: Project name, the default application name.
        group: Project group (string, None, or deferred).
        version: Project version (string, None, or deferred).
    """

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    name: str = Field(..., min_length=1, description="Project name")
    group: Any = Field(default=None, description="Project group, possibly deferred")
    version: Any = Field(default=None, description="Project version, possibly deferred")

    def resolved_group(self) -> str | None:
        """Return the group as a string, or None."""
        return resolve_deferred(self.group)

    def resolved_version(self) -> str | None:
        """Return the version as a string, or None."""
        return resolve_deferred(self.version)
