"""Custom exception hierarchy for buildconfig-core.

This module defines the exception classes used throughout buildconfig:
- BuildConfigError: Base exception for all buildconfig errors
- ConfigurationError: Malformed or missing profile/field data
- ResolutionError: A compilation unit or dependency target is missing
- StepExecutionError: A registered build step failed while executing

User-facing messages name the offending profile, field, or host entity.
Technical details are logged internally via structlog.
"""

from __future__ import annotations

import structlog

logger = structlog.get_logger(__name__)


class BuildConfigError(Exception):
    """Base exception for buildconfig.

    Args:
        user_message: Message safe to display to the user.
        internal_details: Optional technical details. Logged, never shown.

    Example:
        >>> raise BuildConfigError(
        ...     "Generation failed",
        ...     internal_details="template rendered 0 bytes",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message

        if internal_details:
            logger.error(
                "buildconfig_error",
                error_type=self.__class__.__name__,
                user_message=user_message,
                internal_details=internal_details,
            )


class ConfigurationError(BuildConfigError):
    """Raised when profile or field configuration is invalid.

    Use this exception when:
    - A field declares an unknown type tag
    - A field, class, or package name is not a valid Java identifier
    - A literal value cannot be rendered for its declared type
    - The configuration file cannot be parsed

    Attributes:
        profile_name: Profile the error belongs to (if known).
        field_name: Field the error belongs to (if known).
        file_path: Configuration file the error was read from (if known).

    Example:
        >>> raise ConfigurationError(
        ...     "Value is not a valid int literal",
        ...     profile_name="test",
        ...     field_name="RETRIES",
        ... )
        # User sees: "Value is not a valid int literal (profile 'test', field 'RETRIES')"
    """

    def __init__(
        self,
        user_message: str,
        *,
        profile_name: str | None = None,
        field_name: str | None = None,
        file_path: str | None = None,
        internal_details: str | None = None,
    ) -> None:
        context_parts: list[str] = []
        if file_path:
            context_parts.append(f"in {file_path}")
        if profile_name:
            context_parts.append(f"profile '{profile_name}'")
        if field_name:
            context_parts.append(f"field '{field_name}'")

        if context_parts:
            full_message = f"{user_message} ({', '.join(context_parts)})"
        else:
            full_message = user_message

        super().__init__(full_message, internal_details=internal_details)

        self.profile_name = profile_name
        self.field_name = field_name
        self.file_path = file_path


class ResolutionError(BuildConfigError):
    """Raised when a host entity required by a profile does not exist.

    Always includes the list of available entities for actionable feedback.

    Attributes:
        entity_type: Kind of host entity ("compilation unit", "dependency target").
        entity_name: Name that was looked up.
        profile_name: Profile that needed the entity (if known).
        available: Names the host does know about.

    Example:
        >>> raise ResolutionError(
        ...     entity_type="compilation unit",
        ...     entity_name="integration",
        ...     available=["main", "test"],
        ... )
        # User sees: "Compilation unit 'integration' not found. Available: main, test"
    """

    def __init__(
        self,
        entity_type: str,
        entity_name: str,
        *,
        profile_name: str | None = None,
        available: list[str] | None = None,
        internal_details: str | None = None,
    ) -> None:
        available = available or []
        available_str = ", ".join(available) if available else "none"
        target = f" for profile '{profile_name}'" if profile_name else ""
        user_message = (
            f"{entity_type.capitalize()} '{entity_name}' not found{target}. "
            f"Available: {available_str}"
        )

        super().__init__(user_message, internal_details=internal_details)

        self.entity_type = entity_type
        self.entity_name = entity_name
        self.profile_name = profile_name
        self.available = available


class StepExecutionError(BuildConfigError):
    """Raised when a registered generate or compile step fails to run.

    Attributes:
        step_name: Name of the failing step (e.g., "compileTestBuildConfig").
    """

    def __init__(
        self,
        step_name: str,
        message: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        super().__init__(f"Step '{step_name}' failed: {message}", internal_details=internal_details)
        self.step_name = step_name
