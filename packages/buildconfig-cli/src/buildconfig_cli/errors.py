"""CLI error handling for buildconfig-cli.

This module wraps buildconfig-core, YAML, and pydantic exceptions
into user-friendly messages with appropriate exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import click
from pydantic import ValidationError as PydanticValidationError

from buildconfig_cli.output import error

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails


# Exit codes following sysexits.h convention
EXIT_SUCCESS = 0
EXIT_USER_ERROR = 1  # Configuration error, failed profile
EXIT_SYSTEM_ERROR = 2  # Missing file, write failure


class CLIError(click.ClickException):
    """CLI-specific exception with exit code support.

    Attributes:
        message: User-facing error message.
        exit_code: Exit code for the CLI (default: 1).
    """

    def __init__(self, message: str, exit_code: int = EXIT_USER_ERROR) -> None:
        super().__init__(message)
        self.exit_code = exit_code

    def show(self, file: object = None) -> None:
        """Display the error message using Rich formatting."""
        error(self.format_message())


def format_pydantic_error(err: PydanticValidationError) -> str:
    """Format Pydantic validation error into user-friendly message.

    Example:
        >>> format_pydantic_error(err)
        "Validation failed:\\n  - project.name: Field required"
    """
    errors: list[ErrorDetails] = err.errors()
    lines = ["Validation failed:"]

    for e in errors:
        loc = ".".join(str(x) for x in e["loc"])
        lines.append(f"  - {loc}: {e['msg']}")

    return "\n".join(lines)


def handle_yaml_error(err: Exception, file_path: str) -> NoReturn:
    """Raise CLIError for a YAML parsing error, with line information if known."""
    error_msg = str(err)
    mark = getattr(err, "problem_mark", None)
    if mark is not None:
        error_msg = (
            f"YAML syntax error at line {mark.line + 1}, column {mark.column + 1}: "
            f"{getattr(err, 'problem', '')}"
        )

    raise CLIError(f"Invalid YAML in {file_path}: {error_msg}")


def handle_validation_error(err: PydanticValidationError, file_path: str) -> NoReturn:
    """Raise CLIError for a schema validation error."""
    formatted = format_pydantic_error(err)
    raise CLIError(f"Invalid configuration in {file_path}:\n{formatted}")


def handle_file_not_found(file_path: str) -> NoReturn:
    """Raise CLIError for a missing configuration file."""
    raise CLIError(
        f"File not found: {file_path}\n\n"
        "Use --file or the BUILDCONFIG_FILE environment variable to specify a path.",
        exit_code=EXIT_SYSTEM_ERROR,
    )
