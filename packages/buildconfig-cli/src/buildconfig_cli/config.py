"""Configuration loading shared by buildconfig commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click
import yaml
from pydantic import ValidationError as PydanticValidationError

from buildconfig_cli.errors import (
    CLIError,
    handle_file_not_found,
    handle_validation_error,
    handle_yaml_error,
)

if TYPE_CHECKING:
    from buildconfig_core.planner.host import LocalBuildHost
    from buildconfig_core.schemas import BuildConfigSpec, ProfileRegistry

DEFAULT_FILE = "./buildconfig.yaml"


def file_option(func: click.decorators.FC) -> click.decorators.FC:
    """Add the shared -f/--file option (env: BUILDCONFIG_FILE)."""
    return click.option(
        "-f",
        "--file",
        "file_path",
        type=click.Path(exists=False, dir_okay=False),
        default=DEFAULT_FILE,
        envvar="BUILDCONFIG_FILE",
        show_envvar=True,
        help="Path to buildconfig.yaml [default: ./buildconfig.yaml]",
    )(func)


def load_spec(file_path: str) -> BuildConfigSpec:
    """Load buildconfig.yaml, converting failures into CLIError.

    Raises:
        CLIError: If the file is missing or invalid.
    """
    # Import here to avoid heavy imports at CLI startup
    from buildconfig_core.schemas import BuildConfigSpec

    try:
        return BuildConfigSpec.from_yaml(file_path)
    except FileNotFoundError:
        handle_file_not_found(file_path)
    except yaml.YAMLError as e:
        handle_yaml_error(e, file_path)
    except PydanticValidationError as e:
        handle_validation_error(e, file_path)


def load_project(file_path: str) -> tuple[BuildConfigSpec, ProfileRegistry, LocalBuildHost]:
    """Load buildconfig.yaml and build its registry and local host.

    The build directory is resolved relative to the configuration file.

    Raises:
        CLIError: If the file is missing, invalid, or declares a bad profile name.
    """
    from buildconfig_core.errors import ConfigurationError

    spec = load_spec(file_path)
    try:
        registry = spec.to_registry()
    except ConfigurationError as e:
        raise CLIError(e.user_message) from None

    host = spec.to_host(Path(file_path).resolve().parent)
    return spec, registry, host
