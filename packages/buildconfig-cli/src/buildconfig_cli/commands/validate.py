"""buildconfig validate command - Validate buildconfig.yaml configuration."""

from __future__ import annotations

import click

from buildconfig_cli.config import file_option, load_project
from buildconfig_cli.errors import EXIT_USER_ERROR
from buildconfig_cli.output import error, success


@click.command()
@file_option
def validate(file_path: str) -> None:
    """Validate buildconfig.yaml configuration.

    Checks the file against the schema, then finalizes every profile and
    renders its source without touching the build directory.

    Examples:

        buildconfig validate

        buildconfig validate --file path/to/buildconfig.yaml
    """
    from buildconfig_core.errors import ConfigurationError
    from buildconfig_core.generator import JavaSourceGenerator

    _spec, registry, host = load_project(file_path)
    generator = JavaSourceGenerator()

    failures = 0
    for profile in registry.snapshot():
        try:
            generator.generate(profile.finalize(host.project))
        except ConfigurationError as e:
            error(e.user_message)
            failures += 1

    if failures:
        raise SystemExit(EXIT_USER_ERROR)

    success(f"Configuration valid ({len(registry)} profile(s))")
