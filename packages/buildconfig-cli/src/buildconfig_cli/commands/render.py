"""buildconfig render command - Print the generated source of a profile."""

from __future__ import annotations

import click

from buildconfig_cli.config import file_option, load_project
from buildconfig_cli.errors import CLIError


@click.command()
@file_option
@click.option(
    "-p",
    "--profile",
    "profile_name",
    default="main",
    show_default=True,
    help="Profile to render.",
)
def render(file_path: str, profile_name: str) -> None:
    """Print the generated Java source of one profile to stdout.

    Examples:

        buildconfig render

        buildconfig render --profile test > TestConfig.java
    """
    from buildconfig_core.errors import ConfigurationError
    from buildconfig_core.generator import JavaSourceGenerator

    _spec, registry, host = load_project(file_path)

    profile = registry.get(profile_name)
    if profile is None:
        available = ", ".join(registry.names()) or "none"
        raise CLIError(f"Profile '{profile_name}' not found. Available: {available}")

    try:
        source = JavaSourceGenerator().generate(profile.finalize(host.project))
    except ConfigurationError as e:
        raise CLIError(e.user_message) from None

    click.echo(source, nl=False)
