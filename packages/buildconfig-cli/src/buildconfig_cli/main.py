"""CLI entry point for buildconfig.

This module defines the main CLI group using LazyGroup pattern
so that --help does not import the generator and planner.
"""

from __future__ import annotations

import importlib
from typing import Any

import click
import rich_click as rclick

from buildconfig_cli import __version__
from buildconfig_cli.output import set_no_color

# Configure rich-click for better help formatting
rclick.rich_click.TEXT_MARKUP = "markdown"
rclick.rich_click.SHOW_ARGUMENTS = True
rclick.rich_click.GROUP_ARGUMENTS_OPTIONS = True


COMMANDS_PACKAGE = "buildconfig_cli.commands"

# Each subcommand lives in COMMANDS_PACKAGE.<name> as a function named <name>
COMMAND_NAMES = ("validate", "render", "plan", "generate")


class LazyGroup(rclick.RichGroup):
    """Rich-click group that imports a subcommand module on first use.

    Attributes:
        command_names: Subcommands resolved from ``COMMANDS_PACKAGE``.
    """

    def __init__(self, *args: Any, command_names: tuple[str, ...] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.command_names = command_names

    def list_commands(self, ctx: click.Context) -> list[str]:
        return sorted(self.command_names)

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        if cmd_name not in self.command_names:
            return None
        module = importlib.import_module(f"{COMMANDS_PACKAGE}.{cmd_name}")
        return getattr(module, cmd_name)  # type: ignore[no-any-return]


def _configure_verbose(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    from buildconfig_core.observability import configure_logging

    configure_logging(verbose=value)


@click.command(cls=LazyGroup, command_names=COMMAND_NAMES)
@click.version_option(version=__version__, prog_name="buildconfig")
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output.",
    is_eager=True,
    expose_value=False,
    callback=lambda ctx, param, value: set_no_color(value) if value else None,
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Log planning and execution details to stderr.",
    expose_value=False,
    callback=_configure_verbose,
)
def cli() -> None:
    """BuildConfig - compile-time constants for Java projects.

    Declare profiles in buildconfig.yaml and generate one constants class
    per profile, wired into the matching compilation unit.

    **Getting Started:**

    - `buildconfig validate` - Validate your configuration
    - `buildconfig render` - Print the generated source of a profile
    - `buildconfig plan` - Show the planned build steps
    - `buildconfig generate` - Write (and optionally compile) the sources
    """
    pass


if __name__ == "__main__":
    cli()
