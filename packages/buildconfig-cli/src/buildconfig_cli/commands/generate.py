"""buildconfig generate command - Write generated sources, optionally compiling them."""

from __future__ import annotations

import click

from buildconfig_cli.config import file_option, load_project
from buildconfig_cli.errors import EXIT_USER_ERROR
from buildconfig_cli.output import print_failed_profiles, print_report


@click.command()
@file_option
@click.option(
    "--compile/--no-compile",
    "include_compile",
    default=False,
    show_default=True,
    help="Also compile the generated sources with javac.",
)
@click.option(
    "--javac",
    default="javac",
    show_default=True,
    help="javac executable used with --compile.",
)
def generate(file_path: str, include_compile: bool, javac: str) -> None:
    """Plan every profile, then run its generate (and compile) steps.

    Sources land in <build_dir>/buildConfigSources/<profile> and classes
    in <build_dir>/buildConfigClasses/<profile>. Skipped profiles and
    failed steps do not stop the others, but make the command exit with
    status 1.

    Examples:

        buildconfig generate

        buildconfig generate --compile
    """
    from buildconfig_core.planner import StepExecutor, plan_build

    _spec, registry, host = load_project(file_path)
    result = plan_build(host, registry)
    print_failed_profiles(result)

    report = StepExecutor(host, javac=javac).run(include_compile=include_compile)
    print_report(report, show_skipped=include_compile)

    if not result.succeeded or not report.succeeded:
        raise SystemExit(EXIT_USER_ERROR)
