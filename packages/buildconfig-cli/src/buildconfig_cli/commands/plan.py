"""buildconfig plan command - Show the build steps planned per profile."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from buildconfig_cli import output
from buildconfig_cli.config import file_option, load_project
from buildconfig_cli.errors import EXIT_USER_ERROR

if TYPE_CHECKING:
    from buildconfig_core.planner import PlanResult
    from buildconfig_core.planner.host import LocalBuildHost


@click.command()
@file_option
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the plan as JSON.",
)
def plan(file_path: str, as_json: bool) -> None:
    """Plan generate and compile steps for every profile.

    Profiles whose compilation unit or dependency target is missing, or
    whose configuration is invalid, are reported and skipped. The command
    exits with status 1 if any profile was skipped.

    Examples:

        buildconfig plan

        buildconfig plan --json
    """
    from buildconfig_core.planner import plan_build

    _spec, registry, host = load_project(file_path)
    result = plan_build(host, registry)

    if as_json:
        output.print_json(_plan_to_dict(result, host))
    else:
        output.print_plan(result)

    if not result.succeeded:
        raise SystemExit(EXIT_USER_ERROR)


def _plan_to_dict(result: PlanResult, host: LocalBuildHost) -> dict[str, Any]:
    return {
        "profiles": [p.model_dump(mode="json") for p in result.profiles],
        "steps": [
            step.model_dump(mode="json", exclude={"profile"}) for step in host.ordered_steps()
        ],
        "dependencies": {
            target: [r.model_dump(mode="json") for r in registrations]
            for target, registrations in host.dependencies.items()
        },
    }

