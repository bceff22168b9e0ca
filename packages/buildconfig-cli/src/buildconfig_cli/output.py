"""Rich console output for buildconfig-cli.

Message helpers escape their text, so profile names and field values
containing square brackets are printed literally. Plans and step
outcomes are rendered here so that commands only decide what to show.
"""

from __future__ import annotations

import json
import os
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from buildconfig_core.planner import ExecutionReport, PlanResult


def create_console(no_color: bool = False) -> Console:
    """Create a console, plain when no_color is set or NO_COLOR is exported."""
    plain = no_color or os.environ.get("NO_COLOR") is not None
    return Console(force_terminal=False if plain else None, no_color=plain)


console = create_console()


def success(message: str, **kwargs: Any) -> None:
    """Print a success message with a green checkmark.

    Example:
        >>> success("Configuration valid")
        ✓ Configuration valid
    """
    console.print(f"[green]✓[/green] {escape(message)}", **kwargs)


def error(message: str, **kwargs: Any) -> None:
    """Print an error message with a red cross."""
    console.print(f"[red]✗[/red] {escape(message)}", **kwargs)


def warning(message: str, **kwargs: Any) -> None:
    console.print(f"[yellow]⚠[/yellow] {escape(message)}", **kwargs)


def print_json(data: dict[str, Any], **kwargs: Any) -> None:
    """Print JSON data; paths and enums fall back to str()."""
    console.print_json(json.dumps(data, default=str), **kwargs)


def print_plan(result: PlanResult) -> None:
    """Print one table row per profile, then the error of every failed profile."""
    table = Table(title="BuildConfig plan")
    table.add_column("Profile", style="cyan")
    table.add_column("State")
    table.add_column("Generate step")
    table.add_column("Compile step")
    table.add_column("Target")

    for p in result.profiles:
        state = "[green]registered[/green]" if p.registered else "[red]failed[/red]"
        table.add_row(
            escape(p.profile_name),
            state,
            p.generate_step or "-",
            p.compile_step or "-",
            p.dependency_target or "-",
        )

    console.print(table)
    print_failed_profiles(result)


def print_failed_profiles(result: PlanResult) -> None:
    for profile in result.failed:
        error(profile.error or f"Profile '{profile.profile_name}' failed")


def print_report(report: ExecutionReport, *, show_skipped: bool = True) -> None:
    """Print written files, failures and (optionally) skipped steps.

    Args:
        report: Executor outcomes, in execution order.
        show_skipped: Also print a warning for each skipped step.
    """
    from buildconfig_core.planner import StepStatus

    for outcome in report.outcomes:
        if outcome.status == StepStatus.SUCCEEDED:
            for path in outcome.outputs:
                success(f"{outcome.name}: {path}")
        elif outcome.status == StepStatus.FAILED:
            error(outcome.message)
        elif show_skipped:
            warning(f"{outcome.name} skipped: {outcome.message}")


def set_no_color(no_color: bool) -> None:
    """Replace the module-level console."""
    global console
    console = create_console(no_color=no_color)
