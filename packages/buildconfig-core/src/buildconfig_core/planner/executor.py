"""Execution of registered BuildConfig steps.

StepExecutor runs the steps of a LocalBuildHost in dependency order:

- GenerateStep: write the profile's Java source into its output directory
- CompileStep: compile that directory with javac into the class directory

A failed step marks every step depending on it as skipped; unrelated
steps still run.
"""

from __future__ import annotations

import os
import shutil
import subprocess
import time
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

import structlog
from pydantic import BaseModel, ConfigDict, Field

from buildconfig_core.errors import ConfigurationError, StepExecutionError
from buildconfig_core.generator.java_generator import JavaSourceGenerator
from buildconfig_core.planner.models import CompileStep, GenerateStep

if TYPE_CHECKING:
    from buildconfig_core.planner.host import LocalBuildHost
    from buildconfig_core.planner.models import BuildStep

logger = structlog.get_logger(__name__)

DEFAULT_JAVAC = "javac"


class StepStatus(str, Enum):
    """Status of an executed step."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    SKIPPED = "skipped"


class StepOutcome(BaseModel):
    """Result of executing a single step.

    Attributes:
        name: Step name.
        status: Execution status.
        message: Human-readable result message.
        outputs: Files written by the step.
        duration_ms: Execution time in milliseconds.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    status: StepStatus
    message: str = ""
    outputs: list[Path] = Field(default_factory=list)
    duration_ms: int = Field(default=0, ge=0)

    @property
    def succeeded(self) -> bool:
        return self.status == StepStatus.SUCCEEDED


class ExecutionReport(BaseModel):
    """Outcomes of one executor run, in execution order."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    outcomes: list[StepOutcome] = Field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return all(o.status != StepStatus.FAILED for o in self.outcomes)

    @property
    def failed(self) -> list[StepOutcome]:
        return [o for o in self.outcomes if o.status == StepStatus.FAILED]


class StepExecutor:
    """Runs registered steps of a LocalBuildHost.

    Example:
        >>> result = plan_build(host, registry)
        >>> report = StepExecutor(host).run(include_compile=False)
        >>> report.succeeded
        True
    """

    def __init__(
        self,
        host: LocalBuildHost,
        *,
        generator: JavaSourceGenerator | None = None,
        javac: str = DEFAULT_JAVAC,
    ) -> None:
        """Initialize the executor.

        Args:
            host: Host whose registered steps are executed.
            generator: Source generator. Defaults to JavaSourceGenerator.
            javac: javac executable name or path.
        """
        self.host = host
        self.generator = generator or JavaSourceGenerator()
        self.javac = javac
        self._log = logger.bind(component="step_executor")

    def run(self, *, include_compile: bool = True) -> ExecutionReport:
        """Execute every registered step in dependency order.

        Args:
            include_compile: Also run compile steps. When False, compile
                steps are reported as skipped.

        Returns:
            ExecutionReport with one outcome per step.
        """
        outcomes: list[StepOutcome] = []
        blocked: set[str] = set()

        for step in self.host.ordered_steps():
            if step.depends_on is not None and step.depends_on in blocked:
                blocked.add(step.name)
                outcomes.append(
                    StepOutcome(
                        name=step.name,
                        status=StepStatus.SKIPPED,
                        message=f"Upstream step '{step.depends_on}' did not succeed",
                    )
                )
                continue

            if isinstance(step, CompileStep) and not include_compile:
                outcomes.append(
                    StepOutcome(
                        name=step.name,
                        status=StepStatus.SKIPPED,
                        message="Compilation disabled",
                    )
                )
                continue

            outcome = self._run_step(step)
            if not outcome.succeeded:
                blocked.add(step.name)
            outcomes.append(outcome)

        return ExecutionReport(outcomes=outcomes)

    def _run_step(self, step: BuildStep) -> StepOutcome:
        """Run one step, converting its failure into a FAILED outcome."""
        start_time = time.monotonic()
        log = self._log.bind(step=step.name)
        log.info("step_started", kind=step.kind)

        try:
            if isinstance(step, GenerateStep):
                outputs = [self.generate(step)]
            else:
                outputs = self.compile(step)
        except StepExecutionError as e:
            duration_ms = int((time.monotonic() - start_time) * 1000)
            log.error("step_failed", error=e.user_message, duration_ms=duration_ms)
            return StepOutcome(
                name=step.name,
                status=StepStatus.FAILED,
                message=e.user_message,
                duration_ms=duration_ms,
            )

        duration_ms = int((time.monotonic() - start_time) * 1000)
        log.info("step_completed", duration_ms=duration_ms, outputs=len(outputs))
        return StepOutcome(
            name=step.name,
            status=StepStatus.SUCCEEDED,
            message=f"Wrote {len(outputs)} file(s)",
            outputs=outputs,
            duration_ms=duration_ms,
        )

    def generate(self, step: GenerateStep) -> Path:
        """Write the generated source for a generate step.

        Raises:
            StepExecutionError: If the source cannot be generated or written.
        """
        try:
            return self.generator.write(step.profile, step.output_dir)
        except ConfigurationError as e:
            raise StepExecutionError(step.name, e.user_message) from e
        except OSError as e:
            raise StepExecutionError(
                step.name,
                f"Cannot write to {step.output_dir}",
                internal_details=str(e),
            ) from e

    def compile(self, step: CompileStep) -> list[Path]:
        """Compile the sources of a compile step with javac.

        Returns:
            Class files found in the destination directory.

        Raises:
            StepExecutionError: If javac is missing, no sources exist, or
                javac exits with a non-zero status.
        """
        sources = sorted(step.source_dir.rglob("*.java"))
        if not sources:
            raise StepExecutionError(step.name, f"No Java sources in {step.source_dir}")

        javac = shutil.which(self.javac)
        if javac is None:
            raise StepExecutionError(step.name, f"'{self.javac}' not found on PATH")

        step.destination_dir.mkdir(parents=True, exist_ok=True)
        classpath = os.pathsep.join(str(p) for p in step.classpath)
        command = [
            javac,
            "-encoding",
            step.charset,
            "-d",
            str(step.destination_dir),
            "-classpath",
            classpath,
            *(str(source) for source in sources),
        ]

        result = subprocess.run(command, capture_output=True, text=True, check=False)
        if result.returncode != 0:
            raise StepExecutionError(
                step.name,
                f"javac exited with status {result.returncode}",
                internal_details=result.stderr.strip() or result.stdout.strip(),
            )

        return sorted(step.destination_dir.rglob("*.class"))
