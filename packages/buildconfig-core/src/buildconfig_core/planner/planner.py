"""Build-graph planner.

For every profile the planner walks

    UNRESOLVED -> RESOLVED -> PLANNED -> REGISTERED

1. Resolve the profile's compilation unit and dependency target in the host.
2. Finalize the profile and validate its generated source.
3. Derive the generate and compile step names.
4. Register the generate step, the compile step depending on it, and the
   compiled output as a dependency of the target.

A ResolutionError or ConfigurationError abandons that profile only; the
remaining profiles are still planned.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from buildconfig_core.errors import ConfigurationError, ResolutionError
from buildconfig_core.generator.java_generator import JavaSourceGenerator
from buildconfig_core.planner.models import (
    CompileStep,
    DependencyRegistration,
    GenerateStep,
    PlanResult,
    ProfilePlan,
    ProfileState,
)
from buildconfig_core.planner.naming import (
    CLASSES_DIR_NAME,
    SOURCES_DIR_NAME,
    compile_step_name,
    dependency_target_name,
    generate_step_name,
)

if TYPE_CHECKING:
    from structlog.typing import BindableLogger

    from buildconfig_core.planner.host import BuildHost, CompilationUnit, DependencyTarget
    from buildconfig_core.schemas.profile import ProfileConfig, ResolvedProfile
    from buildconfig_core.schemas.registry import ProfileRegistry

logger = structlog.get_logger(__name__)


class BuildGraphPlanner:
    """Plans generate and compile steps for every registered profile.

    Run once, after configuration is closed. The registry is read through
    a snapshot taken at the start of planning; repeated calls to plan()
    return the first result without touching the host again.

    Attributes:
        host: Host build system.
        registry: Profile registry to plan.
        generator: Source generator used to validate profiles.

    Example:
        >>> planner = BuildGraphPlanner(host, registry)
        >>> result = planner.plan()
        >>> [p.generate_step for p in result.registered]
        ['generateBuildConfig', 'generateTestBuildConfig']
    """

    def __init__(
        self,
        host: BuildHost,
        registry: ProfileRegistry,
        *,
        generator: JavaSourceGenerator | None = None,
        log: BindableLogger | None = None,
    ) -> None:
        """Initialize the planner.

        Args:
            host: Host build system to register steps with.
            registry: Profiles to plan.
            generator: Source generator. Defaults to JavaSourceGenerator.
            log: structlog logger for this run. Defaults to the module logger.
        """
        self.host = host
        self.registry = registry
        self.generator = generator or JavaSourceGenerator()
        self._log = (log or logger).bind(component="build_graph_planner")
        self._result: PlanResult | None = None

    def plan(self) -> PlanResult:
        """Plan every profile.

        Returns:
            PlanResult with one ProfilePlan per profile, in registration order.
        """
        if self._result is not None:
            self._log.debug("planning_already_complete")
            return self._result

        profiles = self.registry.snapshot()
        self._log.info("planning_started", profiles=len(profiles))

        plans = [self._plan_profile(profile) for profile in profiles]
        self._result = PlanResult(profiles=plans)

        self._log.info(
            "planning_completed",
            registered=len(self._result.registered),
            failed=len(self._result.failed),
        )
        return self._result

    def _plan_profile(self, config: ProfileConfig) -> ProfilePlan:
        """Plan a single profile, converting its errors into a FAILED plan."""
        log = self._log.bind(profile=config.name)
        state = ProfileState.UNRESOLVED

        try:
            unit, target = self._resolve(config.name)
            state = ProfileState.RESOLVED

            resolved = config.finalize(self.host.project)
            self.generator.generate(resolved)
            generate_name = generate_step_name(unit.name)
            compile_name = compile_step_name(unit.name)
            state = ProfileState.PLANNED

            self._register(resolved, target, generate_name, compile_name, log)

        except ResolutionError as e:
            log.warning("profile_skipped", state=state.value, error=e.user_message)
            return ProfilePlan(
                profile_name=config.name,
                state=ProfileState.FAILED,
                error=e.user_message,
                error_type="resolution",
            )
        except ConfigurationError as e:
            log.warning("profile_skipped", state=state.value, error=e.user_message)
            return ProfilePlan(
                profile_name=config.name,
                state=ProfileState.FAILED,
                compilation_unit=unit.name,
                dependency_target=target.name,
                error=e.user_message,
                error_type="configuration",
            )

        return ProfilePlan(
            profile_name=config.name,
            state=ProfileState.REGISTERED,
            compilation_unit=unit.name,
            dependency_target=target.name,
            generate_step=generate_name,
            compile_step=compile_name,
        )

    def _resolve(self, profile_name: str) -> tuple[CompilationUnit, DependencyTarget]:
        """Look up the profile's compilation unit and dependency target.

        Raises:
            ResolutionError: Attributed to the profile, naming the missing entity.
        """
        target_name = dependency_target_name(profile_name)
        try:
            unit = self.host.get_compilation_unit(profile_name)
            target = self.host.get_dependency_target(target_name)
        except ResolutionError as e:
            raise ResolutionError(
                entity_type=e.entity_type,
                entity_name=e.entity_name,
                profile_name=profile_name,
                available=e.available,
            ) from e
        return unit, target

    def _register(
        self,
        profile: ResolvedProfile,
        target: DependencyTarget,
        generate_name: str,
        compile_name: str,
        log: Any,
    ) -> None:
        """Register the generate step, compile step, and dependency."""
        sources_dir = self.host.build_dir / SOURCES_DIR_NAME / profile.name
        classes_dir = self.host.build_dir / CLASSES_DIR_NAME / profile.name

        generate = self.host.register_step(
            GenerateStep(name=generate_name, profile=profile, output_dir=sources_dir)
        )
        # Step names only capitalize the first letter, so `test` and `Test` collide
        if not isinstance(generate, GenerateStep) or generate.profile.name != profile.name:
            owner = generate.profile.name if isinstance(generate, GenerateStep) else None
            raise ConfigurationError(
                f"Step '{generate_name}' is already registered"
                + (f" for profile '{owner}'" if owner else ""),
                profile_name=profile.name,
            )
        log.debug("generate_step_created", step=generate.name)

        compile_step = self.host.register_step(
            CompileStep(
                name=compile_name,
                depends_on=generate.name,
                source_dir=sources_dir,
                destination_dir=classes_dir,
                charset=profile.charset,
            )
        )
        log.debug("compile_step_created", step=compile_step.name, depends_on=generate.name)

        self.host.add_dependency(
            target,
            DependencyRegistration(
                target=target.name,
                producer=compile_step.name,
                files=(classes_dir,),
            ),
        )
        log.debug("dependency_added", step=compile_step.name, target=target.name)


def plan_build(
    host: BuildHost,
    registry: ProfileRegistry,
    *,
    log: BindableLogger | None = None,
) -> PlanResult:
    """Plan every profile of a registry against a host.

    Convenience function that creates a planner and runs it once.

    Example:
        >>> result = plan_build(host, registry)
        >>> if not result.succeeded:
        ...     print(result.errors)
    """
    return BuildGraphPlanner(host, registry, log=log).plan()
