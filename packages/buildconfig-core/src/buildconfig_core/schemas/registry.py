"""Profile registry for buildconfig.

Maps profile names to ProfileConfig builders. The main profile always
exists; additional profiles are created on first registration.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import ValidationError as PydanticValidationError

from buildconfig_core.errors import ConfigurationError
from buildconfig_core.schemas.profile import DEFAULT_PROFILE_NAME, ProfileConfig


class ProfileRegistry:
    """Registry of profiles keyed by name.

    Writable during configuration. Planning reads it once through
    snapshot(), which returns detached copies.

    Example:
        >>> registry = ProfileRegistry()
        >>> registry.main.field("FOO", "String", "bar")
        >>> test = registry.register("test")
        >>> test.class_name = "TestBuildConfig"
        >>> registry.names()
        ['main', 'test']
    """

    def __init__(self) -> None:
        self._profiles: dict[str, ProfileConfig] = {}
        self.register(DEFAULT_PROFILE_NAME)

    @property
    def main(self) -> ProfileConfig:
        """The conventional default profile."""
        return self._profiles[DEFAULT_PROFILE_NAME]

    def register(self, name: str) -> ProfileConfig:
        """Create or return the profile for name.

        Args:
            name: Profile name, also the compilation unit name.

        Returns:
            The existing ProfileConfig, or a new empty one.

        Raises:
            ConfigurationError: If name is not a valid profile name.
        """
        existing = self._profiles.get(name)
        if existing is not None:
            return existing

        try:
            profile = ProfileConfig(name=name)
        except PydanticValidationError as e:
            raise ConfigurationError(
                "Profile names must start with a letter and contain only "
                "letters, digits, or underscores",
                profile_name=name,
            ) from e

        self._profiles[name] = profile
        return profile

    def get(self, name: str) -> ProfileConfig | None:
        """Return the profile for name, or None."""
        return self._profiles.get(name)

    def names(self) -> list[str]:
        """Profile names in registration order."""
        return list(self._profiles)

    def snapshot(self) -> list[ProfileConfig]:
        """Return detached copies of every profile, in registration order."""
        return [profile.snapshot() for profile in self._profiles.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._profiles

    def __iter__(self) -> Iterator[ProfileConfig]:
        return iter(list(self._profiles.values()))

    def __len__(self) -> int:
        return len(self._profiles)
