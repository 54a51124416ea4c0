"""Exception hierarchy for the lifecycle bridge."""

from .models import BuildpackVolume


class LifecycleBridgeError(Exception):
    """Base exception for all lifecycle bridge errors."""


class ConfigError(LifecycleBridgeError):
    """Invalid or missing configuration."""


class InvalidVolumeSpecError(ConfigError):
    """A volume declaration is missing its host or target path."""

    def __init__(
        self,
        message: str,
        field: str,
        index: int | None = None,
        volume: BuildpackVolume | str | None = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.index = index
        self.volume = volume


class LifecycleError(LifecycleBridgeError):
    """The buildpacks lifecycle exited with a failure status."""

    def __init__(self, message: str, exit_code: int) -> None:
        super().__init__(message)
        self.exit_code = exit_code
