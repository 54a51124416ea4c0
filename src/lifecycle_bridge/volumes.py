"""Validate and serialize buildpack volume declarations."""

from collections.abc import Iterable

from loguru import logger

from .errors import InvalidVolumeSpecError
from .models import BuildpackVolume, ContainerConfig

log = logger.bind(stage="volumes")


def format_volume(volume: BuildpackVolume) -> str:
    """Render a volume as host:target, or host:target:options."""
    if volume.options:
        return f"{volume.host}:{volume.target}:{volume.options}"
    return f"{volume.host}:{volume.target}"


def container_config(volumes: Iterable[BuildpackVolume] | None) -> ContainerConfig:
    """Compile volume declarations into a ContainerConfig.

    Order is preserved. A single entry with an empty host or target rejects
    the whole batch with InvalidVolumeSpecError; no partial config is returned.
    """
    compiled: list[str] = []
    for index, volume in enumerate(volumes or ()):
        if not volume.host:
            log.warning(f"Rejecting volumes: entry {index} has no host path")
            raise InvalidVolumeSpecError(
                f"volume {index}: host path is required",
                field="host",
                index=index,
                volume=volume,
            )
        if not volume.target:
            log.warning(f"Rejecting volumes: entry {index} has no target path")
            raise InvalidVolumeSpecError(
                f"volume {index}: target path is required",
                field="target",
                index=index,
                volume=volume,
            )
        compiled.append(format_volume(volume))

    log.debug(f"Compiled {len(compiled)} volume(s)")
    return ContainerConfig(volumes=compiled)


def parse_volume(spec: str) -> BuildpackVolume:
    """Parse short syntax host:target[:options] into a BuildpackVolume.

    Empty components are kept as-is so container_config can report them.
    """
    parts = spec.split(":", 2)
    if len(parts) < 2:
        raise InvalidVolumeSpecError(
            f"Invalid volume format: {spec!r}, expected host:target[:options]",
            field="spec",
            volume=spec,
        )
    host, target = parts[0], parts[1]
    options = parts[2] if len(parts) == 3 else ""
    return BuildpackVolume(host=host, target=target, options=options)
