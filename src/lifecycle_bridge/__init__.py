"""Lifecycle Bridge -- translate buildpacks lifecycle outcomes and volume declarations.

Core modules:
    models   -- LifecycleCode enum, BuildpackVolume and ContainerConfig types
    errors   -- Exception hierarchy (LifecycleError, InvalidVolumeSpecError)
    status   -- Exit code and error-text translation into readable messages.
                Never raises on its own input; unknown codes get a generic message.
    volumes  -- Validate and serialize bind mounts into host:target[:options]
                strings. All-or-nothing: one bad entry rejects the batch.
    config   -- Settings via pydantic-settings (.env + env vars) and loguru setup
    cli      -- Click diagnostic CLI (explain, volumes)
"""

from .errors import (
    ConfigError,
    InvalidVolumeSpecError,
    LifecycleBridgeError,
    LifecycleError,
)
from .models import BuildpackVolume, ContainerConfig, LifecycleCode
from .status import check_exit_status, map_status_code, rewrite_status_error
from .volumes import container_config, format_volume, parse_volume

__all__ = [
    "BuildpackVolume",
    "ConfigError",
    "ContainerConfig",
    "InvalidVolumeSpecError",
    "LifecycleBridgeError",
    "LifecycleCode",
    "LifecycleError",
    "check_exit_status",
    "container_config",
    "format_volume",
    "map_status_code",
    "parse_volume",
    "rewrite_status_error",
]
