"""Core enums and value types for the lifecycle bridge.

Enums:
    LifecycleCode  -- Exit codes reported by the buildpacks lifecycle, one per
                      phase outcome (detect, analyze, restore, build, export...).

Types:
    BuildpackVolume -- A user-declared bind mount (host, target, options).
    ContainerConfig -- Compiled volume strings handed to the container runtime.
"""

from dataclasses import dataclass, field
from enum import IntEnum


class LifecycleCode(IntEnum):
    FAILED = 1
    INVALID_ARGS = 3
    INCOMPATIBLE_PLATFORM_API = 11
    INCOMPATIBLE_BUILDPACK_API = 12
    FAILED_DETECT = 100
    FAILED_DETECT_WITH_ERRORS = 101
    ANALYZE_ERROR = 202
    RESTORE_ERROR = 302
    FAILED_BUILD_WITH_ERRORS = 401
    BUILD_ERROR = 402
    EXPORT_ERROR = 502
    REBASE_ERROR = 602
    LAUNCH_ERROR = 702


@dataclass(frozen=True)
class BuildpackVolume:
    """A bind mount requested for the lifecycle container."""

    host: str
    target: str
    options: str = ""


@dataclass
class ContainerConfig:
    """Container settings passed to the lifecycle run, in declaration order."""

    volumes: list[str] = field(default_factory=list)
