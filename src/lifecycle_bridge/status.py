"""Translate buildpacks lifecycle exit codes into readable messages.

The lifecycle reports failure two ways depending on the caller: a raw
process exit status, or a wrapped error whose text ends with
"failed with status code: N". Both paths resolve through the same table.
"""

import re
from types import MappingProxyType

from loguru import logger

from .errors import LifecycleError
from .models import LifecycleCode

log = logger.bind(stage="status")

# REBASE_ERROR and LAUNCH_ERROR are intentionally unmapped: they fall
# through to the generic message.
STATUS_MESSAGES: MappingProxyType[int, str] = MappingProxyType({
    LifecycleCode.FAILED: "buildpacks lifecycle failed",
    LifecycleCode.INVALID_ARGS: "lifecycle reported invalid arguments",
    LifecycleCode.INCOMPATIBLE_PLATFORM_API: "incompatible version of Platform API",
    LifecycleCode.INCOMPATIBLE_BUILDPACK_API: "incompatible version of Buildpacks API",
    LifecycleCode.FAILED_DETECT: "buildpacks could not determine application type",
    LifecycleCode.FAILED_DETECT_WITH_ERRORS: "buildpacks could not determine application type",
    LifecycleCode.ANALYZE_ERROR: "buildpacks failed analyzing metadata from previous builds",
    LifecycleCode.RESTORE_ERROR: "buildpacks failed to restoring cached layers",
    LifecycleCode.FAILED_BUILD_WITH_ERRORS: "buildpacks failed to build image",
    LifecycleCode.BUILD_ERROR: "buildpacks failed to build image",
    LifecycleCode.EXPORT_ERROR: "buildpacks failed to save image and cache layers",
})

_STATUS_CODE_RE = re.compile(r"failed with status code: (\d+)")


def map_status_code(code: int) -> str:
    """Return the message for a lifecycle exit code.

    Codes outside the table (including 0) get
    "lifecycle failed with status code {code}".
    """
    message = STATUS_MESSAGES.get(code)
    if message is None:
        log.debug(f"Unmapped lifecycle status code {code}")
        return f"lifecycle failed with status code {int(code)}"
    return message


def rewrite_status_error(err: BaseException) -> BaseException:
    """Replace an error embedding a lifecycle status code with its mapped message.

    Returns a new LifecycleError (original kept as __cause__) when the text
    contains "failed with status code: N". Otherwise returns ``err`` itself,
    including when N is too long to convert.
    """
    match = _STATUS_CODE_RE.search(str(err))
    if match is None:
        return err

    try:
        code = int(match.group(1))
    except ValueError:
        return err
    log.debug(f"Rewriting lifecycle error with status code {code}: {err}")
    rewritten = LifecycleError(map_status_code(code), exit_code=code)
    rewritten.__cause__ = err
    return rewritten


def check_exit_status(code: int) -> None:
    """Raise LifecycleError for a non-zero lifecycle exit code."""
    if code == 0:
        return
    message = map_status_code(code)
    log.error(f"Lifecycle exited with code {code}: {message}")
    raise LifecycleError(message, exit_code=code)
