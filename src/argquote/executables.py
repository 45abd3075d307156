"""Locate executables on the filesystem."""

import logging
import os
import shutil
from collections.abc import Callable, Mapping

from argquote.errors import ExecutableNotFoundError

log = logging.getLogger(__name__)


def _search_path(env: Mapping[str, str]) -> str | None:
    """Return the PATH to search, honouring Windows' `Path` spelling."""
    if "PATH" in env:
        return env["PATH"]
    return env.get("Path")


def resolve_executable(
    env: Mapping[str, str],
    executable: str,
    exists: Callable[[str], bool] = os.path.exists,
    readlink: Callable[[str], str] = os.readlink,
    which: Callable[..., str | None] = shutil.which,
) -> str:
    """Resolve a name or path to the location of the executable.

    The name is looked up like `which(1)` would, using the PATH from `env`.
    If the result is a symbolic link, one level of the link is followed so
    that e.g. `/bin/sh -> dash` identifies Dash.

    Raises ExecutableNotFoundError when nothing is found.
    """
    try:
        resolved = which(executable, path=_search_path(env))
    except OSError as e:
        log.debug("lookup of %r failed: %s", executable, e)
        raise ExecutableNotFoundError(executable) from e

    if not resolved or not exists(resolved):
        raise ExecutableNotFoundError(executable)

    try:
        resolved = readlink(resolved)
    except (OSError, ValueError) as e:
        # Not a symbolic link.
        log.debug("%s is not a link: %s", resolved, e)

    log.debug("resolved %r to %s", executable, resolved)
    return resolved
