"""Select the helpers for the current platform."""

import logging
from collections.abc import Mapping
from types import ModuleType

from argquote.constants import OSTYPE_CYGWIN, OSTYPE_MSYS, WIN32
from argquote.dialects import unix, win

log = logging.getLogger(__name__)


def is_windows(env: Mapping[str, str], platform: str) -> bool:
    """Return whether Windows escaping rules apply.

    Cygwin and MSYS report a Unix-like OSTYPE but run Windows shells.
    """
    return env.get("OSTYPE") in (OSTYPE_CYGWIN, OSTYPE_MSYS) or platform == WIN32


def get_helpers_by_platform(env: Mapping[str, str], platform: str) -> ModuleType:
    """Return the `unix` or `win` dialect module for the platform."""
    if is_windows(env, platform):
        log.debug("using Windows helpers (platform=%s)", platform)
        return win
    log.debug("using Unix helpers (platform=%s)", platform)
    return unix
