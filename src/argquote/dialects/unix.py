"""Shell resolution and dialects for Unix systems."""

import logging
import posixpath
from collections.abc import Mapping

from argquote.constants import UNIX_DEFAULT_SHELL
from argquote.dialects import bash, csh, dash, no_shell, zsh
from argquote.errors import UnsupportedShellError
from argquote.executables import resolve_executable
from argquote.models import Dialect, ShellName

log = logging.getLogger(__name__)

DIALECTS: Mapping[ShellName, Dialect] = {
    ShellName.BASH: bash.DIALECT,
    ShellName.CSH: csh.DIALECT,
    ShellName.DASH: dash.DIALECT,
    ShellName.ZSH: zsh.DIALECT,
    ShellName.NO_SHELL: no_shell.UNIX_DIALECT,
}

_SHELL_NAMES = {
    "bash": ShellName.BASH,
    "csh": ShellName.CSH,
    "dash": ShellName.DASH,
    "zsh": ShellName.ZSH,
    # A backslash before any character is inert in a POSIX sh, so the Bash
    # rules are safe for an unidentified `sh`.
    "sh": ShellName.BASH,
}


def get_default_shell(env: Mapping[str, str]) -> str:
    return UNIX_DEFAULT_SHELL


def classify_shell(path: str) -> ShellName:
    """Return the dialect for a shell executable path."""
    basename = posixpath.basename(path)
    try:
        return _SHELL_NAMES[basename]
    except KeyError:
        raise UnsupportedShellError(basename) from None


def get_shell_name(env: Mapping[str, str], shell: str) -> ShellName:
    """Determine the dialect of the shell identified by a name or path."""
    shell_name = classify_shell(resolve_executable(env, shell))
    log.debug("shell %r uses the %s dialect", shell, shell_name)
    return shell_name


def is_shell_supported(shell_name: ShellName) -> bool:
    return shell_name in DIALECTS


def get_dialect(shell_name: ShellName) -> Dialect:
    try:
        return DIALECTS[shell_name]
    except KeyError:
        raise UnsupportedShellError(str(shell_name)) from None
