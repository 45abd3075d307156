"""Shell resolution and dialects for Windows systems."""

import logging
import ntpath
from collections.abc import Mapping

from argquote.constants import WIN_DEFAULT_SHELL
from argquote.dialects import cmd, no_shell, powershell
from argquote.errors import UnsupportedShellError
from argquote.executables import resolve_executable
from argquote.models import Dialect, ShellName

log = logging.getLogger(__name__)

DIALECTS: Mapping[ShellName, Dialect] = {
    ShellName.CMD: cmd.DIALECT,
    ShellName.POWERSHELL: powershell.DIALECT,
    ShellName.NO_SHELL: no_shell.WIN_DIALECT,
}

_SHELL_NAMES = {
    "cmd.exe": ShellName.CMD,
    "powershell.exe": ShellName.POWERSHELL,
    "pwsh.exe": ShellName.POWERSHELL,
}


def get_default_shell(env: Mapping[str, str]) -> str:
    """Return %ComSpec%, falling back to cmd.exe."""
    for key in ("ComSpec", "COMSPEC"):
        value = env.get(key)
        if value:
            return value
    return WIN_DEFAULT_SHELL


def classify_shell(path: str) -> ShellName:
    """Return the dialect for a shell executable path, ignoring case."""
    basename = ntpath.basename(path).lower()
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
