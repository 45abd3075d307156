"""Identifiers for the supported shell dialects."""

from enum import Enum


class ShellName(str, Enum):
    """A supported shell, or the absence of one."""

    BASH = "bash"
    DASH = "dash"
    ZSH = "zsh"
    CSH = "csh"
    CMD = "cmd.exe"
    POWERSHELL = "powershell.exe"
    NO_SHELL = "<no shell>"

    def __str__(self) -> str:
        return self.value
