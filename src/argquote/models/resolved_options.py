"""Escaping configuration after shell resolution."""

from dataclasses import dataclass

from argquote.models.shell_name import ShellName


@dataclass(frozen=True)
class ResolvedOptions:
    flag_protection: bool
    shell_name: ShellName
