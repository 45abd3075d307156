"""Model package for argquote."""

from argquote.models.dialect import Dialect
from argquote.models.escape_options import EscapeOptions
from argquote.models.resolved_options import ResolvedOptions
from argquote.models.shell_name import ShellName

__all__ = [
    "Dialect",
    "EscapeOptions",
    "ResolvedOptions",
    "ShellName",
]
