"""Escape and quote shell arguments for a specific shell."""

from argquote.errors import (
    ArgquoteError,
    ExecutableNotFoundError,
    InvalidOptionsError,
    QuotingUnsupportedError,
    ShellConfigError,
    StringificationError,
    UnsupportedShellError,
)
from argquote.escaper import Escaper, escape, escape_all, quote, quote_all
from argquote.models import EscapeOptions, ShellName

__version__ = "0.1.0"

__all__ = [
    "ArgquoteError",
    "EscapeOptions",
    "Escaper",
    "ExecutableNotFoundError",
    "InvalidOptionsError",
    "QuotingUnsupportedError",
    "ShellConfigError",
    "ShellName",
    "StringificationError",
    "UnsupportedShellError",
    "__version__",
    "escape",
    "escape_all",
    "quote",
    "quote_all",
]
