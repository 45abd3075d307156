"""Escaping functions for a single shell."""

from collections.abc import Callable
from dataclasses import dataclass

from argquote.models.shell_name import ShellName

Transform = Callable[[str], str]


@dataclass(frozen=True)
class Dialect:
    """How to escape, quote and flag-protect arguments for one shell.

    Quoting applies `quote_escape` first and `wrap` last. Flag protection
    runs on the escaped text: `strip_flag_prefix` for escaped values, which
    must re-escape whatever the removed prefix leaves at the start of the
    word, and `strip_quoted_flag_prefix` for values about to be wrapped.
    """

    name: ShellName
    escape: Transform
    quote_escape: Transform
    wrap: Transform
    strip_flag_prefix: Transform
    strip_quoted_flag_prefix: Transform
