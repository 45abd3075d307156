"""Escaping for programs started without a shell."""

import re

from argquote.dialects.common import strip_control_chars, strip_leading_dashes
from argquote.errors import QuotingUnsupportedError
from argquote.models import Dialect, ShellName

# Windows programs accept both `-` and `/` as flag prefixes, in any mix.
_WIN_FLAG_PREFIX_RE = re.compile(r"^[-/]+")


def unsupported(arg: str) -> str:
    raise QuotingUnsupportedError()


def strip_win_flag_prefix(arg: str) -> str:
    return _WIN_FLAG_PREFIX_RE.sub("", arg)


UNIX_DIALECT = Dialect(
    name=ShellName.NO_SHELL,
    escape=strip_control_chars,
    quote_escape=unsupported,
    wrap=unsupported,
    strip_flag_prefix=strip_leading_dashes,
    strip_quoted_flag_prefix=strip_leading_dashes,
)

WIN_DIALECT = Dialect(
    name=ShellName.NO_SHELL,
    escape=strip_control_chars,
    quote_escape=unsupported,
    wrap=unsupported,
    strip_flag_prefix=strip_win_flag_prefix,
    strip_quoted_flag_prefix=strip_win_flag_prefix,
)
