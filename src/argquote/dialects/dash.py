"""Escaping for the Debian Almquist shell (Dash)."""

import re

from argquote.dialects.common import (
    single_quote,
    strip_control_chars,
    strip_control_chars_and_cr,
    strip_leading_dashes,
)
from argquote.models import Dialect, ShellName

_WORD_START_RE = re.compile(r"(?<!\S)([#~])")
_SPECIAL_RE = re.compile(r"([\"$&'()*;<>?`|])")
_BLANK_RE = re.compile(r"([\t ])")


def escape_arg(arg: str) -> str:
    arg = strip_control_chars_and_cr(arg).replace("\n", " ")
    arg = arg.replace("\\", "\\\\")
    arg = _WORD_START_RE.sub(r"\\\1", arg)
    arg = _SPECIAL_RE.sub(r"\\\1", arg)
    return _BLANK_RE.sub(r"\\\1", arg)


def escape_arg_for_quoted(arg: str) -> str:
    return strip_control_chars(arg).replace("'", "'\\''")


def strip_flag_prefix(arg: str) -> str:
    return _WORD_START_RE.sub(r"\\\1", strip_leading_dashes(arg))


DIALECT = Dialect(
    name=ShellName.DASH,
    escape=escape_arg,
    quote_escape=escape_arg_for_quoted,
    wrap=single_quote,
    strip_flag_prefix=strip_flag_prefix,
    strip_quoted_flag_prefix=strip_leading_dashes,
)
