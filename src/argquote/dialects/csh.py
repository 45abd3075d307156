"""Escaping for the C shell (csh)."""

import re

from argquote.dialects.common import (
    single_quote,
    strip_control_chars_and_cr,
    strip_leading_dashes,
)
from argquote.models import Dialect, ShellName

_WORD_START_RE = re.compile(r"(?<!\S)(~)")
# History expansion is not triggered by a `!` at the very end.
_HISTORY_RE = re.compile(r"!(?!\Z)")
_TRAILING_HISTORY_RE = re.compile(r"\\!\Z")
_SPECIAL_RE = re.compile(r"([\"#$&'()*;<>?\[`{|])")
_BLANK_RE = re.compile(r"([\t ])")


def _quote_nbsp_bytes(char: str) -> str:
    # csh 20110502 hangs on a character containing byte 0xA0 that follows an
    # escaped character unless that character is quoted.
    # https://bugs.debian.org/cgi-bin/bugreport.cgi?bug=995013
    if 0xA0 in char.encode("utf-8", "surrogatepass"):
        return f"'{char}'"
    return char


def escape_arg(arg: str) -> str:
    arg = strip_control_chars_and_cr(arg).replace("\n", " ")
    arg = arg.replace("\\", "\\\\")
    arg = _WORD_START_RE.sub(r"\\\1", arg)
    arg = _HISTORY_RE.sub(r"\\!", arg)
    arg = _SPECIAL_RE.sub(r"\\\1", arg)
    arg = _BLANK_RE.sub(r"\\\1", arg)
    return "".join(_quote_nbsp_bytes(char) for char in arg)


def escape_arg_for_quoted(arg: str) -> str:
    arg = strip_control_chars_and_cr(arg).replace("\n", " ")
    arg = arg.replace("'", "'\\''")
    arg = _TRAILING_HISTORY_RE.sub(r"\\\\!", arg)
    return _HISTORY_RE.sub(r"\\!", arg)


def strip_flag_prefix(arg: str) -> str:
    return _WORD_START_RE.sub(r"\\\1", strip_leading_dashes(arg))


DIALECT = Dialect(
    name=ShellName.CSH,
    escape=escape_arg,
    quote_escape=escape_arg_for_quoted,
    wrap=single_quote,
    strip_flag_prefix=strip_flag_prefix,
    strip_quoted_flag_prefix=strip_leading_dashes,
)
