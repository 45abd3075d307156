"""Escaping for the Windows Command Prompt (cmd.exe)."""

import re

from argquote.dialects.common import strip_control_chars_and_cr
from argquote.dialects.no_shell import strip_win_flag_prefix
from argquote.models import Dialect, ShellName

_QUOTE_RE = re.compile(r'(?<!\\)(\\*)"')
_BLANK_RE = re.compile(r"(?<!\\)(\\*)([\t ])")
_BLANK_RUN_RE = re.compile(r"([\t ]+)")
_CARET_CHARS = frozenset("%&<>^|")


def escape_arg(arg: str) -> str:
    arg = strip_control_chars_and_cr(arg).replace("\n", " ")
    arg = _QUOTE_RE.sub(r'\1\1\\"', arg)

    # CMD flips between quoted and unquoted parsing on every double quote, so
    # whether a special character needs a caret depends on how many quotes
    # precede it.
    escape_special = True
    chars = []
    for char in arg:
        if char == '"':
            escape_special = not escape_special
        elif escape_special and char in _CARET_CHARS:
            chars.append("^")
        chars.append(char)
    return "".join(chars)


def escape_arg_for_quoted(arg: str) -> str:
    return _BLANK_RE.sub(r"\1\1\2", escape_arg(arg))


def quote_arg(arg: str) -> str:
    return _BLANK_RUN_RE.sub(r'"\1"', arg)


DIALECT = Dialect(
    name=ShellName.CMD,
    escape=escape_arg,
    quote_escape=escape_arg_for_quoted,
    wrap=quote_arg,
    strip_flag_prefix=strip_win_flag_prefix,
    strip_quoted_flag_prefix=strip_win_flag_prefix,
)
