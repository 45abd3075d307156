"""Escaping for Windows PowerShell and PowerShell Core."""

import re

from argquote.dialects.common import (
    single_quote,
    strip_control_chars,
    strip_control_chars_and_cr,
)
from argquote.models import Dialect, ShellName

# PowerShell treats U+0085 (next line) as whitespace.
_REDIRECT_RE = re.compile(r"(?<![^\s\x85])([*1-6]?)(>)")
_WORD_START_RE = re.compile(r"(?<![^\s\x85])([#\-:<@\]])")
_SPECIAL_RE = re.compile("([$&'(),;{|}‘’‚‛“”„])")
_SINGLE_QUOTES_RE = re.compile("(['‘’‚‛])")
_WHITESPACE_RE = re.compile(r"([\s\x85])")
_LEADING_WHITESPACE_RE = re.compile(r"^[\s\x85]+")
_QUOTE_RE = re.compile(r'(?<!\\)(\\*)"')
_TRAILING_BACKSLASHES_RE = re.compile(r"(?<!\\)(\\+)\Z")
_FLAG_PREFIX_RE = re.compile(r"^(?:`?-|/)+")


def escape_arg(arg: str) -> str:
    arg = strip_control_chars_and_cr(arg).replace("\n", " ")
    arg = arg.replace("`", "``")
    arg = _REDIRECT_RE.sub(r"\1`\2", arg)
    arg = _WORD_START_RE.sub(r"`\1", arg)
    arg = _SPECIAL_RE.sub(r"`\1", arg)

    if _WHITESPACE_RE.search(_LEADING_WHITESPACE_RE.sub("", arg)):
        arg = _QUOTE_RE.sub(r'\1\1`"`"', arg)
        arg = _TRAILING_BACKSLASHES_RE.sub(r"\1\1", arg)
    else:
        arg = _QUOTE_RE.sub(r'\1\1\\`"', arg)

    return _WHITESPACE_RE.sub(r"`\1", arg)


def escape_arg_for_quoted(arg: str) -> str:
    arg = strip_control_chars(arg)
    arg = _SINGLE_QUOTES_RE.sub(r"\1\1", arg)

    if _WHITESPACE_RE.search(arg):
        arg = _QUOTE_RE.sub(r'\1\1""', arg)
        arg = _TRAILING_BACKSLASHES_RE.sub(r"\1\1", arg)
    else:
        arg = _QUOTE_RE.sub(r'\1\1\\"', arg)

    return arg


def strip_quoted_flag_prefix(arg: str) -> str:
    return _FLAG_PREFIX_RE.sub("", arg)


def strip_flag_prefix(arg: str) -> str:
    """Strip a flag prefix and escape what it exposes at the word start."""
    arg = _REDIRECT_RE.sub(r"\1`\2", strip_quoted_flag_prefix(arg))
    return _WORD_START_RE.sub(r"`\1", arg)


DIALECT = Dialect(
    name=ShellName.POWERSHELL,
    escape=escape_arg,
    quote_escape=escape_arg_for_quoted,
    wrap=single_quote,
    strip_flag_prefix=strip_flag_prefix,
    strip_quoted_flag_prefix=strip_quoted_flag_prefix,
)
