"""Building blocks shared by several dialects."""

import re

from argquote.constants import CONTROL_CHARS_RE, LONE_CR_RE

_LEADING_DASHES_RE = re.compile(r"^-+")


def strip_control_chars(arg: str) -> str:
    """Remove characters that cannot be escaped, keeping CRLF pairs."""
    return LONE_CR_RE.sub("", CONTROL_CHARS_RE.sub("", arg))


def strip_control_chars_and_cr(arg: str) -> str:
    """Remove characters that cannot be escaped, including every `\\r`."""
    return CONTROL_CHARS_RE.sub("", arg).replace("\r", "")


def single_quote(arg: str) -> str:
    return f"'{arg}'"


def strip_leading_dashes(arg: str) -> str:
    """Remove a prefix that could be read as a flag on Unix systems."""
    return _LEADING_DASHES_RE.sub("", arg)
