"""Test doubles for code that uses argquote.

Example::

    for injection in INJECTION_STRINGS:
        assert function_using_argquote(injection) == "no injection"
"""

from argquote.errors import QuotingUnsupportedError
from argquote.reflection import as_list, checked_to_string

# Sample inputs that break naive command construction.
INJECTION_STRINGS = [
    "\x00world",
    "&& ls",
    "'; ls #",
    '"; ls #',
    "$PATH",
    "$Env:PATH",
    "%PATH%",
]


class StubEscaper:
    """An optimistic stand-in for `Escaper` with the same input/output profile.

    It never fails on construction, returns the stringified input unchanged,
    rejects values that cannot be stringified, and refuses to quote when
    `shell=False`.
    """

    def __init__(self, options=None, **kwargs):
        options = {**(dict(options) if options else {}), **kwargs}
        self.shell = options.get("shell", True)

    def escape(self, arg):
        return checked_to_string(arg)

    def escape_all(self, args):
        return [self.escape(arg) for arg in as_list(args)]

    def quote(self, arg):
        if self.shell is False:
            raise QuotingUnsupportedError()
        return self.escape(arg)

    def quote_all(self, args):
        return [self.quote(arg) for arg in as_list(args)]


class ThrowingEscaper:
    """A stand-in for `Escaper` that can never be created."""

    def __init__(self, options=None, **kwargs):
        raise RuntimeError("ThrowingEscaper can't be instantiated")
