"""Shared constants for argquote."""

import re

# Characters that cannot be escaped in any shell and are removed instead.
CONTROL_CHARS_RE = re.compile("[\x00\x08\x1b\x9b]")

# A carriage return that is not part of a CRLF pair.
LONE_CR_RE = re.compile("\r(?!\n)")

WIN32 = "win32"
OSTYPE_CYGWIN = "cygwin"
OSTYPE_MSYS = "msys"

UNIX_DEFAULT_SHELL = "/bin/sh"
WIN_DEFAULT_SHELL = "cmd.exe"
