"""Top-level CLI router."""

import sys

from argquote import __version__

from . import detect as detect_cmd
from . import escape as escape_cmd

USAGE = "usage: argquote {escape,quote,detect} [options] ..."


def main(argv: list[str] | None = None) -> int:
    """Route to escape, quote or detect mode."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(USAGE, file=sys.stderr)
        return 2
    command, rest = args[0], args[1:]
    if command in ("escape", "quote"):
        return escape_cmd.run(rest, mode=command)
    if command == "detect":
        return detect_cmd.run(rest)
    if command in ("-V", "--version"):
        print(f"argquote {__version__}")
        return 0
    print(USAGE, file=sys.stderr)
    print(f"argquote: unknown command {command!r}", file=sys.stderr)
    return 2


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
