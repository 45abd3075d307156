"""Show which shell dialect argquote would use."""

import sys

from argquote.cli.shared import build_escaper, build_parser, configure_logging
from argquote.errors import ArgquoteError


def run(argv: list[str]) -> int:
    parser = build_parser(
        prog="argquote detect",
        description="Print the shell dialect selected for the current system",
    )
    args = parser.parse_args(argv)
    configure_logging(args.debug)

    try:
        escaper = build_escaper(args)
    except ArgquoteError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(escaper.shell_name.value)
    return 0
