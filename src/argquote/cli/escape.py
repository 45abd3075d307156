"""Escape or quote arguments from the command line."""

import logging
import sys

from argquote.cli.shared import build_escaper, build_parser, configure_logging
from argquote.errors import ArgquoteError

log = logging.getLogger(__name__)


def run(argv: list[str], mode: str = "escape") -> int:
    """Print each argument escaped (or quoted) for the selected shell."""
    parser = build_parser(
        prog=f"argquote {mode}",
        description=f"{mode.capitalize()} arguments for safe use in a shell command",
    )
    parser.add_argument(
        "-j",
        "--join",
        action="store_true",
        help="Print all results on one line, separated by spaces",
    )
    parser.add_argument("values", nargs="+", metavar="ARG", help="Values to process")
    args = parser.parse_args(argv)
    configure_logging(args.debug)

    try:
        escaper = build_escaper(args)
        if mode == "quote":
            results = escaper.quote_all(args.values)
        else:
            results = escaper.escape_all(args.values)
    except ArgquoteError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    log.debug("%s %d values for %s", mode, len(results), escaper.shell_name)
    if args.join:
        print(" ".join(results))
    else:
        for result in results:
            print(result)
    return 0
