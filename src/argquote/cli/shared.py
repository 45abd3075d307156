"""Options and helpers shared by the CLI commands."""

import argparse
import logging

from argquote import __version__
from argquote.config import load_options
from argquote.escaper import Escaper


def build_parser(prog: str, description: str) -> argparse.ArgumentParser:
    """Build a parser with the options every command accepts."""
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    shell_group = parser.add_mutually_exclusive_group()
    shell_group.add_argument(
        "-s",
        "--shell",
        help="Name or path of the shell to escape for (default: the system shell)",
    )
    shell_group.add_argument(
        "--no-shell",
        action="store_true",
        help="Escape for a program started without a shell",
    )
    parser.add_argument(
        "--no-flag-protection",
        action="store_true",
        help="Keep leading dashes that could be read as flags",
    )
    return parser


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )


def build_escaper(args: argparse.Namespace) -> Escaper:
    """Create an Escaper from parsed arguments and ARGQUOTE_* variables."""
    shell = False if args.no_shell else args.shell
    flag_protection = False if args.no_flag_protection else None
    options = load_options(shell=shell, flag_protection=flag_protection)
    return Escaper(options)
