"""Command-line interface for argquote."""

from argquote.cli.app import entrypoint, main

__all__ = ["entrypoint", "main"]
