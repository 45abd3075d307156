"""Escape or quote arguments for use in a shell command line."""

import logging
import os
import sys
from collections.abc import Mapping
from typing import Any

from argquote.models import EscapeOptions, ShellName
from argquote.options import parse_options
from argquote.platforms import get_helpers_by_platform
from argquote.reflection import as_list, checked_to_string

log = logging.getLogger(__name__)

OptionsArg = EscapeOptions | Mapping[str, Any] | None


class Escaper:
    """Escape and quote arguments for one shell.

    The shell is resolved once, when the instance is created, from `options`
    (an EscapeOptions, a mapping of its fields, or keyword arguments) and
    from `env`/`platform`, which default to the running process.

    Raises ShellConfigError if the shell is unsupported or cannot be found.
    """

    def __init__(
        self,
        options: OptionsArg = None,
        *,
        env: Mapping[str, str] | None = None,
        platform: str | None = None,
        **kwargs: Any,
    ) -> None:
        if kwargs:
            options = {**(dict(options) if options else {}), **kwargs}
        env = dict(os.environ) if env is None else env
        platform = sys.platform if platform is None else platform

        helpers = get_helpers_by_platform(env, platform)
        resolved = parse_options(options, env, helpers)
        dialect = helpers.get_dialect(resolved.shell_name)
        log.debug("escaping for the %s dialect", dialect.name)

        self._resolved = resolved
        self._dialect = dialect

    @property
    def shell_name(self) -> ShellName:
        return self._dialect.name

    @property
    def flag_protection(self) -> bool:
        return self._resolved.flag_protection

    def _escape(self, arg: str) -> str:
        escaped = self._dialect.escape(arg)
        if self._resolved.flag_protection:
            escaped = self._dialect.strip_flag_prefix(escaped)
        return escaped

    def _quote(self, arg: str) -> str:
        escaped = self._dialect.quote_escape(arg)
        if self._resolved.flag_protection:
            escaped = self._dialect.strip_quoted_flag_prefix(escaped)
        return self._dialect.wrap(escaped)

    def escape(self, arg: object) -> str:
        """Escape every character in `arg` that a shell would interpret.

        Raises StringificationError if `arg` cannot be converted to a string.
        """
        return self._escape(checked_to_string(arg))

    def escape_all(self, args: object) -> list[str]:
        """Escape each of `args`; a single value is treated as a list of one."""
        return [self.escape(arg) for arg in as_list(args)]

    def quote(self, arg: object) -> str:
        """Quote `arg` and escape whatever the quotes do not protect.

        Raises QuotingUnsupportedError when no shell is used.
        """
        return self._quote(checked_to_string(arg))

    def quote_all(self, args: object) -> list[str]:
        """Quote each of `args`; a single value is treated as a list of one."""
        return [self.quote(arg) for arg in as_list(args)]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(shell={self.shell_name.value!r}, "
            f"flag_protection={self.flag_protection!r})"
        )


def escape(
    arg: object,
    options: OptionsArg = None,
    *,
    env: Mapping[str, str] | None = None,
    platform: str | None = None,
) -> str:
    """Escape a single argument, resolving the shell for this call only."""
    return Escaper(options, env=env, platform=platform).escape(arg)


def escape_all(
    args: object,
    options: OptionsArg = None,
    *,
    env: Mapping[str, str] | None = None,
    platform: str | None = None,
) -> list[str]:
    return Escaper(options, env=env, platform=platform).escape_all(args)


def quote(
    arg: object,
    options: OptionsArg = None,
    *,
    env: Mapping[str, str] | None = None,
    platform: str | None = None,
) -> str:
    """Quote a single argument, resolving the shell for this call only."""
    return Escaper(options, env=env, platform=platform).quote(arg)


def quote_all(
    args: object,
    options: OptionsArg = None,
    *,
    env: Mapping[str, str] | None = None,
    platform: str | None = None,
) -> list[str]:
    return Escaper(options, env=env, platform=platform).quote_all(args)
