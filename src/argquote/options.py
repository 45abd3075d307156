"""Resolve escaping options into a configuration."""

import logging
from collections.abc import Mapping
from types import ModuleType
from typing import Any

from pydantic import ValidationError

from argquote.errors import InvalidOptionsError, UnsupportedShellError
from argquote.models import EscapeOptions, ResolvedOptions, ShellName

log = logging.getLogger(__name__)


def coerce_options(options: EscapeOptions | Mapping[str, Any] | None) -> EscapeOptions:
    """Return `options` as an EscapeOptions instance."""
    if options is None:
        return EscapeOptions()
    if isinstance(options, EscapeOptions):
        return options
    try:
        # A missing value and None both mean "use the default".
        values = {key: value for key, value in dict(options).items() if value is not None}
        return EscapeOptions.model_validate(values)
    except (TypeError, ValueError, ValidationError) as e:
        raise InvalidOptionsError(f"Invalid escape options: {e}") from e


def parse_options(
    options: EscapeOptions | Mapping[str, Any] | None,
    env: Mapping[str, str],
    helpers: ModuleType,
) -> ResolvedOptions:
    """Resolve the shell for `options` using the platform `helpers`.

    Raises ShellConfigError if the shell cannot be found or is unsupported.
    """
    options = coerce_options(options)

    shell_name = ShellName.NO_SHELL
    if options.shell is not False:
        shell = options.shell
        if not isinstance(shell, str) or not shell:
            shell = helpers.get_default_shell(env)
        shell_name = helpers.get_shell_name(env, shell)

    if not helpers.is_shell_supported(shell_name):
        raise UnsupportedShellError(str(shell_name))

    log.debug("resolved shell=%s flag_protection=%s", shell_name, options.flag_protection)
    return ResolvedOptions(flag_protection=options.flag_protection, shell_name=shell_name)
