"""Configuration for argquote from environment variables."""

import os
from collections.abc import Mapping
from typing import Any

from argquote.errors import InvalidOptionsError
from argquote.models import EscapeOptions
from argquote.options import coerce_options

SHELL_ENV = "ARGQUOTE_SHELL"
FLAG_PROTECTION_ENV = "ARGQUOTE_FLAG_PROTECTION"

_TRUE_WORDS = {"1", "true", "yes", "on"}
_FALSE_WORDS = {"0", "false", "no", "off"}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_WORDS:
        return True
    if value in _FALSE_WORDS:
        return False
    raise InvalidOptionsError(f"{name} must be a boolean, got {raw!r}")


def _parse_shell(raw: str) -> bool | str:
    value = raw.strip()
    if not value or value.lower() in _TRUE_WORDS:
        return True
    if value.lower() in _FALSE_WORDS:
        return False
    return value


def load_options(env: Mapping[str, str] | None = None, **overrides: Any) -> EscapeOptions:
    """Build EscapeOptions from ARGQUOTE_* variables, then apply `overrides`."""
    env = os.environ if env is None else env
    values: dict[str, Any] = {}

    shell = env.get(SHELL_ENV)
    if shell is not None:
        values["shell"] = _parse_shell(shell)

    flag_protection = env.get(FLAG_PROTECTION_ENV)
    if flag_protection is not None and flag_protection.strip():
        values["flag_protection"] = _parse_bool(FLAG_PROTECTION_ENV, flag_protection)

    values.update({key: value for key, value in overrides.items() if value is not None})
    return coerce_options(values)
