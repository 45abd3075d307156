"""Shared fixtures for argquote tests."""

from unittest.mock import patch

import pytest


def _identity(env, executable):
    return executable


@pytest.fixture
def fake_resolve():
    """Resolve every shell to the name or path it was given."""
    with patch("argquote.dialects.unix.resolve_executable", side_effect=_identity) as unix_resolve:
        with patch("argquote.dialects.win.resolve_executable", side_effect=_identity):
            yield unix_resolve
