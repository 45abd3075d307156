"""Conversion of arbitrary values into strings."""

from collections.abc import Iterable

from argquote.errors import StringificationError


def checked_to_string(value: object) -> str:
    """Return `value` as a string or raise StringificationError."""
    if isinstance(value, str):
        return value
    if value is None:
        raise StringificationError()
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as e:
            raise StringificationError() from e
    try:
        text = str(value)
    except Exception as e:
        raise StringificationError() from e
    return text


def as_list(values: object) -> list[object]:
    """Treat strings, bytes and non-iterables as a single value."""
    if isinstance(values, (str, bytes, bytearray)) or not isinstance(values, Iterable):
        return [values]
    return list(values)
