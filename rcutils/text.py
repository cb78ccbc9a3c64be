"""Locale-independent character tests and bounded printf-style formatting."""

from __future__ import annotations

import re

from rcutils.errors import InvalidArgumentError

DEFAULT_FORMAT_LIMIT = 2048

# Length modifiers such as "l", "ll" or "z" carry no meaning for Python's
# formatting operator, so they are dropped; "%%" is matched first and kept.
_CONVERSION = re.compile(
    r"%%|(%[-+ #0]*(?:\*|\d+)?(?:\.(?:\*|\d+)?)?)(?:hh|ll|[hlLqjzt])(?=[diouxXeEfFgGcs])"
)


def isalnum_no_locale(c: str) -> bool:
    """Return whether ``c`` is an ASCII letter or digit, whatever the locale."""
    if len(c) != 1:
        raise ValueError("expected a single character")
    return "0" <= c <= "9" or "A" <= c <= "Z" or "a" <= c <= "z"


def _strip_length_modifiers(format_string: str) -> str:
    return _CONVERSION.sub(lambda m: m.group(1) or m.group(0), format_string)


def format_string_limit(limit: int, format_string: str, *args: object) -> str:
    """Format ``format_string`` with ``args``, keeping at most ``limit - 1`` characters."""
    if format_string is None:
        raise InvalidArgumentError("format_string must not be None")
    if limit < 0:
        raise InvalidArgumentError("limit must not be negative")
    try:
        text = _strip_length_modifiers(format_string) % args
    except (TypeError, ValueError, KeyError) as exc:
        raise InvalidArgumentError(f"failed to format string: {exc}") from exc
    return text[: max(limit - 1, 0)]


def format_string(format_string: str, *args: object) -> str:
    """Format with the default limit of 2048."""
    return format_string_limit(DEFAULT_FORMAT_LIMIT, format_string, *args)