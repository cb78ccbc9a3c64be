"""Minimal lookup of options in a command-line argument list."""

from __future__ import annotations

from collections.abc import Iterable


def option_exists(args: Iterable[str], option: str) -> bool:
    """Return whether ``option`` appears among ``args``."""
    return any(arg == option for arg in args)


def get_option(args: Iterable[str], option: str) -> str | None:
    """Return the argument following the first occurrence of ``option``.

    Returns None when the option is absent or is the last argument.
    """
    remaining = iter(args)
    for arg in remaining:
        if arg == option:
            return next(remaining, None)
    return None