"""Reading environment variables and locating the home directory."""

from __future__ import annotations

import os

from rcutils.errors import InvalidArgumentError, set_error_msg


def get_env(name: str) -> str:
    """Return the value of environment variable ``name``, or "" if it is unset."""
    if name is None:
        message = "argument env_name is null"
        set_error_msg(message)
        raise InvalidArgumentError(message)
    return os.environ.get(name, "")


def get_home_dir() -> str | None:
    """Return HOME if non-empty, else USERPROFILE if non-empty, else None."""
    for variable in ("HOME", "USERPROFILE"):
        value = get_env(variable)
        if value:
            return value
    return None