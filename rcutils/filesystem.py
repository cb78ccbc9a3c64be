"""Path queries and manipulation using the platform's conventions."""

from __future__ import annotations

import os

from rcutils.errors import InvalidArgumentError


def get_cwd() -> str:
    """Return the current working directory."""
    return os.getcwd()


def is_directory(abs_path: str | None) -> bool:
    """Return whether ``abs_path`` names a directory."""
    return abs_path is not None and os.path.isdir(abs_path)


def is_file(abs_path: str | None) -> bool:
    """Return whether ``abs_path`` names a regular file."""
    return abs_path is not None and os.path.isfile(abs_path)


def exists(abs_path: str | None) -> bool:
    """Return whether ``abs_path`` names an existing file or directory."""
    return abs_path is not None and os.path.exists(abs_path)


def is_readable(abs_path: str | None) -> bool:
    """Return whether ``abs_path`` exists and is readable by the current user."""
    return exists(abs_path) and os.access(abs_path, os.R_OK)


def is_writable(abs_path: str | None) -> bool:
    """Return whether ``abs_path`` exists and is writable by the current user."""
    return exists(abs_path) and os.access(abs_path, os.W_OK)


def is_readable_and_writable(abs_path: str | None) -> bool:
    """Return whether ``abs_path`` exists and is both readable and writable."""
    return exists(abs_path) and os.access(abs_path, os.R_OK | os.W_OK)


def join_path(left_hand_path: str, right_hand_path: str) -> str:
    """Join two paths with the platform's separator."""
    if left_hand_path is None or right_hand_path is None:
        raise InvalidArgumentError("paths must not be None")
    return f"{left_hand_path}{os.sep}{right_hand_path}"


def to_native_path(path: str) -> str:
    """Replace every "/" in ``path`` with the platform's separator."""
    if path is None:
        raise InvalidArgumentError("path must not be None")
    return path.replace("/", os.sep)


def mkdir(abs_path: str | None) -> bool:
    """Create a single directory at an absolute path.

    Returns True if the directory was made or already exists as a directory,
    False for missing, empty or relative paths and when a parent is missing.
    """
    if not abs_path or not os.path.isabs(abs_path):
        return False
    try:
        os.mkdir(abs_path)
    except FileExistsError:
        return is_directory(abs_path)
    except OSError:
        return False
    return True