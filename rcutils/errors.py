"""Return codes, exceptions and the per-thread error state."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass
from enum import IntEnum

ERROR_STATE_LINE_NUMBER_STR_MAX_LENGTH = 20  # len("18446744073709551615")
ERROR_FORMATTING_CHARACTERS = 6  # ", at " + ":"
ERROR_MESSAGE_MAX_LENGTH = 1024
ERROR_STATE_MESSAGE_MAX_LENGTH = 768
ERROR_STATE_FILE_MAX_LENGTH = (
    ERROR_MESSAGE_MAX_LENGTH
    - ERROR_STATE_MESSAGE_MAX_LENGTH
    - ERROR_STATE_LINE_NUMBER_STR_MAX_LENGTH
    - ERROR_FORMATTING_CHARACTERS
    - 1
)
ERROR_NOT_SET = "error not set"

_UINT64_MAX = 2**64 - 1


class ReturnCode(IntEnum):
    """Numeric result codes shared across the library."""

    OK = 0
    WARN = 1
    ERROR = 2
    BAD_ALLOC = 10
    INVALID_ARGUMENT = 11
    NOT_ENOUGH_SPACE = 12
    NOT_INITIALIZED = 13
    NOT_FOUND = 14
    STRING_MAP_ALREADY_INIT = 30
    STRING_MAP_INVALID = 31
    STRING_KEY_NOT_FOUND = 32
    LOGGING_SEVERITY_MAP_INVALID = 40
    LOGGING_SEVERITY_STRING_INVALID = 41
    HASH_MAP_NO_MORE_ENTRIES = 50


class RcutilsError(Exception):
    """Base class of every error raised by this package."""

    return_code: ReturnCode = ReturnCode.ERROR


class BadAllocError(RcutilsError, MemoryError):
    """Storage could not be obtained."""

    return_code = ReturnCode.BAD_ALLOC


class InvalidArgumentError(RcutilsError, ValueError):
    """An argument was missing or out of range."""

    return_code = ReturnCode.INVALID_ARGUMENT


class NotEnoughSpaceError(RcutilsError):
    """A container has no room left for the operation."""

    return_code = ReturnCode.NOT_ENOUGH_SPACE


class NotInitializedError(RcutilsError):
    """A resource was used before being initialized or after finalization."""

    return_code = ReturnCode.NOT_INITIALIZED


class NotFoundError(RcutilsError, LookupError):
    """The requested resource does not exist."""

    return_code = ReturnCode.NOT_FOUND


class StringMapInvalidError(RcutilsError):
    """A string map is not in a usable state."""

    return_code = ReturnCode.STRING_MAP_INVALID


class StringKeyNotFoundError(RcutilsError, KeyError):
    """A key is missing from a string map."""

    return_code = ReturnCode.STRING_KEY_NOT_FOUND

    def __str__(self) -> str:
        return Exception.__str__(self)


@dataclass(frozen=True)
class ErrorState:
    """An error message together with the place it was raised from."""

    message: str
    file: str
    line_number: int

    def __str__(self) -> str:
        text = f"{self.message}, at {self.file}:{self.line_number}"
        return text[: ERROR_MESSAGE_MAX_LENGTH - 1]


_local = threading.local()


def set_error_state(message: str, file: str, line_number: int) -> None:
    """Record an error for the current thread, truncating over-long fields."""
    if message is None or file is None:
        raise InvalidArgumentError("message and file must not be None")
    if not 0 <= line_number <= _UINT64_MAX:
        raise InvalidArgumentError(f"line number out of range: {line_number}")
    _local.state = ErrorState(
        message=message[: ERROR_STATE_MESSAGE_MAX_LENGTH - 1],
        file=file[: ERROR_STATE_FILE_MAX_LENGTH - 1],
        line_number=line_number,
    )


def set_error_msg(message: str) -> None:
    """Record an error, taking file and line from the caller."""
    frame = sys._getframe(1)
    set_error_state(message, frame.f_code.co_filename, frame.f_lineno)


def error_is_set() -> bool:
    """Return whether an error is recorded for the current thread."""
    return get_error_state() is not None


def get_error_state() -> ErrorState | None:
    """Return the current thread's error state, or None if none is set."""
    return getattr(_local, "state", None)


def get_error_string() -> str:
    """Return the formatted error, or "error not set"."""
    state = get_error_state()
    return ERROR_NOT_SET if state is None else str(state)


def reset_error() -> None:
    """Clear the current thread's error state."""
    _local.state = None