"""A map from strings to strings with an explicit, reservable capacity."""

from __future__ import annotations

from collections.abc import Iterator

from rcutils.errors import (
    InvalidArgumentError,
    NotEnoughSpaceError,
    StringKeyNotFoundError,
    StringMapInvalidError,
    set_error_msg,
)

_INVALID = "string map is invalid"


def _fail(error_type: type[Exception], message: str) -> None:
    set_error_msg(message)
    raise error_type(message)


class StringMap:
    """Key value pairs of strings, holding at most ``capacity`` pairs until grown."""

    def __init__(self, initial_capacity: int) -> None:
        if initial_capacity is None or initial_capacity < 0:
            _fail(InvalidArgumentError, "initial_capacity must not be negative")
        self._pairs: dict[str, str] | None = {}
        self._capacity = initial_capacity

    def _require_valid(self) -> dict[str, str]:
        if self._pairs is None:
            _fail(StringMapInvalidError, _INVALID)
        return self._pairs

    @staticmethod
    def _check_string(name: str, value: str | None) -> None:
        if value is None:
            _fail(InvalidArgumentError, f"{name} argument is null")

    @property
    def capacity(self) -> int:
        """Maximum number of pairs the map holds before it has to grow."""
        self._require_valid()
        return self._capacity

    def __len__(self) -> int:
        return len(self._require_valid())

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._require_valid()))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.key_exists(key)

    def reserve(self, capacity: int) -> None:
        """Set the capacity to ``capacity``, but never below the current size."""
        pairs = self._require_valid()
        if capacity is None or capacity < 0:
            _fail(InvalidArgumentError, "capacity must not be negative")
        self._capacity = max(capacity, len(pairs))

    def clear(self) -> None:
        """Remove every pair; the capacity is kept."""
        self._require_valid().clear()

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, growing the map when it is full."""
        pairs = self._require_valid()
        self._check_string("key", key)
        self._check_string("value", value)
        if key not in pairs and len(pairs) >= self._capacity:
            self.reserve(max(self._capacity * 2, 1))
        pairs[key] = value

    def set_no_resize(self, key: str, value: str) -> None:
        """Store ``value`` under ``key`` only if the key exists or there is room."""
        pairs = self._require_valid()
        self._check_string("key", key)
        self._check_string("value", value)
        if key not in pairs and len(pairs) >= self._capacity:
            _fail(NotEnoughSpaceError, "string map is full")
        pairs[key] = value

    def unset(self, key: str) -> None:
        """Remove ``key`` from the map."""
        pairs = self._require_valid()
        self._check_string("key", key)
        if key not in pairs:
            _fail(StringKeyNotFoundError, f"key '{key}' not found")
        del pairs[key]

    def key_exists(self, key: str | None, length: int | None = None) -> bool:
        """Return whether the first ``length`` characters of ``key`` are a key.

        Returns False, without recording an error, for a None key or an
        invalid map.
        """
        return self.get(key, length) is not None

    def get(self, key: str | None, length: int | None = None) -> str | None:
        """Return the value for the first ``length`` characters of ``key``.

        Returns None, without recording an error, when the key is missing or
        None, or the map is invalid.
        """
        if self._pairs is None or key is None:
            return None
        if length is not None:
            if length < 0:
                return None
            key = key[:length]
        return self._pairs.get(key)

    def copy_to(self, other: StringMap) -> None:
        """Copy every pair into ``other``, overwriting values and growing it as needed."""
        pairs = self._require_valid()
        if other is None:
            _fail(InvalidArgumentError, "dst_string_map argument is null")
        other._require_valid()
        for key, value in list(pairs.items()):
            other.set(key, value)

    def fini(self) -> None:
        """Release every pair; later use raises StringMapInvalidError."""
        self._require_valid()
        self._pairs = None
        self._capacity = 0