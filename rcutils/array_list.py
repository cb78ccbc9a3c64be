"""A list of items with an explicit capacity that grows but never shrinks."""

from __future__ import annotations

import copy
from typing import Any

from rcutils.errors import InvalidArgumentError, NotInitializedError, set_error_msg

_NOT_INITIALIZED = "array_list is not initialized"


class ArrayList:
    """Ordered storage of shallow copies of the items given to it."""

    def __init__(self, initial_capacity: int) -> None:
        if initial_capacity is None or initial_capacity < 0:
            message = "initial_capacity must not be negative"
            set_error_msg(message)
            raise InvalidArgumentError(message)
        self._items: list[Any] | None = []
        self._capacity = initial_capacity

    def _require_initialized(self) -> list[Any]:
        if self._items is None:
            set_error_msg(_NOT_INITIALIZED)
            raise NotInitializedError(_NOT_INITIALIZED)
        return self._items

    def _check_index(self, items: list[Any], index: int) -> None:
        if not 0 <= index < len(items):
            message = f"index {index} out of bounds for size {len(items)}"
            set_error_msg(message)
            raise InvalidArgumentError(message)

    @property
    def capacity(self) -> int:
        """Number of items the list can hold before it has to grow."""
        self._require_initialized()
        return self._capacity

    def __len__(self) -> int:
        return len(self._require_initialized())

    def add(self, data: Any) -> None:
        """Append a shallow copy of ``data``, doubling the capacity when full."""
        items = self._require_initialized()
        if len(items) >= self._capacity:
            self._capacity = max(self._capacity * 2, 1)
        items.append(copy.copy(data))

    def set(self, index: int, data: Any) -> None:
        """Replace the item at ``index`` with a shallow copy of ``data``."""
        items = self._require_initialized()
        self._check_index(items, index)
        items[index] = copy.copy(data)

    def remove(self, index: int) -> None:
        """Remove the item at ``index``; the capacity is left unchanged."""
        items = self._require_initialized()
        self._check_index(items, index)
        del items[index]

    def get(self, index: int) -> Any:
        """Return a shallow copy of the item at ``index``."""
        items = self._require_initialized()
        self._check_index(items, index)
        return copy.copy(items[index])

    def fini(self) -> None:
        """Release every item; later use raises NotInitializedError."""
        self._require_initialized()
        self._items = None
        self._capacity = 0