"""A growable byte buffer with explicit capacity and used length."""

from __future__ import annotations

from rcutils.errors import InvalidArgumentError, set_error_msg


class Uint8Array:
    """Byte storage of a fixed capacity, of which the first ``length`` bytes are in use."""

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise InvalidArgumentError("capacity must not be negative")
        self.buffer = bytearray(capacity)
        self._length = 0

    @property
    def capacity(self) -> int:
        """Number of bytes the buffer can hold."""
        return len(self.buffer)

    @property
    def length(self) -> int:
        """Number of bytes in use."""
        return self._length

    @length.setter
    def length(self, value: int) -> None:
        if not 0 <= value <= self.capacity:
            raise InvalidArgumentError(
                f"length {value} outside of capacity {self.capacity}"
            )
        self._length = value

    def __len__(self) -> int:
        return self._length

    def __bytes__(self) -> bytes:
        return bytes(self.buffer[: self._length])

    def resize(self, new_size: int) -> None:
        """Change the capacity, truncating the used length if it no longer fits."""
        if new_size <= 0:
            message = "new size of uint8_array has to be greater than zero"
            set_error_msg(message)
            raise InvalidArgumentError(message)
        if new_size == self.capacity:
            return
        if new_size < self.capacity:
            del self.buffer[new_size:]
        else:
            self.buffer.extend(bytes(new_size - self.capacity))
        self._length = min(self._length, new_size)

    def fini(self) -> None:
        """Release the storage, leaving an empty array of zero capacity."""
        self.buffer = bytearray()
        self._length = 0