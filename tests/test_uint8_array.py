import pytest

from rcutils.errors import InvalidArgumentError, get_error_state, reset_error
from rcutils.uint8_array import Uint8Array


def _filled(data: bytes, capacity: int) -> Uint8Array:
    array = Uint8Array(capacity)
    array.buffer[: len(data)] = data
    array.length = len(data)
    return array


def test_init_sets_capacity_and_empty_length():
    array = Uint8Array(10)
    assert array.capacity == 10
    assert len(array) == 0
    assert bytes(array) == b""


def test_zero_capacity():
    array = Uint8Array()
    assert array.capacity == 0
    assert len(array) == 0


def test_negative_capacity_raises():
    with pytest.raises(InvalidArgumentError):
        Uint8Array(-1)


def test_bytes_round_trip():
    data = b"hello"
    array = _filled(data, 8)
    assert bytes(array) == data
    assert len(array) == len(data)


def test_length_beyond_capacity_raises():
    array = Uint8Array(4)
    with pytest.raises(InvalidArgumentError):
        array.length = 5
    assert len(array) == 0
    assert array.capacity == 4


def test_resize_grow_keeps_contents():
    data = b"abc"
    array = _filled(data, 3)
    array.resize(10)
    assert array.capacity == 10
    assert bytes(array) == data


def test_resize_shrink_truncates_length():
    data = b"abcdef"
    array = _filled(data, 6)
    array.resize(2)
    assert array.capacity == 2
    assert len(array) == 2
    assert bytes(array) == data[:2]


def test_resize_same_size_is_noop():
    data = b"xyz"
    array = _filled(data, 5)
    array.resize(5)
    assert array.capacity == 5
    assert bytes(array) == data


def test_resize_zero_raises_and_sets_error():
    reset_error()
    array = Uint8Array(4)
    with pytest.raises(InvalidArgumentError):
        array.resize(0)
    assert get_error_state().message == "new size of uint8_array has to be greater than zero"
    assert array.capacity == 4
    reset_error()


def test_fini_clears_everything():
    array = _filled(b"data", 4)
    array.fini()
    assert array.capacity == 0
    assert len(array) == 0
    assert bytes(array) == b""


def test_resize_after_fini():
    array = _filled(b"data", 4)
    array.fini()
    array.resize(3)
    assert array.capacity == 3
    assert len(array) == 0