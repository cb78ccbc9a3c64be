# rcutils

A small collection of general-purpose utilities:

- **Error state** (`rcutils.errors`): a per-thread "last error" record that
  holds a message, a file and a line number (`set_error_state`,
  `set_error_msg`, `error_is_set`, `get_error_state`, `get_error_string`,
  `reset_error`). It also has an exception hierarchy rooted at `RcutilsError`,
  in which each exception carries a `ReturnCode` value.
- **Text helpers** (`rcutils.text`): `isalnum_no_locale` tests for ASCII
  letters and digits. `format_string` and `format_string_limit` do
  printf-style formatting with a length limit. C length modifiers such as
  `%ld` or `%zu` are accepted, and the result is cut to `limit - 1`
  characters (the default limit is 2048).
- **Command-line options** (`rcutils.cmdline`): `option_exists` and
  `get_option`.
- **Environment** (`rcutils.environment`): `get_env` returns `""` for an
  unset variable. `get_home_dir` returns `HOME`, falls back to
  `USERPROFILE`, and returns `None` when neither is set.
- **Filesystem** (`rcutils.filesystem`): `get_cwd`, `is_directory`, `is_file`,
  `exists`, `is_readable`, `is_writable`, `is_readable_and_writable`,
  `join_path`, `to_native_path` and `mkdir`. `mkdir` only creates a single
  directory at an absolute path, and it returns `True` or `False`.
- **Containers**:
  - `rcutils.uint8_array.Uint8Array` is a byte buffer with a capacity and a
    used length.
  - `rcutils.array_list.ArrayList` is a list with a capacity that doubles when
    the list is full.
  - `rcutils.string_map.StringMap` is a string-to-string map with a capacity
    that you can reserve.

## Installation

```
pip install .
```

## Examples

Error state:

```python
from rcutils.errors import set_error_msg, get_error_string, reset_error, error_is_set

set_error_msg("something went wrong")
print(get_error_string())   # "something went wrong, at <file>:<line>"
reset_error()
assert not error_is_set()
print(get_error_string())   # "error not set"
```

Formatting with a limit:

```python
from rcutils.text import format_string, format_string_limit

format_string("%s has %zu items", "list", 3)   # "list has 3 items"
format_string_limit(6, "%s", "truncated")      # "trunc"
```

Command-line options:

```python
from rcutils.cmdline import option_exists, get_option

args = ["prog", "--rate", "10"]
option_exists(args, "--rate")  # True
get_option(args, "--rate")     # "10"
get_option(args, "--size")     # None
```

A byte buffer:

```python
from rcutils.uint8_array import Uint8Array

array = Uint8Array(4)
array.buffer[:2] = b"hi"
array.length = 2
bytes(array)          # b"hi"
array.resize(1)       # capacity 1, length truncated to 1
```

An array list:

```python
from rcutils.array_list import ArrayList

items = ArrayList(2)
items.add(42)
items.get(0)          # 42
len(items)            # 1
```

A string map:

```python
from rcutils.string_map import StringMap

env = StringMap(2)
env.set("key", "value")
"key" in env              # True
env.get("key")            # "value"
env.get("keyboard", 3)    # "value" (only the first 3 characters are looked up)
```

Errors are raised as exceptions. For example, `StringMap.set_no_resize` on a
full map raises `NotEnoughSpaceError`, and using a container after `fini()`
raises `NotInitializedError` or `StringMapInvalidError`.

## Not included

The package does not have a character search helper that returns the index of
the first or last occurrence of a delimiter. Use `str.find` and `str.rfind`
for that.

## Running the tests

```
pip install .[test]
pytest
```