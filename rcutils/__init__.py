"""Common utilities: error state, text and command-line helpers, environment, filesystem and containers."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "text",
    "cmdline",
    "environment",
    "filesystem",
    "uint8_array",
    "array_list",
    "string_map",
]