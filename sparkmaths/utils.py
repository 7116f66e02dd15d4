"""String, file and timing helpers."""

from __future__ import annotations

import time

__all__ = ["split_string", "read_file", "Timer"]


def split_string(string: str, delimiter: str) -> list[str]:
    """Split on a single-character delimiter, keeping empty fields."""
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")
    return string.split(delimiter)


def read_file(filepath) -> str:
    """Return a text file's contents, up to the first NUL character.

    Raises OSError (e.g. FileNotFoundError) if the file cannot be opened.
    """
    with open(filepath, "rt") as handle:
        content = handle.read()
    return content.split("\0", 1)[0]


class Timer:
    """A stopwatch that starts when created."""

    __slots__ = ("_start",)

    def __init__(self) -> None:
        self._start = time.perf_counter()

    def reset(self) -> None:
        """Restart the timer from zero."""
        self._start = time.perf_counter()

    def elapsed(self) -> float:
        """Milliseconds since creation or the last reset."""
        return (time.perf_counter() - self._start) * 1000.0