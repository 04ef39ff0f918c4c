"""String helpers: searching, comparison, slicing, trimming and splitting.

Text functions work on ``str``. The bounded copy and concatenation helpers work
on byte buffers that hold NUL-terminated strings.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest
from typing import Optional, TypeVar, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]

T = TypeVar("T")

_NUL = "\0"


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _c_bytes(data: ReadableBuffer) -> bytes:
    """Return the bytes of data up to, not including, the first NUL."""
    raw = bytes(data)
    end = raw.find(b"\0")
    return raw if end == -1 else raw[:end]


def _check_size(dest: Optional[Buffer], size: int) -> None:
    if size < 0:
        raise ValueError(f"buffer size must not be negative, got {size}")
    if size and (dest is None or size > len(dest)):
        held = 0 if dest is None else len(dest)
        raise ValueError(f"destination holds {held} bytes, fewer than size {size}")


def find_char(text: str, c: str) -> Optional[int]:
    """Return the index of the first c in text, or None.

    Searching for the NUL character finds the end of the text.
    """
    if _single_char(c) == _NUL:
        return len(text)
    index = text.find(c)
    return None if index == -1 else index


def rfind_char(text: str, c: str) -> Optional[int]:
    """Return the index of the last c in text, or None.

    Searching for the NUL character finds the end of the text.
    """
    if _single_char(c) == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index == -1 else index


def compare(first: str, second: str) -> int:
    """Compare two strings.

    Returns the code difference of the first differing characters, with the end
    of a string counting as NUL; 0 when they are equal.
    """
    for a, b in zip_longest(first, second, fillvalue=_NUL):
        if a != b or a == _NUL:
            return ord(a) - ord(b)
    return 0


def compare_n(first: str, second: str, n: int) -> int:
    """Compare at most the first n characters of two strings."""
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    if n == 0:
        return 0
    return compare(first[:n], second[:n])


def duplicate(text: str) -> str:
    """Return a copy of text."""
    return "".join(text)


def length(text: str) -> int:
    """Return the number of characters in text."""
    return len(text)


def iter_indexed(
    chars: MutableSequence[T], func: Callable[[int, T], Optional[T]]
) -> MutableSequence[T]:
    """Call func(index, item) for every item and store back what it returns.

    A result of None leaves the item unchanged. The same sequence is returned.
    """
    for index, item in enumerate(chars):
        replacement = func(index, item)
        if replacement is not None:
            chars[index] = replacement
    return chars


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) over every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def join(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def bounded_copy(dest: Optional[Buffer], src: ReadableBuffer, size: int) -> int:
    """Copy the string src into dest, writing at most size bytes with the NUL.

    Returns the length of src, so a result of size or more means truncation.
    """
    data = _c_bytes(src)
    _check_size(dest, size)
    if size and dest is not None:
        count = min(len(data), size - 1)
        dest[:count] = data[:count]
        dest[count] = 0
    return len(data)


def bounded_concat(dest: Optional[Buffer], src: ReadableBuffer, size: int) -> int:
    """Append the string src to the string in dest, within a buffer of size bytes.

    Returns the length the combined string would have had; when dest already
    fills size bytes, returns len(src) + size and writes nothing.
    """
    data = _c_bytes(src)
    if dest is None and size == 0:
        return len(data)
    _check_size(dest, size)
    if dest is None:
        raise ValueError("destination buffer is missing")
    raw = bytes(dest)
    end = raw.find(b"\0")
    dest_len = len(raw) if end == -1 else end
    if dest_len >= size:
        return len(data) + size
    bounded_copy(memoryview(dest)[dest_len:], data, size - dest_len)
    return dest_len + len(data)


def find_within(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Return where needle first lies wholly within the first limit characters.

    An empty needle is found at index 0; otherwise None when absent.
    """
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")
    if not needle:
        return 0
    index = haystack[:limit].find(needle)
    return None if index == -1 else index


def trim(text: str, charset: str) -> str:
    """Strip every character in charset from both ends of text."""
    return text.strip(charset)


def substring(text: str, start: int, count: int) -> Optional[str]:
    """Return up to count characters of text from start.

    Returns None when start is at or past the end of text.
    """
    if start < 0 or count < 0:
        raise ValueError("start and count must not be negative")
    if start >= len(text):
        return None
    return text[start:start + count]


def split_words(text: str, sep: str) -> list[str]:
    """Split text on sep, dropping the empty pieces between repeated separators."""
    return [word for word in text.split(_single_char(sep)) if word]


def count_words(text: str, sep: str) -> int:
    """Return how many words split_words would produce."""
    return len(split_words(text, sep))