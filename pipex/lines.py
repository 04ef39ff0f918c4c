"""Reading a stream one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any, Callable, Optional, Union

BUFFER_SIZE = 1
_ENDL = b"\n"


class LineReader:
    """Read lines from a file descriptor or a binary stream with a read method.

    Each line keeps its trailing newline; the last line may lack one.
    """

    def __init__(
        self,
        source: Union[int, Any],
        buffer_size: int = BUFFER_SIZE,
        encoding: str = "utf-8",
    ) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._read: Callable[[int], bytes]
        if isinstance(source, int):
            if source < 0:
                raise ValueError(f"invalid file descriptor {source}")
            self._read = lambda size: os.read(source, size)
        else:
            self._read = source.read
        self.buffer_size = buffer_size
        self.encoding = encoding
        self._stash = b""

    def _fill(self) -> None:
        while _ENDL not in self._stash:
            chunk = self._read(self.buffer_size)
            if not chunk:
                return
            self._stash += chunk

    def read_line(self) -> Optional[str]:
        """Return the next line, or None once the input is exhausted.

        A read error discards any buffered input and propagates.
        """
        try:
            self._fill()
        except OSError:
            self._stash = b""
            raise
        if not self._stash:
            return None
        end = self._stash.find(_ENDL)
        if end == -1:
            line, self._stash = self._stash, b""
        else:
            line, self._stash = self._stash[: end + 1], self._stash[end + 1 :]
        return line.decode(self.encoding, "surrogateescape")

    def __iter__(self) -> Iterator[str]:
        return iter(self.read_line, None)