"""Collecting here-document input up to a limiter line."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Iterator
from typing import BinaryIO, Optional, TextIO, Union

from .errors import FileOpenError
from .lines import LineReader

TMP_FILE = ".temp"
PROMPT = "> "

Source = Union[int, LineReader, Iterable[str], None]


def _lines(source: Source) -> Iterator[str]:
    if source is None:
        return iter(LineReader(0))
    if isinstance(source, int):
        return iter(LineReader(source))
    return iter(source)


def read_until(
    limiter: str, source: Source = None, prompt: Optional[TextIO] = None
) -> Iterator[str]:
    """Yield input lines until one equals limiter followed by a newline.

    A prompt is written to prompt (standard output by default) before each
    line is read. The source is a file descriptor, a LineReader or an iterable
    of lines; it defaults to standard input. End of input also ends the text.
    """
    terminator = limiter + "\n"
    out = sys.stdout if prompt is None else prompt
    lines = _lines(source)
    while True:
        out.write(PROMPT)
        out.flush()
        line = next(lines, None)
        if line is None or line == terminator:
            return
        yield line


def write_heredoc(
    limiter: str,
    path: str = TMP_FILE,
    source: Source = None,
    prompt: Optional[TextIO] = None,
) -> BinaryIO:
    """Store here-document input in path and return the file opened for reading."""
    try:
        fd = os.open(path, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, 0o644)
    except OSError as exc:
        raise FileOpenError(path, exc.errno or 0) from exc
    with os.fdopen(fd, "wb") as target:
        for line in read_until(limiter, source, prompt):
            target.write(line.encode("utf-8", "surrogateescape"))
    try:
        return open(path, "rb")
    except OSError as exc:
        raise FileOpenError(path, exc.errno or 0) from exc