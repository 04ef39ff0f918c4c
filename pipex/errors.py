"""Errors raised while setting up or running a pipeline, and how they are reported."""

from __future__ import annotations

import os
import sys
from typing import Optional, TextIO

PROGRAM = "pipex"

ARGS_ERROR = "Invalid number of arguments"
PIPE_ERROR = "Pipe error"
DUP_ERROR = "Dup2 error"
FORK_ERROR = "Fork error"
EXEC_ERROR = "Execve error"
OPEN_ERROR = "File opening error"
READ_ERROR = "Reading error"
COMMAND_NOT_FOUND = "command not found"
SPLIT_ERROR = "Split error"
ENV_ERROR = "envp is NULL"


class PipexError(Exception):
    """A failure that ends the program with a non-zero status.

    When errnum is given, the system's description of it follows the message.
    """

    exit_status = 1

    def __init__(self, message: str, errnum: Optional[int] = None) -> None:
        self.message = message
        self.errnum = errnum
        text = message if errnum is None else f"{message}: {os.strerror(errnum)}"
        super().__init__(text)


class CommandNotFoundError(PipexError):
    """No executable of the given name exists on the search path."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{COMMAND_NOT_FOUND}: {name}")


class FileOpenError(PipexError):
    """An input or output file could not be opened."""

    def __init__(self, path: str, errnum: int) -> None:
        self.path = path
        self.errnum = errnum
        self.message = OPEN_ERROR
        Exception.__init__(self, f"{os.strerror(errnum)}: {path}")


def report(error: BaseException, stream: Optional[TextIO] = None) -> None:
    """Write a one-line diagnostic for error, prefixed with the program name."""
    out = sys.stderr if stream is None else stream
    out.write(f"{PROGRAM}: {error}\n")
    out.flush()