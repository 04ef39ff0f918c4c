import errno
import io
import os

import pytest

from pipex.errors import (
    CommandNotFoundError,
    FileOpenError,
    PipexError,
    report,
)


def test_command_not_found_report():
    buf = io.StringIO()
    report(CommandNotFoundError("frobnicate"), buf)
    assert buf.getvalue() == "pipex: command not found: frobnicate\n"


def test_command_not_found_keeps_name_and_status():
    error = CommandNotFoundError("ls")
    assert error.name == "ls"
    assert error.exit_status == 1
    assert isinstance(error, PipexError)


def test_file_open_error_puts_reason_before_path():
    buf = io.StringIO()
    report(FileOpenError("infile", errno.ENOENT), buf)
    assert buf.getvalue() == f"pipex: {os.strerror(errno.ENOENT)}: infile\n"


def test_file_open_error_attributes():
    error = FileOpenError("out", errno.EACCES)
    assert error.path == "out"
    assert error.errnum == errno.EACCES


def test_generic_error_with_errno_puts_reason_after_message():
    buf = io.StringIO()
    report(PipexError("Pipe error", errno.EMFILE), buf)
    assert buf.getvalue() == f"pipex: Pipe error: {os.strerror(errno.EMFILE)}\n"


def test_generic_error_without_errno():
    buf = io.StringIO()
    report(PipexError("envp is NULL"), buf)
    assert buf.getvalue() == "pipex: envp is NULL\n"


def test_report_defaults_to_stderr(capsys):
    report(CommandNotFoundError("nope"))
    captured = capsys.readouterr()
    assert captured.err == "pipex: command not found: nope\n"
    assert captured.out == ""


def test_errors_can_be_raised_and_caught():
    with pytest.raises(PipexError) as info:
        raise FileOpenError("missing", errno.ENOENT)
    assert info.value.path == "missing"
    assert info.value.errnum == errno.ENOENT
    buf = io.StringIO()
    report(info.value, buf)
    assert buf.getvalue() == f"pipex: {os.strerror(errno.ENOENT)}: missing\n"