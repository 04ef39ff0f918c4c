"""Locating executables and splitting command specifications."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from typing import Optional, Union

from .errors import ENV_ERROR, CommandNotFoundError, PipexError
from .text import split_words

Environ = Union[Mapping[str, str], Iterable[str]]

_PATH_PREFIX = "PATH="


def path_from_env(environ: Optional[Environ]) -> Optional[str]:
    """Return the value of PATH from an environment, or None if it is unset.

    The environment is either a mapping or a sequence of "NAME=value" strings,
    in which case the first PATH entry wins.
    """
    if environ is None:
        raise PipexError(ENV_ERROR)
    if isinstance(environ, Mapping):
        return environ.get("PATH")
    return next(
        (entry[len(_PATH_PREFIX):] for entry in environ if entry.startswith(_PATH_PREFIX)),
        None,
    )


def resolve_command(search_dirs: Iterable[str], name: str) -> str:
    """Return the path under which name can be run.

    A name that already exists as given is returned unchanged; otherwise the
    first directory holding it wins.
    """
    if not name:
        raise CommandNotFoundError(name)
    if os.path.exists(name):
        return name
    for directory in search_dirs:
        candidate = f"{directory}/{name}"
        if os.path.exists(candidate):
            return candidate
    raise CommandNotFoundError(name)


def parse_commands(specs: Iterable[str]) -> list[list[str]]:
    """Split each command specification into its words on spaces."""
    return [split_words(spec, " ") for spec in specs]