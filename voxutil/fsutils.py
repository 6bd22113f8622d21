"""Filesystem helpers: path joining, whole-file reads, existence checks."""

from __future__ import annotations

import os
from typing import BinaryIO, Union


def path_delim() -> str:
    """Return the platform path separator."""
    return "\\" if os.name == "nt" else "/"


def path_join(*args) -> str:
    """Join the string forms of ``args`` with the platform separator."""
    return path_delim().join(str(arg) for arg in args)


def read_all_bytes(filename: Union[str, os.PathLike, BinaryIO]) -> bytes:
    """Return the whole contents of a file given by path or binary stream."""
    if hasattr(filename, "read"):
        filename.seek(0)
        return filename.read()
    with open(filename, "rb") as f:
        return f.read()


def file_exists(filename: Union[str, os.PathLike]) -> bool:
    """Return True if the file can actually be opened for reading."""
    try:
        with open(filename, "rb"):
            return True
    except OSError:
        return False