"""A tiny levelled logger writing one formatted line per message."""

from __future__ import annotations

import inspect
import sys
import threading
import time
from enum import IntEnum
from typing import Iterable, Optional, TextIO

from voxutil.fsutils import path_delim

_FATAL_NOTICE = "\nExiting due to FATAL error, see the logs for details...\n\n\n"


class LogLevel(IntEnum):
    """Message severity; larger values are more verbose."""

    FATAL = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    VERBOSE = 4
    DEBUG = 5

    @property
    def tag(self) -> str:
        return _TAGS[self]


_TAGS = {
    LogLevel.FATAL: "FAT",
    LogLevel.ERROR: "ERR",
    LogLevel.WARNING: "WRN",
    LogLevel.INFO: "INF",
    LogLevel.VERBOSE: "VER",
    LogLevel.DEBUG: "DBG",
}


class FatalError(RuntimeError):
    """Raised after a FATAL message has been written."""


_log_level = LogLevel.DEBUG
_output_lock = threading.Lock()


def set_log_level(level) -> None:
    """Discard every message more verbose than ``level``."""
    global _log_level
    _log_level = LogLevel(level)


def get_log_level() -> LogLevel:
    """Return the current threshold level."""
    return _log_level


def _timestamp() -> str:
    now = time.time()
    ms = int((now - int(now)) * 1000)
    return f"{time.strftime('%m-%d %H:%M:%S', time.localtime(now))}.{ms:03d}"


def _basename(path: str) -> str:
    return path.rsplit(path_delim(), 1)[-1]


class LogMessage:
    """One log line, built with :meth:`write` and emitted by :meth:`close`."""

    def __init__(self, level, file: str, line: int, func: Optional[str] = None,
                 out: Optional[TextIO] = None):
        self.level = LogLevel(level)
        self._out = out
        self._enabled = self.level <= _log_level
        self._parts: list[str] = []
        self._closed = False
        if self._enabled:
            header = f"[{_timestamp()} {self.level.tag} {_basename(file)}:{line}"
            if func:
                header += f" {func}"
                if "(" not in func:
                    header += "()"
            self._parts.append(header + "] ")

    def write(self, text) -> "LogMessage":
        """Append the string form of ``text`` to the message."""
        if self._enabled:
            self._parts.append(str(text))
        return self

    def close(self) -> None:
        """Emit the message; a FATAL message raises FatalError afterwards."""
        if self._closed:
            return
        self._closed = True
        out = self._out if self._out is not None else sys.stdout
        text = "".join(self._parts)
        if self._enabled:
            with _output_lock:
                out.write(text + "\n")
        if self.level is LogLevel.FATAL:
            out.write(_FATAL_NOTICE)
            raise FatalError(text)

    def __enter__(self) -> "LogMessage":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def format_vector(values: Iterable) -> str:
    """Format a sequence as ``[a, b, c]``."""
    return "[" + ", ".join(str(v) for v in values) + "]"


def tlog(level, message, out: Optional[TextIO] = None) -> None:
    """Log ``message`` at ``level``, tagged with the caller's file, line and function."""
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    if caller is not None:
        file, line, func = caller.f_code.co_filename, caller.f_lineno, caller.f_code.co_name
    else:
        file, line, func = "?", 0, None
    del frame, caller
    LogMessage(level, file, line, func, out).write(message).close()