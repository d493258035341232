"""Errors raised when reading or writing the capture file."""

from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    """Broad category of a storage failure."""

    PERMISSION_DENIED = "permission_denied"
    FILE_NOT_FOUND = "file_not_found"
    IO = "io"


_OS_KIND_NAMES: tuple[tuple[type[OSError], str], ...] = (
    (IsADirectoryError, "IsADirectory"),
    (NotADirectoryError, "NotADirectory"),
    (FileExistsError, "AlreadyExists"),
    (TimeoutError, "TimedOut"),
    (InterruptedError, "Interrupted"),
    (BlockingIOError, "WouldBlock"),
    (BrokenPipeError, "BrokenPipe"),
    (ConnectionRefusedError, "ConnectionRefused"),
    (ConnectionResetError, "ConnectionReset"),
    (ConnectionAbortedError, "ConnectionAborted"),
)


class StoreError(Exception):
    """A failure to read or write captures.

    ``detail`` names the underlying I/O condition for ``ErrorKind.IO``.
    """

    def __init__(self, kind: ErrorKind, detail: str = "Other") -> None:
        super().__init__(kind, detail)
        self.kind = kind
        self.detail = detail

    def __str__(self) -> str:
        if self.kind is ErrorKind.PERMISSION_DENIED:
            return "Permission Denied"
        if self.kind is ErrorKind.FILE_NOT_FOUND:
            return "File Not Found"
        return f"IO Error: {self.detail}"


def error_from_os(exc: OSError) -> StoreError:
    """Map an operating-system error onto a StoreError."""
    if isinstance(exc, PermissionError):
        return StoreError(ErrorKind.PERMISSION_DENIED)
    if isinstance(exc, FileNotFoundError):
        return StoreError(ErrorKind.FILE_NOT_FOUND)
    for exc_type, name in _OS_KIND_NAMES:
        if isinstance(exc, exc_type):
            return StoreError(ErrorKind.IO, name)
    return StoreError(ErrorKind.IO)