"""Reading and appending capture records in a markdown file."""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path

from .errors import ErrorKind, StoreError, error_from_os

SPEC_PREFIX = "<!--yoink::::"
SPEC_DELIMITER = "::::"
SPEC_SUFFIX = "-->\n"

_COMMENT_OPEN = "<!--"
_COMMENT_CLOSE = "-->"
_MIN_SPEC_BYTES = 16


def _format_timestamp(timestamp: datetime | str) -> str:
    if isinstance(timestamp, datetime):
        return timestamp.strftime("%Y-%m-%d %H:%M:%S")
    return str(timestamp)


def spec_line(timestamp: datetime | str, topic: str, subject: str) -> str:
    """Build the header comment line that introduces a capture."""
    fields = SPEC_DELIMITER.join((_format_timestamp(timestamp), topic, subject))
    return f"{SPEC_PREFIX}{fields}{SPEC_SUFFIX}"


def capture_record(
    timestamp: datetime | str, topic: str, subject: str, content: str
) -> str:
    """Build a full capture: header line followed by the content and a newline."""
    return f"{spec_line(timestamp, topic, subject)}{content}\n"


def parse_capture_line(line: str) -> list[str] | None:
    """Split a capture header line into its fields, or return None if it is not one."""
    if len(line.encode("utf-8")) <= _MIN_SPEC_BYTES:
        return None
    if not (line.startswith(_COMMENT_OPEN) and line.endswith(_COMMENT_CLOSE)):
        return None
    inner = line[len(_COMMENT_OPEN) : -len(_COMMENT_CLOSE)]
    return inner.split(SPEC_DELIMITER)


def _split_lines(text: str) -> list[str]:
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def read_lines(path: str | os.PathLike[str]) -> list[str]:
    """Read a UTF-8 file and return its lines without line endings."""
    file_path = Path(path)
    if not file_path.exists():
        raise StoreError(ErrorKind.FILE_NOT_FOUND)
    try:
        data = file_path.read_bytes()
    except OSError as exc:
        raise error_from_os(exc) from exc
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise StoreError(ErrorKind.IO, "InvalidData") from exc
    return _split_lines(text)


def load_captures(path: str | os.PathLike[str]) -> list[list[str]]:
    """Return the fields of every capture header found in the file.

    Raises StoreError when the file holds no capture at all.
    """
    captures = [
        parts
        for parts in map(parse_capture_line, read_lines(path))
        if parts is not None
    ]
    if not captures:
        raise StoreError(ErrorKind.IO, "InvalidData")
    return captures


def write_capture(capture_string: str, path: str | os.PathLike[str]) -> Path:
    """Write a capture to a new file, or append it after a blank line to an existing one."""
    file_path = Path(path)
    try:
        if not file_path.exists():
            file_path.write_bytes(capture_string.encode("utf-8"))
        else:
            with file_path.open("ab") as handle:
                handle.write(f"\n{capture_string}".encode("utf-8"))
    except OSError as exc:
        raise error_from_os(exc) from exc
    return file_path