"""A writer wrapper that remembers its first failure and then stops writing."""

from __future__ import annotations

from typing import Any, BinaryIO

from .errorz import ErrorHolder


class ErrorWriter(ErrorHolder):
    """Wraps a binary writer; after the first error all writes are skipped."""

    def __init__(self, writer: BinaryIO) -> None:
        super().__init__()
        self.writer = writer

    def write(self, data: bytes) -> int:
        """Write data unless an error is held; return the bytes written."""
        if self.has_error():
            return 0
        try:
            written = self.writer.write(data)
        except (OSError, ValueError) as err:
            self.set_error(err)
            return 0
        return len(data) if written is None else written

    def print(self, text: str) -> None:
        self.write(text.encode("utf-8"))

    def println(self, text: str) -> None:
        self.write(text.encode("utf-8"))
        self.write(b"\n")

    def printf(self, fmt: str, *args: Any) -> None:
        """Write fmt formatted with %-style args."""
        self.print(fmt % args if args else fmt)


def wrap(writer: BinaryIO) -> ErrorWriter:
    return ErrorWriter(writer)