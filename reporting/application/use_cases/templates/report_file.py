"""Uploaded report definition handed to the template use cases."""

from __future__ import annotations

from dataclasses import dataclass
from io import BytesIO
from typing import BinaryIO


@dataclass
class ReportFile:
    """Name and byte stream of an uploaded ``.jrxml`` file."""

    filename: str | None
    stream: BinaryIO

    @classmethod
    def from_bytes(cls, filename: str | None, content: bytes) -> "ReportFile":
        return cls(filename=filename, stream=BytesIO(content))

    def read(self) -> bytes:
        """Return the whole content of the stream.

        Raises:
            OSError: If the underlying stream cannot be read.
        """

        if self.stream.seekable():
            self.stream.seek(0)
        return self.stream.read()


__all__ = ["ReportFile"]
