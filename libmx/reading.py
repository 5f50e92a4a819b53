"""Reading whole files and delimiter-separated lines."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

__all__ = ["LineReader", "file_to_str"]


def file_to_str(path: str) -> str:
    """Return the whole content of the file at ``path``."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


class LineReader(Generic[AnyStr]):
    """Reads a stream in chunks of ``buf_size`` and splits it on ``delim``.

    Works with text and binary streams alike; lines come back without the
    delimiter and in the stream's own type.
    """

    def __init__(self, stream: IO[AnyStr], buf_size: int = 1024, delim: str | bytes = "\n") -> None:
        if buf_size <= 0:
            raise ValueError("buffer size must be positive")
        if len(delim) != 1:
            raise ValueError(f"delimiter must be a single character, got {delim!r}")
        self._stream = stream
        self._buf_size = buf_size
        self._pending: AnyStr = stream.read(0)
        if isinstance(self._pending, bytes) and isinstance(delim, str):
            delim = delim.encode("utf-8")
        elif isinstance(self._pending, str) and isinstance(delim, bytes):
            delim = delim.decode("utf-8")
        self._delim = delim
        self._eof = False

    def read_line(self) -> AnyStr | None:
        """Return the next line without its delimiter, or None once the stream is exhausted."""
        while True:
            index = self._pending.find(self._delim)
            if index != -1:
                line = self._pending[:index]
                self._pending = self._pending[index + len(self._delim):]
                return line
            if self._eof:
                break
            chunk = self._stream.read(self._buf_size)
            if chunk:
                self._pending += chunk
            else:
                self._eof = True
        if self._pending:
            line, self._pending = self._pending, self._pending[:0]
            return line
        return None

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line