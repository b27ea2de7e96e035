# Copyright 2025 Softwell S.r.l.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Byte stream wrapper used as HTTP message body.

Stream wraps any binary file object (``io.BytesIO``, ``open(path, "rb")``,
a spooled temporary file, a pipe) behind one interface. Unlike the message
objects, a stream is stateful: reading and writing move its position.

Lifecycle::

    Stream(fileobj)  ──read/write/seek──►  Stream
          │                                   │
          └────────── detach() ───────────────┤ returns fileobj, stream unusable
                                              │
          └────────── close() ────────────────┘ closes fileobj, then detaches

Every operation on a detached stream raises ``StreamError``.

Capabilities come from the wrapped object (``readable()``, ``writable()``,
``seekable()``). Objects that do not expose them fall back to their
``mode`` string, looked up in ``_READABLE_MODES``/``_WRITABLE_MODES``.

Example:
    >>> with Stream.from_bytes(b"data") as stream:
    ...     stream.read(2)
    ...     stream.contents
    b'da'
    b'ta'
"""

from __future__ import annotations

import io
import logging
import os
import tempfile
from typing import IO, Any

from .config import get_config
from .exceptions import StreamError

__all__ = ["Stream"]

logger = logging.getLogger("genro_http.stream")

_READABLE_MODES = frozenset({"r", "r+", "w+", "x+", "a+", "rb", "r+b", "rb+", "w+b", "wb+", "x+b", "a+b"})
_WRITABLE_MODES = frozenset({"w", "r+", "w+", "x", "x+", "a", "a+", "wb", "r+b", "rb+", "w+b", "wb+", "xb", "x+b", "ab", "a+b"})


def _capability(resource: Any, name: str, modes: frozenset[str]) -> bool:
    check = getattr(resource, name, None)
    if callable(check):
        return bool(check())
    return getattr(resource, "mode", None) in modes


class Stream:
    """
    Binary stream wrapper.

    Attributes:
        seekable: True if the stream supports seek/tell.
        readable: True if the stream can be read.
        writable: True if the stream can be written.
        size: Size in bytes, or None if unknown.
        contents: Remaining bytes from the current position.
    """

    __slots__ = ("_stream", "_size", "_metadata", "_eof", "seekable", "readable", "writable")

    def __init__(
        self,
        stream: IO[bytes],
        size: int | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        """
        Wrap a binary file object.

        Args:
            stream: The object to wrap. Must provide ``read`` or ``write``.
            size: Known size, if the object cannot report it.
            metadata: Custom metadata returned by ``metadata()``.

        Raises:
            TypeError: If stream is not a file-like object.
        """
        if not (hasattr(stream, "read") or hasattr(stream, "write")):
            raise TypeError(f"Stream must be a file object, got {type(stream).__name__}")

        self._stream: IO[bytes] | None = stream
        self._size = size
        self._metadata = dict(metadata or {})
        self._eof = False
        self.seekable = _capability(stream, "seekable", frozenset())
        self.readable = _capability(stream, "readable", _READABLE_MODES)
        self.writable = _capability(stream, "writable", _WRITABLE_MODES)

    @classmethod
    def from_bytes(cls, data: bytes = b"", **metadata: Any) -> Stream:
        """Create an in-memory, read-write stream positioned at the start."""
        return cls(io.BytesIO(data), metadata=metadata or None)

    @classmethod
    def temporary(cls, max_size: int | None = None) -> Stream:
        """
        Create an empty read-write stream backed by a spooled temporary file.

        Args:
            max_size: Bytes kept in memory before spilling to disk.
                Defaults to ``get_config().spool_size``.
        """
        if max_size is None:
            max_size = get_config().spool_size
        return cls(tempfile.SpooledTemporaryFile(max_size=max_size, mode="w+b"))  # type: ignore[arg-type]

    def _attached(self) -> IO[bytes]:
        if self._stream is None:
            raise StreamError("Stream is detached")
        return self._stream

    @property
    def size(self) -> int | None:
        """Size in bytes, cached until the next write. None if unknown."""
        if self._size is not None:
            return self._size
        if self._stream is None:
            return None

        if self.seekable:
            position = self._stream.tell()
            self._stream.seek(0, os.SEEK_END)
            self._size = self._stream.tell()
            self._stream.seek(position)
            return self._size

        try:
            fileno = self._stream.fileno()
        except (AttributeError, OSError, io.UnsupportedOperation):
            return None
        self._size = os.fstat(fileno).st_size
        return self._size

    @property
    def contents(self) -> bytes:
        """
        Read the remaining bytes from the current position.

        Raises:
            StreamError: If detached or not readable.
        """
        stream = self._attached()
        if not self.readable:
            raise StreamError("Cannot read from non-readable stream")
        try:
            data = stream.read()
        except OSError as e:
            raise StreamError(f"Unable to read stream contents: {e}") from e
        self._eof = True
        return data

    def rewind(self) -> None:
        """Seek to the beginning of the stream."""
        self.seek(0)

    def seek(self, offset: int, whence: int = os.SEEK_SET) -> None:
        """
        Move to a new position.

        Raises:
            StreamError: If detached, not seekable, or the seek fails.
        """
        stream = self._attached()
        if not self.seekable:
            raise StreamError("Stream is not seekable")
        try:
            stream.seek(offset, whence)
        except (OSError, ValueError) as e:
            raise StreamError(
                f"Unable to seek to stream position {offset} with whence {whence!r}"
            ) from e
        self._eof = False

    def read(self, length: int) -> bytes:
        """
        Read up to ``length`` bytes.

        Returns:
            The bytes read; fewer than ``length`` (possibly none) at the
            end of the stream.

        Raises:
            StreamError: If detached, not readable, or length is negative.
        """
        stream = self._attached()
        if not self.readable:
            raise StreamError("Cannot read from non-readable stream")
        if length < 0:
            raise StreamError("Length parameter cannot be negative")
        if length == 0:
            return b""
        try:
            data = stream.read(length)
        except OSError as e:
            raise StreamError("Unable to read from stream") from e
        if len(data) < length:
            self._eof = True
        return data

    def write(self, data: bytes) -> int:
        """
        Write bytes at the current position.

        Returns:
            Number of bytes written.

        Raises:
            StreamError: If detached, not writable, or the write fails.
        """
        stream = self._attached()
        if not self.writable:
            raise StreamError("Cannot write to a non-writable stream")
        try:
            written = stream.write(data)
        except OSError as e:
            raise StreamError("Unable to write to stream") from e
        self._size = None
        return len(data) if written is None else written

    def tell(self) -> int:
        """Return the current position. Raises StreamError if detached."""
        stream = self._attached()
        try:
            return stream.tell()
        except OSError as e:
            raise StreamError("Unable to determine stream position") from e

    def eof(self) -> bool:
        """True once a read has reached the end of the stream."""
        self._attached()
        return self._eof

    def metadata(self, key: str | None = None) -> Any:
        """
        Return stream metadata.

        Custom metadata passed to the constructor wins over the values
        derived from the wrapped object (``mode``, ``seekable``, ``uri``).

        Args:
            key: A single key to return, or None for the whole mapping.

        Returns:
            The value for ``key`` (None if unknown), or a dict.
        """
        if self._stream is None:
            return None if key else {}
        derived = {
            "mode": getattr(self._stream, "mode", None),
            "seekable": self.seekable,
            "uri": getattr(self._stream, "name", None),
        }
        merged = {**derived, **self._metadata}
        if key:
            return merged.get(key)
        return merged

    def detach(self) -> IO[bytes] | None:
        """
        Separate the wrapped object from the stream.

        Returns:
            The wrapped object, or None if already detached.
        """
        stream, self._stream = self._stream, None
        if stream is None:
            return None
        self._size = None
        self.seekable = False
        self.readable = False
        self.writable = False
        logger.debug(f"Detached stream {getattr(stream, 'name', stream)!r}")
        return stream

    def close(self) -> None:
        """Close the wrapped object and detach it. No-op if detached."""
        stream = self.detach()
        if stream is not None:
            stream.close()

    def __enter__(self) -> Stream:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __bytes__(self) -> bytes:
        """Return the whole content, rewinding first when seekable."""
        if self.seekable:
            self.rewind()
        return self.contents

    def __repr__(self) -> str:
        state = "detached" if self._stream is None else f"size={self.size}"
        return f"Stream({state})"
