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
Behavior shared by HTTP requests and responses.

HTTP messages consist of requests from a client to a server and responses
from a server to a client. Both carry a protocol version, headers and a
body. Messages are immutable: every ``with_*`` method returns a new
message and leaves the current one untouched.

Architecture:
    Message
        ├── Request     # method, URI, request-target
        └── Response    # status

The body is the exception to immutability: a ``Stream`` has a position
that moves on read/write. Replacing the body with ``with_body`` does not
copy the stream.
"""

from __future__ import annotations

import copy
import re
from typing import Any, TypeVar

from .config import get_config
from .datastructures import Headers
from .exceptions import InvalidArgumentError
from .stream import Stream

__all__ = ["Message"]

M = TypeVar("M", bound="Message")

_VERSION = re.compile(r"[0-9](?:\.[0-9])?")


def _to_headers(headers: Any) -> Headers:
    """Normalize headers input (Headers, mapping, pairs or None) to Headers."""
    if headers is None:
        return Headers()
    if isinstance(headers, Headers):
        return headers
    if hasattr(headers, "items"):
        return Headers(headers.items())
    return Headers(headers)


def _check_version(version: str) -> str:
    if _VERSION.fullmatch(version) is None:
        raise InvalidArgumentError(f"Invalid HTTP protocol version: {version!r}")
    return version


class Message:
    """
    Base class for HTTP messages.

    Attributes:
        version: HTTP protocol version number (e.g. "1.1", "2").
        headers: Message headers.
        body: Message body; an empty temporary stream until one is set.
    """

    __slots__ = ("_version", "_headers", "_body")

    def __init__(
        self,
        headers: Any = None,
        body: Stream | None = None,
        version: str | None = None,
    ) -> None:
        self._version = _check_version(version if version is not None else get_config().version)
        self._headers = _to_headers(headers)
        self._body = body

    def _clone(self: M, **changes: Any) -> M:
        clone = copy.copy(self)
        for name, value in changes.items():
            setattr(clone, name, value)
        return clone

    @property
    def version(self) -> str:
        """HTTP protocol version number, e.g. "1.1"."""
        return self._version

    @property
    def headers(self) -> Headers:
        """Message headers (immutable)."""
        return self._headers

    @property
    def body(self) -> Stream:
        """Message body, created as an empty temporary stream on first access."""
        if self._body is None:
            self._body = Stream.temporary()
        return self._body

    def with_version(self: M, version: str) -> M:
        """
        Return a message with the given protocol version.

        Raises:
            InvalidArgumentError: If version is not "<digit>[.<digit>]".
        """
        version = _check_version(version)
        if version == self._version:
            return self
        return self._clone(_version=version)

    def with_body(self: M, body: Stream) -> M:
        """Return a message with the given body stream."""
        if body is self._body:
            return self
        return self._clone(_body=body)

    def with_headers(self: M, headers: Any) -> M:
        """Return a message with all headers replaced."""
        headers = _to_headers(headers)
        if headers == self._headers:
            return self
        return self._clone(_headers=headers)

    def with_header(self: M, name: str, *values: str) -> M:
        """Return a message with ``name`` set to ``values`` (replacing)."""
        return self.with_headers(self._headers.with_header(name, *values))

    def with_added_header(self: M, name: str, *values: str) -> M:
        """Return a message with ``values`` appended to ``name``."""
        return self.with_headers(self._headers.append(name, *values))

    def without_header(self: M, name: str) -> M:
        """Return a message without header ``name``."""
        return self.with_headers(self._headers.without(name))
