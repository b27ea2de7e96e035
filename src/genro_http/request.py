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
HTTP request message.

A request carries a method, a URI and a request-target on top of the
common message parts (version, headers, body).

Request-target
==============
Unless set explicitly with ``with_target()``, the request-target is the
origin-form of the URI::

    URI("http://example.com/users?id=1")  →  target "/users?id=1"
    URI("http://example.com")             →  target "/"

Host Header
===========
The Host header follows the URI host (``host[:port]``):

- On construction, if the URI has a host.
- On ``with_uri(uri)``, if the new URI has a host.
- With ``with_uri(uri, preserve_host=True)``, only if the current Host
  header is missing or empty.

A URI without a host never changes the header.

Inbound Requests
================
``Request.from_target()`` builds a request from an inbound method and
request-target and turns an unparseable target into ``HTTPBadRequest``::

    try:
        request = Request.from_target("GET", raw_target, headers)
    except HTTPBadRequest as e:
        send_error(400, e.detail)
"""

from __future__ import annotations

import logging
import re
from typing import Any

from .datastructures import URI, Headers
from .exceptions import HTTPBadRequest, InvalidArgumentError, MalformedURIError
from .message import Message
from .methods import Method
from .stream import Stream

__all__ = ["Request"]

logger = logging.getLogger("genro_http.request")

_WHITESPACE = re.compile(r"\s")


class Request(Message):
    """
    Immutable HTTP request.

    Attributes:
        method: HTTP method.
        uri: Request URI.
        target: Request-target (origin-form of the URI unless set).

    Example:
        >>> request = Request("get", "http://example.com:8080/a?b=1")
        >>> request.method
        <Method.GET: 'GET'>
        >>> request.target
        '/a?b=1'
        >>> request.headers.get("host")
        'example.com:8080'
    """

    __slots__ = ("_method", "_uri", "_target")

    def __init__(
        self,
        method: Method | str,
        uri: URI | str,
        headers: Any = None,
        body: Stream | None = None,
        version: str | None = None,
    ) -> None:
        """
        Initialize request.

        Args:
            method: HTTP method, as Method or case-insensitive name.
            uri: Request URI, as URI or raw string.
            headers: Headers, mapping or (name, value) pairs.
            body: Body stream (default: empty temporary stream).
            version: Protocol version (default: from configuration).

        Raises:
            InvalidArgumentError: For an unknown method or invalid version.
            MalformedURIError: If uri is a string that cannot be parsed.
        """
        super().__init__(headers=headers, body=body, version=version)
        self._method = Method.coerce(method)
        self._uri = uri if isinstance(uri, URI) else URI(uri)
        self._target: str | None = None
        self._headers = self._synced_headers(self._uri, preserve=False)

    @classmethod
    def from_target(
        cls,
        method: Method | str,
        target: str,
        headers: Any = None,
    ) -> Request:
        """
        Build a server-side request from an inbound request-target.

        Raises:
            HTTPBadRequest: If the method is unknown or the target is not
                a valid URI reference.
        """
        try:
            uri = URI(target)
            request = cls(method, uri, headers=headers)
            if target != request.target:
                request = request.with_target(target)
        except (MalformedURIError, InvalidArgumentError) as e:
            logger.debug(f"Rejected request {method} {target!r}: {e}")
            raise HTTPBadRequest(f"Invalid request: {e}") from e
        return request

    def _synced_headers(self, uri: URI, preserve: bool) -> Headers:
        if uri.host == "":
            return self._headers
        if preserve and self._headers.get("host"):
            return self._headers
        host = uri.host if uri.port is None else f"{uri.host}:{uri.port}"
        return self._headers.with_header("host", host)

    @property
    def method(self) -> Method:
        """HTTP method."""
        return self._method

    @property
    def uri(self) -> URI:
        """Request URI."""
        return self._uri

    @property
    def target(self) -> str:
        """Request-target: explicit value, or origin-form of the URI."""
        if self._target is not None:
            return self._target
        target = self._uri.path or "/"
        if self._uri.query != "":
            target += f"?{self._uri.query}"
        return target

    def with_target(self, target: str) -> Request:
        """
        Return a request with an explicit request-target.

        Use for absolute-form, authority-form or asterisk-form targets.

        Raises:
            InvalidArgumentError: If the target contains whitespace.
        """
        if _WHITESPACE.search(target):
            raise InvalidArgumentError("Invalid request target provided; cannot contain whitespace")
        if target == self._target:
            return self
        return self._clone(_target=target)

    def with_method(self, method: Method | str) -> Request:
        """Return a request with the given method."""
        method = Method.coerce(method)
        if method is self._method:
            return self
        return self._clone(_method=method)

    def with_uri(self, uri: URI | str, preserve_host: bool = False) -> Request:
        """
        Return a request with the given URI.

        The Host header is updated from the URI host; with
        ``preserve_host=True`` an existing non-empty Host header is kept.

        Args:
            uri: New URI, as URI or raw string.
            preserve_host: Keep a non-empty Host header.
        """
        uri = uri if isinstance(uri, URI) else URI(uri)
        if uri is self._uri:
            return self
        return self._clone(_uri=uri, _headers=self._synced_headers(uri, preserve_host))

    def __repr__(self) -> str:
        return f"Request(method={self._method.value!r}, uri={str(self._uri)!r})"
