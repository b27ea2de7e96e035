# Copyright 2025 Softwell S.r.l.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Exception classes for genro-http message construction.

This module provides typed exceptions for signaling errors while building
or inspecting HTTP messages. Value objects (URI, Headers, messages) are
never left half-built: when one of these is raised, the operation produced
no instance and the caller's existing instance is untouched.

Module Structure
----------------
Five exception classes:

1. MalformedURIError - A raw string cannot be decomposed into URI
   components, or the components violate a cross-component rule
2. InvalidArgumentError - A syntactically fine value violates a domain
   constraint (port range, header token, protocol version)
3. StreamError - An operation is not possible on a byte stream in its
   current state (detached, not readable, not seekable)
4. HTTPException - For HTTP error responses (4xx, 5xx)
5. HTTPBadRequest - HTTP 400, raised when an inbound request-target
   cannot be parsed

Design Decisions
----------------
- No common base: each exception inherits from the builtin that best
  describes it. Use tuple syntax for catching multiple:
  `except (MalformedURIError, InvalidArgumentError)`
- MalformedURIError and InvalidArgumentError subclass ValueError so code
  that treats any bad value uniformly keeps working.
- headers: HTTPException accepts both dict[str, str] and
  list[tuple[str, str]], stored as list.

MalformedURIError vs HTTPBadRequest
-----------------------------------
The URI type only raises MalformedURIError. Translating it into a client
error is the job of the HTTP layer parsing an inbound request::

    >>> try:
    ...     uri = URI(target)
    ... except MalformedURIError as e:
    ...     raise HTTPBadRequest(f"Invalid request target: {e.uri!r}") from e

``Request.from_target()`` does exactly this.
"""


class MalformedURIError(ValueError):
    """
    Raised when a URI cannot be built from the given components.

    Attributes:
        uri: The offending input (raw string or component value).

    Example:
        >>> URI("relative/path:segment")
        Traceback (most recent call last):
        ...
        MalformedURIError: ...
    """

    def __init__(self, message: str, uri: str = "") -> None:
        self.uri = uri
        super().__init__(message)

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"MalformedURIError({str(self)!r}, uri={self.uri!r})"


class InvalidArgumentError(ValueError):
    """Raised when a value violates a domain constraint (e.g. port range)."""


class StreamError(RuntimeError):
    """Raised when a stream operation is not possible in the current state."""


class HTTPException(Exception):
    """
    HTTP exception with status code and detail.

    Raise this in request handling code to signal an HTTP error response.

    Attributes:
        status_code: HTTP status code (expected 4xx or 5xx, not validated)
        detail: Error detail message
        headers: Response headers as list of tuples (supports duplicate names)

    Example:
        >>> raise HTTPException(404, detail="User not found")
        >>> raise HTTPException(401, headers={"WWW-Authenticate": "Bearer"})
    """

    def __init__(
        self,
        status_code: int,
        detail: str = "",
        headers: dict[str, str] | list[tuple[str, str]] | None = None,
    ) -> None:
        """
        Initialize HTTP exception.

        Args:
            status_code: HTTP status code (4xx, 5xx expected)
            detail: Error detail message (default: "")
            headers: Response headers as dict or list of tuples (default: None).
                     Dict is converted to list internally to support duplicate names.
        """
        self.status_code = status_code
        self.detail = detail
        if headers is None:
            self.headers: list[tuple[str, str]] | None = None
        elif isinstance(headers, dict):
            self.headers = list(headers.items())
        else:
            self.headers = list(headers)
        super().__init__(detail)

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"HTTPException(status_code={self.status_code}, detail={self.detail!r})"


class HTTPBadRequest(HTTPException):
    """HTTP 400 Bad Request exception."""

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(400, detail=detail)


__all__ = [
    "MalformedURIError",
    "InvalidArgumentError",
    "StreamError",
    "HTTPException",
    "HTTPBadRequest",
]
