# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""HTTP request methods and their semantics.

Each method is classified as safe, idempotent and/or cacheable:

    method   safe  idempotent  cacheable
    GET      yes   yes         yes
    HEAD     yes   yes         yes
    OPTIONS  yes   yes         no
    TRACE    yes   yes         no
    PUT      no    yes         yes (with freshness and Content-Location)
    DELETE   no    yes         no
    PATCH    no    no          yes (with freshness and Content-Location)
    POST     no    no          no
    CONNECT  no    no          no

See https://developer.mozilla.org/en-US/docs/Web/HTTP/Reference/Methods
"""

from __future__ import annotations

from enum import Enum

from .exceptions import InvalidArgumentError

__all__ = ["Method"]


class Method(str, Enum):
    """HTTP request method. Members compare equal to their name."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"

    @classmethod
    def coerce(cls, value: Method | str) -> Method:
        """Return the member for a member or case-insensitive name.

        Raises:
            InvalidArgumentError: If the method is unknown.
        """
        if isinstance(value, Method):
            return value
        try:
            return cls(value.upper())
        except ValueError as e:
            raise InvalidArgumentError(f"Unknown HTTP method: {value!r}") from e

    @property
    def safe(self) -> bool:
        """True if the method does not request a change on the server."""
        return self in _SAFE

    @property
    def idempotent(self) -> bool:
        """True if repeating the request has the same intended effect."""
        return self in _IDEMPOTENT

    @property
    def cacheable(self) -> bool:
        """True if a response to this method may be cached."""
        return self in _CACHEABLE

    def __str__(self) -> str:
        return self.value


_SAFE = frozenset({Method.GET, Method.HEAD, Method.OPTIONS, Method.TRACE})
_IDEMPOTENT = _SAFE | {Method.PUT, Method.DELETE}
_CACHEABLE = frozenset({Method.GET, Method.HEAD, Method.PUT, Method.PATCH})
