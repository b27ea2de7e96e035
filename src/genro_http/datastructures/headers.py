# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Immutable, case-insensitive HTTP headers with multi-value support.

Purpose
=======
HTTP header names are case-insensitive per RFC 9110. The same header can
appear multiple times (e.g., Set-Cookie, Accept). Messages carry their
headers as a ``Headers`` value: every change returns a new collection, so
a message and the collection it exposes never change under the caller.

Processing Schema::

    Input (str or bytes, case-preserving):
    [("Content-Type", "application/json"), (b"X-Custom", b"value")]
                        ↓
                Normalization (bytes decoded as Latin-1)
                        ↓
    Internal storage (str, lowercase names, insertion order):
    [("content-type", "application/json"), ("x-custom", "value")]
                        ↓
                Case-insensitive lookup
                        ↓
    headers.get("CONTENT-TYPE") → "application/json"

Definition::

    class Headers:
        __slots__ = ("_headers",)

        def __init__(self, raw: Iterable[tuple[str | bytes, str | bytes]] = ()) -> None
        def get(self, key: str, default: str | None = None) -> str | None
        def getlist(self, key: str) -> list[str]
        def line(self, key: str) -> str
        def keys(self) -> list[str]
        def values(self) -> list[str]
        def items(self) -> list[tuple[str, str]]
        def with_header(self, name: str, *values: str) -> Headers
        def append(self, name: str, *values: str) -> Headers
        def without(self, name: str) -> Headers
        def to_raw(self) -> list[tuple[bytes, bytes]]

Example::

    from genro_http.datastructures import Headers

    headers = Headers([("Accept", "text/html")])
    headers = headers.append("accept", "application/json")
    print(headers.line("ACCEPT"))  # "text/html, application/json"

    replaced = headers.with_header("Accept", "*/*")
    print(headers.getlist("accept"))   # ["text/html", "application/json"]
    print(replaced.getlist("accept"))  # ["*/*"]

Design Notes
============
- Uses ``__slots__`` for memory efficiency
- Mutators return ``self`` when nothing changes
- ``with_header`` keeps the position of the first replaced entry
- Names must be tokens; values must not contain CR, LF or NUL

References
==========
- HTTP Fields (RFC 9110): https://www.rfc-editor.org/rfc/rfc9110#section-5
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Iterator

from ..exceptions import InvalidArgumentError

__all__ = ["Headers"]

_TOKEN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
_FORBIDDEN_VALUE = re.compile(r"[\r\n\x00]")


def _decode(value: str | bytes) -> str:
    if isinstance(value, bytes):
        return value.decode("latin-1")
    return value


def _check_name(name: str) -> str:
    if _TOKEN.fullmatch(name) is None:
        raise InvalidArgumentError(f"Invalid header name: {name!r}")
    return name.lower()


def _check_value(name: str, value: str) -> str:
    if _FORBIDDEN_VALUE.search(value):
        raise InvalidArgumentError(f"Invalid value for header {name!r}: {value!r}")
    return value


class Headers:
    """
    Immutable, case-insensitive HTTP headers with multi-value support.

    Names are normalized to lowercase; values are kept as given. Entries
    keep insertion order, duplicates included.

    Example:
        >>> headers = Headers([(b"Content-Type", b"application/json")])
        >>> headers.get("content-type")
        'application/json'
        >>> "CONTENT-TYPE" in headers
        True
        >>> headers.with_header("X-Id", "1").items()
        [('content-type', 'application/json'), ('x-id', '1')]
    """

    __slots__ = ("_headers",)

    def __init__(self, raw: Iterable[tuple[str | bytes, str | bytes]] = ()) -> None:
        """
        Initialize Headers from (name, value) pairs.

        Args:
            raw: Pairs as str or bytes (bytes are decoded as Latin-1).

        Raises:
            InvalidArgumentError: If a name is not a token or a value
                contains CR, LF or NUL.
        """
        self._headers: tuple[tuple[str, str], ...] = tuple(
            (_check_name(_decode(name)), _check_value(_decode(name), _decode(value)))
            for name, value in raw
        )

    @classmethod
    def _from_entries(cls, entries: Iterable[tuple[str, str]]) -> Headers:
        headers = object.__new__(cls)
        headers._headers = tuple(entries)
        return headers

    def get(self, key: str, default: str | None = None) -> str | None:
        """
        Get the first value for a header (case-insensitive).

        Args:
            key: Header name (case-insensitive).
            default: Value to return if header not found.

        Returns:
            The first value for the header, or default if not found.
        """
        key_lower = key.lower()
        for name, value in self._headers:
            if name == key_lower:
                return value
        return default

    def getlist(self, key: str) -> list[str]:
        """Get all values for a header (case-insensitive), [] if absent."""
        key_lower = key.lower()
        return [value for name, value in self._headers if name == key_lower]

    def line(self, key: str) -> str:
        """
        Get all values for a header joined with ", ".

        Not every header can be folded this way (Set-Cookie cannot); use
        ``getlist()`` for those.

        Returns:
            The joined values, "" if the header is absent.
        """
        return ", ".join(self.getlist(key))

    def keys(self) -> list[str]:
        """Return unique header names (lowercase) in order of first occurrence."""
        seen: set[str] = set()
        result: list[str] = []
        for name, _ in self._headers:
            if name not in seen:
                seen.add(name)
                result.append(name)
        return result

    def values(self) -> list[str]:
        """Return all header values, including duplicates."""
        return [value for _, value in self._headers]

    def items(self) -> list[tuple[str, str]]:
        """Return all (name, value) pairs with lowercase names."""
        return list(self._headers)

    def with_header(self, name: str, *values: str) -> Headers:
        """
        Return headers with all values of ``name`` replaced by ``values``.

        The new values take the position of the first existing entry, or
        go at the end if the header was absent. No values removes the
        header.

        Args:
            name: Header name (case-insensitive).
            *values: New values.

        Returns:
            New Headers, or self if nothing changed.

        Raises:
            InvalidArgumentError: For an invalid name or value.
        """
        key = _check_name(name)
        new = [(key, _check_value(name, value)) for value in values]
        if self.getlist(key) == [value for _, value in new]:
            return self

        entries: list[tuple[str, str]] = []
        placed = False
        for entry in self._headers:
            if entry[0] != key:
                entries.append(entry)
            elif not placed:
                entries.extend(new)
                placed = True
        if not placed:
            entries.extend(new)
        return self._from_entries(entries)

    def append(self, name: str, *values: str) -> Headers:
        """
        Return headers with ``values`` added after the existing ones.

        Returns:
            New Headers, or self if no values were given.

        Raises:
            InvalidArgumentError: For an invalid name or value.
        """
        key = _check_name(name)
        new = [(key, _check_value(name, value)) for value in values]
        if not new:
            return self
        return self._from_entries(self._headers + tuple(new))

    def without(self, name: str) -> Headers:
        """Return headers without ``name`` (self if it was absent)."""
        key = name.lower()
        if key not in self:
            return self
        return self._from_entries(entry for entry in self._headers if entry[0] != key)

    def to_raw(self) -> list[tuple[bytes, bytes]]:
        """Return headers as ASGI ``list[tuple[bytes, bytes]]`` (Latin-1)."""
        return [(name.encode("latin-1"), value.encode("latin-1")) for name, value in self._headers]

    def __getitem__(self, key: str) -> str:
        """
        Get header value by name, raising KeyError if not found.

        Raises:
            KeyError: If header is not present.
        """
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return value

    def __contains__(self, key: object) -> bool:
        """Check if header exists (case-insensitive)."""
        if not isinstance(key, str):
            return False
        return self.get(key) is not None

    def __iter__(self) -> Iterator[str]:
        """Iterate over unique header names."""
        return iter(self.keys())

    def __len__(self) -> int:
        """Return total number of header entries (including duplicates)."""
        return len(self._headers)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Headers):
            return NotImplemented
        return self._headers == other._headers

    def __hash__(self) -> int:
        return hash(self._headers)

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return f"Headers({list(self._headers)!r})"
