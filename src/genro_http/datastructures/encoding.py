# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Per-component percent-encoding and port rules for URIs.

Purpose
=======
Every URI component has its own set of characters that may appear raw.
Anything else is written as ``%XX`` (UTF-8 bytes, uppercase hex). Valid
escapes already present in the input are kept as they are, so encoding
an already encoded value gives back the same string.

Safe Sets::

    userinfo   A-Z a-z 0-9 - . _ ~ ! $ & ' ( ) * + , ; =
    path       userinfo + : @ /
    query      path + ?            (also used for the fragment)

    "%" is kept only when followed by two hex digits:

    encode_path("%41")  → "%41"
    encode_path("%4")   → "%254"
    encode_path("a b")  → "a%20b"

Default Ports
=============
``DEFAULT_PORTS`` maps a scheme to its well-known port. A port equal to
the scheme default is not stored (``normalize_port`` returns ``None``), so
``http://example.com:80`` and ``http://example.com`` are the same URI.

References
==========
- RFC 3986 Section 2.1 (percent-encoding): https://tools.ietf.org/html/rfc3986#section-2.1
- RFC 3986 Section 3.2.1 (userinfo): https://tools.ietf.org/html/rfc3986#section-3.2.1
- RFC 3986 Section 3.3 (path): https://tools.ietf.org/html/rfc3986#section-3.3
"""

from __future__ import annotations

import re
from urllib.parse import quote, unquote

from ..exceptions import InvalidArgumentError, MalformedURIError

__all__ = [
    "DEFAULT_PORTS",
    "MAX_PORT",
    "check_port",
    "decode_component",
    "encode_path",
    "encode_query",
    "encode_userinfo",
    "normalize_port",
]

MAX_PORT = 65535

DEFAULT_PORTS: dict[str, int] = {
    "http": 80,
    "https": 443,
    "ftp": 21,
    "gopher": 70,
    "nntp": 119,
    "news": 119,
    "telnet": 23,
    "tn3270": 23,
    "imap": 143,
    "pop": 110,
    "ldap": 389,
}

_USERINFO_SAFE = r"A-Za-z0-9\-._~!$&'()*+,;="
_PATH_SAFE = _USERINFO_SAFE + r":@/"
_QUERY_SAFE = _PATH_SAFE + r"?"

# A run of unsafe characters, or a "%" that does not start a valid escape.
_INCOMPLETE_ESCAPE = r"%(?![0-9A-Fa-f]{2})"
_USERINFO_UNSAFE = re.compile(rf"[^{_USERINFO_SAFE}%]+|{_INCOMPLETE_ESCAPE}")
_PATH_UNSAFE = re.compile(rf"[^{_PATH_SAFE}%]+|{_INCOMPLETE_ESCAPE}")
_QUERY_UNSAFE = re.compile(rf"[^{_QUERY_SAFE}%]+|{_INCOMPLETE_ESCAPE}")


def _escape(match: re.Match[str]) -> str:
    return quote(match.group(0), safe="")


def _encode(unsafe: re.Pattern[str], value: str) -> str:
    try:
        return unsafe.sub(_escape, value)
    except UnicodeEncodeError as e:
        raise MalformedURIError(f"URI component is not valid Unicode: {value!r}", value) from e


def encode_userinfo(value: str) -> str:
    """
    Encode a username, password or registered host name.

    Args:
        value: Raw or partially encoded component.

    Returns:
        Canonically encoded component.

    Raises:
        MalformedURIError: If the value holds lone surrogates.

    Example:
        >>> encode_userinfo("a user")
        'a%20user'
        >>> encode_userinfo("p@ss")
        'p%40ss'
    """
    return _encode(_USERINFO_UNSAFE, value)


def encode_path(value: str) -> str:
    """Encode a path; "/" ":" "@" stay raw."""
    return _encode(_PATH_UNSAFE, value)


def encode_query(value: str) -> str:
    """Encode a query string or fragment; "?" stays raw as well."""
    return _encode(_QUERY_UNSAFE, value)


def decode_component(value: str) -> str:
    """Percent-decode a component with no safe-set restriction."""
    return unquote(value)


def check_port(port: int | None) -> int | None:
    """
    Check that a port lies in the TCP/UDP range.

    Args:
        port: Port number or None (no port).

    Returns:
        The port unchanged.

    Raises:
        InvalidArgumentError: If the port is outside 1-65535.
    """
    if port is None:
        return None
    if isinstance(port, bool) or not isinstance(port, int):
        raise InvalidArgumentError(f"Invalid port: {port!r}. Must be an integer")
    if 0 < port <= MAX_PORT:
        return port
    raise InvalidArgumentError(f"Invalid port: {port}. Must be between 1 and {MAX_PORT}")


def normalize_port(scheme: str, port: int | None) -> int | None:
    """
    Drop a port that equals the well-known port of the scheme.

    A scheme missing from ``DEFAULT_PORTS`` has no default, so its port is
    returned unchanged.

    Example:
        >>> normalize_port("https", 443) is None
        True
        >>> normalize_port("https", 8443)
        8443
    """
    if port is not None and DEFAULT_PORTS.get(scheme) == port:
        return None
    return port
