# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Value types for HTTP messages.

These classes are immutable: every method that would change state returns
a new instance instead, so values can be shared between messages and
threads without copying.

Public Exports
==============
::

    from genro_http.datastructures import (
        URI,
        Headers,
        DEFAULT_PORTS,
        decode_component,
        encode_path,
        encode_query,
        encode_userinfo,
    )

Modules
=======
- ``uri``: RFC 3986 URI value object
- ``encoding``: per-component percent-encoding and default ports
- ``headers``: Case-insensitive HTTP headers
"""

from .encoding import (
    DEFAULT_PORTS,
    decode_component,
    encode_path,
    encode_query,
    encode_userinfo,
)
from .headers import Headers
from .uri import HTTP_DEFAULT_HOST, URI

__all__ = [
    "URI",
    "Headers",
    "DEFAULT_PORTS",
    "HTTP_DEFAULT_HOST",
    "decode_component",
    "encode_path",
    "encode_query",
    "encode_userinfo",
]
