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

"""genro-http - Immutable HTTP message value objects.

Main components:
    URI: RFC 3986 URI with per-component encoding and validation
    Headers: Case-insensitive, multi-value header collection
    Request: HTTP request with Host header synchronization
    Response: HTTP response with status and reason phrase
    Stream: Byte stream used as message body

Every value is immutable: ``with_*`` methods return a new instance.

Usage:
    from genro_http import URI, Request

    uri = URI("https://example.com/search").with_query("q=genro http")
    request = Request("GET", uri)
    print(request.target)               # "/search?q=genro%20http"
    print(request.headers.get("host"))  # "example.com"
"""

__version__ = "0.1.0"

from .config import MessageConfig, get_config, set_config
from .datastructures import (
    DEFAULT_PORTS,
    HTTP_DEFAULT_HOST,
    URI,
    Headers,
    decode_component,
    encode_path,
    encode_query,
    encode_userinfo,
)
from .exceptions import (
    HTTPBadRequest,
    HTTPException,
    InvalidArgumentError,
    MalformedURIError,
    StreamError,
)
from .message import Message
from .methods import Method
from .request import Request
from .response import Response
from .stream import Stream

__all__ = [
    # Messages
    "Message",
    "Request",
    "Response",
    "Method",
    "Stream",
    # Data structures
    "URI",
    "Headers",
    "DEFAULT_PORTS",
    "HTTP_DEFAULT_HOST",
    "decode_component",
    "encode_path",
    "encode_query",
    "encode_userinfo",
    # Exceptions
    "MalformedURIError",
    "InvalidArgumentError",
    "StreamError",
    "HTTPException",
    "HTTPBadRequest",
    # Configuration
    "MessageConfig",
    "get_config",
    "set_config",
]
