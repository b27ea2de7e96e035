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
HTTP response message.

A response carries a status on top of the common message parts (version,
headers, body). Statuses are ``http.HTTPStatus`` members, which hold the
code and the reason phrase.

Factories
=========
Response.json(data, status=200)
    Serializes data with orjson (stdlib json if orjson is missing) into
    the body and sets ``content-type: application/json``.

Example::

    response = Response.json({"id": 1}, status=201)
    print(response.status)         # HTTPStatus.CREATED
    print(response.reason)         # "Created"
    print(bytes(response.body))    # b'{"id":1}'
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from .exceptions import InvalidArgumentError
from .message import Message
from .stream import Stream
from .utils import json_dumps

__all__ = ["Response"]


def _to_status(status: HTTPStatus | int) -> HTTPStatus:
    try:
        return HTTPStatus(status)
    except ValueError as e:
        raise InvalidArgumentError(f"Unknown HTTP status code: {status!r}") from e


class Response(Message):
    """
    Immutable HTTP response.

    Attributes:
        status: HTTP status.
        status_code: Numeric status code.
        reason: Reason phrase of the status.
    """

    __slots__ = ("_status",)

    def __init__(
        self,
        status: HTTPStatus | int = HTTPStatus.OK,
        headers: Any = None,
        body: Stream | None = None,
        version: str | None = None,
    ) -> None:
        """
        Initialize response.

        Args:
            status: HTTPStatus member or numeric code (default: 200).
            headers: Headers, mapping or (name, value) pairs.
            body: Body stream (default: empty temporary stream).
            version: Protocol version (default: from configuration).

        Raises:
            InvalidArgumentError: For an unknown status or invalid version.
        """
        super().__init__(headers=headers, body=body, version=version)
        self._status = _to_status(status)

    @classmethod
    def json(
        cls,
        data: Any,
        status: HTTPStatus | int = HTTPStatus.OK,
        headers: Any = None,
    ) -> Response:
        """Create a response with a JSON body."""
        response = cls(status, headers=headers, body=Stream.from_bytes(json_dumps(data)))
        return response.with_header("content-type", "application/json")

    @property
    def status(self) -> HTTPStatus:
        """HTTP status."""
        return self._status

    @property
    def status_code(self) -> int:
        """Numeric status code."""
        return self._status.value

    @property
    def reason(self) -> str:
        """Reason phrase, e.g. "Not Found"."""
        return self._status.phrase

    def with_status(self, status: HTTPStatus | int) -> Response:
        """
        Return a response with the given status.

        Raises:
            InvalidArgumentError: For an unknown status code.
        """
        status = _to_status(status)
        if status is self._status:
            return self
        return self._clone(_status=status)

    def __repr__(self) -> str:
        return f"Response(status={self._status.value})"
