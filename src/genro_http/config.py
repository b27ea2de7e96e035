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
Message defaults for genro-http.

The configuration uses genro-toolbox SmartOptions with priority:

    hardcoded DEFAULTS < environment variables < explicit arguments

Keys:
    version: HTTP protocol version of new messages. Default "1.1".
    spool_size: Bytes a default message body keeps in memory before
        spilling to a temporary file. Default 2 MiB.

Environment variables use prefix GENRO_HTTP_ (e.g., GENRO_HTTP_VERSION).

Example:
    >>> from genro_http.config import MessageConfig, set_config
    >>> set_config(MessageConfig(version="1.0"))
    >>> Request("GET", "http://example.com").version
    '1.0'
"""

from __future__ import annotations

from typing import Any

from genro_toolbox import SmartOptions  # type: ignore[import-untyped]

__all__ = ["DEFAULTS", "MessageConfig", "get_config", "set_config"]

DEFAULTS = {"version": "1.1", "spool_size": 2 * 1024 * 1024}


def _message_opts_spec(
    version: str,
    spool_size: int,
) -> None:
    """Reference function for SmartOptions type extraction (no defaults)."""


class MessageConfig:
    """Defaults applied to new messages and their bodies."""

    __slots__ = ("_opts",)

    def __init__(
        self,
        version: str | None = None,
        spool_size: int | None = None,
        argv: list[str] | None = None,
    ) -> None:
        self._opts = self._build_config(version=version, spool_size=spool_size, argv=argv or [])

    def _build_config(
        self,
        version: str | None,
        spool_size: int | None,
        argv: list[str],
    ) -> SmartOptions:
        """Build message configuration from multiple sources.

        Config precedence (later overrides earlier):
        1. Built-in DEFAULTS
        2. Environment variables: GENRO_HTTP_*
        3. Command line arguments
        4. Explicit constructor parameters
        """
        env_argv_opts = SmartOptions(_message_opts_spec, env="GENRO_HTTP", argv=argv)

        caller_opts = SmartOptions(
            dict(version=version, spool_size=spool_size),
            ignore_none=True,
        )

        return SmartOptions(DEFAULTS) + env_argv_opts + caller_opts

    @property
    def version(self) -> str:
        """HTTP protocol version for new messages."""
        return str(self._opts["version"])

    @property
    def spool_size(self) -> int:
        """In-memory size limit of default message bodies."""
        return int(self._opts["spool_size"])

    def __getitem__(self, name: str) -> Any:
        """Proxy bracket access to underlying opts."""
        return self._opts[name]

    def __repr__(self) -> str:
        return f"MessageConfig(version={self.version!r}, spool_size={self.spool_size})"


_config: MessageConfig | None = None


def get_config() -> MessageConfig:
    """Return the process-wide configuration, building it on first use."""
    global _config
    if _config is None:
        _config = MessageConfig()
    return _config


def set_config(config: MessageConfig | None) -> None:
    """Replace the process-wide configuration; None rebuilds it on next use."""
    global _config
    _config = config
