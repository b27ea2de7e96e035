# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Tests for message configuration."""

import pytest

from genro_http.config import DEFAULTS, MessageConfig, get_config, set_config
from genro_http.request import Request
from genro_http.response import Response


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Run every test without GENRO_HTTP_* variables and a fresh config."""
    monkeypatch.delenv("GENRO_HTTP_VERSION", raising=False)
    monkeypatch.delenv("GENRO_HTTP_SPOOL_SIZE", raising=False)
    set_config(None)
    yield
    set_config(None)


class TestMessageConfig:
    """Test configuration sources and priority."""

    def test_defaults(self):
        """Without overrides the built-in defaults apply."""
        config = MessageConfig()
        assert config.version == DEFAULTS["version"] == "1.1"
        assert config.spool_size == DEFAULTS["spool_size"]
        assert config["version"] == "1.1"

    def test_explicit_arguments(self):
        """Constructor arguments win."""
        config = MessageConfig(version="2", spool_size=1024)
        assert config.version == "2"
        assert config.spool_size == 1024

    def test_environment(self, monkeypatch):
        """GENRO_HTTP_* variables override defaults."""
        monkeypatch.setenv("GENRO_HTTP_VERSION", "1.0")
        monkeypatch.setenv("GENRO_HTTP_SPOOL_SIZE", "4096")
        config = MessageConfig()
        assert config.version == "1.0"
        assert config.spool_size == 4096

    def test_arguments_override_environment(self, monkeypatch):
        """Explicit arguments win over the environment."""
        monkeypatch.setenv("GENRO_HTTP_VERSION", "1.0")
        assert MessageConfig(version="2").version == "2"

    def test_argv(self):
        """Command line options are read."""
        config = MessageConfig(argv=["--spool-size", "512"])
        assert config.spool_size == 512

    def test_repr(self):
        """repr shows the effective values."""
        assert repr(MessageConfig(version="1.0", spool_size=10)) == (
            "MessageConfig(version='1.0', spool_size=10)"
        )


class TestProcessConfig:
    """Test the process-wide configuration."""

    def test_get_config_is_cached(self):
        """get_config builds once."""
        assert get_config() is get_config()

    def test_set_config_applies_to_messages(self):
        """New messages use the configured version."""
        set_config(MessageConfig(version="1.0"))
        assert Request("GET", "/").version == "1.0"
        assert Response().version == "1.0"

    def test_set_config_none_rebuilds(self, monkeypatch):
        """set_config(None) rebuilds from the environment on next use."""
        get_config()
        monkeypatch.setenv("GENRO_HTTP_VERSION", "2")
        set_config(None)
        assert get_config().version == "2"
