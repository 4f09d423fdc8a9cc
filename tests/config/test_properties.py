"""Tests for @config_properties dataclass binding per subsystem."""

from dataclasses import FrozenInstanceError
from datetime import timedelta

import pytest

from kvcache.config.properties import CacheProperties, LoggingProperties
from kvcache.core.config import Config


class TestCacheProperties:
    def test_bind_defaults(self):
        props = Config({"kvcache": {"cache": {}}}).bind(CacheProperties)
        assert props.enabled is False
        assert props.host == "localhost"
        assert props.port == "6379"
        assert props.password == ""
        assert props.db == 0
        assert props.default_ttl == 300
        assert props.probe_timeout == 2.0

    def test_bind_custom_values(self):
        config = Config(
            {
                "kvcache": {
                    "cache": {
                        "enabled": True,
                        "host": "redis.internal",
                        "port": 6380,
                        "password": "pw",
                        "db": 2,
                        "default_ttl": 60,
                    }
                }
            }
        )
        props = config.bind(CacheProperties)
        assert props.enabled is True
        assert props.port == "6380"
        assert props.address == "redis.internal:6380"
        assert props.url == "redis://redis.internal:6380/2"
        assert props.default_ttl_delta == timedelta(minutes=1)

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("KVCACHE_CACHE_ENABLED", "true")
        monkeypatch.setenv("KVCACHE_CACHE_DB", "5")
        monkeypatch.setenv("KVCACHE_CACHE_PROBE_TIMEOUT", "0.5")
        props = Config({}).bind(CacheProperties)
        assert props.enabled is True
        assert props.db == 5
        assert props.probe_timeout == 0.5

    def test_immutable(self):
        props = CacheProperties()
        with pytest.raises(FrozenInstanceError):
            props.enabled = True  # type: ignore[misc]


class TestLoggingProperties:
    def test_bind_defaults(self):
        props = Config({}).bind(LoggingProperties)
        assert props.root_level == "INFO"
        assert props.module_levels == {}
        assert props.format == "console"

    def test_per_module_levels(self):
        config = Config({"kvcache": {"logging": {"level": {"root": "warning", "kvcache.cache": "debug"}}}})
        props = config.bind(LoggingProperties)
        assert props.root_level == "WARNING"
        assert props.module_levels == {"kvcache.cache": "DEBUG"}

    def test_env_level_string(self, monkeypatch):
        monkeypatch.setenv("KVCACHE_LOGGING_LEVEL", "debug")
        props = Config({}).bind(LoggingProperties)
        assert props.root_level == "DEBUG"
        assert props.module_levels == {}
