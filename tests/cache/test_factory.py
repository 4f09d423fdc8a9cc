# Copyright 2026 Firefly Software Solutions Inc.
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
"""Tests for create_cache."""

from datetime import timedelta

import pytest

from kvcache.cache.factory import create_cache
from kvcache.core.config import Config


class TestCreateCache:
    @pytest.mark.asyncio
    async def test_disabled_by_default(self):
        cache = await create_cache(Config({}), "app")
        assert cache.is_active() is False
        assert cache.connection_error is None

    @pytest.mark.asyncio
    async def test_binds_properties_from_config(self, fake_redis):
        config = Config({"kvcache": {"cache": {"enabled": True, "default_ttl": 42}}})
        cache = await create_cache(config, "app", client=fake_redis)
        assert cache.is_active() is True
        assert cache.namespace == "app"
        assert cache.default_ttl == timedelta(seconds=42)

    @pytest.mark.asyncio
    async def test_env_var_enables_cache(self, fake_redis, monkeypatch):
        monkeypatch.setenv("KVCACHE_CACHE_ENABLED", "true")
        cache = await create_cache(Config({}), client=fake_redis)
        assert cache.is_active() is True

    @pytest.mark.asyncio
    async def test_invalid_config_raises(self):
        with pytest.raises(ValueError, match="kvcache.cache.db"):
            await create_cache(Config({"kvcache": {"cache": {"db": "zero"}}}))
