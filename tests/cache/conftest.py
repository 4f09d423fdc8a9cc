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
"""Shared fixtures for cache tests."""

from __future__ import annotations

import asyncio
from datetime import timedelta
from typing import Any

import pytest

from kvcache.cache.json_cache import JsonCache


class FakeRedis:
    """Minimal in-memory stub matching the redis.asyncio.Redis interface.

    Records every command in ``calls`` so tests can assert on round trips
    and expiry arguments.
    """

    def __init__(self, ping_error: BaseException | None = None, ping_delay: float = 0.0) -> None:
        self._store: dict[str, bytes] = {}
        self.calls: list[tuple[Any, ...]] = []
        self.ping_error = ping_error
        self.ping_delay = ping_delay
        self.closed = False

    async def ping(self) -> bool:
        self.calls.append(("ping",))
        if self.ping_delay:
            await asyncio.sleep(self.ping_delay)
        if self.ping_error is not None:
            raise self.ping_error
        return True

    async def get(self, name: str) -> bytes | None:
        self.calls.append(("get", name))
        return self._store.get(name)

    async def set(self, name: str, value: bytes | str, ex: int | None = None, px: int | None = None) -> bool:
        self.calls.append(("set", name, value, ex, px))
        self._store[name] = value.encode() if isinstance(value, str) else value
        return True

    async def delete(self, *names: str) -> int:
        self.calls.append(("delete", *names))
        count = 0
        for name in names:
            if name in self._store:
                del self._store[name]
                count += 1
        return count

    async def aclose(self) -> None:
        self.calls.append(("aclose",))
        self.closed = True

    def raw(self, name: str) -> bytes | None:
        return self._store.get(name)

    def put_raw(self, name: str, value: bytes) -> None:
        self._store[name] = value


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def cache(fake_redis: FakeRedis) -> JsonCache:
    """Active cache in namespace ``app`` with a five-minute default TTL."""
    return JsonCache(fake_redis, namespace="app", default_ttl=timedelta(minutes=5))


@pytest.fixture
def fake_redis_factory() -> type[FakeRedis]:
    return FakeRedis
