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
"""In-process key-value store with TTL support."""

from __future__ import annotations

import time


class InMemoryKeyValueStore:
    """Single-process stand-in for Redis, implementing ``KeyValueStore``.

    Suitable for development and tests. Values are stored as bytes, the way
    Redis returns them without ``decode_responses``. Expiry uses the
    monotonic clock and is applied lazily on access.
    """

    def __init__(self) -> None:
        self._store: dict[str, tuple[bytes, float | None]] = {}
        self.closed = False

    async def ping(self) -> bool:
        return True

    async def get(self, name: str) -> bytes | None:
        entry = self._store.get(name)
        if entry is None:
            return None

        value, expires_at = entry
        if expires_at is not None and time.monotonic() >= expires_at:
            del self._store[name]
            return None

        return value

    async def set(
        self,
        name: str,
        value: bytes | str,
        ex: int | None = None,
        px: int | None = None,
    ) -> bool:
        expires_at = None
        if px is not None:
            expires_at = time.monotonic() + px / 1000
        elif ex is not None:
            expires_at = time.monotonic() + ex
        if isinstance(value, str):
            value = value.encode()
        self._store[name] = (value, expires_at)
        return True

    async def delete(self, *names: str) -> int:
        count = 0
        for name in names:
            if await self.get(name) is not None:
                del self._store[name]
                count += 1
        return count

    async def aclose(self) -> None:
        self.closed = True

    def keys(self) -> list[str]:
        """Return the raw (namespaced) keys currently stored, expired or not."""
        return list(self._store)
