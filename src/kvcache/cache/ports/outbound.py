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
"""Key-value store protocol consumed by the JSON cache."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """The subset of ``redis.asyncio.Redis`` the JSON cache relies on.

    ``get`` returns ``None`` for a missing key. ``set`` accepts an expiry in
    whole seconds (``ex``) or milliseconds (``px``); neither means no expiry.
    ``delete`` ignores absent keys and returns how many were removed.
    """

    async def ping(self) -> Any: ...

    async def get(self, name: str) -> bytes | str | None: ...

    async def set(
        self,
        name: str,
        value: bytes | str,
        ex: int | None = None,
        px: int | None = None,
    ) -> Any: ...

    async def delete(self, *names: str) -> int: ...

    async def aclose(self) -> None: ...
