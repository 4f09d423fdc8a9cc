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
"""Redis client construction for the JSON cache."""

from __future__ import annotations

import redis.asyncio as aioredis

from kvcache.config.properties.cache import CacheProperties


def create_redis_client(properties: CacheProperties) -> aioredis.Redis:
    """Build a ``redis.asyncio.Redis`` client for *properties*.

    No connection is opened here; the pool connects lazily on the first
    command. Raises ``ValueError`` when host and port do not form a valid
    address.
    """
    return aioredis.from_url(
        properties.url,
        password=properties.password or None,
    )
