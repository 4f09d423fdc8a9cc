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
"""Build a JsonCache from application configuration."""

from __future__ import annotations

from kvcache.cache.json_cache import JsonCache
from kvcache.cache.ports.outbound import KeyValueStore
from kvcache.config.properties.cache import CacheProperties
from kvcache.core.config import Config


async def create_cache(
    config: Config,
    namespace: str = "",
    *,
    client: KeyValueStore | None = None,
) -> JsonCache:
    """Bind ``kvcache.cache.*`` from *config* and connect a JsonCache.

    Configuration errors (e.g. a non-numeric ``db``) raise ``ValueError``;
    connectivity errors leave the returned cache inactive.
    """
    properties = config.bind(CacheProperties)
    return await JsonCache.connect(properties, namespace, client=client)
