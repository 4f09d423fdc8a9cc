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
"""Cache subsystem configuration properties."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from kvcache.core.config import config_properties

DEFAULT_PROBE_TIMEOUT_SECONDS = 2.0


@config_properties(prefix="kvcache.cache")
@dataclass(frozen=True)
class CacheProperties:
    """Configuration for the JSON cache (kvcache.cache.*).

    ``port`` is kept as a string because it is only ever concatenated into
    the store address. An empty ``password`` means no authentication.
    ``default_ttl`` and ``probe_timeout`` are in seconds.
    """

    enabled: bool = False
    host: str = "localhost"
    port: str = "6379"
    password: str = ""
    db: int = 0
    default_ttl: int = 300
    probe_timeout: float = DEFAULT_PROBE_TIMEOUT_SECONDS

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"

    @property
    def url(self) -> str:
        return f"redis://{self.address}/{self.db}"

    @property
    def default_ttl_delta(self) -> timedelta:
        return timedelta(seconds=self.default_ttl)
