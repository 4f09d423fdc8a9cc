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
"""Key namespacing shared by every cache operation."""

from __future__ import annotations

from collections.abc import Iterable

KEY_SEP = ":"


class KeyNamespace:
    """Prefixes logical keys with ``<namespace>:``.

    An empty namespace leaves keys untouched. Two caches whose non-empty
    namespaces differ and contain no ``:`` never produce the same store key,
    so one cache cannot read or delete another's entries.
    """

    __slots__ = ("_prefix",)

    def __init__(self, namespace: str = "") -> None:
        self._prefix = namespace

    @property
    def namespace(self) -> str:
        return self._prefix

    def key(self, key: str) -> str:
        if not self._prefix:
            return key
        return f"{self._prefix}{KEY_SEP}{key}"

    def keys(self, keys: Iterable[str]) -> list[str]:
        return [self.key(k) for k in keys]

    def __repr__(self) -> str:
        return f"KeyNamespace({self._prefix!r})"
