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
"""JSON cache over a remote key-value store.

``JsonCache`` memoizes JSON-compatible values under namespaced keys with a
per-entry TTL. Its mode is fixed when it is built:

- **Active**: enabled by configuration and the store answered the liveness
  probe. Every operation makes one round trip to the store.
- **Inactive**: disabled by configuration, or the probe failed. Every
  operation is a no-op: lookups miss, writes and deletes are discarded.

An inactive cache never reconnects. Callers must treat the cache as
advisory so that degrading to inactive only costs performance.
"""

from __future__ import annotations

import asyncio
import functools
import json
import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Generic, TypeVar, overload

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from kvcache.cache.adapters.redis import create_redis_client
from kvcache.cache.keys import KeyNamespace
from kvcache.cache.ports.outbound import KeyValueStore
from kvcache.config.properties.cache import CacheProperties
from kvcache.kernel.exceptions import (
    CacheConnectionException,
    CacheDeserializationException,
    CacheSerializationException,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)

_ZERO = timedelta(0)


@dataclass(frozen=True)
class Active:
    """The cache holds a client that answered the liveness probe."""

    client: KeyValueStore


@dataclass(frozen=True)
class Inactive:
    """The cache is a no-op. ``reason`` is None when disabled by configuration."""

    reason: CacheConnectionException | None = None


CacheState = Active | Inactive


@dataclass(frozen=True)
class CacheHit(Generic[T]):
    """A value found in the cache, distinguishing a cached ``null`` from a miss."""

    key: str
    value: T


@functools.lru_cache(maxsize=256)
def _type_adapter(type_: Any) -> TypeAdapter[Any]:
    return TypeAdapter(type_)


def _type_name(type_: Any) -> str:
    return getattr(type_, "__name__", repr(type_))


def _reject_constant(token: str) -> Any:
    raise ValueError(f"{token} is not valid JSON")


def _ensure_strict_json(payload: bytes) -> None:
    """Reject the NaN/Infinity tokens that ``to_json`` emits for non-finite floats."""
    if b"NaN" in payload or b"Infinity" in payload:
        json.loads(payload, parse_constant=_reject_constant)


def _expiry(ttl: timedelta) -> dict[str, int]:
    """Map a TTL to ``SET`` expiry arguments: ``ex`` for whole seconds, else ``px``."""
    if ttl <= _ZERO:
        return {}
    millis = max(ttl // timedelta(milliseconds=1), 1)
    if millis % 1000 == 0:
        return {"ex": millis // 1000}
    return {"px": millis}


async def _close_quietly(client: KeyValueStore) -> None:
    try:
        await client.aclose()
    except Exception:
        logger.debug("Error closing unreachable cache client", exc_info=True)


class JsonCache:
    """Namespaced JSON get/set/delete with TTL on top of a ``KeyValueStore``.

    Usage:
        cache = await JsonCache.connect(properties, namespace="app")
        if cache.connection_error:
            log.warning("running without cache", error=str(cache.connection_error))

        await cache.set("user:1", {"name": "a"})
        user = await cache.get("user:1", User)
        await cache.delete("user:1")

    Args:
        client: A connected store client, or None for an inactive cache.
        namespace: Prefix applied to every key as ``<namespace>:<key>``.
        default_ttl: TTL used when ``set`` gets none; zero or negative
            stores without expiry.
        connection_error: Why an inactive cache could not connect.
    """

    def __init__(
        self,
        client: KeyValueStore | None,
        *,
        namespace: str = "",
        default_ttl: timedelta = _ZERO,
        connection_error: CacheConnectionException | None = None,
    ) -> None:
        self._state: CacheState = Active(client) if client is not None else Inactive(connection_error)
        self._keys = KeyNamespace(namespace)
        self._default_ttl = default_ttl

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    async def connect(
        cls,
        properties: CacheProperties,
        namespace: str = "",
        *,
        client: KeyValueStore | None = None,
    ) -> JsonCache:
        """Build a cache from *properties*, probing the store when enabled.

        Never raises for connectivity problems: when the probe fails or times
        out after ``properties.probe_timeout`` seconds, the returned cache is
        inactive and ``connection_error`` holds the failure.

        Args:
            properties: Store address, credentials, database and TTL.
            namespace: Key prefix for this cache.
            client: Store client to use instead of building a Redis client.
        """
        default_ttl = properties.default_ttl_delta
        if not properties.enabled:
            logger.debug("Cache disabled by configuration (namespace=%r)", namespace)
            return cls(None, namespace=namespace, default_ttl=default_ttl)

        owned = client is None
        try:
            if client is None:
                client = create_redis_client(properties)
            async with asyncio.timeout(properties.probe_timeout):
                await client.ping()
        except asyncio.CancelledError:
            if owned and client is not None:
                await _close_quietly(client)
            raise
        except Exception as exc:
            error = CacheConnectionException(
                f"Cache store at {properties.address} (db {properties.db}) is unreachable: {exc!r}",
                context={"address": properties.address, "db": properties.db},
            )
            error.__cause__ = exc
            logger.warning("Cache disabled: %s", error)
            if client is not None:
                await _close_quietly(client)
            return cls(None, namespace=namespace, default_ttl=default_ttl, connection_error=error)

        logger.info(
            "Cache connected to %s (db=%s, namespace=%r)", properties.address, properties.db, namespace
        )
        return cls(client, namespace=namespace, default_ttl=default_ttl)

    @classmethod
    def disabled(cls, namespace: str = "") -> JsonCache:
        """Return an inactive cache."""
        return cls(None, namespace=namespace)

    # =========================================================================
    # STATE
    # =========================================================================

    @property
    def state(self) -> CacheState:
        return self._state

    @property
    def namespace(self) -> str:
        return self._keys.namespace

    @property
    def default_ttl(self) -> timedelta:
        return self._default_ttl

    @property
    def connection_error(self) -> CacheConnectionException | None:
        """The probe failure that made this cache inactive, if any."""
        state = self._state
        return state.reason if isinstance(state, Inactive) else None

    def is_active(self) -> bool:
        return isinstance(self._state, Active)

    def store_key(self, key: str) -> str:
        """Return the namespaced key under which *key* is stored."""
        return self._keys.key(key)

    # =========================================================================
    # KEY OPERATIONS
    # =========================================================================

    @overload
    async def lookup(self, key: str) -> CacheHit[Any] | None: ...

    @overload
    async def lookup(self, key: str, type_: type[T]) -> CacheHit[T] | None: ...

    async def lookup(self, key: str, type_: Any = Any) -> CacheHit[Any] | None:
        """Find *key* and decode it as *type_*.

        Returns None on a miss or when the cache is inactive.

        Raises:
            CacheDeserializationException: The payload is not JSON or does
                not validate as *type_*. Validation is strict: a JSON string
                is never coerced to a number or boolean.
        """
        state = self._state
        if not isinstance(state, Active):
            return None

        store_key = self._keys.key(key)
        raw = await state.client.get(store_key)
        if raw is None:
            logger.debug("Cache MISS: %s", store_key)
            return None

        try:
            value = _type_adapter(type_).validate_json(raw, strict=True)
        except ValidationError as exc:
            raise CacheDeserializationException(
                f"Cached value for key '{store_key}' cannot be decoded as {_type_name(type_)}",
                context={"key": store_key, "type": _type_name(type_)},
            ) from exc

        logger.debug("Cache HIT: %s", store_key)
        return CacheHit(key=key, value=value)

    @overload
    async def get(self, key: str) -> Any: ...

    @overload
    async def get(self, key: str, type_: type[T], default: T | None = None) -> T | None: ...

    async def get(self, key: str, type_: Any = Any, default: Any = None) -> Any:
        """Return the cached value for *key*, or *default* on a miss."""
        hit = await self.lookup(key, type_)
        return default if hit is None else hit.value

    async def set(self, key: str, value: Any, ttl: timedelta | float | None = None) -> None:
        """Store *value* as JSON under *key*, replacing any previous entry.

        Args:
            key: Logical key.
            value: JSON-compatible value, Pydantic model or dataclass.
            ttl: Time-to-live as a timedelta or seconds. None, zero or
                negative uses the default TTL.

        Raises:
            CacheSerializationException: *value* cannot be encoded; the
                store is not contacted.
        """
        state = self._state
        if not isinstance(state, Active):
            return

        store_key = self._keys.key(key)
        try:
            payload = to_json(value)
            _ensure_strict_json(payload)
        except (PydanticSerializationError, TypeError, ValueError) as exc:
            raise CacheSerializationException(
                f"Value for key '{store_key}' cannot be encoded as JSON: {exc}",
                context={"key": store_key, "type": type(value).__name__},
            ) from exc

        resolved = self._resolve_ttl(ttl)
        await state.client.set(store_key, payload, **_expiry(resolved))
        logger.debug("Cache SET: %s (TTL: %s)", store_key, resolved)

    async def delete(self, *keys: str) -> int:
        """Delete *keys* in one request. Absent keys are ignored.

        Returns:
            Number of keys the store removed; 0 when inactive.
        """
        state = self._state
        if not isinstance(state, Active) or not keys:
            return 0

        store_keys = self._keys.keys(keys)
        deleted = int(await state.client.delete(*store_keys))
        logger.debug("Cache DELETE: %s (%s removed)", ", ".join(store_keys), deleted)
        return deleted

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    async def close(self) -> None:
        """Close the store client. The cache is inactive afterwards."""
        state = self._state
        if not isinstance(state, Active):
            return
        self._state = Inactive()
        await state.client.aclose()
        logger.info("Cache connection closed (namespace=%r)", self.namespace)

    def _resolve_ttl(self, ttl: timedelta | float | None) -> timedelta:
        if ttl is None:
            return self._default_ttl
        if not isinstance(ttl, timedelta):
            ttl = timedelta(seconds=ttl)
        return ttl if ttl > _ZERO else self._default_ttl

    def __repr__(self) -> str:
        mode = "active" if self.is_active() else "inactive"
        return f"JsonCache(namespace={self.namespace!r}, {mode})"
