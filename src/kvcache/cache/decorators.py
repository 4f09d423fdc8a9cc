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
"""Memoization decorators backed by a JsonCache.

Key templates use ``str.format`` with the decorated function's bound
arguments, so ``key="user:{user_id}"`` expands ``{user_id}`` from the call.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from datetime import timedelta
from typing import Any, TypeVar

from kvcache.cache.json_cache import JsonCache

F = TypeVar("F", bound=Callable[..., Any])


def _resolve_key(func: Callable[..., Any], template: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    bound = inspect.signature(func).bind(*args, **kwargs)
    bound.apply_defaults()
    return template.format(**bound.arguments)


def cacheable(
    cache: JsonCache,
    key: str,
    ttl: timedelta | float | None = None,
    type_: Any = Any,
) -> Callable[[F], F]:
    """Return the cached result when present, else call and cache it.

    A cached JSON ``null`` counts as a hit. With an inactive cache the
    function is always called.

    Args:
        cache: Cache to read from and write to.
        key: Key template with {param} placeholders.
        ttl: Entry TTL; None uses the cache's default.
        type_: Type the cached payload is decoded as on a hit.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            resolved_key = _resolve_key(func, key, args, kwargs)

            hit = await cache.lookup(resolved_key, type_)
            if hit is not None:
                return hit.value

            result = await func(*args, **kwargs)
            await cache.set(resolved_key, result, ttl=ttl)
            return result

        return wrapper  # type: ignore[return-value]

    return decorator


def cache_put(
    cache: JsonCache,
    key: str,
    ttl: timedelta | float | None = None,
) -> Callable[[F], F]:
    """Always call the function and cache its result.

    Useful for update operations that should refresh the cached value.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = await func(*args, **kwargs)
            await cache.set(_resolve_key(func, key, args, kwargs), result, ttl=ttl)
            return result

        return wrapper  # type: ignore[return-value]

    return decorator


def cache_evict(cache: JsonCache, *keys: str) -> Callable[[F], F]:
    """Delete every key in *keys* after the function returns.

    Nothing is evicted when the function raises.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            result = await func(*args, **kwargs)
            await cache.delete(*(_resolve_key(func, k, args, kwargs) for k in keys))
            return result

        return wrapper  # type: ignore[return-value]

    return decorator
