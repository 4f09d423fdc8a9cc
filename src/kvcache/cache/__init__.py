"""kvcache cache: namespaced JSON caching over Redis with graceful degradation."""

from kvcache.cache.adapters.memory import InMemoryKeyValueStore
from kvcache.cache.adapters.redis import create_redis_client
from kvcache.cache.decorators import cache_evict, cache_put, cacheable
from kvcache.cache.factory import create_cache
from kvcache.cache.json_cache import Active, CacheHit, CacheState, Inactive, JsonCache
from kvcache.cache.keys import KeyNamespace
from kvcache.cache.ports.outbound import KeyValueStore

__all__ = [
    "Active",
    "CacheHit",
    "CacheState",
    "InMemoryKeyValueStore",
    "Inactive",
    "JsonCache",
    "KeyNamespace",
    "KeyValueStore",
    "cache_evict",
    "cache_put",
    "cacheable",
    "create_cache",
    "create_redis_client",
]
