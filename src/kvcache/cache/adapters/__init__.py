"""Cache adapters: concrete store clients."""

from kvcache.cache.adapters.memory import InMemoryKeyValueStore
from kvcache.cache.adapters.redis import create_redis_client

__all__ = ["InMemoryKeyValueStore", "create_redis_client"]
