"""kvcache: a namespaced JSON cache over Redis that degrades to a no-op."""

from kvcache.cache import (
    CacheHit,
    InMemoryKeyValueStore,
    JsonCache,
    KeyValueStore,
    cache_evict,
    cache_put,
    cacheable,
    create_cache,
)
from kvcache.config.properties import CacheProperties, LoggingProperties
from kvcache.core.config import Config, config_properties
from kvcache.kernel.exceptions import (
    CacheConnectionException,
    CacheDeserializationException,
    CacheException,
    CacheSerializationException,
    KVCacheException,
)

__version__ = "0.1.0"

__all__ = [
    "CacheConnectionException",
    "CacheDeserializationException",
    "CacheException",
    "CacheHit",
    "CacheProperties",
    "CacheSerializationException",
    "Config",
    "InMemoryKeyValueStore",
    "JsonCache",
    "KVCacheException",
    "KeyValueStore",
    "LoggingProperties",
    "cache_evict",
    "cache_put",
    "cacheable",
    "config_properties",
    "create_cache",
]
