"""kvcache kernel: exception hierarchy shared by every subsystem."""

from kvcache.kernel.exceptions import (
    CacheConnectionException,
    CacheDeserializationException,
    CacheException,
    CacheSerializationException,
    InfrastructureException,
    KVCacheException,
)

__all__ = [
    "CacheConnectionException",
    "CacheDeserializationException",
    "CacheException",
    "CacheSerializationException",
    "InfrastructureException",
    "KVCacheException",
]
