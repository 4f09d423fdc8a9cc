"""Ports: protocols the cache depends on."""

from kvcache.cache.ports.outbound import KeyValueStore

__all__ = ["KeyValueStore"]
