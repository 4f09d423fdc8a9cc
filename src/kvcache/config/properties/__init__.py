"""Typed configuration property classes for each kvcache subsystem."""

from kvcache.config.properties.cache import CacheProperties
from kvcache.config.properties.logging import LoggingProperties

__all__ = ["CacheProperties", "LoggingProperties"]
