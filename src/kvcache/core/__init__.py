"""kvcache core: configuration."""

from kvcache.core.config import Config, config_properties

__all__ = ["Config", "config_properties"]
