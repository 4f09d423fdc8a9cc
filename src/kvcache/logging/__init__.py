"""kvcache logging: LoggingPort protocol and the structlog adapter."""

from kvcache.logging.port import LoggingPort
from kvcache.logging.structlog_adapter import StructlogAdapter

__all__ = ["LoggingPort", "StructlogAdapter"]
