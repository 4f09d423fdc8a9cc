"""Exception hierarchy for kvcache.

Every library error inherits from KVCacheException, so callers can catch
the base class to treat all cache failures as advisory, or a specific
subclass for targeted handling.

Categories:
- InfrastructureException: store connectivity and payload failures
- CacheException: failures raised by the JSON cache adapter itself

Errors raised by the store client (``redis.RedisError``, timeouts, socket
errors) are not wrapped and reach the caller unchanged.
"""

from __future__ import annotations

from typing import Any

# =============================================================================
# Base Exception
# =============================================================================


class KVCacheException(Exception):
    """Base exception for all kvcache errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CACHE_SERIALIZATION").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict[str, Any] = context if context is not None else {}


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(KVCacheException):
    """Failures of the backing key-value store or of data flowing to it."""


class CacheException(InfrastructureException):
    """Errors raised by the JSON cache adapter."""


class CacheConnectionException(CacheException):
    """The liveness probe against the store failed at construction time.

    Never raised by ``JsonCache.connect``; it is attached to the resulting
    inactive cache as ``connection_error``.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message, code="CACHE_CONNECTION", context=context)


class CacheSerializationException(CacheException):
    """A value could not be encoded to JSON. The store was not contacted."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message, code="CACHE_SERIALIZATION", context=context)


class CacheDeserializationException(CacheException):
    """A stored payload is not valid JSON or does not fit the requested type."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message, code="CACHE_DESERIALIZATION", context=context)
