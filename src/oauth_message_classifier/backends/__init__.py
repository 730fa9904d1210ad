# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Token manager implementations.

This module provides the abstract base class and concrete implementations
of TokenManagerProtocol.

Available backends:
- BaseTokenManager: Abstract base class defining the token manager interface
- MemoryTokenManager: In-memory lookups for tests and single-process deployments
- RedisTokenManager: Lookups over a shared Redis token store (requires redis extra)

Supporting types:
- HealthCheckResult: Structured result from backend health checks
- TokenRecord: Validated stored token record

Note: RedisTokenManager is lazily imported to avoid requiring the redis
package when only using MemoryTokenManager.
"""

from typing import TYPE_CHECKING, cast

from oauth_message_classifier.backends.base import BaseTokenManager, HealthCheckResult
from oauth_message_classifier.backends.memory import MemoryTokenManager
from oauth_message_classifier.backends.models import TokenRecord

# Lazy imports for optional redis backend
if TYPE_CHECKING:
    from oauth_message_classifier.backends.redis import RedisTokenManager

__all__ = [
    "BaseTokenManager",
    "HealthCheckResult",
    "MemoryTokenManager",
    # Redis backend (lazy loaded)
    "RedisTokenManager",
    "TokenRecord",
]


def __getattr__(name: str) -> type:
    """Lazy import for optional redis backend."""
    if name == "RedisTokenManager":
        try:
            from oauth_message_classifier.backends import redis as redis_module

            return cast(type, getattr(redis_module, name))
        except ImportError as e:  # pragma: no cover
            raise ImportError(  # pragma: no cover
                f"'{name}' requires the 'redis' extra. "
                "Install with: pip install oauth-message-classifier[redis]"
            ) from e
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
