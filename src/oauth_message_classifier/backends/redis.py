# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
RedisTokenManager for the OAuth Message Classifier

This module provides a token type lookup over a Redis token store shared by
several Service Provider instances. Each token is a hash at
``{namespace}:token:{token}`` with at least a ``token_type`` field
(``request_token`` or ``access_token``). This backend only reads; the
service that issues and upgrades tokens owns the writes.
"""

import asyncio
import logging
import os
from typing import Any

from pydantic import ValidationError
from redis.asyncio import Redis
from redis.exceptions import ConnectionError, RedisError, TimeoutError
from typing_extensions import Self

from ..exceptions import (
    BackendConnectionError,
    BackendOperationError,
    TokenNotFoundError,
)
from ..types.token import TokenType
from .base import BaseTokenManager, HealthCheckResult
from .models import TokenRecord

logger = logging.getLogger(__name__)


def _decode_hash(data: dict[Any, Any]) -> dict[str, Any]:
    """Decode a hash read by a client built without decode_responses."""
    return {
        (k.decode() if isinstance(k, bytes) else k): (
            v.decode() if isinstance(v, bytes) else v
        )
        for k, v in data.items()
    }


class RedisTokenManager(BaseTokenManager):
    """
    Redis-backed token type lookup.

    Connections are created lazily on first use so the manager can be built
    outside a running event loop.
    """

    DEFAULT_REDIS_URL = "redis://localhost:6379"

    def __init__(
        self,
        redis_url: str | None = None,
        redis_client: Any | None = None,
        namespace: str = "oauth",
        max_connections: int = 10,
        socket_timeout: float = 5.0,
    ) -> None:
        """
        Initialize the Redis token manager.

        Args:
            redis_url: Redis connection URL. If not provided, falls back to the
                REDIS_URL environment variable, then to "redis://localhost:6379".
            redis_client: Optional pre-configured Redis client (not closed on cleanup).
                Byte responses are decoded, so decode_responses may be off.
            namespace: Key prefix of the token store
            max_connections: Maximum connections in the pool
            socket_timeout: Connect and read timeout in seconds

        Environment Variables:
            REDIS_URL: Default Redis connection URL when redis_url is not provided.
        """
        super().__init__(namespace)

        self.redis_url = (
            redis_url or os.environ.get("REDIS_URL") or self.DEFAULT_REDIS_URL
        )
        self.max_connections = max_connections
        self.socket_timeout = socket_timeout

        self._redis: Any | None = redis_client
        self._owned_redis = redis_client is None
        self._connection_lock = asyncio.Lock()

    def _get_token_key(self, token: str) -> str:
        return f"{self.namespace}:token:{token}"

    async def _ensure_connected(self) -> Any:
        """Return the Redis client, creating it on first use."""
        if self._redis is not None:
            return self._redis

        async with self._connection_lock:
            if self._redis is None:
                logger.info(f"Connecting token manager to {self.redis_url}")
                try:
                    self._redis = Redis.from_url(
                        self.redis_url,
                        decode_responses=True,
                        max_connections=self.max_connections,
                        socket_connect_timeout=self.socket_timeout,
                        socket_timeout=self.socket_timeout,
                    )
                except ValueError as e:
                    logger.error(f"Invalid Redis URL {self.redis_url}: {e}")
                    raise BackendConnectionError(f"Invalid Redis URL: {e}") from e
        return self._redis

    async def get_record(self, token: str) -> TokenRecord:
        """
        Read and validate the stored record of a token.

        Raises:
            TokenNotFoundError: If no record exists
            BackendConnectionError: If Redis cannot be reached or the URL is invalid
            BackendOperationError: If the stored record is malformed
        """
        key = self._get_token_key(token)
        try:
            redis_client = await self._ensure_connected()
            data = await redis_client.hgetall(key)
        except (ConnectionError, TimeoutError) as e:
            logger.error(f"Redis connection error reading {key}: {e}")
            raise BackendConnectionError(f"Redis unavailable: {e}") from e
        except RedisError as e:
            logger.error(f"Redis error reading {key}: {e}")
            raise BackendOperationError(f"Redis error reading {key}: {e}") from e

        if not data:
            raise TokenNotFoundError(token)

        try:
            return TokenRecord.model_validate(_decode_hash(data))
        except (ValidationError, UnicodeDecodeError) as e:
            logger.error(f"Malformed token record at {key}: {e}")
            raise BackendOperationError(f"Malformed token record at {key}") from e

    async def get_token_type(self, token: str) -> TokenType:
        record = await self.get_record(token)
        return record.token_type

    async def health_check(self) -> HealthCheckResult:
        """Ping Redis and report connection details."""
        try:
            redis_client = await self._ensure_connected()
            pong = await redis_client.ping()
            return HealthCheckResult(
                healthy=bool(pong),
                backend_type="redis",
                namespace=self.namespace,
                metadata={"redis_url": self.redis_url},
            )
        except (RedisError, OSError, BackendConnectionError) as e:
            return HealthCheckResult(
                healthy=False,
                backend_type="redis",
                namespace=self.namespace,
                error=str(e),
            )

    async def cleanup(self) -> None:
        """Close the Redis client if this manager created it."""
        if self._redis is not None and self._owned_redis:
            try:
                await asyncio.wait_for(self._redis.aclose(), timeout=2.5)
            except asyncio.TimeoutError:
                logger.warning("Redis connection cleanup timed out")
            except RedisError as e:
                logger.error(f"Error during cleanup: {e}")
            finally:
                self._redis = None

    async def __aenter__(self) -> Self:
        await self._ensure_connected()
        return self


__all__ = ["RedisTokenManager"]
