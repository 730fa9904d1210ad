# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
MemoryTokenManager for the OAuth Message Classifier

This module provides an in-memory token manager that doesn't require Redis.
Suited to tests, development and single-process Service Providers that
already keep their tokens in memory.
"""

import asyncio
import logging
from collections.abc import Mapping

from ..exceptions import TokenNotFoundError
from ..types.token import TokenType
from .base import BaseTokenManager, HealthCheckResult

logger = logging.getLogger(__name__)


class MemoryTokenManager(BaseTokenManager):
    """
    Dict-backed token type lookup.

    Note:
        This backend is NOT suitable for:
        - Multi-process applications
        - Distributed systems
    """

    def __init__(
        self,
        tokens: Mapping[str, TokenType] | None = None,
        namespace: str = "oauth_memory",
    ) -> None:
        """
        Args:
            tokens: Initial token -> TokenType mapping (copied)
            namespace: Namespace for key isolation (for compatibility)
        """
        super().__init__(namespace)
        self._tokens: dict[str, TokenType] = dict(tokens or {})
        self._lock = asyncio.Lock()

    async def get_token_type(self, token: str) -> TokenType:
        async with self._lock:
            token_type = self._tokens.get(token)
        if token_type is None:
            raise TokenNotFoundError(token)
        return token_type

    async def set_token_type(self, token: str, token_type: TokenType) -> None:
        """Record or replace the stage of a token, e.g. after authorization."""
        if not isinstance(token_type, TokenType):
            raise ValueError(
                f"token_type must be a TokenType, got {type(token_type).__name__}"
            )
        async with self._lock:
            previous = self._tokens.get(token)
            self._tokens[token] = token_type
        if previous is not None and previous is not token_type:
            logger.debug(f"Token moved from {previous.value} to {token_type.value}")

    async def forget(self, token: str) -> bool:
        """Remove a token. Returns False if it was not known."""
        async with self._lock:
            return self._tokens.pop(token, None) is not None

    async def health_check(self) -> HealthCheckResult:
        async with self._lock:
            counts = {
                token_type.value: sum(1 for t in self._tokens.values() if t is token_type)
                for token_type in TokenType
            }
        return HealthCheckResult(
            healthy=True,
            backend_type="memory",
            namespace=self.namespace,
            metadata=counts,
        )

    async def cleanup(self) -> None:
        async with self._lock:
            self._tokens.clear()


__all__ = ["MemoryTokenManager"]
