# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Base Token Manager for the OAuth Message Classifier

This module provides the BaseTokenManager abstract class that defines the
common interface for token type lookups used by MessageTypeClassifier.
"""

import abc
from dataclasses import dataclass
from typing import Any

from typing_extensions import Self

from ..types.token import TokenType


@dataclass
class HealthCheckResult:
    """
    Structured health check result for token manager monitoring.

    Attributes:
        healthy: Whether the backend is operational
        backend_type: Type of backend (e.g., 'redis', 'memory')
        namespace: Backend namespace
        error: Error message if unhealthy
        metadata: Additional backend-specific information
    """

    healthy: bool
    backend_type: str
    namespace: str
    error: str | None = None
    metadata: dict[str, Any] | None = None


class BaseTokenManager(abc.ABC):
    """
    Abstract base class for token type lookups.

    Subclasses satisfy TokenManagerProtocol and can be used interchangeably.
    They only read token state; issuing and upgrading tokens belongs to the
    Service Provider's token store.
    """

    def __init__(self, namespace: str = "oauth"):
        """
        Args:
            namespace: Namespace for isolating tokens across deployments
        """
        self.namespace = namespace

    @abc.abstractmethod
    async def get_token_type(self, token: str) -> TokenType:
        """
        Report whether a token is a request token or an access token.

        Raises:
            TokenNotFoundError: If the token is unknown
        """
        pass

    @abc.abstractmethod
    async def health_check(self) -> HealthCheckResult:
        """Perform a health check on the backend."""
        pass

    async def cleanup(self) -> None:
        """Release backend resources."""
        return None

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type: Any, _exc_val: Any, _exc_tb: Any) -> None:
        await self.cleanup()


__all__ = ["BaseTokenManager", "HealthCheckResult"]
