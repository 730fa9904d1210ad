# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""OAuth Message Classifier - message shape resolution for OAuth 1.0 payloads.

OAuth 1.0 messages travel as flat name/value pairs with no type tag, and some
message kinds carry exactly the same fields. This library resolves a payload
to its MessageShape, consulting a token manager for the one case that only
token state can settle.

Key Features:
    - Closed MessageShape enumeration for request and response messages
    - Total request classification, with a single token lookup when needed
    - Response classification paired with the originating request shape
    - Pluggable token managers (memory, Redis)
    - Injectable diagnostics sink and Prometheus-backed counters

Quick Start:
    >>> from oauth_message_classifier import (
    ...     MemoryTokenManager, MessageShape, MessageTypeClassifier, TokenType,
    ... )
    >>>
    >>> tokens = MemoryTokenManager({"t1": TokenType.ACCESS_TOKEN})
    >>> classifier = MessageTypeClassifier(tokens)
    >>> await classifier.classify_request(
    ...     {"oauth_consumer_key": "ck1", "oauth_token": "t1"}
    ... )
    <MessageShape.PROTECTED_RESOURCE_REQUEST: 'protected_resource_request'>

Main Exports:
    - MessageTypeClassifier: Request and response classification
    - MessageShape, TokenType: Result and lookup enumerations
    - MemoryTokenManager, RedisTokenManager: Token managers
    - ClassifierConfig: Configuration options
    - ProtocolError, TokenNotFoundError: Errors callers must handle

Note: RedisTokenManager requires the 'redis' extra. Install with:
    pip install oauth-message-classifier[redis]

Version: 1.0.0
"""

__version__ = "1.0.0"

from typing import TYPE_CHECKING

from .backends import (
    BaseTokenManager,
    HealthCheckResult,
    MemoryTokenManager,
    TokenRecord,
)
from .classifier import MessageTypeClassifier
from .config import ClassifierConfig
from .exceptions import (
    BackendConnectionError,
    BackendOperationError,
    ConfigurationError,
    InvalidInputError,
    MessageClassifierError,
    ProtocolError,
    TokenNotFoundError,
)
from .observability import (
    ClassificationMetricsCollector,
    LoggingDiagnosticsSink,
    get_metrics_collector,
)
from .protocols import (
    DiagnosticsSinkProtocol,
    MessageTypeProviderProtocol,
    TokenManagerProtocol,
)
from .types import (
    CONSUMER_KEY,
    TOKEN,
    TOKEN_SECRET,
    FieldMap,
    MessageDirection,
    MessageShape,
    MessageTransport,
    TokenType,
)

# Lazy import for optional redis backend
if TYPE_CHECKING:
    from .backends import RedisTokenManager

__all__ = [
    "CONSUMER_KEY",
    "TOKEN",
    "TOKEN_SECRET",
    "BackendConnectionError",
    "BackendOperationError",
    # Backends
    "BaseTokenManager",
    # Observability
    "ClassificationMetricsCollector",
    "ClassifierConfig",
    "ConfigurationError",
    "DiagnosticsSinkProtocol",
    "FieldMap",
    "HealthCheckResult",
    "InvalidInputError",
    "LoggingDiagnosticsSink",
    "MemoryTokenManager",
    # Exceptions
    "MessageClassifierError",
    "MessageDirection",
    # Types
    "MessageShape",
    "MessageTransport",
    # Classifier
    "MessageTypeClassifier",
    "MessageTypeProviderProtocol",
    "ProtocolError",
    "RedisTokenManager",  # Lazy loaded - requires redis extra
    "TokenManagerProtocol",
    "TokenNotFoundError",
    "TokenRecord",
    "TokenType",
    "get_metrics_collector",
]


def __getattr__(name: str) -> type:
    """Lazy import for optional redis backend."""
    if name == "RedisTokenManager":
        from .backends import RedisTokenManager

        return RedisTokenManager
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
