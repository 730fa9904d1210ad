# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Exception classes for the OAuth message classifier.

This module defines the exception hierarchy used throughout the library.
All exceptions inherit from MessageClassifierError, making it easy to catch
all classifier-related exceptions with a single except clause.

A payload that matches no known message shape is NOT an error: the
classifier returns None for it. Exceptions are reserved for violated caller
preconditions and for protocol violations that must abort an exchange.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types.shape import MessageShape


class MessageClassifierError(Exception):
    """Base exception for all classifier errors.

    Example:
        try:
            shape = await classifier.classify_request(fields)
        except MessageClassifierError as e:
            logger.error(f"Classification failed: {e}")
    """

    pass


class InvalidInputError(MessageClassifierError, ValueError):
    """Raised when a caller precondition is violated.

    Typical causes are a missing field map or a token lookup that cannot
    produce a TokenType. It also derives from ValueError so callers that
    treat bad arguments generically keep working.
    """

    pass


class TokenNotFoundError(InvalidInputError):
    """Raised when a token manager has no record of a token.

    Unknown tokens are never coerced into a request or an access token.

    Attributes:
        token: The token identifier that was looked up.

    Example:
        try:
            shape = await classifier.classify_request(fields)
        except TokenNotFoundError as e:
            logger.warning(f"Rejecting message with unknown token {e.token!r}")
    """

    def __init__(self, token: str):
        super().__init__(f"Token not found: {token}")
        self.token = token


class ProtocolError(MessageClassifierError):
    """Raised when a direct response arrives for a request that never gets one.

    Only the request token and access token requests are answered with a
    direct response. Anything else paired with a direct response means the
    current exchange is broken and must be abandoned.

    Attributes:
        request_shape: The shape of the originating request.
    """

    def __init__(self, message: str, request_shape: MessageShape | None = None):
        super().__init__(message)
        self.request_shape = request_shape


class ConfigurationError(MessageClassifierError):
    """Raised when classifier or backend configuration is invalid.

    Common causes include:
    - Empty wire field names
    - Two logical fields mapped to the same wire name
    - A classifier constructed without a token manager
    """

    pass


class BackendConnectionError(MessageClassifierError):
    """Raised when a token manager cannot reach its storage."""

    pass


class BackendOperationError(MessageClassifierError):
    """Raised when a token manager read fails after connecting.

    This usually means a stored token record is malformed.
    """

    pass


__all__ = [
    "BackendConnectionError",
    "BackendOperationError",
    "ConfigurationError",
    "InvalidInputError",
    "MessageClassifierError",
    "ProtocolError",
    "TokenNotFoundError",
]
