# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Message shape enumeration for OAuth 1.0 payload classification.

The wire format carries no type tag, so every classification result is one of
these closed enumeration members (or None when nothing matches). Callers map
a shape to a concrete message class when deserializing.
"""

from enum import Enum


class MessageDirection(Enum):
    """Whether a message initiates an exchange or answers one."""

    REQUEST = "request"
    RESPONSE = "response"


class MessageTransport(Enum):
    """
    How a message travels between the parties.

    - DIRECT: Consumer and Service Provider talk to each other over HTTP.
    - INDIRECT: The message is relayed by the end user's browser as a redirect.
    """

    DIRECT = "direct"
    INDIRECT = "indirect"


class MessageShape(Enum):
    """
    Distinguishable OAuth 1.0 message kinds.

    Request side:
        REQUEST_TOKEN_REQUEST: Consumer asks for a fresh unauthorized request token.
        ACCESS_TOKEN_REQUEST: Consumer trades an authorized request token for
            an access token.
        USER_AUTHORIZATION_REQUEST: End user is redirected to the Service
            Provider's authorization page.
        PROTECTED_RESOURCE_REQUEST: Consumer accesses a resource with an
            access token.

    Response side:
        UNAUTHORIZED_REQUEST_TOKEN_RESPONSE: Service Provider issues a request token.
        USER_AUTHORIZATION_RESPONSE: End user is redirected back to the Consumer.
        GRANTED_ACCESS_TOKEN_RESPONSE: Service Provider issues an access token.
    """

    REQUEST_TOKEN_REQUEST = "request_token_request"
    ACCESS_TOKEN_REQUEST = "access_token_request"
    USER_AUTHORIZATION_REQUEST = "user_authorization_request"
    PROTECTED_RESOURCE_REQUEST = "protected_resource_request"

    UNAUTHORIZED_REQUEST_TOKEN_RESPONSE = "unauthorized_request_token_response"
    USER_AUTHORIZATION_RESPONSE = "user_authorization_response"
    GRANTED_ACCESS_TOKEN_RESPONSE = "granted_access_token_response"

    @property
    def direction(self) -> MessageDirection:
        """Request or response side of the exchange."""
        if self in REQUEST_SHAPES:
            return MessageDirection.REQUEST
        return MessageDirection.RESPONSE

    @property
    def transport(self) -> MessageTransport:
        """Direct or browser-relayed delivery."""
        if self in INDIRECT_SHAPES:
            return MessageTransport.INDIRECT
        return MessageTransport.DIRECT

    @property
    def expects_direct_response(self) -> bool:
        """True for the two requests the Service Provider answers directly."""
        return self in DIRECT_RESPONSE_PAIRS


REQUEST_SHAPES = frozenset(
    {
        MessageShape.REQUEST_TOKEN_REQUEST,
        MessageShape.ACCESS_TOKEN_REQUEST,
        MessageShape.USER_AUTHORIZATION_REQUEST,
        MessageShape.PROTECTED_RESOURCE_REQUEST,
    }
)

RESPONSE_SHAPES = frozenset(
    {
        MessageShape.UNAUTHORIZED_REQUEST_TOKEN_RESPONSE,
        MessageShape.USER_AUTHORIZATION_RESPONSE,
        MessageShape.GRANTED_ACCESS_TOKEN_RESPONSE,
    }
)

INDIRECT_SHAPES = frozenset(
    {
        MessageShape.USER_AUTHORIZATION_REQUEST,
        MessageShape.USER_AUTHORIZATION_RESPONSE,
    }
)

# Originating request -> the direct response it receives
DIRECT_RESPONSE_PAIRS: dict[MessageShape, MessageShape] = {
    MessageShape.REQUEST_TOKEN_REQUEST: MessageShape.UNAUTHORIZED_REQUEST_TOKEN_RESPONSE,
    MessageShape.ACCESS_TOKEN_REQUEST: MessageShape.GRANTED_ACCESS_TOKEN_RESPONSE,
}


__all__ = [
    "DIRECT_RESPONSE_PAIRS",
    "INDIRECT_SHAPES",
    "REQUEST_SHAPES",
    "RESPONSE_SHAPES",
    "MessageDirection",
    "MessageShape",
    "MessageTransport",
]
