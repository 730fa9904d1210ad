# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Message type classification for OAuth 1.0 payloads.

OAuth messages arrive as flat name/value pairs with no type tag, and some
message kinds share the exact same fields. This module resolves a payload to
a MessageShape using the presence of three wire fields and, for the one truly
ambiguous request, the token manager's view of the token.

Request rules (first match wins):
    1. consumer key without token            -> REQUEST_TOKEN_REQUEST
    2. consumer key with token, access token -> PROTECTED_RESOURCE_REQUEST
       consumer key with token, request token -> ACCESS_TOKEN_REQUEST
    3. anything else                         -> USER_AUTHORIZATION_REQUEST

Response rules (first match wins):
    1. no token                               -> None
    2. no originating request                 -> USER_AUTHORIZATION_RESPONSE
    3. no token secret                        -> None, reported to diagnostics
    4. paired with REQUEST_TOKEN_REQUEST      -> UNAUTHORIZED_REQUEST_TOKEN_RESPONSE
       paired with ACCESS_TOKEN_REQUEST       -> GRANTED_ACCESS_TOKEN_RESPONSE
       paired with anything else              -> ProtocolError
"""

from __future__ import annotations

import logging

from .config import ClassifierConfig
from .exceptions import ConfigurationError, InvalidInputError, ProtocolError
from .observability.collector import (
    ClassificationMetricsCollector,
    get_metrics_collector,
)
from .observability.constants import (
    CLASSIFICATIONS_TOTAL,
    EVENT_MISSING_TOKEN_SECRET,
    EVENT_UNEXPECTED_RESPONSE,
    NO_MATCH_TOTAL,
    PROTOCOL_VIOLATIONS_TOTAL,
    TOKEN_LOOKUPS_TOTAL,
)
from .observability.diagnostics import LoggingDiagnosticsSink
from .protocols.diagnostics import DiagnosticsSinkProtocol
from .protocols.token_manager import TokenManagerProtocol
from .types.fields import FieldMap
from .types.shape import DIRECT_RESPONSE_PAIRS, MessageShape
from .types.token import TokenType

logger = logging.getLogger(__name__)


class MessageTypeClassifier:
    """
    Resolves raw OAuth payloads to message shapes.

    The classifier holds no per-message state, so one instance can serve
    concurrent requests. Its only I/O is the token manager lookup made for
    payloads carrying both a consumer key and a token.

    Example:
        >>> classifier = MessageTypeClassifier(token_manager)
        >>> await classifier.classify_request({"oauth_consumer_key": "ck1"})
        <MessageShape.REQUEST_TOKEN_REQUEST: 'request_token_request'>
        >>> classifier.classify_response(
        ...     MessageShape.REQUEST_TOKEN_REQUEST,
        ...     {"oauth_token": "t2", "oauth_token_secret": "s2"},
        ... )
        <MessageShape.UNAUTHORIZED_REQUEST_TOKEN_RESPONSE: 'unauthorized_request_token_response'>
    """

    def __init__(
        self,
        token_manager: TokenManagerProtocol,
        diagnostics: DiagnosticsSinkProtocol | None = None,
        config: ClassifierConfig | None = None,
        metrics: ClassificationMetricsCollector | None = None,
    ) -> None:
        """
        Args:
            token_manager: Reports whether a token is a request or access token
            diagnostics: Receives protocol anomalies, defaults to a
                LoggingDiagnosticsSink
            config: Wire field names and observability switches
            metrics: Collector for classification counters, defaults to the
                global collector when metrics are enabled

        Raises:
            ConfigurationError: If token_manager is None
        """
        if token_manager is None:
            raise ConfigurationError("token_manager is required")

        self.config = config or ClassifierConfig()
        self._token_manager = token_manager

        if metrics is None and self.config.metrics_enabled:
            metrics = get_metrics_collector()
        self._metrics = metrics if self.config.metrics_enabled else None

        self._diagnostics: DiagnosticsSinkProtocol = (
            diagnostics
            if diagnostics is not None
            else LoggingDiagnosticsSink(metrics=self._metrics)
        )

    @property
    def token_manager(self) -> TokenManagerProtocol:
        return self._token_manager

    @property
    def diagnostics(self) -> DiagnosticsSinkProtocol:
        return self._diagnostics

    def _count(self, name: str, labels: dict[str, str]) -> None:
        if self._metrics is not None:
            self._metrics.inc_counter(name, labels=labels)

    def _matched(self, shape: MessageShape) -> MessageShape:
        self._count(
            CLASSIFICATIONS_TOTAL,
            {"direction": shape.direction.value, "shape": shape.value},
        )
        return shape

    # ==========================================================================
    # Request Classification
    # ==========================================================================

    async def classify_request(self, fields: FieldMap) -> MessageShape:
        """
        Identify an incoming request message.

        Args:
            fields: Name/value pairs that make up the message payload

        Returns:
            The request MessageShape. Every payload maps to one.

        Raises:
            InvalidInputError: If fields is None or the token manager answers
                with something other than a TokenType
            TokenNotFoundError: If the token manager does not know the token
        """
        if fields is None:
            raise InvalidInputError("fields must not be None")

        config = self.config
        if config.consumer_key_field in fields:
            if config.token_field not in fields:
                return self._matched(MessageShape.REQUEST_TOKEN_REQUEST)

            # Access token requests and protected resource requests carry the
            # same parameters; only the token's stage tells them apart.
            token = fields[config.token_field]
            token_type = await self._token_manager.get_token_type(token)

            if token_type is TokenType.ACCESS_TOKEN:
                shape = MessageShape.PROTECTED_RESOURCE_REQUEST
            elif token_type is TokenType.REQUEST_TOKEN:
                shape = MessageShape.ACCESS_TOKEN_REQUEST
            else:
                raise InvalidInputError(
                    f"Token manager returned {token_type!r}, expected a TokenType"
                )

            self._count(TOKEN_LOOKUPS_TOTAL, {"token_type": token_type.value})
            if config.log_oracle_lookups:
                logger.debug(f"Token lookup resolved {token_type.value} -> {shape.value}")
            return self._matched(shape)

        # Fail over to the message with no required fields at all.
        return self._matched(MessageShape.USER_AUTHORIZATION_REQUEST)

    # ==========================================================================
    # Response Classification
    # ==========================================================================

    def classify_response(
        self, request_shape: MessageShape | None, fields: FieldMap
    ) -> MessageShape | None:
        """
        Identify an incoming response message.

        Args:
            request_shape: Shape of the request that produced this response.
                None on a Consumer receiving an indirect message it did not
                request itself, such as the user authorization redirect.
            fields: Name/value pairs that make up the message payload

        Returns:
            The response MessageShape, or None if the payload is not a
            recognizable response

        Raises:
            InvalidInputError: If fields is None
            ProtocolError: If a direct response is paired with a request that
                never receives one
        """
        if fields is None:
            raise InvalidInputError("fields must not be None")

        config = self.config

        # All response messages have the token field.
        if config.token_field not in fields:
            self._count(NO_MATCH_TOTAL, {"reason": "missing_token"})
            return None

        if request_shape is None:
            return self._matched(MessageShape.USER_AUTHORIZATION_RESPONSE)

        # All direct responses have the token secret field.
        if config.token_secret_field not in fields:
            self._diagnostics.error(
                EVENT_MISSING_TOKEN_SECRET,
                f"An OAuth message was expected to contain "
                f"{config.token_secret_field} but didn't.",
                request_shape=request_shape.value,
            )
            self._count(NO_MATCH_TOTAL, {"reason": EVENT_MISSING_TOKEN_SECRET})
            return None

        response_shape = DIRECT_RESPONSE_PAIRS.get(request_shape)
        if response_shape is None:
            self._diagnostics.error(
                EVENT_UNEXPECTED_RESPONSE,
                f"Unexpected response message given the request type "
                f"{request_shape.value}",
                request_shape=request_shape.value,
            )
            self._count(PROTOCOL_VIOLATIONS_TOTAL, {"request_shape": request_shape.value})
            raise ProtocolError(
                f"Invalid incoming message: {request_shape.value} never "
                f"receives a direct response",
                request_shape=request_shape,
            )

        return self._matched(response_shape)

    # ==========================================================================
    # Provider Interface
    # ==========================================================================

    async def get_request_message_type(self, fields: FieldMap) -> MessageShape:
        """MessageTypeProviderProtocol entry point for requests."""
        return await self.classify_request(fields)

    def get_response_message_type(
        self, request_shape: MessageShape | None, fields: FieldMap
    ) -> MessageShape | None:
        """MessageTypeProviderProtocol entry point for responses."""
        return self.classify_response(request_shape, fields)

    async def classify(
        self,
        fields: FieldMap,
        request_shape: MessageShape | None = None,
        *,
        is_response: bool = False,
    ) -> MessageShape | None:
        """
        Classify a payload in either direction.

        Args:
            fields: Name/value pairs that make up the message payload
            request_shape: Originating request shape (responses only)
            is_response: Whether the payload is a response
        """
        if is_response:
            return self.classify_response(request_shape, fields)
        if request_shape is not None:
            raise InvalidInputError("request_shape only applies to responses")
        return await self.classify_request(fields)


__all__ = ["MessageTypeClassifier"]
