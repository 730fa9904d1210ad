# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for message type providers."""

from typing import Protocol, runtime_checkable

from ..types.fields import FieldMap
from ..types.shape import MessageShape


@runtime_checkable
class MessageTypeProviderProtocol(Protocol):
    """
    Protocol for components that identify message shapes from raw payloads.

    Channels depend on this rather than on MessageTypeClassifier so that a
    different OAuth dialect can plug in its own rules.
    """

    async def get_request_message_type(self, fields: FieldMap) -> MessageShape:
        """
        Identify an incoming request.

        Args:
            fields: Name/value pairs that make up the message payload

        Returns:
            The request MessageShape (request classification is total)
        """
        ...

    def get_response_message_type(
        self, request_shape: MessageShape | None, fields: FieldMap
    ) -> MessageShape | None:
        """
        Identify an incoming response.

        Args:
            request_shape: Shape of the request that produced this response,
                or None on a Consumer receiving an indirect message
            fields: Name/value pairs that make up the message payload

        Returns:
            The response MessageShape, or None if nothing matches
        """
        ...
