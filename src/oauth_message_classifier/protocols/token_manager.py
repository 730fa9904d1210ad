# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for token type lookups."""

from typing import Protocol, runtime_checkable

from ..types.token import TokenType


@runtime_checkable
class TokenManagerProtocol(Protocol):
    """
    Protocol for whatever subsystem tracks issued tokens.

    The classifier only needs to know whether a token has been upgraded to an
    access token yet. Storage, expiry and issuance stay with the implementer.
    """

    async def get_token_type(self, token: str) -> TokenType:
        """
        Report the lifecycle stage of a token.

        Args:
            token: Value of the oauth_token field

        Returns:
            TokenType.REQUEST_TOKEN or TokenType.ACCESS_TOKEN

        Raises:
            TokenNotFoundError: If the token is unknown
        """
        ...
