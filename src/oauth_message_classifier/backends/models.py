# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Stored token record model.

Token stores written by other services are read back through this model so
that a malformed record fails loudly instead of being guessed at.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from ..types.token import TokenType


class TokenRecord(BaseModel):
    """
    Validated view of a stored token hash.

    Only token_type matters for classification; the other fields are kept for
    logging and health reporting. issued_at accepts ISO 8601 text or Unix
    epoch seconds.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    token_type: TokenType
    consumer_key: str | None = None
    issued_at: datetime | None = None

    @property
    def is_access_token(self) -> bool:
        return self.token_type is TokenType.ACCESS_TOKEN


__all__ = ["TokenRecord"]
