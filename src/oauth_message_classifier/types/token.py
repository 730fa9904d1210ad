# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Token classification reported by a token manager."""

from enum import Enum


class TokenType(Enum):
    """
    Lifecycle stage of an issued token.

    - REQUEST_TOKEN: Temporary token issued before the user authorizes access.
    - ACCESS_TOKEN: Longer-lived token issued after authorization.

    Unknown tokens have no member; token managers raise TokenNotFoundError.
    """

    REQUEST_TOKEN = "request_token"
    ACCESS_TOKEN = "access_token"


__all__ = ["TokenType"]
