# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Type definitions and constants."""

from .fields import (
    CLASSIFICATION_FIELDS,
    CONSUMER_KEY,
    TOKEN,
    TOKEN_SECRET,
    FieldMap,
)
from .shape import (
    DIRECT_RESPONSE_PAIRS,
    REQUEST_SHAPES,
    RESPONSE_SHAPES,
    MessageDirection,
    MessageShape,
    MessageTransport,
)
from .token import TokenType

__all__ = [
    "CLASSIFICATION_FIELDS",
    # Wire field names
    "CONSUMER_KEY",
    "DIRECT_RESPONSE_PAIRS",
    "REQUEST_SHAPES",
    "RESPONSE_SHAPES",
    "TOKEN",
    "TOKEN_SECRET",
    "FieldMap",
    "MessageDirection",
    # Message shapes
    "MessageShape",
    "MessageTransport",
    # Token types
    "TokenType",
]
