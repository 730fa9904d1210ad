# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Classifier Configuration for the OAuth Message Classifier

This module provides the configuration class for MessageTypeClassifier,
covering wire field names and observability switches.
"""

from dataclasses import dataclass

from .exceptions import ConfigurationError
from .types.fields import CONSUMER_KEY, TOKEN, TOKEN_SECRET


@dataclass(frozen=True)
class ClassifierConfig:
    """
    Configuration for the message type classifier.

    The defaults match the OAuth 1.0 wire names and should only be changed
    for Service Providers that rename the parameters.
    """

    # === Wire Field Names ===

    consumer_key_field: str = CONSUMER_KEY
    """Parameter that identifies the consumer."""

    token_field: str = TOKEN
    """Parameter carrying a request or access token."""

    token_secret_field: str = TOKEN_SECRET
    """Parameter carrying the token secret in direct responses."""

    # === Metrics and Logging ===

    metrics_enabled: bool = True
    """Record classification outcomes in the metrics collector."""

    log_oracle_lookups: bool = False
    """Log every token manager answer at DEBUG level."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        names = (self.consumer_key_field, self.token_field, self.token_secret_field)
        if not all(isinstance(name, str) and name for name in names):
            raise ConfigurationError("wire field names must be non-empty strings")
        if len(set(names)) != len(names):
            raise ConfigurationError("wire field names must be distinct")


__all__ = ["ClassifierConfig"]
