# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Metric and diagnostic event names following Prometheus naming conventions.

All metric names use the `oauth_mc_` prefix.

Naming Conventions:
    - Counter metrics end with `_total`

Label Best Practices:
    Use only bounded labels:
    - `direction` - request or response
    - `shape` - MessageShape value
    - `token_type` - TokenType value
    - `event` - Diagnostic event identifier

    NEVER use token or consumer key values as labels.

Usage:
    >>> from oauth_message_classifier.observability.constants import (
    ...     CLASSIFICATIONS_TOTAL
    ... )
    >>> print(CLASSIFICATIONS_TOTAL)
    'oauth_mc_classifications_total'
"""


# =============================================================================
# Global Prefix
# =============================================================================

METRIC_PREFIX = "oauth_mc"
"""Prefix for all Prometheus metrics in this library."""


# =============================================================================
# Classification Metrics (classifier.py)
# =============================================================================

CLASSIFICATIONS_TOTAL = f"{METRIC_PREFIX}_classifications_total"
"""Total payloads resolved to a message shape."""

NO_MATCH_TOTAL = f"{METRIC_PREFIX}_no_match_total"
"""Total response payloads that matched no shape."""

PROTOCOL_VIOLATIONS_TOTAL = f"{METRIC_PREFIX}_protocol_violations_total"
"""Total direct responses paired with a request that never gets one."""

TOKEN_LOOKUPS_TOTAL = f"{METRIC_PREFIX}_token_lookups_total"
"""Total token manager lookups made to disambiguate requests."""


# =============================================================================
# Diagnostics (observability/diagnostics.py)
# =============================================================================

ANOMALIES_TOTAL = f"{METRIC_PREFIX}_anomalies_total"
"""Total anomalies reported to the diagnostics sink."""


# =============================================================================
# Diagnostic Event Identifiers
# =============================================================================

EVENT_MISSING_TOKEN_SECRET = "missing_token_secret"
"""A direct response lacked the token secret field."""

EVENT_UNEXPECTED_RESPONSE = "unexpected_response"
"""A direct response arrived for a request that never receives one."""


__all__ = [
    "ANOMALIES_TOTAL",
    "CLASSIFICATIONS_TOTAL",
    "EVENT_MISSING_TOKEN_SECRET",
    "EVENT_UNEXPECTED_RESPONSE",
    "METRIC_PREFIX",
    "NO_MATCH_TOTAL",
    "PROTOCOL_VIOLATIONS_TOTAL",
    "TOKEN_LOOKUPS_TOTAL",
]
