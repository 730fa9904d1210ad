# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
# oauth_message_classifier/types/fields.py
"""
OAuth 1.0 protocol parameter names.

Only the first three constants take part in classification. The rest are
listed so callers can refer to them by name; the classifier ignores them.

Constants:
    CONSUMER_KEY: Identifies the consumer making the request
    TOKEN: Request token or access token
    TOKEN_SECRET: Secret paired with a token in direct responses
    CLASSIFICATION_FIELDS: Frozenset of the three names above

Example:
    >>> from oauth_message_classifier.types.fields import TOKEN
    >>> fields = {TOKEN: "t1"}
"""

from collections.abc import Mapping

# Flat name/value payload extracted from a query string, form body or header
FieldMap = Mapping[str, str]

CONSUMER_KEY = "oauth_consumer_key"
TOKEN = "oauth_token"
TOKEN_SECRET = "oauth_token_secret"

SIGNATURE = "oauth_signature"
SIGNATURE_METHOD = "oauth_signature_method"
TIMESTAMP = "oauth_timestamp"
NONCE = "oauth_nonce"
VERSION = "oauth_version"
CALLBACK = "oauth_callback"
VERIFIER = "oauth_verifier"

CLASSIFICATION_FIELDS = frozenset({CONSUMER_KEY, TOKEN, TOKEN_SECRET})
