# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Protocol definitions for classifier collaborators.

This module provides Protocol classes that define the interfaces for
pluggable components of the OAuth message classifier.

Available protocols:
- TokenManagerProtocol: Reports whether a token is a request or access token
- DiagnosticsSinkProtocol: Receives protocol anomalies
- MessageTypeProviderProtocol: Identifies message shapes from raw payloads
"""

from .diagnostics import DiagnosticsSinkProtocol
from .provider import MessageTypeProviderProtocol
from .token_manager import TokenManagerProtocol

__all__ = [
    "DiagnosticsSinkProtocol",
    "MessageTypeProviderProtocol",
    "TokenManagerProtocol",
]
