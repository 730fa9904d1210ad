# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for the diagnostics side channel."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DiagnosticsSinkProtocol(Protocol):
    """
    Receives protocol anomalies observed during classification.

    Reporting never changes the classification outcome. Events are short
    snake_case identifiers (see observability.constants) so sinks can count
    them without parsing messages.
    """

    def error(self, event: str, message: str, **context: Any) -> None:
        """Report an anomaly that causes a message to be dropped or rejected."""
        ...

    def warning(self, event: str, message: str, **context: Any) -> None:
        """Report a suspicious but tolerated condition."""
        ...
