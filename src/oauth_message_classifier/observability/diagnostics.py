# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Default diagnostics sink backed by the standard logging module.

Anomalies are written to the `oauth_message_classifier.observability.diagnostics` logger
with the event identifier and context attached as `extra` attributes, and
counted under ANOMALIES_TOTAL when a metrics collector is supplied.
"""

from __future__ import annotations

import logging
from typing import Any

from .collector import ClassificationMetricsCollector
from .constants import ANOMALIES_TOTAL

logger = logging.getLogger(__name__)


class LoggingDiagnosticsSink:
    """
    Diagnostics sink that logs anomalies and optionally counts them.

    Example:
        >>> sink = LoggingDiagnosticsSink()
        >>> sink.error("missing_token_secret", "Direct response lacked a secret")
    """

    def __init__(
        self,
        log: logging.Logger | None = None,
        metrics: ClassificationMetricsCollector | None = None,
    ) -> None:
        """
        Args:
            log: Logger to write to, defaults to this module's logger
            metrics: Optional collector that counts reported events
        """
        self._logger = log or logger
        self._metrics = metrics

    def _emit(self, level: int, event: str, message: str, context: dict[str, Any]) -> None:
        if context:
            details = ", ".join(f"{k}={v}" for k, v in sorted(context.items()))
            text = f"{message} [{event}: {details}]"
        else:
            text = f"{message} [{event}]"
        self._logger.log(
            level,
            text,
            extra={"oauth_event": event, "oauth_context": context},
        )
        if self._metrics is not None:
            self._metrics.inc_counter(ANOMALIES_TOTAL, labels={"event": event})

    def error(self, event: str, message: str, **context: Any) -> None:
        self._emit(logging.ERROR, event, message, context)

    def warning(self, event: str, message: str, **context: Any) -> None:
        self._emit(logging.WARNING, event, message, context)


__all__ = ["LoggingDiagnosticsSink"]
