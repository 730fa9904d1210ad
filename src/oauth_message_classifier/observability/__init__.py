# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Observability for the OAuth Message Classifier.

Classes:
    ClassificationMetricsCollector: Counter collector with a Prometheus mirror.
    LoggingDiagnosticsSink: Default diagnostics sink writing to logging.

Functions:
    get_metrics_collector: Get the global metrics collector singleton.
    reset_metrics_collector: Reset the global metrics collector singleton.

Constants:
    All metric name and diagnostic event constants from the constants module.
"""

from .collector import (
    METRIC_DEFINITIONS,
    ClassificationMetricsCollector,
    MetricDefinition,
    get_metrics_collector,
    reset_metrics_collector,
)
from .constants import (
    ANOMALIES_TOTAL,
    CLASSIFICATIONS_TOTAL,
    EVENT_MISSING_TOKEN_SECRET,
    EVENT_UNEXPECTED_RESPONSE,
    METRIC_PREFIX,
    NO_MATCH_TOTAL,
    PROTOCOL_VIOLATIONS_TOTAL,
    TOKEN_LOOKUPS_TOTAL,
)
from .diagnostics import LoggingDiagnosticsSink

__all__ = [
    "ANOMALIES_TOTAL",
    "CLASSIFICATIONS_TOTAL",
    "EVENT_MISSING_TOKEN_SECRET",
    "EVENT_UNEXPECTED_RESPONSE",
    "METRIC_DEFINITIONS",
    "METRIC_PREFIX",
    "NO_MATCH_TOTAL",
    "PROTOCOL_VIOLATIONS_TOTAL",
    "TOKEN_LOOKUPS_TOTAL",
    # Collector
    "ClassificationMetricsCollector",
    # Diagnostics
    "LoggingDiagnosticsSink",
    "MetricDefinition",
    "get_metrics_collector",
    "reset_metrics_collector",
]
