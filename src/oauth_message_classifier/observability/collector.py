# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Metrics collector for classification outcomes.

This module provides the ClassificationMetricsCollector class that keeps
dict-based counters for JSON export and mirrors them to prometheus_client
counters for scraping.

Usage:
    >>> from oauth_message_classifier.observability.collector import get_metrics_collector
    >>> collector = get_metrics_collector()
    >>> collector.inc_counter('oauth_mc_classifications_total',
    ...                       labels={'direction': 'request', 'shape': 'request_token_request'})
    >>> metrics = collector.get_metrics()

Thread Safety:
    All operations are thread-safe. Uses RLock for reentrant locking.
"""

from __future__ import annotations

import logging
import threading
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, ClassVar

from prometheus_client import REGISTRY, CollectorRegistry, Counter, start_http_server

from .constants import (
    ANOMALIES_TOTAL,
    CLASSIFICATIONS_TOTAL,
    NO_MATCH_TOTAL,
    PROTOCOL_VIOLATIONS_TOTAL,
    TOKEN_LOOKUPS_TOTAL,
)

logger = logging.getLogger(__name__)


@dataclass
class MetricDefinition:
    """
    Definition for a counter that can be registered with Prometheus.
    """

    name: str
    description: str
    label_names: tuple[str, ...] = ()


METRIC_DEFINITIONS: dict[str, MetricDefinition] = {
    CLASSIFICATIONS_TOTAL: MetricDefinition(
        CLASSIFICATIONS_TOTAL,
        "Total payloads resolved to a message shape",
        ("direction", "shape"),
    ),
    NO_MATCH_TOTAL: MetricDefinition(
        NO_MATCH_TOTAL,
        "Total response payloads that matched no shape",
        ("reason",),
    ),
    PROTOCOL_VIOLATIONS_TOTAL: MetricDefinition(
        PROTOCOL_VIOLATIONS_TOTAL,
        "Total direct responses paired with an unexpected request",
        ("request_shape",),
    ),
    TOKEN_LOOKUPS_TOTAL: MetricDefinition(
        TOKEN_LOOKUPS_TOTAL,
        "Total token manager lookups",
        ("token_type",),
    ),
    ANOMALIES_TOTAL: MetricDefinition(
        ANOMALIES_TOTAL,
        "Total anomalies reported to diagnostics",
        ("event",),
    ),
}


class ClassificationMetricsCollector:
    """
    Counter collector with a Prometheus mirror.

    Cardinality Protection:
        At most MAX_LABEL_COMBINATIONS unique label combinations are tracked
        per metric. The labels used by this library are all bounded enums,
        so the limit only matters for caller-defined metrics.

    Example:
        >>> collector = ClassificationMetricsCollector(registry=CollectorRegistry())
        >>> collector.inc_counter('oauth_mc_no_match_total', labels={'reason': 'missing_token'})
        >>> collector.get_metrics()["counters"]
        {'oauth_mc_no_match_total': {'reason=missing_token': 1}}
    """

    MAX_LABEL_COMBINATIONS: ClassVar[int] = 1000

    def __init__(
        self,
        enable_prometheus: bool = True,
        registry: CollectorRegistry | None = None,
    ) -> None:
        """
        Initialize the metrics collector.

        Args:
            enable_prometheus: Whether to mirror counters to Prometheus
            registry: Optional CollectorRegistry, defaults to the global one
        """
        self._enable_prometheus = enable_prometheus
        self._registry = registry if registry is not None else REGISTRY

        self._counters: dict[str, dict[str, int]] = defaultdict(
            lambda: defaultdict(int)
        )
        self._lock = threading.RLock()
        self._prom_counters: dict[str, Any] = {}
        self._label_combinations: dict[str, set[str]] = defaultdict(set)
        self._server_running = False

        logger.debug(
            f"ClassificationMetricsCollector initialized "
            f"(prometheus={'enabled' if self._enable_prometheus else 'disabled'})"
        )

    def _labels_to_key(self, labels: dict[str, str] | None) -> str:
        """Convert labels dict to a stable string key."""
        if not labels:
            return ""
        return ",".join(f"{k}={v}" for k, v in sorted(labels.items()))

    def _check_cardinality(self, name: str, label_key: str) -> bool:
        if label_key in self._label_combinations[name]:
            return True
        if len(self._label_combinations[name]) >= self.MAX_LABEL_COMBINATIONS:
            logger.warning(
                f"Cardinality limit ({self.MAX_LABEL_COMBINATIONS}) reached "
                f"for metric {name}. Dropping label combination: {label_key}"
            )
            return False
        self._label_combinations[name].add(label_key)
        return True

    def _get_or_create_prom_counter(
        self, name: str, labels: dict[str, str] | None
    ) -> Any | None:
        """Get or create a Prometheus counter."""
        if not self._enable_prometheus:
            return None

        if name not in self._prom_counters:
            defn = METRIC_DEFINITIONS.get(name)
            if defn is not None:
                description = defn.description
                label_names = list(defn.label_names)
            else:
                description = f"Dynamic counter: {name}"
                label_names = sorted(labels) if labels else []
            try:
                self._prom_counters[name] = Counter(
                    name,
                    description,
                    label_names,
                    registry=self._registry,
                )
            except ValueError as e:
                # Duplicate registration on a shared registry
                logger.warning(f"Failed to create Prometheus counter {name}: {e}")
                self._prom_counters[name] = None

        return self._prom_counters.get(name)

    def inc_counter(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None:
        """
        Increment a counter metric.

        Args:
            name: Metric name (should follow Prometheus naming convention)
            value: Value to increment by (must be non-negative)
            labels: Optional labels dict

        Raises:
            ValueError: If value is negative
        """
        if value < 0:
            raise ValueError("Counter increment must be non-negative")

        label_key = self._labels_to_key(labels)

        with self._lock:
            if not self._check_cardinality(name, label_key):
                return
            self._counters[name][label_key] += value
            prom_counter = self._get_or_create_prom_counter(name, labels)

        if prom_counter is not None:
            try:
                if labels:
                    prom_counter.labels(**labels).inc(value)
                else:
                    prom_counter.inc(value)
            except ValueError as e:
                logger.debug(f"Prometheus counter update failed for {name}: {e}")

    def get_counter(self, name: str, labels: dict[str, str] | None = None) -> int:
        """Return the current value of one counter series."""
        label_key = self._labels_to_key(labels)
        with self._lock:
            return self._counters.get(name, {}).get(label_key, 0)

    def get_metrics(self) -> dict[str, Any]:
        """
        Get a snapshot of all metrics.

        Returns:
            {"counters": {"metric_name": {"label_key": value, ...}, ...}}
        """
        with self._lock:
            counters = {
                name: dict(label_values)
                for name, label_values in self._counters.items()
            }
        return {"counters": counters}

    def reset(self) -> None:
        """Reset all dict-based counters to zero."""
        with self._lock:
            self._counters.clear()
            self._label_combinations.clear()

        logger.debug("Metrics collector reset")

    def start_http_server(self, host: str = "127.0.0.1", port: int = 9090) -> bool:
        """
        Start the Prometheus HTTP server for metrics scraping.

        Returns:
            True if the server is running, False if it failed to start
        """
        if self._server_running:
            logger.warning("Prometheus server already running")
            return True

        try:
            start_http_server(port, addr=host, registry=self._registry)
        except OSError as e:
            logger.error(f"Failed to start Prometheus server: {e}")
            return False

        self._server_running = True
        logger.info(f"Prometheus metrics server started on {host}:{port}")
        return True

    @property
    def prometheus_enabled(self) -> bool:
        return self._enable_prometheus

    @property
    def server_running(self) -> bool:
        return self._server_running


# =============================================================================
# Singleton Pattern
# =============================================================================

_global_collector: ClassificationMetricsCollector | None = None
_collector_lock = threading.Lock()


def get_metrics_collector(
    enable_prometheus: bool = True,
) -> ClassificationMetricsCollector:
    """
    Get or create the global metrics collector singleton.

    Args:
        enable_prometheus: Whether to enable Prometheus metrics
            (only used on first call)
    """
    global _global_collector

    if _global_collector is None:
        with _collector_lock:
            if _global_collector is None:
                _global_collector = ClassificationMetricsCollector(
                    enable_prometheus=enable_prometheus
                )

    return _global_collector


def reset_metrics_collector() -> None:
    """
    Reset the global metrics collector singleton (mainly for testing).

    Prometheus counters already registered on the global registry stay
    registered, so a fresh singleton only keeps dict-based counts.
    """
    global _global_collector
    with _collector_lock:
        if _global_collector:
            _global_collector.reset()
        _global_collector = None


__all__ = [
    "METRIC_DEFINITIONS",
    "ClassificationMetricsCollector",
    "MetricDefinition",
    "get_metrics_collector",
    "reset_metrics_collector",
]
