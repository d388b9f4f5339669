"""
Factory functions turning CollectorConfig into Prometheus collectors.

Each builder registers the new collector with ``registry`` (the
prometheus_client global registry unless given; pass None to build an
unregistered collector). Builders raise whatever the client library raises,
while from_kind() logs failures and returns None.

Summaries come from prometheus_summary, which estimates the configured
quantiles and exports them as ``quantile="..."`` samples.
"""

import logging
from typing import Any, Dict, Optional

import prometheus_summary
from prometheus_client import REGISTRY, CollectorRegistry, Counter, Gauge, Histogram
from prometheus_client.metrics import MetricWrapperBase

from .config import CollectorConfig
from .kinds import CollectorKind

logger = logging.getLogger("loadtest.factory")


def _common_kwargs(cfg: CollectorConfig, registry: Optional[CollectorRegistry]) -> Dict[str, Any]:
    """Name, help, labels and registry shared by every builder."""
    kwargs: Dict[str, Any] = {
        "name": cfg.metric_name,
        "documentation": cfg.help,
        "registry": registry,
    }
    labels = cfg.labels
    if labels:
        kwargs["labelnames"] = labels
    return kwargs


def new_counter(cfg: CollectorConfig, registry: Optional[CollectorRegistry] = REGISTRY) -> Counter:
    """Build a Counter from a config."""
    return Counter(**_common_kwargs(cfg, registry))


def new_gauge(cfg: CollectorConfig, registry: Optional[CollectorRegistry] = REGISTRY) -> Gauge:
    """Build a Gauge from a config."""
    return Gauge(**_common_kwargs(cfg, registry))


def new_histogram(cfg: CollectorConfig, registry: Optional[CollectorRegistry] = REGISTRY) -> Histogram:
    """
    Build a Histogram from a config.

    Bucket order is not checked here; prometheus_client rejects
    unsorted boundaries with ValueError.
    """
    return Histogram(buckets=cfg.get_buckets(), **_common_kwargs(cfg, registry))


def new_summary(
    cfg: CollectorConfig,
    registry: Optional[CollectorRegistry] = REGISTRY,
) -> prometheus_summary.Summary:
    """Build a Summary exporting one quantile per (quantile, error) definition."""
    invariants = [definition.as_tuple() for definition in cfg.get_quantiles()]
    return prometheus_summary.Summary(invariants=invariants, **_common_kwargs(cfg, registry))


_BUILDERS = {
    CollectorKind.COUNTER: new_counter,
    CollectorKind.GAUGE: new_gauge,
    CollectorKind.HISTOGRAM: new_histogram,
    CollectorKind.SUMMARY: new_summary,
}


def from_kind(
    cfg: CollectorConfig,
    registry: Optional[CollectorRegistry] = REGISTRY,
) -> Optional[MetricWrapperBase]:
    """
    Build the collector matching ``cfg.kind``.

    Args:
        cfg: Collector configuration
        registry: Registry to register with, or None

    Returns:
        The new collector, or None if it could not be built (logged)
    """
    try:
        builder = _BUILDERS[cfg.kind]
        collector = builder(cfg, registry)
    except Exception as e:
        logger.error(
            f"Didn't create collector from definition {cfg} because of an error: {e}",
            exc_info=True,
        )
        return None

    logger.debug(f"Created {cfg.kind.value.lower()} collector {cfg.metric_name}")
    return collector
